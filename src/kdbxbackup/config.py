"""Run configuration assembled from command-line arguments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from kdbxbackup.auth import AuthInfo
from kdbxbackup.constants import BACKUP_FOLDER_NAME, default_token_file


@dataclass(slots=True, frozen=True)
class BackupConfig:
    """
    Everything one backup run needs.

    There is no config file and no environment variable; the token path is the
    only value derived from the environment (the user's home directory).
    """

    local_path: str
    client_secrets_file: str
    token_file: str
    folder_name: str = BACKUP_FOLDER_NAME

    def __post_init__(self) -> None:
        for key in ("local_path", "client_secrets_file", "token_file", "folder_name"):
            value = getattr(self, key)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"BackupConfig.{key} must be a non-empty string")

    @classmethod
    def from_args(
        cls,
        local_path: str,
        client_secrets_file: str,
        token_file: Optional[str] = None,
    ) -> "BackupConfig":
        return cls(
            local_path=local_path,
            client_secrets_file=client_secrets_file,
            token_file=token_file or str(default_token_file()),
        )

    @property
    def auth_info(self) -> AuthInfo:
        return AuthInfo(
            client_secrets_file=self.client_secrets_file,
            token_file=self.token_file,
        )
