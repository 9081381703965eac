"""Authentication information for kdbxbackup (installed-app OAuth)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from kdbxbackup.constants import default_token_file


@dataclass(slots=True, frozen=True)
class AuthInfo:
    """
    Authentication information.

    Attributes:
        client_secrets_file: OAuth client secrets JSON downloaded from the
            Google Cloud console ("Desktop app" client).
        token_file: Where the authorized-user token is cached. Defaults to
            ~/.credentials/keepassx_backup/drive-python-keepassx-backup.json.
    """

    client_secrets_file: str
    token_file: str

    def __post_init__(self) -> None:
        for key in ("client_secrets_file", "token_file"):
            value = getattr(self, key)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"AuthInfo.{key} must be a non-empty string")

    @classmethod
    def from_paths(
        cls,
        client_secrets_file: str,
        token_file: Optional[str] = None,
    ) -> "AuthInfo":
        """Build AuthInfo, falling back to the per-user token cache path."""
        if token_file is None:
            token_file = str(default_token_file())
        return cls(client_secrets_file=client_secrets_file, token_file=token_file)
