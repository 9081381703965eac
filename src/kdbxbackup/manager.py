"""BackupManager: keeps one local file mirrored in the Drive backup folder."""

from __future__ import annotations

import logging
import os
from typing import Any, Optional

from kdbxbackup.auth import AuthInfo, OAuthClient
from kdbxbackup.constants import BACKUP_FOLDER_NAME, DRIVE_ROOT_ID, EMPTY_MD5
from kdbxbackup.controller import GoogleDriveController
from kdbxbackup.errors import ConfigError, EmptyFileError, LocalFileError
from kdbxbackup.models import RemoteFile, SyncResult
from kdbxbackup.util.hashing import is_empty_digest, md5_stream
from kdbxbackup.util.query import build_child_query, build_folder_query

logger = logging.getLogger(__name__)


class BackupManager:
    """
    One-shot backup of a local file into a well-known Drive folder.

    Flow:
        hash local file -> resolve backup folder -> resolve remote file
        -> create / update / leave unchanged
    """

    def __init__(
        self,
        auth_info: AuthInfo,
        *,
        folder_name: str = BACKUP_FOLDER_NAME,
    ) -> None:
        self._controller = GoogleDriveController(OAuthClient(auth_info))
        self._folder_name = folder_name

    @classmethod
    def from_controller(
        cls,
        controller: GoogleDriveController,
        *,
        folder_name: str = BACKUP_FOLDER_NAME,
    ) -> "BackupManager":
        """Create manager with an injected controller (useful for tests)."""
        obj = cls.__new__(cls)
        obj._controller = controller
        obj._folder_name = folder_name
        return obj

    @property
    def folder_name(self) -> str:
        return self._folder_name

    def resolve_folder(self) -> tuple[str, bool]:
        """
        Return (folder_id, created) for the backup folder under the Drive root.

        When several folders share the name, the first one Drive lists is used.
        """
        logger.info("Checking for %s folder existence", self._folder_name)
        matches = self._controller.find(build_folder_query(self._folder_name, DRIVE_ROOT_ID))
        if matches:
            _warn_if_ambiguous(matches, self._folder_name)
            return matches[0].file_id, False

        logger.info("Creating %s folder", self._folder_name)
        folder = self._controller.create_folder(self._folder_name, DRIVE_ROOT_ID)
        return folder.file_id, True

    def find_remote_file(self, name: str, folder_id: str) -> Optional[RemoteFile]:
        """Return the backed-up copy of `name` in `folder_id`, if any."""
        logger.info("Checking for %s existence on Drive", name)
        matches = self._controller.find(build_child_query(name, folder_id))
        if not matches:
            return None
        _warn_if_ambiguous(matches, name)
        return matches[0]

    def sync(self, local_path: str) -> SyncResult:
        """
        Mirror `local_path` into the backup folder.

        Raises:
            ConfigError: if local_path is empty.
            LocalFileError: if the local file cannot be read.
            EmptyFileError: if the local file has no content (nothing is written
                to Drive in that case).
            KdbxBackupError: any Drive failure, unretried.
        """
        if not local_path or not isinstance(local_path, str):
            raise ConfigError("local_path must be a non-empty string")

        name = os.path.basename(local_path)

        try:
            fh = open(local_path, "rb")
        except OSError as exc:
            raise LocalFileError(
                f"Unable to open {local_path}: {exc}",
                details={"local_path": local_path},
                cause=exc,
            ) from exc

        with fh:
            local_md5 = _hash_local_file(fh, local_path)
            fh.seek(0)

            folder_id, folder_created = self.resolve_folder()
            remote = self.find_remote_file(name, folder_id)

            if remote is None:
                logger.info("Creating %s", name)
                created = self._controller.create_file(name, folder_id, fh)
                logger.info("Successfully created %s, id: %s", name, created.file_id)
                return SyncResult(
                    action="created",
                    folder_id=folder_id,
                    file_id=created.file_id,
                    local_md5=local_md5,
                    folder_created=folder_created,
                )

            previous_md5 = remote.md5_checksum
            if previous_md5 != local_md5:
                logger.info("Updating %s", name)
                logger.debug("remote md5 %s != local md5 %s", previous_md5, local_md5)
                updated = self._controller.update_file(remote.file_id, name, fh)
                logger.info("Successfully updated %s, id: %s", name, updated.file_id)
                return SyncResult(
                    action="updated",
                    folder_id=folder_id,
                    file_id=updated.file_id,
                    local_md5=local_md5,
                    folder_created=folder_created,
                    remote_md5=previous_md5,
                )

            logger.info("The passwords file has not been changed since last sync")
            return SyncResult(
                action="unchanged",
                folder_id=folder_id,
                file_id=remote.file_id,
                local_md5=local_md5,
                folder_created=folder_created,
                remote_md5=previous_md5,
            )


def sync(client: Any, local_path: str, *, folder_name: str = BACKUP_FOLDER_NAME) -> SyncResult:
    """
    Back up `local_path` using an authorized Drive service or a controller.
    """
    if isinstance(client, GoogleDriveController):
        controller = client
    else:
        controller = GoogleDriveController.from_service(client)
    return BackupManager.from_controller(controller, folder_name=folder_name).sync(local_path)


def _hash_local_file(fh, local_path: str) -> str:
    try:
        digest = md5_stream(fh)
    except OSError as exc:
        raise LocalFileError(
            f"Unable to calculate md5 hash of {local_path}: {exc}",
            details={"local_path": local_path},
            cause=exc,
        ) from exc

    if is_empty_digest(digest):
        raise EmptyFileError(
            f"File {local_path} is empty",
            details={"local_path": local_path, "md5": EMPTY_MD5},
        )
    return digest


def _warn_if_ambiguous(matches: list[RemoteFile], name: str) -> None:
    if len(matches) > 1:
        logger.warning(
            "%d items named %r found; using the first (id: %s)",
            len(matches),
            name,
            matches[0].file_id,
        )
