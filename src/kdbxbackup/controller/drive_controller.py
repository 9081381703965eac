"""Google Drive API controller (internal use only)."""

from __future__ import annotations

import logging
from typing import Any, BinaryIO, Callable, Optional, TypeVar

from kdbxbackup.auth import OAuthClient
from kdbxbackup.constants import DRIVE_ROOT_ID, UPLOAD_MIME_TYPE
from kdbxbackup.errors import AuthError, ConfigError, RemoteApiError, remote_error
from kdbxbackup.models import RemoteFile
from kdbxbackup.util.mime import FOLDER_MIME

from .fields import FILE_FIELDS, LIST_FIELDS

T = TypeVar("T")

logger = logging.getLogger(__name__)


class GoogleDriveController:
    """
    Drive API controller (internal only).

    Notes:
        - The Drive `service` object is NOT exposed.
        - Every request is executed once; a failure is wrapped with the action
          it was part of and raised, never retried.
    """

    def __init__(self, oauth_client: OAuthClient) -> None:
        self._service = oauth_client.build_drive_service()

    @classmethod
    def from_service(cls, service: Any) -> "GoogleDriveController":
        """Create controller from a pre-built Drive service (useful for tests)."""
        obj = cls.__new__(cls)
        obj._service = service
        return obj

    # ----------------------------
    # Public API
    # ----------------------------
    def find(self, query: str) -> list[RemoteFile]:
        """Return every item matching a Drive `q` expression (all pages)."""
        all_files: list[RemoteFile] = []
        page_token: Optional[str] = None

        while True:
            req = self._service.files().list(
                q=query,
                fields=LIST_FIELDS,
                spaces="drive",
                pageToken=page_token,
            )
            data = self._execute(req.execute, "retrieve files")
            for f in data.get("files", []):
                all_files.append(_file_dict_to_remote_file(f))

            page_token = data.get("nextPageToken")
            if not page_token:
                break

        logger.debug("Query %r matched %d item(s)", query, len(all_files))
        return all_files

    def create_folder(self, name: str, parent_id: str = DRIVE_ROOT_ID) -> RemoteFile:
        body = {"name": name, "mimeType": FOLDER_MIME, "parents": [parent_id]}
        req = self._service.files().create(body=body, fields=FILE_FIELDS)
        data = self._execute(req.execute, f"create {name} folder")
        return _file_dict_to_remote_file(data)

    def create_file(self, name: str, parent_id: str, stream: BinaryIO) -> RemoteFile:
        """Create `name` under `parent_id` with the bytes of `stream`."""
        if not name or not isinstance(name, str):
            raise ConfigError("name must be a non-empty string")

        body = {"name": name, "parents": [parent_id]}
        req = self._service.files().create(
            body=body,
            media_body=_media_from_stream(stream),
            fields=FILE_FIELDS,
        )
        data = self._execute(req.execute, f"create {name}")
        return _file_dict_to_remote_file(data)

    def update_file(self, file_id: str, name: str, stream: BinaryIO) -> RemoteFile:
        """Replace the content of `file_id`; metadata keeps `name`."""
        body = {"name": name}
        req = self._service.files().update(
            fileId=file_id,
            body=body,
            media_body=_media_from_stream(stream),
            fields=FILE_FIELDS,
        )
        data = self._execute(req.execute, f"update {name}")
        return _file_dict_to_remote_file(data)

    # ----------------------------
    # Internals
    # ----------------------------
    def _execute(self, func: Callable[[], T], action: str) -> T:
        try:
            return func()
        except Exception as exc:
            raise remote_error(action, exc) from exc


def _media_from_stream(stream: BinaryIO):
    try:
        from googleapiclient.http import MediaIoBaseUpload
    except Exception as exc:  # pragma: no cover
        raise AuthError(
            "google-api-python-client is not available",
            cause=exc,
        ) from exc

    stream.seek(0)
    return MediaIoBaseUpload(stream, mimetype=UPLOAD_MIME_TYPE, resumable=True)


def _file_dict_to_remote_file(data: dict[str, Any]) -> RemoteFile:
    file_id = data.get("id")
    if not isinstance(file_id, str) or not file_id:
        raise RemoteApiError("Drive did not return a file id", details={"response": data})

    name = data.get("name", "")
    mime_type = data.get("mimeType", "")
    parents = data.get("parents", []) or []
    md5 = data.get("md5Checksum")

    return RemoteFile(
        file_id=file_id,
        name=name if isinstance(name, str) else "",
        mime_type=mime_type if isinstance(mime_type, str) else "",
        parents=list(parents) if isinstance(parents, list) else [],
        trashed=bool(data.get("trashed", False)),
        md5_checksum=md5 if isinstance(md5, str) else None,
    )
