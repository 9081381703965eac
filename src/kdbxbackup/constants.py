"""Fixed names and values shared across kdbxbackup."""

from __future__ import annotations

from pathlib import Path

APP_NAME: str = "keepassx_backup"

# Token cache: ~/.credentials/keepassx_backup/drive-python-keepassx-backup.json
CREDENTIALS_DIR_NAME: str = ".credentials"
TOKEN_FILE_NAME: str = "drive-python-keepassx-backup.json"
TOKEN_DIR_MODE: int = 0o700
TOKEN_FILE_MODE: int = 0o600

# File-level access only: the app sees just the files it created.
DRIVE_FILE_SCOPE: str = "https://www.googleapis.com/auth/drive.file"
DEFAULT_SCOPES: tuple[str, ...] = (DRIVE_FILE_SCOPE,)

BACKUP_FOLDER_NAME: str = "automatic_backups"
DRIVE_ROOT_ID: str = "root"

# md5 of zero bytes
EMPTY_MD5: str = "d41d8cd98f00b204e9800998ecf8427e"
HASH_CHUNK_SIZE: int = 64 * 1024

UPLOAD_MIME_TYPE: str = "application/octet-stream"


def default_token_file(home: Path | None = None) -> Path:
    """Return the per-user token cache path."""
    base = home if home is not None else Path.home()
    return base / CREDENTIALS_DIR_NAME / APP_NAME / TOKEN_FILE_NAME
