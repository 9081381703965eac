"""kdbxbackup public API."""

from __future__ import annotations

from kdbxbackup.auth import AuthInfo, OAuthClient, authenticate
from kdbxbackup.config import BackupConfig
from kdbxbackup.errors import (
    AuthError,
    ConfigError,
    EmptyFileError,
    KdbxBackupError,
    LocalFileError,
    RemoteApiError,
)
from kdbxbackup.manager import BackupManager, sync
from kdbxbackup.models import RemoteFile, SyncResult

__all__ = [
    # High-level
    "BackupManager",
    "BackupConfig",
    "authenticate",
    "sync",
    # Auth
    "AuthInfo",
    "OAuthClient",
    # Models
    "RemoteFile",
    "SyncResult",
    # Errors
    "KdbxBackupError",
    "ConfigError",
    "AuthError",
    "LocalFileError",
    "EmptyFileError",
    "RemoteApiError",
]
