"""Public error exports for kdbxbackup."""

from __future__ import annotations

from .exceptions import (
    AuthError,
    ConfigError,
    EmptyFileError,
    KdbxBackupError,
    LocalFileError,
    RemoteApiError,
    remote_error,
)

__all__ = [
    "KdbxBackupError",
    "ConfigError",
    "AuthError",
    "LocalFileError",
    "EmptyFileError",
    "RemoteApiError",
    "remote_error",
]
