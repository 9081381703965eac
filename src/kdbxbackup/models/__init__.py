"""Public model exports for kdbxbackup."""

from __future__ import annotations

from .remote_file import RemoteFile
from .results import SyncAction, SyncResult

__all__ = [
    "RemoteFile",
    "SyncAction",
    "SyncResult",
]
