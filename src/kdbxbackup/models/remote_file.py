"""Data model for Drive items."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(slots=True)
class RemoteFile:
    """
    A Drive item as returned by `files.list` / `files.create` / `files.update`.

    Notes:
        - md5_checksum is only reported by Drive for binary content, never for
          folders.
    """

    file_id: str
    name: str
    mime_type: str = ""
    parents: list[str] = field(default_factory=list)
    trashed: bool = False
    md5_checksum: Optional[str] = None
