"""Result model for a single backup run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional


SyncAction = Literal["created", "updated", "unchanged"]


@dataclass(slots=True, frozen=True)
class SyncResult:
    """What one sync did to the backup folder."""

    action: SyncAction
    folder_id: str
    file_id: str
    local_md5: str

    folder_created: bool = False
    remote_md5: Optional[str] = None

    @property
    def changed(self) -> bool:
        return self.action != "unchanged"
