from __future__ import annotations

FOLDER_MIME: str = "application/vnd.google-apps.folder"
