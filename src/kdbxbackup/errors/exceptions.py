"""Error types raised by kdbxbackup and the wrapping of failed Drive calls."""

from __future__ import annotations

import json
from typing import Any, Optional


class KdbxBackupError(Exception):
    """
    Base exception for kdbxbackup.

    Attributes:
        details: Optional structured information (e.g., HTTP status, path).
        cause: Optional underlying exception.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class ConfigError(KdbxBackupError):
    """Bad arguments, unresolvable home directory or unusable client secrets."""


class AuthError(KdbxBackupError):
    """OAuth exchange, refresh or token caching failed, or Drive answered 401."""


class LocalFileError(KdbxBackupError):
    """The local credential database cannot be read."""


class EmptyFileError(LocalFileError):
    """The local credential database has no content."""


class RemoteApiError(KdbxBackupError):
    """A Drive request failed or returned an unusable response."""

    @property
    def status_code(self) -> Optional[int]:
        return self.details.get("status_code")

    @property
    def reason(self) -> Optional[str]:
        return self.details.get("reason")


def remote_error(action: str, exc: BaseException) -> KdbxBackupError:
    """
    Wrap a failed Drive call made while trying to `action`.

    A 401 means the cached token is no longer accepted and becomes an
    AuthError; every other failure, including transport errors that carry no
    HTTP status, becomes a RemoteApiError with status and reason in details.
    """
    status_code, reason, detail = _http_failure(exc)
    details: dict[str, Any] = {
        "action": action,
        "status_code": status_code,
        "reason": reason,
    }
    message = f"Unable to {action}: {detail}"

    if status_code == 401:
        return AuthError(message, details=details, cause=exc)
    return RemoteApiError(message, details=details, cause=exc)


def _http_failure(exc: BaseException) -> tuple[Optional[int], Optional[str], str]:
    resp = getattr(exc, "resp", None)
    status = getattr(resp, "status", None)
    status_code = status if isinstance(status, int) else None
    reason = getattr(resp, "reason", None)
    reason = reason if isinstance(reason, str) else None
    detail = str(exc) or type(exc).__name__

    content = getattr(exc, "content", None)
    if not isinstance(content, (bytes, bytearray)):
        return status_code, reason, detail

    try:
        payload = json.loads(content.decode("utf-8"))
    except (UnicodeDecodeError, ValueError):
        return status_code, reason, detail

    err = payload.get("error") if isinstance(payload, dict) else None
    if not isinstance(err, dict):
        return status_code, reason, detail

    if isinstance(err.get("message"), str) and err["message"]:
        detail = err["message"]
    errors = err.get("errors")
    if isinstance(errors, list) and errors and isinstance(errors[0], dict):
        if isinstance(errors[0].get("reason"), str):
            reason = errors[0]["reason"]
    return status_code, reason, detail
