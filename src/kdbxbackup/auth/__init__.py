"""Public auth exports for kdbxbackup."""

from __future__ import annotations

from .auth_info import AuthInfo
from .oauth_client import OAuthClient, authenticate, extract_authorization_code

__all__ = ["AuthInfo", "OAuthClient", "authenticate", "extract_authorization_code"]
