"""OAuth client utilities for kdbxbackup."""

from __future__ import annotations

import logging
import os
from typing import Callable, Optional, Sequence
from urllib.parse import parse_qs, urlparse

from kdbxbackup.constants import (
    DEFAULT_SCOPES,
    TOKEN_DIR_MODE,
    TOKEN_FILE_MODE,
    default_token_file,
)
from kdbxbackup.errors import AuthError, ConfigError

from .auth_info import AuthInfo

logger = logging.getLogger(__name__)

DEFAULT_REDIRECT_URI = "http://localhost"


class OAuthClient:
    """Load, obtain and cache OAuth credentials; build the Drive service."""

    def __init__(
        self,
        auth_info: AuthInfo,
        *,
        scopes: Optional[Sequence[str]] = None,
        prompt: Callable[[str], str] = input,
    ) -> None:
        use_scopes = list(scopes) if scopes is not None else list(DEFAULT_SCOPES)
        if not use_scopes or not all(isinstance(s, str) and s.strip() for s in use_scopes):
            raise ConfigError("scopes must be a non-empty sequence of strings")

        self._auth_info = auth_info
        self._scopes = use_scopes
        self._prompt = prompt

    @property
    def scopes(self) -> list[str]:
        return list(self._scopes)

    def get_credentials(self):
        """
        Return valid OAuth credentials.

        Order:
            1. cached token_file (refreshed and re-saved when expired)
            2. interactive authorization-code flow, result cached

        Returns:
            google.oauth2.credentials.Credentials

        Raises:
            ConfigError: client secrets file unreadable or not an OAuth client.
            AuthError: code exchange or token caching failed.
        """
        creds = self._load_cached_credentials()
        if creds is not None:
            return creds

        creds = self._run_console_flow()
        self._save_credentials(creds)
        return creds

    def build_drive_service(self):
        """
        Build a Drive v3 service resource bound to authorized credentials.

        The underlying authorized HTTP transport attaches the access token to
        each request and refreshes it when the API answers 401.

        Returns:
            googleapiclient.discovery.Resource
        """
        try:
            from googleapiclient.discovery import build
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "google-api-python-client is not available",
                details={"hint": "Install google-api-python-client"},
                cause=exc,
            ) from exc

        creds = self.get_credentials()
        try:
            return build("drive", "v3", credentials=creds, cache_discovery=False)
        except Exception as exc:
            raise AuthError("Failed to build Drive service", cause=exc) from exc

    # ----------------------------
    # Internals
    # ----------------------------
    def _load_cached_credentials(self):
        try:
            from google.auth.transport.requests import Request
            from google.oauth2.credentials import Credentials
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "Google auth libraries are not available",
                details={"hint": "Install google-auth and google-auth-oauthlib"},
                cause=exc,
            ) from exc

        token_file = self._auth_info.token_file
        if not os.path.exists(token_file):
            logger.debug("No cached token at %s", token_file)
            return None

        try:
            creds = Credentials.from_authorized_user_file(token_file, scopes=self._scopes)
        except Exception as exc:
            logger.warning("Ignoring unreadable token cache %s: %s", token_file, exc)
            return None

        if creds.valid:
            return creds

        if creds.refresh_token:
            try:
                creds.refresh(Request())
            except Exception as exc:
                logger.warning("Cached token could not be refreshed: %s", exc)
                return None
            self._save_credentials(creds)
            return creds

        logger.warning("Cached token is expired and has no refresh token")
        return None

    def _run_console_flow(self):
        try:
            from google_auth_oauthlib.flow import InstalledAppFlow
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "google-auth-oauthlib is not available",
                details={"hint": "Install google-auth-oauthlib"},
                cause=exc,
            ) from exc

        client_secrets = self._auth_info.client_secrets_file
        try:
            flow = InstalledAppFlow.from_client_secrets_file(
                client_secrets,
                scopes=self._scopes,
            )
        except (OSError, ValueError) as exc:
            raise ConfigError(
                "Unable to read client secret file",
                details={"client_secrets_file": client_secrets},
                cause=exc,
            ) from exc

        redirect_uris = flow.client_config.get("redirect_uris") or [DEFAULT_REDIRECT_URI]
        flow.redirect_uri = redirect_uris[0]

        auth_url, _ = flow.authorization_url(access_type="offline", prompt="consent")
        print(
            "Go to the following link in your browser then type the "
            f"authorization code: \n{auth_url}\n"
        )

        try:
            code = extract_authorization_code(self._prompt("Authorization code: "))
        except (EOFError, ValueError) as exc:
            raise AuthError("Unable to read authorization code", cause=exc) from exc

        try:
            flow.fetch_token(code=code)
        except Exception as exc:
            raise AuthError(
                "Unable to retrieve token from web",
                details={"client_secrets_file": client_secrets},
                cause=exc,
            ) from exc

        return flow.credentials

    def _save_credentials(self, creds) -> None:
        token_file = self._auth_info.token_file
        print(f"Saving credential file to: {token_file}")

        try:
            token_dir = os.path.dirname(token_file)
            if token_dir and not os.path.isdir(token_dir):
                os.makedirs(token_dir, mode=TOKEN_DIR_MODE, exist_ok=True)
                os.chmod(token_dir, TOKEN_DIR_MODE)
            elif token_dir and _is_default_cache_dir(token_dir):
                os.chmod(token_dir, TOKEN_DIR_MODE)

            fd = os.open(token_file, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, TOKEN_FILE_MODE)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(creds.to_json())
        except OSError as exc:
            raise AuthError(
                "Unable to cache oauth token",
                details={"token_file": token_file},
                cause=exc,
            ) from exc


def _is_default_cache_dir(token_dir: str) -> bool:
    # Existing directories are tightened only for the per-user cache; a
    # --token-file elsewhere keeps its directory mode.
    try:
        default_dir = default_token_file().parent
    except RuntimeError:
        return False
    return os.path.abspath(token_dir) == os.path.abspath(default_dir)


def extract_authorization_code(raw: str) -> str:
    """
    Return the one-time code from operator input.

    Accepts the bare code or the whole URL the browser was redirected to.
    """
    value = (raw or "").strip()
    if not value:
        raise ValueError("authorization code is empty")

    if "code=" in value:
        params = parse_qs(urlparse(value).query)
        codes = params.get("code")
        if not codes or not codes[0]:
            raise ValueError("redirect URL carries no code parameter")
        return codes[0]

    return value


def authenticate(
    client_secrets_file: str,
    token_file: Optional[str] = None,
    *,
    scopes: Optional[Sequence[str]] = None,
):
    """Return an authorized Drive v3 service for the given client secrets."""
    try:
        info = AuthInfo.from_paths(client_secrets_file, token_file)
    except (RuntimeError, ValueError) as exc:
        raise ConfigError(str(exc), cause=exc) from exc
    return OAuthClient(info, scopes=scopes).build_drive_service()
