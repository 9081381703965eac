"""Command-line entry point: kdbx-drive-backup <local-file> <client-secret-json>."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from kdbxbackup.config import BackupConfig
from kdbxbackup.errors import ConfigError, KdbxBackupError
from kdbxbackup.manager import BackupManager

logger = logging.getLogger("kdbxbackup")

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="kdbx-drive-backup",
        description=(
            "Back up a password database file to the automatic_backups folder "
            "of your Google Drive."
        ),
    )
    parser.add_argument("local_file", help="Path of the .kdbx file to back up.")
    parser.add_argument(
        "client_secrets_file",
        help="OAuth client secret JSON downloaded from the Google Cloud console.",
    )
    parser.add_argument(
        "--token-file",
        default=None,
        help=(
            "Override the token cache path "
            "(default: ~/.credentials/keepassx_backup/drive-python-keepassx-backup.json)."
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging output.",
    )
    return parser.parse_args(argv)


def run(config: BackupConfig) -> int:
    """Authenticate, sync, and return the process exit status."""
    logger.info("Beginning of syncing")
    try:
        manager = BackupManager(config.auth_info, folder_name=config.folder_name)
        manager.sync(config.local_path)
    except KdbxBackupError as exc:
        logger.error("%s: %s", type(exc).__name__, _describe(exc))
        return 1

    logger.info("End of syncing")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
    )
    # googleapiclient logs every discovery/request at INFO.
    logging.getLogger("googleapiclient").setLevel(logging.WARNING)

    try:
        config = BackupConfig.from_args(
            args.local_file,
            args.client_secrets_file,
            args.token_file,
        )
    except (RuntimeError, ValueError) as exc:
        err = ConfigError(str(exc), cause=exc)
        logger.error("%s: %s", type(err).__name__, _describe(err))
        return 1

    return run(config)


def _describe(exc: KdbxBackupError) -> str:
    message = str(exc)
    if exc.cause is not None and str(exc.cause) not in message:
        message = f"{message} ({exc.cause})"
    return message
