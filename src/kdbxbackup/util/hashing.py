from __future__ import annotations

import hashlib
from typing import BinaryIO

from kdbxbackup.constants import EMPTY_MD5, HASH_CHUNK_SIZE


def md5_stream(fh: BinaryIO, *, chunk_size: int = HASH_CHUNK_SIZE) -> str:
    """
    Return the lower-case hex md5 of everything left in `fh`.

    The stream is consumed; callers that reuse it must seek back to 0.
    """
    digest = hashlib.md5()
    for chunk in iter(lambda: fh.read(chunk_size), b""):
        digest.update(chunk)
    return digest.hexdigest()


def is_empty_digest(md5_hex: str) -> bool:
    return md5_hex == EMPTY_MD5
