from .hashing import is_empty_digest, md5_stream
from .mime import FOLDER_MIME
from .query import build_child_query, build_folder_query, escape_query_value

__all__ = [
    "md5_stream",
    "is_empty_digest",
    "FOLDER_MIME",
    "escape_query_value",
    "build_folder_query",
    "build_child_query",
]
