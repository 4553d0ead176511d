# src/query_board/db/ids.py
"""Identifier generation for stored documents."""

import re
import secrets
import time

OBJECT_ID_LENGTH = 24

_OBJECT_ID_RE = re.compile(r"^[0-9a-f]{24}$", re.IGNORECASE)


def new_object_id() -> str:
    """Return a 24-character hex identifier.

    The first four bytes encode the creation time in seconds, the remaining
    eight are random.
    """
    return f"{int(time.time()) & 0xFFFFFFFF:08x}{secrets.token_hex(8)}"


def is_object_id(value: str) -> bool:
    """Return True if ``value`` is 24 hex characters, in either case."""
    return bool(_OBJECT_ID_RE.match(value))
