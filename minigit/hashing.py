"""SHA-1 digests in the hex form used for object names."""

from __future__ import annotations

import hashlib
from typing import Union


def sha1_hex(data: Union[str, bytes]) -> str:
    """Return the lowercase hex SHA-1 of ``data`` (text is hashed as UTF-8)."""
    payload = data.encode("utf-8") if isinstance(data, str) else data
    return hashlib.sha1(payload).hexdigest()