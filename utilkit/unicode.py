"""Text re-encoding helpers."""

import locale
from typing import Optional


def utf8_to_ansi(data: bytes, encoding: Optional[str] = None) -> bytes:
    """Re-encode UTF-8 bytes into a single code page.

    ``encoding`` defaults to the system's preferred encoding. Input is cut
    at the first NUL byte; undecodable input and unmappable characters are
    replaced rather than raising.
    """
    target = encoding or locale.getpreferredencoding(False)
    raw = bytes(data)
    end = raw.find(0)
    if end >= 0:
        raw = raw[:end]
    text = raw.decode("utf-8", errors="replace")
    return text.encode(target, errors="replace")