"""Percent-encoding and decoding of URL text with an optional output limit."""

import string

_ALNUM = frozenset((string.ascii_letters + string.digits).encode("ascii"))
_SAFE = _ALNUM | frozenset(b"-_.!~*'();/?:@&=+$,#")
_SAFE_ALL = _ALNUM | frozenset(b"-_.")


def _to_bytes(text) -> bytes:
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    end = data.find(0)
    return data if end < 0 else data[:end]


def _check_limit(limit):
    if limit is not None and limit < 1:
        raise ValueError("limit must be at least 1")


def _encode(text, safe, limit) -> str:
    _check_limit(limit)
    parts = []
    length = 0
    for byte in _to_bytes(text):
        if limit is not None and length + 1 >= limit:
            break
        if byte in safe:
            piece = chr(byte)
        else:
            if limit is not None and length + 4 > limit:
                break
            piece = f"%{byte:02X}"
        parts.append(piece)
        length += len(piece)
    return "".join(parts)


def urlencode(text, limit=None) -> str:
    """Percent-encode everything except letters, digits and ``-_.!~*'();/?:@&=+$,#``.

    ``limit`` is the size of the output including a terminator, so at most
    ``limit - 1`` characters are produced; an escape that would not fit
    ends the output. Text is cut at the first NUL character.
    """
    return _encode(text, _SAFE, limit)


def urlencode_all(text, limit=None) -> str:
    """Percent-encode everything except letters, digits and ``-_.``."""
    return _encode(text, _SAFE_ALL, limit)


def _hex_value(byte: int) -> int:
    char = chr(byte)
    return int(char, 16) if char in string.hexdigits else 0


def urldecode(text, limit=None) -> bytes:
    """Decode ``%XX`` escapes; invalid hex digits count as 0.

    A ``%`` without two following characters is kept as is. At most
    ``limit - 1`` bytes are produced.
    """
    _check_limit(limit)
    data = _to_bytes(text)
    out = bytearray()
    pos = 0
    while pos < len(data) and (limit is None or len(out) + 1 < limit):
        if data[pos] == ord("%") and pos + 2 < len(data):
            out.append(_hex_value(data[pos + 1]) * 16 + _hex_value(data[pos + 2]))
            pos += 3
            continue
        out.append(data[pos])
        pos += 1
    return bytes(out)