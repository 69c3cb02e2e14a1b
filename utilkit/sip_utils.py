"""Helpers for SIP URIs and dialled numbers."""

_NUMBER_CHARS = frozenset("0123456789*#+")


def extract_number_from_uri(uri: str) -> str:
    """Return the user part of a SIP URI such as ``sip:123@host``.

    A leading ``sip:`` scheme is skipped; everything up to the first ``@``
    is returned. An empty string is returned when there is no ``@`` after
    the start position.
    """
    start = uri.find("sip:") + 1  # 1-based position, 0 when missing
    if start == 1:
        start += len("sip:")
    end = uri.find("@") + 1
    if end <= start:
        return ""
    first = max(start, 1) - 1
    return uri[first:first + end - start]


def clean_number(number: str) -> str:
    """Keep only digits and the characters ``*``, ``#`` and ``+``."""
    return "".join(ch for ch in number if ch in _NUMBER_CHARS)