"""File helpers."""

import os
from datetime import datetime, timezone


def file_write_time(path) -> datetime:
    """Return the last write time of a readable file as an aware UTC datetime.

    Raises OSError when the file cannot be opened for reading.
    """
    with open(path, "rb") as handle:
        info = os.fstat(handle.fileno())
    return datetime.fromtimestamp(info.st_mtime, timezone.utc)