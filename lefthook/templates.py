"""Rendering of files lefthook writes into the repository."""

from __future__ import annotations

_CHECKSUM_FORMAT = "{} {}\n"


def checksum(checksum: str, timestamp: int) -> bytes:
    """Return the contents of the checksum file."""
    return _CHECKSUM_FORMAT.format(checksum, int(timestamp)).encode()