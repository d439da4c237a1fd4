"""Score clamping and hi-score persistence as a 4-byte little-endian float."""

from __future__ import annotations

import os
import struct

MIN_SCORE = 0.0
MAX_SCORE = 999999.0

_FORMAT = struct.Struct("<f")


def clamp_score(value: float) -> float:
    """Limit a score to the range [0, 999999]."""
    if value < MIN_SCORE:
        value = MIN_SCORE
    if value > MAX_SCORE:
        value = MAX_SCORE
    return value


def load_hi_score(path: str | os.PathLike[str]) -> float:
    """Read a stored hi-score; a missing or truncated file yields 0.0."""
    try:
        with open(path, "rb") as fh:
            data = fh.read(_FORMAT.size)
    except OSError:
        return 0.0
    if len(data) < _FORMAT.size:
        return 0.0
    (value,) = _FORMAT.unpack(data)
    return clamp_score(value)


def save_hi_score(path: str | os.PathLike[str], hi_score: float) -> None:
    """Write the clamped hi-score, replacing the file. Raises OSError on failure."""
    with open(path, "wb") as fh:
        fh.write(_FORMAT.pack(clamp_score(hi_score)))