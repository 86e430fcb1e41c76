"""Small time and size-formatting helpers."""

from __future__ import annotations

import time


def current_millis() -> int:
    """Return the current wall-clock time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def short_size(size: int, convert_small: bool = False, kilo: int = 1024) -> str:
    """Format a byte count as a short string such as ``"1.50 MB"``.

    Sizes not above one ``kilo`` give an empty string unless
    ``convert_small`` is set, in which case they are shown in bytes.
    """
    if size > kilo:
        k_size = size / kilo
        if k_size > kilo:
            m_size = k_size / kilo
            if m_size > kilo:
                return f"{m_size / kilo:.2f} GB"
            return f"{m_size:.2f} MB"
        return f"{k_size:.2f} KB"
    if convert_small:
        return f"{float(size):.2f} B"
    return ""