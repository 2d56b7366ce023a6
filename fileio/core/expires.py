from __future__ import annotations

# Number of days a file is kept when no usable period is requested.
DEFAULT_EXPIRES = 14

# Checked in this order; the first divisor that fits wins (217 days -> "31w").
_UNITS = (
    (7, "w"),
    (31, "m"),
    (365, "y"),
)


def encode_expires(days: int) -> str:
    """Convert a number of days to the compact `expires` value of the API.

    Examples: 7 -> "1w", 31 -> "1m", 730 -> "2y", 12 -> "12", 0 -> "14".

    Complexity: O(1).
    """

    if isinstance(days, bool) or not isinstance(days, int):
        raise TypeError(f"days must be an int, got {type(days).__name__}")
    if days < 1:
        return str(DEFAULT_EXPIRES)
    for divisor, suffix in _UNITS:
        if days % divisor == 0:
            return f"{days // divisor}{suffix}"
    return str(days)
