"""
Width of the offset column.
"""

from typing import Optional

from .config import OFF_LEN


def hex_digit_count(n: int) -> int:
    """Number of base-16 digits needed for n (at least 1)."""
    count = 1
    while n >= 16:
        n //= 16
        count += 1
    return count


def compute_width(known_length: Optional[int], user_minimum: Optional[int] = None) -> int:
    """
    Compute the offset field width.

    Args:
        known_length: total input length, or None when the source is a stream
        user_minimum: requested minimum width (None or <= 0 means none)

    Returns:
        Digit count for the offset field
    """
    if known_length is None:
        width = OFF_LEN
    else:
        # One digit of headroom past the length itself
        width = max(hex_digit_count(known_length) + 1, OFF_LEN)
    if user_minimum is not None and user_minimum > width:
        width = user_minimum
    return width
