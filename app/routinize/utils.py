"""Small numeric helpers shared by the scoring modules."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3, -2.5 -> -2).

    Python's :func:`round` uses banker's rounding, which would make the
    0-100 scores drift on exact halves.
    """
    return int(math.floor(value + 0.5))
