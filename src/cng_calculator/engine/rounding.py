"""Rounding used for every reported series."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +infinity.

    Python's ``round`` uses banker's rounding (``round(2.5) == 2``); reported
    series must round 2.5 to 3 and −2.5 to −2.
    """
    return int(math.floor(value + 0.5))
