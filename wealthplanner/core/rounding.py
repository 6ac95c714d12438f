"""Rounding used wherever a figure leaves the core."""

import math


def round_half_up(value: float, places: int = 2) -> float:
    """Round with ties going toward +infinity on the scaled value.

    round_half_up(0.125) -> 0.13 and round_half_up(-2.5, 0) -> -2.0,
    unlike the builtin round(), which rounds ties to even.
    """
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor
