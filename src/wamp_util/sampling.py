"""Gaussian random samples."""

import math
import random


def rand_normal(mean: float | None = None, sd: float | None = None, rng: random.Random | None = None) -> float:
    """Draw one value from a normal distribution.

    Uses the polar form of the Box-Muller transform: points are drawn
    uniformly from the square (-1, 1) x (-1, 1) until one lands strictly
    inside the unit disk, then scaled into a standard normal deviate.

    Args:
        mean: Mean of the distribution (default: 0)
        sd: Standard deviation of the distribution (default: 1)
        rng: Random instance to draw from (default: the ``random`` module)

    Returns:
        A float drawn from N(mean, sd**2)
    """
    if mean is None:
        mean = 0
    if sd is None:
        sd = 1
    uniform = rng.random if rng is not None else random.random

    while True:
        x1 = 2 * uniform() - 1
        x2 = 2 * uniform() - 1
        rad = x1 * x1 + x2 * x2
        # Zero would reach log() below
        if 0 < rad < 1:
            break

    scale = math.sqrt(-2 * math.log(rad) / rad)
    return mean + x1 * scale * sd
