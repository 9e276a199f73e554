"""
meeba module: meeba/prng.py

Seeded Lehmer (Park-Miller) generator. One instance is one reproducible
stream; the same seed always yields the same simulation.
"""

from __future__ import annotations
import math

MODULUS = 2147483647
MULTIPLIER = 16807
DIVISOR = 2147483646

# state can reach DIVISOR itself, which would read as exactly 1.0
LARGEST_DRAW = math.nextafter(1.0, 0.0)


class Prng:
    def __init__(self, seed: str):
        self.seed = seed
        self.state = int(seed, 36) % MODULUS
        if self.state == 0:
            # zero is a fixed point of the recurrence
            self.state = 1

    def rand(self) -> float:
        """Float in [0, 1)."""
        self.state = (self.state * MULTIPLIER) % MODULUS
        return min(self.state / DIVISOR, LARGEST_DRAW)

    def rand_int(self, low: float, high: float) -> int:
        """Integer in [low, high)."""
        value = int(low + math.floor(self.rand() * (high - low)))
        if high <= low:
            return value
        return min(value, math.ceil(high) - 1)
