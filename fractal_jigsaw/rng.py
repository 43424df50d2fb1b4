"""Seeded pseudo-random generator used by the jigsaw generator.

The recurrence is a small linear congruential generator. Exported geometry is
a pure function of its output, so the constants below must never change.
"""

# state = (state * MULTIPLIER + INCREMENT) mod MODULUS
LCG_MULTIPLIER = 9301
LCG_INCREMENT = 49297
LCG_MODULUS = 233280


class SeededRandom:
    """Deterministic scalar stream owned by a single generator instance."""

    def __init__(self, seed: int = 0):
        """Initialize the stream.

        Args:
            seed: Integer seed. The same seed always yields the same stream.

        Raises:
            ValueError: If seed is not an integer.
        """
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise ValueError(f"seed must be an integer, got {seed!r}")
        self._state = seed

    @property
    def state(self) -> int:
        """Current internal state (the last value produced by the recurrence)."""
        return self._state

    def next(self) -> float:
        """Advance the recurrence and return a float in [0, 1)."""
        self._state = (self._state * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        return self._state / LCG_MODULUS

    def uniform(self, min_value: float, max_value: float) -> float:
        """Return a float in [min_value, max_value) using one draw."""
        return min_value + self.next() * (max_value - min_value)
