# commute_map/generation/random_points.py
"""
Synthetic house generation around an office.
Points are scattered uniformly up to half a degree away on each axis.
"""

import numbers
import random
from typing import Optional, Protocol, Tuple

from commute_map.config.settings import MapSettings
from commute_map.core.errors import InvalidArgumentError
from commute_map.core.geometry import Coordinate


class RandomSource(Protocol):
    """Anything with a ``random()`` method returning floats in [0, 1)."""

    def random(self) -> float:
        ...


class PointGenerator:
    """
    Generates a fresh candidate set for every reference point.

    Usage:
        generator = PointGenerator(rng=random.Random(42))
        houses = generator.generate(office, 100)
    """

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        scale_factors: Tuple[float, float] = MapSettings.SCALE_FACTORS
    ):
        """
        Args:
            rng: Randomness source. A private unseeded ``random.Random`` is
                 created when omitted, so the module-level RNG is never touched.
            scale_factors: (negative, positive) divisors picked with equal odds.
        """
        self.rng = rng if rng is not None else random.Random()
        self.scale_factors = scale_factors

    def _offset(self) -> float:
        negative, positive = self.scale_factors
        scale = negative if self.rng.random() < 0.5 else positive
        return self.rng.random() / scale

    def generate(self, reference: Coordinate, count: int) -> Tuple[Coordinate, ...]:
        """
        Return ``count`` points around ``reference``.
        Latitude offset is drawn before longitude offset for every point.
        """
        if isinstance(count, bool) or not isinstance(count, numbers.Integral) or count < 0:
            raise InvalidArgumentError(f"count must be a non-negative integer, got {count!r}")
        if not reference.is_finite():
            raise InvalidArgumentError(f"reference must be finite, got {reference}")

        houses = []
        for _ in range(count):
            lat = reference.lat + self._offset()
            lng = reference.lng + self._offset()
            houses.append(Coordinate(lat=lat, lng=lng))
        return tuple(houses)


def generate_houses(
    reference: Coordinate,
    count: int = MapSettings.HOUSE_COUNT,
    rng: Optional[RandomSource] = None
) -> Tuple[Coordinate, ...]:
    """Convenience wrapper around a one-off PointGenerator."""
    return PointGenerator(rng=rng).generate(reference, count)
