"""Injectable sources of uniform random values.

The star layout perturbs every index but the first by a random term. Rather
than calling a global random function, the generator pulls values from a
RandomSource supplied by the caller:

- NumpyRandomSource: backed by numpy.random.Generator (the default)
- FixedRandomSource: always returns the same value
- SequenceRandomSource: replays a fixed list of values, then fails

Anything with a ``random() -> float`` method returning values in [0, 1)
satisfies the protocol, including ``random.Random``.

A single source instance is not safe to share between threads. The
generator creates a fresh default source per call when none is given.

Example:
    >>> from src.starfield.core.random_source import NumpyRandomSource
    >>> source = NumpyRandomSource(seed=7)
    >>> 0.0 <= source.random() < 1.0
    True
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

import numpy as np

from src.starfield.core.errors import InvalidArgumentError


@runtime_checkable
class RandomSource(Protocol):
    """Supplier of uniform random values in [0, 1)."""

    def random(self) -> float: ...


class NumpyRandomSource:
    """Random source backed by a NumPy Generator.

    Attributes:
        seed: Seed passed to numpy.random.default_rng (None for OS entropy).
    """

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def random(self) -> float:
        return float(self._rng.random())

    def __repr__(self) -> str:
        return f"NumpyRandomSource(seed={self.seed!r})"


class FixedRandomSource:
    """Random source that always returns the same value.

    Useful for reproducing a layout exactly, e.g. a value of 0.0 removes
    all jitter.
    """

    def __init__(self, value: float = 0.0) -> None:
        _check_unit_interval(value)
        self.value = float(value)

    def random(self) -> float:
        return self.value

    def __repr__(self) -> str:
        return f"FixedRandomSource(value={self.value!r})"


class SequenceRandomSource:
    """Random source that replays a fixed list of values in order.

    Raises:
        InvalidArgumentError: If any value lies outside [0, 1).
        RuntimeError: When random() is called after the values run out.
    """

    def __init__(self, values: Iterable[float]) -> None:
        self._values = [float(v) for v in values]
        for v in self._values:
            _check_unit_interval(v)
        self._cursor = 0

    @property
    def remaining(self) -> int:
        """Number of values not yet consumed."""
        return len(self._values) - self._cursor

    def random(self) -> float:
        if self._cursor >= len(self._values):
            raise RuntimeError(
                f"SequenceRandomSource exhausted after {len(self._values)} values"
            )
        value = self._values[self._cursor]
        self._cursor += 1
        return value


def default_random_source() -> RandomSource:
    """Create the source used when a caller does not supply one."""
    return NumpyRandomSource()


def _check_unit_interval(value: float) -> None:
    if not 0.0 <= value < 1.0:
        raise InvalidArgumentError(f"Random value {value} is outside [0, 1)")
