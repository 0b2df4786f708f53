import random
from typing import Iterable

from .games import InvalidConfiguration


class RandomSource:
    """
    Produces integers over a fixed inclusive range, one per call to next().
    Dice and knockout numbers draw from these, so a game can be made
    reproducible by handing it seeded or fixed sources.
    """

    low: int = 0
    high: int = 0

    def next(self) -> int:
        raise NotImplementedError('next not implemented')

    def __contains__(self, value: int) -> bool:
        return self.low <= value <= self.high


class RangeSource(RandomSource):
    """Uniformly samples [low, high] from a random.Random instance."""

    def __init__(self, low: int, high: int, rng: random.Random | None=None):
        if low > high:
            raise InvalidConfiguration("Source range is empty: low {:d} is greater than high {:d}".format(low, high))

        self.low = low
        self.high = high

        # each source gets its own generator unless one is shared explicitly
        self.rng = rng if rng is not None else random.Random()

    def __repr__(self) -> str:
        return f"RangeSource({self.low}, {self.high})"

    def next(self) -> int:
        return self.rng.randint(self.low, self.high)


class SequenceSource(RandomSource):
    """
    Returns a fixed sequence of values in order. When cycle is True the
    sequence repeats forever; otherwise asking for more values than were given
    raises a ValueError. Used to play fully deterministic games.
    """

    def __init__(self, values: Iterable[int], cycle: bool=True):
        values = list(values)
        if len(values) == 0:
            raise InvalidConfiguration("Sequence source needs at least one value")

        self.values = values
        self.cycle = cycle
        self.low = min(values)
        self.high = max(values)
        self._pos = 0

    def __repr__(self) -> str:
        return f"SequenceSource({self.values!r}, cycle={self.cycle!r})"

    def next(self) -> int:
        if self._pos >= len(self.values):
            if not self.cycle:
                raise ValueError("Sequence source is exhausted after {:d} values".format(len(self.values)))
            self._pos = 0

        v = self.values[self._pos]
        self._pos += 1
        return v

