from .games import InvalidConfiguration
from .rng import RandomSource


class Die:
    """
    A die with face_count faces numbered 1 through face_count. Values come
    from the given RandomSource and are folded onto the faces by taking them
    modulo face_count. The result is only uniform when the size of the
    source's range is a multiple of face_count; a 1-10 source on a six-sided
    die favors the low faces.
    """

    def __init__(self, face_count: int, source: RandomSource):
        if face_count < 1:
            raise InvalidConfiguration("Die must have at least 1 face, got {:d}".format(face_count))

        self._face_count = face_count
        self._source = source

    def __str__(self) -> str:
        return f"d{self._face_count}"

    def __repr__(self) -> str:
        return f"Die({self._face_count}, {self._source!r})"

    @property
    def face_count(self) -> int:
        return self._face_count

    @property
    def source(self) -> RandomSource:
        return self._source

    def roll(self) -> int:
        """Roll the die once."""
        return self._source.next() % self._face_count + 1

    def roll_n(self, n: int=1) -> list[int]:
        """Roll the die n times and return the results in the order rolled."""
        if n < 1:
            raise ValueError("Count must be at least 1")
        return [self.roll() for _ in range(n)]
