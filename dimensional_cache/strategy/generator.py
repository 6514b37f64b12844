import abc
from typing import Sequence, Tuple

StepVector = Tuple[int, ...]


class CandidateGenerator(abc.ABC):
    """Enumerates unsigned step vectors for a space of the given lengths.

    Steps are relative magnitudes (``0 .. length-1`` per axis); the ranker
    decides their sign. The zero vector must be emitted exactly once.
    Output depends on the lengths only, never on the current position.
    """

    name: str = "abstract"

    @abc.abstractmethod
    def generate(self, lengths: Sequence[int]) -> Tuple[StepVector, ...]:
        """Return every step vector this variant allows."""
        pass

    def count(self, lengths: Sequence[int]) -> int:
        return len(self.generate(lengths))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
