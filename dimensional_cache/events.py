from dataclasses import dataclass
from typing import Iterable, Tuple


@dataclass(frozen=True)
class SpawnEvent:
    """An event indicating another application instance was spawned.

    Carries the command-line arguments of the new instance to the one that
    is already running.
    """
    args: Tuple[str, ...]

    def __init__(self, args: Iterable[str]):
        if isinstance(args, str):
            raise TypeError("SpawnEvent expects a sequence of arguments, not a single str")
        args = tuple(args)
        for a in args:
            if not isinstance(a, str):
                raise TypeError(f"SpawnEvent arguments must be str, got {type(a).__name__}")
        object.__setattr__(self, "args", args)

    @property
    def arguments(self) -> Tuple[str, ...]:
        """The arguments passed from the spawned application instance."""
        return self.args
