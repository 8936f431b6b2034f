"""Monomer runs and their lazy expansion."""

from dataclasses import dataclass
from typing import Callable, Iterator

from asat_hor.core.monomer import Monomer
from asat_hor.core.types import RunDirection, Signature


class MonomerExpansion:
    """
    Lazy, restartable monomer sequence.

    Every call to ``iter()`` starts a fresh pass from the first monomer.
    Monomers are built on demand and never stored.
    """

    def __init__(self, factory: Callable[[], Iterator[Monomer]], length: int) -> None:
        self._factory = factory
        self._length = length

    def __iter__(self) -> Iterator[Monomer]:
        return self._factory()

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"MonomerExpansion(length={self._length})"


@dataclass(frozen=True)
class MonomerRun:
    """
    Maximal contiguous block of same-signature monomers with ordinal step +/-1.

    ``start_ordinal`` is the first ordinal in traversal order, so a reverse
    run has ``start_ordinal > end_ordinal``.
    """
    signature: Signature
    start_ordinal: int
    end_ordinal: int
    direction: RunDirection = RunDirection.FORWARD

    def __post_init__(self) -> None:
        if self.start_ordinal < 1 or self.end_ordinal < 1:
            raise ValueError(
                f"Run ordinals must be >= 1, got {self.start_ordinal}-{self.end_ordinal}"
            )
        expected = (
            RunDirection.REVERSE if self.start_ordinal > self.end_ordinal
            else RunDirection.FORWARD
        )
        if self.direction is not expected:
            raise ValueError(
                f"Run {self.start_ordinal}-{self.end_ordinal} must be {expected.value}, "
                f"got {self.direction.value}"
            )

    @classmethod
    def between(cls, signature: Signature, start_ordinal: int, end_ordinal: int) -> "MonomerRun":
        """Create a run, inferring its direction from the bounds."""
        direction = (
            RunDirection.REVERSE if start_ordinal > end_ordinal else RunDirection.FORWARD
        )
        return cls(signature, start_ordinal, end_ordinal, direction)

    def __len__(self) -> int:
        return abs(self.end_ordinal - self.start_ordinal) + 1

    @property
    def is_singleton(self) -> bool:
        return self.start_ordinal == self.end_ordinal

    def ordinals(self, reverse: bool = False) -> range:
        """Ordinals in traversal order, or from ``end_ordinal`` back when ``reverse``."""
        step = self.direction.step
        if reverse:
            return range(self.end_ordinal, self.start_ordinal - step, -step)
        return range(self.start_ordinal, self.end_ordinal + step, step)

    def expand(self, reverse: bool = False) -> MonomerExpansion:
        """Reconstruct the monomers of this run."""
        ordinals = self.ordinals(reverse)
        signature = self.signature
        return MonomerExpansion(
            lambda: (signature.monomer(ordinal) for ordinal in ordinals),
            len(ordinals)
        )

    def reversed(self) -> "MonomerRun":
        """The same run traversed from the other end."""
        return MonomerRun.between(self.signature, self.end_ordinal, self.start_ordinal)

    def render(self) -> str:
        """Render as ``<signature>.<start>`` or ``<signature>.<start>-<end>``."""
        return f"{self.signature.render()}.{self.render_ordinals()}"

    def render_ordinals(self) -> str:
        if self.is_singleton:
            return str(self.start_ordinal)
        return f"{self.start_ordinal}-{self.end_ordinal}"

    def __str__(self) -> str:
        return self.render()
