"""Higher-order repeat value type."""

from itertools import chain
from typing import Iterable, Iterator, List, Tuple, Union

from asat_hor.core.exceptions import EmptyInputError, IndexOutOfBoundsError
from asat_hor.core.monomer import Monomer
from asat_hor.core.run import MonomerExpansion, MonomerRun
from asat_hor.core.types import Signature


class HOR:
    """
    An alpha-satellite higher-order repeat stored as an ordered run sequence.

    Runs are fixed and maximal from construction. Operations such as :meth:`reversed`
    return new HOR values rather than modifying this one.

    Example:
        >>> hor = HOR.from_labels(["S1C1/5/19H1L.1", "S1C1/5/19H1L.2", "S1C1/5/19H1L.3"])
        >>> hor.run_at(0).render()
        'S1C1/5/19H1L.1-3'
    """

    __slots__ = ("_runs",)

    def __init__(self, runs: Iterable[MonomerRun]) -> None:
        from asat_hor.modules.assembly import merge_runs

        runs = tuple(runs)
        if not runs:
            raise EmptyInputError("A HOR requires at least one run")
        for run in runs:
            if not isinstance(run, MonomerRun):
                raise TypeError(f"Expected MonomerRun, got {type(run).__name__}")
        # Adjacent runs that continue one another are merged, so runs are always maximal.
        self._runs: Tuple[MonomerRun, ...] = tuple(merge_runs(runs))

    @classmethod
    def from_monomers(cls, monomers: Iterable[Monomer]) -> "HOR":
        """
        Assemble monomers into maximal runs.

        Raises:
            EmptyInputError: No monomers supplied
            AssemblyError: An element is not a Monomer
        """
        from asat_hor.modules.assembly import assemble_runs

        return cls(assemble_runs(monomers))

    @classmethod
    def from_labels(cls, labels: Iterable[str], parser=None) -> "HOR":
        """Parse monomer labels and assemble them."""
        from asat_hor.modules.parser import parse_labels

        return cls.from_monomers(parse_labels(labels, parser=parser))

    @classmethod
    def parse(cls, text: str, parser=None) -> "HOR":
        """Parse compact HOR notation such as ``S1C1/5/19H1L.1-3_5``."""
        from asat_hor.modules.notation import parse_notation

        return parse_notation(text, parser=parser)

    def run_at(self, index: int) -> MonomerRun:
        """
        Get the run at a 0-based position.

        Raises:
            IndexOutOfBoundsError: Index outside [0, run_count)
        """
        if not 0 <= index < len(self._runs):
            raise IndexOutOfBoundsError(index, len(self._runs))
        return self._runs[index]

    def runs(self) -> Iterator[MonomerRun]:
        """Iterate over runs in assembly order."""
        return iter(self._runs)

    def expand(self, reverse: bool = False) -> MonomerExpansion:
        """Reconstruct the full monomer sequence, optionally from the last monomer back."""
        runs = self._runs[::-1] if reverse else self._runs
        return MonomerExpansion(
            lambda: chain.from_iterable(run.expand(reverse) for run in runs),
            self.monomer_count
        )

    def reversed(self) -> "HOR":
        """The HOR traversed from the other end, re-assembled into maximal runs."""
        return HOR(run.reversed() for run in reversed(self._runs))

    @property
    def run_count(self) -> int:
        return len(self._runs)

    @property
    def monomer_count(self) -> int:
        return sum(len(run) for run in self._runs)

    @property
    def signatures(self) -> List[Signature]:
        """Distinct run signatures in first-seen order."""
        seen: List[Signature] = []
        for run in self._runs:
            if run.signature not in seen:
                seen.append(run.signature)
        return seen

    def render(self) -> List[str]:
        """Render each run."""
        return [run.render() for run in self._runs]

    def to_notation(self) -> str:
        """Render compact HOR notation; requires a single shared signature."""
        from asat_hor.modules.notation import render_notation

        return render_notation(self)

    def to_dataframe(self):
        """Tabulate runs as a pandas DataFrame."""
        from asat_hor.modules.tabular import runs_to_dataframe

        return runs_to_dataframe(self)

    def __len__(self) -> int:
        return len(self._runs)

    def __iter__(self) -> Iterator[MonomerRun]:
        return iter(self._runs)

    def __getitem__(self, index: Union[int, slice]) -> Union[MonomerRun, Tuple[MonomerRun, ...]]:
        if isinstance(index, slice):
            return self._runs[index]
        return self.run_at(index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HOR):
            return NotImplemented
        return self._runs == other._runs

    def __hash__(self) -> int:
        return hash(self._runs)

    def __str__(self) -> str:
        return " ".join(self.render())

    def __repr__(self) -> str:
        return f"HOR({self.render()!r})"
