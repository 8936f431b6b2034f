"""HOR assembly: group an ordered monomer sequence into maximal runs."""

import logging
from typing import Iterable, List, Optional

from asat_hor.core.exceptions import AssemblyError, EmptyInputError
from asat_hor.core.monomer import Monomer
from asat_hor.core.run import MonomerRun
from asat_hor.core.types import RunDirection, Signature


logger = logging.getLogger(__name__)


class _OpenRun:
    """Run under construction; direction stays pending until a second member arrives."""

    __slots__ = ("signature", "start", "last", "direction")

    def __init__(self, signature: Signature, start: int, last: Optional[int] = None,
                 direction: Optional[RunDirection] = None) -> None:
        self.signature = signature
        self.start = start
        self.last = start if last is None else last
        self.direction = direction

    @classmethod
    def from_run(cls, run: MonomerRun) -> "_OpenRun":
        direction = None if run.is_singleton else run.direction
        return cls(run.signature, run.start_ordinal, run.end_ordinal, direction)

    def step_to(self, signature: Signature, ordinal: int) -> Optional[RunDirection]:
        """Direction in which ``ordinal`` would extend this run, or None."""
        if signature != self.signature:
            return None

        delta = ordinal - self.last
        if self.direction is None:
            if delta == 1:
                return RunDirection.FORWARD
            if delta == -1:
                return RunDirection.REVERSE
            return None

        return self.direction if delta == self.direction.step else None

    def extend(self, ordinal: int, direction: RunDirection) -> None:
        self.direction = direction
        self.last = ordinal

    def close(self) -> MonomerRun:
        return MonomerRun(
            self.signature, self.start, self.last, self.direction or RunDirection.FORWARD
        )


def assemble_runs(monomers: Iterable[Monomer]) -> List[MonomerRun]:
    """
    Segment monomers into maximal runs in a single left-to-right pass.

    A monomer extends the current run when it has the same signature and its
    ordinal is one more or one less than the previous member's, consistent with
    the direction fixed by the run's second member. Anything else, including a
    repeated ordinal, starts a new run.

    Args:
        monomers: Ordered monomers

    Returns:
        Runs in input order; expanding them reproduces the input

    Raises:
        EmptyInputError: No monomers supplied
        AssemblyError: An element is not a Monomer
    """
    runs: List[MonomerRun] = []
    current: Optional[_OpenRun] = None
    n_monomers = 0

    for position, monomer in enumerate(monomers):
        if not isinstance(monomer, Monomer):
            raise AssemblyError(
                f"Expected Monomer at position {position}, got {type(monomer).__name__}",
                position=position
            )
        n_monomers += 1
        signature = monomer.signature

        if current is not None:
            direction = current.step_to(signature, monomer.ordinal)
            if direction is not None:
                current.extend(monomer.ordinal, direction)
                continue
            runs.append(current.close())

        current = _OpenRun(signature, monomer.ordinal)

    if current is None:
        raise EmptyInputError()

    runs.append(current.close())
    logger.debug(f"Assembled {n_monomers} monomers into {len(runs)} runs")

    return runs


def merge_runs(runs: Iterable[MonomerRun]) -> List[MonomerRun]:
    """
    Re-assemble runs into maximal runs without expanding them.

    Gives the same runs as ``assemble_runs`` over the concatenated expansion
    of ``runs``, in time proportional to the number of runs.

    Args:
        runs: Ordered runs, not necessarily maximal

    Returns:
        Maximal runs in input order

    Raises:
        EmptyInputError: No runs supplied
    """
    merged: List[MonomerRun] = []
    current: Optional[_OpenRun] = None

    for run in runs:
        direction = None
        if current is not None:
            direction = current.step_to(run.signature, run.start_ordinal)

        if direction is None:
            if current is not None:
                merged.append(current.close())
            current = _OpenRun.from_run(run)
            continue

        if run.is_singleton or run.direction is direction:
            current.extend(run.end_ordinal, direction)
            continue

        # Only the first member continues; the rest turns back and opens a new run.
        current.extend(run.start_ordinal, direction)
        merged.append(current.close())
        current = _OpenRun.from_run(
            MonomerRun.between(
                run.signature, run.start_ordinal + run.direction.step, run.end_ordinal
            )
        )

    if current is None:
        raise EmptyInputError("A HOR requires at least one run")

    merged.append(current.close())
    return merged
