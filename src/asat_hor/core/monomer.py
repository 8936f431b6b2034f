"""Monomer value type."""

from dataclasses import dataclass, field
from typing import Tuple

from asat_hor.core.types import Haplotype, Signature, validate_signature_fields


@dataclass(frozen=True)
class Monomer:
    """
    One alpha-satellite monomer occurrence, e.g. ``S1C1/5/19H1L.1``.

    Instances come from :meth:`Monomer.parse` (or from expanding a run);
    ``raw`` keeps the label text and takes no part in equality.
    """
    family: int
    chromosomes: Tuple[int, ...]
    haplotype: Haplotype
    ordinal: int
    raw: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        validate_signature_fields(self.family, self.chromosomes)
        if self.ordinal < 1:
            raise ValueError(f"Ordinal must be >= 1, got {self.ordinal}")
        if not self.raw:
            object.__setattr__(self, "raw", self.render())

    @classmethod
    def parse(cls, text: str) -> "Monomer":
        """
        Parse a monomer label with the default grammar.

        Raises:
            ParseError: Label does not match the grammar
        """
        from asat_hor.modules.parser import parse_monomer

        return parse_monomer(text)

    @property
    def signature(self) -> Signature:
        return Signature(self.family, self.chromosomes, self.haplotype)

    def render(self) -> str:
        """Render the canonical label text."""
        return f"{self.signature.render()}.{self.ordinal}"

    def __str__(self) -> str:
        return self.render()
