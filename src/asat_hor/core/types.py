"""Core data types and structures for alpha-satellite monomer labels."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Any
from enum import Enum


# Arm/allele qualifiers accepted without an explicit grammar extension
BASE_ARM_QUALIFIERS: Tuple[str, ...] = ("L", "S")


class LabelComponent(Enum):
    """Grammar components of a monomer label."""
    FAMILY = "family"
    CHROM_SET = "chrom_set"
    HAPLOTYPE = "haplotype"
    ORDINAL = "ordinal"
    DELIMITER = "delimiter"


class RunDirection(Enum):
    """Traversal direction of a monomer run."""
    FORWARD = "forward"
    REVERSE = "reverse"

    @property
    def step(self) -> int:
        """Ordinal increment between consecutive members."""
        return 1 if self is RunDirection.FORWARD else -1

    def flipped(self) -> "RunDirection":
        return RunDirection.REVERSE if self is RunDirection.FORWARD else RunDirection.FORWARD


@dataclass(frozen=True)
class Haplotype:
    """Haplotype/allele designation, e.g. ``1L``."""
    number: int
    arm: Optional[str] = None

    def __post_init__(self) -> None:
        if self.number < 0:
            raise ValueError(f"Haplotype number must be >= 0, got {self.number}")
        if self.arm is not None and (len(self.arm) != 1 or not self.arm.isupper()):
            raise ValueError(f"Arm qualifier must be one upper-case letter, got {self.arm!r}")

    def __str__(self) -> str:
        return f"{self.number}{self.arm or ''}"


@dataclass(frozen=True)
class Signature:
    """
    Structural identity shared by the monomers of a run.

    Two monomers belong to the same run only if their signatures are equal;
    the ordinal is not part of the signature.
    """
    family: int
    chromosomes: Tuple[int, ...]
    haplotype: Haplotype

    def __post_init__(self) -> None:
        validate_signature_fields(self.family, self.chromosomes)

    def render(self) -> str:
        """Render as the label prefix, e.g. ``S1C1/5/19H1L``."""
        chromosomes = "/".join(str(chrom) for chrom in self.chromosomes)
        return f"S{self.family}C{chromosomes}H{self.haplotype}"

    def monomer(self, ordinal: int):
        """Build the monomer with this signature at ``ordinal``."""
        from asat_hor.core.monomer import Monomer

        return Monomer(
            family=self.family,
            chromosomes=self.chromosomes,
            haplotype=self.haplotype,
            ordinal=ordinal,
            raw=f"{self.render()}.{ordinal}"
        )

    def __str__(self) -> str:
        return self.render()


def validate_signature_fields(family: int, chromosomes: Tuple[int, ...]) -> None:
    """
    Validate the family and chromosome fields shared by monomers and signatures.

    Raises:
        ValueError: If validation fails
    """
    if family < 1:
        raise ValueError(f"Family must be >= 1, got {family}")
    if not isinstance(chromosomes, tuple):
        raise ValueError(f"Chromosomes must be a tuple, got {type(chromosomes).__name__}")
    if not chromosomes:
        raise ValueError("At least one chromosome is required")
    if any(chrom < 0 for chrom in chromosomes):
        raise ValueError(f"Chromosome ids must be >= 0, got {chromosomes}")


@dataclass
class ValidationResult:
    """Result of validation operation."""
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    details: Dict[str, Any] = field(default_factory=dict)
