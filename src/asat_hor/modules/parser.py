"""Monomer label parser.

Grammar (case-sensitive)::

    label      := family chrom_set haplotype "." ordinal
    family     := "S" digits
    chrom_set  := "C" digits ("/" digits)*
    haplotype  := "H" digits arm?
    arm        := "L" | "S"
    ordinal    := digits

``digits`` are ASCII decimal digits without leading zeros ("0" alone is allowed).
Further arm qualifiers are accepted only when a parser is built with them
as an explicit grammar extension.
"""

import logging
import re
from typing import Iterable, List, Optional, Tuple

from asat_hor.core.exceptions import ParseError
from asat_hor.core.monomer import Monomer
from asat_hor.core.types import BASE_ARM_QUALIFIERS, Haplotype, LabelComponent


logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"[0-9]+")

# Longest accepted digit run; ids and ordinals fit a signed 64-bit integer
MAX_DIGITS = 18


def read_number(
    text: str,
    pos: int,
    component: LabelComponent,
    label: Optional[str] = None
) -> Tuple[int, int]:
    """
    Read a canonical decimal number starting at ``pos``.

    Args:
        text: Text being parsed
        pos: Position of the first digit
        component: Grammar component reported on failure
        label: Full label for error reporting (defaults to ``text``)

    Returns:
        Tuple of (value, position after the last digit)

    Raises:
        ParseError: No digits at ``pos``, superfluous leading zeros or more than MAX_DIGITS digits
    """
    label = text if label is None else label
    match = _DIGITS.match(text, pos)
    if match is None:
        found = repr(text[pos]) if pos < len(text) else "end of label"
        raise ParseError(label, component, f"expected digits, found {found}", pos)

    digits = match.group()
    if len(digits) > 1 and digits[0] == "0":
        raise ParseError(label, component, f"leading zeros in {digits!r}", pos)
    if len(digits) > MAX_DIGITS:
        raise ParseError(
            label, component, f"number has {len(digits)} digits, at most {MAX_DIGITS} allowed", pos
        )

    return int(digits), match.end()


class MonomerParser:
    """
    Parser for monomer labels such as ``S1C1/5/19H1L.1``.

    Args:
        extra_arm_qualifiers: Arm qualifier letters accepted in addition to ``L`` and ``S``
        unique_chromosomes: Reject labels that repeat a chromosome id
    """

    def __init__(
        self,
        extra_arm_qualifiers: Iterable[str] = (),
        unique_chromosomes: bool = False
    ) -> None:
        extras = tuple(extra_arm_qualifiers)
        for qualifier in extras:
            if not (len(qualifier) == 1 and "A" <= qualifier <= "Z"):
                raise ValueError(
                    f"Arm qualifier must be a single upper-case ASCII letter, got {qualifier!r}"
                )

        self.arm_qualifiers: Tuple[str, ...] = BASE_ARM_QUALIFIERS + tuple(
            q for q in extras if q not in BASE_ARM_QUALIFIERS
        )
        self.unique_chromosomes = unique_chromosomes

    def parse(self, text: str) -> Monomer:
        """
        Parse a single monomer label.

        Args:
            text: Label text

        Returns:
            Parsed Monomer

        Raises:
            ParseError: Label does not match the grammar
        """
        if not isinstance(text, str):
            raise ParseError(text, LabelComponent.FAMILY, "label must be a string", 0)

        pos = self._expect(text, 0, "S", LabelComponent.FAMILY)
        family_pos = pos
        family, pos = read_number(text, pos, LabelComponent.FAMILY)
        if family == 0:
            raise ParseError(text, LabelComponent.FAMILY, "family must be positive", family_pos)

        chromosomes, pos = self._parse_chromosomes(text, pos)
        haplotype, pos = self._parse_haplotype(text, pos)

        pos = self._expect(text, pos, ".", LabelComponent.DELIMITER)
        ordinal_pos = pos
        ordinal, pos = read_number(text, pos, LabelComponent.ORDINAL)
        if ordinal == 0:
            raise ParseError(text, LabelComponent.ORDINAL, "ordinal must be positive", ordinal_pos)
        if pos != len(text):
            raise ParseError(
                text, LabelComponent.ORDINAL,
                f"unexpected trailing characters {text[pos:]!r}", pos
            )

        return Monomer(
            family=family,
            chromosomes=chromosomes,
            haplotype=haplotype,
            ordinal=ordinal,
            raw=text
        )

    def _parse_chromosomes(self, text: str, pos: int) -> Tuple[Tuple[int, ...], int]:
        pos = self._expect(text, pos, "C", LabelComponent.CHROM_SET)
        chrom, pos = read_number(text, pos, LabelComponent.CHROM_SET)
        chromosomes = [chrom]

        while pos < len(text) and text[pos] == "/":
            chrom_pos = pos + 1
            chrom, pos = read_number(text, chrom_pos, LabelComponent.CHROM_SET)
            if self.unique_chromosomes and chrom in chromosomes:
                raise ParseError(
                    text, LabelComponent.CHROM_SET,
                    f"chromosome {chrom} listed more than once", chrom_pos
                )
            chromosomes.append(chrom)

        return tuple(chromosomes), pos

    def _parse_haplotype(self, text: str, pos: int) -> Tuple[Haplotype, int]:
        pos = self._expect(text, pos, "H", LabelComponent.HAPLOTYPE)
        number, pos = read_number(text, pos, LabelComponent.HAPLOTYPE)

        arm = None
        if pos < len(text) and text[pos].isalpha():
            if text[pos] not in self.arm_qualifiers:
                raise ParseError(
                    text, LabelComponent.HAPLOTYPE,
                    f"unknown arm qualifier {text[pos]!r} "
                    f"(allowed: {', '.join(self.arm_qualifiers)})", pos
                )
            arm = text[pos]
            pos += 1
            if pos < len(text) and text[pos].isalpha():
                raise ParseError(
                    text, LabelComponent.HAPLOTYPE,
                    f"unexpected {text[pos]!r} after arm qualifier", pos
                )

        return Haplotype(number, arm), pos

    @staticmethod
    def _expect(text: str, pos: int, token: str, component: LabelComponent) -> int:
        if pos >= len(text):
            raise ParseError(text, component, f"expected {token!r}, found end of label", pos)
        if text[pos] != token:
            raise ParseError(text, component, f"expected {token!r}, found {text[pos]!r}", pos)
        return pos + 1


DEFAULT_PARSER = MonomerParser()


def parse_monomer(text: str, parser: Optional[MonomerParser] = None) -> Monomer:
    """Parse one label with ``parser`` or the default grammar."""
    return (parser or DEFAULT_PARSER).parse(text)


def parse_labels(
    labels: Iterable[str],
    parser: Optional[MonomerParser] = None,
    skip_invalid: bool = False
) -> List[Monomer]:
    """
    Parse a sequence of labels, preserving order.

    Args:
        labels: Label strings, e.g. the name column of a monomer track
        parser: Parser to use (default grammar if None)
        skip_invalid: Log and skip invalid labels instead of raising

    Returns:
        Parsed monomers

    Raises:
        ParseError: First invalid label when ``skip_invalid`` is False
    """
    parser = parser or DEFAULT_PARSER
    monomers = []
    skipped = 0

    for label in labels:
        try:
            monomers.append(parser.parse(label))
        except ParseError as e:
            if not skip_invalid:
                raise
            skipped += 1
            logger.warning(f"Skipping invalid monomer label: {e}")

    if skipped:
        logger.info(f"Parsed {len(monomers)} monomers, skipped {skipped} invalid labels")

    return monomers
