"""Compact HOR notation, e.g. ``S1C1/5/19H1L.1-3_5_9-7``.

The label prefix is written once, followed by ``_``-separated segments.
A segment is a single ordinal or an inclusive ``start-end`` range in
traversal order.
"""

import logging
from typing import Optional

from asat_hor.core.exceptions import NotationError, ParseError
from asat_hor.core.hor import HOR
from asat_hor.core.run import MonomerRun
from asat_hor.core.types import LabelComponent, Signature
from asat_hor.modules.parser import MonomerParser, parse_monomer, read_number


logger = logging.getLogger(__name__)


def parse_notation(text: str, parser: Optional[MonomerParser] = None) -> HOR:
    """
    Parse compact HOR notation.

    Segments are re-assembled, so adjacent segments that continue one
    another collapse into a single run (``1-3_4-5`` gives ``1-5``).

    Args:
        text: HOR notation
        parser: Monomer parser for the label prefix (default grammar if None)

    Returns:
        Parsed HOR

    Raises:
        ParseError: Malformed prefix or segment
    """
    if not isinstance(text, str):
        raise ParseError(text, LabelComponent.FAMILY, "HOR notation must be a string", 0)

    prefix, dot, _ = text.partition(".")
    if not dot:
        raise ParseError(text, LabelComponent.DELIMITER, "expected '.' before ordinals", len(text))

    # Prefix goes through the monomer grammar with a placeholder ordinal.
    try:
        signature = parse_monomer(f"{prefix}.1", parser).signature
    except ParseError as e:
        raise ParseError(text, e.component, e.reason, e.position) from e

    runs = []
    start_pos = len(prefix) + 1
    while True:
        end_pos = text.find("_", start_pos)
        if end_pos == -1:
            end_pos = len(text)
        runs.append(_parse_segment(text, start_pos, end_pos, signature))
        if end_pos == len(text):
            break
        start_pos = end_pos + 1

    hor = HOR(runs)
    logger.debug(f"Parsed HOR notation {text!r} into {hor.run_count} runs")

    return hor


def _parse_segment(text: str, start_pos: int, end_pos: int, signature: Signature) -> MonomerRun:
    if start_pos == end_pos:
        raise ParseError(text, LabelComponent.DELIMITER, "empty ordinal segment", start_pos)

    start, pos = read_number(text, start_pos, LabelComponent.ORDINAL)
    end = start
    if pos < end_pos:
        if text[pos] != "-":
            raise ParseError(
                text, LabelComponent.DELIMITER, f"expected '-' or '_', found {text[pos]!r}", pos
            )
        end, pos = read_number(text, pos + 1, LabelComponent.ORDINAL)
        if pos < end_pos:
            raise ParseError(
                text, LabelComponent.ORDINAL,
                f"unexpected trailing characters {text[pos:end_pos]!r}", pos
            )

    if start == 0 or end == 0:
        raise ParseError(text, LabelComponent.ORDINAL, "ordinal must be positive", start_pos)

    return MonomerRun.between(signature, start, end)


def render_notation(hor: HOR) -> str:
    """
    Render a HOR in compact notation.

    Raises:
        NotationError: Runs do not share a single signature
    """
    signatures = hor.signatures
    if len(signatures) > 1:
        raise NotationError(
            f"Compact notation needs one signature, HOR has {len(signatures)}",
            signatures=[sig.render() for sig in signatures]
        )

    segments = "_".join(run.render_ordinals() for run in hor)
    return f"{signatures[0].render()}.{segments}"
