"""
Alpha-satellite higher-order repeat toolkit

Parses alpha-satellite monomer labels such as ``S1C1/5/19H1L.1`` and
assembles ordered monomers into compact higher-order repeat (HOR) runs.
"""

from asat_hor.core.exceptions import (
    AsatHorError, ParseError, AssemblyError, EmptyInputError,
    IndexOutOfBoundsError, NotationError, ConfigurationError
)
from asat_hor.core.types import Haplotype, LabelComponent, RunDirection, Signature
from asat_hor.core.monomer import Monomer
from asat_hor.core.run import MonomerExpansion, MonomerRun
from asat_hor.core.hor import HOR
from asat_hor.modules.parser import MonomerParser, parse_monomer, parse_labels

__version__ = "0.1.0"

__all__ = [
    "AsatHorError", "ParseError", "AssemblyError", "EmptyInputError",
    "IndexOutOfBoundsError", "NotationError", "ConfigurationError",
    "Haplotype", "LabelComponent", "RunDirection", "Signature",
    "Monomer", "MonomerExpansion", "MonomerRun", "HOR",
    "MonomerParser", "parse_monomer", "parse_labels",
]
