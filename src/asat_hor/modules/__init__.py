"""Parsing, assembly and export modules."""

from . import parser
from . import assembly
from . import notation
from . import tabular
