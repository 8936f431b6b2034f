"""Shared pytest fixtures."""

import pytest

from asat_hor import Monomer


PREFIX = "S1C1/5/19H1L"


def monomers_from(*labels):
    return [Monomer.parse(label) for label in labels]


@pytest.fixture
def forward_monomers():
    """Three consecutive monomers in increasing order."""
    return monomers_from(f"{PREFIX}.1", f"{PREFIX}.2", f"{PREFIX}.3")


@pytest.fixture
def mixed_monomers():
    """Forward run, reverse run, gap and a signature change."""
    return monomers_from(
        "S2C4H1L.5", "S2C4H1L.6", "S2C4H1L.7",
        "S2C4H1L.3", "S2C4H1L.2",
        "S2C4H1L.9",
        "S2C4H1.10", "S2C4H1.11",
        "S2C4H1.11",
    )
