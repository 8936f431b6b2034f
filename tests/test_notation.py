"""Tests for compact HOR notation."""

import pytest

from asat_hor import HOR, LabelComponent, MonomerParser, NotationError, ParseError

from conftest import monomers_from


class TestParseNotation:
    @pytest.mark.parametrize("text", [
        "S1C3H1L.11",
        "S1C3H1L.11-6",
        "S1C10H1L.1-5_8",
        "S2C16H2.4_7-8",
        "S4C24H1L.46-35_33_31-26_15-1",
        "S2C4H1L.5-14_8-9_3-14_8-14_8-9_3-19",
    ])
    def test_canonical_round_trip(self, text):
        assert HOR.parse(text).to_notation() == text

    def test_segments_are_reassembled(self):
        assert HOR.parse("S1C3H1L.1-3_4-5") == HOR.parse("S1C3H1L.1-5")
        assert HOR.parse("S1C3H1L.3_2_1").to_notation() == "S1C3H1L.3-1"

    def test_expansion(self):
        hor = HOR.parse("S1C3H1L.11-6")
        assert [str(mon) for mon in hor.expand()] == [
            "S1C3H1L.11", "S1C3H1L.10", "S1C3H1L.9",
            "S1C3H1L.8", "S1C3H1L.7", "S1C3H1L.6",
        ]

    def test_matches_assembly(self):
        hor = HOR.from_monomers(monomers_from("S1C3H1L.1", "S1C3H1L.2", "S1C3H1L.5"))
        assert HOR.parse("S1C3H1L.1-2_5") == hor

    def test_reversed(self):
        assert HOR.parse("S1C3H1L.11-6").reversed().to_notation() == "S1C3H1L.6-11"
        assert HOR.parse("S2C16H2.4_7-8").reversed().to_notation() == "S2C16H2.8-7_4"

    def test_custom_parser(self):
        parser = MonomerParser(extra_arm_qualifiers=["A"])
        assert HOR.parse("S2C16H2A.4_7-8", parser=parser).to_notation() == "S2C16H2A.4_7-8"


class TestParseNotationErrors:
    @pytest.mark.parametrize("text,component", [
        ("S1C10H1L", LabelComponent.DELIMITER),
        ("S1C10H1L.", LabelComponent.DELIMITER),
        ("S1C10H1L._6", LabelComponent.DELIMITER),
        ("S1C10H1L.1__2", LabelComponent.DELIMITER),
        ("S1C10H1L.1_", LabelComponent.DELIMITER),
        ("S1C10H1L.1x", LabelComponent.DELIMITER),
        ("S1C10H1L.1-", LabelComponent.ORDINAL),
        ("S1C10H1L.1-3-5", LabelComponent.ORDINAL),
        ("S1C10H1L.0-3", LabelComponent.ORDINAL),
        ("S1C10H1L.3-0", LabelComponent.ORDINAL),
        ("S1C10H1L.01", LabelComponent.ORDINAL),
        ("S1C10H1L.1-5_6/2/4", LabelComponent.DELIMITER),
        ("S01C10H1L.1", LabelComponent.FAMILY),
        ("S1C10H2-A.4", LabelComponent.DELIMITER),
        ("S1C10H1X.1", LabelComponent.HAPLOTYPE),
    ])
    def test_component_is_reported(self, text, component):
        with pytest.raises(ParseError) as exc_info:
            HOR.parse(text)
        assert exc_info.value.component is component
        assert exc_info.value.label == text

    def test_segment_error_position(self):
        with pytest.raises(ParseError) as exc_info:
            HOR.parse("S1C3H1L.1-2_4x")
        assert exc_info.value.position == 13


class TestRenderNotation:
    def test_mixed_signatures_rejected(self):
        hor = HOR.from_monomers(monomers_from("S1C3H1L.1", "S1C3H1.2"))
        with pytest.raises(NotationError) as exc_info:
            hor.to_notation()
        assert exc_info.value.signatures == ["S1C3H1L", "S1C3H1"]
