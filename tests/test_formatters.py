"""
Unit tests for mapping label records to display text.
"""

import pytest

from app.models.drug_label import LabelRecord
from app.utils.formatters import (
    CONSULT_PHYSICIAN,
    NO_INFORMATION,
    UNKNOWN_DRUG_NAME,
    render_label,
)

def test_empty_record_uses_placeholders():
    """A record with no sections falls back everywhere, with the advisory for timing."""
    display = render_label(LabelRecord())

    assert display.drug_name == UNKNOWN_DRUG_NAME
    assert display.benefits == NO_INFORMATION
    assert display.side_effects == NO_INFORMATION
    assert display.dosage == NO_INFORMATION
    assert display.when_to_take == CONSULT_PHYSICIAN
    assert display.when_to_take != NO_INFORMATION

def test_empty_lists_behave_like_missing_sections():
    record = LabelRecord(
        indications_and_usage=[],
        warnings=[],
        adverse_reactions=[],
        dosage_and_administration=[],
        openfda={"brand_name": [], "generic_name": []},
    )
    display = render_label(record)

    assert display.drug_name == UNKNOWN_DRUG_NAME
    assert display.benefits == NO_INFORMATION
    assert display.side_effects == NO_INFORMATION
    assert display.dosage == NO_INFORMATION
    assert display.when_to_take == CONSULT_PHYSICIAN

def test_side_effects_lists_warnings_before_adverse_reactions():
    display = render_label(LabelRecord(warnings=["A"], adverse_reactions=["B"]))
    assert display.side_effects == "A\n\nB"

@pytest.mark.parametrize("fields, expected", [
    ({"warnings": ["A"]}, "A"),
    ({"adverse_reactions": ["B"]}, "B"),
    ({"warnings": ["A1", "A2"], "adverse_reactions": ["B"]}, "A1\n\nA2\n\nB"),
])
def test_side_effects_with_partial_sections(fields, expected):
    assert render_label(LabelRecord(**fields)).side_effects == expected

def test_first_brand_name_wins_over_generic_name():
    record = LabelRecord(openfda={"brand_name": ["X", "Y"], "generic_name": ["Z"]})
    assert render_label(record).drug_name == "X"

def test_generic_name_used_without_brand_name():
    record = LabelRecord(openfda={"generic_name": ["IBUPROFEN", "OTHER"]})
    assert render_label(record).drug_name == "IBUPROFEN"

def test_dosage_text_is_reused_for_when_to_take():
    display = render_label(LabelRecord(dosage_and_administration=["Take daily"]))
    assert display.dosage == "Take daily"
    assert display.when_to_take == "Take daily"

def test_indications_joined_with_blank_line():
    display = render_label(LabelRecord(indications_and_usage=["Pain", "Fever"]))
    assert display.benefits == "Pain\n\nFever"

def test_manufacturer_is_not_displayed(advil_label):
    display = render_label(LabelRecord.model_validate(advil_label))

    assert display.drug_name == "Advil"
    assert "Haleon" not in " ".join(display.model_dump().values())
