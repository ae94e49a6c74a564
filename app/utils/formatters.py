"""
Label Formatters

Turn an openFDA label record into the text shown on the result card.
Display strings are hard-coded Arabic, as in the mobile app.
"""

import logging
from typing import List, Optional

from app.models.drug_label import DisplayModel, LabelRecord

# Configure logging
logger = logging.getLogger(__name__)

SECTION_SEPARATOR = "\n\n"

# "Unknown"
UNKNOWN_DRUG_NAME = "غير معروف"
# "No information available."
NO_INFORMATION = "لا توجد معلومات متوفرة."
# "Please consult a physician or pharmacist about when to take it."
CONSULT_PHYSICIAN = "يرجى استشارة الطبيب أو الصيدلي لتحديد توقيت التناول."


def first_value(values: Optional[List[str]]) -> Optional[str]:
    return values[0] if values else None


def join_sections(sections: Optional[List[str]]) -> Optional[str]:
    """
    Join label sections with a blank line.

    Returns None for a missing or empty list so callers can fall back to
    placeholder text.
    """
    if not sections:
        return None
    return SECTION_SEPARATOR.join(sections)


def format_side_effects(record: LabelRecord) -> str:
    """Warnings first, then adverse reactions, separated by a blank line."""
    parts = [
        text
        for text in (join_sections(record.warnings), join_sections(record.adverse_reactions))
        if text
    ]
    if not parts:
        return NO_INFORMATION
    return SECTION_SEPARATOR.join(parts)


def render_label(record: LabelRecord) -> DisplayModel:
    """
    Map a label record to the five display fields.

    Args:
        record: First label record of a non-empty search result

    Returns:
        DisplayModel with placeholder text for every missing section
    """
    identity = record.openfda
    drug_name = None
    if identity is not None:
        drug_name = first_value(identity.brand_name) or first_value(identity.generic_name)

    dosage = join_sections(record.dosage_and_administration)

    display = DisplayModel(
        drug_name=drug_name or UNKNOWN_DRUG_NAME,
        benefits=join_sections(record.indications_and_usage) or NO_INFORMATION,
        side_effects=format_side_effects(record),
        dosage=dosage or NO_INFORMATION,
        # There is no dedicated label section for timing; dosage text is reused
        when_to_take=dosage or CONSULT_PHYSICIAN,
    )
    logger.debug(f"Rendered label {record.id or '<no id>'} as {display.drug_name}")
    return display
