"""
FDA Drug Label Search Flow

This module implements what happens when the user presses "search": the
input check, the openFDA call and the mapping of its outcome to either the
result card or a one-line status message.
"""
import logging

from app.models.drug_label import SearchOutcome
from app.utils.formatters import render_label
from app.utils.openfda import OpenFdaClient, SearchError

logger = logging.getLogger(__name__)

STATUS_SUCCESS = "success"
STATUS_NO_RESULTS = "no_results"
STATUS_ERROR = "error"
STATUS_INVALID_INPUT = "invalid_input"

# "Please enter the drug name"
ENTER_DRUG_NAME = "الرجاء إدخال اسم الدواء"
# "No results found"
NO_RESULTS = "لم يتم العثور على نتائج"
# "An error occurred"
ERROR_OCCURRED = "حدث خطأ"


async def search_drug(client: OpenFdaClient, raw_name: str) -> SearchOutcome:
    """
    Search openFDA for a drug and prepare what the screen shows.

    Args:
        client: openFDA label client
        raw_name: Drug name as typed by the user

    Returns:
        SearchOutcome with the display fields on success, or a status message
    """
    drug_name = (raw_name or "").strip()
    if not drug_name:
        return SearchOutcome(status=STATUS_INVALID_INPUT, query=drug_name, message=ENTER_DRUG_NAME)

    try:
        response = await client.search(drug_name)
    except SearchError as e:
        logger.debug(f"Label search failed for {drug_name}", exc_info=True)
        message = f"{ERROR_OCCURRED}: {e}" if e.transport else ERROR_OCCURRED
        return SearchOutcome(status=STATUS_ERROR, query=drug_name, message=message)

    record = response.first()
    if record is None:
        logger.info(f"No label data found for drug: {drug_name}")
        return SearchOutcome(status=STATUS_NO_RESULTS, query=drug_name, message=NO_RESULTS)

    return SearchOutcome(status=STATUS_SUCCESS, query=drug_name, label=render_label(record))
