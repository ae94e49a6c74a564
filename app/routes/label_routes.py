"""
Drug Label Routes
Endpoint behind the search button of the single screen
"""
from fastapi import APIRouter, Depends, Query, Request, HTTPException
import logging

from app.models.drug_label import SearchOutcome
from app.routes.tools.fda import (
    search_drug,
    STATUS_SUCCESS,
    STATUS_NO_RESULTS,
    STATUS_INVALID_INPUT,
)
from app.utils.openfda import OpenFdaClient

router = APIRouter()
logger = logging.getLogger(__name__)

STATUS_CODES = {
    STATUS_INVALID_INPUT: 400,
    STATUS_NO_RESULTS: 404,
}

def get_openfda_client(request: Request) -> OpenFdaClient:
    """Return the client created for this application at startup."""
    return request.app.state.openfda_client

@router.get("/label/search", response_model=SearchOutcome)
async def search_label(
    name: str = Query(..., description="Drug name (brand or generic)"),
    client: OpenFdaClient = Depends(get_openfda_client),
):
    """
    Look up a drug label by brand or generic name.

    Returns the display fields of the first matching label. Empty input
    yields 400, no match 404 and any lookup failure 502, each with the
    status message as detail.
    """
    outcome = await search_drug(client, name)
    if outcome.status == STATUS_SUCCESS:
        return outcome

    status_code = STATUS_CODES.get(outcome.status, 502)
    logger.info(f"Label search for '{outcome.query}' ended with {outcome.status}")
    raise HTTPException(status_code=status_code, detail=outcome.message)
