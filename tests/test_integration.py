"""
Integration tests against the live openFDA API.

These tests make actual network calls and are deselected by default;
run them with `pytest -m integration`.
"""

import asyncio

import pytest

from app.routes.tools.fda import STATUS_SUCCESS, search_drug
from app.utils.api_clients import ClientConfig
from app.utils.openfda import OpenFdaClient

# Brand and generic names that should reliably match a label
INTEGRATION_DRUGS = [
    "Advil",        # Brand name
    "ibuprofen",    # Generic name
    "Lipitor",      # Prescription brand
]

def run_search(drug_name):
    async def run():
        async with OpenFdaClient(ClientConfig.from_env()) as client:
            return await search_drug(client, drug_name)
    return asyncio.run(run())

@pytest.mark.integration
@pytest.mark.parametrize("drug_name", INTEGRATION_DRUGS)
def test_common_drugs_return_a_label(drug_name):
    outcome = run_search(drug_name)

    assert outcome.status == STATUS_SUCCESS, f"{drug_name}: {outcome.message}"
    assert outcome.label.drug_name
    assert outcome.label.benefits

@pytest.mark.integration
def test_nonexistent_drug_does_not_succeed():
    # openFDA answers an unmatched search with 404, which surfaces as an error
    outcome = run_search("xyznonexistentdrugabc123")

    assert outcome.status != STATUS_SUCCESS
    assert outcome.label is None
    assert outcome.message
