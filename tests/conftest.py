"""
Pytest configuration and shared fixtures for the openFDA label tests.
"""

import dataclasses

import httpx
import pytest

from app.utils.api_clients import ClientConfig
from app.utils.openfda import OpenFdaClient

ADVIL_LABEL = {
    "id": "b3a1c6f8-0000-4a8e-9d3c-advil",
    "indications_and_usage": ["Uses temporarily relieves minor aches and pains"],
    "warnings": ["Allergy alert: Ibuprofen may cause a severe allergic reaction"],
    "adverse_reactions": ["Stomach bleeding warning"],
    "dosage_and_administration": ["Adults: take 1 tablet every 4 to 6 hours"],
    "openfda": {
        "brand_name": ["Advil"],
        "generic_name": ["IBUPROFEN"],
        "manufacturer_name": ["Haleon US Holdings LLC"],
        "route": ["ORAL"],
    },
    "effective_time": "20230101",
}

@pytest.fixture
def config():
    """Configuration pointing at the real host; requests never leave MockTransport."""
    return ClientConfig(base_url="https://api.fda.gov", timeout=30.0, api_key=None)

@pytest.fixture
def advil_label():
    return dict(ADVIL_LABEL)

@pytest.fixture
def make_client(config):
    """Return a factory building an OpenFdaClient whose requests go to handler."""
    def factory(handler, **overrides):
        client_config = dataclasses.replace(config, **overrides)
        return OpenFdaClient(client_config, transport=httpx.MockTransport(handler))
    return factory
