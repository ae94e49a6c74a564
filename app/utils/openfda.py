"""
openFDA Drug Label Client

Searches the openFDA drug label endpoint by brand or generic name.
"""
import logging
from typing import Optional
from urllib.parse import quote, urlencode

import httpx
from pydantic import ValidationError

from app.models.drug_label import DrugLabelResponse
from app.utils.api_clients import ApiRequestError, ClientConfig, create_http_client, process_response

logger = logging.getLogger(__name__)

FDA_LABEL_PATH = "/drug/label.json"


class SearchError(ApiRequestError):
    """Any failed label search: transport, HTTP status or response body."""

    def __init__(self, message: str, transport: bool = False, status_code: Optional[int] = None):
        super().__init__(message, status_code=status_code)
        self.transport = transport


def build_search_expression(drug_name: str) -> str:
    """
    Build the openFDA search expression matching a brand or generic name.

    Args:
        drug_name: Trimmed, non-empty drug name

    Returns:
        Expression of the form openfda.brand_name:"X"+OR+openfda.generic_name:"X"
    """
    return f'openfda.brand_name:"{drug_name}"+OR+openfda.generic_name:"{drug_name}"'


def build_query_string(drug_name: str, api_key: Optional[str] = None) -> str:
    # "+" must reach openFDA unescaped, so the search value is quoted by hand
    query = "search=" + quote(build_search_expression(drug_name), safe="+:")
    if api_key:
        query += "&" + urlencode({"api_key": api_key})
    return query


class OpenFdaClient:
    """Async client for the openFDA drug label endpoint."""

    def __init__(self, config: ClientConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Args:
            config: Transport configuration
            transport: Optional httpx transport override, used by tests
        """
        self.config = config
        self._http = create_http_client(config, transport=transport)

    async def search(self, drug_name: str) -> DrugLabelResponse:
        """
        Search drug labels whose brand or generic name matches drug_name.

        The caller is responsible for trimming drug_name and rejecting empty input.

        Args:
            drug_name: Drug name to search for

        Returns:
            DrugLabelResponse, possibly with no results

        Raises:
            SearchError: on transport failure, non-success status or a malformed body
        """
        url = f"{FDA_LABEL_PATH}?{build_query_string(drug_name, self.config.api_key)}"
        logger.info(f"Searching FDA label database for: {drug_name}")

        try:
            response = await self._http.get(url)
        except httpx.HTTPError as e:
            raise SearchError(str(e) or type(e).__name__, transport=True) from e

        try:
            body = process_response(response)
            return DrugLabelResponse.model_validate(body)
        except ApiRequestError as e:
            raise SearchError(str(e), status_code=e.status_code) from e
        except ValidationError as e:
            raise SearchError(f"Unexpected label response shape: {e.error_count()} errors") from e

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "OpenFdaClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
