"""
API Client Utility Module

This module provides the HTTP plumbing shared by the openFDA client:
configuration, httpx client construction, request/response logging and
response processing.
"""
import logging
import os
from dataclasses import dataclass
from typing import Dict, Any, Optional
from dotenv import load_dotenv
import httpx
from httpx import Response

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

# Default request settings
DEFAULT_BASE_URL = "https://api.fda.gov"
DEFAULT_TIMEOUT = 30.0
USER_AGENT = "Dawa/0.1.0"


class ApiRequestError(Exception):
    """Raised when an API call does not produce a usable JSON body."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def parse_timeout(value: Optional[str]) -> float:
    """Seconds from REQUEST_TIMEOUT; unset, non-numeric or non-positive values give the default."""
    if value is None or not value.strip():
        return DEFAULT_TIMEOUT
    try:
        timeout = float(value)
    except ValueError:
        logger.warning(f"Ignoring invalid REQUEST_TIMEOUT={value!r}, using {DEFAULT_TIMEOUT}s")
        return DEFAULT_TIMEOUT
    if timeout <= 0:
        logger.warning(f"Ignoring non-positive REQUEST_TIMEOUT={value!r}, using {DEFAULT_TIMEOUT}s")
        return DEFAULT_TIMEOUT
    return timeout


@dataclass(frozen=True)
class ClientConfig:
    """Transport configuration handed to the openFDA client."""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    api_key: Optional[str] = None
    log_bodies: bool = True

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """
        Build a configuration from environment variables (and a .env file).

        Returns:
            ClientConfig with OPENFDA_BASE_URL, REQUEST_TIMEOUT, FDA_API_KEY
            and LOG_HTTP_BODIES applied over the defaults
        """
        api_key = os.getenv("FDA_API_KEY") or None
        if api_key:
            logger.info("Found API key for FDA_API_KEY")
        else:
            logger.info("No API key found for FDA_API_KEY, will use unauthenticated access")

        return cls(
            base_url=os.getenv("OPENFDA_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            timeout=parse_timeout(os.getenv("REQUEST_TIMEOUT")),
            api_key=api_key,
            log_bodies=os.getenv("LOG_HTTP_BODIES", "true").lower() == "true",
        )


async def log_request(request: httpx.Request) -> None:
    logger.info(f"Making {request.method} request to {request.url}")
    if request.content:
        logger.debug(f"Request body: {request.content.decode('utf-8', errors='replace')}")


async def log_response(response: httpx.Response) -> None:
    request = response.request
    logger.info(f"{request.method} {request.url} -> {response.status_code}")
    if logger.isEnabledFor(logging.DEBUG):
        # Event hooks run before the body is read
        await response.aread()
        logger.debug(f"Response body: {response.text}")


def create_http_client(
    config: ClientConfig,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """
    Create the async HTTP client used for all openFDA calls.

    Args:
        config: Transport configuration (base URL, timeout, body logging)
        transport: Optional transport override, used by tests

    Returns:
        Configured httpx.AsyncClient
    """
    headers = {
        "Accept": "application/json",
        "User-Agent": USER_AGENT,
    }
    event_hooks = {"request": [log_request], "response": []}
    if config.log_bodies:
        event_hooks["response"].append(log_response)

    return httpx.AsyncClient(
        base_url=config.base_url,
        timeout=httpx.Timeout(config.timeout),
        headers=headers,
        event_hooks=event_hooks,
        transport=transport,
    )


def process_response(response: Response) -> Dict[str, Any]:
    """
    Process an HTTP response and return its decoded JSON object.

    Args:
        response: HTTP response object

    Returns:
        Parsed JSON object

    Raises:
        ApiRequestError: on a non-success status or a body that is not a JSON object
    """
    if not response.is_success:
        logger.error(f"HTTP error: {response.status_code} - {response.reason_phrase}")
        raise ApiRequestError(
            f"HTTP {response.status_code}: {response.reason_phrase}",
            status_code=response.status_code,
        )

    content_type = response.headers.get("content-type", "")
    if "application/json" not in content_type:
        logger.warning(f"Response not JSON format. Content-Type: {content_type}")

    try:
        body = response.json()
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError
        logger.error(f"Failed to decode response as JSON: {response.text[:200]}...")
        raise ApiRequestError(f"Invalid JSON body: {e}", status_code=response.status_code) from e

    if not isinstance(body, dict):
        raise ApiRequestError(
            f"Expected a JSON object, got {type(body).__name__}",
            status_code=response.status_code,
        )
    return body
