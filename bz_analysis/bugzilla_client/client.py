"""Bugzilla REST API client using httpx."""

import logging
import os
from typing import Any

import httpx
from pydantic import ValidationError
from rich.console import Console

from .models import BugRecord
from .query import BugQuery, build_query_params

console = Console()
logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://bugzilla.mozilla.org"


class BugzillaError(Exception):
    """Raised when bugs cannot be fetched or the response cannot be parsed."""


class BugzillaClient:
    """Bugzilla REST client with optional API key authentication."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        api_key: str | None = None,
        timeout: float = 60.0,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the Bugzilla client.

        Args:
            base_url: Bugzilla instance root, e.g. https://bugzilla.mozilla.org
            api_key: Bugzilla API key. If None, reads from BUGZILLA_API_KEY
                env var; anonymous access is used when neither is set.
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key or os.getenv("BUGZILLA_API_KEY")
        self.timeout = timeout
        self.transport = transport

    @property
    def headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "User-Agent": "bugzilla-analysis/0.1.0",
        }
        if self.api_key:
            headers["X-BUGZILLA-API-KEY"] = self.api_key
        return headers

    def _get(self, path: str, params: dict[str, str]) -> dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.get(url, params=params, headers=self.headers)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            raise BugzillaError(
                f"HTTP error from {url}: "
                f"{e.response.status_code} {e.response.reason_phrase}"
            ) from e
        except httpx.HTTPError as e:
            raise BugzillaError(f"Request to {url} failed: {e}") from e
        except ValueError as e:
            raise BugzillaError(f"Invalid JSON from {url}: {e}") from e

        if not isinstance(data, dict):
            raise BugzillaError(f"Unexpected response from {url}: not a JSON object")
        if data.get("error"):
            raise BugzillaError(
                f"Bugzilla error {data.get('code')}: {data.get('message', 'unknown')}"
            )
        return data

    def fetch_bugs(self, query: BugQuery) -> list[BugRecord]:
        """Fetch every bug matching the query.

        Args:
            query: Product/component/resolution filter

        Returns:
            List of BugRecord objects in server order

        Raises:
            BugzillaError: On transport errors, HTTP errors or malformed payloads
        """
        params = build_query_params(query)
        console.print(
            f"Fetching bugs from {self.base_url} "
            f"(product={query.product}, component={query.component or 'any'})"
        )
        data = self._get("/rest/bug", params)

        raw_bugs = data.get("bugs")
        if not isinstance(raw_bugs, list):
            raise BugzillaError("Response is missing the 'bugs' list")

        try:
            records = [BugRecord.from_api(bug, query.rank_field) for bug in raw_bugs]
        except ValidationError as e:
            raise BugzillaError(f"Malformed bug record in response: {e}") from e

        logger.info("Fetched %d bug records", len(records))
        return records
