import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from vufind_search.config.constants import (
    BROWZINE_BACKEND_ID,
    BROWZINE_BASE_URL,
    BROWZINE_TIMEOUT_SECONDS,
)
from vufind_search.core.exceptions import BackendRequestError

logger = logging.getLogger(__name__)


class Connector:
    """
    HTTP client for the BrowZine public API.

    Every request is scoped to one library and authenticated with an
    access token passed as a query parameter.
    """

    def __init__(
        self,
        library_id: str,
        access_token: str,
        base_url: str = BROWZINE_BASE_URL,
        timeout_seconds: float = BROWZINE_TIMEOUT_SECONDS,
        client: Optional[httpx.Client] = None,
    ):
        """
        Initialize BrowZine connector

        Args:
            library_id: BrowZine library identifier
            access_token: API access token
            base_url: API root, must end with a slash
            timeout_seconds: Request timeout
            client: Preconfigured httpx client (tests inject a mock transport)
        """
        if not library_id:
            raise ValueError("library_id is required for BrowZine connector")
        if not access_token:
            raise ValueError("access_token is required for BrowZine connector")

        self._library_id = library_id
        self._access_token = access_token
        self._base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self._client = client or httpx.Client(timeout=timeout_seconds)

    @property
    def library_id(self) -> str:
        return self._library_id

    def _url(self, path: str) -> str:
        return f"{self._base_url}libraries/{self._library_id}/{path}"

    def _request(self, path: str, params: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Perform a GET request; a 404 means "not known to BrowZine" and yields None"""
        query = {**params, "access_token": self._access_token}
        url = self._url(path)
        logger.debug(f"BrowZine request: {url} {params}")

        try:
            response = self._client.get(url, params=query)
        except httpx.HTTPError as e:
            logger.error(f"BrowZine request to {url} failed: {e}")
            raise BackendRequestError(BROWZINE_BACKEND_ID, str(e)) from e

        if response.status_code == 404:
            logger.info(f"BrowZine returned no match for {path}")
            return None
        if response.status_code != 200:
            raise BackendRequestError(
                BROWZINE_BACKEND_ID,
                f"unexpected status {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise BackendRequestError(
                BROWZINE_BACKEND_ID, f"invalid JSON response: {e}"
            ) from e

    def lookup_doi(
        self, doi: str, include_journal: bool = False
    ) -> Optional[Dict[str, Any]]:
        """
        Look up article information for a DOI

        Args:
            doi: DOI to look up
            include_journal: Also return the article's journal

        Returns:
            Decoded API response, or None when the DOI is unknown
        """
        params = {"include": "journal"} if include_journal else {}
        return self._request(f"articles/doi/{quote(doi, safe='')}", params)

    def lookup_issns(self, issns: List[str]) -> Optional[Dict[str, Any]]:
        """
        Look up journal information for one or more ISSNs

        Args:
            issns: ISSNs to look up

        Returns:
            Decoded API response, or None when nothing matches
        """
        if not issns:
            raise ValueError("at least one ISSN is required")
        return self._request("search", {"issns": ",".join(issns)})

    def close(self) -> None:
        self._client.close()

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed
