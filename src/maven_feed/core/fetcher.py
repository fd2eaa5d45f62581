"""
Maven Central search client.

Queries the search API for one coordinate pair at a time and parses the
JSON result into Artifact records.
"""

from typing import Optional

import httpx
from pydantic import ValidationError

from maven_feed.config import DEFAULT_SEARCH_URL
from maven_feed.logger import get_logger
from maven_feed.models.artifact import Artifact, ArtifactSpec, SearchResponse

logger = get_logger(__name__)

SEARCH_CORE = "gav"
RESPONSE_FORMAT = "json"


class ArtifactFetchError(Exception):
    """Base error for a failed artifact query."""

    def __init__(self, spec: ArtifactSpec, message: str):
        self.spec = spec
        super().__init__(f"{message} for {spec}")


class ArtifactTransportError(ArtifactFetchError):
    """The request could not be completed or returned an error status."""


class ArtifactDecodeError(ArtifactFetchError):
    """The response body is not valid UTF-8 text."""


class ArtifactParseError(ArtifactFetchError):
    """The response body is not a search result document."""


def build_query(spec: ArtifactSpec) -> str:
    """Build the search expression for one coordinate pair."""
    return f'g:"{spec.group}" AND a:"{spec.name}"'


class ArtifactFetcher:
    """Fetches published versions of artifacts from the search API."""

    def __init__(
        self,
        search_url: str = DEFAULT_SEARCH_URL,
        client: Optional[httpx.Client] = None,
        debug: bool = False,
    ):
        """Initialize artifact fetcher.

        Args:
            search_url: Search API endpoint
            client: Optional HTTP client; a new one is opened per request when omitted
            debug: Log raw response bodies
        """
        self.search_url = search_url
        self.client = client
        self.debug = debug

    def fetch_artifacts(self, spec: ArtifactSpec, max_results: int) -> list[Artifact]:
        """Fetch the latest versions of one artifact.

        Args:
            spec: Coordinate pair to query
            max_results: Maximum number of rows to request

        Returns:
            Artifact records in the order returned by the API

        Raises:
            ArtifactTransportError: On network failure or HTTP error status
            ArtifactDecodeError: If the body is not UTF-8 text
            ArtifactParseError: If the body is not a valid search result
        """
        params = {
            "q": build_query(spec),
            "core": SEARCH_CORE,
            "rows": max_results,
            "wt": RESPONSE_FORMAT,
        }

        url = httpx.URL(self.search_url, params=params)
        logger.debug(f"Fetching artifacts for {spec} from: {url}")

        try:
            response = self._get(url)
        except httpx.HTTPStatusError as e:
            raise ArtifactTransportError(
                spec, f"HTTP {e.response.status_code} fetching data"
            ) from e
        except httpx.HTTPError as e:
            raise ArtifactTransportError(spec, f"Error fetching data: {e}") from e

        try:
            body = response.content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ArtifactDecodeError(spec, f"Error reading body: {e}") from e

        if self.debug:
            logger.debug(f"Received body for {spec}: {body}")

        try:
            parsed = SearchResponse.model_validate_json(body)
        except ValidationError as e:
            raise ArtifactParseError(spec, f"Error parsing data: {e}") from e

        artifacts = parsed.response.docs
        logger.debug(f"Parsed {len(artifacts)} artifacts for {spec}")

        if not artifacts:
            logger.info(f"No artifacts received for {spec}")

        return artifacts

    def _get(self, url: httpx.URL) -> httpx.Response:
        """Issue the search request.

        Raises:
            httpx.HTTPStatusError: On HTTP error status
            httpx.HTTPError: On transport failure
        """
        if self.client is not None:
            response = self.client.get(url)
            response.raise_for_status()
            return response

        with httpx.Client() as client:
            response = client.get(url)
            response.raise_for_status()
            return response


def create_fetcher(
    search_url: str = DEFAULT_SEARCH_URL,
    client: Optional[httpx.Client] = None,
    debug: bool = False,
) -> ArtifactFetcher:
    """Create a configured ArtifactFetcher instance.

    Args:
        search_url: Search API endpoint
        client: Optional HTTP client
        debug: Log raw response bodies

    Returns:
        Configured ArtifactFetcher instance
    """
    return ArtifactFetcher(search_url=search_url, client=client, debug=debug)
