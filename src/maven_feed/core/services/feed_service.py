"""
Facade for the feed production pipeline.

Runs fetch, aggregate, sort and render for a single request.
"""

from typing import Optional

from maven_feed.config import Config
from maven_feed.core.aggregator import aggregate_artifacts, sort_artifacts_by_timestamp_desc
from maven_feed.core.fetcher import ArtifactFetcher, create_fetcher
from maven_feed.core.renderer import FeedFormat, build_feed, render_feed
from maven_feed.logger import get_logger


class FeedService:
    """Facade for producing release feeds.

    Holds no state between calls; every call re-fetches from upstream.
    """

    def __init__(self, config: Config, fetcher: Optional[ArtifactFetcher] = None):
        """Initialize feed service.

        Args:
            config: Application configuration
            fetcher: Optional fetcher; one is built from the configuration when omitted
        """
        self.config = config
        self._fetcher = fetcher or create_fetcher(
            search_url=config.search_url,
            debug=config.debug_enabled,
        )
        self._logger = get_logger(__name__)

    def produce_feed(self, feed_format: FeedFormat) -> str:
        """Fetch all configured artifacts and render them.

        Args:
            feed_format: Output format

        Returns:
            Serialized feed document

        Raises:
            ArtifactFetchError: If any upstream query fails
            FeedRenderError: If serialization fails
        """
        artifacts = aggregate_artifacts(
            self._fetcher, self.config.artifacts, self.config.max_results
        )
        sorted_artifacts = sort_artifacts_by_timestamp_desc(artifacts)

        feed = build_feed(
            sorted_artifacts,
            self_url=self.config.self_url,
            include_author=feed_format.include_author,
        )
        output = render_feed(feed, feed_format)

        self._logger.debug(
            f"Produced {feed_format.value} feed with {len(feed.items)} items"
        )
        return output


def create_feed_service(
    config: Config, fetcher: Optional[ArtifactFetcher] = None
) -> FeedService:
    """Create a FeedService instance.

    Args:
        config: Application configuration
        fetcher: Optional fetcher

    Returns:
        Configured FeedService
    """
    return FeedService(config, fetcher=fetcher)
