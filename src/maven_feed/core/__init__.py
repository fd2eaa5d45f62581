"""Core business logic modules for maven feed."""

from maven_feed.core.aggregator import aggregate_artifacts, sort_artifacts_by_timestamp_desc
from maven_feed.core.fetcher import (
    ArtifactDecodeError,
    ArtifactFetchError,
    ArtifactFetcher,
    ArtifactParseError,
    ArtifactTransportError,
    create_fetcher,
)
from maven_feed.core.renderer import (
    Feed,
    FeedFormat,
    FeedItem,
    FeedRenderError,
    artifacts_to_feed_items,
    build_feed,
    render_feed,
)
from maven_feed.core.services import FeedService, create_feed_service

__all__ = [
    # Service facade
    "FeedService",
    "create_feed_service",
    # Fetching
    "ArtifactFetcher",
    "create_fetcher",
    "aggregate_artifacts",
    "sort_artifacts_by_timestamp_desc",
    # Rendering
    "Feed",
    "FeedFormat",
    "FeedItem",
    "artifacts_to_feed_items",
    "build_feed",
    "render_feed",
    # Errors
    "ArtifactFetchError",
    "ArtifactTransportError",
    "ArtifactDecodeError",
    "ArtifactParseError",
    "FeedRenderError",
]
