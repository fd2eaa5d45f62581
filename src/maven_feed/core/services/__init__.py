"""
Facade services for core modules.

The web layer interacts with these services only, never with the fetcher,
aggregator or renderer directly.

Example:
    from maven_feed.core.services import FeedService

    service = FeedService(config)
    body = service.produce_feed(FeedFormat.ATOM)
"""

from maven_feed.core.services.feed_service import FeedService, create_feed_service

__all__ = [
    "FeedService",
    "create_feed_service",
]
