"""
Feed blueprint.

This module exposes the RSS, Atom and JSON Feed endpoints.
"""

from flask import Blueprint, Response

from maven_feed.core.fetcher import ArtifactFetchError
from maven_feed.core.renderer import FeedFormat, FeedRenderError
from maven_feed.core.services import FeedService
from maven_feed.logger import get_logger

ERROR_BODY = "Internal error occurred producing feed"

logger = get_logger(__name__)


class FeedBlueprint:
    """Blueprint serving one route per feed format."""

    def __init__(self, service: FeedService):
        """Initialize the feed blueprint.

        Args:
            service: Pipeline service shared by all routes
        """
        self.service = service
        self.blueprint = Blueprint("feeds", __name__)
        self._register_routes()

    def _register_routes(self):
        """Register one GET route per feed format."""
        for feed_format in FeedFormat:
            self.blueprint.add_url_rule(
                f"/{feed_format.value}",
                endpoint=feed_format.value,
                view_func=self._make_view(feed_format),
                methods=["GET"],
            )

    def _make_view(self, feed_format: FeedFormat):
        def view():
            return self._produce_feed(feed_format)

        view.__name__ = f"{feed_format.value}_feed"
        return view

    def _produce_feed(self, feed_format: FeedFormat) -> Response:
        """Run the pipeline and write the feed, or a generic 500 on failure."""
        try:
            output = self.service.produce_feed(feed_format)
        except ArtifactFetchError as e:
            logger.error(f"Error fetching artifacts: {e}")
            return _error_response()
        except FeedRenderError as e:
            logger.error(f"Error converting feed: {e}")
            return _error_response()

        return Response(output, status=200, content_type=feed_format.content_type)


def _error_response() -> Response:
    return Response(ERROR_BODY, status=500, mimetype="text/plain")
