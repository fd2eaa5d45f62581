"""
Flask application serving the release feeds.
"""

from typing import Optional

from flask import Flask, Response

from maven_feed.config import Config
from maven_feed.core.fetcher import ArtifactFetcher
from maven_feed.core.services import create_feed_service
from maven_feed.logger import get_logger
from maven_feed.web.blueprints import ERROR_BODY, FeedBlueprint

logger = get_logger(__name__)


def create_app(
    config: Config,
    fetcher: Optional[ArtifactFetcher] = None,
) -> Flask:
    """Create and configure Flask application.

    Args:
        config: Application configuration
        fetcher: Optional artifact fetcher (built from config when omitted)

    Returns:
        Configured Flask application
    """
    app = Flask(__name__)

    service = create_feed_service(config, fetcher=fetcher)
    app.register_blueprint(FeedBlueprint(service).blueprint)

    @app.errorhandler(500)
    def server_error(e):
        """Handle unexpected errors without leaking detail."""
        cause = getattr(e, "original_exception", None) or e
        logger.error(f"Server error: {cause!r}")
        return Response(ERROR_BODY, status=500, mimetype="text/plain")

    logger.info(f"Web app created for {len(config.artifacts)} artifacts")

    return app
