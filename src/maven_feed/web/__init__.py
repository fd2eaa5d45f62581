"""Web layer for maven feed."""

from maven_feed.web.app import create_app

__all__ = ["create_app"]
