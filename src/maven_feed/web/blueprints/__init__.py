"""
API blueprints for the web application.
"""

from maven_feed.web.blueprints.feeds import ERROR_BODY, FeedBlueprint

__all__ = [
    "ERROR_BODY",
    "FeedBlueprint",
]
