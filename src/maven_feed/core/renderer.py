"""
Feed rendering for artifact releases.

Maps artifacts to feed items and serializes the feed as RSS 2.0 or Atom
(via feedgen) or as JSON Feed 1.1.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Optional

from feedgen.feed import FeedGenerator

from maven_feed.logger import get_logger
from maven_feed.models.artifact import Artifact

logger = get_logger(__name__)

FEED_TITLE = "Maven Libraries Versions"
FEED_DESCRIPTION = "Lists versions of Maven libraries"
ARTIFACT_URL_TEMPLATE = "https://search.maven.org/artifact/{group}/{name}/{version}/jar"
JSON_FEED_VERSION = "https://jsonfeed.org/version/1.1"


class FeedRenderError(Exception):
    """Raised when a feed cannot be serialized."""


class FeedFormat(str, Enum):
    """Supported output formats."""

    RSS = "rss"
    ATOM = "atom"
    JSON = "json"

    @property
    def content_type(self) -> str:
        """HTTP content type of the serialized feed."""
        return _CONTENT_TYPES[self]

    @property
    def include_author(self) -> bool:
        """Whether items carry the group as author."""
        return self is FeedFormat.ATOM


_CONTENT_TYPES = {
    FeedFormat.RSS: "application/rss+xml",
    FeedFormat.ATOM: "application/atom+xml",
    FeedFormat.JSON: "application/json",
}


@dataclass(frozen=True)
class FeedItem:
    """A single feed entry describing one artifact version."""

    id: str
    title: str
    link: str
    description: str
    published: datetime
    updated: datetime
    author: Optional[str] = None


@dataclass
class Feed:
    """Feed envelope built fresh for every request."""

    title: str
    description: str
    link: str
    updated: datetime
    items: list[FeedItem] = field(default_factory=list)


def timestamp_to_datetime(timestamp_ms: int) -> datetime:
    """Convert a millisecond epoch timestamp to a UTC datetime, truncated to seconds."""
    return datetime.fromtimestamp(timestamp_ms // 1000, tz=timezone.utc)


def artifact_to_feed_item(artifact: Artifact, include_author: bool) -> FeedItem:
    """Build the feed item for one artifact."""
    coordinates = artifact.coordinates
    published = timestamp_to_datetime(artifact.timestamp)
    description = (
        f"New artifact version: groupId: {artifact.group}; "
        f"artifactId: {artifact.name}; version: {artifact.version}"
    )
    return FeedItem(
        id=coordinates,
        title=coordinates,
        link=ARTIFACT_URL_TEMPLATE.format(
            group=artifact.group, name=artifact.name, version=artifact.version
        ),
        description=description,
        published=published,
        updated=published,
        author=artifact.group if include_author else None,
    )


def artifacts_to_feed_items(artifacts: list[Artifact], include_author: bool) -> list[FeedItem]:
    """Build one feed item per artifact, preserving order."""
    return [artifact_to_feed_item(a, include_author) for a in artifacts]


def build_feed(
    artifacts: list[Artifact],
    self_url: str,
    include_author: bool,
    updated: Optional[datetime] = None,
) -> Feed:
    """Build the feed envelope around the given artifacts.

    Args:
        artifacts: Artifacts in display order
        self_url: Public URL of this feed
        include_author: Attach the group as author of each item
        updated: Feed update time (defaults to now)

    Returns:
        Feed ready for rendering
    """
    return Feed(
        title=FEED_TITLE,
        description=FEED_DESCRIPTION,
        link=self_url,
        updated=updated or datetime.now(timezone.utc),
        items=artifacts_to_feed_items(artifacts, include_author),
    )


def _to_generator(feed: Feed) -> FeedGenerator:
    fg = FeedGenerator()
    fg.id(feed.link)
    fg.title(feed.title)
    fg.description(feed.description)
    fg.link(href=feed.link, rel="alternate")
    fg.link(href=feed.link, rel="self")
    fg.updated(feed.updated)

    for item in feed.items:
        # feedgen prepends by default
        entry = fg.add_entry(order="append")
        entry.id(item.id)
        entry.guid(item.id, permalink=False)
        entry.title(item.title)
        entry.link(href=item.link)
        entry.description(item.description)
        entry.content(item.description)
        entry.published(item.published)
        entry.updated(item.updated)
        if item.author:
            entry.author({"name": item.author})

    return fg


def _to_rss(feed: Feed) -> str:
    return _to_generator(feed).rss_str(pretty=True).decode("utf-8")


def _to_atom(feed: Feed) -> str:
    return _to_generator(feed).atom_str(pretty=True).decode("utf-8")


def _to_json(feed: Feed) -> str:
    items = []
    for item in feed.items:
        data = {
            "id": item.id,
            "url": item.link,
            "title": item.title,
            "summary": item.description,
            "content_text": item.description,
            "date_published": item.published.isoformat(),
            "date_modified": item.updated.isoformat(),
        }
        if item.author:
            data["authors"] = [{"name": item.author}]
        items.append(data)

    document = {
        "version": JSON_FEED_VERSION,
        "title": feed.title,
        "home_page_url": feed.link,
        "feed_url": feed.link,
        "description": feed.description,
        "items": items,
    }
    return json.dumps(document, indent=2, ensure_ascii=False)


_SERIALIZERS: dict[FeedFormat, Callable[[Feed], str]] = {
    FeedFormat.RSS: _to_rss,
    FeedFormat.ATOM: _to_atom,
    FeedFormat.JSON: _to_json,
}


def render_feed(feed: Feed, feed_format: FeedFormat) -> str:
    """Serialize a feed in the requested format.

    Args:
        feed: Feed to serialize
        feed_format: Output format

    Returns:
        Serialized document

    Raises:
        FeedRenderError: If serialization fails
    """
    serializer = _SERIALIZERS[feed_format]
    try:
        output = serializer(feed)
    except (ValueError, TypeError) as e:
        raise FeedRenderError(f"Error converting feed to {feed_format.value}: {e}") from e

    logger.debug(f"Rendered {len(feed.items)} items as {feed_format.value}")
    return output
