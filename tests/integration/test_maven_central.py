"""Integration tests against the live Maven Central search API.

These tests make real HTTP requests and are deselected by default;
run them with ``pytest -m integration``.
"""

import feedparser
import pytest

from maven_feed.core.fetcher import ArtifactFetcher
from maven_feed.core.renderer import FeedFormat
from maven_feed.core.services import FeedService
from maven_feed.models import ArtifactSpec


class TestMavenCentral:
    """Integration tests with the real search API."""

    @pytest.mark.integration
    @pytest.mark.slow
    def test_fetch_known_artifact(self):
        """Test fetching versions of a widely used library."""
        fetcher = ArtifactFetcher()

        artifacts = fetcher.fetch_artifacts(ArtifactSpec("org.slf4j", "slf4j-api"), 5)

        assert 0 < len(artifacts) <= 5
        assert all(a.group == "org.slf4j" and a.name == "slf4j-api" for a in artifacts)
        assert all(a.timestamp > 0 for a in artifacts)

    @pytest.mark.integration
    @pytest.mark.slow
    def test_full_pipeline(self, make_config):
        """Test producing an Atom feed for two libraries."""
        from maven_feed.config import DEFAULT_SEARCH_URL

        config = make_config(
            artifacts="org.slf4j:slf4j-api|com.google.guava:guava",
            search_url=DEFAULT_SEARCH_URL,
            max_results=3,
        )

        parsed = feedparser.parse(FeedService(config).produce_feed(FeedFormat.ATOM))

        assert 0 < len(parsed.entries) <= 6
        updated = [e.updated_parsed for e in parsed.entries]
        assert updated == sorted(updated, reverse=True)
