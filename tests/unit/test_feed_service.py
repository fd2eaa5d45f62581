"""Unit tests for the feed service facade."""

import json

import httpx
import pytest

from maven_feed.core.fetcher import ArtifactParseError
from maven_feed.core.renderer import FeedFormat
from maven_feed.core.services import FeedService, create_feed_service


class TestFeedService:
    """Tests for FeedService.produce_feed."""

    def test_item_count_matches_upstream(
        self, make_config, make_fetcher, bodies_by_artifact, build_search_body
    ):
        """Test that every upstream record becomes one item."""
        handler = bodies_by_artifact(
            {
                "lib-a": build_search_body(("g", "lib-a", "1", 1), ("g", "lib-a", "2", 2)),
                "lib-b": build_search_body(("g", "lib-b", "1", 1), ("g", "lib-b", "2", 2)),
            }
        )
        service = FeedService(make_config(), fetcher=make_fetcher(handler))

        document = json.loads(service.produce_feed(FeedFormat.JSON))

        assert len(document["items"]) == 4

    def test_max_results_from_config(self, make_config, make_fetcher, build_search_body):
        """Test that the configured row cap is sent upstream."""
        requests = []
        fetcher = make_fetcher(
            lambda request: httpx.Response(200, text=build_search_body()), requests=requests
        )
        service = FeedService(make_config(max_results=5), fetcher=fetcher)

        service.produce_feed(FeedFormat.RSS)

        assert {r.url.params["rows"] for r in requests} == {"5"}

    def test_errors_propagate(self, make_config, make_fetcher):
        """Test that pipeline errors reach the caller."""
        service = FeedService(
            make_config(),
            fetcher=make_fetcher(lambda request: httpx.Response(200, text="[]")),
        )

        with pytest.raises(ArtifactParseError):
            service.produce_feed(FeedFormat.ATOM)


class TestCreateFeedService:
    """Tests for create_feed_service."""

    def test_builds_fetcher_from_config(self, make_config):
        """Test the default fetcher settings."""
        config = make_config(debug_enabled=True)

        service = create_feed_service(config)

        assert service.config is config
        assert service._fetcher.search_url == config.search_url
        assert service._fetcher.debug is True
