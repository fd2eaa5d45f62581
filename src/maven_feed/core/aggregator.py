"""
Aggregation and ordering of fetched artifacts.
"""

from collections.abc import Iterable

from maven_feed.core.fetcher import ArtifactFetcher
from maven_feed.logger import get_logger
from maven_feed.models.artifact import Artifact, ArtifactSpec

logger = get_logger(__name__)


def aggregate_artifacts(
    fetcher: ArtifactFetcher,
    specs: Iterable[ArtifactSpec],
    max_results: int,
) -> list[Artifact]:
    """Fetch every coordinate pair in order and concatenate the results.

    The first failing fetch propagates and the remaining pairs are skipped.

    Args:
        fetcher: Fetcher used for each query
        specs: Coordinate pairs to query
        max_results: Row cap per query

    Returns:
        All artifacts, grouped by pair in configuration order
    """
    artifacts: list[Artifact] = []
    count = 0
    for spec in specs:
        artifacts.extend(fetcher.fetch_artifacts(spec, max_results))
        count += 1

    logger.debug(f"Aggregated {len(artifacts)} artifacts from {count} coordinate pairs")
    return artifacts


def sort_artifacts_by_timestamp_desc(artifacts: Iterable[Artifact]) -> list[Artifact]:
    """Return a new list ordered newest first."""
    return sorted(artifacts, key=lambda a: a.timestamp, reverse=True)
