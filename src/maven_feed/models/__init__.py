"""Data models for maven feed."""

from maven_feed.models.artifact import (
    Artifact,
    ArtifactSpec,
    SearchResponse,
    SearchResponseData,
)

__all__ = [
    "Artifact",
    "ArtifactSpec",
    "SearchResponse",
    "SearchResponseData",
]
