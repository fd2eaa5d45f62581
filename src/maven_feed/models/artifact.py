"""
Artifact data models.

Coordinate pairs come from configuration; artifact records come from the
Maven Central search API, whose documents use short field names.
"""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


@dataclass(frozen=True)
class ArtifactSpec:
    """A (group, artifact name) pair identifying one library to watch."""

    group: str
    name: str

    def __str__(self) -> str:
        return f"{self.group}:{self.name}"


class Artifact(BaseModel):
    """One published artifact version as returned by the search API.

    Missing fields read as empty strings or zero.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    group: str = Field(default="", alias="g", description="Group identifier")
    name: str = Field(default="", alias="a", description="Artifact identifier")
    version: str = Field(default="", alias="v", description="Version string")
    timestamp: int = Field(default=0, description="Publish time in milliseconds since epoch")

    @property
    def coordinates(self) -> str:
        """Return the ``group:name:version`` form."""
        return f"{self.group}:{self.name}:{self.version}"


class SearchResponseData(BaseModel):
    """The ``response`` object of a search result."""

    docs: list[Artifact] = Field(default_factory=list)

    @field_validator("docs", mode="before")
    @classmethod
    def null_docs_as_empty(cls, v: Any) -> Any:
        """Read ``"docs": null`` as no documents."""
        return [] if v is None else v


class SearchResponse(BaseModel):
    """Top-level envelope of a search result."""

    response: SearchResponseData = Field(default_factory=SearchResponseData)

    @field_validator("response", mode="before")
    @classmethod
    def null_response_as_empty(cls, v: Any) -> Any:
        """Read ``"response": null`` as an empty result."""
        return {} if v is None else v
