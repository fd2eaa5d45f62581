"""
Configuration management for maven feed.

Uses Pydantic for validation and pydantic-settings for environment variable support.
"""

from typing import Annotated, Any, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from maven_feed.models.artifact import ArtifactSpec

ARTIFACT_SEPARATOR = "|"
COORDINATE_SEPARATOR = ":"

DEFAULT_SEARCH_URL = "https://search.maven.org/solrsearch/select"


class ConfigError(Exception):
    """Raised when the process configuration is missing or malformed."""


def parse_artifact_specs(value: str) -> list[ArtifactSpec]:
    """Parse an ``ARTIFACTS`` string into coordinate pairs.

    The format is ``group1:name1|group2:name2|...``. Every pair must split
    into exactly two non-empty fields.

    Args:
        value: Raw specification string

    Returns:
        One ArtifactSpec per ``|``-separated pair, in input order

    Raises:
        ValueError: If any pair is malformed
    """
    specs = []
    for item in value.split(ARTIFACT_SEPARATOR):
        fields = item.split(COORDINATE_SEPARATOR)
        if len(fields) != 2:
            raise ValueError(f"Invalid artifact specification format: {item!r}")
        group, name = (f.strip() for f in fields)
        if not group or not name:
            raise ValueError(f"Invalid artifact specification format: {item!r}")
        specs.append(ArtifactSpec(group=group, name=name))
    return specs


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    level: Optional[str] = Field(default=None, description="Log level (defaults from DEBUG_ENABLED)")
    format: str = Field(
        default="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        description="Log format"
    )

    # File logging
    file_path: Optional[str] = Field(default=None, description="Log file path (disabled when unset)")
    rotation: str = Field(default="100 MB", description="Log rotation size")
    retention: str = Field(default="30 days", description="Log retention period")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: Optional[str]) -> Optional[str]:
        """Validate log level."""
        if v is None:
            return None
        valid_levels = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]
        v = v.upper()
        if v not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v


class Config(BaseSettings):
    """Main application configuration.

    Read once at startup and passed explicitly to the web layer.
    Empty environment variables count as unset.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Server
    bind_host: str = Field(default="0.0.0.0", description="Server bind host")
    bind_port: int = Field(default=8080, ge=1, le=65535, description="Server bind port")

    # Feed
    artifacts: Annotated[tuple[ArtifactSpec, ...], NoDecode] = Field(
        ..., description="Watched coordinates: group1:name1|group2:name2"
    )
    self_url: str = Field(..., min_length=1, description="Public URL of this feed")
    debug_enabled: bool = Field(default=False, description="Verbose logging of upstream traffic")

    # Upstream
    search_url: str = Field(default=DEFAULT_SEARCH_URL, description="Search API endpoint")
    max_results: int = Field(default=20, ge=1, le=200, description="Rows requested per coordinate pair")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("artifacts", mode="before")
    @classmethod
    def parse_artifacts(cls, v: Any) -> Any:
        """Split the delimited coordinate string into pairs."""
        if isinstance(v, str):
            return tuple(parse_artifact_specs(v))
        return v

    @field_validator("debug_enabled", mode="before")
    @classmethod
    def parse_debug_flag(cls, v: Any) -> bool:
        """Only the literal string ``true`` enables debug output."""
        if isinstance(v, bool):
            return v
        return str(v) == "true"

    @property
    def log_level(self) -> str:
        """Effective log level."""
        if self.logging.level:
            return self.logging.level
        return "DEBUG" if self.debug_enabled else "INFO"

    @property
    def listen_address(self) -> str:
        """Return ``host:port`` for log output."""
        return f"{self.bind_host}:{self.bind_port}"


def load_config(**overrides: Any) -> Config:
    """Load configuration from the environment.

    Args:
        **overrides: Values taking precedence over environment variables

    Returns:
        Validated Config instance

    Raises:
        ConfigError: If a required value is missing or any value is invalid
    """
    try:
        return Config(**overrides)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
