"""Configuration models for topology-schema."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from topology_schema.exchange_types import ExchangeType


class LoggingConfig(BaseModel):
    """Logging configuration.

    Examples
    --------
    TOML configuration:

    ```toml
    [tool.topology_schema.logging]
    level = "DEBUG"
    format = "rich"
    ```
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    level: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["console", "json", "structured", "rich"] = "structured"
    use_color: bool = True
    include_timestamp: bool = True


class OutputConfig(BaseModel):
    """Defaults for exported schema files.

    Examples
    --------
    TOML configuration:

    ```toml
    [tool.topology_schema.output]
    format = "yaml"
    directory = "schemas/rabbitmq"
    exchange_types = ["direct", "topic"]
    ```
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    format: Literal["json", "yaml"] = Field(default="json", description="Exported file format")
    indent: int = Field(default=2, ge=0, description="Indentation of exported files")
    directory: str = Field(default="schemas", description="Directory schemas are written to")
    exchange_types: tuple[ExchangeType, ...] = Field(
        default=tuple(ExchangeType),
        min_length=1,
        description="Exchange types to export",
    )


class TopologySchemaConfig(BaseModel):
    """Complete topology-schema configuration."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


__all__ = ["LoggingConfig", "OutputConfig", "TopologySchemaConfig"]
