"""Configuration loading for topology-schema."""

from topology_schema.config.loader import ConfigLoader, get_default_config, load_config
from topology_schema.config.models import LoggingConfig, OutputConfig, TopologySchemaConfig

__all__ = [
    "ConfigLoader",
    "LoggingConfig",
    "OutputConfig",
    "TopologySchemaConfig",
    "get_default_config",
    "load_config",
]
