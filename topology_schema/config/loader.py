"""TOML configuration loader for topology-schema."""

from __future__ import annotations

import os
import re
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from topology_schema.config.models import TopologySchemaConfig
from topology_schema.exceptions import ConfigurationError
from topology_schema.logging import get_logger

# Recursively substitutable configuration data
ConfigData = str | dict[str, "ConfigData"] | list["ConfigData"] | int | float | bool | None

_TRUTHY_VALUES = frozenset({"true", "1", "yes", "on", "enabled"})
_FALSY_VALUES = frozenset({"false", "0", "no", "off", "disabled"})

# (environment variable, config section, field)
_ENV_OVERRIDES: tuple[tuple[str, str, str], ...] = (
    ("TOPOLOGY_SCHEMA_LOG_LEVEL", "logging", "level"),
    ("TOPOLOGY_SCHEMA_LOG_FORMAT", "logging", "format"),
    ("TOPOLOGY_SCHEMA_LOG_COLOR", "logging", "use_color"),
    ("TOPOLOGY_SCHEMA_OUTPUT_FORMAT", "output", "format"),
    ("TOPOLOGY_SCHEMA_OUTPUT_DIR", "output", "directory"),
)
_BOOL_ENV_VARS = frozenset({"TOPOLOGY_SCHEMA_LOG_COLOR"})

CONFIG_FILE_NAME = "topology-schema.toml"
TOOL_SECTION = "topology_schema"

logger = get_logger(__name__)


def _parse_bool_env(value: str) -> bool:
    """Parse boolean from environment variable value.

    Raises
    ------
    ValueError
        If value is not a recognized boolean string
    """
    normalized = value.lower().strip()
    if normalized in _TRUTHY_VALUES:
        return True
    if normalized in _FALSY_VALUES:
        return False
    expected = sorted(_TRUTHY_VALUES | _FALSY_VALUES)
    raise ValueError(f"Invalid boolean value: {value!r}. Expected one of: {expected}")


class ConfigLoader:
    """Loads topology-schema configuration from TOML files."""

    ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")

    def load_from_toml(self, path: str | Path | None = None) -> TopologySchemaConfig:
        """Load configuration from a TOML file.

        Parameters
        ----------
        path : str | Path | None
            Path to TOML file. If None, searches for topology-schema.toml or
            a pyproject.toml with a [tool.topology_schema] table

        Returns
        -------
        TopologySchemaConfig
            Parsed configuration with environment overrides applied

        Raises
        ------
        FileNotFoundError
            If no configuration file is found
        ConfigurationError
            If the file is not valid TOML or holds invalid values
        """
        config_path = self._find_config_file(path)
        logger.info("Loading configuration from {path}", path=config_path)

        try:
            with config_path.open("rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(str(config_path), f"invalid TOML: {e}") from e

        # pyproject.toml and tool-style files keep settings under [tool.topology_schema]
        if "tool" in data:
            data = data["tool"].get(TOOL_SECTION, {})
            if not data:
                logger.warning(f"No [tool.{TOOL_SECTION}] section in {config_path}, using defaults")

        data = self._substitute_env_vars(data)
        return self._parse_config(data, source=str(config_path))

    def _find_config_file(self, path: str | Path | None) -> Path:
        """Find the configuration file to load.

        Raises
        ------
        FileNotFoundError
            If no configuration file is found
        """
        if path:
            config_path = Path(path)
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return config_path

        if env_path := os.getenv("TOPOLOGY_SCHEMA_CONFIG_PATH"):
            config_path = Path(env_path)
            if config_path.exists():
                logger.debug(f"Using config from TOPOLOGY_SCHEMA_CONFIG_PATH: {config_path}")
                return config_path
            logger.warning(f"TOPOLOGY_SCHEMA_CONFIG_PATH set but file not found: {config_path}")

        if Path(CONFIG_FILE_NAME).exists():
            return Path(CONFIG_FILE_NAME)

        # Walk up to the nearest pyproject.toml that configures this tool
        current = Path.cwd()
        while True:
            pyproject = current / "pyproject.toml"
            if pyproject.exists():
                with pyproject.open("rb") as f:
                    data = tomllib.load(f)
                if TOOL_SECTION in data.get("tool", {}):
                    return pyproject
            if current == current.parent:
                break
            current = current.parent

        raise FileNotFoundError(
            f"No configuration file found. Searched for: {CONFIG_FILE_NAME}, pyproject.toml"
        )

    def _substitute_env_vars(self, data: ConfigData) -> ConfigData:
        """Replace ``${VAR}`` placeholders in strings with environment values.

        Unknown variables keep their placeholder.
        """
        if isinstance(data, str):

            def replacer(match: re.Match[str]) -> str:
                var_name = match.group(1)
                value = os.getenv(var_name)
                if value is None:
                    logger.debug(
                        f"Environment variable ${{{var_name}}} not found, keeping placeholder"
                    )
                    return match.group(0)
                return value

            return self.ENV_VAR_PATTERN.sub(replacer, data)

        if isinstance(data, dict):
            return {key: self._substitute_env_vars(value) for key, value in data.items()}

        if isinstance(data, list):
            return [self._substitute_env_vars(item) for item in data]

        return data

    def _parse_config(self, data: dict[str, Any], source: str = "config") -> TopologySchemaConfig:
        """Validate raw configuration data, applying environment overrides.

        Raises
        ------
        ConfigurationError
            If the data does not match the configuration models
        """
        sections: dict[str, Any] = dict(data)
        for env_var, section, field in _ENV_OVERRIDES:
            env_value = os.getenv(env_var)
            if not env_value:
                continue
            override: str | bool = env_value
            if env_var in _BOOL_ENV_VARS:
                try:
                    override = _parse_bool_env(env_value)
                except ValueError as e:
                    logger.warning(f"Invalid {env_var} value: {e}")
                    continue
            elif field == "level":
                override = env_value.upper()
            elif field == "format":
                override = env_value.lower()
            logger.debug(f"Overriding {section}.{field} from {env_var}: {override}")
            sections[section] = {**sections.get(section, {}), field: override}

        try:
            return TopologySchemaConfig.model_validate(sections)
        except ValidationError as e:
            raise ConfigurationError(source, str(e)) from e


def get_default_config() -> TopologySchemaConfig:
    """Return the default configuration with environment overrides applied."""
    return ConfigLoader()._parse_config({}, source="environment")


def load_config(path: str | Path | None = None) -> TopologySchemaConfig:
    """Load configuration from a TOML file or return defaults.

    Parameters
    ----------
    path : str | Path | None
        Path to configuration file or None to search

    Returns
    -------
    TopologySchemaConfig
        Loaded configuration, or defaults if no file was found
    """
    try:
        return ConfigLoader().load_from_toml(path)
    except FileNotFoundError:
        logger.info("No configuration file found, using defaults")
        return get_default_config()


__all__ = ["ConfigLoader", "get_default_config", "load_config"]
