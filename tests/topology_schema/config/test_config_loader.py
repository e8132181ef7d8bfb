"""Tests for the config loader module.

This module tests TOML configuration loading for topology-schema.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from topology_schema.config import (
    ConfigLoader,
    OutputConfig,
    TopologySchemaConfig,
    get_default_config,
    load_config,
)
from topology_schema.config.loader import _parse_bool_env
from topology_schema.exceptions import ConfigurationError
from topology_schema.exchange_types import ExchangeType

if TYPE_CHECKING:
    from pathlib import Path


class TestParseBoolEnv:
    """Tests for _parse_bool_env function."""

    def test_truthy_values(self) -> None:
        """Test parsing truthy values."""
        for value in ["true", "True", "1", "yes", "ON", "enabled"]:
            assert _parse_bool_env(value) is True

    def test_falsy_values(self) -> None:
        """Test parsing falsy values."""
        for value in ["false", "FALSE", "0", "no", "off", "disabled"]:
            assert _parse_bool_env(value) is False

    def test_whitespace_handling(self) -> None:
        """Test that whitespace is stripped."""
        assert _parse_bool_env("  true  ") is True

    def test_invalid_value_raises_error(self) -> None:
        """Test that invalid values raise ValueError."""
        with pytest.raises(ValueError, match="Invalid boolean value"):
            _parse_bool_env("maybe")


class TestDefaults:
    """Tests for default configuration."""

    def test_default_values(self) -> None:
        """Test defaults when nothing is configured."""
        config = get_default_config()
        assert config == TopologySchemaConfig()
        assert config.logging.level == "WARNING"
        assert config.output.format == "json"
        assert config.output.indent == 2
        assert config.output.directory == "schemas"
        assert config.output.exchange_types == tuple(ExchangeType)

    def test_no_config_file(self, project_dir: Path) -> None:
        """Test load_config falls back to defaults."""
        assert load_config() == TopologySchemaConfig()

    def test_missing_explicit_path(self, project_dir: Path) -> None:
        """Test a missing explicit path falls back to defaults."""
        assert load_config(project_dir / "nope.toml") == TopologySchemaConfig()

    def test_loader_raises_for_missing_path(self, project_dir: Path) -> None:
        """Test ConfigLoader reports missing files."""
        with pytest.raises(FileNotFoundError):
            ConfigLoader().load_from_toml(project_dir / "nope.toml")

    def test_models_are_frozen(self) -> None:
        """Test configuration cannot be mutated."""
        config = get_default_config()
        with pytest.raises(Exception):  # noqa: B017
            config.output.indent = 4  # type: ignore[misc]


class TestLoadFromToml:
    """Tests for loading TOML files."""

    def test_flat_file(self, project_dir: Path) -> None:
        """Test a topology-schema.toml in the working directory is found."""
        (project_dir / "topology-schema.toml").write_text(
            '[logging]\nlevel = "DEBUG"\nformat = "json"\n\n'
            '[output]\nformat = "yaml"\nindent = 4\nexchange_types = ["topic", "fanout"]\n'
        )
        config = load_config()
        assert config.logging.level == "DEBUG"
        assert config.logging.format == "json"
        assert config.output.format == "yaml"
        assert config.output.indent == 4
        assert config.output.exchange_types == (ExchangeType.TOPIC, ExchangeType.FANOUT)

    def test_pyproject_in_parent(self, project_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the nearest pyproject.toml with a tool table is used."""
        (project_dir / "pyproject.toml").write_text(
            '[project]\nname = "demo"\n\n[tool.topology_schema.output]\ndirectory = "gen"\n'
        )
        nested = project_dir / "src" / "pkg"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        assert load_config().output.directory == "gen"

    def test_pyproject_without_section_is_skipped(self, project_dir: Path) -> None:
        """Test pyproject.toml files without the tool table are ignored."""
        (project_dir / "pyproject.toml").write_text('[project]\nname = "demo"\n')
        assert load_config() == TopologySchemaConfig()

    def test_explicit_tool_style_file(self, tmp_path: Path) -> None:
        """Test an explicit file using the [tool.topology_schema] layout."""
        path = tmp_path / "custom.toml"
        path.write_text('[tool.topology_schema.output]\nformat = "yaml"\n')
        assert load_config(path).output.format == "yaml"

    def test_config_path_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test TOPOLOGY_SCHEMA_CONFIG_PATH points at the config file."""
        path = tmp_path / "elsewhere.toml"
        path.write_text('[output]\ndirectory = "from-env"\n')
        monkeypatch.setenv("TOPOLOGY_SCHEMA_CONFIG_PATH", str(path))
        assert load_config().output.directory == "from-env"

    def test_env_var_substitution(self, project_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test ${VAR} placeholders are substituted."""
        monkeypatch.setenv("SCHEMA_ROOT", "/srv/schemas")
        monkeypatch.delenv("UNSET_VAR_FOR_TEST", raising=False)
        (project_dir / "topology-schema.toml").write_text(
            '[output]\ndirectory = "${SCHEMA_ROOT}/rabbitmq/${UNSET_VAR_FOR_TEST}"\n'
        )
        assert load_config().output.directory == "/srv/schemas/rabbitmq/${UNSET_VAR_FOR_TEST}"


class TestEnvironmentOverrides:
    """Tests for environment variable overrides."""

    def test_overrides_file_values(
        self, project_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test environment variables take precedence over TOML values."""
        (project_dir / "topology-schema.toml").write_text(
            '[logging]\nlevel = "ERROR"\n\n[output]\nformat = "json"\ndirectory = "a"\n'
        )
        monkeypatch.setenv("TOPOLOGY_SCHEMA_LOG_LEVEL", "debug")
        monkeypatch.setenv("TOPOLOGY_SCHEMA_OUTPUT_FORMAT", "YAML")
        monkeypatch.setenv("TOPOLOGY_SCHEMA_OUTPUT_DIR", "b")
        config = load_config()
        assert config.logging.level == "DEBUG"
        assert config.output.format == "yaml"
        assert config.output.directory == "b"

    def test_overrides_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test overrides apply without a config file."""
        monkeypatch.setenv("TOPOLOGY_SCHEMA_LOG_COLOR", "off")
        assert get_default_config().logging.use_color is False

    def test_invalid_bool_is_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test unparseable boolean overrides keep the configured value."""
        monkeypatch.setenv("TOPOLOGY_SCHEMA_LOG_COLOR", "sometimes")
        assert get_default_config().logging.use_color is True

    def test_invalid_override_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test override values are validated."""
        monkeypatch.setenv("TOPOLOGY_SCHEMA_OUTPUT_FORMAT", "xml")
        with pytest.raises(ConfigurationError):
            get_default_config()


class TestInvalidConfig:
    """Tests for invalid configuration content."""

    @pytest.mark.parametrize(
        "content",
        [
            '[output]\nexchange_types = ["headers"]\n',
            "[output]\nexchange_types = []\n",
            "[output]\nindent = -1\n",
            '[output]\nformat = "xml"\n',
            '[output]\nunknown = "value"\n',
            '[logging]\nlevel = "LOUD"\n',
        ],
    )
    def test_rejected_values(self, project_dir: Path, content: str) -> None:
        """Test invalid values raise ConfigurationError."""
        (project_dir / "topology-schema.toml").write_text(content)
        with pytest.raises(ConfigurationError) as exc_info:
            load_config()
        assert "topology-schema.toml" in str(exc_info.value)

    def test_invalid_toml(self, project_dir: Path) -> None:
        """Test unparseable TOML raises ConfigurationError."""
        (project_dir / "topology-schema.toml").write_text("[output\nformat = ")
        with pytest.raises(ConfigurationError, match="invalid TOML"):
            load_config()

    def test_output_model_direct(self) -> None:
        """Test the output model accepts type tags."""
        output = OutputConfig(exchange_types=["x-lvc"])  # type: ignore[list-item]
        assert output.exchange_types == (ExchangeType.X_LVC,)
