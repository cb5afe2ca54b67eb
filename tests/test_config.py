"""Tests for configuration system."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from exportclean.config import (
    CleaningConfig,
    ExportConfig,
    LoggingConfig,
    OutputConfig,
    OutputFormat,
    load_config,
)


class TestCleaningConfig:
    """Tests for CleaningConfig."""

    def test_defaults(self) -> None:
        """Test that every normalization is on by default."""
        config = CleaningConfig()
        assert config.report_duplicates is True
        assert config.sanitize_headers is True
        assert config.normalize_dates is True
        assert config.date_columns == []
        assert config.timestamp_separator == " "

    def test_t_separator(self) -> None:
        """Test the ISO 'T' separator is accepted."""
        assert CleaningConfig(timestamp_separator="T").timestamp_separator == "T"

    def test_invalid_separator(self) -> None:
        """Test that other separators are rejected."""
        with pytest.raises(ValueError):
            CleaningConfig(timestamp_separator="/")

    def test_frozen(self) -> None:
        """Test that configs are immutable."""
        config = CleaningConfig()
        with pytest.raises(ValidationError):
            config.report_duplicates = False  # type: ignore[misc]


class TestOutputConfig:
    """Tests for OutputConfig."""

    def test_defaults(self) -> None:
        """Test CSV is the default output format."""
        config = OutputConfig()
        assert config.format == OutputFormat.CSV
        assert config.root_name == "rows"
        assert config.row_name == "row"

    def test_format_from_string(self) -> None:
        """Test format parsing from config text."""
        assert OutputConfig(format="xml").format == OutputFormat.XML

    def test_empty_element_name(self) -> None:
        """Test that blank XML element names are rejected."""
        with pytest.raises(ValueError, match="must not be empty"):
            OutputConfig(root_name="  ")

    @pytest.mark.parametrize("name", ["()", "<>", "2020", "-row"])
    def test_element_name_invalid_after_sanitizing(self, name: str) -> None:
        """Test root and row names are checked in their sanitized form."""
        with pytest.raises(ValueError, match="not a valid XML element name"):
            OutputConfig(root_name=name)
        with pytest.raises(ValueError, match="not a valid XML element name"):
            OutputConfig(row_name=name)

    def test_element_name_sanitized_form_accepted(self) -> None:
        """Test names that become valid once sanitized are accepted."""
        assert OutputConfig(root_name="my rows", row_name="<r>").row_name == "<r>"


class TestLoggingConfig:
    """Tests for LoggingConfig."""

    def test_level_normalized(self) -> None:
        """Test log levels are upper-cased."""
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_invalid_level(self) -> None:
        """Test that unknown log levels raise."""
        with pytest.raises(ValueError, match="Log level must be one of"):
            LoggingConfig(level="LOUD")


class TestLoadConfig:
    """Tests for config loading."""

    def test_no_path_gives_defaults(self) -> None:
        """Test that no config file yields the default config."""
        assert load_config(None) == ExportConfig()

    def test_load_config(self, tmp_path: Path) -> None:
        """Test loading a full config file."""
        config_path = tmp_path / "export.yaml"
        config_path.write_text(
            """
cleaning:
  report_duplicates: false
  date_columns: ["created", "updated"]
  timestamp_separator: "T"

output:
  format: xml
  root_name: customers
  row_name: customer

logging:
  level: warning
""",
            encoding="utf-8",
        )

        config = load_config(config_path)
        assert config.cleaning.report_duplicates is False
        assert config.cleaning.date_columns == ["created", "updated"]
        assert config.cleaning.timestamp_separator == "T"
        assert config.output.format == OutputFormat.XML
        assert config.output.root_name == "customers"
        assert config.logging.level == "WARNING"

    def test_env_var_interpolation(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test ${VAR} and ${VAR:default} substitution."""
        monkeypatch.setenv("EXPORT_FORMAT", "xml")
        monkeypatch.delenv("EXPORT_LOG_LEVEL", raising=False)

        config_path = tmp_path / "export.yaml"
        config_path.write_text(
            """
output:
  format: ${EXPORT_FORMAT}
logging:
  level: ${EXPORT_LOG_LEVEL:ERROR}
""",
            encoding="utf-8",
        )

        config = load_config(config_path)
        assert config.output.format == OutputFormat.XML
        assert config.logging.level == "ERROR"

    def test_base_config_inheritance(self, tmp_path: Path) -> None:
        """Test that base.yaml beside the config is merged underneath."""
        (tmp_path / "base.yaml").write_text(
            """
cleaning:
  sanitize_headers: false
  date_columns: ["created"]
output:
  format: xml
""",
            encoding="utf-8",
        )
        config_path = tmp_path / "export.yaml"
        config_path.write_text(
            """
cleaning:
  date_columns: ["updated"]
""",
            encoding="utf-8",
        )

        config = load_config(config_path)
        assert config.cleaning.sanitize_headers is False
        assert config.cleaning.date_columns == ["updated"]
        assert config.output.format == OutputFormat.XML

    def test_explicit_base_path(self, tmp_path: Path) -> None:
        """Test an explicit base config path."""
        base_path = tmp_path / "shared.yaml"
        base_path.write_text("output:\n  row_name: record\n", encoding="utf-8")
        config_path = tmp_path / "export.yaml"
        config_path.write_text("", encoding="utf-8")

        config = load_config(config_path, base_path=base_path)
        assert config.output.row_name == "record"

    def test_invalid_value(self, tmp_path: Path) -> None:
        """Test that invalid values raise ValueError."""
        config_path = tmp_path / "export.yaml"
        config_path.write_text("output:\n  format: json\n", encoding="utf-8")

        with pytest.raises(ValueError):
            load_config(config_path)

    def test_non_mapping_file(self, tmp_path: Path) -> None:
        """Test that a YAML list is rejected."""
        config_path = tmp_path / "export.yaml"
        config_path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ValueError, match="must contain a mapping"):
            load_config(config_path)
