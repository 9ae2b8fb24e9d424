"""Unit tests for configuration management."""

from pathlib import Path

import pytest

from interest_calc.calculator import InterestCalculator
from interest_calc.config.defaults import DefaultConfig, get_default_config
from interest_calc.config.loader import ConfigLoader
from interest_calc.config.validation import ConfigValidator
from interest_calc.errors import ConfigurationError


def write_config(config_dir: Path, text: str) -> None:
    (config_dir / "calculator.yaml").write_text(text)


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        """Test that default configuration can be created."""
        config = get_default_config()
        assert config is not None
        assert config.rounding.decimal_places == 2
        assert config.compounding.default_frequency == 1
        assert config.logging.level == "INFO"
        assert config.logging.format_json is False


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self) -> None:
        """Test that ConfigLoader can be created."""
        loader = ConfigLoader.create()
        assert loader is not None
        assert isinstance(loader.config_dir, Path)

    def test_merge_config_defaults_only(self, tmp_path: Path) -> None:
        """Test config merging without a configuration file."""
        loader = ConfigLoader.create(tmp_path)
        config = loader.merge_config()

        assert config["rounding"]["decimal_places"] == 2
        assert config["compounding"]["default_frequency"] == 1

    def test_merge_config_with_file(self, tmp_path: Path) -> None:
        """Test file values override defaults."""
        write_config(tmp_path, "rounding:\n  decimal_places: 4\n")
        loader = ConfigLoader.create(tmp_path)

        config = loader.merge_config()

        assert config["rounding"]["decimal_places"] == 4
        # Other defaults should remain
        assert config["compounding"]["default_frequency"] == 1

    def test_merge_config_with_overrides(self, tmp_path: Path) -> None:
        """Test call overrides win over file values."""
        write_config(tmp_path, "rounding:\n  decimal_places: 4\ncompounding:\n  default_frequency: 12\n")
        loader = ConfigLoader.create(tmp_path)

        config = loader.merge_config({"rounding": {"decimal_places": 3}})

        assert config["rounding"]["decimal_places"] == 3
        assert config["compounding"]["default_frequency"] == 12

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test an empty file leaves the defaults untouched."""
        write_config(tmp_path, "")
        loader = ConfigLoader.create(tmp_path)
        assert loader.merge_config() == loader.merge_config({})

    def test_non_mapping_file(self, tmp_path: Path) -> None:
        """Test a file that is not a mapping is rejected."""
        write_config(tmp_path, "- 1\n- 2\n")
        loader = ConfigLoader.create(tmp_path)

        with pytest.raises(ConfigurationError):
            loader.merge_config()

    def test_load_config(self, tmp_path: Path) -> None:
        """Test building a DefaultConfig from the merged values."""
        write_config(tmp_path, "compounding:\n  default_frequency: 4\n")
        loader = ConfigLoader.create(tmp_path)

        config = loader.load_config()

        assert isinstance(config, DefaultConfig)
        assert config.compounding.default_frequency == 4
        assert config.rounding.decimal_places == 2

    def test_load_config_invalid_values(self, tmp_path: Path) -> None:
        """Test invalid values raise ConfigurationError listing every problem."""
        write_config(tmp_path, "rounding:\n  decimal_places: -1\ncompounding:\n  default_frequency: 0\n")
        loader = ConfigLoader.create(tmp_path)

        with pytest.raises(ConfigurationError) as exc_info:
            loader.load_config()

        fields = {error.field for error in exc_info.value.errors}
        assert fields == {"decimal_places", "default_frequency"}

    def test_load_config_unknown_key(self, tmp_path: Path) -> None:
        """Test unknown keys are reported as configuration errors."""
        write_config(tmp_path, "rounding:\n  precision: 3\n")
        loader = ConfigLoader.create(tmp_path)

        with pytest.raises(ConfigurationError):
            loader.load_config()

    def test_load_config_misspelled_section(self, tmp_path: Path) -> None:
        """Test a misspelled section in the file is rejected."""
        write_config(tmp_path, "roundng:\n  decimal_places: 4\n")
        loader = ConfigLoader.create(tmp_path)

        with pytest.raises(ConfigurationError) as exc_info:
            loader.load_config()

        assert [error.field for error in exc_info.value.errors] == ["roundng"]

    def test_load_config_misspelled_override(self, tmp_path: Path) -> None:
        """Test a misspelled section in call overrides is rejected."""
        loader = ConfigLoader.create(tmp_path)

        with pytest.raises(ConfigurationError):
            loader.load_config({"compunding": {"default_frequency": 12}})

    def test_calculator_uses_loaded_config(self, tmp_path: Path) -> None:
        """Test loaded precision drives default rounding."""
        write_config(tmp_path, "rounding:\n  decimal_places: 1\n")
        calculator = InterestCalculator(ConfigLoader.create(tmp_path).load_config())

        assert calculator.round_amount(123.456789) == 123.5

    def test_shipped_config_is_valid(self) -> None:
        """Test the repository configuration file validates."""
        loader = ConfigLoader.create()
        assert ConfigValidator.validate_config(loader.merge_config()) == []


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_valid_config(self) -> None:
        """Test validation of valid parameters."""
        config = {
            "rounding": {"decimal_places": 2},
            "compounding": {"default_frequency": 12},
            "logging": {"level": "debug", "format_json": True},
        }
        assert ConfigValidator.validate_config(config) == []

    @pytest.mark.parametrize("value", [-1, 1.5, "2", True])
    def test_invalid_decimal_places(self, value) -> None:
        """Test validation of invalid decimal_places."""
        errors = ConfigValidator.validate_rounding_params({"decimal_places": value})
        assert len(errors) == 1
        assert errors[0].field == "decimal_places"

    @pytest.mark.parametrize("value", [0, -4, 2.0, None])
    def test_invalid_default_frequency(self, value) -> None:
        """Test validation of invalid default_frequency."""
        errors = ConfigValidator.validate_compounding_params({"default_frequency": value})
        assert len(errors) == 1
        assert errors[0].field == "default_frequency"

    def test_invalid_logging_params(self) -> None:
        """Test validation of invalid logging parameters."""
        errors = ConfigValidator.validate_logging_params({"level": "LOUD", "format_json": "yes"})
        assert [error.field for error in errors] == ["level", "format_json"]

    def test_section_not_mapping(self) -> None:
        """Test a section holding a scalar is reported."""
        errors = ConfigValidator.validate_config({"rounding": 2})
        assert len(errors) == 1
        assert errors[0].field == "rounding"

    def test_unknown_section(self) -> None:
        """Test sections other than rounding, compounding and logging are reported."""
        errors = ConfigValidator.validate_config({
            "rounding": {"decimal_places": 2},
            "roundng": {"decimal_places": 4},
        })
        assert len(errors) == 1
        assert errors[0].field == "roundng"
        assert errors[0].value == {"decimal_places": 4}
