import pytest
import yaml

from react_test_generator.config import Config
from react_test_generator.exceptions import ConfigurationError


class TestConfig:
    """Test Config class."""

    def test_defaults_without_file(self):
        """Test None skips file loading and returns defaults."""
        config = Config(None)

        assert config.get('generation.tests_root') == 'tests'
        assert config.get('generation.alias_prefix') == '@/'
        assert config.get('generation.framework') == 'jest'
        assert config.get('generation.on_existing') == 'prompt'
        assert config.get('scanning.skip_type_imports') is True

    def test_missing_file_uses_defaults(self, tmp_path):
        config = Config(str(tmp_path / "absent.yml"))

        assert config.config == Config.DEFAULT_CONFIG

    def test_user_values_are_deep_merged(self, tmp_path):
        """Test a partial file only overrides the keys it names."""
        # Arrange
        config_file = tmp_path / ".reacttestgen.yml"
        config_file.write_text(
            "generation:\n"
            "  framework: vitest\n"
            "  alias_prefix: '~/'\n"
            "scanning:\n"
            "  excluded_packages: ['jest', 'vitest', 'cypress']\n"
        )

        # Act
        config = Config(str(config_file))

        # Assert
        assert config.get('generation.framework') == 'vitest'
        assert config.get('generation.alias_prefix') == '~/'
        assert config.get('generation.tests_root') == 'tests'
        assert config.get('scanning.excluded_packages') == ['jest', 'vitest', 'cypress']
        assert config.get('scanning.excluded_prefixes') == ['@testing-library/', '@jest/', '@vitest/']

    def test_defaults_are_not_mutated(self, tmp_path):
        config_file = tmp_path / "c.yml"
        config_file.write_text("generation:\n  tests_root: __tests__\n")

        Config(str(config_file))

        assert Config.DEFAULT_CONFIG['generation']['tests_root'] == 'tests'

    def test_empty_file_uses_defaults(self, tmp_path):
        config_file = tmp_path / "empty.yml"
        config_file.write_text("")

        assert Config(str(config_file)).config == Config.DEFAULT_CONFIG

    def test_malformed_yaml_uses_defaults(self, tmp_path, caplog):
        """Test broken YAML is logged and ignored."""
        config_file = tmp_path / "broken.yml"
        config_file.write_text("generation: [unclosed\n")

        with caplog.at_level("WARNING", logger="react_test_generator.config"):
            config = Config(str(config_file))

        assert config.config == Config.DEFAULT_CONFIG
        assert any("Failed to load config" in record.getMessage() for record in caplog.records)

    @pytest.mark.parametrize("content", [
        "generation:\n  framework: mocha\n",
        "generation:\n  on_existing: ask-later\n",
    ])
    def test_invalid_values_rejected(self, tmp_path, content):
        config_file = tmp_path / "bad.yml"
        config_file.write_text(content)

        with pytest.raises(ConfigurationError):
            Config(str(config_file))

    @pytest.mark.parametrize("content", [
        "generation:\n  route_file_names: page\n",
        "generation:\n  markup_extensions: .tsx\n",
        "scanning:\n  excluded_packages: [jest, 3]\n",
        "workspace:\n  markers: package.json\n",
    ])
    def test_list_values_must_be_lists(self, tmp_path, content):
        """Test a scalar where a list is expected is rejected instead of split into characters."""
        config_file = tmp_path / "scalar.yml"
        config_file.write_text(content)

        with pytest.raises(ConfigurationError) as exc_info:
            Config(str(config_file))

        assert "must be a list of strings" in exc_info.value.message

    def test_get_with_default(self):
        config = Config(None)

        assert config.get('generation.missing', 'fallback') == 'fallback'
        assert config.get('generation.tests_root.deeper', 'x') == 'x'

    def test_sample_config_round_trips(self, tmp_path):
        """Test the sample file parses back to the defaults."""
        # Arrange
        target = tmp_path / ".reacttestgen.yml"

        # Act
        Config(None).create_sample_config(str(target))

        # Assert
        assert yaml.safe_load(target.read_text()) == Config.DEFAULT_CONFIG
