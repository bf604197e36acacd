"""Tests for configuration loading and saving (config/settings.py)."""

import pytest
import yaml

from config.settings import (
    DEFAULT_CONFIG,
    ClassifierConfig,
    Config,
    ConfigError,
    DisplayConfig,
    load_config,
    save_config,
)


class TestConfig:
    def test_defaults(self):
        assert DEFAULT_CONFIG.classifier.validate is True
        assert DEFAULT_CONFIG.display.use_symbols is True
        assert DEFAULT_CONFIG.display.show_tally is False

    def test_save_then_load(self, config_file):
        config = Config(
            classifier=ClassifierConfig(validate=False),
            display=DisplayConfig(use_symbols=False, show_tally=True),
        )
        save_config(config, config_file)

        assert config_file.exists()
        assert load_config(config_file) == config

    def test_partial_file_keeps_other_defaults(self, config_file):
        config_file.parent.mkdir(parents=True)
        config_file.write_text(yaml.safe_dump({"display": {"show_tally": True}}))

        config = load_config(config_file)
        assert config.display.show_tally is True
        assert config.display.use_symbols is True
        assert config.classifier == ClassifierConfig()

    def test_empty_file_gives_defaults(self, config_file):
        config_file.parent.mkdir(parents=True)
        config_file.write_text("")
        assert load_config(config_file) == Config()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_unknown_key_rejected(self, config_file):
        config_file.parent.mkdir(parents=True)
        config_file.write_text(yaml.safe_dump({"classifier": {"wild_cards": True}}))
        with pytest.raises(ConfigError, match="wild_cards"):
            load_config(config_file)

    def test_malformed_yaml_rejected(self, config_file):
        config_file.parent.mkdir(parents=True)
        config_file.write_text("classifier: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(config_file)

    def test_non_mapping_rejected(self, config_file):
        config_file.parent.mkdir(parents=True)
        config_file.write_text("- classifier\n")
        with pytest.raises(ConfigError):
            load_config(config_file)

    def test_config_error_is_value_error(self):
        assert issubclass(ConfigError, ValueError)
