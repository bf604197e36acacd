"""Configuration settings for hand classification."""

from dataclasses import dataclass, field
from pathlib import Path

import yaml


class ConfigError(ValueError):
    """A config file exists but cannot be parsed into a Config."""


@dataclass
class ClassifierConfig:
    """Classifier configuration."""

    validate: bool = True  # reject hands that are not five distinct cards


@dataclass
class DisplayConfig:
    """Terminal output configuration."""

    use_symbols: bool = True  # ♥ instead of h
    show_tally: bool = False


@dataclass
class Config:
    """Complete configuration."""

    classifier: ClassifierConfig = field(default_factory=ClassifierConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)


def load_config(path: str | Path) -> Config:
    """Load configuration from YAML file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file must be a mapping of sections: {path}")

    config = Config()

    try:
        if "classifier" in data:
            config.classifier = ClassifierConfig(**data["classifier"])
        if "display" in data:
            config.display = DisplayConfig(**data["display"])
    except TypeError as e:
        raise ConfigError(f"Invalid config in {path}: {e}") from e

    return config


def save_config(config: Config, path: str | Path) -> None:
    """Save configuration to YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "classifier": {
            "validate": config.classifier.validate,
        },
        "display": {
            "use_symbols": config.display.use_symbols,
            "show_tally": config.display.show_tally,
        },
    }

    with open(path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)


# Default configuration
DEFAULT_CONFIG = Config()
