"""
Configuration Loader - Load and validate configuration from YAML.

Looks for config.yaml or config/default.yaml. Values passed as overrides
(e.g. from the command line) take precedence over the file.
"""
import logging
import yaml
from pathlib import Path
from typing import Optional, Any, Dict
from dataclasses import dataclass, field, asdict
from copy import deepcopy

from ..game.config import RobotsConfig

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent.parent


@dataclass
class DisplayConfig:
    """Terminal display settings."""
    show_splash: bool = True
    color: bool = True


@dataclass
class ControlsConfig:
    """Extra key bindings, {key: command name}."""
    bindings: Dict[str, str] = field(default_factory=dict)


@dataclass
class HighscoreConfig:
    """Highscore file settings."""
    path: str = "highscore.txt"
    top_n: int = 10


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_file: str = "logs/robots.log"


@dataclass
class Config:
    """Complete application configuration."""
    game: RobotsConfig = field(default_factory=RobotsConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    controls: ControlsConfig = field(default_factory=ControlsConfig)
    highscore: HighscoreConfig = field(default_factory=HighscoreConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _dict_to_dataclass(data: dict, cls: type) -> Any:
    """Convert a dictionary to a dataclass instance."""
    if not data:
        return cls()

    # Get the fields that the dataclass expects
    field_names = {f.name for f in cls.__dataclass_fields__.values()}

    # Filter to only include valid fields
    filtered_data = {k: v for k, v in data.items() if k in field_names}

    return cls(**filtered_data)


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries, with override values taking precedence.

    Args:
        base: Base dictionary
        override: Dictionary with values to override

    Returns:
        Merged dictionary
    """
    result = deepcopy(base)

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = deepcopy(value)

    return result


def _find_config_file() -> Optional[Path]:
    """Find a config file in the usual places."""
    possible_paths = [
        Path("config.yaml"),
        Path("config") / "default.yaml",
        PROJECT_ROOT / "config.yaml",
        PROJECT_ROOT / "config" / "default.yaml",
    ]

    for path in possible_paths:
        if path.exists():
            return path
    return None


def _load_yaml_file(path: Path) -> Dict:
    """Load a YAML file, returning empty dict if not found."""
    if not path.exists():
        return {}

    with open(path, 'r') as f:
        data = yaml.safe_load(f)

    return data if data else {}


def config_from_dict(data: Dict) -> Config:
    """Build a Config from a (possibly partial) nested dictionary."""
    config = Config()

    if 'game' in data:
        config.game = RobotsConfig.from_dict(data['game'] or {})

    if 'display' in data:
        config.display = _dict_to_dataclass(data['display'], DisplayConfig)

    if 'controls' in data:
        config.controls = _dict_to_dataclass(data['controls'], ControlsConfig)

    if 'highscore' in data:
        config.highscore = _dict_to_dataclass(data['highscore'], HighscoreConfig)

    if 'logging' in data:
        config.logging = _dict_to_dataclass(data['logging'], LoggingConfig)

    return config


def load_config(
    config_path: Optional[str] = None,
    overrides: Optional[Dict] = None,
) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to config file (searched for when omitted)
        overrides: Nested dictionary merged on top of the file

    Returns:
        Config object with all settings
    """
    path = Path(config_path) if config_path else _find_config_file()

    if path is None or not path.exists():
        logger.info("No config file found, using defaults")
        data: Dict = {}
    else:
        data = _load_yaml_file(path)
        logger.debug(f"Loaded config from {path}")

    if overrides:
        data = _deep_merge(data, overrides)

    return config_from_dict(data)


def config_to_dict(config: Config) -> Dict:
    """Nested dictionary in the same shape load_config() reads."""
    data = asdict(config)
    data['game'] = config.game.to_dict()
    return data


def save_config(config: Config, config_path: str):
    """
    Save configuration to a YAML file.

    Args:
        config: Config object to save
        config_path: Path to save to
    """
    with open(config_path, 'w') as f:
        yaml.dump(config_to_dict(config), f, default_flow_style=False, sort_keys=False)
