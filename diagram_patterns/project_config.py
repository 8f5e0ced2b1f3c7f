"""
JSON-based project configuration for diagram_patterns.

Configuration hierarchy (first found wins):
1. Explicit config file path (CLI ``--config``)
2. Project config (./.diagrams.json)
3. User config (~/.diagrams.json)
4. Built-in defaults

Example .diagrams.json:
{
    "dispatch": {
        "strict": false
    },
    "flyweight": {
        "color_marker": "Color",
        "max_size": null
    },
    "logging": {
        "level": "DEBUG",
        "json_file": "diagrams.log.json",
        "use_colors": false
    }
}
"""

import json
import logging
from dataclasses import dataclass, field, asdict, fields
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from diagram_patterns.kinds import DEFAULT_COLOR_MARKER

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILENAME = ".diagrams.json"


@dataclass
class DispatchConfig:
    """Factory dispatch behaviour."""
    strict: bool = False  # raise UnknownDiagramError instead of ignoring


@dataclass
class FlyweightConfig:
    """Flyweight pool settings."""
    color_marker: str = DEFAULT_COLOR_MARKER
    max_size: Optional[int] = None  # None = never evict


@dataclass
class LoggingConfig:
    """Logging settings."""
    level: Union[str, int] = "INFO"
    json_file: Optional[str] = None
    use_colors: bool = True

    @property
    def level_value(self) -> int:
        """Numeric logging level."""
        if isinstance(self.level, int) and not isinstance(self.level, bool):
            return self.level
        value = logging.getLevelName(str(self.level).upper())
        if not isinstance(value, int):
            raise ValueError(f"Unknown log level: {self.level!r}")
        return value


# Accepted JSON types per known key; bool is checked before int
_VALUE_TYPES: Dict[str, Tuple[type, ...]] = {
    "dispatch.strict": (bool,),
    "flyweight.color_marker": (str,),
    "flyweight.max_size": (int, type(None)),
    "logging.level": (str, int),
    "logging.json_file": (str, type(None)),
    "logging.use_colors": (bool,),
}


def _check_value(section: str, key: str, value: Any) -> None:
    name = f"{section}.{key}"
    accepted = _VALUE_TYPES.get(name)
    if accepted is None:
        return
    if isinstance(value, bool) and bool not in accepted:
        raise ValueError(f"{name}: expected {_type_names(accepted)}, got bool")
    if not isinstance(value, accepted):
        raise ValueError(
            f"{name}: expected {_type_names(accepted)}, got {type(value).__name__}"
        )
    if name == "flyweight.max_size" and value is not None and value < 1:
        raise ValueError(f"{name} must be positive or null, got {value}")


def _type_names(types: Tuple[type, ...]) -> str:
    return " or ".join("null" if t is type(None) else t.__name__ for t in types)


@dataclass
class ProjectConfig:
    """Complete project configuration."""
    dispatch: DispatchConfig = field(default_factory=DispatchConfig)
    flyweight: FlyweightConfig = field(default_factory=FlyweightConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def save(self, path: Union[str, Path]) -> None:
        """Save configuration to JSON file."""
        path = Path(path)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(self.to_json())
        logger.info("Configuration saved to %s", path)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ProjectConfig':
        """Create configuration from dictionary.

        Unknown sections and keys are ignored.

        Args:
            data: Configuration dictionary

        Returns:
            ProjectConfig instance

        Raises:
            ValueError: If data is not an object or a known key has
                a value of the wrong type
        """
        if not isinstance(data, dict):
            raise ValueError(
                f"Configuration must be a JSON object, got {type(data).__name__}"
            )

        config = cls()

        for section in fields(config):
            values = data.get(section.name)
            if not isinstance(values, dict):
                continue
            target = getattr(config, section.name)
            for key, value in values.items():
                if hasattr(target, key):
                    _check_value(section.name, key, value)
                    setattr(target, key, value)

        return config

    @classmethod
    def from_json(cls, json_str: str) -> 'ProjectConfig':
        """Create configuration from JSON string."""
        return cls.from_dict(json.loads(json_str))

    @classmethod
    def load(cls, path: Union[str, Path]) -> 'ProjectConfig':
        """Load configuration from JSON file.

        Args:
            path: Input file path

        Returns:
            ProjectConfig instance

        Raises:
            FileNotFoundError: If file doesn't exist
            json.JSONDecodeError: If file is not valid JSON
        """
        path = Path(path)
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        logger.info("Configuration loaded from %s", path)
        return cls.from_dict(data)


def find_config_file(
    explicit_config: Optional[Union[str, Path]] = None,
) -> Optional[Path]:
    """Find configuration file using search hierarchy.

    Args:
        explicit_config: Explicitly specified config path

    Returns:
        Path to config file if found, None otherwise
    """
    if explicit_config:
        explicit = Path(explicit_config)
        if explicit.exists():
            return explicit
        logger.warning("Explicit config not found: %s", explicit)

    cwd_config = Path.cwd() / CONFIG_FILENAME
    if cwd_config.exists():
        return cwd_config

    home_config = Path.home() / CONFIG_FILENAME
    if home_config.exists():
        return home_config

    return None


def load_config(
    explicit_config: Optional[Union[str, Path]] = None,
) -> ProjectConfig:
    """Load configuration with fallback to defaults.

    Args:
        explicit_config: Explicitly specified config path

    Returns:
        ProjectConfig instance (defaults if no usable config file found)
    """
    config_path = find_config_file(explicit_config)

    if config_path:
        try:
            return ProjectConfig.load(config_path)
        except (json.JSONDecodeError, IOError) as e:
            logger.error("Failed to load config %s: %s", config_path, e)

    return ProjectConfig()
