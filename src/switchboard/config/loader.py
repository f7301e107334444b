"""Reading and writing switchboard.yaml."""

from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import ValidationError

from switchboard.config.schema import SwitchboardConfig
from switchboard.errors import SwitchboardError

DEFAULT_CONFIG_PATH = Path.home() / ".switchboard" / "switchboard.yaml"

PathLike = Union[str, Path]


class ConfigError(SwitchboardError):
    """The config file could not be read, parsed or validated."""


def resolve_config_path(path: Optional[PathLike] = None) -> Path:
    """Expand ``~`` in *path*, falling back to ``DEFAULT_CONFIG_PATH``."""
    if path is None:
        return DEFAULT_CONFIG_PATH
    return Path(path).expanduser()


def load_config(path: Optional[PathLike] = None) -> SwitchboardConfig:
    """Load registry policies from YAML.

    A missing or empty file yields the default policies.

    Raises:
        ConfigError: If the file exists but is unreadable, not YAML,
            not a mapping, or fails schema validation
    """
    path = resolve_config_path(path)
    if not path.exists():
        return SwitchboardConfig()

    try:
        raw = yaml.safe_load(path.read_text())
    except OSError as e:
        raise ConfigError(f"Failed to read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if raw is None:
        return SwitchboardConfig()
    if not isinstance(raw, dict):
        raise ConfigError(f"Expected a mapping at the top of {path}, got {type(raw).__name__}")

    try:
        return SwitchboardConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Configuration validation failed for {path}: {e}") from e


def save_config(config: SwitchboardConfig, path: Optional[PathLike] = None) -> Path:
    """Write *config* as YAML, creating parent directories. Returns the path written."""
    path = resolve_config_path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(config.model_dump(), default_flow_style=False, sort_keys=False))
    return path
