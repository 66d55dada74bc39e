"""
Configuration loader and typed config classes for edge linking.
"""

import os
import logging
from dataclasses import dataclass, field
from typing import List, Optional
import yaml

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "EDGELINK_CONFIG"


@dataclass
class LinkingConfig:
    min_length: int = 10
    thin: bool = True


@dataclass
class OutputConfig:
    save_labels: bool = True
    save_chains: bool = True
    save_visualization: bool = True
    show_numbers: bool = False


@dataclass
class SystemConfig:
    output_dir: str = "output"
    log_level: str = "INFO"


@dataclass
class Config:
    """Main configuration container."""
    linking: LinkingConfig = field(default_factory=LinkingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    system: SystemConfig = field(default_factory=SystemConfig)


def _dict_to_dataclass(data: dict, cls):
    """Convert a dictionary to a dataclass, handling nested structures."""
    if data is None:
        return cls()

    field_types = {f.name: f.type for f in cls.__dataclass_fields__.values()}
    kwargs = {}

    for key, value in data.items():
        if key in field_types:
            field_type = field_types[key]
            # Check if field type is a dataclass
            if hasattr(field_type, '__dataclass_fields__') and isinstance(value, dict):
                kwargs[key] = _dict_to_dataclass(value, field_type)
            else:
                kwargs[key] = value
        else:
            logger.warning(f"Ignoring unknown {cls.__name__} key: {key}")

    return cls(**kwargs)


def default_config_path() -> str:
    """config/settings.yaml relative to the project root, unless EDGELINK_CONFIG is set."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return env_path

    package_dir = os.path.dirname(os.path.abspath(__file__))
    project_root = os.path.dirname(package_dir)
    return os.path.join(project_root, "config", "settings.yaml")


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to YAML config file. If None, uses EDGELINK_CONFIG
                    or config/settings.yaml relative to the project root.

    Returns:
        Config object with all settings.
    """
    if config_path is None:
        config_path = default_config_path()

    if not os.path.exists(config_path):
        logger.warning(f"Config file not found at {config_path}, using defaults")
        return Config()

    with open(config_path, 'r') as f:
        data = yaml.safe_load(f)

    if data is None:
        return Config()

    return Config(
        linking=_dict_to_dataclass(data.get('linking'), LinkingConfig),
        output=_dict_to_dataclass(data.get('output'), OutputConfig),
        system=_dict_to_dataclass(data.get('system'), SystemConfig),
    )


def validate_config(config: Config) -> List[str]:
    """
    Validate configuration values.

    Returns:
        List of error messages (empty if valid).
    """
    errors = []

    min_length = config.linking.min_length
    if isinstance(min_length, bool) or not isinstance(min_length, int) or min_length < 1:
        errors.append(f"min_length must be a positive integer: {min_length!r}")

    if not isinstance(config.linking.thin, bool):
        errors.append(f"thin must be true or false: {config.linking.thin!r}")

    level = str(config.system.log_level).upper()
    if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        errors.append(f"Invalid log level: {config.system.log_level}")

    if not config.system.output_dir:
        errors.append("output_dir must not be empty")

    return errors


if __name__ == "__main__":
    # Test config loading
    config = load_config()
    print("Loaded configuration:")
    print(f"  Minimum chain length: {config.linking.min_length}")
    print(f"  Thinning: {config.linking.thin}")
    print(f"  Output directory: {config.system.output_dir}")

    errors = validate_config(config)
    if errors:
        print("\nValidation errors:")
        for error in errors:
            print(f"  - {error}")
    else:
        print("\nConfiguration valid!")
