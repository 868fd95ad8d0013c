"""
Configuration Loader for termslides

Loads presentation configuration from YAML or JSON files.
"""

import json
from pathlib import Path
from typing import Union

import yaml

from .schema import PresentationConfig, SeparatorConfig


def load_config(config_path: Union[str, Path]) -> PresentationConfig:
    """Load presentation configuration from YAML or JSON file.

    Args:
        config_path: Path to configuration file (.yaml, .yml, or .json)

    Returns:
        PresentationConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config format is unsupported or invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    suffix = config_path.suffix.lower()

    with open(config_path, 'r', encoding='utf-8') as f:
        if suffix in ['.yaml', '.yml']:
            data = yaml.safe_load(f)
        elif suffix == '.json':
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported config format: {suffix}. Use .yaml, .yml, or .json")

    return parse_config(data or {})


def parse_config(data: dict) -> PresentationConfig:
    """Parse configuration data into PresentationConfig model.

    Args:
        data: Raw configuration dictionary

    Returns:
        PresentationConfig instance
    """
    data = dict(data)

    # Handle shorthand "separator: '='"
    if 'separator' in data:
        separator = data['separator']
        if isinstance(separator, str):
            data['separator'] = SeparatorConfig(char=separator)
        elif isinstance(separator, dict):
            data['separator'] = SeparatorConfig(**separator)

    return PresentationConfig(**data)


def save_config(config: PresentationConfig, output_path: Union[str, Path]) -> None:
    """Save presentation configuration to YAML or JSON file.

    Args:
        config: PresentationConfig instance to save
        output_path: Path for output file
    """
    output_path = Path(output_path)
    suffix = output_path.suffix.lower()

    data = config.model_dump(exclude_none=True)

    with open(output_path, 'w', encoding='utf-8') as f:
        if suffix in ['.yaml', '.yml']:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
        elif suffix == '.json':
            json.dump(data, f, indent=2)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")


def create_default_config(**overrides) -> PresentationConfig:
    """Create a configuration with defaults, optionally overriding fields.

    Args:
        **overrides: Field values replacing the defaults (None values are ignored)

    Returns:
        PresentationConfig instance
    """
    return parse_config({k: v for k, v in overrides.items() if v is not None})
