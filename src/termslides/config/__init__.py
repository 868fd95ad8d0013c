"""Configuration module for termslides."""

from .schema import PresentationConfig, SeparatorConfig
from .loader import load_config, save_config, parse_config, create_default_config

__all__ = [
    'PresentationConfig',
    'SeparatorConfig',
    'load_config',
    'save_config',
    'parse_config',
    'create_default_config',
]
