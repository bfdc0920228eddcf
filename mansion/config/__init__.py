"""Game configuration module."""

from .game_config import GameConfig, default_config
from .config_loader import (
    MapDefinition,
    load_config,
    load_config_from_yaml,
    load_map,
    load_map_from_yaml,
    default_map,
)

__all__ = [
    'GameConfig',
    'default_config',
    'MapDefinition',
    'load_config',
    'load_config_from_yaml',
    'load_map',
    'load_map_from_yaml',
    'default_map',
]
