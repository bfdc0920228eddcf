"""
Configuration loader for YAML-based game configurations and mansion maps.
"""

import yaml
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from .game_config import GameConfig, default_config
from .seed_map import MANSION_ROOMS, CLUE_SUSPECTS
from ..core.exceptions import MapDefinitionError


@dataclass
class MapDefinition:
    """Raw map data: nested room mappings plus clue -> suspect pairs."""
    rooms: Optional[Dict[str, Any]]
    suspects: Dict[str, str] = field(default_factory=dict)


def load_config_from_yaml(config_path: str) -> GameConfig:
    """
    Load game configuration from a YAML file.
    
    Args:
        config_path: Path to the YAML configuration file
        
    Returns:
        GameConfig instance with values from YAML file
        
    Raises:
        FileNotFoundError: If the config file doesn't exist
        yaml.YAMLError: If the YAML file is invalid
    """
    config_file = Path(config_path)
    
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    
    with open(config_file, 'r', encoding='utf-8') as f:
        config_dict = yaml.safe_load(f)
    
    if config_dict is None:
        return GameConfig()
    
    # Create config from dict, using defaults for missing values
    config = GameConfig()
    
    for key, value in config_dict.items():
        if hasattr(config, key):
            setattr(config, key, value)
        else:
            # Warn about unknown keys but don't fail
            print(f"Warning: Unknown config key '{key}' in YAML file")
    
    return config


def load_config(config_path: Optional[str] = None) -> GameConfig:
    """
    Load configuration from YAML file or return default.
    
    Args:
        config_path: Optional path to YAML config file. If None, returns default config.
        
    Returns:
        GameConfig instance
    """
    if config_path is None:
        return default_config
    
    return load_config_from_yaml(config_path)


def default_map() -> MapDefinition:
    """The built-in mansion."""
    return MapDefinition(rooms=MANSION_ROOMS, suspects=dict(CLUE_SUSPECTS))


def load_map_from_yaml(map_path: str) -> MapDefinition:
    """
    Load a mansion map from a YAML file.
    
    Expected layout::
    
        rooms:
          name: Hall
          clue: Muddy footprints
          left: {name: Kitchen}
        suspects:
          Muddy footprints: Gardener
    
    Raises:
        FileNotFoundError: If the map file doesn't exist
        MapDefinitionError: If the file is not a valid map
    """
    map_file = Path(map_path)
    
    if not map_file.exists():
        raise FileNotFoundError(f"Map file not found: {map_path}")
    
    with open(map_file, 'r', encoding='utf-8') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise MapDefinitionError(f"Invalid YAML in map file {map_path}: {e}") from e
    
    if data is None:
        return MapDefinition(rooms=None)
    if not isinstance(data, dict):
        raise MapDefinitionError(f"Map file {map_path} must contain a mapping")
    
    suspects = data.get("suspects") or {}
    if not isinstance(suspects, dict):
        raise MapDefinitionError("'suspects' must map clue text to a suspect name")
    for clue, suspect in suspects.items():
        if not isinstance(clue, str) or not clue or not isinstance(suspect, str) or not suspect:
            raise MapDefinitionError(f"Invalid suspect entry: {clue!r} -> {suspect!r}")
    
    return MapDefinition(rooms=data.get("rooms"), suspects=dict(suspects))


def load_map(map_path: Optional[str] = None) -> MapDefinition:
    """Load a map from YAML, or the built-in mansion when no path is given."""
    if map_path is None:
        return default_map()
    return load_map_from_yaml(map_path)
