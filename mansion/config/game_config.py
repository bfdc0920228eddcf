"""
Game configuration and constants.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class GameConfig:
    """Configuration for game parameters."""
    
    # Suspect index
    bucket_count: int = 31  # Fixed for the session once the index is created
    
    # Output
    use_narration: bool = True  # Flavour text only; rooms, history and verdicts always print
    
    # Session recording
    record_runs: bool = False
    runs_dir: str = "runs"
    
    # Map settings
    map_file: Optional[str] = None  # YAML map; the built-in mansion is used when not set


# Default configuration instance
default_config = GameConfig()
