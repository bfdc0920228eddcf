"""
Narrator: the single channel for advisory game text.
"""

from typing import List

from ..config.game_config import GameConfig, default_config


class Narrator:
    """
    Prints game text and keeps a transcript of everything said.

    use_narration only gates flavour text (announcements, menus, the intro).
    Rooms, clues, the visit history, verdicts and errors are always printed.
    """
    
    def __init__(self, config: GameConfig = default_config):
        self.config = config
        self.announcements: List[str] = []
    
    def announce(self, message: str) -> None:
        """Make a narrator announcement."""
        self.announcements.append(message)
        if self.config.use_narration:
            print(f"[NARRATOR] {message}")
    
    def narrate(self, message: str) -> None:
        """Print optional plain text such as menus and the intro."""
        self.announcements.append(message)
        if self.config.use_narration:
            print(message)
    
    def say(self, message: str) -> None:
        """Print game information the player always needs."""
        self.announcements.append(message)
        print(message)
    
    def error(self, message: str) -> None:
        """Report a rejected command or failure."""
        self.announcements.append(message)
        print(f"[NARRATOR] {message}")
