"""
Exceptions for game-related errors.
"""

from typing import Optional


class MansionError(Exception):
    """Base class for all game errors."""


class AllocationFailure(MansionError):
    """Raised when a room, ledger node, index entry or history slot cannot be allocated."""
    
    def __init__(self, structure: str, detail: str = ""):
        self.structure = structure
        self.detail = detail
        self.message = f"Could not allocate {structure}" + (f": {detail}" if detail else "")
        super().__init__(self.message)


class InvalidCommand(MansionError):
    """Raised when exploration input is not one of the known commands."""
    
    def __init__(self, command: str):
        self.command = command
        self.message = f"Invalid option {command!r}. Use 'e', 'd' or 's'."
        super().__init__(self.message)


class UnavailableMove(MansionError):
    """Raised when the player picks a direction with no room behind it."""
    
    def __init__(self, room_name: str, direction: str):
        self.room_name = room_name
        self.direction = direction
        self.message = f"No path to the {direction} from {room_name}."
        super().__init__(self.message)


class EmptyAccusation(MansionError):
    """Raised when the player submits an empty accusation."""
    
    def __init__(self, message: Optional[str] = None):
        self.message = message or "No name given. Accusation cancelled."
        super().__init__(self.message)


class MapDefinitionError(MansionError):
    """Raised when a map file does not describe a valid room tree."""
