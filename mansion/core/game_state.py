"""
Session state: the mansion map, collected evidence and where the player has been.
"""

from enum import Enum
from typing import List, Optional, Dict, Any
from dataclasses import dataclass, field

from .room import Room, destroy_tree
from .clue_ledger import ClueLedger
from .suspect_index import SuspectIndex
from .exceptions import AllocationFailure


class GamePhase(Enum):
    """Current game phase."""
    SETUP = "setup"
    EXPLORATION = "exploration"
    VERDICT = "verdict"
    GAME_OVER = "game_over"


@dataclass
class GameState:
    """Complete state of one investigation session."""
    root: Optional[Room] = None
    suspect_index: SuspectIndex = field(default_factory=SuspectIndex)
    ledger: ClueLedger = field(default_factory=ClueLedger)
    phase: GamePhase = GamePhase.SETUP
    current_room: Optional[Room] = None
    
    # Room names in the order they were entered
    visit_history: List[str] = field(default_factory=list)
    action_log: List[Dict[str, Any]] = field(default_factory=list)
    
    def start_exploration(self) -> None:
        """Transition to exploration, standing at the root."""
        self.phase = GamePhase.EXPLORATION
        self.current_room = self.root
        self._log_action("exploration_start", {"room": self.root.name if self.root else None})
    
    def start_verdict(self) -> None:
        """Transition to the verdict phase."""
        self.phase = GamePhase.VERDICT
        self._log_action("verdict_start", {"clues": len(self.ledger)})
    
    def end_game(self) -> None:
        self.phase = GamePhase.GAME_OVER
        self._log_action("game_over", {"rooms_visited": len(self.visit_history)})
    
    def record_visit(self, room: Room) -> None:
        """
        Append a room to the visit history.

        Raises:
            AllocationFailure: If the history cannot grow
        """
        try:
            self.visit_history.append(room.name)
        except MemoryError as e:
            raise AllocationFailure("history slot", room.name) from e
        self._log_action("room_entered", {"room": room.name})
    
    def move_to(self, room: Room) -> None:
        """Make room the current room."""
        self.current_room = room
    
    def collect_clue(self, clue_text: str) -> bool:
        """
        Add a clue to the ledger.
        Returns True if it had not been collected before.
        """
        is_new = self.ledger.add(clue_text)
        if is_new:
            self._log_action("clue_collected", {"clue": clue_text})
        return is_new
    
    def destroy(self) -> None:
        """Release the map, the ledger and the index."""
        destroy_tree(self.root)
        self.root = None
        self.current_room = None
        self.ledger.destroy()
        self.suspect_index.destroy()
    
    def _log_action(self, action_type: str, data: Dict[str, Any]) -> None:
        """Log a game action."""
        self.action_log.append({
            "type": action_type,
            "phase": self.phase.value,
            "data": data
        })
    
    def get_game_summary(self) -> Dict[str, Any]:
        """Get a summary of the current game state."""
        return {
            "phase": self.phase.value,
            "current_room": self.current_room.name if self.current_room else None,
            "rooms_visited": len(self.visit_history),
            "visit_history": list(self.visit_history),
            "clues": self.ledger.clues(),
        }
