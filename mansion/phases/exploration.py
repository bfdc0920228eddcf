"""
Exploration phase: walk the mansion and collect clues.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, TYPE_CHECKING

from ..core import GameState, Room, Narrator
from ..core.exceptions import AllocationFailure, InvalidCommand, UnavailableMove
from ..agents import BaseAgent

if TYPE_CHECKING:
    from ..web.event_emitter import EventEmitter

# First non-blank character of a command line -> action
COMMANDS = {
    "e": "left",   # esquerda
    "d": "right",  # direita
    "s": "stop",   # sair
}


def parse_command(line: str) -> str:
    """
    Turn a command line into 'left', 'right' or 'stop'.
    Only the first non-whitespace character counts, case-insensitively.
    
    Raises:
        InvalidCommand: If the line is blank or starts with anything else
    """
    stripped = line.lstrip()
    if not stripped:
        raise InvalidCommand(line)
    action = COMMANDS.get(stripped[0].lower())
    if action is None:
        raise InvalidCommand(line)
    return action


@dataclass
class ExplorationResult:
    """Outcome of one exploration session."""
    visit_history: Tuple[str, ...]
    stopped: bool  # Player chose to stop (False for an empty map or a failure)
    rejected_commands: int = 0


class ExplorationHandler:
    """Handles the exploration phase: moving between rooms and collecting clues."""
    
    def __init__(self, game_state: GameState, narrator: Narrator, event_emitter: Optional['EventEmitter'] = None):
        self.game_state = game_state
        self.narrator = narrator
        self.event_emitter = event_emitter
        self.rejected_commands = 0
    
    def enter_room(self, room: Room) -> None:
        """
        Enter a room: record the visit, collect its clue and report who it points at.
        
        Raises:
            AllocationFailure: If the visit cannot be recorded
        """
        self.game_state.move_to(room)
        self.game_state.record_visit(room)
        self.narrator.say(f"\nYou are in: {room.name}")
        
        suspect = None
        if room.has_clue:
            self.narrator.say(f"Clue found: \"{room.clue}\"")
            try:
                is_new = self.game_state.collect_clue(room.clue)
            except AllocationFailure as e:
                self.narrator.error(f"Error: {e.message}. The clue was not recorded.")
                if self.event_emitter:
                    self.event_emitter.emit_allocation_failure(e.structure, e.message)
            else:
                if self.event_emitter:
                    self.event_emitter.emit_clue_collected(room.clue, is_new)
            
            suspect = self.game_state.suspect_index.lookup(room.clue)
            if suspect:
                self.narrator.say(f"  (This clue points to: {suspect})")
            else:
                self.narrator.say("  (No known suspect for this clue)")
        else:
            self.narrator.say("No clue in this room.")
        
        if self.event_emitter:
            self.event_emitter.emit_room_entered(
                room.name, room.clue, suspect, len(self.game_state.visit_history)
            )
    
    def show_options(self, room: Room) -> None:
        """Print the moves available from a room."""
        self.narrator.narrate("Choose an option:")
        if room.has_left:
            self.narrator.narrate("  (e) Go left")
        if room.has_right:
            self.narrator.narrate("  (d) Go right")
        self.narrator.narrate("  (s) Stop exploring")
    
    def apply_command(self, line: str) -> bool:
        """
        Apply one command line at the current room.
        Returns False when exploration should stop.
        
        Raises:
            InvalidCommand: If the line is not a known command
            UnavailableMove: If there is no room in the chosen direction
            AllocationFailure: If the new room's visit cannot be recorded
        """
        action = parse_command(line)
        if action == "stop":
            return False
        
        room = self.game_state.current_room
        target = room.child(action)
        if target is None:
            raise UnavailableMove(room.name, action)
        
        self.enter_room(target)
        return True
    
    def report_history(self) -> None:
        """Print the rooms visited, numbered from 1."""
        history = self.game_state.visit_history
        if history:
            self.narrator.say("\nRooms visited:")
            for i, name in enumerate(history, start=1):
                self.narrator.say(f"  {i}. {name}")
        else:
            self.narrator.say("\nNo room visited.")
    
    def run_exploration(self, agent: BaseAgent) -> ExplorationResult:
        """
        Run the exploration loop until the player stops.
        
        Args:
            agent: Player providing the commands
            
        Returns:
            ExplorationResult with the visit history
        """
        if self.game_state.root is None:
            self.narrator.say("Empty map. There is nothing to explore.")
            return ExplorationResult(visit_history=(), stopped=False)
        
        self.game_state.start_exploration()
        stopped = False
        try:
            self.enter_room(self.game_state.root)
            while True:
                room = self.game_state.current_room
                self.show_options(room)
                context = agent.build_context(self.game_state)
                line = agent.get_move(context)
                
                try:
                    if not self.apply_command(line):
                        stopped = True
                        self.narrator.announce("Leaving the exploration.")
                        break
                except (InvalidCommand, UnavailableMove) as e:
                    self.rejected_commands += 1
                    self.narrator.error(e.message)
                    if self.event_emitter:
                        reason = "invalid_command" if isinstance(e, InvalidCommand) else "unavailable_move"
                        self.event_emitter.emit_move_rejected(room.name, line, reason)
        except AllocationFailure as e:
            self.narrator.error(f"Error: {e.message}. Exploration ends here.")
            if self.event_emitter:
                self.event_emitter.emit_allocation_failure(e.structure, e.message)
        
        self.report_history()
        if self.event_emitter:
            self.event_emitter.emit_exploration_end(
                list(self.game_state.visit_history), self.game_state.ledger.clues()
            )
        
        return ExplorationResult(
            visit_history=tuple(self.game_state.visit_history),
            stopped=stopped,
            rejected_commands=self.rejected_commands
        )
