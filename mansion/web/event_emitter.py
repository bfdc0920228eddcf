"""
Event emitter for recording session events.
"""

from typing import Dict, Any, Optional, List

from .run_recorder import RunRecorder


class EventEmitter:
    """Collects session events in memory and forwards them to an optional recorder."""
    
    def __init__(self, run_recorder: Optional[RunRecorder] = None):
        self.run_recorder = run_recorder
        self.events: List[Dict[str, Any]] = []
    
    def _emit(self, event_type: str, data: Dict[str, Any]) -> None:
        """Emit an event."""
        self.events.append({"event_type": event_type, "data": data})
        if self.run_recorder:
            try:
                self.run_recorder.record_event(event_type, data)
            except OSError as e:
                # Don't let recording errors break the game
                print(f"Error recording event: {e}")
    
    def events_of_type(self, event_type: str) -> List[Dict[str, Any]]:
        """Get the data of every emitted event of one type."""
        return [e["data"] for e in self.events if e["event_type"] == event_type]
    
    def emit_session_start(self, start_room: Optional[str], room_count: int, suspects: List[str]) -> None:
        """Emit session start event."""
        self._emit("session_start", {
            "start_room": start_room,
            "room_count": room_count,
            "suspects": suspects
        })
    
    def emit_room_entered(self, room: str, clue: Optional[str], suspect: Optional[str], step: int) -> None:
        """Emit room entered event."""
        self._emit("room_entered", {
            "room": room,
            "clue": clue,
            "suspect": suspect,
            "step": step
        })
    
    def emit_clue_collected(self, clue: str, is_new: bool) -> None:
        """Emit clue collected event."""
        self._emit("clue_collected", {
            "clue": clue,
            "is_new": is_new
        })
    
    def emit_move_rejected(self, room: str, command: str, reason: str) -> None:
        """Emit rejected move event (invalid command or unavailable direction)."""
        self._emit("move_rejected", {
            "room": room,
            "command": command,
            "reason": reason
        })
    
    def emit_allocation_failure(self, structure: str, message: str) -> None:
        """Emit allocation failure event."""
        self._emit("allocation_failure", {
            "structure": structure,
            "message": message
        })
    
    def emit_exploration_end(self, visit_history: List[str], clues: List[str]) -> None:
        """Emit exploration end event."""
        self._emit("exploration_end", {
            "visit_history": visit_history,
            "clues": clues
        })
    
    def emit_verdict(self, outcome: str, accused: str, suspect: Optional[str],
                     clue_count: int, tally: Dict[str, int]) -> None:
        """Emit verdict event."""
        self._emit("verdict", {
            "outcome": outcome,
            "accused": accused,
            "suspect": suspect,
            "clue_count": clue_count,
            "tally": tally
        })
