"""
Verdict phase: review the evidence and rule on the player's accusation.
"""

from typing import Dict, Optional, TYPE_CHECKING

from ..core import GameState, Judge, Narrator, Verdict, VerdictOutcome
from ..core.exceptions import EmptyAccusation
from ..agents import BaseAgent

if TYPE_CHECKING:
    from ..web.event_emitter import EventEmitter


class VerdictHandler:
    """Handles the verdict phase: evidence review, accusation and judgment."""
    
    def __init__(self, game_state: GameState, narrator: Narrator,
                 event_emitter: Optional['EventEmitter'] = None):
        self.game_state = game_state
        self.narrator = narrator
        self.event_emitter = event_emitter
        self.judge = Judge(game_state.ledger, game_state.suspect_index)
    
    def show_evidence(self) -> None:
        """List collected clues in order and the suspects known to the index."""
        self.narrator.say("\nClues collected (in order):")
        self.game_state.ledger.traverse(lambda clue: self.narrator.say(f" - {clue}"))
        
        self.narrator.say("\nKnown suspects:")
        suspects = self.game_state.suspect_index.list_distinct_suspects()
        if not suspects:
            self.narrator.say("  (no suspects registered)")
        for name in suspects:
            self.narrator.say(f"  - {name}")
    
    def request_accusation(self, agent: BaseAgent) -> str:
        """
        Ask the player who they accuse.
        
        Raises:
            EmptyAccusation: If the player gives no name
        """
        context = agent.build_context(self.game_state)
        accusation = agent.get_accusation(context).strip()
        if not accusation:
            raise EmptyAccusation()
        return accusation
    
    def report(self, verdict: Verdict) -> None:
        """Print the judgment."""
        if verdict.suspect is None:
            self.narrator.say(verdict.message)
        else:
            self.narrator.say(f"\nYou accused: {verdict.accused}")
            self.narrator.say(f"Clues pointing to this suspect: {verdict.clue_count}")
            self.narrator.say(f"Verdict: {verdict.message}")
    
    def _emit(self, verdict: Verdict, tally: Dict[str, int]) -> None:
        if self.event_emitter:
            self.event_emitter.emit_verdict(
                verdict.outcome.value, verdict.accused, verdict.suspect, verdict.clue_count, tally
            )
    
    def run_verdict_phase(self, agent: BaseAgent) -> Verdict:
        """
        Run the whole verdict phase.
        
        Args:
            agent: Player providing the accusation
            
        Returns:
            The verdict reached
        """
        self.game_state.start_verdict()
        
        if self.game_state.ledger.is_empty():
            verdict = self.judge.no_evidence()
            self.report(verdict)
            self._emit(verdict, {})
            return verdict
        
        self.show_evidence()
        tally = self.judge.build_tally()
        
        try:
            accusation = self.request_accusation(agent)
        except EmptyAccusation as e:
            verdict = Verdict(outcome=VerdictOutcome.CANCELLED, message=e.message)
        else:
            verdict = self.judge.judge(accusation, tally)
        
        self.report(verdict)
        self._emit(verdict, tally)
        return verdict
