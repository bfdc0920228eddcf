"""
Scripted agent that replays a fixed list of commands.
"""

from typing import Iterable, List

from .base_agent import BaseAgent, AgentContext
from ..config.game_config import GameConfig, default_config


class ScriptedAgent(BaseAgent):
    """
    Agent with deterministic behavior:
    - Moves: replays the given commands in order, then stops ('s')
    - Accusation: returns the given name ('' cancels)
    """
    
    def __init__(self, moves: Iterable[str] = (), accusation: str = "",
                 config: GameConfig = default_config):
        super().__init__(config)
        self.moves: List[str] = list(moves)
        self.accusation = accusation
        self.moves_played: List[str] = []
    
    def get_move(self, context: AgentContext) -> str:
        if not self.moves:
            return "s"
        move = self.moves.pop(0)
        self.moves_played.append(move)
        return move
    
    def get_accusation(self, context: AgentContext) -> str:
        return self.accusation.strip()
