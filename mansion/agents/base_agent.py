"""
Base agent interface for the player of an investigation.
"""

from typing import List, Optional
from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..core import GameState, GamePhase, Room
from ..config.game_config import GameConfig, default_config


@dataclass
class AgentContext:
    """Context information provided to an agent."""
    game_state: GameState
    current_phase: GamePhase
    current_room: Optional[Room]
    available_actions: List[str]


class BaseAgent(ABC):
    """
    Abstract base class for whoever plays the detective.
    
    This defines the interface that all agent implementations must follow.
    """
    
    def __init__(self, config: GameConfig = default_config):
        self.config = config
    
    @abstractmethod
    def get_move(self, context: AgentContext) -> str:
        """
        Get the next exploration command.
        
        Args:
            context: Current game context
            
        Returns:
            The raw command line ('e', 'd', 's' or anything else)
        """
        pass
    
    @abstractmethod
    def get_accusation(self, context: AgentContext) -> str:
        """
        Get the name of the accused suspect.
        
        Args:
            context: Current game context
            
        Returns:
            Suspect name, or empty text to cancel the accusation
        """
        pass
    
    def build_context(self, game_state: GameState) -> AgentContext:
        """Build the context for the current phase."""
        room = game_state.current_room
        actions = []
        if game_state.phase == GamePhase.EXPLORATION and room is not None:
            if room.has_left:
                actions.append("e")
            if room.has_right:
                actions.append("d")
            actions.append("s")
        elif game_state.phase == GamePhase.VERDICT:
            actions.append("accuse")
        
        return AgentContext(
            game_state=game_state,
            current_phase=game_state.phase,
            current_room=room,
            available_actions=actions
        )
