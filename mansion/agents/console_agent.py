"""
Console agent: a human typing commands at the terminal.
"""

from typing import Callable

from .base_agent import BaseAgent, AgentContext
from ..config.game_config import GameConfig, default_config


class ConsoleAgent(BaseAgent):
    """Reads moves and the accusation from standard input."""
    
    def __init__(self, config: GameConfig = default_config, input_func: Callable[[str], str] = input):
        super().__init__(config)
        self.input_func = input_func
        self.input_closed = False
    
    def _read(self, prompt: str) -> str:
        try:
            return self.input_func(prompt).strip()
        except EOFError:
            self.input_closed = True
            return ""
    
    def get_move(self, context: AgentContext) -> str:
        line = self._read("Option: ")
        # A closed stdin would otherwise re-prompt forever
        if self.input_closed:
            return "s"
        return line
    
    def get_accusation(self, context: AgentContext) -> str:
        return self._read("\nWho do you accuse? Type the suspect's name: ")
