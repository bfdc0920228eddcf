"""
Agents that play the detective.
"""

from .base_agent import BaseAgent, AgentContext
from .console_agent import ConsoleAgent
from .scripted_agent import ScriptedAgent

__all__ = ['BaseAgent', 'AgentContext', 'ConsoleAgent', 'ScriptedAgent']
