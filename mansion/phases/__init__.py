"""
Game phase handlers.
"""

from .exploration import ExplorationHandler, ExplorationResult, parse_command
from .verdict import VerdictHandler

__all__ = ['ExplorationHandler', 'ExplorationResult', 'parse_command', 'VerdictHandler']
