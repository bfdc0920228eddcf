"""
Core game components: the room tree, clue ledger, suspect index, state and judge.
"""

from .room import Room, create_room, destroy_tree, iter_rooms, build_tree
from .clue_ledger import ClueLedger, ClueNode
from .suspect_index import SuspectIndex, djb2_hash
from .game_state import GameState, GamePhase
from .judge import Judge, Verdict, VerdictOutcome, GUILTY_THRESHOLD
from .narrator import Narrator
from .exceptions import (
    MansionError,
    AllocationFailure,
    InvalidCommand,
    UnavailableMove,
    EmptyAccusation,
    MapDefinitionError,
)

__all__ = [
    'Room',
    'create_room',
    'destroy_tree',
    'iter_rooms',
    'build_tree',
    'ClueLedger',
    'ClueNode',
    'SuspectIndex',
    'djb2_hash',
    'GameState',
    'GamePhase',
    'Judge',
    'Verdict',
    'VerdictOutcome',
    'GUILTY_THRESHOLD',
    'Narrator',
    'MansionError',
    'AllocationFailure',
    'InvalidCommand',
    'UnavailableMove',
    'EmptyAccusation',
    'MapDefinitionError',
]
