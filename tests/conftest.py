"""
Pytest fixtures for Detective Mansion tests.
"""

import pytest

from mansion.core import GameState, Narrator, SuspectIndex, build_tree
from mansion.config.game_config import GameConfig
from mansion.config.seed_map import MANSION_ROOMS, CLUE_SUSPECTS
from mansion.web import EventEmitter


@pytest.fixture
def game_config():
    """Test game configuration."""
    return GameConfig(
        use_narration=False  # Disable for cleaner test output
    )


@pytest.fixture
def suspect_index():
    """Suspect index seeded with the built-in clue/suspect pairs."""
    index = SuspectIndex(31)
    for clue, suspect in CLUE_SUSPECTS.items():
        index.upsert(clue, suspect)
    return index


@pytest.fixture
def mansion_root():
    """The built-in seven-room mansion."""
    return build_tree(MANSION_ROOMS)


@pytest.fixture
def game_state(mansion_root, suspect_index):
    """Create a fresh game state on the built-in mansion."""
    return GameState(root=mansion_root, suspect_index=suspect_index)


@pytest.fixture
def narrator(game_config):
    """Narrator with flavour text disabled."""
    return Narrator(game_config)


@pytest.fixture
def event_emitter():
    """In-memory event emitter (no files)."""
    return EventEmitter()
