"""
Integration tests for full game flow.
"""

import pytest
from main import DetectiveGame
from mansion.core import VerdictOutcome
from mansion.config.config_loader import MapDefinition
from mansion.agents import ScriptedAgent, ConsoleAgent


def test_three_rooms_insufficient_evidence(game_config):
    """Test Hall -> Sala de Estar -> Cozinha, then accusing the gardener."""
    game = DetectiveGame(game_config)
    ledger = game.game_state.ledger
    seen = {}

    original = game.verdict_handler.judge.build_tally

    def build_tally():
        seen["clues"] = ledger.clues()
        seen["tally"] = original()
        return seen["tally"]

    game.verdict_handler.judge.build_tally = build_tally
    verdict = game.run_game(ScriptedAgent(["e", "e", "s"], accusation="Jardineiro"))

    assert seen["clues"] == ["Chave perdida", "Livro com página faltando", "Pegadas de lama"]
    assert seen["tally"] == {"Jardineiro": 1, "Bibliotecário": 1, "Empregado": 1}
    assert verdict.outcome == VerdictOutcome.CLEARED
    assert verdict.clue_count == 1


def test_guilty_after_visiting_garden(game_config):
    """Test collecting both gardener clues before accusing."""
    game = DetectiveGame(game_config)
    # No back moves: the garden is reached from the root's right side
    verdict = game.run_game(ScriptedAgent(["d", "d", "s"], accusation="jardineiro"))

    assert verdict.outcome == VerdictOutcome.GUILTY
    assert verdict.clue_count == 2
    assert game.get_game_summary()["visit_history"] == ["Hall de Entrada", "Corredor", "Jardim"]


def test_accusing_unknown_name(game_config):
    """Test accusing someone with no evidence."""
    game = DetectiveGame(game_config)
    verdict = game.run_game(ScriptedAgent(["e", "e", "s"], accusation="Mordomo"))
    assert verdict.outcome == VerdictOutcome.NO_MATCH


def test_stop_at_root(game_config):
    """Test stopping immediately records just the start room."""
    game = DetectiveGame(game_config)
    verdict = game.run_game(ScriptedAgent(["s"], accusation="Jardineiro"))

    assert game.exploration_result.visit_history == ("Hall de Entrada",)
    assert verdict.outcome == VerdictOutcome.CLEARED


def test_structures_released_after_game(game_config):
    """Test that the map, ledger and index are released on the cancel path."""
    game = DetectiveGame(game_config)
    verdict = game.run_game(ScriptedAgent(["e", "s"], accusation=""))

    assert verdict.outcome == VerdictOutcome.CANCELLED
    assert game.game_state.root is None
    assert game.game_state.ledger.is_empty()
    assert len(game.game_state.suspect_index) == 0


def test_empty_map_game(game_config):
    """Test a game on a map with no rooms."""
    game = DetectiveGame(game_config, map_definition=MapDefinition(rooms=None))
    verdict = game.run_game(ScriptedAgent(["e"], accusation="Jardineiro"))

    assert verdict.outcome == VerdictOutcome.NO_EVIDENCE
    assert game.exploration_result.visit_history == ()


def test_console_agent_end_of_input_stops(game_config):
    """Test that a closed stdin stops exploring instead of looping."""
    lines = iter(["e", "x"])

    def fake_input(prompt):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    game = DetectiveGame(game_config)
    verdict = game.run_game(ConsoleAgent(game_config, input_func=fake_input))

    assert game.exploration_result.stopped
    assert game.exploration_result.visit_history == ("Hall de Entrada", "Sala de Estar")
    assert verdict.outcome == VerdictOutcome.CANCELLED


def test_quiet_game_still_reports(game_config, capsys):
    """Test that rooms, clues, history and verdict print with narration off."""
    game = DetectiveGame(game_config)
    game.run_game(ScriptedAgent(["d", "d", "s"], accusation="jardineiro"))

    out = capsys.readouterr().out
    assert "You are in: Jardim" in out
    assert "Clue found: \"Gaveta perdida\"" in out
    assert "Rooms visited:" in out
    assert "  3. Jardim" in out
    assert "Verdict: You gathered enough evidence. The suspect is found GUILTY." in out
    assert "(e) Go left" not in out


def test_recorded_run(tmp_path, game_config):
    """Test that a recorded session writes events and a case summary."""
    game_config.record_runs = True
    game_config.runs_dir = str(tmp_path)
    game = DetectiveGame(game_config, run_name="case1")
    game.run_game(ScriptedAgent(["d", "d", "s"], accusation="Jardineiro"))

    assert game.run_recorder.run_dir == (tmp_path / "case1").resolve()
    events = game.run_recorder.load_events("case1")
    types = [e["event_type"] for e in events]
    assert types[0] == "session_start"
    assert types[-1] == "verdict"
    assert [e["sequence"] for e in events] == list(range(len(events)))
    assert events[-1]["data"]["outcome"] == "guilty"

    summary = game.run_recorder.load_summary("case1")
    assert summary["verdict"] == "guilty"
    assert summary["visit_history"] == ["Hall de Entrada", "Corredor", "Jardim"]
    assert summary["start_room"] == "Hall de Entrada"


def test_run_name_outside_runs_dir_rejected(tmp_path, game_config):
    """Test that a run name escaping the runs directory is refused."""
    game_config.record_runs = True
    game_config.runs_dir = str(tmp_path / "runs")
    with pytest.raises(ValueError):
        DetectiveGame(game_config, run_name="../elsewhere")
    assert not (tmp_path / "elsewhere").exists()
