"""
Tests for the verdict phase.
"""

import pytest
from unittest.mock import patch
from mansion.core import GamePhase, VerdictOutcome
from mansion.phases import VerdictHandler
from mansion.agents import ScriptedAgent


@pytest.fixture
def handler(game_state, narrator, event_emitter):
    return VerdictHandler(game_state, narrator, event_emitter=event_emitter)


def test_no_evidence_skips_accusation(handler, game_state):
    """Test that an empty ledger ends without asking for a name."""
    agent = ScriptedAgent(accusation="Jardineiro")
    with patch.object(ScriptedAgent, 'get_accusation') as mock_accuse:
        verdict = handler.run_verdict_phase(agent)
        mock_accuse.assert_not_called()

    assert verdict.outcome == VerdictOutcome.NO_EVIDENCE
    assert game_state.phase == GamePhase.VERDICT


def test_evidence_listed_in_order(handler, game_state, narrator):
    """Test that clues are shown sorted and suspects are listed."""
    for clue in ["Pegadas de lama", "Chave perdida"]:
        game_state.collect_clue(clue)

    handler.run_verdict_phase(ScriptedAgent(accusation="Empregado"))

    lines = narrator.announcements
    assert lines.index(" - Chave perdida") < lines.index(" - Pegadas de lama")
    for suspect in ["Jardineiro", "Empregado", "Bibliotecário"]:
        assert f"  - {suspect}" in lines


def test_suspects_listed_with_narration_off(handler, game_state, narrator, capsys):
    """Test that the suspect list prints even when narration is off."""
    game_state.collect_clue("Pegadas de lama")
    handler.run_verdict_phase(ScriptedAgent(accusation="Jardineiro"))

    out = capsys.readouterr().out
    assert "Known suspects:" in out
    assert "  - Jardineiro" in out
    assert "Verdict: " in out


def test_empty_accusation_cancels(handler, game_state, event_emitter):
    """Test cancelling by giving no name."""
    game_state.collect_clue("Pegadas de lama")
    verdict = handler.run_verdict_phase(ScriptedAgent(accusation="   "))

    assert verdict.outcome == VerdictOutcome.CANCELLED
    assert verdict.message == "No name given. Accusation cancelled."
    assert event_emitter.events_of_type("verdict")[0]["outcome"] == "cancelled"


def test_guilty_verdict(handler, game_state, event_emitter):
    """Test a guilty verdict with two clues."""
    game_state.collect_clue("Pegadas de lama")
    game_state.collect_clue("Gaveta perdida")
    verdict = handler.run_verdict_phase(ScriptedAgent(accusation="jardineiro"))

    assert verdict.outcome == VerdictOutcome.GUILTY
    event = event_emitter.events_of_type("verdict")[0]
    assert event["tally"] == {"Jardineiro": 2}
    assert event["clue_count"] == 2
