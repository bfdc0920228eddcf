"""
Main game loop for the Detective Mansion investigation.
"""

import argparse
from typing import Dict, Optional

from mansion.core import (
    GameState, Narrator, Verdict, SuspectIndex, build_tree, iter_rooms
)
from mansion.core.exceptions import AllocationFailure, MapDefinitionError
from mansion.agents import BaseAgent, ConsoleAgent
from mansion.phases import ExplorationHandler, VerdictHandler, ExplorationResult
from mansion.config.game_config import GameConfig, default_config
from mansion.config.config_loader import MapDefinition, load_config, load_map
from mansion.web import EventEmitter, RunRecorder


class DetectiveGame:
    """Main game controller."""

    def __init__(self, config: Optional[GameConfig] = None, map_definition: Optional[MapDefinition] = None,
                 event_emitter: Optional[EventEmitter] = None, run_name: Optional[str] = None):
        self.config = config or default_config
        self.run_recorder: Optional[RunRecorder] = None

        if event_emitter is None:
            if self.config.record_runs:
                self.run_recorder = RunRecorder(runs_dir=self.config.runs_dir)
                run_name = self.run_recorder.create_run(run_name)
                print(f"Recording session to: {self.config.runs_dir}/{run_name}/")
            event_emitter = EventEmitter(self.run_recorder)
        else:
            self.run_recorder = event_emitter.run_recorder
        self.event_emitter = event_emitter

        if map_definition is None:
            map_definition = load_map(self.config.map_file)
        self.map_definition = map_definition

        self.narrator = Narrator(self.config)
        self.game_state = self._setup_state(map_definition)

        self.exploration_handler = ExplorationHandler(self.game_state, self.narrator, event_emitter=self.event_emitter)
        self.verdict_handler = VerdictHandler(self.game_state, self.narrator, event_emitter=self.event_emitter)

        self.exploration_result: Optional[ExplorationResult] = None
        self.verdict: Optional[Verdict] = None

    def _setup_state(self, map_definition: MapDefinition) -> GameState:
        """Build the room tree and seed the suspect index."""
        root = build_tree(map_definition.rooms)
        index = SuspectIndex(self.config.bucket_count)
        for clue, suspect in map_definition.suspects.items():
            index.upsert(clue, suspect)
        return GameState(root=root, suspect_index=index)

    def run_game(self, agent: BaseAgent) -> Verdict:
        """
        Run exploration then the verdict. All structures are released on every exit path.

        Args:
            agent: Player providing moves and the accusation

        Returns:
            The verdict reached
        """
        root = self.game_state.root
        self.event_emitter.emit_session_start(
            root.name if root else None,
            sum(1 for _ in iter_rooms(root)),
            self.game_state.suspect_index.list_distinct_suspects()
        )
        self.narrator.say("=" * 60)
        self.narrator.say("DETECTIVE MANSION")
        self.narrator.say("=" * 60)
        self.narrator.narrate("Explore the mansion and collect clues. At the end, accuse a suspect.")
        self.narrator.say("Commands: 'e' (left), 'd' (right), 's' (stop)")

        try:
            self.exploration_result = self.exploration_handler.run_exploration(agent)
            self.verdict = self.verdict_handler.run_verdict_phase(agent)
            self.game_state.end_game()
        finally:
            self.game_state.destroy()

        if self.run_recorder:
            summary = self.get_game_summary()
            del summary["action_log"]
            summary["start_room"] = root.name if root else None
            summary["map_file"] = self.config.map_file
            self.run_recorder.save_summary(summary)

        self.narrator.narrate("\nGame over. Thanks for playing.")
        return self.verdict

    def get_game_summary(self) -> Dict:
        """Get final game summary as dictionary."""
        return {
            "visit_history": list(self.exploration_result.visit_history) if self.exploration_result else [],
            "verdict": self.verdict.outcome.value if self.verdict else None,
            "accused": self.verdict.accused if self.verdict else None,
            "clue_count": self.verdict.clue_count if self.verdict else 0,
            "action_log": self.game_state.action_log[-10:],  # Last 10 actions
        }


def main():
    """Entry point for playing a game."""
    parser = argparse.ArgumentParser(
        description="Play a Detective Mansion investigation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                               # Built-in mansion, default config
  python main.py --config configs/quiet.yaml   # Use a config file
  python main.py --map maps/manor.yaml         # Play a different mansion
  python main.py --record --run-name case1     # Record the session to runs/case1/
        """
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to YAML configuration file (default: use default config)"
    )
    parser.add_argument(
        "--map",
        "-m",
        type=str,
        default=None,
        help="Path to YAML map file. Overrides config file setting."
    )
    parser.add_argument(
        "--record",
        action="store_true",
        help="Record session events to the runs directory"
    )
    parser.add_argument(
        "--run-name",
        "-r",
        type=str,
        default=None,
        help="Custom name for this run (default: auto-generated timestamp)"
    )
    parser.add_argument(
        "--runs-dir",
        type=str,
        default=None,
        help="Directory for recorded runs (default: runs)"
    )
    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Hide flavour text and menus (rooms, clues, history, verdict and errors are still shown)"
    )

    args = parser.parse_args()

    config = load_config(args.config) if args.config else GameConfig()

    if args.map is not None:
        config.map_file = args.map
    if args.record:
        config.record_runs = True
    if args.runs_dir is not None:
        config.runs_dir = args.runs_dir
    if args.quiet:
        config.use_narration = False

    try:
        game = DetectiveGame(config=config, run_name=args.run_name)
    except (MapDefinitionError, FileNotFoundError, AllocationFailure, ValueError) as e:
        parser.exit(1, f"Could not set up the mansion: {e}\n")

    game.run_game(ConsoleAgent(config))

    if game.run_recorder and game.run_recorder.run_dir:
        print(f"\nSession events saved to: {game.run_recorder.run_dir}")


if __name__ == "__main__":
    main()
