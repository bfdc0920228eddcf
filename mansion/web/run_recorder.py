"""
Case file recorder: one directory per investigation with its events and outcome.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Dict, Any, List, Optional

EVENTS_FILE = "events.jsonl"
SUMMARY_FILE = "summary.json"


class RunRecorder:
    """
    Writes an investigation's events as they happen and a case summary
    (rooms visited, clues, verdict) when it closes. Runs are never read
    back into a game.
    """
    
    def __init__(self, runs_dir: str = "runs"):
        self.runs_dir = Path(runs_dir)
        self.run_dir: Optional[Path] = None
        self._sequence = 0
    
    def run_path(self, run_name: str) -> Path:
        """
        Get the directory of a run.
        
        Raises:
            ValueError: If the name is empty or points outside runs_dir
        """
        if not run_name:
            raise ValueError("Run name must be non-empty")
        path = (self.runs_dir / run_name).resolve()
        if path.parent != self.runs_dir.resolve():
            raise ValueError(f"Invalid run name: {run_name!r}")
        return path
    
    def create_run(self, run_name: Optional[str] = None) -> str:
        """
        Open a case directory, named after the current time unless given.
        
        Returns:
            The run name
        """
        if run_name is None:
            run_name = datetime.now().strftime("case_%Y%m%d_%H%M%S")
        
        run_dir = self.run_path(run_name)
        run_dir.mkdir(parents=True, exist_ok=True)
        self.run_dir = run_dir
        self._sequence = 0
        return run_name
    
    def record_event(self, event_type: str, data: Dict[str, Any]) -> None:
        """Append one event line. No-op until a run is created."""
        if self.run_dir is None:
            return
        
        line = json.dumps({
            "sequence": self._sequence,
            "recorded_at": datetime.now().isoformat(timespec="seconds"),
            "event_type": event_type,
            "data": data,
        }, ensure_ascii=False)
        with open(self.run_dir / EVENTS_FILE, 'a', encoding='utf-8') as f:
            f.write(line + '\n')
        self._sequence += 1
    
    def save_summary(self, summary: Dict[str, Any]) -> None:
        """Write the closing case summary."""
        if self.run_dir is None:
            return
        with open(self.run_dir / SUMMARY_FILE, 'w', encoding='utf-8') as f:
            json.dump(summary, f, indent=2, ensure_ascii=False)
    
    def load_events(self, run_name: str) -> Optional[List[Dict[str, Any]]]:
        """Load every event of a run, or None if it recorded nothing."""
        events_file = self.run_path(run_name) / EVENTS_FILE
        if not events_file.exists():
            return None
        
        with open(events_file, 'r', encoding='utf-8') as f:
            return [json.loads(line) for line in f if line.strip()]
    
    def load_summary(self, run_name: str) -> Optional[Dict[str, Any]]:
        """Load a run's case summary, or None if the run did not finish."""
        summary_file = self.run_path(run_name) / SUMMARY_FILE
        if not summary_file.exists():
            return None
        
        with open(summary_file, 'r', encoding='utf-8') as f:
            return json.load(f)
