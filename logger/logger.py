import json
import os
from datetime import datetime, timezone

def utc_today():
    return datetime.now(timezone.utc).strftime("%Y-%m-%d")

class JSONLogger:
    def __init__(self, output_directory="logs/", log_file_prefix="turing_"):
        self.output_directory = output_directory
        self.log_file_prefix = log_file_prefix
        os.makedirs(self.output_directory, exist_ok=True)
        self.today = utc_today()
        self.current_log = self._get_log_filename()

    def _get_log_filename(self):
        filename = f"{self.log_file_prefix}{self.today}.jsonl"  # JSON lines format
        return os.path.join(self.output_directory, filename)

    def log(self, entry: dict):
        """Log a single entry to the run log."""
        with open(self.current_log, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry) + "\n")

    def rotate(self):
        """Move to a new log file if the UTC day has changed since the last entry."""
        today = utc_today()
        if today != self.today:
            self.today = today
            self.current_log = self._get_log_filename()

    def log_outcome(self, word: str, outcome):
        """Record how one input word finished."""
        self.rotate()
        entry = {
            "word": word,
            "outcome": outcome.kind,
            "state": outcome.state,
            "head": outcome.head,
            "steps": outcome.steps,
            "tape": outcome.tape_string(),
            "timestamp": datetime.now(timezone.utc).isoformat()
        }
        symbol = getattr(outcome, "symbol", None)
        if symbol is not None:
            entry["symbol"] = symbol
        self.log(entry)
        return entry
