"""CSV log of applied moves."""

import csv
import os
from datetime import datetime
from typing import Optional

from ..board import Board, Color
from ..game.state import TurnEvent

FIELDNAMES = ["move", "color", "cell", "flips", "black", "white", "event"]


class MoveLogger:
    """Writes one CSV row per applied move. Usable as a coordinator callback."""

    def __init__(self, board: Board, log_dir: str = "data/logs", filename: Optional[str] = None):
        """
        Initialize move logger.

        Args:
            board: Board the logged game is played on (scores are read from it)
            log_dir: Directory to save logs
            filename: File name inside log_dir (timestamped when None)
        """
        self.board = board
        self.log_dir = log_dir
        os.makedirs(log_dir, exist_ok=True)

        if filename is None:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
            filename = f"game_{timestamp}.csv"
        self.csv_path = os.path.join(log_dir, filename)
        self.csv_file = open(self.csv_path, "w", newline="")
        self.csv_writer = csv.DictWriter(self.csv_file, fieldnames=FIELDNAMES)
        self.csv_writer.writeheader()

    def __call__(self, event: TurnEvent) -> None:
        self.log(event)

    def log(self, event: TurnEvent) -> None:
        if event.state.over:
            kind = "over"
        elif event.passed:
            kind = "pass"
        else:
            kind = "move"

        scores = self.board.get_scores()
        self.csv_writer.writerow(
            {
                "move": event.ply,
                "color": event.color.name.lower(),
                "cell": event.cell.to_notation(),
                "flips": len(event.flips),
                "black": scores[Color.BLACK],
                "white": scores[Color.WHITE],
                "event": kind,
            }
        )
        self.csv_file.flush()

    def close(self) -> None:
        """Close CSV file."""
        if not self.csv_file.closed:
            self.csv_file.close()

    def __enter__(self) -> "MoveLogger":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
