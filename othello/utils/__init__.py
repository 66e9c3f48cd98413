"""Utility modules."""

from .move_log import MoveLogger
from .render import game_over_summary, pass_notice, render_board, render_state

__all__ = ["MoveLogger", "game_over_summary", "pass_notice", "render_board", "render_state"]
