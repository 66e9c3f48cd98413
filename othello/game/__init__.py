"""Othello game loop package."""

from .coordinator import TurnCoordinator, next_state, resolve_state
from .state import GameState, TurnEvent

__all__ = ["GameState", "TurnCoordinator", "TurnEvent", "next_state", "resolve_state"]
