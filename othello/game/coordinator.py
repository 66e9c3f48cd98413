"""Turn coordinator: drives move sources and applies the pass/over rules."""

from __future__ import annotations

from typing import Callable, Dict, List, Mapping, Optional

from ..agents.base_agent import BaseAgent
from ..board import Board, Color
from .state import GameState, TurnEvent

EventCallback = Callable[[TurnEvent], None]


def next_state(board: Board, current: Color) -> GameState:
    """
    Decide who plays after ``current`` has moved.

    The opponent moves if it can; otherwise ``current`` moves again (a pass);
    if neither color can move the game is over.
    """
    candidate = current.opposite()
    if board.can_move(candidate):
        return GameState(to_move=candidate)
    if board.can_move(current):
        return GameState(to_move=current)
    return GameState(to_move=candidate, over=True)


def resolve_state(board: Board, to_move: Color) -> GameState:
    """State for a position where ``to_move`` is due to play but may be stuck."""
    if board.can_move(to_move):
        return GameState(to_move=to_move)
    return next_state(board, to_move.opposite())


class TurnCoordinator:
    """
    Turn-based game loop over a single board.

    Each color is bound to one move source. The coordinator does not
    re-validate moves: a source returning an illegal cell makes
    ``Board.make_move`` raise ``IllegalMoveError``.
    """

    def __init__(
        self,
        board: Board,
        sources: Mapping[Color, BaseAgent],
        first: Color = Color.BLACK,
    ) -> None:
        missing = [c.name for c in (Color.BLACK, Color.WHITE) if c not in sources]
        if missing:
            raise ValueError(f"No move source bound to: {', '.join(missing)}")
        self.board = board
        self.sources: Dict[Color, BaseAgent] = dict(sources)
        self.state = resolve_state(board, first)
        self.history: List[TurnEvent] = []
        self._callbacks: List[EventCallback] = []

    def add_callback(self, callback: EventCallback) -> None:
        self._callbacks.append(callback)

    @property
    def done(self) -> bool:
        return self.state.over

    @property
    def to_move(self) -> Optional[Color]:
        return None if self.state.over else self.state.to_move

    def step(self) -> TurnEvent:
        """Obtain one move from the current source and apply it."""
        if self.state.over:
            raise RuntimeError("Game is over. No further moves are accepted.")

        current = self.state.to_move
        cell = self.sources[current].select_move(self.board)
        flips = self.board.make_move(cell, current)

        new_state = next_state(self.board, current)
        passed = not new_state.over and new_state.to_move == current
        self.state = new_state

        event = TurnEvent(
            ply=len(self.history) + 1,
            color=current,
            cell=cell,
            flips=flips,
            passed=passed,
            state=new_state,
        )
        self.history.append(event)
        for callback in self._callbacks:
            callback(event)
        return event

    def play(self) -> Dict[Color, int]:
        """Run until neither side can move and return the final scores."""
        while not self.state.over:
            self.step()
        return self.board.get_scores()

    def winner(self) -> Optional[Color]:
        """Color with more pieces once the game is over; None on a tie or while running."""
        if not self.state.over:
            return None
        scores = self.board.get_scores()
        if scores[Color.BLACK] > scores[Color.WHITE]:
            return Color.BLACK
        if scores[Color.WHITE] > scores[Color.BLACK]:
            return Color.WHITE
        return None

    def result(self) -> str:
        """'black', 'white' or 'tie' for a finished game."""
        if not self.state.over:
            raise RuntimeError("Game is not over yet")
        winner = self.winner()
        return "tie" if winner is None else winner.name.lower()
