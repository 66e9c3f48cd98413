"""Console rendering and notices."""

from __future__ import annotations

from typing import Dict, List

from ..board import Board, Color

BANNER = "************** Game state **************"
RULE = "*" * len(BANNER)


def render_board(board: Board) -> str:
    """
    Render the board as text.

    Rows are numbered 1-8 on the left, columns lettered a-h underneath;
    black is 'x', white 'o' and empty cells '.'.
    """
    size = board.size
    lines: List[str] = [" " + "_" * (2 * size + 1)]
    for row in range(size):
        cells = " ".join(Color(int(v)).symbol for v in board.grid[row])
        lines.append(f"{row + 1}|{cells}|")
    lines.append(" |" + "_" * (2 * size - 1) + "|")
    lines.append(" " + "".join(f" {chr(ord('a') + col)}" for col in range(size)))
    return "\n".join(lines)


def render_state(board: Board, human: Color, computer: Color) -> str:
    scores = board.get_scores()
    return "\n".join(
        [
            "",
            BANNER,
            f"You: {scores[human]} {human.symbol}",
            f"Computer: {scores[computer]} {computer.symbol}",
            render_board(board),
            RULE,
            "",
        ]
    )


def pass_notice(to_move: Color) -> str:
    """Notice shown when the other side has no move and ``to_move`` plays again."""
    return f"No valid turns. Game passes to {to_move.symbol}."


def game_over_summary(scores: Dict[Color, int], human: Color) -> str:
    computer = human.opposite()
    mine, theirs = scores[human], scores[computer]
    lines = [f"Game over. Scores: {mine}:{theirs}"]
    if mine == theirs:
        lines.append("It is a tie.")
    elif mine > theirs:
        lines.append("You win!")
    else:
        lines.append("Computer win!")
    return "\n".join(lines)


def score_line(scores: Dict[Color, int]) -> str:
    return f"x: {scores[Color.BLACK]}, o: {scores[Color.WHITE]}"
