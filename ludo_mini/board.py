from __future__ import annotations

from typing import Sequence

import numpy as np

from .config import config
from .player import Player

HOME_COLUMN = 0
END_COLUMN = config.BOARD_SIZE + 1


def board_tensor(roster: Sequence[Player], out: np.ndarray | None = None) -> np.ndarray:
    """Build a (NUM_PLAYERS, BOARD_SIZE + 2) occupancy tensor.

    Columns:
    0: pieces at home
    1..BOARD_SIZE: pieces on track cell (column - 1), finished pieces excluded
    BOARD_SIZE + 1: finished pieces
    """
    shape = (len(roster), config.BOARD_SIZE + 2)
    if out is not None:
        if out.shape != shape:
            raise ValueError(f"Expected board tensor of shape {shape}")
        board = out
    else:
        board = np.zeros(shape, dtype=np.float32)

    board.fill(0.0)
    for seat, player in enumerate(roster):
        row = board[seat]
        for piece in player.pieces:
            if piece.at_end:
                row[END_COLUMN] += 1.0
            elif not piece.is_on_track():
                row[HOME_COLUMN] += 1.0
            else:
                row[piece.position + 1] += 1.0
    return board


def render_board(roster: Sequence[Player]) -> str:
    """Compact text view: one line per seat."""
    tensor = board_tensor(roster)
    lines = []
    for seat, player in enumerate(roster):
        row = tensor[seat].astype(int)
        track = " ".join(str(n) if n else "." for n in row[1:END_COLUMN])
        lines.append(
            f"{player.color.name:<6} home={row[HOME_COLUMN]} [{track}] end={row[END_COLUMN]}"
        )
    return "\n".join(lines)
