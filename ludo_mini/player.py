from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from loguru import logger

from .config import config
from .events import EventSink, NullSink
from .piece import Piece
from .types import Color, EventKind, GameEvent, RuleViolation


def check_roll(dice_roll: int) -> int:
    if not config.DICE_MIN <= dice_roll <= config.DICE_MAX:
        raise RuleViolation(
            f"dice roll {dice_roll} outside [{config.DICE_MIN}, {config.DICE_MAX}]"
        )
    return dice_roll


@dataclass(slots=True)
class Player:
    """A seat in the roster: a fixed color and exactly four pieces.

    Movement rules live here. The player has no say in which piece moves;
    the first eligible piece in declaration order is always the one taken.
    """

    color: Color
    pieces: Tuple[Piece, ...] = field(init=False)

    def __post_init__(self) -> None:
        self.color = Color(self.color)
        self.pieces = tuple(
            Piece(piece_id=i) for i in range(config.PIECES_PER_PLAYER)
        )

    def can_move(self, dice_roll: int) -> bool:
        check_roll(dice_roll)
        return any(piece.is_eligible(dice_roll) for piece in self.pieces)

    def first_eligible(self, dice_roll: int) -> Optional[Piece]:
        for piece in self.pieces:
            if piece.is_eligible(dice_roll):
                return piece
        return None

    def move_piece(self, dice_roll: int, sink: Optional[EventSink] = None) -> bool:
        """Apply ``dice_roll`` to the first eligible piece.

        Returns False when no piece can move.
        """
        check_roll(dice_roll)
        sink = sink or NullSink()
        piece = self.first_eligible(dice_roll)
        if piece is None:
            return False

        old = piece.position
        if not piece.is_on_track():
            piece.enter_track()
        elif piece.advance(dice_roll):
            sink.emit(
                GameEvent(
                    EventKind.PIECE_FINISHED,
                    color=self.color,
                    dice_roll=dice_roll,
                    piece_id=piece.piece_id,
                )
            )
        logger.debug(
            f"{self.color.name} piece {piece.piece_id}: {old} -> {piece.position}"
        )
        return True

    def finished_count(self) -> int:
        return sum(1 for piece in self.pieces if piece.at_end)

    def has_won(self) -> bool:
        return all(piece.at_end for piece in self.pieces)

    def to_dict(self) -> dict:
        return {
            "color": self.color.name,
            "pieces": [piece.to_dict() for piece in self.pieces],
            "finished": self.finished_count(),
            "has_won": self.has_won(),
        }
