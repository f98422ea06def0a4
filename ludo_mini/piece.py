from dataclasses import dataclass

from .config import config
from .types import RuleViolation


@dataclass(slots=True)
class Piece:
    """State of a single piece.

    position: -1 = home; 0..BOARD_SIZE-1 = track cell. Cell 0 is both the
    entry cell and the winning cell, so a piece only finishes by wrapping
    around onto it.
    """

    piece_id: int  # 0..3 per player
    position: int = config.HOME_POSITION
    at_home: bool = True
    at_end: bool = False

    def is_on_track(self) -> bool:
        return self.position != config.HOME_POSITION

    def is_eligible(self, dice_roll: int) -> bool:
        """True if this piece may move with ``dice_roll``."""
        if self.at_end:
            return False
        if not self.is_on_track():
            return dice_roll == config.EXIT_HOME_ROLL
        return True

    def enter_track(self) -> None:
        self._ensure_movable()
        self.position = config.ENTRY_POSITION
        self.at_home = False

    def advance(self, dice_roll: int) -> bool:
        """Move along the track; returns True if the piece just finished."""
        self._ensure_movable()
        if not self.is_on_track():
            raise RuleViolation(f"piece {self.piece_id} is not on the track")
        self.position = (self.position + dice_roll) % config.BOARD_SIZE
        if self.position == config.WINNING_POSITION:
            self.at_end = True
        return self.at_end

    def _ensure_movable(self) -> None:
        if self.at_end:
            raise RuleViolation(f"piece {self.piece_id} has already finished")

    def to_dict(self) -> dict:
        return {
            "piece_id": self.piece_id,
            "position": self.position,
            "at_home": self.at_home,
            "at_end": self.at_end,
        }
