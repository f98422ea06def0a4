from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional


class Color(IntEnum):
    RED = 0
    GREEN = 1
    YELLOW = 2
    BLUE = 3


class Phase(Enum):
    WAITING = "waiting"
    ROLLING = "rolling"
    MOVING = "moving"


class EventKind(Enum):
    TURN_STARTED = "turn_started"
    DICE_ROLLED = "dice_rolled"
    NO_MOVES = "no_moves"
    PIECE_MOVED = "piece_moved"
    PIECE_FINISHED = "piece_finished"
    PLAYER_WON = "player_won"


class RuleViolation(RuntimeError):
    """Raised when an engine invariant is broken. Not meant to be recovered from."""


@dataclass(slots=True, frozen=True)
class GameEvent:
    kind: EventKind
    color: Optional[Color] = None
    dice_roll: Optional[int] = None
    piece_id: Optional[int] = None
