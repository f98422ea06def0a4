import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return int(raw)


@dataclass(slots=True)
class Config:
    # --- Rules ---
    BOARD_SIZE: int = 10  # track cells 0..9
    WINNING_POSITION: int = 0
    ENTRY_POSITION: int = 0  # same cell as the winning one
    HOME_POSITION: int = -1
    NUM_PLAYERS: int = 4
    PIECES_PER_PLAYER: int = 4

    # Dice
    DICE_MIN: int = 1
    DICE_MAX: int = 6
    EXIT_HOME_ROLL: int = 6

    # --- Driver ---
    MAX_STEPS: int = int(os.getenv("MAX_STEPS", 0))  # 0 = no cap
    SEED: Optional[int] = _optional_int("SEED")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    def __post_init__(self):
        if self.MAX_STEPS < 0:
            raise ValueError("MAX_STEPS must be >= 0")
        if not self.DICE_MIN <= self.EXIT_HOME_ROLL <= self.DICE_MAX:
            raise ValueError("EXIT_HOME_ROLL must be a face of the die")
        if not 0 <= self.WINNING_POSITION < self.BOARD_SIZE:
            raise ValueError("WINNING_POSITION must be a track cell")


config = Config()
