from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from loguru import logger

from .dice import DiceRoller, RandomDice
from .events import EventSink, NullSink
from .game import GameState, Roster, initialize, step
from .types import Color, EventKind, GameEvent, Phase


@dataclass(slots=True)
class GameSummary:
    winner: Optional[Color]
    steps: int
    turns: int
    rolls: List[int]
    truncated: bool

    def to_dict(self) -> dict:
        return {
            "winner": self.winner.name if self.winner is not None else None,
            "steps": self.steps,
            "turns": self.turns,
            "num_rolls": len(self.rolls),
            "truncated": self.truncated,
        }


def _out_of_rolls(dice: DiceRoller) -> bool:
    remaining = getattr(dice, "remaining", None)
    return remaining is not None and remaining <= 0


class _Tap:
    """Forwards events to the real sink while counting turns and rolls."""

    __slots__ = ("sink", "turns", "rolls")

    def __init__(self, sink: EventSink):
        self.sink = sink
        self.turns = 0
        self.rolls: List[int] = []

    def emit(self, event: GameEvent) -> None:
        if event.kind is EventKind.TURN_STARTED:
            self.turns += 1
        elif event.kind is EventKind.DICE_ROLLED:
            self.rolls.append(event.dice_roll)
        self.sink.emit(event)


@dataclass(slots=True)
class Simulator:
    """Drives the state machine until a player wins or ``max_steps`` is hit.

    The core has no turn limit; ``max_steps`` (0 = unlimited) is a driver cap
    only, since a game where nobody rolls a 6 never ends.
    """

    dice: DiceRoller
    sink: EventSink = field(default_factory=NullSink)
    max_steps: int = 0
    state: GameState = field(init=False)
    roster: Roster = field(init=False)

    def __post_init__(self) -> None:
        if self.max_steps < 0:
            raise ValueError("max_steps must be >= 0")
        self.state, self.roster = initialize()

    @classmethod
    def new(
        cls,
        dice: Optional[DiceRoller] = None,
        sink: Optional[EventSink] = None,
        seed: Optional[int] = None,
        max_steps: int = 0,
    ) -> "Simulator":
        return cls(
            dice=dice or RandomDice.seeded(seed),
            sink=sink or NullSink(),
            max_steps=max_steps,
        )

    def run(self) -> GameSummary:
        tap = _Tap(self.sink)
        steps = 0
        terminated = False
        while not terminated:
            if self.max_steps and steps >= self.max_steps:
                logger.warning(f"Stopping after {steps} steps without a winner")
                break
            if self.state.phase is Phase.ROLLING and _out_of_rolls(self.dice):
                logger.warning("Scripted dice ran out before the game ended")
                break
            _, _, terminated = step(self.state, self.roster, self.dice, tap)
            steps += 1

        return GameSummary(
            winner=self.state.winner,
            steps=steps,
            turns=tap.turns,
            rolls=tap.rolls,
            truncated=not terminated,
        )
