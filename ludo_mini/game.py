from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from loguru import logger

from .config import config
from .dice import DiceRoller, RandomDice
from .events import EventSink, NullSink
from .player import Player, check_roll
from .types import Color, EventKind, GameEvent, Phase, RuleViolation

Roster = Tuple[Player, ...]

_default_dice = RandomDice()


@dataclass(slots=True)
class GameState:
    """Control-flow record for the turn state machine.

    ``dice_roll`` is only meaningful while ROLLING/MOVING; it is 0 in WAITING.
    ``winner`` is set once the game has terminated.
    """

    player_index: int = 0
    phase: Phase = Phase.WAITING
    dice_roll: int = 0
    winner: Optional[Color] = None

    @property
    def is_over(self) -> bool:
        return self.winner is not None

    def to_dict(self) -> dict:
        return {
            "player_index": self.player_index,
            "phase": self.phase.value,
            "dice_roll": self.dice_roll,
            "winner": self.winner.name if self.winner is not None else None,
        }


def build_roster() -> Roster:
    # Seat order is turn order.
    return tuple(Player(color) for color in Color)


def initialize() -> Tuple[GameState, Roster]:
    return GameState(), build_roster()


def next_turn(state: GameState, roster: Roster) -> None:
    """Hand the turn to the next seat and reset to WAITING."""
    state.player_index = (state.player_index + 1) % len(roster)
    state.phase = Phase.WAITING
    state.dice_roll = 0


def _current_player(state: GameState, roster: Roster) -> Player:
    if len(roster) != config.NUM_PLAYERS:
        raise RuleViolation(
            f"roster must hold {config.NUM_PLAYERS} players, got {len(roster)}"
        )
    if not 0 <= state.player_index < len(roster):
        raise RuleViolation(f"player_index {state.player_index} out of range")
    return roster[state.player_index]


def step(
    state: GameState,
    roster: Roster,
    dice: Optional[DiceRoller] = None,
    sink: Optional[EventSink] = None,
) -> Tuple[GameState, Roster, bool]:
    """Run exactly one phase transition.

    Returns ``(state, roster, terminated)``; both are mutated in place.
    """
    if state.is_over:
        raise RuleViolation("game is already over")
    dice = dice or _default_dice
    sink = sink or NullSink()
    player = _current_player(state, roster)

    if state.phase is Phase.WAITING:
        sink.emit(GameEvent(EventKind.TURN_STARTED, color=player.color))
        state.dice_roll = 0
        state.phase = Phase.ROLLING

    elif state.phase is Phase.ROLLING:
        state.dice_roll = check_roll(dice.roll())
        sink.emit(
            GameEvent(EventKind.DICE_ROLLED, color=player.color, dice_roll=state.dice_roll)
        )
        if player.can_move(state.dice_roll):
            state.phase = Phase.MOVING
        else:
            sink.emit(GameEvent(EventKind.NO_MOVES, color=player.color))
            next_turn(state, roster)

    elif state.phase is Phase.MOVING:
        if player.move_piece(state.dice_roll, sink):
            sink.emit(
                GameEvent(
                    EventKind.PIECE_MOVED, color=player.color, dice_roll=state.dice_roll
                )
            )
            if player.has_won():
                sink.emit(GameEvent(EventKind.PLAYER_WON, color=player.color))
                state.winner = player.color
                logger.debug(f"{player.color.name} won")
                return state, roster, True
        else:
            logger.warning(
                f"{player.color.name} had no move after a positive can_move check"
            )
        next_turn(state, roster)

    else:
        raise RuleViolation(f"unknown phase {state.phase!r}")

    return state, roster, False
