"""
Minimal four-player race game on a ten-cell circular track.
Turn/phase state machine plus the per-player movement rules.
"""

from .board import board_tensor, render_board
from .config import config
from .dice import DiceRoller, RandomDice, ScriptedDice
from .events import EventSink, LoguruSink, NullSink, RecordingSink
from .game import GameState, Roster, build_roster, initialize, next_turn, step
from .piece import Piece
from .player import Player
from .simulator import GameSummary, Simulator
from .types import Color, EventKind, GameEvent, Phase, RuleViolation

__all__ = [
    "Color",
    "config",
    "DiceRoller",
    "EventKind",
    "EventSink",
    "GameEvent",
    "GameState",
    "GameSummary",
    "LoguruSink",
    "NullSink",
    "Phase",
    "Piece",
    "Player",
    "RandomDice",
    "RecordingSink",
    "Roster",
    "RuleViolation",
    "ScriptedDice",
    "Simulator",
    "board_tensor",
    "build_roster",
    "initialize",
    "next_turn",
    "render_board",
    "step",
]
