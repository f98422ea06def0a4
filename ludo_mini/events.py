from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import List, Protocol

from loguru import logger

from .types import EventKind, GameEvent


class EventSink(Protocol):
    def emit(self, event: GameEvent) -> None: ...


def format_event(event: GameEvent) -> str:
    """Human-readable line for an event."""
    name = event.color.name if event.color is not None else "?"
    if event.kind is EventKind.TURN_STARTED:
        return f"Player {name}'s turn"
    if event.kind is EventKind.DICE_ROLLED:
        return f"Player {name} rolled: {event.dice_roll}"
    if event.kind is EventKind.NO_MOVES:
        return f"Player {name} has no moves"
    if event.kind is EventKind.PIECE_MOVED:
        return f"Player {name} moved a piece"
    if event.kind is EventKind.PIECE_FINISHED:
        return "Piece has reached the end and is now at final position."
    if event.kind is EventKind.PLAYER_WON:
        return f"Player {name} wins!"
    raise ValueError(f"Unknown event kind: {event.kind}")


class NullSink:
    def emit(self, event: GameEvent) -> None:
        return None


@dataclass(slots=True)
class RecordingSink:
    events: List[GameEvent] = field(default_factory=list)

    def emit(self, event: GameEvent) -> None:
        self.events.append(event)

    def kinds(self) -> List[EventKind]:
        return [event.kind for event in self.events]

    def messages(self) -> List[str]:
        return [format_event(event) for event in self.events]

    def clear(self) -> None:
        self.events.clear()


class LoguruSink:
    """Renders events through loguru; wins are logged at SUCCESS."""

    def emit(self, event: GameEvent) -> None:
        level = "SUCCESS" if event.kind is EventKind.PLAYER_WON else "INFO"
        logger.log(level, format_event(event))


def configure_logging(level: str = "INFO") -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format="<level>{message}</level>")
