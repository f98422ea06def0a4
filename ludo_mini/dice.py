from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Optional, Protocol, Sequence

from .config import config
from .types import RuleViolation


class DiceRoller(Protocol):
    def roll(self) -> int: ...


@dataclass(slots=True)
class RandomDice:
    rng: random.Random = field(default_factory=random.Random)

    @classmethod
    def seeded(cls, seed: Optional[int] = None) -> "RandomDice":
        return cls(random.Random(seed))

    def roll(self) -> int:
        return self.rng.randint(config.DICE_MIN, config.DICE_MAX)


@dataclass(slots=True)
class ScriptedDice:
    """Replays a fixed sequence of rolls, for tests and reproducible runs."""

    values: Sequence[int]
    _cursor: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        self.values = [int(v) for v in self.values]

    @property
    def remaining(self) -> int:
        return len(self.values) - self._cursor

    def roll(self) -> int:
        if self._cursor >= len(self.values):
            raise RuleViolation("scripted dice sequence exhausted")
        value = self.values[self._cursor]
        self._cursor += 1
        return value
