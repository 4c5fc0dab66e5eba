from __future__ import annotations

import random
from typing import Dict, List, Optional, Protocol

from .coords import Coordinates
from .game import GameY


class YBot(Protocol):
    """A move-selection strategy. Only reads the game; never mutates it."""
    name: str

    def choose_move(self, game: GameY) -> Optional[Coordinates]:
        ...


class RandomBot:
    """Picks uniformly at random among the free cells."""

    name = "random_bot"

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def choose_move(self, game: GameY) -> Optional[Coordinates]:
        free = game.available_cells()
        if not free:
            return None
        return game.coords_of(self.rng.choice(free))


class YBotRegistry:
    """Bots by name."""

    def __init__(self) -> None:
        self._bots: Dict[str, YBot] = {}

    def with_bot(self, bot: YBot) -> 'YBotRegistry':
        self._bots[bot.name] = bot
        return self

    def find(self, name: str) -> Optional[YBot]:
        return self._bots.get(name)

    def names(self) -> List[str]:
        return sorted(self._bots)


def default_registry(seed: Optional[int] = None) -> YBotRegistry:
    return YBotRegistry().with_bot(RandomBot(seed))
