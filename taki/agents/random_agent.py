"""Random agent - picks any valid answer. Used to simulate whole games."""

import random
from typing import Optional

from taki.engine import Card


class RandomAgent:
    def __init__(self, name: str = "random", seed: int | None = None, close_chance: float = 0.2):
        self._name = name
        self._rng = random.Random(seed)
        self._close_chance = close_chance

    @property
    def name(self) -> str:
        return self._name

    def choose_number(self, prompt: str, min_value: int, max_value: int) -> int:
        return self._rng.randint(min_value, max_value)

    def choose_yes_no(self, prompt: str) -> bool:
        return self._rng.random() < 0.5

    def choose_card(
        self,
        prompt: str,
        options: list[Card],
        allow_close: bool,
    ) -> Optional[int]:
        if allow_close and self._rng.random() < self._close_chance:
            return None
        return self._rng.randrange(len(options))
