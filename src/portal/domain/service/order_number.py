"""Human-readable order numbers: ``ORD-<6 digits of epoch ms>-<0..999>``.

Two numbers generated in the same millisecond can collide; the
checkout handler checks the order store and asks for another one.
"""

from __future__ import annotations

import random
import time
from typing import Callable


class OrderNumberGenerator:

    def __init__(
        self,
        clock: Callable[[], float] = time.time,
        rng: random.Random | None = None,
    ) -> None:
        self._clock = clock
        self._rng = rng or random.Random()

    def __call__(self) -> str:
        millis = str(int(self._clock() * 1000))[-6:]
        return f"ORD-{millis}-{self._rng.randint(0, 999)}"
