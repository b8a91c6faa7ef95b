"""Thread-safe shuffling with optional deterministic seeding."""

from __future__ import annotations

import os
import random
import threading
from typing import Any, MutableSequence

TEST_SEED_ENV = "LAYLI_TEST_SEED"
_TEST_SEED = 42


class Shuffler:
    """Shuffles sequences in place from a private, lock-protected generator."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)
        self._lock = threading.Lock()

    def reseed(self, seed: int | None) -> None:
        """Restart the generator from ``seed``."""
        with self._lock:
            self._rng = random.Random(seed)

    def shuffle(self, items: MutableSequence[Any]) -> None:
        """Shuffle ``items`` in place."""
        with self._lock:
            self._rng.shuffle(items)


_default = Shuffler()


def shuffle(items: MutableSequence[Any]) -> None:
    """Shuffle ``items`` in place, deterministically when the test seed is set."""
    if os.environ.get(TEST_SEED_ENV):
        _default.reseed(_TEST_SEED)
    _default.shuffle(items)