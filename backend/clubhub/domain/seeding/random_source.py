"""Pluggable source of uniform random floats."""

from __future__ import annotations

import random
from typing import Optional, Protocol


class RandomSource(Protocol):
	"""Anything exposing ``random() -> float`` in [0, 1); ``random.Random`` qualifies."""

	def random(self) -> float:
		...


def make_random_source(seed: Optional[int] = None) -> RandomSource:
	return random.Random(seed)


def randbelow(rng: RandomSource, n: int) -> int:
	"""Uniform integer in [0, n) from a single draw."""
	return min(int(rng.random() * n), n - 1)
