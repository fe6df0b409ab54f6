"""Exploration policies."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence
from enum import Enum, auto

from rlearn.decay import Decay


class Choice(Enum):
    """Outcome of an exploration policy."""

    EXPLORE = auto()
    EXPLOIT = auto()


class EpsilonGreedy:
    """Epsilon-greedy exploration with a time-decaying epsilon."""

    def __init__(self, decay: Decay, rng: random.Random | None = None) -> None:
        self.epsilon = decay
        self._rng = rng if rng is not None else random.Random()

    def choose(self, episode: int) -> Choice:
        """Decide whether to explore or exploit in ``episode``."""
        epsilon = self.epsilon.evaluate(float(episode))
        return Choice.EXPLOIT if self._rng.random() > epsilon else Choice.EXPLORE

    def __repr__(self) -> str:
        return f"EpsilonGreedy({self.epsilon!r})"


class Softmax:
    """Boltzmann exploration with a time-decaying temperature."""

    def __init__(self, decay: Decay, rng: random.Random | None = None) -> None:
        self.temperature = decay
        self._rng = rng if rng is not None else random.Random()

    def choose(self, t: float, q_values: Sequence[float]) -> int:
        """Sample an action index with probability proportional to exp(q / tau)."""
        if not q_values:
            raise ValueError("`q_values` must not be empty")
        tau = self.temperature.evaluate(t)
        scaled = [q / tau for q in q_values]
        top = max(scaled)
        weights = [math.exp(x - top) for x in scaled]
        return self._rng.choices(range(len(weights)), weights=weights)[0]


class UCB:
    """Upper confidence bound exploration over a fixed number of actions."""

    def __init__(self, c: float, num_actions: int) -> None:
        self.c = c
        self.counts = [1.0] * num_actions

    def choose(self, t: float, q_values: Sequence[float]) -> int:
        """Pick the action with the highest upper confidence bound at time ``t``.

        Ties go to the last of the best actions.
        """
        if len(q_values) != len(self.counts):
            raise ValueError(
                f"expected {len(self.counts)} q values, got {len(q_values)}"
            )
        if not q_values:
            raise ValueError("`q_values` must not be empty")
        k = self.c * math.sqrt(math.log10(t))
        bounds = [q + k * n ** -0.5 for q, n in zip(q_values, self.counts)]
        best = max(bounds)
        choice = max(i for i, b in enumerate(bounds) if b == best)
        self.counts[choice] += 1.0
        return choice