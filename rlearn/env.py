"""Environment interfaces and the training report format."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, MutableMapping
from typing import Any


class Environment(ABC):
    """A discrete-time Markov decision process with one agent."""

    @abstractmethod
    def step(self, action: Any) -> tuple[Any | None, float]:
        """Apply ``action`` and return ``(next_state, reward)``.

        ``next_state`` is ``None`` once the episode has ended.
        """

    @abstractmethod
    def reset(self) -> Any:
        """Reset the environment and return the initial state."""

    @abstractmethod
    def random_action(self) -> Any:
        """Return a random action from the action space."""

    def is_active(self) -> bool:
        """Whether the environment is in a non-terminal state."""
        return True


class DiscreteActionSpace(Environment):
    """An environment with a discrete action space."""

    @abstractmethod
    def actions(self) -> list[Any]:
        """Return the actions available in the current state; never empty."""


class ContinuousActionSpace(Environment):
    """An environment with a continuous action space."""

    @abstractmethod
    def action_dim(self) -> int:
        """Return the dimensionality of the action space."""

    @abstractmethod
    def action_bounds(self) -> tuple[list[float], list[float]] | None:
        """Return ``(low, high)`` bounds per dimension, or ``None`` if unbounded."""


class DiscreteStateSpace(Environment):
    """An environment with a discrete state space."""

    @abstractmethod
    def states(self) -> list[Any]:
        """Return every possible state."""


class DeterministicModel(Environment):
    """An environment with a deterministic model."""

    @abstractmethod
    def model(self, state: Any, action: Any) -> tuple[Any | None, float]:
        """Return the next state and reward for ``action`` taken in ``state``."""


class KnownDynamics(Environment):
    """An environment whose dynamics p(s', r | s, a) are known."""

    @abstractmethod
    def dynamics(self, state: Any, action: Any, next_state: Any, reward: float) -> float:
        """Return the probability of reaching ``next_state`` with ``reward``."""


class Report(MutableMapping):
    """A mapping of metric names to values, always iterated in sorted key order."""

    def __init__(self, keys: Iterable[str]) -> None:
        self._keys = sorted(keys)
        self._map = self._blank()

    def _blank(self) -> dict[str, float]:
        return {key: 0.0 for key in self._keys}

    def keys(self) -> list[str]:  # type: ignore[override]
        """Return the report's format keys, sorted."""
        return list(self._keys)

    def take(self) -> dict[str, float]:
        """Return the current values and reset every key to zero."""
        taken = {key: self._map[key] for key in sorted(self._map)}
        self._map = self._blank()
        return taken

    def __getitem__(self, key: str) -> float:
        return self._map[key]

    def __setitem__(self, key: str, value: float) -> None:
        self._map[key] = value

    def __delitem__(self, key: str) -> None:
        del self._map[key]

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._map))

    def __len__(self) -> int:
        return len(self._map)

    def __repr__(self) -> str:
        return f"Report({dict(self.items())!r})"