"""Tabular agents for environments with small, discrete, hashable spaces."""

from __future__ import annotations

import math
import random
from collections.abc import Callable, Hashable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from rlearn.decay import Constant, Decay, Exponential
from rlearn.env import DiscreteActionSpace
from rlearn.exploration import Choice, EpsilonGreedy

S = TypeVar("S")
A = TypeVar("A")
T = TypeVar("T")


@dataclass(frozen=True)
class Experience(Generic[S, A]):
    """One transition observed by an agent."""

    state: S
    action: A
    reward: float
    next_state: S | None


def _sample_average(n: int) -> float:
    return 1.0 / n


def _argmax_last(items: Iterable[T], key: Callable[[T], float]) -> T:
    """Return the item with the largest key; ties go to the last one."""
    best: T | None = None
    best_value = -math.inf
    found = False
    for item in items:
        value = key(item)
        if not found or value >= best_value:
            best, best_value, found = item, value, True
    if not found:
        raise ValueError("there must be at least one action available")
    return best  # type: ignore[return-value]


@dataclass
class _Entry:
    value: float
    count: int


class _OccurrenceTable:
    """State-action values updated with Q += alpha(n) * (R - Q)."""

    def __init__(self, default_value: float, alpha_fn: Callable[[int], float]) -> None:
        self._entries: dict[tuple[Hashable, Hashable], _Entry] = {}
        self._default_value = default_value
        self._alpha_fn = alpha_fn

    def entry(self, state: Hashable, action: Hashable) -> _Entry:
        return self._entries.get((state, action), _Entry(self._default_value, 0))

    def value(self, state: Hashable, action: Hashable) -> float:
        return self.entry(state, action).value

    def learn(self, experience: Experience) -> None:
        key = (experience.state, experience.action)
        entry = self._entries.get(key)
        if entry is None:
            self._entries[key] = _Entry(experience.reward, 1)
            return
        entry.count += 1
        entry.value += self._alpha_fn(entry.count) * (experience.reward - entry.value)


@dataclass
class ActionOccurrenceAgentConfig:
    """Settings for :class:`ActionOccurrenceAgent`."""

    epsilon_decay_strategy: Decay = field(default_factory=lambda: Constant(0.1))
    default_action_value: float = 0.0
    alpha_fn: Callable[[int], float] = _sample_average


class ActionOccurrenceAgent:
    """Tabular agent storing the value and visit count of each state-action pair.

    Values follow Q(n+1) = Q(n) + alpha(n) * (R(n) - Q(n)); exploration is
    epsilon-greedy.
    """

    def __init__(
        self,
        config: ActionOccurrenceAgentConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        config = config if config is not None else ActionOccurrenceAgentConfig()
        self._table = _OccurrenceTable(config.default_action_value, config.alpha_fn)
        self.exploration = EpsilonGreedy(config.epsilon_decay_strategy, rng)
        self.episode = 0

    def _act(self, env: DiscreteActionSpace, state: Any, actions: list[Any]) -> Any:
        if self.exploration.choose(self.episode) is Choice.EXPLORE:
            return env.random_action()
        return _argmax_last(actions, lambda a: self._table.value(state, a))

    def go(self, env: DiscreteActionSpace) -> None:
        """Run one episode in ``env``, learning from every step."""
        next_state = env.reset()
        actions = env.actions()
        while next_state is not None:
            state = next_state
            action = self._act(env, state, actions)
            next_state, reward = env.step(action)
            actions = env.actions()
            self._table.learn(Experience(state, action, reward, next_state))
        self.episode += 1


@dataclass
class QTableAgentConfig:
    """Settings for :class:`QTableAgent`."""

    exploration: EpsilonGreedy = field(
        default_factory=lambda: EpsilonGreedy(Exponential(0.1, 1.0, 0.01))
    )
    alpha: float = 0.7
    gamma: float = 0.99


def _check_unit_interval(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"`{name}` must be in the interval [0, 1], got {value}")


class QTableAgent:
    """Q-learning agent keeping a value for every state-action pair."""

    def __init__(self, config: QTableAgentConfig | None = None) -> None:
        config = config if config is not None else QTableAgentConfig()
        _check_unit_interval("alpha", config.alpha)
        _check_unit_interval("gamma", config.gamma)
        self._q_table: dict[tuple[Hashable, Hashable], float] = {}
        self.exploration = config.exploration
        self.alpha = config.alpha
        self.gamma = config.gamma
        self.episode = 0

    def q_table(self) -> Mapping[tuple[Hashable, Hashable], float]:
        """Return a copy of the learned Q values keyed by ``(state, action)``."""
        return dict(self._q_table)

    def _q(self, state: Any, action: Any) -> float:
        return self._q_table.get((state, action), 0.0)

    def _act(self, env: DiscreteActionSpace, state: Any, actions: list[Any]) -> Any:
        if self.exploration.choose(self.episode) is Choice.EXPLORE:
            return env.random_action()
        return _argmax_last(actions, lambda a: self._q(state, a))

    def _learn(self, experience: Experience, next_actions: list[Any]) -> None:
        q_value = self._q(experience.state, experience.action)
        next_state = experience.next_state
        max_next_q = max(
            (
                self._q(next_state, a) if next_state is not None else 0.0
                for a in next_actions
            ),
            default=0.0,
        )
        target = experience.reward + self.gamma * max_next_q
        self._q_table[(experience.state, experience.action)] = (
            (1.0 - self.alpha) * q_value + self.alpha * target
        )

    def go(self, env: DiscreteActionSpace) -> None:
        """Run one episode in ``env``, learning from every step."""
        next_state = env.reset()
        actions = env.actions()
        while next_state is not None:
            state = next_state
            action = self._act(env, state, actions)
            next_state, reward = env.step(action)
            actions = env.actions()
            self._learn(Experience(state, action, reward, next_state), actions)
        self.episode += 1


@dataclass
class UCBAgentConfig:
    """Settings for :class:`UCBAgent`."""

    ucb_c: float = 1.0
    default_action_value: float = 0.0
    alpha_fn: Callable[[int], float] = _sample_average


class UCBAgent:
    """Tabular agent that explores with upper confidence bounds.

    Unvisited actions are always tried first; among equal bounds the last
    action wins.
    """

    def __init__(self, config: UCBAgentConfig | None = None) -> None:
        config = config if config is not None else UCBAgentConfig()
        self.ucb_c = config.ucb_c
        self._table = _OccurrenceTable(config.default_action_value, config.alpha_fn)
        self.t = 0
        self.episode = 0

    def _act(self, state: Any, actions: list[Any]) -> Any:
        k = self.ucb_c * math.sqrt(math.log(self.t + 1))

        def bound(action: Any) -> float:
            entry = self._table.entry(state, action)
            if entry.count <= 0:
                return math.inf
            return entry.value + k * entry.count ** -0.5

        return _argmax_last(actions, bound)

    def go(self, env: DiscreteActionSpace) -> None:
        """Run one episode in ``env``, learning from every step."""
        next_state = env.reset()
        actions = env.actions()
        while next_state is not None:
            state = next_state
            action = self._act(state, actions)
            next_state, reward = env.step(action)
            actions = env.actions()
            self._table.learn(Experience(state, action, reward, next_state))
            self.t += 1
        self.episode += 1