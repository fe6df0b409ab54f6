"""Jack's car rental problem: two locations, Poisson requests and returns."""

from __future__ import annotations

import math
import random
from collections.abc import Iterable
from dataclasses import dataclass
from itertools import product

from rlearn.env import DiscreteActionSpace, DiscreteStateSpace

State = tuple[int, int]

MAX_INVENTORY = 19
OVERFLOW_THRESHOLD = 10
OVERFLOW_COST = 4
MOVE_COST = 2
RENTAL_CREDIT = 10
MAX_MOVE = 5
INITIAL_INVENTORY = 10
_EVENT_RANGE = range(10)


@dataclass(frozen=True)
class Outcome:
    """One possible result of taking an action in a state."""

    next_state: State
    reward: float
    prob: float


def _poisson_pmf(lam: float, k: int) -> float:
    return math.exp(k * math.log(lam) - lam - math.lgamma(k + 1))


def _sample_poisson(rng: random.Random, lam: float) -> int:
    threshold = math.exp(-lam)
    k = 0
    p = rng.random()
    while p > threshold:
        k += 1
        p *= rng.random()
    return k


@dataclass
class _Location:
    inventory: int
    expected_requests: float
    expected_returns: float


def generate_pmf_cache(
    lambdas: Iterable[int], values: Iterable[int]
) -> dict[tuple[int, int], float]:
    """Return the Poisson probability of every ``(lambda, value)`` pair."""
    values = list(values)
    return {(lam, v): _poisson_pmf(lam, v) for lam in lambdas for v in values}


def transition(
    state: State,
    action: int,
    loc1_req: int,
    loc2_req: int,
    loc1_ret: int,
    loc2_ret: int,
) -> tuple[State, float]:
    """Apply an overnight move followed by a day of returns and rentals.

    ``action`` is the number of cars moved from location 1 to location 2;
    it is clamped to the cars actually present. Returns ``(next_state, reward)``.
    """
    action = max(-state[1], min(action, state[0]))
    inventories = [state[0] - action, state[1] + action]

    reward = -abs(action) * MOVE_COST
    # One car can be shuttled from the first location to the second for free.
    if action > 0:
        reward += MOVE_COST

    for loc, (req, ret) in enumerate(((loc1_req, loc1_ret), (loc2_req, loc2_ret))):
        inv = inventories[loc] + ret
        fulfilled = min(req, inv)
        inv -= fulfilled
        reward += fulfilled * RENTAL_CREDIT
        inv = min(inv, MAX_INVENTORY)
        if inv > OVERFLOW_THRESHOLD:
            reward -= OVERFLOW_COST
        inventories[loc] = inv

    return (inventories[0], inventories[1]), float(reward)


class CarRental(DiscreteActionSpace, DiscreteStateSpace):
    """Two rental locations whose inventories form the state.

    Actions are the number of cars moved from location 1 to location 2,
    from -5 to 5. Episodes never end.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._locations = (
            _Location(INITIAL_INVENTORY, 3.0, 3.0),
            _Location(INITIAL_INVENTORY, 4.0, 2.0),
        )
        self.pmf_cache = generate_pmf_cache([2, 3, 4], _EVENT_RANGE)

    @property
    def state(self) -> State:
        return (self._locations[0].inventory, self._locations[1].inventory)

    def _set_state(self, state: State) -> None:
        self._locations[0].inventory, self._locations[1].inventory = state

    def dynamics(self, state: State, action: int) -> list[Outcome]:
        """Enumerate outcomes for every combination of 0-9 requests and returns."""
        loc1_req_lambda, loc2_req_lambda, loc1_ret_lambda, loc2_ret_lambda = 3, 4, 3, 2
        cache = self.pmf_cache
        outcomes = []
        for loc1_req, loc2_req, loc1_ret, loc2_ret in product(_EVENT_RANGE, repeat=4):
            prob = (
                cache[(loc1_req_lambda, loc1_req)]
                * cache[(loc2_req_lambda, loc2_req)]
                * cache[(loc1_ret_lambda, loc1_ret)]
                * cache[(loc2_ret_lambda, loc2_ret)]
            )
            next_state, reward = transition(
                state, action, loc1_req, loc2_req, loc1_ret, loc2_ret
            )
            outcomes.append(Outcome(next_state, reward, prob))
        return outcomes

    def step(self, action: int) -> tuple[State, float]:
        rng = self._rng
        first, second = self._locations
        loc1_req = _sample_poisson(rng, first.expected_requests)
        loc2_req = _sample_poisson(rng, second.expected_requests)
        loc1_ret = _sample_poisson(rng, first.expected_returns)
        loc2_ret = _sample_poisson(rng, second.expected_returns)
        next_state, reward = transition(
            self.state, action, loc1_req, loc2_req, loc1_ret, loc2_ret
        )
        self._set_state(next_state)
        return next_state, reward

    def reset(self) -> State:
        for location in self._locations:
            location.inventory = INITIAL_INVENTORY
        return self.state

    def random_action(self) -> int:
        return self._rng.randint(-MAX_MOVE, MAX_MOVE)

    def states(self) -> list[State]:
        return [(i // 20, i % 20) for i in range(400)]

    def actions(self) -> list[int]:
        return list(range(-MAX_MOVE, MAX_MOVE + 1))