"""Policy iteration over state values, with a command for the car rental problem."""

from __future__ import annotations

import argparse
import csv
import subprocess
import sys
from pathlib import Path
from typing import Any

from rlearn.car_rental import CarRental


class PolicyIterationAgent:
    """Dynamic-programming agent that alternates policy evaluation and improvement.

    The environment must provide ``states()``, ``actions()`` and
    ``dynamics(state, action)`` returning outcomes with ``next_state``,
    ``reward`` and ``prob``. States are pairs ``(i1, i2)``; an action ``a``
    is considered in improvement only when ``-i2 <= a < i1``.
    """

    def __init__(self, gamma: float, theta: float = 1e-4) -> None:
        self.gamma = gamma
        self.theta = theta
        self._state_value: dict[Any, float] = {}
        self._policy: dict[Any, Any] = {}

    def _backup(self, env: Any, state: Any, action: Any) -> float:
        total = 0.0
        for outcome in env.dynamics(state, action):
            next_value = self._state_value.setdefault(outcome.next_state, 0.0)
            total += outcome.prob * (outcome.reward + self.gamma * next_value)
        return total

    def _evaluate(self, env: Any) -> None:
        delta = float("inf")
        while delta > self.theta:
            delta = 0.0
            for state in env.states():
                action = self._policy.setdefault(state, 0)
                new_value = self._backup(env, state, action)
                old_value = self._state_value.get(state, 0.0)
                self._state_value[state] = new_value
                delta = max(delta, abs(old_value - new_value))

    def _improve(self, env: Any) -> None:
        for state in env.states():
            i1, i2 = state
            best_action, best_value = 0, None
            for action in env.actions():
                if not -i2 <= action < i1:
                    continue
                value = self._backup(env, state, action)
                if best_value is None or value >= best_value:
                    best_action, best_value = action, value
            self._policy[state] = best_action

    def learn(self, env: Any, num_iterations: int) -> None:
        """Run ``num_iterations`` rounds of evaluation followed by improvement."""
        for _ in range(num_iterations):
            print("Evaluating...")
            self._evaluate(env)
            print("Improving...")
            self._improve(env)

    def go(self, env: Any, max_steps: int | None = None) -> float:
        """Follow the learned policy from a reset; return the total reward.

        Stops when the environment ends the episode or after ``max_steps``.
        Unknown states fall back to action 0.
        """
        state = env.reset()
        total = 0.0
        steps = 0
        while state is not None and (max_steps is None or steps < max_steps):
            action = self._policy.get(state, 0)
            state, reward = env.step(action)
            total += reward
            steps += 1
        return total

    def policy(self) -> dict[Any, Any]:
        """Return a copy of the policy, mapping states to actions."""
        return dict(self._policy)

    def state_value(self) -> dict[Any, float]:
        """Return a copy of the state value function."""
        return dict(self._state_value)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Solve the car rental problem with policy iteration."
    )
    parser.add_argument("--iterations", type=int, default=5)
    parser.add_argument("--gamma", type=float, default=0.9)
    parser.add_argument("--out", type=Path, default=Path("out"))
    parser.add_argument(
        "--plot", type=Path, default=None, help="script run on the written data"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Learn policies, write one CSV row of actions per iteration, then plot."""
    args = _parse_args(argv)
    env = CarRental()
    agent = PolicyIterationAgent(args.gamma)

    policies = []
    for i in range(args.iterations):
        print(f"Iteration {i + 1}")
        agent.learn(env, 1)
        policies.append(sorted(agent.policy().items()))

    args.out.mkdir(parents=True, exist_ok=True)
    with open(args.out / "data.csv", "w", newline="") as handle:
        writer = csv.writer(handle)
        for policy in policies:
            writer.writerow([str(action) for _, action in policy])

    if args.plot is not None:
        subprocess.run([sys.executable, str(args.plot)], check=True)

    return 0


if __name__ == "__main__":
    sys.exit(main())