# rlearn

Small, dependency-free building blocks for reinforcement learning in pure Python.

## What is inside

| Module | Contents |
| --- | --- |
| `rlearn.decay` | Time-decaying values: `Constant`, `Exponential`, `InverseTime`, `Linear`, `Step`, all subclasses of `Decay` with `evaluate(t)`; `validate(rate, vi, vf)` checks their parameters. |
| `rlearn.env` | Environment interfaces (`Environment`, `DiscreteActionSpace`, `ContinuousActionSpace`, `DiscreteStateSpace`, `DeterministicModel`, `KnownDynamics`) and `Report`, a mapping of metric names to values iterated in sorted key order. |
| `rlearn.ds` | `RingBuffer`, a fixed-size buffer that overwrites its oldest element, and `SumTree`, a binary tree of partial sums for prioritised sampling. |
| `rlearn.exploration` | Exploration policies `EpsilonGreedy`, `Softmax` (Boltzmann) and `UCB`, and the `Choice` enum (`EXPLORE`, `EXPLOIT`). |
| `rlearn.tabular` | Tabular agents `QTableAgent`, `ActionOccurrenceAgent` and `UCBAgent`, their config dataclasses, and the `Experience` record. |
| `rlearn.car_rental` | Jack's car rental problem as the `CarRental` environment, with a full `dynamics` model, plus `transition` and `generate_pmf_cache`. |
| `rlearn.policy_iteration` | `PolicyIterationAgent`, a dynamic-programming agent, and the `rlearn-car-rental` command. |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Quick tour

### Decay schedules

The bounded schedules take `(rate, vi, vf)` and raise `ValueError` when
`vi - vf` does not have the same sign as `rate`:

```python
from rlearn.decay import Exponential, Linear, Step

epsilon = Exponential(1e-3, 1.0, 0.01)
epsilon.evaluate(0.0)                  # 1.0
Linear(0.5, 2.0, 0.5).evaluate(10.0)   # 0.5, never below the final value
Step(0.5, 2.0, 0.0, step=0.5).evaluate(0.75)  # 1.0
```

### Exploration

```python
from rlearn.decay import Constant
from rlearn.exploration import UCB, Choice, EpsilonGreedy, Softmax

policy = EpsilonGreedy(Constant(0.1))
if policy.choose(12) is Choice.EXPLORE:
    ...

Softmax(Constant(1.0)).choose(0.0, [0.1, 0.5, 0.2])   # a sampled index

ucb = UCB(c=1.0, num_actions=3)
ucb.choose(10.0, [0.1, 0.5, 0.2])   # index of the highest bound
```

`EpsilonGreedy` and `Softmax` accept an optional `random.Random` for
reproducible runs. `UCB.choose` raises `ValueError` if the number of Q values
differs from `num_actions`.

### Environments and reports

Subclass `Environment` and implement `step(action)` (returning
`(next_state, reward)`, with `next_state` `None` once the episode has ended),
`reset()` and `random_action()`. Tabular agents also need
`DiscreteActionSpace.actions()`.

```python
from rlearn.env import Report

report = Report(["steps", "reward"])
report["reward"] += 1.0
report.take()    # {'reward': 1.0, 'steps': 0.0}; every value is reset to 0.0
```

### Tabular agents

States and actions must be hashable. `go(env)` plays one episode and learns
from every step:

```python
from rlearn.tabular import QTableAgent, QTableAgentConfig

agent = QTableAgent(QTableAgentConfig(gamma=0.95))
for _ in range(1000):
    agent.go(env)
print(agent.q_table())
```

`QTableAgent` raises `ValueError` when `alpha` or `gamma` is outside `[0, 1]`.
`ActionOccurrenceAgent` updates `Q += alpha(n) * (R - Q)` with epsilon-greedy
exploration; `UCBAgent` uses the same update but picks actions by upper
confidence bound, trying unvisited actions first. With `UCBAgent` the index of
the chosen action is taken from `actions()`, so the action list should be the
integers `0..n-1`.

### Replay structures

```python
from rlearn.ds import RingBuffer, SumTree

buf = RingBuffer(4)
for i in range(6):
    buf.push(i)
buf.view()   # [4, 5, 2, 3]

tree = SumTree(8)
for i in range(8):
    tree.update(i, float(i))
tree.sum()       # 28.0
tree.find(4.0)   # 3
```

## The car rental example

`CarRental` has two locations holding 0-19 cars each; an action moves between
-5 and 5 cars from the first location to the second. Its episodes never end,
so `PolicyIterationAgent.go(env, max_steps)` needs a step limit to return.

```python
from rlearn.car_rental import CarRental
from rlearn.policy_iteration import PolicyIterationAgent

env = CarRental()
agent = PolicyIterationAgent(gamma=0.9)
agent.learn(env, 1)
agent.go(env, max_steps=100)   # total reward over 100 days
```

The command

```
rlearn-car-rental
```

trains a `PolicyIterationAgent` for five rounds of policy evaluation and
improvement, printing its progress, and writes the policy after each round as
one row of `out/data.csv` (one action per state, states in sorted order).
Options: `--iterations N`, `--gamma G`, `--out DIR`, and `--plot SCRIPT`, which
runs `SCRIPT` with the current Python interpreter once the file is written.
Every evaluation sweep enumerates 10,000 outcomes for each of 400 states, so a
full run takes a long time in pure Python.

## What this package does not do

There are no neural-network agents, no replay-memory classes built on
`RingBuffer` and `SumTree`, no ready-made environments apart from `CarRental`,
and no live display of training progress; `Report` only collects the numbers.
The `--plot` option runs a script you supply; the package ships no plotting.