from dataclasses import dataclass

from rlearn.policy_iteration import PolicyIterationAgent, main

START = (2, 0)
GOAL = (0, 0)


@dataclass(frozen=True)
class _Outcome:
    next_state: tuple
    reward: float
    prob: float


class _ChainEnv:
    """From START, action 1 reaches GOAL with reward 1; action 0 stays."""

    def __init__(self, terminal=True, bonus_action=None):
        self.terminal = terminal
        self.bonus_action = bonus_action
        self.steps = 0
        self.state = START

    def states(self):
        return [GOAL, START]

    def actions(self):
        actions = [0, 1]
        if self.bonus_action is not None:
            actions.append(self.bonus_action)
        return actions

    def dynamics(self, state, action):
        if state == START and action == 1:
            return [_Outcome(GOAL, 1.0, 1.0)]
        if state == START and action == self.bonus_action:
            return [_Outcome(GOAL, 100.0, 1.0)]
        return [_Outcome(state, 0.0, 1.0)]

    def reset(self):
        self.state = START
        self.steps = 0
        return self.state

    def step(self, action):
        self.steps += 1
        if self.state == START and action == 1:
            self.state = GOAL
            return (None if self.terminal else GOAL), 1.0
        return self.state, 0.0


def test_learn_finds_rewarding_action():
    agent = PolicyIterationAgent(0.9)
    agent.learn(_ChainEnv(), 1)
    policy = agent.policy()
    assert policy[START] == 1
    assert policy[GOAL] == 0


def test_learn_evaluates_improved_policy():
    agent = PolicyIterationAgent(0.9)
    agent.learn(_ChainEnv(), 2)
    values = agent.state_value()
    assert values[START] == 1.0
    assert values[GOAL] == 0.0


def test_zero_iterations_learns_nothing():
    agent = PolicyIterationAgent(0.9)
    agent.learn(_ChainEnv(), 0)
    assert agent.policy() == {}
    assert agent.state_value() == {}


def test_improvement_skips_infeasible_actions():
    agent = PolicyIterationAgent(0.9)
    env = _ChainEnv(bonus_action=5)
    agent.learn(env, 1)
    assert agent.policy()[START] == 1


def test_policy_and_state_value_are_copies():
    agent = PolicyIterationAgent(0.9)
    agent.learn(_ChainEnv(), 1)
    agent.policy()[START] = 99
    agent.state_value()[START] = 99.0
    assert agent.policy()[START] == 1
    assert agent.state_value()[START] != 99.0


def test_go_follows_learned_policy():
    agent = PolicyIterationAgent(0.9)
    env = _ChainEnv()
    agent.learn(env, 1)
    assert agent.go(env) == 1.0
    assert env.steps == 1


def test_go_stops_after_max_steps():
    agent = PolicyIterationAgent(0.9)
    env = _ChainEnv()
    assert agent.go(env, max_steps=7) == 0.0
    assert env.steps == 7


def test_go_respects_max_steps_in_endless_episode():
    agent = PolicyIterationAgent(0.9)
    env = _ChainEnv(terminal=False)
    agent.learn(env, 1)
    total = agent.go(env, max_steps=4)
    assert env.steps == 4
    assert total == 1.0


def test_main_writes_csv_and_runs_plot(tmp_path):
    out = tmp_path / "out"
    marker = tmp_path / "plotted.txt"
    script = tmp_path / "plot.py"
    script.write_text(f"open({str(marker)!r}, 'w').write('done')\n")

    assert main(["--iterations", "0", "--out", str(out), "--plot", str(script)]) == 0
    assert (out / "data.csv").read_text() == ""
    assert marker.read_text() == "done"


def test_main_without_plot_only_writes_csv(tmp_path):
    out = tmp_path / "nested" / "out"
    assert main(["--iterations", "0", "--out", str(out)]) == 0
    assert sorted(p.name for p in out.iterdir()) == ["data.csv"]