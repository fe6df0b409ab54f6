"""Reinforcement learning building blocks: decay schedules, environment interfaces, exploration, replay structures, tabular agents and policy iteration."""

__version__ = "0.4.0"

__all__ = [
    "car_rental",
    "decay",
    "ds",
    "env",
    "exploration",
    "policy_iteration",
    "tabular",
]