"""Time-decaying values used for exploration parameters and learning rates."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass


def validate(rate: float, vi: float, vf: float) -> None:
    """Check that ``vi - vf`` has the same sign as ``rate``.

    Raises ``ValueError`` when the parameters describe a value that would
    move away from its final value instead of towards it.
    """
    if (rate >= 0.0 and vi > vf) or (rate < 0.0 and vi < vf):
        return
    raise ValueError("`vi - vf` must have same sign as `rate`")


class Decay(ABC):
    """A value that changes over time."""

    @abstractmethod
    def evaluate(self, t: float) -> float:
        """Return the value at time ``t``."""


@dataclass(frozen=True)
class Constant(Decay):
    """A value that never changes."""

    value: float = 0.0

    def evaluate(self, t: float) -> float:
        return self.value


@dataclass(frozen=True)
class _Bounded(Decay):
    rate: float
    vi: float
    vf: float

    def __post_init__(self) -> None:
        validate(self.rate, self.vi, self.vf)

    def evaluate(self, t: float) -> float:  # pragma: no cover - overridden
        raise NotImplementedError


@dataclass(frozen=True)
class Exponential(_Bounded):
    """v(t) = vf + (vi - vf) * exp(-rate * t)"""

    def evaluate(self, t: float) -> float:
        return self.vf + (self.vi - self.vf) * math.exp(-self.rate * t)


@dataclass(frozen=True)
class InverseTime(_Bounded):
    """v(t) = vf + (vi - vf) / (1 + rate * t)"""

    def evaluate(self, t: float) -> float:
        return self.vf + (self.vi - self.vf) / (1.0 + self.rate * t)


@dataclass(frozen=True)
class Linear(_Bounded):
    """v(t) = max(vi - rate * t, vf)"""

    def evaluate(self, t: float) -> float:
        return max(self.vi - self.rate * t, self.vf)


@dataclass(frozen=True)
class Step(_Bounded):
    """v(t) = max(vi * rate ** floor(t / step), vf)"""

    step: float = 1.0

    def evaluate(self, t: float) -> float:
        return max(self.vi * self.rate ** math.floor(t / self.step), self.vf)