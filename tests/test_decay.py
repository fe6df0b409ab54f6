import math

import pytest

from rlearn.decay import (
    Constant,
    Decay,
    Exponential,
    InverseTime,
    Linear,
    Step,
    validate,
)


def test_validate_accepts_matching_signs():
    assert validate(1.0, 1.0, 0.0) is None
    assert validate(-1.0, -1.0, 0.0) is None


@pytest.mark.parametrize("rate,vi,vf", [(1.0, -1.0, 0.0), (-1.0, 1.0, 0.0)])
def test_validate_rejects_mismatched_signs(rate, vi, vf):
    with pytest.raises(ValueError):
        validate(rate, vi, vf)


def test_constant_decay():
    x = Constant(1.0)
    assert x.evaluate(0.0) == 1.0
    assert x.evaluate(1.0) == 1.0


def test_exponential_decay():
    x = Exponential(2.0, 2.0, 0.5)
    assert x.evaluate(0.0) == 2.0
    assert x.evaluate(1.0) == pytest.approx(0.5 + 1.5 * math.exp(-2.0))


def test_inverse_time_decay():
    x = InverseTime(2.0, 2.0, 0.5)
    assert x.evaluate(0.0) == 2.0
    assert x.evaluate(1.0) == 1.0


def test_linear_decay():
    x = Linear(0.5, 2.0, 0.5)
    assert x.evaluate(0.0) == 2.0
    assert x.evaluate(1.0) == 1.5
    assert x.evaluate(10.0) == 0.5


def test_step_decay():
    x = Step(0.5, 2.0, 0.0, 0.5)
    assert x.evaluate(0.25) == 2.0
    assert x.evaluate(0.75) == 1.0
    assert x.evaluate(1.0) == 0.5


@pytest.mark.parametrize("cls", [Exponential, InverseTime, Linear])
def test_invalid_construction_raises(cls):
    with pytest.raises(ValueError):
        cls(1.0, 0.0, 1.0)


def test_invalid_step_construction_raises():
    with pytest.raises(ValueError):
        Step(1.0, 0.0, 1.0, 1.0)


def test_decay_is_abstract():
    with pytest.raises(TypeError):
        Decay()


def test_exponential_approaches_final_value():
    x = Exponential(1.0, 1.0, 0.1)
    assert x.evaluate(1000.0) == pytest.approx(0.1)