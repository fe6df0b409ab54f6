import pytest

from rlearn.env import Environment, Report


class MockEnv(Environment):
    def step(self, action):
        return None, 0.0

    def reset(self):
        return 0

    def random_action(self):
        return 0


def test_report_functional():
    report = Report(["c", "a", "b"])
    assert report.keys() == ["a", "b", "c"]

    report["a"] += 1.0
    assert report["a"] == 1.0

    inner = report.take()
    assert list(inner.values()) == [1.0, 0.0, 0.0]
    assert list(report.values()) == [0.0, 0.0, 0.0]


def test_report_iterates_sorted_after_insertion():
    report = Report(["b"])
    report["a"] = 2.0
    assert list(report) == ["a", "b"]
    assert len(report) == 2


def test_report_take_resets_to_format_keys():
    report = Report(["x"])
    report["extra"] = 5.0
    taken = report.take()
    assert taken == {"extra": 5.0, "x": 0.0}
    assert dict(report.items()) == {"x": 0.0}


def test_report_missing_key_raises():
    report = Report(["a"])
    with pytest.raises(KeyError) as excinfo:
        report["missing"]
    assert "missing" in str(excinfo.value)
    assert report["a"] == 0.0


def test_environment_is_active_defaults_to_true():
    env = MockEnv()
    assert Environment.is_active(env) is True


def test_environment_is_abstract():
    with pytest.raises(TypeError):
        Environment()