from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from posture_engine import config
from posture_engine.landmarks import coerce_landmark, coerce_landmark_set, is_available
from posture_engine.models import Landmark


def test_coerce_accepts_detector_shapes():
    assert coerce_landmark({"x": 0.1, "y": 0.2}) == Landmark(x=0.1, y=0.2)
    assert coerce_landmark((0.1, 0.2, 0.3, 0.9)) == Landmark(x=0.1, y=0.2, z=0.3, visibility=0.9)
    assert coerce_landmark(SimpleNamespace(x=0.1, y=0.2, z=None, visibility=0.8)).z == 0.0


def test_unsupported_entry_is_logged(monkeypatch, capsys):
    monkeypatch.setattr(config, "LOG_LEVEL", "INFO")

    assert coerce_landmark(0.5) is None
    assert coerce_landmark((0.5,)) is None

    out = capsys.readouterr().out
    assert out.count("Unreadable Landmark") == 2
    assert "unsupported entry of type float" in out


def test_invalid_entry_is_logged(monkeypatch, capsys):
    monkeypatch.setattr(config, "LOG_LEVEL", "INFO")

    assert coerce_landmark({"x": "left", "y": 0.2}) is None
    assert "Unreadable Landmark" in capsys.readouterr().out


@pytest.mark.parametrize("visibility", [-0.1, 1.5, 5])
def test_visibility_must_be_a_probability(visibility):
    with pytest.raises(ValidationError):
        Landmark(x=0.1, y=0.2, visibility=visibility)

    assert coerce_landmark({"x": 0.1, "y": 0.2, "visibility": visibility}) is None


def test_availability_ignores_depth():
    assert is_available(Landmark(x=0.1, y=0.2, z=float("nan")))
    assert not is_available(Landmark(x=float("inf"), y=0.2))
    assert not is_available(Landmark(x=0.1, y=0.2, visibility=0.3))


def test_long_sets_are_truncated():
    assert len(coerce_landmark_set([{"x": 0.1, "y": 0.2}] * 40)) == 33
    assert coerce_landmark_set(None) is None
