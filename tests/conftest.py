import math

import pytest

from posture_engine.landmarks import LandmarkIndex as L
from posture_engine.models import Landmark


def build_landmarks(points):
    """33-slot set with only the given {index: (x, y[, z[, visibility]])} filled in"""
    landmarks = [None] * 33
    for index, coords in points.items():
        keys = ("x", "y", "z", "visibility")
        landmarks[int(index)] = Landmark(**dict(zip(keys, coords)))
    return landmarks


def segment_at(angle_deg, origin=(0.4, 0.4), length=0.2):
    """Two points whose line_angle is angle_deg"""
    rad = math.radians(angle_deg)
    return origin, (origin[0] + length * math.cos(rad), origin[1] + length * math.sin(rad))


@pytest.fixture
def make_landmarks():
    return build_landmarks


@pytest.fixture
def make_segment():
    return segment_at


@pytest.fixture
def upright_frontal():
    """Level, symmetric frontal pose"""
    return build_landmarks({
        L.NOSE: (0.5, 0.15),
        L.LEFT_EAR: (0.45, 0.15),
        L.RIGHT_EAR: (0.55, 0.15),
        L.LEFT_SHOULDER: (0.38, 0.3),
        L.RIGHT_SHOULDER: (0.62, 0.3),
        L.LEFT_HIP: (0.42, 0.55),
        L.RIGHT_HIP: (0.58, 0.55),
        L.LEFT_KNEE: (0.43, 0.75),
        L.RIGHT_KNEE: (0.57, 0.75),
        L.LEFT_ANKLE: (0.43, 0.95),
        L.RIGHT_ANKLE: (0.57, 0.95),
    })


@pytest.fixture
def upright_lateral():
    """Side view with ear, shoulder and hip stacked at equal depth"""
    return build_landmarks({
        L.LEFT_EAR: (0.5, 0.15, 0.0),
        L.LEFT_SHOULDER: (0.5, 0.3, 0.0),
        L.LEFT_HIP: (0.5, 0.55, 0.0),
        L.LEFT_KNEE: (0.5, 0.75, 0.0),
        L.LEFT_ANKLE: (0.5, 0.95, 0.0),
    })
