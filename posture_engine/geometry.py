"""
Geometry primitives over landmark coordinates.
All functions take plain (x, y) pairs and return degrees.
"""
import math


def _normalize(degrees: float) -> float:
    # atan2 yields [-180, 180]; report the half-open range (-180, 180]
    return 180.0 if degrees == -180.0 else degrees


def line_angle(p1, p2) -> float:
    """Angle of the vector p1 -> p2 against the horizontal axis, (-180, 180]°."""
    dx = p2[0] - p1[0]
    dy = p2[1] - p1[1]
    return _normalize(math.degrees(math.atan2(dy, dx)))


def vertex_angle(p1, p2, p3) -> float:
    """Signed angle at p2 from ray p2->p1 to ray p2->p3, (-180, 180]°."""
    ax, ay = p1[0] - p2[0], p1[1] - p2[1]
    bx, by = p3[0] - p2[0], p3[1] - p2[1]
    cross = ax * by - ay * bx
    dot = ax * bx + ay * by
    return _normalize(math.degrees(math.atan2(cross, dot)))


def horizontal_tilt(p1, p2) -> float:
    """
    Deviation of segment p1-p2 from a level horizon, [0, 90]°.
    Direction-agnostic: a left/right pair gives the same tilt in either image order.
    """
    tilt = abs(line_angle(p1, p2))
    if tilt > 90.0:
        tilt = 180.0 - tilt
    return tilt


def vertical_lean(lower, upper) -> float:
    """Signed lean of the segment lower -> upper away from the image vertical."""
    dx = upper[0] - lower[0]
    dy = lower[1] - upper[1]  # image y grows downward
    return math.degrees(math.atan2(dx, dy))


def midpoint(p1, p2):
    return ((p1[0] + p2[0]) / 2, (p1[1] + p2[1]) / 2)
