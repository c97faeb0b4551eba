"""
Frontal-view analyzer.

Starts from a base score of 100 and folds five independent checks over a
ScoreState accumulator, in detection order:
shoulder level, pelvic tilt, head tilt, spinal alignment, knee symmetry.
A check whose landmarks are unavailable leaves the state untouched.
"""
from functools import reduce
from typing import Any, Optional, Sequence

from posture_engine import config
from posture_engine import logger
from posture_engine.geometry import horizontal_tilt, midpoint, vertical_lean
from posture_engine.landmarks import LandmarkIndex as L
from posture_engine.landmarks import LandmarkSet, coerce_landmark_set, get_landmark, point
from posture_engine.models import CheckName, PostureAnalysis, RawData
from posture_engine.recommendation.rules import POSITIVE_SUGGESTION
from posture_engine.scoring import (
    ScoreState,
    clamp_score,
    posture_status,
    record_check,
)

RULES = config.FRONTAL_CHECKS


def _tilt_check(check: CheckName, left: L, right: L):
    def check_fn(state: ScoreState, landmarks: LandmarkSet) -> ScoreState:
        lm_left = get_landmark(landmarks, left)
        lm_right = get_landmark(landmarks, right)
        if lm_left is None or lm_right is None:
            return state

        tilt = horizontal_tilt(point(lm_left), point(lm_right))
        return record_check(state, check, RULES[check.value], tilt, angle=tilt)

    check_fn.__name__ = f"check_{check.value}"
    return check_fn


check_shoulder_level = _tilt_check(CheckName.SHOULDER_LEVEL, L.LEFT_SHOULDER, L.RIGHT_SHOULDER)
check_pelvic_tilt = _tilt_check(CheckName.PELVIC_TILT, L.LEFT_HIP, L.RIGHT_HIP)
check_head_tilt = _tilt_check(CheckName.HEAD_TILT, L.LEFT_EAR, L.RIGHT_EAR)


def check_spine_alignment(state: ScoreState, landmarks: LandmarkSet) -> ScoreState:
    """Horizontal offset between shoulder and hip midpoints, in % of frame width"""
    joints = [get_landmark(landmarks, i) for i in
              (L.LEFT_SHOULDER, L.RIGHT_SHOULDER, L.LEFT_HIP, L.RIGHT_HIP)]
    if any(lm is None for lm in joints):
        return state

    left_shoulder, right_shoulder, left_hip, right_hip = joints
    shoulder_mid = midpoint(point(left_shoulder), point(right_shoulder))
    hip_mid = midpoint(point(left_hip), point(right_hip))

    offset = abs(shoulder_mid[0] - hip_mid[0]) * 100
    lean = vertical_lean(hip_mid, shoulder_mid)
    return record_check(state, CheckName.SPINE_ALIGNMENT, RULES["spine_alignment"],
                        offset, angle=lean, raw_value=lean)


def check_knee_symmetry(state: ScoreState, landmarks: LandmarkSet) -> ScoreState:
    """Vertical knee height difference, in % of frame height"""
    left_knee = get_landmark(landmarks, L.LEFT_KNEE)
    right_knee = get_landmark(landmarks, L.RIGHT_KNEE)
    if left_knee is None or right_knee is None:
        return state

    diff = abs(left_knee.y - right_knee.y) * 100
    return record_check(state, CheckName.KNEE_SYMMETRY, RULES["knee_symmetry"], diff)


FRONTAL_CHECK_SEQUENCE = (
    check_shoulder_level,
    check_pelvic_tilt,
    check_head_tilt,
    check_spine_alignment,
    check_knee_symmetry,
)


def analyze_frontal(landmarks: Optional[Sequence[Any]]) -> PostureAnalysis:
    """
    Score a frontal-view landmark set

    Args:
        landmarks: Up to 33 landmarks (None entries allowed); None means no pose

    Returns:
        Full PostureAnalysis with score, status, items, suggestions and raw metrics
    """
    landmark_set = coerce_landmark_set(landmarks) or []

    state = reduce(lambda acc, check: check(acc, landmark_set),
                   FRONTAL_CHECK_SEQUENCE, ScoreState())

    suggestions = list(state.suggestions)
    if not suggestions:
        suggestions.append(POSITIVE_SUGGESTION)

    for item in state.items:
        if item.status != "normal":
            logger.log_frontal("Finding", {"check": item.check.value, "status": item.status, "value": item.value})

    score = clamp_score(config.BASE_SCORE - state.deduction)
    status = posture_status(score)

    logger.log_frontal("Analysis Complete", {
        "score": score,
        "status": status,
        "checks_run": len(state.items),
        "deduction": state.deduction
    })

    return PostureAnalysis(
        score=score,
        status=status,
        items=list(state.items),
        suggestions=suggestions,
        raw_data=RawData(**state.raw_data())
    )

