"""
Lateral-view analyzer.

Produces a PartialAnalysis whose score is a deduction (<= 0) to be added to a
frontal score. Each joint resolves independently, left side first.
"""
import math
from functools import reduce
from typing import Any, Optional, Sequence

from posture_engine import config
from posture_engine import logger
from posture_engine.geometry import vertex_angle
from posture_engine.landmarks import LandmarkIndex as L
from posture_engine.landmarks import LandmarkSet, coerce_landmark_set, first_available, point
from posture_engine.models import CheckName, LateralRawData, PartialAnalysis
from posture_engine.scoring import ScoreState, record_check

RULES = config.LATERAL_CHECKS


def _ear(landmarks):
    return first_available(landmarks, L.LEFT_EAR, L.RIGHT_EAR)


def _shoulder(landmarks):
    return first_available(landmarks, L.LEFT_SHOULDER, L.RIGHT_SHOULDER)


def _hip(landmarks):
    return first_available(landmarks, L.LEFT_HIP, L.RIGHT_HIP)


def _knee(landmarks):
    return first_available(landmarks, L.LEFT_KNEE, L.RIGHT_KNEE)


def _ankle(landmarks):
    return first_available(landmarks, L.LEFT_ANKLE, L.RIGHT_ANKLE)


def check_forward_head(state: ScoreState, landmarks: LandmarkSet) -> ScoreState:
    """Ear depth relative to shoulder depth, signed, x100"""
    ear, shoulder = _ear(landmarks), _shoulder(landmarks)
    if ear is None or shoulder is None:
        return state

    offset = (ear.z - shoulder.z) * 100
    return record_check(state, CheckName.FORWARD_HEAD, RULES["forward_head"],
                        offset, raw_value=offset)


def check_rounded_shoulders(state: ScoreState, landmarks: LandmarkSet) -> ScoreState:
    """Shoulder depth relative to hip depth, signed, x100"""
    shoulder, hip = _shoulder(landmarks), _hip(landmarks)
    if shoulder is None or hip is None:
        return state

    offset = (shoulder.z - hip.z) * 100
    return record_check(state, CheckName.ROUNDED_SHOULDERS, RULES["rounded_shoulders"],
                        offset, raw_value=offset)


def pelvic_reference(landmarks: LandmarkSet, hip):
    """Torso reference above the hip: the shoulder if visible, else a fixed offset"""
    shoulder = _shoulder(landmarks)
    if shoulder is not None:
        return point(shoulder)
    return (hip.x, hip.y - config.PELVIC_REFERENCE_OFFSET)


def check_pelvic_tilt_sagittal(state: ScoreState, landmarks: LandmarkSet) -> ScoreState:
    """Trunk-thigh deviation from a straight line at the hip; sign gives the direction"""
    hip, knee, ankle = _hip(landmarks), _knee(landmarks), _ankle(landmarks)
    if hip is None or knee is None or ankle is None:
        return state

    reference, vertex, thigh = pelvic_reference(landmarks, hip), point(hip), point(knee)
    if reference == vertex or thigh == vertex:
        # Zero-length ray, the angle is undefined
        return state

    raw = vertex_angle(reference, vertex, thigh)
    tilt = math.copysign(180.0 - abs(raw), raw)
    variant = "anterior" if tilt > 0 else "posterior"

    return record_check(state, CheckName.PELVIC_TILT_SAGITTAL, RULES["pelvic_tilt_sagittal"],
                        tilt, angle=tilt, variant=variant)


LATERAL_CHECK_SEQUENCE = (
    check_forward_head,
    check_rounded_shoulders,
    check_pelvic_tilt_sagittal,
)


def analyze_lateral(landmarks: Optional[Sequence[Any]]) -> PartialAnalysis:
    """
    Score a lateral-view landmark set

    Args:
        landmarks: Up to 33 landmarks (None entries allowed); None means no pose

    Returns:
        PartialAnalysis with score = -total deduction
    """
    landmark_set = coerce_landmark_set(landmarks) or []

    state = reduce(lambda acc, check: check(acc, landmark_set),
                   LATERAL_CHECK_SEQUENCE, ScoreState())

    for item in state.items:
        if item.status != "normal":
            logger.log_lateral("Finding", {"check": item.check.value, "status": item.status, "value": item.value})

    logger.log_lateral("Analysis Complete", {
        "deduction": state.deduction,
        "checks_run": len(state.items)
    })

    return PartialAnalysis(
        score=-state.deduction,
        items=list(state.items),
        suggestions=list(state.suggestions),
        raw_data=LateralRawData(**state.raw_data())
    )
