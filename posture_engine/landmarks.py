# Landmark index, coercion of detector output, and guarded access
import math
from enum import IntEnum
from typing import Any, List, Optional, Sequence, Tuple

from pydantic import ValidationError

from posture_engine import config
from posture_engine import logger
from posture_engine.models import Landmark


class LandmarkIndex(IntEnum):
    """33-point body landmark naming used by the pose detector."""
    NOSE = 0
    LEFT_EYE_INNER = 1
    LEFT_EYE = 2
    LEFT_EYE_OUTER = 3
    RIGHT_EYE_INNER = 4
    RIGHT_EYE = 5
    RIGHT_EYE_OUTER = 6
    LEFT_EAR = 7
    RIGHT_EAR = 8
    MOUTH_LEFT = 9
    MOUTH_RIGHT = 10
    LEFT_SHOULDER = 11
    RIGHT_SHOULDER = 12
    LEFT_ELBOW = 13
    RIGHT_ELBOW = 14
    LEFT_WRIST = 15
    RIGHT_WRIST = 16
    LEFT_PINKY = 17
    RIGHT_PINKY = 18
    LEFT_INDEX = 19
    RIGHT_INDEX = 20
    LEFT_THUMB = 21
    RIGHT_THUMB = 22
    LEFT_HIP = 23
    RIGHT_HIP = 24
    LEFT_KNEE = 25
    RIGHT_KNEE = 26
    LEFT_ANKLE = 27
    RIGHT_ANKLE = 28
    LEFT_HEEL = 29
    RIGHT_HEEL = 30
    LEFT_FOOT_INDEX = 31
    RIGHT_FOOT_INDEX = 32


LandmarkSet = Sequence[Optional[Landmark]]


def coerce_landmark(entry: Any) -> Optional[Landmark]:
    """
    Convert one detector entry into a Landmark

    Accepts Landmark, dict, (x, y[, z[, visibility]]) sequences, or objects
    exposing x/y/z/visibility attributes.

    Returns:
        Landmark, or None if the entry is absent or unreadable
    """
    if entry is None or isinstance(entry, Landmark):
        return entry

    try:
        if isinstance(entry, dict):
            return Landmark.model_validate(entry)

        if isinstance(entry, (list, tuple)) and len(entry) >= 2:
            keys = ("x", "y", "z", "visibility")
            return Landmark.model_validate(dict(zip(keys, entry)))

        if hasattr(entry, "x") and hasattr(entry, "y"):
            return Landmark(
                x=entry.x,
                y=entry.y,
                z=getattr(entry, "z", 0.0) or 0.0,
                visibility=getattr(entry, "visibility", None)
            )
    except (ValidationError, TypeError, ValueError) as e:
        logger.log_warning("Unreadable Landmark", {"entry": repr(entry), "error": str(e)})
        return None

    logger.log_warning("Unreadable Landmark", {
        "entry": repr(entry),
        "error": f"unsupported entry of type {type(entry).__name__}"
    })
    return None


def coerce_landmark_set(landmarks: Optional[Sequence[Any]]) -> Optional[List[Optional[Landmark]]]:
    """
    Normalize a detector result into a list of Optional[Landmark]

    Returns:
        None when the detector found no pose, otherwise at most 33 entries
    """
    if landmarks is None:
        return None
    return [coerce_landmark(entry) for entry in list(landmarks)[:config.LANDMARK_COUNT]]


def is_available(landmark: Optional[Landmark]) -> bool:
    """
    Present, finite in x/y, and visible enough to measure from

    Depth is not checked here; checks that read z discard non-finite metrics.
    """
    if landmark is None:
        return False
    if not all(math.isfinite(v) for v in (landmark.x, landmark.y)):
        return False
    if landmark.visibility is not None and landmark.visibility <= config.MIN_LANDMARK_VISIBILITY:
        return False
    return True


def get_landmark(landmarks: LandmarkSet, index: int) -> Optional[Landmark]:
    """Guarded indexed access: out-of-range or unavailable joints read as None"""
    if index < 0 or index >= len(landmarks):
        return None
    landmark = landmarks[index]
    return landmark if is_available(landmark) else None


def first_available(landmarks: LandmarkSet, *indices: int) -> Optional[Landmark]:
    """First available landmark among indices (e.g. left side, then right side)"""
    for index in indices:
        landmark = get_landmark(landmarks, index)
        if landmark is not None:
            return landmark
    return None


def point(landmark: Landmark) -> Tuple[float, float]:
    return (landmark.x, landmark.y)
