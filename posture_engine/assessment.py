# Assessment orchestration: views -> analyzers -> fusion or fallback
from typing import Any, Callable, Optional, Sequence

from posture_engine import logger
from posture_engine.fallback import fallback_analysis
from posture_engine.frontal import analyze_frontal
from posture_engine.fusion import combine_analysis
from posture_engine.lateral import analyze_lateral
from posture_engine.models import PostureAnalysis, RawData
from posture_engine.recommendation.rules import POSITIVE_SUGGESTION

Detector = Callable[[Any], Optional[Sequence[Any]]]


def baseline_analysis() -> PostureAnalysis:
    """Perfect frontal baseline used when only the lateral view is usable"""
    return PostureAnalysis(score=100, status="good", items=[], suggestions=[], raw_data=RawData())


def assess_posture(frontal: Optional[Sequence[Any]] = None,
                   lateral: Optional[Sequence[Any]] = None) -> PostureAnalysis:
    """
    Produce the final report from zero, one or two landmark sets

    A view is usable when its analyzer produced at least one item.

    Args:
        frontal: Frontal-view landmarks, or None if detection failed
        lateral: Lateral-view landmarks, or None if detection failed

    Returns:
        Fused report, frontal-only report, lateral-on-baseline report,
        or the fallback report when neither view is usable
    """
    frontal_result = analyze_frontal(frontal) if frontal is not None else None
    lateral_result = analyze_lateral(lateral) if lateral is not None else None

    frontal_usable = frontal_result is not None and bool(frontal_result.items)
    lateral_usable = lateral_result is not None and bool(lateral_result.items)

    logger.log_engine("Views Analyzed", {
        "frontal": "usable" if frontal_usable else "unusable",
        "lateral": "usable" if lateral_usable else "unusable"
    })

    if frontal_usable:
        return combine_analysis(frontal_result, lateral_result if lateral_usable else None)

    if lateral_usable:
        combined = combine_analysis(baseline_analysis(), lateral_result)
        if not combined.suggestions:
            combined = combined.model_copy(update={"suggestions": [POSITIVE_SUGGESTION]})
        return combined

    logger.log_fallback("Substituted Fallback Report", {
        "reason": "No usable landmarks in any view"
    })
    return fallback_analysis()


def run_detector(detector: Detector, image: Any, view: str) -> Optional[Sequence[Any]]:
    """
    Invoke the external pose detector, absorbing its failures

    Returns:
        Landmark set, or None if there is no image, no pose, or the detector raised
    """
    if image is None:
        return None

    try:
        landmarks = detector(image)
    except Exception as e:
        logger.log_error("Detector Failed", e, {"view": view})
        return None

    if landmarks is None:
        logger.log_detector("No Pose Detected", {"view": view})
    return landmarks


def detect_and_assess(frontal_image: Any, lateral_image: Any,
                      detector: Detector) -> PostureAnalysis:
    """
    Run detection on both photographs, then assess

    Args:
        frontal_image: Front-facing photo (any type the detector accepts), or None
        lateral_image: Side photo, or None
        detector: Callable image -> landmark set or None

    Returns:
        Final PostureAnalysis; never raises on detection failure
    """
    frontal = run_detector(detector, frontal_image, "frontal")
    lateral = run_detector(detector, lateral_image, "lateral")
    return assess_posture(frontal, lateral)
