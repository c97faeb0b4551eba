"""
posture_engine - heuristic posture assessment from body keypoints.

Frontal and lateral landmark sets go in; a scored report with findings and
suggestions comes out.
"""

from posture_engine.assessment import assess_posture, detect_and_assess
from posture_engine.fallback import fallback_analysis
from posture_engine.frontal import analyze_frontal
from posture_engine.fusion import combine_analysis
from posture_engine.geometry import line_angle, vertex_angle
from posture_engine.landmarks import LandmarkIndex
from posture_engine.lateral import analyze_lateral
from posture_engine.models import (
    AssessmentItem,
    AssessmentRecord,
    CheckName,
    Landmark,
    PartialAnalysis,
    PostureAnalysis,
    RawData,
)
from posture_engine.records import to_assessment_record
from posture_engine.scoring import posture_status

__version__ = "1.0.0"

__all__ = [
    "analyze_frontal",
    "analyze_lateral",
    "combine_analysis",
    "fallback_analysis",
    "assess_posture",
    "detect_and_assess",
    "to_assessment_record",
    "posture_status",
    "line_angle",
    "vertex_angle",
    "LandmarkIndex",
    "Landmark",
    "AssessmentItem",
    "AssessmentRecord",
    "CheckName",
    "PartialAnalysis",
    "PostureAnalysis",
    "RawData",
    "__version__",
]
