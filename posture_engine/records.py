# Report -> persistence metrics mapping (storage itself happens elsewhere)
from typing import Any, Optional, Sequence

from posture_engine.models import AssessmentRecord, CheckName, Landmark, PostureAnalysis

# Check that must have been measured for each record column to be meaningful
_COLUMN_SOURCES = {
    "head_forward_angle": ("head_forward", CheckName.FORWARD_HEAD),
    "shoulder_level_diff": ("shoulder_tilt", CheckName.SHOULDER_LEVEL),
    "spine_curvature": ("spine_angle", CheckName.SPINE_ALIGNMENT),
    "pelvis_tilt": ("hip_tilt", CheckName.PELVIC_TILT),
}


def to_assessment_record(analysis: PostureAnalysis,
                         keypoints: Optional[Sequence[Any]] = None) -> AssessmentRecord:
    """
    Map a report onto individually nameable metrics

    Columns whose check did not run are left as None rather than 0.

    Args:
        analysis: Final PostureAnalysis
        keypoints: Optional landmark set to attach as keypoints_data

    Returns:
        AssessmentRecord
    """
    measured = {item.check for item in analysis.items}
    raw = analysis.raw_data

    columns = {
        column: getattr(raw, field) if check in measured else None
        for column, (field, check) in _COLUMN_SOURCES.items()
    }

    keypoints_data = None
    if keypoints is not None:
        keypoints_data = [
            lm.model_dump() if isinstance(lm, Landmark) else lm
            for lm in keypoints
        ]

    return AssessmentRecord(
        overall_score=analysis.score,
        risk_level=analysis.status,
        keypoints_data=keypoints_data,
        **columns
    )
