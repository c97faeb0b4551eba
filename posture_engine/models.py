from enum import Enum
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ItemStatus = Literal["normal", "warning", "danger"]
PostureStatus = Literal["good", "warning", "danger"]


class CheckName(str, Enum):
    """Tag of every assessment item, one per check."""
    SHOULDER_LEVEL = "shoulder_level"
    PELVIC_TILT = "pelvic_tilt"
    HEAD_TILT = "head_tilt"
    SPINE_ALIGNMENT = "spine_alignment"
    KNEE_SYMMETRY = "knee_symmetry"
    FORWARD_HEAD = "forward_head"
    ROUNDED_SHOULDERS = "rounded_shoulders"
    PELVIC_TILT_SAGITTAL = "pelvic_tilt_sagittal"
    DETECTION_QUALITY = "detection_quality"


class ReportModel(BaseModel):
    """Immutable, camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Landmark(ReportModel):
    x: float
    y: float
    z: float = 0.0
    visibility: Optional[float] = Field(default=None, ge=0, le=1)


class AssessmentItem(ReportModel):
    check: CheckName
    name: str
    status: ItemStatus
    value: float = Field(ge=0, le=100)
    description: str
    angle: Optional[float] = None


class RawData(ReportModel):
    shoulder_tilt: float = 0.0
    hip_tilt: float = 0.0
    head_tilt: float = 0.0
    head_forward: float = 0.0
    shoulder_round: float = 0.0
    spine_angle: float = 0.0


class LateralRawData(ReportModel):
    head_forward: Optional[float] = None
    shoulder_round: Optional[float] = None


class PostureAnalysis(ReportModel):
    score: int = Field(ge=0, le=100)
    status: PostureStatus
    items: List[AssessmentItem] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)
    raw_data: RawData = Field(default_factory=RawData)


class PartialAnalysis(ReportModel):
    """Lateral-only result; score is a deduction (<= 0) for the frontal base score."""
    score: int = Field(le=0)
    items: List[AssessmentItem] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)
    raw_data: LateralRawData = Field(default_factory=LateralRawData)


class AssessmentRecord(ReportModel):
    """Flat metrics handed to the persistence collaborator."""
    overall_score: int
    head_forward_angle: Optional[float] = None
    shoulder_level_diff: Optional[float] = None
    spine_curvature: Optional[float] = None
    pelvis_tilt: Optional[float] = None
    risk_level: PostureStatus
    keypoints_data: Optional[Any] = None
