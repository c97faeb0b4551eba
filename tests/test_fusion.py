import pytest

from posture_engine.frontal import analyze_frontal
from posture_engine.fusion import combine_analysis
from posture_engine.landmarks import LandmarkIndex as L
from posture_engine.lateral import analyze_lateral
from posture_engine.models import LateralRawData, PartialAnalysis, PostureAnalysis, RawData


def test_combine_without_lateral_is_identity(upright_frontal):
    frontal = analyze_frontal(upright_frontal)

    assert combine_analysis(frontal, None) is frontal
    assert combine_analysis(frontal) == frontal


def test_perfect_frontal_plus_lateral_deduction_hits_warning_boundary(upright_frontal, make_landmarks):
    lateral = analyze_lateral(make_landmarks({
        L.LEFT_EAR: (0.5, 0.15, 0.21),
        L.LEFT_SHOULDER: (0.5, 0.3, 0.12),
        L.LEFT_HIP: (0.5, 0.55, 0.0),
    }))
    frontal = analyze_frontal(upright_frontal)

    combined = combine_analysis(frontal, lateral)

    assert lateral.score == -30
    assert combined.score == 70
    assert combined.status == "warning"
    assert combined.items == frontal.items + lateral.items


def test_score_is_clamped_at_zero():
    frontal = PostureAnalysis(score=20, status="danger")
    lateral = PartialAnalysis(score=-35)

    combined = combine_analysis(frontal, lateral)

    assert combined.score == 0
    assert combined.status == "danger"


def test_suggestions_are_deduplicated_and_capped():
    frontal = PostureAnalysis(
        score=60,
        status="danger",
        suggestions=["a", "b", "c", "d", "e"]
    )
    lateral = PartialAnalysis(score=-8, suggestions=["b", "f", "g", "h"])

    combined = combine_analysis(frontal, lateral)

    assert combined.suggestions == ["a", "b", "c", "d", "e", "f"]


def test_raw_data_merge_only_overwrites_measured_lateral_fields():
    frontal = PostureAnalysis(
        score=90,
        status="good",
        raw_data=RawData(shoulder_tilt=1.5, head_forward=0.0, shoulder_round=0.0)
    )
    lateral = PartialAnalysis(score=0, raw_data=LateralRawData(head_forward=3.2))

    raw = combine_analysis(frontal, lateral).raw_data

    assert raw.shoulder_tilt == pytest.approx(1.5)
    assert raw.head_forward == pytest.approx(3.2)
    assert raw.shoulder_round == 0.0


def test_fused_report_serializes_camel_case(upright_frontal, upright_lateral):
    combined = combine_analysis(analyze_frontal(upright_frontal), analyze_lateral(upright_lateral))

    payload = combined.model_dump(by_alias=True)

    assert set(payload["rawData"]) == {
        "shoulderTilt", "hipTilt", "headTilt", "headForward", "shoulderRound", "spineAngle"
    }
