import math

import pytest

from posture_engine.frontal import analyze_frontal
from posture_engine.landmarks import LandmarkIndex as L
from posture_engine.models import CheckName
from posture_engine.recommendation.rules import POSITIVE_SUGGESTION


def shoulder_set(make_landmarks, make_segment, angle):
    left, right = make_segment(angle)
    return make_landmarks({L.LEFT_SHOULDER: left, L.RIGHT_SHOULDER: right})


def test_level_pose_scores_full_marks(upright_frontal):
    result = analyze_frontal(upright_frontal)

    assert result.score == 100
    assert result.status == "good"
    assert [item.check for item in result.items] == [
        CheckName.SHOULDER_LEVEL,
        CheckName.PELVIC_TILT,
        CheckName.HEAD_TILT,
        CheckName.SPINE_ALIGNMENT,
        CheckName.KNEE_SYMMETRY,
    ]
    assert all(item.status == "normal" for item in result.items)
    assert result.suggestions == [POSITIVE_SUGGESTION]


def test_shoulder_tilt_of_six_degrees_is_danger(make_landmarks, make_segment):
    result = analyze_frontal(shoulder_set(make_landmarks, make_segment, 6))

    (item,) = result.items
    assert item.check == CheckName.SHOULDER_LEVEL
    assert item.status == "danger"
    assert item.value == pytest.approx(60)
    assert item.angle == pytest.approx(6)
    assert result.score == 82


def test_shoulder_tilt_of_exactly_five_degrees_is_not_danger(make_landmarks, make_segment):
    result = analyze_frontal(shoulder_set(make_landmarks, make_segment, 5))

    (item,) = result.items
    assert item.status == "warning"
    assert result.score == 92


@pytest.mark.parametrize("angle, status, score", [
    (1.0, "normal", 100),
    (2.5, "normal", 100),
    (3.0, "warning", 92),
    (-7.0, "danger", 82),
])
def test_shoulder_thresholds(make_landmarks, make_segment, angle, status, score):
    result = analyze_frontal(shoulder_set(make_landmarks, make_segment, angle))

    assert result.items[0].status == status
    assert result.score == score


def test_mirrored_shoulder_order_gives_same_tilt(make_landmarks, make_segment):
    left, right = make_segment(6)
    mirrored = make_landmarks({L.LEFT_SHOULDER: right, L.RIGHT_SHOULDER: left})

    assert analyze_frontal(mirrored).raw_data.shoulder_tilt == pytest.approx(6)


def test_shoulder_tilt_ten_degrees_only(make_landmarks, make_segment):
    left_shoulder, right_shoulder = make_segment(10, origin=(0.4, 0.3))
    mid_x = (left_shoulder[0] + right_shoulder[0]) / 2
    landmarks = make_landmarks({
        L.LEFT_EAR: (mid_x - 0.05, 0.15),
        L.RIGHT_EAR: (mid_x + 0.05, 0.15),
        L.LEFT_SHOULDER: left_shoulder,
        L.RIGHT_SHOULDER: right_shoulder,
        L.LEFT_HIP: (mid_x - 0.08, 0.55),
        L.RIGHT_HIP: (mid_x + 0.08, 0.55),
        L.LEFT_KNEE: (mid_x - 0.07, 0.75),
        L.RIGHT_KNEE: (mid_x + 0.07, 0.75),
    })

    result = analyze_frontal(landmarks)

    statuses = {item.check: item.status for item in result.items}
    assert statuses[CheckName.SHOULDER_LEVEL] == "danger"
    assert all(s == "normal" for c, s in statuses.items() if c != CheckName.SHOULDER_LEVEL)
    assert result.score == 82
    assert result.status == "warning"
    assert len(result.suggestions) == 1
    assert result.suggestions[0] != POSITIVE_SUGGESTION


def test_knee_difference_alone(make_landmarks):
    landmarks = make_landmarks({
        L.LEFT_KNEE: (0.43, 0.70),
        L.RIGHT_KNEE: (0.57, 0.75),
    })

    result = analyze_frontal(landmarks)

    (item,) = result.items
    assert item.check == CheckName.KNEE_SYMMETRY
    assert item.status == "warning"
    assert item.value == pytest.approx(60)
    assert result.score == 95
    assert result.status == "good"


def test_knee_check_has_no_danger_tier(make_landmarks):
    landmarks = make_landmarks({
        L.LEFT_KNEE: (0.43, 0.60),
        L.RIGHT_KNEE: (0.57, 0.90),
    })

    (item,) = analyze_frontal(landmarks).items
    assert item.status == "warning"
    assert item.value == 100


def test_hip_and_head_tilt(make_landmarks, make_segment):
    left_hip, right_hip = make_segment(3, origin=(0.42, 0.55), length=0.16)
    left_ear, right_ear = make_segment(7, origin=(0.45, 0.15), length=0.1)
    landmarks = make_landmarks({
        L.LEFT_HIP: left_hip,
        L.RIGHT_HIP: right_hip,
        L.LEFT_EAR: left_ear,
        L.RIGHT_EAR: right_ear,
    })

    result = analyze_frontal(landmarks)

    hip, head = result.items
    assert (hip.check, hip.status) == (CheckName.PELVIC_TILT, "warning")
    assert hip.value == pytest.approx(36)
    assert (head.check, head.status) == (CheckName.HEAD_TILT, "danger")
    assert head.value == pytest.approx(56)
    assert result.score == 100 - 7 - 10
    assert result.raw_data.hip_tilt == pytest.approx(3)
    assert result.raw_data.head_tilt == pytest.approx(7)


def test_spine_offset(upright_frontal, make_landmarks):
    shifted = list(upright_frontal)
    shifted[L.LEFT_SHOULDER] = shifted[L.LEFT_SHOULDER].model_copy(update={"x": 0.44})
    shifted[L.RIGHT_SHOULDER] = shifted[L.RIGHT_SHOULDER].model_copy(update={"x": 0.68})

    result = analyze_frontal(shifted)

    spine = next(item for item in result.items if item.check == CheckName.SPINE_ALIGNMENT)
    assert spine.status == "danger"
    assert spine.value == pytest.approx(60)
    assert result.raw_data.spine_angle == pytest.approx(math.degrees(math.atan2(0.06, 0.25)))
    assert result.score == 85


def test_spine_check_needs_all_four_joints(upright_frontal):
    partial = list(upright_frontal)
    partial[L.RIGHT_HIP] = None

    checks = [item.check for item in analyze_frontal(partial).items]
    assert CheckName.SPINE_ALIGNMENT not in checks
    assert CheckName.PELVIC_TILT not in checks


def test_low_visibility_landmark_is_skipped(make_landmarks):
    landmarks = make_landmarks({
        L.LEFT_SHOULDER: (0.4, 0.3, 0.0, 0.9),
        L.RIGHT_SHOULDER: (0.6, 0.4, 0.0, 0.1),
    })

    assert analyze_frontal(landmarks).items == []


def test_non_finite_coordinates_are_treated_as_missing(make_landmarks):
    landmarks = make_landmarks({
        L.LEFT_SHOULDER: (float("nan"), 0.3),
        L.RIGHT_SHOULDER: (0.6, 0.4),
        L.LEFT_KNEE: (0.43, 0.70),
        L.RIGHT_KNEE: (0.57, float("inf")),
    })

    result = analyze_frontal(landmarks)

    assert result.items == []
    assert result.score == 100


def test_empty_and_short_sets_do_not_raise():
    assert analyze_frontal([]).score == 100
    assert analyze_frontal(None).items == []
    assert analyze_frontal([None] * 5).items == []


def test_every_check_failing_stays_in_range(make_landmarks, make_segment):
    left_shoulder, right_shoulder = make_segment(12, origin=(0.3, 0.3))
    left_hip, right_hip = make_segment(-9, origin=(0.45, 0.55), length=0.16)
    left_ear, right_ear = make_segment(15, origin=(0.5, 0.15), length=0.1)
    landmarks = make_landmarks({
        L.LEFT_EAR: left_ear,
        L.RIGHT_EAR: right_ear,
        L.LEFT_SHOULDER: left_shoulder,
        L.RIGHT_SHOULDER: right_shoulder,
        L.LEFT_HIP: left_hip,
        L.RIGHT_HIP: right_hip,
        L.LEFT_KNEE: (0.45, 0.70),
        L.RIGHT_KNEE: (0.60, 0.80),
    })

    result = analyze_frontal(landmarks)

    assert [item.status for item in result.items] == ["danger"] * 4 + ["warning"]
    assert result.score == 100 - 18 - 15 - 10 - 15 - 5
    assert result.status == "danger"
    assert len(result.suggestions) == 5
    assert len(set(result.suggestions)) == 5


def test_repeat_analysis_is_identical(upright_frontal, make_landmarks, make_segment):
    landmarks = shoulder_set(make_landmarks, make_segment, 4)

    first = analyze_frontal(landmarks)
    second = analyze_frontal(landmarks)

    assert first == second
    assert first.model_dump_json() == second.model_dump_json()


def test_input_is_not_mutated(upright_frontal):
    snapshot = [lm.model_copy() if lm else None for lm in upright_frontal]
    analyze_frontal(upright_frontal)
    assert upright_frontal == snapshot


def test_non_finite_depth_does_not_hide_frontal_checks(make_landmarks, make_segment):
    left, right = make_segment(6)
    landmarks = make_landmarks({
        L.LEFT_SHOULDER: (*left, float("nan")),
        L.RIGHT_SHOULDER: (*right, float("nan")),
    })

    result = analyze_frontal(landmarks)

    (item,) = result.items
    assert item.check == CheckName.SHOULDER_LEVEL
    assert item.status == "danger"
    assert result.score == 82
