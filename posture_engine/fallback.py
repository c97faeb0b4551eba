# Degraded-input fallback report
from posture_engine import config
from posture_engine.models import AssessmentItem, CheckName, PostureAnalysis, RawData
from posture_engine.recommendation.rules import CHECK_RULES, FALLBACK_SUGGESTIONS
from posture_engine.scoring import posture_status


def fallback_analysis() -> PostureAnalysis:
    """
    Fixed low-confidence report used when no view produced usable landmarks

    Never computes geometry; always returns the same report.
    """
    rule = CHECK_RULES[CheckName.DETECTION_QUALITY.value]

    item = AssessmentItem(
        check=CheckName.DETECTION_QUALITY,
        name=rule["label"],
        status="warning",
        value=50,
        description=rule["descriptions"]["warning"]
    )

    return PostureAnalysis(
        score=config.FALLBACK_SCORE,
        status=posture_status(config.FALLBACK_SCORE),
        items=[item],
        suggestions=list(FALLBACK_SUGGESTIONS),
        raw_data=RawData()
    )
