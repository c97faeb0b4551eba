from typing import Dict, Optional

from posture_engine import config
from posture_engine import logger
from posture_engine.models import AssessmentItem, PostureAnalysis
from posture_engine.recommendation.rules import CHECK_RULES

DEFAULT_ACTIONS = [
    "Maintain neutral posture",
    "Take regular breaks",
    "Stay physically active"
]

DAILY_HABITS = (
    "Daily habits: sit and stand upright, carry bags on both shoulders, "
    "and avoid holding one position for long periods."
)


def _dominant_item(analysis: PostureAnalysis) -> Optional[AssessmentItem]:
    flagged = [item for item in analysis.items if item.status != "normal"]
    if not flagged:
        return None
    # max() keeps the first of equal values, i.e. detection order
    return max(flagged, key=lambda item: item.value)


def build_recommendation(analysis: PostureAnalysis) -> Dict:
    """
    Rule-based recommendation for a final report

    Args:
        analysis: Final PostureAnalysis

    Returns:
        {risk_level, dominant_issue, recommendation: {priority, message, actions}}
    """
    risk_level = config.RISK_LEVELS[analysis.status]
    priority = "MEDIUM" if risk_level == "MODERATE" else risk_level

    dominant = _dominant_item(analysis)

    if dominant is None:
        return {
            "risk_level": risk_level,
            "dominant_issue": None,
            "recommendation": {
                "priority": priority,
                "message": f"No posture issue detected. Score: {analysis.score}",
                "actions": DEFAULT_ACTIONS.copy()
            }
        }

    rule = CHECK_RULES.get(dominant.check.value, {})
    actions = rule.get("base_actions", DEFAULT_ACTIONS)

    logger.log_engine("Recommendation Built", {
        "dominant_issue": dominant.check.value,
        "priority": priority
    })

    return {
        "risk_level": risk_level,
        "dominant_issue": dominant.check.value,
        "recommendation": {
            "priority": priority,
            "message": f"Posture issue detected: {rule.get('label', dominant.name)}. Score: {analysis.score}",
            "actions": list(actions)  # Copy to avoid mutating the rules
        }
    }


def compose_advice(analysis: PostureAnalysis) -> str:
    """
    Offline advice prose, used where no text-generation service is available

    Paragraphs are separated by a blank line.
    """
    paragraphs = []

    if analysis.status == "good":
        paragraphs.append("Your posture is in good shape. Keep up your current sitting and standing habits.")
        paragraphs.append("Regular exercise such as swimming or running helps maintain good posture.")
    elif analysis.status == "warning":
        paragraphs.append("Some aspects of your posture need attention, but overall it is fair.")
        for item in analysis.items:
            if item.status != "warning":
                continue
            actions = CHECK_RULES.get(item.check.value, {}).get("base_actions")
            if actions:
                paragraphs.append(f"For {item.name.lower()}: {actions[0]}.")
    else:
        paragraphs.append("The assessment found clear posture problems that deserve attention.")
        paragraphs.append("Consider a professional assessment by an orthopedic or rehabilitation specialist.")
        paragraphs.append("Follow targeted corrective training under professional guidance.")

    paragraphs.append(DAILY_HABITS)

    return "\n\n".join(dict.fromkeys(paragraphs))
