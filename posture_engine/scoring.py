# Core scoring logic
import math
from typing import Dict, Iterable, List, NamedTuple, Optional, Tuple

from posture_engine import config
from posture_engine import logger
from posture_engine.models import AssessmentItem, CheckName
from posture_engine.recommendation.rules import CHECK_RULES


class ScoreState(NamedTuple):
    """Accumulator threaded through each check: (state, landmarks) -> state"""
    deduction: int = 0
    items: Tuple[AssessmentItem, ...] = ()
    suggestions: Tuple[str, ...] = ()
    raw: Tuple[Tuple[str, float], ...] = ()

    def raw_data(self) -> Dict[str, float]:
        return dict(self.raw)


def posture_status(score: float) -> str:
    """
    Convert a 0-100 posture score to its status tier

    Args:
        score: Posture score (higher is better)

    Returns:
        "good", "warning" or "danger"
    """
    if score >= config.STATUS_BANDS["good"]:
        return "good"
    elif score >= config.STATUS_BANDS["warning"]:
        return "warning"
    return "danger"


def clamp_score(score: float) -> int:
    return int(min(max(score, 0), config.BASE_SCORE))


def classify_severity(magnitude: float, rule: Dict) -> Tuple[str, int]:
    """
    Classify a metric magnitude against a check rule

    Tiers are exclusive: the metric must exceed a tier's threshold.

    Returns:
        (status, deduction)
    """
    for level in ("danger", "warning"):
        tier = rule.get(level)
        if tier is None:
            continue
        threshold, deduction = tier
        if magnitude > threshold:
            return level, deduction
    return "normal", 0


def is_finite(*values: Optional[float]) -> bool:
    return all(v is None or math.isfinite(v) for v in values)


def round_metric(value: float) -> float:
    return round(value, config.METRIC_PRECISION)


def record_check(state: ScoreState, check: CheckName, rule: Dict, measured: float,
                 angle: Optional[float] = None, variant: Optional[str] = None,
                 raw_value: Optional[float] = None) -> ScoreState:
    """
    Score one measured check and fold it into the accumulator

    Args:
        state: Accumulator so far
        check: Which check produced the measurement
        rule: Thresholds/deductions from config
        measured: Metric, possibly signed; severity uses its magnitude
        angle: Optional angle to attach to the item
        variant: Description/suggestion key to use instead of the status
                 when the check is not normal (e.g. "anterior")
        raw_value: Value stored under the rule's raw_key (defaults to the magnitude)

    Returns:
        New accumulator; unchanged if any input is non-finite
    """
    if not is_finite(measured, angle, raw_value):
        logger.log_warning("Non-finite Metric Discarded", {
            "check": check.value,
            "measured": measured
        })
        return state

    magnitude = round_metric(abs(measured))
    status, deduction = classify_severity(magnitude, rule)
    value = min(magnitude * rule["value_scale"], 100)

    texts = CHECK_RULES[check.value]
    key = variant if variant and status != "normal" else status

    item = AssessmentItem(
        check=check,
        name=texts["label"],
        status=status,
        value=value,
        description=texts["descriptions"][key],
        angle=round_metric(angle) if angle is not None else None
    )

    suggestions = state.suggestions
    if status != "normal":
        suggestions = suggestions + (texts["suggestions"][key],)

    raw = state.raw
    if rule.get("raw_key"):
        stored = magnitude if raw_value is None else round_metric(raw_value)
        raw = raw + ((rule["raw_key"], stored),)

    return ScoreState(
        deduction=state.deduction + deduction,
        items=state.items + (item,),
        suggestions=suggestions,
        raw=raw
    )


def dedupe_suggestions(suggestions: Iterable[str], limit: Optional[int] = None) -> List[str]:
    """Ordered-set collapse: first occurrence wins, optional truncation"""
    unique = list(dict.fromkeys(suggestions))
    return unique if limit is None else unique[:limit]
