# Multi-view fusion: frontal report + optional lateral deduction
from typing import Optional

from posture_engine import config
from posture_engine import logger
from posture_engine.models import PartialAnalysis, PostureAnalysis
from posture_engine.scoring import clamp_score, dedupe_suggestions, posture_status


def combine_analysis(frontal: PostureAnalysis,
                     lateral: Optional[PartialAnalysis] = None) -> PostureAnalysis:
    """
    Merge a frontal report with a lateral partial report

    Args:
        frontal: Full frontal PostureAnalysis
        lateral: Lateral PartialAnalysis, or None

    Returns:
        The frontal report itself when lateral is None, otherwise a new
        report with concatenated items, deduplicated suggestions (at most
        MAX_SUGGESTIONS), the summed score and a recomputed status
    """
    if lateral is None:
        return frontal

    score = clamp_score(frontal.score + lateral.score)
    suggestions = dedupe_suggestions(
        [*frontal.suggestions, *lateral.suggestions],
        limit=config.MAX_SUGGESTIONS
    )
    measured = lateral.raw_data.model_dump(exclude_none=True)
    raw_data = frontal.raw_data.model_copy(update=measured)

    combined = PostureAnalysis(
        score=score,
        status=posture_status(score),
        items=[*frontal.items, *lateral.items],
        suggestions=suggestions,
        raw_data=raw_data
    )

    logger.log_fusion("Combined Report", {
        "frontal_score": frontal.score,
        "lateral_delta": lateral.score,
        "score": combined.score,
        "status": combined.status
    })

    return combined
