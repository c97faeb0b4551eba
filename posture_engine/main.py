# FastAPI Application - Posture Assessment Service
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import FastAPI

from posture_engine import config
from posture_engine import logger
from posture_engine.assessment import assess_posture
from posture_engine.frontal import analyze_frontal
from posture_engine.lateral import analyze_lateral
from posture_engine.models import (
    AssessmentRecord,
    Landmark,
    PartialAnalysis,
    PostureAnalysis,
    ReportModel,
)
from posture_engine.records import to_assessment_record
from posture_engine.recommendation.builder import build_recommendation, compose_advice

# Initialize FastAPI
app = FastAPI(
    title="Posture Assessment Engine",
    description="Keypoints in, posture score, findings and suggestions out",
    version="1.0.0"
)


# ============================================================================
# PYDANTIC MODELS
# ============================================================================

class ViewRequest(ReportModel):
    landmarks: Optional[List[Optional[Landmark]]] = None


class AnalyzeRequest(ReportModel):
    frontal: Optional[List[Optional[Landmark]]] = None
    lateral: Optional[List[Optional[Landmark]]] = None


class AnalyzeResponse(ReportModel):
    analysis: PostureAnalysis
    record: AssessmentRecord
    recommendation: Dict[str, Any]
    advice: str


# ============================================================================
# STARTUP
# ============================================================================

@app.on_event("startup")
async def startup_event():
    """Announce configuration on startup"""
    logger.log_lifecycle("STARTUP", "Posture Assessment Engine")
    logger.log_success("Server Ready", {
        "log_level": config.LOG_LEVEL,
        "min_landmark_visibility": config.MIN_LANDMARK_VISIBILITY,
        "max_suggestions": config.MAX_SUGGESTIONS
    })


# ============================================================================
# HEALTH CHECK
# ============================================================================

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "posture-engine",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


# ============================================================================
# ANALYSIS ROUTES
# ============================================================================

@app.post("/analyze/frontal", response_model=PostureAnalysis)
async def analyze_frontal_view(request: ViewRequest):
    """
    Analyze a single frontal landmark set

    Missing joints are skipped; an empty or null set scores 100 with no items.
    """
    logger.log_api("POST /analyze/frontal", {
        "landmarks": len(request.landmarks or [])
    })
    return analyze_frontal(request.landmarks or [])


@app.post("/analyze/lateral", response_model=PartialAnalysis)
async def analyze_lateral_view(request: ViewRequest):
    """
    Analyze a single lateral landmark set

    The score is a deduction to add to a frontal score.
    """
    logger.log_api("POST /analyze/lateral", {
        "landmarks": len(request.landmarks or [])
    })
    return analyze_lateral(request.landmarks or [])


@app.post("/analyze", response_model=AnalyzeResponse)
async def analyze(request: AnalyzeRequest):
    """
    Full assessment from one or two views

    Falls back to a low-confidence report when neither view is usable.
    """
    logger.log_api("POST /analyze", {
        "frontal": request.frontal is not None,
        "lateral": request.lateral is not None
    })

    analysis = assess_posture(request.frontal, request.lateral)
    keypoints = request.frontal if request.frontal is not None else request.lateral

    return AnalyzeResponse(
        analysis=analysis,
        record=to_assessment_record(analysis, keypoints=keypoints),
        recommendation=build_recommendation(analysis),
        advice=compose_advice(analysis)
    )


# ============================================================================
# ROOT
# ============================================================================

@app.get("/")
async def root():
    """API information"""
    return {
        "service": "Posture Assessment Engine",
        "version": "1.0.0",
        "endpoints": {
            "analysis": ["/analyze", "/analyze/frontal", "/analyze/lateral"],
            "health": ["/health"]
        },
        "documentation": "/docs",
        "notes": [
            "Landmarks follow the 33-point body layout; missing joints may be null",
            "POST /analyze returns a low-confidence fallback when no view is usable"
        ]
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.HOST, port=config.PORT)
