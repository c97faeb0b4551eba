# Configuration Module - Procedural approach with module-level variables
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Server Configuration
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))

# Logging Configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Landmark Validity
LANDMARK_COUNT = 33
MIN_LANDMARK_VISIBILITY = float(os.getenv("MIN_LANDMARK_VISIBILITY", "0.3"))

# Scoring Configuration
BASE_SCORE = 100
METRIC_PRECISION = 6  # Decimal places kept on measured metrics before classification
MAX_SUGGESTIONS = 6
FALLBACK_SCORE = 72

# Synthetic torso reference above the hip when no shoulder is visible (lateral view).
# Unverified heuristic, keep the value as-is.
PELVIC_REFERENCE_OFFSET = 0.2

# Score -> status tiers (lower bound of each tier, inclusive)
STATUS_BANDS = {
    "good": 85,
    "warning": 70,
}

# Frontal checks, in detection order
# Each tier is (threshold, deduction); a metric must exceed the threshold
FRONTAL_CHECKS = {
    "shoulder_level": {
        "danger": (5.0, 18),        # >5°
        "warning": (2.5, 8),        # >2.5°
        "value_scale": 10,
        "raw_key": "shoulder_tilt"
    },
    "pelvic_tilt": {
        "danger": (4.0, 15),        # >4°
        "warning": (2.0, 7),        # >2°
        "value_scale": 12,
        "raw_key": "hip_tilt"
    },
    "head_tilt": {
        "danger": (6.0, 10),        # >6°
        "warning": (3.0, 5),        # >3°
        "value_scale": 8,
        "raw_key": "head_tilt"
    },
    "spine_alignment": {
        "danger": (5.0, 15),        # >5% of frame width
        "warning": (2.5, 8),        # >2.5%
        "value_scale": 10,
        "raw_key": "spine_angle"
    },
    "knee_symmetry": {
        "danger": None,             # warning tier only
        "warning": (4.0, 5),        # >4% of frame height
        "value_scale": 12,
        "raw_key": None
    }
}

# Lateral checks, in detection order
LATERAL_CHECKS = {
    "forward_head": {
        "danger": (8.0, 15),
        "warning": (4.0, 8),
        "value_scale": 6,
        "raw_key": "head_forward"
    },
    "rounded_shoulders": {
        "danger": (10.0, 15),
        "warning": (5.0, 8),
        "value_scale": 5,
        "raw_key": "shoulder_round"
    },
    "pelvic_tilt_sagittal": {
        "danger": None,
        "warning": (20.0, 5),       # |tilt| > 20°
        "value_scale": 2.5,
        "raw_key": None
    }
}

# Status -> recommendation priority
RISK_LEVELS = {
    "good": "LOW",
    "warning": "MODERATE",
    "danger": "HIGH"
}
