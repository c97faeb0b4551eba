# Structured Logging Module - Procedural Approach
from datetime import datetime
from typing import Any, Dict, Optional

from posture_engine import config

# ANSI Color Codes for Terminal
class Colors:
    BLUE = '\033[94m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    PURPLE = '\033[95m'
    CYAN = '\033[96m'
    WHITE = '\033[97m'
    RESET = '\033[0m'
    BOLD = '\033[1m'

# Step Prefixes with Emojis
STEP_PREFIXES = {
    "ENGINE": "⚙️",
    "FRONTAL": "🧍",
    "LATERAL": "🚶",
    "FUSION": "🔗",
    "FALLBACK": "🛟",
    "DETECTOR": "📷",
    "API": "🌐",
    "ERROR": "❌",
    "SUCCESS": "✅",
    "WARNING": "⚠️"
}

LEVELS = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40
}

# Next Step Suggestions
NEXT_STEPS = {
    "FRONTAL:ANALYSIS": "Run the lateral view if available, then combine",
    "LATERAL:ANALYSIS": "Combine with the frontal report via combine_analysis()",
    "FUSION:COMBINED": "Report ready, map it with to_assessment_record() for storage",
    "FALLBACK:SUBSTITUTED": "Ask the user to retake the photos",
}


def get_timestamp() -> str:
    """Get formatted timestamp"""
    return datetime.now().strftime("%H:%M:%S.%f")[:-3]


def is_enabled(level: str) -> bool:
    """Check a level against the configured LOG_LEVEL"""
    threshold = LEVELS.get(str(config.LOG_LEVEL).upper(), LEVELS["INFO"])
    return LEVELS.get(level, LEVELS["INFO"]) >= threshold


def log_step(step: str, action: str, data: Optional[Dict[str, Any]] = None,
             color: str = Colors.CYAN, level: str = "INFO"):
    """
    Log a step with structured format

    Args:
        step: Step category (ENGINE, FRONTAL, LATERAL, FUSION, API, etc.)
        action: Description of the action
        data: Optional dictionary of data to display
        color: ANSI color code
        level: DEBUG, INFO, WARNING or ERROR
    """
    if not is_enabled(level):
        return

    prefix = STEP_PREFIXES.get(step, "🔹")
    timestamp = get_timestamp()

    print(f"{color}{Colors.BOLD}[{timestamp}] {prefix} [{step}]{Colors.RESET} {action}")

    if data:
        for key, value in data.items():
            # Truncate long values
            if isinstance(value, str) and len(value) > 100:
                value = value[:97] + "..."
            print(f"   {Colors.WHITE}├─ {key}: {value}{Colors.RESET}")

    # Suggest next step
    next_step_key = f"{step}:{action.split()[0].upper()}" if action else step
    if next_step_key in NEXT_STEPS:
        print(f"   {Colors.YELLOW}└─ >>> Next: {NEXT_STEPS[next_step_key]}{Colors.RESET}")
    print()  # Blank line for readability


def log_engine(action: str, data: Optional[Dict[str, Any]] = None):
    """Log orchestration events"""
    log_step("ENGINE", action, data, Colors.CYAN, "DEBUG")


def log_frontal(action: str, data: Optional[Dict[str, Any]] = None):
    """Log frontal analyzer findings"""
    log_step("FRONTAL", action, data, Colors.BLUE, "DEBUG")


def log_lateral(action: str, data: Optional[Dict[str, Any]] = None):
    """Log lateral analyzer findings"""
    log_step("LATERAL", action, data, Colors.PURPLE, "DEBUG")


def log_fusion(action: str, data: Optional[Dict[str, Any]] = None):
    log_step("FUSION", action, data, Colors.CYAN, "DEBUG")


def log_fallback(action: str, data: Optional[Dict[str, Any]] = None):
    """Log substitution of the low-confidence fallback report"""
    log_step("FALLBACK", action, data, Colors.YELLOW, "WARNING")


def log_detector(action: str, data: Optional[Dict[str, Any]] = None):
    log_step("DETECTOR", action, data, Colors.YELLOW, "WARNING")


def log_api(action: str, data: Optional[Dict[str, Any]] = None):
    """Log API events"""
    log_step("API", action, data, Colors.CYAN, "INFO")


def log_error(action: str, error: Exception, data: Optional[Dict[str, Any]] = None):
    """Log errors with exception type"""
    error_data = dict(data or {})
    error_data["Error"] = str(error)
    error_data["Type"] = type(error).__name__
    log_step("ERROR", action, error_data, Colors.RED, "ERROR")


def log_success(action: str, data: Optional[Dict[str, Any]] = None):
    """Log success events"""
    log_step("SUCCESS", action, data, Colors.GREEN, "INFO")


def log_warning(action: str, data: Optional[Dict[str, Any]] = None):
    """Log warnings"""
    log_step("WARNING", action, data, Colors.YELLOW, "WARNING")


def log_lifecycle(phase: str, details: str = ""):
    """
    Log major lifecycle events with clear visual separation

    Args:
        phase: Phase name (e.g., "STARTUP", "SHUTDOWN")
        details: Optional details
    """
    if not is_enabled("INFO"):
        return

    separator = "=" * 80
    print(f"\n{Colors.BOLD}{Colors.CYAN}{separator}{Colors.RESET}")
    print(f"{Colors.BOLD}{Colors.CYAN}>>> {phase} {details}{Colors.RESET}")
    print(f"{Colors.BOLD}{Colors.CYAN}{separator}{Colors.RESET}\n")
