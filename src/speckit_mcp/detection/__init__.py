"""Detection subsystem: technology/domain keyword matching."""

from speckit_mcp.detection.detector import ContextDetector, calculate_confidence
from speckit_mcp.detection.models import ContextReport, DetectionResult, Recommendations

__all__ = [
    "ContextDetector",
    "ContextReport",
    "DetectionResult",
    "Recommendations",
    "calculate_confidence",
]
