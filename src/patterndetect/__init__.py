"""patterndetect package."""

from patterndetect.core.config import DetectionConfig, PatternDetectConfig
from patterndetect.core.pipeline import analyze_patterns
from patterndetect.engines.detector import detect_duplicate_patterns
from patterndetect.reporting.summary import generate_summary

__all__ = [
    "DetectionConfig",
    "PatternDetectConfig",
    "analyze_patterns",
    "detect_duplicate_patterns",
    "generate_summary",
]
