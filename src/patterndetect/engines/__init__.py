from patterndetect.engines.detector import build_blocks, cap_blocks, detect_duplicate_patterns

__all__ = ["build_blocks", "cap_blocks", "detect_duplicate_patterns"]
