class PatternDetectError(Exception):
    """Base exception for patterndetect."""


class ConfigError(PatternDetectError):
    """Raised when configuration is invalid."""
