from __future__ import annotations

from collections.abc import Callable

from patterndetect.core.types import PatternType

Predicate = Callable[[str], bool]


def _any_of(*needles: str) -> Predicate:
    return lambda text: any(needle in text for needle in needles)


def _is_api_handler(text: str) -> bool:
    if "request" in text and "response" in text:
        return True
    return _any_of("router.", "app.get", "app.post", "express", "ctx.body")(text)


def _is_validator(text: str) -> bool:
    if "if" in text and "throw" in text:
        return True
    return _any_of("validate", "schema", "zod", "yup")(text)


def _is_utility(text: str) -> bool:
    return "return " in text and "this" not in text and "new " not in text


# Evaluated top to bottom; the first predicate that holds names the block.
PATTERN_RULES: tuple[tuple[Predicate, PatternType], ...] = (
    (_is_api_handler, "api-handler"),
    (_is_validator, "validator"),
    (_any_of("return (", "jsx", "component", "props"), "component"),
    (_any_of("class ", "this."), "class-method"),
    (_is_utility, "utility"),
    (_any_of("function", "=>"), "function"),
)


def classify_pattern(code: str) -> PatternType:
    lower = code.lower()
    for predicate, pattern_type in PATTERN_RULES:
        if predicate(lower):
            return pattern_type
    return "unknown"
