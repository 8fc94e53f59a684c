from __future__ import annotations

import Levenshtein


def edit_similarity(text_a: str, text_b: str) -> float:
    """Normalized Levenshtein similarity in [0, 1]; identical strings score 1."""
    longest = max(len(text_a), len(text_b))
    if longest == 0:
        return 1.0
    return 1.0 - Levenshtein.distance(text_a, text_b) / longest
