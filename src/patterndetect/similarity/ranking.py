from __future__ import annotations

from patterndetect.core.types import DuplicateMatch


def rank_key(match: DuplicateMatch) -> tuple[float, int]:
    return (-match.similarity, -match.token_cost)


def rank_matches(matches: list[DuplicateMatch]) -> list[DuplicateMatch]:
    return sorted(matches, key=rank_key)
