from __future__ import annotations

from collections.abc import Callable, Set

from patterndetect.core.types import CodeBlock
from patterndetect.similarity.tokens import token_sequence

SimilarityFn = Callable[[str, str], float]
PairScorer = Callable[[CodeBlock, CodeBlock], float]

TEXT_WEIGHT = 0.4
SEQUENCE_WEIGHT = 0.6


def jaccard_similarity(tokens_a: Set[str], tokens_b: Set[str]) -> float:
    if len(tokens_a) > len(tokens_b):
        tokens_a, tokens_b = tokens_b, tokens_a
    intersection = sum(1 for token in tokens_a if token in tokens_b)
    union = len(tokens_a) + len(tokens_b) - intersection
    if union == 0:
        return 0.0
    return intersection / union


def blended_similarity(normalized_a: str, normalized_b: str, similarity: SimilarityFn) -> float:
    text_score = similarity(normalized_a, normalized_b)
    sequence_score = similarity(token_sequence(normalized_a), token_sequence(normalized_b))
    return TEXT_WEIGHT * text_score + SEQUENCE_WEIGHT * sequence_score


def make_scorer(fast_mode: bool, similarity: SimilarityFn) -> PairScorer:
    if fast_mode:
        return lambda a, b: jaccard_similarity(a.tokens, b.tokens)
    return lambda a, b: blended_similarity(a.normalized, b.normalized, similarity)
