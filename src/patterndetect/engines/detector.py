"""Budgeted duplicate-pattern detection across a set of source files.

A run moves through extraction, indexing (approximate mode only) and
comparison, then either completes or stops early once the comparison budget
is spent. Matches found before an early stop are always returned.
"""

from __future__ import annotations

import time
from collections import Counter
from collections.abc import Callable, Iterable, Iterator

import numpy as np

from patterndetect.core.config import DetectionConfig, validate_config
from patterndetect.core.cost import estimate_tokens
from patterndetect.core.logging import get_logger
from patterndetect.core.types import (
    CodeBlock,
    DetectionProgress,
    DetectionReport,
    DuplicateMatch,
    SourceFile,
)
from patterndetect.parsing.blocks import extract_blocks
from patterndetect.similarity.candidates import select_candidates
from patterndetect.similarity.lexical import edit_similarity
from patterndetect.similarity.ranking import rank_matches
from patterndetect.similarity.scoring import SimilarityFn, make_scorer
from patterndetect.similarity.tokens import InvertedIndex, tokenize
from patterndetect.snippets.normalization import normalize_code

ProgressCallback = Callable[[DetectionProgress], None]
CostFn = Callable[[str], int]

SNIPPET_LINES = 5


class _Budget:
    def __init__(self, limit: int | None) -> None:
        self.limit = limit
        self.used = 0
        self.exhausted = False

    def take(self) -> bool:
        if self.limit is not None and self.used >= self.limit:
            self.exhausted = True
            return False
        self.used += 1
        return True


def build_blocks(
    files: Iterable[SourceFile], min_lines: int, estimate_cost: CostFn = estimate_tokens
) -> list[CodeBlock]:
    blocks: list[CodeBlock] = []
    for source in files:
        for raw in extract_blocks(source.content, min_lines):
            normalized = normalize_code(raw.content)
            blocks.append(
                CodeBlock(
                    file=source.path,
                    content=raw.content,
                    start_line=raw.start_line,
                    pattern_type=raw.pattern_type,
                    normalized=normalized,
                    tokens=tokenize(normalized),
                    lines_of_code=raw.lines_of_code,
                    token_cost=estimate_cost(raw.content),
                )
            )
    return blocks


def cap_blocks(blocks: list[CodeBlock], max_blocks: int) -> list[CodeBlock]:
    """Keep the ``max_blocks`` largest blocks; equal sizes keep input order."""
    if len(blocks) <= max_blocks:
        return blocks
    return sorted(blocks, key=lambda block: -block.lines_of_code)[:max_blocks]


def cross_file_pairs(files: Iterable[str]) -> int:
    sizes = Counter(files)
    total = sum(sizes.values())
    return (total * total - sum(n * n for n in sizes.values())) // 2


def detect_duplicate_patterns(
    files: list[SourceFile],
    config: DetectionConfig | None = None,
    *,
    progress: ProgressCallback | None = None,
    similarity: SimilarityFn = edit_similarity,
    estimate_cost: CostFn = estimate_tokens,
) -> DetectionReport:
    config = config or DetectionConfig()
    validate_config(config)
    logger = get_logger()
    warnings: list[str] = []

    blocks = build_blocks(files, config.min_lines, estimate_cost)
    extracted = len(blocks)
    logger.info("Extracted %d code blocks for analysis", extracted)
    if extracted > config.max_blocks:
        message = (
            f"Limiting analysis to the {config.max_blocks} largest of {extracted} blocks; "
            "raise max_blocks or min_lines to change this"
        )
        logger.warning(message)
        warnings.append(message)
        blocks = cap_blocks(blocks, config.max_blocks)

    block_files = [block.file for block in blocks]
    file_index = {path: idx for idx, path in enumerate(dict.fromkeys(block_files))}
    file_ids = np.asarray([file_index[path] for path in block_files], dtype=np.int64)

    inverted: InvertedIndex | None = None
    total_comparisons: int | None = None
    if config.approx:
        inverted = InvertedIndex.build([block.tokens for block in blocks])
        logger.info("Using approximate candidate selection over %d tokens", len(inverted))
    else:
        total_comparisons = cross_file_pairs(block_files)
        logger.info("Processing %d comparisons", total_comparisons)

    def partners(i: int) -> Iterator[int]:
        if inverted is None:
            own = block_files[i]
            return (j for j in range(i + 1, len(blocks)) if block_files[j] != own)
        candidates = select_candidates(
            i,
            blocks[i].tokens,
            inverted,
            file_ids,
            config.min_shared_tokens,
            config.max_candidates_per_block,
        )
        return (candidate.index for candidate in candidates)

    scorer = make_scorer(config.fast_mode, similarity)
    threshold = config.effective_min_similarity
    budget = _Budget(config.max_comparisons)
    matches: list[DuplicateMatch] = []
    started = time.perf_counter()

    def emit(processed: int, done: bool = False) -> None:
        if progress is None:
            return
        progress(
            DetectionProgress(
                blocks_processed=processed,
                total_blocks=len(blocks),
                comparisons=budget.used,
                total_comparisons=total_comparisons,
                elapsed=time.perf_counter() - started,
                budget_exhausted=budget.exhausted,
                done=done,
            )
        )

    processed = 0
    for i, block in enumerate(blocks):
        if i and i % config.batch_size == 0:
            emit(i)
        for j in partners(i):
            if not budget.take():
                break
            other = blocks[j]
            score = scorer(block, other)
            if score >= threshold:
                matches.append(_to_match(block, other, score))
        if budget.exhausted:
            break
        processed = i + 1

    if budget.exhausted:
        message = (
            f"Comparison budget exhausted ({config.max_comparisons} comparisons); "
            "remaining pairs were not examined"
        )
        logger.warning(message)
        warnings.append(message)
    emit(processed, done=True)

    return DetectionReport(
        matches=rank_matches(matches),
        blocks_extracted=extracted,
        blocks_analyzed=len(blocks),
        comparisons=budget.used,
        budget_exhausted=budget.exhausted,
        warnings=warnings,
    )


def _to_match(first: CodeBlock, second: CodeBlock, similarity: float) -> DuplicateMatch:
    head = first.content.split("\n")[:SNIPPET_LINES]
    return DuplicateMatch(
        file1=first.file,
        line1=first.start_line,
        file2=second.file,
        line2=second.start_line,
        similarity=similarity,
        pattern_type=first.pattern_type,
        token_cost=first.token_cost + second.token_cost,
        lines_of_code=first.lines_of_code,
        snippet="\n".join(head) + "\n...",
    )
