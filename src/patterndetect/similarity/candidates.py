from __future__ import annotations

from collections.abc import Iterable

import numpy as np
import numpy.typing as npt

from patterndetect.core.types import Candidate
from patterndetect.similarity.tokens import InvertedIndex


def select_candidates(
    index: int,
    tokens: Iterable[str],
    inverted: InvertedIndex,
    file_ids: npt.NDArray[np.int64],
    min_shared_tokens: int,
    max_candidates: int,
) -> list[Candidate]:
    """Blocks after ``index`` in other files that share enough tokens with it.

    ``file_ids`` maps every block index to an integer file identity. Results
    are ordered by shared-token count, highest first, ties by block index.
    """
    hits: list[npt.NDArray[np.int64]] = []
    for token in tokens:
        ids = inverted.postings(token)
        if ids is None:
            continue
        # Postings are sorted, so everything past ``index`` is one slice.
        later = ids[np.searchsorted(ids, index, side="right") :]
        if later.size:
            hits.append(later)
    if not hits or max_candidates == 0:
        return []

    found = np.concatenate(hits)
    found = found[file_ids[found] != file_ids[index]]
    if not found.size:
        return []

    counts = np.bincount(found)
    eligible = np.flatnonzero(counts >= max(min_shared_tokens, 1))
    order = np.argsort(-counts[eligible], kind="stable")
    chosen = eligible[order][:max_candidates]
    return [Candidate(index=int(j), shared=int(counts[j])) for j in chosen]
