from __future__ import annotations

import re
from collections import defaultdict
from collections.abc import Sequence

import numpy as np
import numpy.typing as npt

MIN_TOKEN_LENGTH = 3

STOPWORDS = frozenset(
    {
        "return",
        "const",
        "let",
        "var",
        "function",
        "class",
        "new",
        "if",
        "else",
        "for",
        "while",
        "async",
        "await",
        "try",
        "catch",
        "switch",
        "case",
        "default",
        "import",
        "export",
        "from",
        "true",
        "false",
        "null",
        "undefined",
        "this",
    }
)

_TOKEN_SPLIT = re.compile(r"[\s(){}\[\];,.]+")
_SEQUENCE_SPLIT = re.compile(r"[\s(){}\[\];,]+")

Postings = npt.NDArray[np.int64]


def tokenize(normalized: str) -> frozenset[str]:
    return frozenset(
        token
        for token in _TOKEN_SPLIT.split(normalized)
        if len(token) >= MIN_TOKEN_LENGTH and token.lower() not in STOPWORDS
    )


def token_sequence(normalized: str) -> str:
    """Order-preserving token stream used by the edit-distance metric."""
    return " ".join(part for part in _SEQUENCE_SPLIT.split(normalized) if part)


class InvertedIndex:
    """Token to block-index postings, each sorted ascending."""

    def __init__(self, postings: dict[str, Postings]) -> None:
        self._postings = postings

    @classmethod
    def build(cls, token_sets: Sequence[frozenset[str]]) -> InvertedIndex:
        gathered: dict[str, list[int]] = defaultdict(list)
        for idx, tokens in enumerate(token_sets):
            for token in tokens:
                gathered[token].append(idx)
        return cls({token: np.asarray(ids, dtype=np.int64) for token, ids in gathered.items()})

    def postings(self, token: str) -> Postings | None:
        return self._postings.get(token)

    def __len__(self) -> int:
        return len(self._postings)

    def __contains__(self, token: object) -> bool:
        return token in self._postings
