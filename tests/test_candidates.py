import numpy as np

from patterndetect.core.types import Candidate
from patterndetect.similarity.candidates import select_candidates
from patterndetect.similarity.tokens import InvertedIndex

TOKEN_SETS = [
    frozenset({"aaa", "bbb", "ccc"}),  # file 0
    frozenset({"aaa", "bbb", "ccc"}),  # file 0
    frozenset({"aaa", "bbb"}),  # file 1
    frozenset({"aaa", "bbb", "ccc"}),  # file 1
    frozenset({"zzz"}),  # file 2
]
FILE_IDS = np.array([0, 0, 1, 1, 2], dtype=np.int64)
INDEX = InvertedIndex.build(TOKEN_SETS)


def test_candidates_skip_same_file_and_sort_by_shared_tokens():
    found = select_candidates(0, TOKEN_SETS[0], INDEX, FILE_IDS, 1, 10)
    assert found == [Candidate(index=3, shared=3), Candidate(index=2, shared=2)]


def test_minimum_shared_tokens_filters():
    found = select_candidates(0, TOKEN_SETS[0], INDEX, FILE_IDS, 3, 10)
    assert found == [Candidate(index=3, shared=3)]


def test_candidate_cap_truncates():
    found = select_candidates(0, TOKEN_SETS[0], INDEX, FILE_IDS, 1, 1)
    assert found == [Candidate(index=3, shared=3)]
    assert select_candidates(0, TOKEN_SETS[0], INDEX, FILE_IDS, 1, 0) == []


def test_only_later_blocks_are_proposed():
    assert select_candidates(3, TOKEN_SETS[3], INDEX, FILE_IDS, 1, 10) == []
    found = select_candidates(1, TOKEN_SETS[1], INDEX, FILE_IDS, 1, 10)
    assert [c.index for c in found] == [3, 2]


def test_zero_minimum_still_requires_a_shared_token():
    found = select_candidates(2, TOKEN_SETS[2], INDEX, FILE_IDS, 0, 10)
    assert found == []


def test_ties_keep_block_order():
    sets = [frozenset({"aaa"}), frozenset({"aaa"}), frozenset({"aaa"})]
    index = InvertedIndex.build(sets)
    file_ids = np.array([0, 1, 2], dtype=np.int64)
    found = select_candidates(0, sets[0], index, file_ids, 1, 10)
    assert found == [Candidate(index=1, shared=1), Candidate(index=2, shared=1)]
