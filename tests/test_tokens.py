import numpy as np

from patterndetect.similarity.tokens import InvertedIndex, token_sequence, tokenize


def test_tokenize_drops_short_fragments_and_stopwords():
    tokens = tokenize("const total = items.reduce(sum, NUM); return total;")
    assert tokens == frozenset({"total", "items", "reduce", "sum", "NUM"})


def test_stopwords_are_case_insensitive():
    assert tokenize("Return THIS value") == frozenset({"value"})


def test_tokenize_empty():
    assert tokenize("") == frozenset()


def test_token_sequence_keeps_order_and_periods():
    assert token_sequence("a (b, c); { d.e }") == "a b c d.e"


def test_inverted_index_postings_are_sorted():
    index = InvertedIndex.build(
        [frozenset({"foo", "bar"}), frozenset({"foo"}), frozenset({"baz", "foo"})]
    )
    foo = index.postings("foo")
    assert foo is not None
    assert np.array_equal(foo, np.array([0, 1, 2]))
    assert index.postings("missing") is None
    assert len(index) == 3
    assert "bar" in index
