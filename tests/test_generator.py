import random
from collections import Counter

import pytest

from markov_lib import (
    NONWORD,
    MissingPrefixError,
    StateTable,
    build,
    choose_successor,
    generate,
    generate_text,
)


CORPUS = (
    "the cat sat on the mat and the dog sat on the log "
    "and the cat saw the dog on the mat"
).split()


def test_single_path_corpus_is_reproduced():
    table = build(["the", "cat", "sat"])
    assert list(generate(table, max_words=10)) == ["the", "cat", "sat"]


def test_repeated_word_corpus_is_reproduced():
    table = build(["a", "a", "b"])
    assert list(generate(table, max_words=10)) == ["a", "a", "b"]


def test_zero_max_words_gives_nothing():
    table = build(CORPUS)
    assert list(generate(table, max_words=0)) == []


def test_empty_corpus_generates_nothing():
    assert list(generate(build([]), max_words=50)) == []


def test_negative_max_words_is_rejected():
    with pytest.raises(ValueError):
        list(generate(build(CORPUS), max_words=-1))


def test_output_is_bounded_and_never_contains_sentinel():
    table = build(CORPUS)
    rng = random.Random(7)
    for limit in (1, 3, 10, 1000):
        words = list(generate(table, max_words=limit, rng=rng))
        assert len(words) <= limit
        assert NONWORD not in words
        assert set(words) <= set(CORPUS)


def test_output_follows_learned_transitions():
    table = build(CORPUS)
    words = list(generate(table, max_words=200, rng=3))
    padded = [NONWORD, NONWORD] + words
    for i in range(2, len(padded)):
        state = table.lookup((padded[i - 2], padded[i - 1]))
        assert padded[i] in state.successors


def test_same_seed_gives_same_output_across_rebuilds():
    first = list(generate(build(CORPUS), max_words=100, rng=random.Random(42)))
    second = list(generate(build(CORPUS), max_words=100, rng=random.Random(42)))
    assert first == second
    assert generate_text(build(CORPUS), 100, rng=42) == " ".join(first)


def test_generation_is_lazy():
    table = build(CORPUS)
    walk = generate(table, max_words=1000, rng=1)
    assert next(walk) == "the"


def test_choose_successor_matches_frequencies():
    rng = random.Random(0)
    successors = ["a", "a", "a", "b"]
    draws = 20000
    counts = Counter(choose_successor(successors, rng) for _ in range(draws))
    assert set(counts) == {"a", "b"}
    assert abs(counts["a"] / draws - 0.75) < 0.02


def test_choose_successor_single_pass_iterable():
    assert choose_successor(iter(["only"]), random.Random(1)) == "only"
    with pytest.raises(ValueError):
        choose_successor([], random.Random(1))


def test_missing_prefix_raises():
    table = StateTable(2)
    state = table.lookup_or_create((NONWORD, NONWORD))
    table.add_successor(state, "orphan")
    table.freeze()
    walk = generate(table, max_words=10)
    assert next(walk) == "orphan"
    with pytest.raises(MissingPrefixError) as excinfo:
        next(walk)
    assert excinfo.value.prefix == (NONWORD, "orphan")
