import pytest

from wordle_solve.engine import (CandidatePool, Guess, Weighting, Word, check, filter_candidates,
                                 sigmoid_weight)
from wordle_solve.engine.pool import SIGMOID_K

from conftest import WORDS


def test_sigmoid_weight():
    assert sigmoid_weight(SIGMOID_K) == 0.5
    assert sigmoid_weight(0) == 0.0
    assert 0.99 < sigmoid_weight(25093468) < 1.0


def test_pool_starts_as_dictionary_in_word_order():
    pool = CandidatePool(WORDS)
    assert list(pool) == sorted(WORDS)
    assert pool.snapshot() == WORDS
    assert pool.total_weight() == sum(WORDS.values())
    assert pool.is_fresh


def test_pool_sigmoid_weights():
    pool = CandidatePool({"crane": 10000, "hoard": 30000}, Weighting.SIGMOID)
    assert pool.weight("crane") == 0.5
    assert pool.weight("hoard") == 0.75
    assert pool.total_weight() == 1.25


def test_pool_keys_are_words():
    pool = CandidatePool({"CRANE": 1})
    assert all(isinstance(w, Word) for w in pool)
    assert "crane" in pool


@pytest.mark.parametrize("answer", ["hoard", "which", "lodge", "tiger"])
def test_pool_shrinks_monotonically(answer):
    pool = CandidatePool(WORDS)
    size = len(pool)
    for g in ["sugar", "lasso", "crane", "moist"]:
        guess = Guess(Word(g), check(answer, g))
        pool.apply(guess)
        assert len(pool) <= size
        assert all(guess.matches(w) for w in pool)
        assert answer in pool
        size = len(pool)


def test_pool_apply_reports_removed():
    pool = CandidatePool(WORDS)
    removed = pool.apply(Guess.parse("sugar", "wwwmm"))
    assert removed == len(WORDS) - 2
    assert sorted(pool) == ["crane", "hoard"]
    assert not pool.is_fresh


def test_pool_apply_keeps_survivor_weights():
    pool = CandidatePool(WORDS, Weighting.SIGMOID)
    guess = Guess.parse("sugar", "wwwmm")
    expected = filter_candidates(pool.initial, [guess])

    pool.apply(guess)
    assert pool.snapshot() == expected
    assert pool.weight("hoard") == pool.initial["hoard"]


def test_pool_reset_restores_snapshot():
    pool = CandidatePool(WORDS, Weighting.SIGMOID)
    before = pool.snapshot()
    pool.apply(Guess.parse("lasso", "wwwww"))
    assert len(pool) < len(before)

    pool.reset()
    assert pool.snapshot() == before == dict(pool.initial)
    assert list(pool) == list(pool.initial)


def test_pool_initial_is_read_only():
    pool = CandidatePool(WORDS)
    with pytest.raises(TypeError):
        pool.initial["crane"] = 0
