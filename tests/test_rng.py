import pytest

from silhouette.rng import Rng


def test_same_seed_same_sequence():
    a, b = Rng(42), Rng(42)
    assert [a.int_in_range(0, 1000) for _ in range(20)] == [
        b.int_in_range(0, 1000) for _ in range(20)
    ]


def test_reseed_restarts_sequence():
    rng = Rng(7)
    first = [rng.float_in_range(0.0, 1.0) for _ in range(5)]
    rng.seed(7)
    assert [rng.float_in_range(0.0, 1.0) for _ in range(5)] == first


def test_int_in_range_is_inclusive():
    rng = Rng(1)
    values = {rng.int_in_range(3, 5) for _ in range(300)}
    assert values == {3, 4, 5}


def test_float_in_range_bounds():
    rng = Rng(2)
    for _ in range(200):
        value = rng.float_in_range(-2.0, 3.0)
        assert -2.0 <= value < 3.0


def test_index_bounds_and_sequence():
    rng = Rng(3)
    assert {rng.index(4) for _ in range(200)} == {0, 1, 2, 3}
    assert rng.index(["only"]) == 0


def test_weighted_index():
    rng = Rng(4)
    assert all(rng.weighted_index([5]) == 0 for _ in range(20))
    picks = [rng.weighted_index([1, 1000]) for _ in range(200)]
    assert picks.count(1) > picks.count(0)
    assert set(picks) <= {0, 1}


def test_one_in_and_coinflip():
    rng = Rng(5)
    assert all(rng.one_in(1) for _ in range(20))
    flips = {rng.coinflip() for _ in range(100)}
    assert flips == {True, False}


def test_shuffle_is_permutation():
    rng = Rng(6)
    items = list(range(20))
    rng.shuffle(items)
    assert sorted(items) == list(range(20))


@pytest.mark.parametrize(
    "call",
    [
        lambda r: r.int_in_range(5, 1),
        lambda r: r.index(0),
        lambda r: r.weighted_index([]),
        lambda r: r.weighted_index([1, 0]),
        lambda r: r.one_in(0),
    ],
)
def test_invalid_arguments_raise(call):
    with pytest.raises(ValueError):
        call(Rng(0))