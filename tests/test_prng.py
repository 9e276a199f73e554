import pytest

from meeba.prng import DIVISOR, MODULUS, MULTIPLIER, Prng


def test_same_seed_same_sequence():
    a = Prng("abc123")
    b = Prng("abc123")
    assert [a.rand() for _ in range(100)] == [b.rand() for _ in range(100)]


def test_different_seeds_diverge():
    a = Prng("abc123")
    b = Prng("abc124")
    assert [a.rand() for _ in range(10)] != [b.rand() for _ in range(10)]


def test_first_value_follows_recurrence():
    prng = Prng("1")
    assert prng.rand() == MULTIPLIER / DIVISOR
    assert prng.rand() == (MULTIPLIER * MULTIPLIER) / DIVISOR


def test_seed_is_base36():
    assert Prng("z").state == 35
    assert Prng("10").state == 36


def test_zero_seed_does_not_stick():
    prng = Prng("0")
    assert prng.rand() > 0


def test_rand_range():
    prng = Prng("range")
    for _ in range(1000):
        assert 0 <= prng.rand() < 1


def test_rand_int_bounds():
    prng = Prng("ints")
    values = [prng.rand_int(3, 7) for _ in range(1000)]
    assert min(values) >= 3
    assert max(values) <= 6
    assert set(values) == {3, 4, 5, 6}


def test_rand_int_empty_range():
    prng = Prng("empty")
    assert prng.rand_int(5, 5) == 5


@pytest.mark.parametrize("low, high", [(0, 1), (10, 11)])
def test_rand_int_single_value(low, high):
    prng = Prng("single")
    assert all(prng.rand_int(low, high) == low for _ in range(50))


def test_top_of_the_orbit_stays_below_one():
    # state lands on DIVISOR on the first draw
    assert Prng("c8gmgn").rand() < 1


def test_rand_int_never_reaches_high():
    assert Prng("c8gmgn").rand_int(0, 256) == 255


def test_rand_int_empty_range_still_draws():
    prng = Prng("empty")
    prng.rand_int(5, 5)
    assert prng.state == Prng("empty").state * MULTIPLIER % MODULUS
