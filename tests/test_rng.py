import pytest

from initiative.core.rng import D20, RNG


def test_rng_determinism_same_seed() -> None:
    rng_a = RNG(12345)
    rng_b = RNG(12345)

    rolls_a = [rng_a.roll() for _ in range(10)]
    rolls_b = [rng_b.roll() for _ in range(10)]

    assert rolls_a == rolls_b


def test_rng_different_seed() -> None:
    rng_a = RNG(11111)
    rng_b = RNG(22222)

    draws_a = [rng_a.randint(1, 100) for _ in range(5)]
    draws_b = [rng_b.randint(1, 100) for _ in range(5)]

    assert draws_a != draws_b


def test_roll_stays_within_die_faces() -> None:
    rng = RNG(7)
    rolls = [rng.roll() for _ in range(200)]
    assert min(rolls) >= 1
    assert max(rolls) <= D20


def test_roll_rejects_dieless_sides() -> None:
    with pytest.raises(ValueError):
        RNG(1).roll(0)
