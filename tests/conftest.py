"""Shared fixtures: seeded random operands, small and very large."""
import numpy as np
import pytest
from rational import Rational, from_bigint, from_int

SEED = 20241016


def _big_int(rng, limbs):
    """Non-negative integer assembled from `limbs` 62-bit draws."""
    value = 0
    for limb in rng.integers(0, 2**62, size=limbs):
        value = (value << 62) | int(limb)
    return value


def random_rational(rng, limbs):
    n = _big_int(rng, limbs)
    d = _big_int(rng, limbs) + 1
    if rng.integers(0, 2):
        n = -n
    if rng.integers(0, 2):
        d = -d
    return from_bigint(n, d)


def tiny_rational(rng):
    # small range so that zeros, equal values and shared factors show up often
    n = rng.integers(-12, 13)
    d = rng.integers(1, 13) * rng.choice([-1, 1])
    return from_int(n, d)


@pytest.fixture
def rng():
    return np.random.default_rng(SEED)


@pytest.fixture
def big_int():
    """Builder for non-negative integers of a given number of 62-bit limbs."""
    return _big_int


@pytest.fixture
def pairs(rng):
    """(a, b) operand pairs covering tiny, word-sized and ~200 digit values."""
    out = [(tiny_rational(rng), tiny_rational(rng)) for _ in range(200)]
    out += [(random_rational(rng, 1), random_rational(rng, 1)) for _ in range(100)]
    out += [(random_rational(rng, 12), random_rational(rng, 12)) for _ in range(30)]
    out += [(random_rational(rng, 12), tiny_rational(rng)) for _ in range(30)]
    return out


@pytest.fixture
def half():
    return Rational.of(1, 2)


@pytest.fixture
def third():
    return Rational.of(1, 3)
