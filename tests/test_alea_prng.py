"""Tests for the Alea PRNG."""

import pytest
from py_worldgen.core.alea_prng import AleaPRNG
from py_worldgen.utils.random import get_prng, set_random_seed


class TestAleaPRNG:
    """Test seeded random generation."""

    def test_range(self):
        prng = AleaPRNG("range")
        for _ in range(1000):
            value = prng.random()
            assert 0.0 <= value < 1.0

    def test_same_seed_same_sequence(self):
        a = AleaPRNG("seed")
        b = AleaPRNG("seed")
        assert [a.random() for _ in range(50)] == [b.random() for _ in range(50)]

    def test_different_seeds(self):
        a = AleaPRNG("seed1")
        b = AleaPRNG("seed2")
        assert [a.random() for _ in range(10)] != [b.random() for _ in range(10)]

    def test_callable(self):
        a = AleaPRNG("call")
        b = AleaPRNG("call")
        assert a() == b.random()
        assert a.call_count == 1

    def test_choice(self):
        prng = AleaPRNG("choice")
        assert prng.choice(["a", "b", "c"]) in ("a", "b", "c")
        with pytest.raises(IndexError):
            prng.choice([])

    def test_mean_is_centered(self):
        prng = AleaPRNG("mean")
        values = [prng.random() for _ in range(10000)]
        assert sum(values) / len(values) == pytest.approx(0.5, abs=0.02)


class TestSharedPRNG:
    """Test the process-wide PRNG accessor."""

    def test_set_random_seed(self):
        prng = set_random_seed("shared")
        assert get_prng() is prng
        assert prng.random() == AleaPRNG("shared").random()
