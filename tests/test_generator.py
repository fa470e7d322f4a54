"""Tests for the Mersenne Twister generator core."""

from __future__ import annotations

import random

import numpy as np
import pytest

from mtsample.core.generator import N, UNSEEDED, MersenneTwister, temper, temper_array
from mtsample.models.samplers import closed_reals, half_open_reals
from mtsample.utils.exceptions import SeedError

DEFAULT_SEED_U32 = [
    3499211612, 581869302, 3890346734, 3586334585, 545404204,
    4161255391, 3922919429, 949333985, 2715962298, 1323567403,
]  # fmt: skip

INIT_BY_ARRAY_U32 = [
    1067595299, 955945823, 477289528, 4107218783, 4228976476,
    3344332714, 3355579695, 227628506, 810200273, 2591290167,
]  # fmt: skip


class TestKnownAnswers:
    def test_default_seed(self) -> None:
        gen = MersenneTwister(5489)
        assert [gen.next_u32() for _ in range(10)] == DEFAULT_SEED_U32

    def test_init_by_array(self) -> None:
        gen = MersenneTwister(key=[0x123, 0x234, 0x345, 0x456])
        assert [gen.next_u32() for _ in range(10)] == INIT_BY_ARRAY_U32

    def test_scalar_seed_matches_numpy_legacy_state(self) -> None:
        """numpy's RandomState seeds MT19937 with the same linear expansion."""
        for seed in (0, 1, 4357, 5489, 2**32 - 1):
            keys, pos = np.random.RandomState(seed).get_state()[1:3]
            gen = MersenneTwister(seed)
            np.testing.assert_array_equal(gen.state_words, keys)
            assert gen.cursor == pos == N

    def test_array_seed_matches_numpy_legacy_state(self) -> None:
        key = [0x123, 0x234, 0x345, 0x456]
        keys = np.random.RandomState(key).get_state()[1]
        np.testing.assert_array_equal(MersenneTwister(key=key).state_words, keys)

    def test_res53_matches_numpy_random_sample(self) -> None:
        expected = np.random.RandomState(4357).random_sample(2000)
        gen = MersenneTwister(4357)
        actual = np.array([gen.next_real_53() for _ in range(2000)])
        np.testing.assert_array_equal(actual, expected)

    @pytest.mark.parametrize("seed", [0, 1, 12345, 2**32 - 1])
    def test_array_seed_matches_stdlib(self, seed: int) -> None:
        """random.Random(n) seeds with init_by_array on the 32-bit words of n."""
        ref = random.Random(seed)
        gen = MersenneTwister(key=[seed])
        assert [gen.next_u32() for _ in range(1500)] == [ref.getrandbits(32) for _ in range(1500)]

    def test_multi_word_key_matches_stdlib(self) -> None:
        seed = 2**40 + 7
        ref = random.Random(seed)
        gen = MersenneTwister(key=[7, 256])
        assert [gen.next_real_53() for _ in range(1000)] == [ref.random() for _ in range(1000)]


class TestSeeding:
    def test_deterministic(self) -> None:
        a = MersenneTwister(2024)
        b = MersenneTwister(2024)
        assert [a.next_u32() for _ in range(1000)] == [b.next_u32() for _ in range(1000)]

    def test_reseed_resets_stream(self, rng: MersenneTwister) -> None:
        first = [rng.next_u32() for _ in range(700)]
        rng.seed(42)
        assert rng.cursor == N
        assert [rng.next_u32() for _ in range(700)] == first

    def test_reseed_from_array_resets_stream(self) -> None:
        gen = MersenneTwister(key=[1, 2, 3])
        first = [gen.next_u32() for _ in range(50)]
        gen.seed_from_array([1, 2, 3])
        assert [gen.next_u32() for _ in range(50)] == first

    def test_unseeded_uses_default_seed(self) -> None:
        gen = MersenneTwister()
        assert not gen.is_seeded
        assert gen.cursor == UNSEEDED
        assert [gen.next_u32() for _ in range(10)] == DEFAULT_SEED_U32
        assert gen.is_seeded

    def test_unseeded_real_draws_match_default_seed(self) -> None:
        a = MersenneTwister()
        b = MersenneTwister(5489)
        assert [a.next_real_53() for _ in range(100)] == [b.next_real_53() for _ in range(100)]

    def test_array_seed_differs_from_scalar(self) -> None:
        scalar = MersenneTwister(5489)
        array = MersenneTwister(key=[5489])
        assert [scalar.next_u32() for _ in range(10)] != [array.next_u32() for _ in range(10)]

    def test_array_seed_forces_top_bit(self) -> None:
        gen = MersenneTwister(key=[0])
        assert gen.state_words[0] == 0x80000000

    def test_long_key(self) -> None:
        """Keys longer than the state are fully mixed in."""
        key = list(range(1000))
        a = MersenneTwister(key=key)
        b = MersenneTwister(key=key[:-1] + [0])
        assert not np.array_equal(a.state_words, b.state_words)

    def test_numpy_key(self) -> None:
        key = np.array([0x123, 0x234, 0x345, 0x456], dtype=np.uint32)
        gen = MersenneTwister(key=key)
        assert gen.next_u32() == INIT_BY_ARRAY_U32[0]

    def test_empty_key_rejected(self) -> None:
        with pytest.raises(SeedError, match="at least one"):
            MersenneTwister(key=[])

    def test_empty_key_is_value_error(self) -> None:
        gen = MersenneTwister(1)
        with pytest.raises(ValueError):
            gen.seed_from_array([])

    @pytest.mark.parametrize("bad", [-1, 2**32, 2**64])
    def test_out_of_range_seed_rejected(self, bad: int) -> None:
        with pytest.raises(SeedError):
            MersenneTwister(bad)

    def test_out_of_range_key_rejected(self) -> None:
        with pytest.raises(SeedError, match=r"keys\[1\]"):
            MersenneTwister(key=[1, 2**32])

    def test_bool_seed_rejected(self) -> None:
        with pytest.raises(SeedError, match="bool"):
            MersenneTwister(True)

    def test_bool_key_word_rejected(self) -> None:
        with pytest.raises(SeedError, match="bool"):
            MersenneTwister(key=[1, False])

    def test_non_integer_seed_rejected(self) -> None:
        with pytest.raises(SeedError):
            MersenneTwister(1.5)  # type: ignore[arg-type]

    def test_seed_and_key_exclusive(self) -> None:
        with pytest.raises(SeedError):
            MersenneTwister(1, key=[1])


class TestTwist:
    def test_cursor_wraps(self, rng: MersenneTwister) -> None:
        for _ in range(N):
            rng.next_u32()
        assert rng.cursor == N
        rng.next_u32()
        assert rng.cursor == 1

    def test_matches_sequential_recurrence(self) -> None:
        """Slice-wise twist equals the word-by-word in-place loop."""
        gen = MersenneTwister(987654321)
        mt = [int(w) for w in gen.state_words]
        for k in range(N):
            y = (mt[k] & 0x80000000) | (mt[(k + 1) % N] & 0x7FFFFFFF)
            mt[k] = mt[(k + 397) % N] ^ (y >> 1) ^ (0x9908B0DF if y & 1 else 0)
        gen.next_u32()
        assert [int(w) for w in gen.state_words] == mt

    def test_several_twists(self) -> None:
        gen = MersenneTwister(7)
        ref = np.random.RandomState(7)
        expected = ref.random_sample(5 * N)
        actual = [gen.next_real_53() for _ in range(5 * N)]
        np.testing.assert_array_equal(actual, expected)


class TestTempering:
    def test_zero(self) -> None:
        assert temper(0) == 0

    def test_stays_32_bit(self) -> None:
        assert 0 <= temper(0xFFFFFFFF) <= 0xFFFFFFFF

    def test_array_matches_scalar(self) -> None:
        words = np.array([0, 1, 0x80000000, 0xFFFFFFFF, 123456789], dtype=np.uint32)
        assert [int(w) for w in temper_array(words)] == [temper(int(w)) for w in words]


class TestOutputs:
    def test_u31_drops_low_bit(self) -> None:
        a = MersenneTwister(99)
        b = MersenneTwister(99)
        for _ in range(100):
            assert a.next_u31() == b.next_u32() >> 1

    def test_integer_ranges(self, rng: MersenneTwister) -> None:
        for _ in range(20_000):
            assert 0 <= rng.next_u32() <= 0xFFFFFFFF
            assert 0 <= rng.next_u31() <= 0x7FFFFFFF

    def test_real_ranges(self, rng: MersenneTwister) -> None:
        words = rng.next_u32_array(1_000_000)
        closed = closed_reals(words)
        assert closed.min() >= 0.0
        assert closed.max() <= 1.0
        half_open = half_open_reals(words)
        assert half_open.min() >= 0.0
        assert half_open.max() < 1.0
        open_ = (words.astype(np.float64) + 0.5) * 2.0**-32
        assert open_.min() > 0.0
        assert open_.max() < 1.0

    def test_res53_range(self, rng: MersenneTwister) -> None:
        for _ in range(20_000):
            assert 0.0 <= rng.next_real_53() < 1.0

    def test_batch_ranges(self, rng: MersenneTwister) -> None:
        words = rng.next_u32_array(1_000_000)
        assert words.dtype == np.uint32
        assert words.size == 1_000_000
        # the top bit of a 31-bit word is always clear
        assert int((words >> 1).max()) <= 0x7FFFFFFF
        # roughly half of all words have the top bit set
        assert abs(float((words >> 31).mean()) - 0.5) < 0.005

    def test_largest_word_endpoints(self, monkeypatch: pytest.MonkeyPatch) -> None:
        gen = MersenneTwister(1)
        monkeypatch.setattr(gen, "next_u32", lambda: 0xFFFFFFFF)
        assert gen.next_real_closed() == 1.0
        assert gen.next_real_half_open() < 1.0
        assert gen.next_real_open() < 1.0
        assert gen.next_real_53() < 1.0
        assert gen.next_u31() == 0x7FFFFFFF

    def test_smallest_word_endpoints(self, monkeypatch: pytest.MonkeyPatch) -> None:
        gen = MersenneTwister(1)
        monkeypatch.setattr(gen, "next_u32", lambda: 0)
        assert gen.next_real_closed() == 0.0
        assert gen.next_real_half_open() == 0.0
        assert gen.next_real_open() > 0.0
        assert gen.next_real_53() == 0.0

    def test_res53_consumes_two_words(self) -> None:
        a = MersenneTwister(3)
        b = MersenneTwister(3)
        a.next_real_53()
        b.next_u32()
        b.next_u32()
        assert a.next_u32() == b.next_u32()


class TestBatchDraws:
    def test_matches_scalar_across_twists(self) -> None:
        a = MersenneTwister(11)
        b = MersenneTwister(11)
        a.next_u32()  # start mid-block
        b.next_u32()
        batch = a.next_u32_array(3 * N + 5)
        assert [int(w) for w in batch] == [b.next_u32() for _ in range(3 * N + 5)]
        assert a.cursor == b.cursor

    def test_interleaves_with_scalar(self) -> None:
        a = MersenneTwister(11)
        b = MersenneTwister(11)
        mixed = [int(w) for w in a.next_u32_array(10)] + [a.next_u32()]
        assert mixed == [b.next_u32() for _ in range(11)]

    def test_empty(self) -> None:
        gen = MersenneTwister()
        assert gen.next_u32_array(0).size == 0
        assert not gen.is_seeded

    def test_unseeded_batch(self) -> None:
        gen = MersenneTwister()
        assert [int(w) for w in gen.next_u32_array(10)] == DEFAULT_SEED_U32

    def test_negative_rejected(self, rng: MersenneTwister) -> None:
        with pytest.raises(ValueError):
            rng.next_u32_array(-1)


class TestIndependentStreams:
    def test_instances_do_not_share_state(self) -> None:
        a = MersenneTwister(5)
        b = MersenneTwister(5)
        for _ in range(1000):
            a.next_u32()
        assert b.next_u32() == MersenneTwister(5).next_u32()

    def test_state_words_is_a_copy(self, rng: MersenneTwister) -> None:
        words = rng.state_words
        words[:] = 0
        assert rng.state_words.any()

    def test_repr(self) -> None:
        assert "unseeded" in repr(MersenneTwister())
        assert "cursor=624" in repr(MersenneTwister(1))
