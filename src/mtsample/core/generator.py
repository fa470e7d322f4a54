"""MT19937 Mersenne Twister generator with 32-bit words."""

from __future__ import annotations

import logging
import operator
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from mtsample.utils.exceptions import SeedError

logger = logging.getLogger(__name__)

# Period parameters
N = 624
M = 397
MATRIX_A = 0x9908B0DF
UPPER_MASK = 0x80000000
LOWER_MASK = 0x7FFFFFFF

WORD_MASK = 0xFFFFFFFF
DEFAULT_SEED = 5489
ARRAY_SEED_BASE = 19650218

TEMPERING_MASK_B = 0x9D2C5680
TEMPERING_MASK_C = 0xEFC60000

# cursor value meaning "never seeded"
UNSEEDED = N + 1

INV_2_32 = 1.0 / 4294967296.0
INV_2_32_MINUS_1 = 1.0 / 4294967295.0
INV_2_53 = 1.0 / 9007199254740992.0

_MAG01 = np.array([0, MATRIX_A], dtype=np.uint32)


def _check_word(value: int, name: str) -> int:
    if isinstance(value, bool):
        raise SeedError(f"{name} must be an integer, got bool")
    try:
        word = operator.index(value)
    except TypeError as exc:
        raise SeedError(f"{name} must be an integer, got {type(value).__name__}") from exc
    if word < 0 or word > WORD_MASK:
        raise SeedError(f"{name} must be between 0 and 2**32 - 1, got {word}")
    return word


def _linear_expansion(seed: int) -> list[int]:
    """Expand one 32-bit seed into N state words (Knuth's multiplier)."""
    words = [0] * N
    words[0] = seed
    for i in range(1, N):
        prev = words[i - 1]
        words[i] = (1812433253 * (prev ^ (prev >> 30)) + i) & WORD_MASK
    return words


def _mix(
    current: NDArray[np.uint32],
    following: NDArray[np.uint32],
    shifted: NDArray[np.uint32],
) -> NDArray[np.uint32]:
    y = (current & UPPER_MASK) | (following & LOWER_MASK)
    return shifted ^ (y >> 1) ^ _MAG01[y & 1]


def temper(word: int) -> int:
    """Apply the MT19937 tempering transform to a single state word."""
    y = word
    y ^= y >> 11
    y ^= (y << 7) & TEMPERING_MASK_B
    y ^= (y << 15) & TEMPERING_MASK_C
    y ^= y >> 18
    return y


def temper_array(words: NDArray[np.uint32]) -> NDArray[np.uint32]:
    """Vectorized tempering; shifts on uint32 drop the overflowing bits."""
    y = words.astype(np.uint32, copy=True)
    y ^= y >> 11
    y ^= (y << 7) & TEMPERING_MASK_B
    y ^= (y << 15) & TEMPERING_MASK_C
    y ^= y >> 18
    return y


class MersenneTwister:
    """Mersenne Twister pseudo-random generator (period 2**19937 - 1).

    Each instance owns its own 624-word state, so independent streams are
    made by constructing independent generators. Instances are not
    thread-safe.

    A generator built without ``seed`` or ``key`` is unseeded and seeds
    itself with 5489 on the first draw.

    Args:
        seed: Scalar 32-bit seed, see :meth:`seed`.
        key: Sequence of 32-bit words, see :meth:`seed_from_array`.
    """

    def __init__(self, seed: int | None = None, *, key: Sequence[int] | None = None) -> None:
        if seed is not None and key is not None:
            raise SeedError("Pass either seed or key, not both")
        self._mt: NDArray[np.uint32] = np.zeros(N, dtype=np.uint32)
        self._mti = UNSEEDED
        if seed is not None:
            self.seed(seed)
        elif key is not None:
            self.seed_from_array(key)

    def __repr__(self) -> str:
        status = "unseeded" if self._mti == UNSEEDED else f"cursor={self._mti}"
        return f"{type(self).__name__}({status})"

    @property
    def cursor(self) -> int:
        """Index of the state word returned by the next draw."""
        return self._mti

    @property
    def is_seeded(self) -> bool:
        return self._mti != UNSEEDED

    @property
    def state_words(self) -> NDArray[np.uint32]:
        """Copy of the 624 state words."""
        return self._mt.copy()

    # ------------------------------------------------------------------
    # Seeding
    # ------------------------------------------------------------------

    def seed(self, seed: int) -> None:
        """Initialize the state from a single 32-bit seed.

        Raises:
            SeedError: If ``seed`` is not an integer in [0, 2**32 - 1].
        """
        value = _check_word(seed, "seed")
        self._mt[:] = _linear_expansion(value)
        self._mti = N
        logger.debug("Seeded generator with scalar seed %d", value)

    def seed_from_array(self, keys: Sequence[int]) -> None:
        """Initialize the state from a sequence of 32-bit words.

        The state is first expanded from the constant 19650218, then the
        key is mixed in over ``max(624, len(keys))`` steps and the result
        is scrambled once more. Word 0 is forced to 0x80000000 so the
        state can never be all zeros.

        Raises:
            SeedError: If ``keys`` is empty or holds a value outside
                [0, 2**32 - 1].
        """
        key = [_check_word(k, f"keys[{idx}]") for idx, k in enumerate(keys)]
        key_length = len(key)
        if key_length == 0:
            raise SeedError("keys must contain at least one element")

        mt = _linear_expansion(ARRAY_SEED_BASE)
        i, j = 1, 0
        for _ in range(max(N, key_length)):
            prev = mt[i - 1]
            mt[i] = ((mt[i] ^ ((prev ^ (prev >> 30)) * 1664525)) + key[j] + j) & WORD_MASK
            i += 1
            j += 1
            if i >= N:
                mt[0] = mt[N - 1]
                i = 1
            if j >= key_length:
                j = 0
        for _ in range(N - 1):
            prev = mt[i - 1]
            mt[i] = ((mt[i] ^ ((prev ^ (prev >> 30)) * 1566083941)) - i) & WORD_MASK
            i += 1
            if i >= N:
                mt[0] = mt[N - 1]
                i = 1

        mt[0] = UPPER_MASK
        self._mt[:] = mt
        self._mti = N
        logger.debug("Seeded generator from a key of %d words", key_length)

    # ------------------------------------------------------------------
    # State advance
    # ------------------------------------------------------------------

    def _twist(self) -> None:
        """Regenerate all N words in place.

        The sequential recurrence reads word ``k + M`` (mod N), which for
        ``k >= N - M`` has already been rewritten. Evaluating it in four
        slices, each of which only reads words that are either untouched
        or already final, gives the same result as the word-by-word loop.
        """
        if self._mti == UNSEEDED:
            logger.debug("Generator used before seeding; using default seed %d", DEFAULT_SEED)
            self.seed(DEFAULT_SEED)

        mt = self._mt
        mt[: N - M] = _mix(mt[: N - M], mt[1 : N - M + 1], mt[M:])
        mt[N - M : 2 * (N - M)] = _mix(
            mt[N - M : 2 * (N - M)], mt[N - M + 1 : 2 * (N - M) + 1], mt[: N - M]
        )
        mt[2 * (N - M) : N - 1] = _mix(
            mt[2 * (N - M) : N - 1], mt[2 * (N - M) + 1 : N], mt[N - M : M - 1]
        )
        mt[N - 1 :] = _mix(mt[N - 1 :], mt[:1], mt[M - 1 : M])
        self._mti = 0

    # ------------------------------------------------------------------
    # Draws
    # ------------------------------------------------------------------

    def next_u32(self) -> int:
        """Next tempered word on [0, 0xffffffff]."""
        if self._mti >= N:
            self._twist()
        y = int(self._mt[self._mti])
        self._mti += 1
        return temper(y)

    def next_u31(self) -> int:
        """Next word on [0, 0x7fffffff]."""
        return self.next_u32() >> 1

    def next_real_closed(self) -> float:
        """Next real on the closed interval [0, 1]."""
        return self.next_u32() * INV_2_32_MINUS_1

    def next_real_half_open(self) -> float:
        """Next real on [0, 1)."""
        return self.next_u32() * INV_2_32

    def next_real_open(self) -> float:
        """Next real on the open interval (0, 1)."""
        return (self.next_u32() + 0.5) * INV_2_32

    def next_real_53(self) -> float:
        """Next real on [0, 1) with 53-bit resolution, built from two words."""
        a = self.next_u32() >> 5
        b = self.next_u32() >> 6
        return (a * 67108864.0 + b) * INV_2_53

    def next_u32_array(self, n: int) -> NDArray[np.uint32]:
        """Next ``n`` tempered words as a uint32 array.

        Yields exactly the words ``n`` successive :meth:`next_u32` calls
        would return, twisting as many times as needed.
        """
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        out = np.empty(n, dtype=np.uint32)
        filled = 0
        while filled < n:
            if self._mti >= N:
                self._twist()
            take = min(N - self._mti, n - filled)
            out[filled : filled + take] = self._mt[self._mti : self._mti + take]
            self._mti += take
            filled += take
        return temper_array(out)
