"""IEEE-754 binary64 word decoding.

The evaluators classify their argument by its raw bit pattern instead of by
floating-point comparison. A double is viewed as two unsigned 32-bit words::

    high = sign (bit 31) | exponent (bits 30..20) | mantissa (top 20 bits)
    low  = mantissa (bottom 32 bits)

The predicates below take the decoded words, never the float itself, so the
magnitude thresholds in :mod:`jnynpy.constants` compare exponent fields
exactly.
"""

from __future__ import annotations

import numpy as np
from numba import jit

from jnynpy.constants import (
    EXPONENT_ALL_ONES,
    MAGNITUDE_MASK,
    NEGATIVE_INFINITY_WORD,
    SIGN_MASK,
)

_LOW_MASK = 0xFFFFFFFF


@jit(nopython=True, nogil=True, cache=True)
def decode_words_numba(x):
    """Split ``x`` into its high and low 32-bit words.

    Compiled so that the recurrence kernels can inspect intermediate values
    without leaving nopython mode.
    """
    buf = np.empty(1, dtype=np.float64)
    buf[0] = x
    bits = buf.view(np.uint64)[0]
    high = np.uint32(bits >> np.uint64(32))
    low = np.uint32(bits & np.uint64(_LOW_MASK))
    return high, low


def decode_words(x: float) -> tuple[int, int]:
    """Return ``(high, low)``, the two 32-bit words of the binary64 ``x``.

    Parameters
    ----------
    x:
        Any value accepted by ``float()``.

    Returns
    -------
    tuple[int, int]
        Unsigned high and low words as Python integers.
    """

    high, low = decode_words_numba(float(x))
    return int(high), int(low)


def magnitude_word(high: int) -> int:
    """High word with the sign bit cleared."""
    return high & MAGNITUDE_MASK


def is_nan(high: int, low: int) -> bool:
    # A non-zero low word contributes one bit above the all-ones exponent.
    low_nonzero = (low | (-low & _LOW_MASK)) >> 31
    return (magnitude_word(high) | low_nonzero) > EXPONENT_ALL_ONES


def is_zero(high: int, low: int) -> bool:
    return (magnitude_word(high) | low) == 0


def is_infinite(high: int, low: int) -> bool:
    return magnitude_word(high) == EXPONENT_ALL_ONES and low == 0


def is_negative(high: int) -> bool:
    """Whether the sign bit is set (true for ``-0.0`` as well)."""
    return (high & SIGN_MASK) != 0


def is_negative_infinity(high: int, low: int = 0) -> bool:
    return high == NEGATIVE_INFINITY_WORD and low == 0


def exponent_at_least(high: int, word: int) -> bool:
    """Compare the magnitude part of ``high`` against a threshold word.

    Parameters
    ----------
    high:
        High word of the value under test.
    word:
        Threshold high word, e.g. :data:`jnynpy.constants.HUGE_ARGUMENT_WORD`.

    Returns
    -------
    bool
        ``True`` when ``|x|`` is at least the value whose high word is
        ``word`` (low word ignored).
    """

    return magnitude_word(high) >= word
