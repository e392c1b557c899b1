"""Bessel function of the second kind, integer order.

``Y_n`` is the dominant solution of the recurrence for every ``n > 1``, so
forward recurrence from ``Y_0`` and ``Y_1`` is stable throughout. Only the
singularity at the origin needs care: the recurrence stops as soon as it hits
``-inf``.
"""

from __future__ import annotations

import logging
import math
import operator

from jnynpy.constants import HUGE_ARGUMENT_WORD, INV_SQRT_PI
from jnynpy.functions.cpu_numba import forward_recurrence_until_overflow
from jnynpy.functions.ieee754 import (
    decode_words,
    exponent_at_least,
    is_infinite,
    is_nan,
    is_negative,
    is_zero,
)
from jnynpy.kernels import BesselKernels, resolve_kernels

log = logging.getLogger(__name__)


def asymptotic_yn(n: int, x: float) -> float:
    """Large-argument form ``sqrt(2/(pi x)) sin(x - (2n+1) pi/4)``.

    ::

        n   sqrt(2) sin(x - (2n+1) pi/4)
        0    s - c
        1   -s - c
        2   -s + c
        3    s + c
    """

    s = math.sin(x)
    c = math.cos(x)
    match n & 3:
        case 0:
            temp = s - c
        case 1:
            temp = -s - c
        case 2:
            temp = -s + c
        case _:
            temp = s + c
    return INV_SQRT_PI * temp / math.sqrt(x)


def yn(n: int, x: float, kernels: BesselKernels | None = None) -> float:
    """Bessel function of the second kind of integer order.

    Parameters
    ----------
    n:
        Order; negative orders use ``Y_{-n} = (-1)^n Y_n``.
    x:
        Argument.
    kernels:
        Order-0/1 kernels. Defaults to :func:`jnynpy.kernels.default_kernels`.

    Returns
    -------
    float
        ``Y_n(x)``; ``-inf`` at ``x = 0``, NaN for ``x < 0`` or a NaN argument,
        ``0`` at ``x = inf`` for ``|n| >= 2``.

    Raises
    ------
    TypeError
        If ``n`` is not an integer.
    """

    n = operator.index(n)
    x = float(x)
    kernels = resolve_kernels(kernels)

    high, low = decode_words(x)
    if is_nan(high, low):
        return x + x
    if is_zero(high, low):
        return -math.inf
    if is_negative(high):
        return math.nan

    sign = 1
    if n < 0:
        n = -n
        sign = 1 - ((n & 1) << 1)

    if n == 0:
        return float(kernels.y0(x))
    if n == 1:
        return sign * float(kernels.y1(x))
    if is_infinite(high, low):
        return 0.0

    if exponent_at_least(high, HUGE_ARGUMENT_WORD):
        log.debug("yn(%d, %r): asymptotic form", n, x)
        value = asymptotic_yn(n, x)
    else:
        log.debug("yn(%d, %r): forward recurrence", n, x)
        value = forward_recurrence_until_overflow(
            float(kernels.y0(x)), float(kernels.y1(x)), n, x
        )

    return value if sign > 0 else -value
