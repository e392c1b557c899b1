"""Bessel function of the first kind, integer order.

``J_n`` is built from ``J_0`` and ``J_1``:

- ``n <= x``: forward recurrence ``J_{n+1} = (2n/x) J_n - J_{n-1}``, or the
  asymptotic form once ``x >= 2**302``;
- ``n > x``: forward recurrence loses all accuracy, so a continued fraction
  estimates ``J_n / J_{n-1}``, the recurrence is run backwards to order 0 and
  the result is rescaled against the true ``J_0`` (or ``J_1``). For
  ``x < 2**-30`` the leading Taylor term is used instead.

Negative orders and arguments use ``J_{-n}(x) = (-1)^n J_n(x) = J_n(-x)``.
"""

from __future__ import annotations

import logging
import math
import operator

from jnynpy.constants import (
    EXPONENT_ALL_ONES,
    HUGE_ARGUMENT_WORD,
    INV_SQRT_PI,
    TAYLOR_UNDERFLOW_ORDER,
    TINY_ARGUMENT_WORD,
)
from jnynpy.functions.cpu_numba import (
    backward_recurrence,
    continued_fraction_depth,
    continued_fraction_ratio,
    forward_recurrence,
    needs_rescaling,
    taylor_leading_term,
)
from jnynpy.functions.ieee754 import (
    decode_words,
    exponent_at_least,
    is_nan,
    is_negative,
    is_zero,
)
from jnynpy.kernels import BesselKernels, resolve_kernels

log = logging.getLogger(__name__)


def asymptotic_jn(n: int, x: float) -> float:
    """Large-argument form ``sqrt(2/(pi x)) cos(x - (2n+1) pi/4)``.

    With ``s = sin(x)`` and ``c = cos(x)`` the phase shift reduces to one of
    four combinations, selected by ``n mod 4``::

        n   sqrt(2) cos(x - (2n+1) pi/4)
        0    c + s
        1   -c + s
        2   -c - s
        3    c - s
    """

    s = math.sin(x)
    c = math.cos(x)
    match n & 3:
        case 0:
            temp = c + s
        case 1:
            temp = -c + s
        case 2:
            temp = -c - s
        case _:
            temp = c - s
    return INV_SQRT_PI * temp / math.sqrt(x)


def _jn_large_argument(n: int, x: float, high: int, kernels: BesselKernels) -> float:
    if exponent_at_least(high, HUGE_ARGUMENT_WORD):
        log.debug("jn(%d, %r): asymptotic form", n, x)
        return asymptotic_jn(n, x)

    log.debug("jn(%d, %r): forward recurrence", n, x)
    return forward_recurrence(float(kernels.j0(x)), float(kernels.j1(x)), n, x)


def _jn_large_order(n: int, x: float, high: int, kernels: BesselKernels) -> float:
    if not exponent_at_least(high, TINY_ARGUMENT_WORD):
        if n > TAYLOR_UNDERFLOW_ORDER:
            return 0.0
        log.debug("jn(%d, %r): leading Taylor term", n, x)
        return taylor_leading_term(n, x)

    depth = continued_fraction_depth(n, x)
    ratio = continued_fraction_ratio(n, depth, x)
    rescale = needs_rescaling(n, x)
    log.debug(
        "jn(%d, %r): backward recurrence, depth %d, rescale=%s",
        n,
        x,
        depth,
        rescale,
    )
    j1_scaled, j0_scaled, jn_scaled = backward_recurrence(n, x, ratio, rescale)

    # Anchor on whichever of J0, J1 is further from a zero.
    z = float(kernels.j0(x))
    w = float(kernels.j1(x))
    if abs(z) >= abs(w):
        return jn_scaled * z / j0_scaled
    return jn_scaled * w / j1_scaled


def jn(n: int, x: float, kernels: BesselKernels | None = None) -> float:
    """Bessel function of the first kind of integer order.

    Parameters
    ----------
    n:
        Order; any integer, including negative values.
    x:
        Argument.
    kernels:
        Order-0/1 kernels. Defaults to :func:`jnynpy.kernels.default_kernels`.

    Returns
    -------
    float
        ``J_n(x)``. NaN for a NaN argument, ``0`` for ``x = 0`` or
        ``|x| = inf`` when ``|n| >= 2``.

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

    negative = is_negative(high)
    if n < 0:
        n = -n
        x = -x
        negative = not negative

    if n == 0:
        return float(kernels.j0(x))
    if n == 1:
        return float(kernels.j1(x))

    # Even orders are symmetric in x; odd orders pick up the sign of x.
    flip_sign = (n & 1) == 1 and negative
    x = abs(x)

    if is_zero(high, low) or exponent_at_least(high, EXPONENT_ALL_ONES):
        value = 0.0
    elif n <= x:
        value = _jn_large_argument(n, x, high, kernels)
    else:
        value = _jn_large_order(n, x, high, kernels)

    return -value if flip_sign else value
