"""Numba-compiled recurrence kernels for integer-order Bessel functions.

All kernels are compiled without ``fastmath``: the callers rely on IEEE-754
overflow to ``inf`` and on exact NaN/Inf propagation.
"""

from math import log

from numba import jit

from jnynpy.constants import (
    CONTINUED_FRACTION_LIMIT,
    LOG_DBL_MAX,
    NEGATIVE_INFINITY_WORD,
    RESCALE_LIMIT,
)
from jnynpy.functions.ieee754 import decode_words_numba


@jit(nopython=True, nogil=True, cache=True)
def forward_recurrence(a, b, n, x):
    """Run ``C(i+1) = (2i/x) C(i) - C(i-1)`` upwards from orders 0 and 1.

    Parameters
    ----------
    a : float
        Value at order 0.
    b : float
        Value at order 1.
    n : int
        Target order, ``n >= 2``.
    x : float
        Argument, ``x > 0``.

    Returns
    -------
    float
        Value at order ``n``. Stable for ``J_n`` only while ``n <= x``.
    """
    for i in range(1, n):
        previous = b
        b = b * ((i + i) / x) - a
        a = previous
    return b


@jit(nopython=True, nogil=True, cache=True)
def forward_recurrence_until_overflow(a, b, n, x):
    """Forward recurrence for ``Y_n`` that stops once ``b`` reaches ``-inf``.

    Continuing past ``-inf`` would eventually combine ``-inf - (-inf)`` into a
    NaN, so the loop checks the high word of ``b`` before every step.
    """
    high, _ = decode_words_numba(b)
    i = 1
    while i < n and high != NEGATIVE_INFINITY_WORD:
        previous = b
        b = ((i + i) / x) * b - a
        high, _ = decode_words_numba(b)
        a = previous
        i += 1
    return b


@jit(nopython=True, nogil=True, cache=True)
def taylor_leading_term(n, x):
    """``(x/2)**n / n!`` with numerator and factorial accumulated together."""
    half = x * 0.5
    b = half
    factorial = 1.0
    for i in range(2, n + 1):
        factorial *= i
        b *= half
    return b / factorial


@jit(nopython=True, nogil=True, cache=True)
def continued_fraction_depth(n, x):
    """Number of terms ``k`` such that ``Q_k >= 1e9``.

    ``Q_0 = w``, ``Q_1 = w (w + h) - 1`` and
    ``Q_k = (w + k h) Q_{k-1} - Q_{k-2}`` with ``w = 2n/x``, ``h = 2/x``.
    ``Q_k`` grows monotonically once ``n + k > x``, which holds from the start
    because the kernel is only used for ``n > x``.
    """
    w = (n + n) / x
    h = 2.0 / x
    q0 = w
    z = w + h
    q1 = w * z - 1.0
    k = 1
    while q1 < CONTINUED_FRACTION_LIMIT:
        k += 1
        z += h
        tmp = z * q1 - q0
        q0 = q1
        q1 = tmp
    return k


@jit(nopython=True, nogil=True, cache=True)
def continued_fraction_ratio(n, k, x):
    """Evaluate the continued fraction for ``J_n(x) / J_{n-1}(x)``::

                       1
        t = -------------------------
            2n/x - 1 / (2(n+1)/x - ...)

    truncated after ``k`` levels and evaluated from the innermost term out.
    """
    t = 0.0
    m = n + n
    i = 2 * (n + k)
    while i >= m:
        t = 1.0 / (i / x - t)
        i -= 2
    return t


@jit(nopython=True, nogil=True, cache=True)
def backward_recurrence(n, x, t, rescale):
    """Recur downwards from ``(J_n, J_{n-1}) ~ (t, 1)`` to orders 1 and 0.

    Parameters
    ----------
    n : int
        Starting order.
    x : float
        Argument.
    t : float
        Continued-fraction estimate of ``J_n / J_{n-1}``.
    rescale : bool
        Divide the state by ``b`` whenever ``b`` exceeds ``1e100``. Needed when
        ``n log(2n/x)`` is close to the overflow bound.

    Returns
    -------
    tuple[float, float, float]
        ``(a, b, t)`` where ``a`` and ``b`` are proportional to ``J_1`` and
        ``J_0`` and ``t`` to ``J_n``, all with the same unknown factor.
    """
    a = t
    b = 1.0
    di = 2.0 * (n - 1)
    for _ in range(n - 1, 0, -1):
        previous = b
        b *= di
        b = b / x - a
        a = previous
        di -= 2.0
        if rescale and b > RESCALE_LIMIT:
            a /= b
            t /= b
            b = 1.0
    return a, b, t


@jit(nopython=True, nogil=True, cache=True)
def needs_rescaling(n, x):
    """Whether ``n log(2n/x)`` reaches ``log(DBL_MAX)``."""
    order = float(n)
    v = 2.0 / x
    return order * log(abs(v * order)) >= LOG_DBL_MAX
