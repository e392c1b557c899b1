"""Thresholds shared by the integer-order evaluators.

Word thresholds are compared against the high 32-bit word of an IEEE-754
binary64 value with the sign bit cleared, so they encode exponent ranges
exactly. Numeric bounds are double-precision limits used by the recurrences.
"""

#: ``1 / sqrt(pi)``; with the ``sqrt(2)`` folded into the sin/cos combinations
#: this gives the ``sqrt(2 / (pi x))`` amplitude of the asymptotic forms.
INV_SQRT_PI = 5.64189583547756279280e-01  # 0x3FE20DD7, 0x50429B6D

#: Clears the sign bit of a high word.
MAGNITUDE_MASK = 0x7FFFFFFF
#: Sign bit of a high word.
SIGN_MASK = 0x80000000
#: High word of +Inf; any larger magnitude pattern (or a non-zero low word
#: at this value) is a NaN.
EXPONENT_ALL_ONES = 0x7FF00000
#: High word of -Inf.
NEGATIVE_INFINITY_WORD = 0xFFF00000

#: ``x >= 2**302``: the asymptotic form is exact to double precision.
HUGE_ARGUMENT_WORD = 0x52D00000
#: ``x < 2**-30``: the leading Taylor term of ``J_n`` is exact.
TINY_ARGUMENT_WORD = 0x3E100000

#: Above this order ``(x/2)**n / n!`` underflows for every tiny ``x``.
TAYLOR_UNDERFLOW_ORDER = 33

#: ``Q_k`` threshold for double precision (``1e4`` would do for single).
CONTINUED_FRACTION_LIMIT = 1.0e9
#: ``log(DBL_MAX)``; if ``n * log(2n/x)`` exceeds it the unscaled backward
#: recurrence may overflow.
LOG_DBL_MAX = 7.09782712893383973096e02
#: Rescaling point of the guarded backward recurrence.
RESCALE_LIMIT = 1.0e100
