"""Low-level numerical kernels.

This subpackage contains the IEEE-754 word decoder and the Numba-compiled
recurrences used by the integer-order evaluators.
"""
