"""Order-0 and order-1 Bessel kernels.

The integer-order evaluators only need ``j0``, ``j1``, ``y0`` and ``y1``: as
seeds for the forward recurrences and as anchors to renormalize the backward
recurrence. They receive them as a :class:`BesselKernels` record instead of
looking them up in a shared namespace.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable

Kernel = Callable[[float], float]

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class BesselKernels:
    """Order-0 and order-1 Bessel functions of the first and second kind.

    Attributes
    ----------
    j0, j1:
        ``J_0`` and ``J_1``.
    y0, y1:
        ``Y_0`` and ``Y_1``. Expected to return ``-inf`` at ``0`` and NaN for
        negative arguments.
    name:
        Label used in log messages.
    """

    j0: Kernel
    j1: Kernel
    y0: Kernel
    y1: Kernel
    name: str = "custom"


def scipy_kernels() -> BesselKernels:
    """Build a kernel set backed by :mod:`scipy.special`."""

    from scipy.special import j0, j1, y0, y1

    return BesselKernels(j0=j0, j1=j1, y0=y0, y1=y1, name="scipy")


@lru_cache(maxsize=None)
def default_kernels() -> BesselKernels:
    """Return the process-wide default kernel set.

    The scipy lookup happens on the first call only; later calls return the
    same record, so concurrent readers never observe a partially built set.
    """

    kernels = scipy_kernels()
    log.debug("Using %s order-0/1 Bessel kernels", kernels.name)
    return kernels


def resolve_kernels(kernels: BesselKernels | None) -> BesselKernels:
    return default_kernels() if kernels is None else kernels
