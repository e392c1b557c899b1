"""Evaluator object bound to one set of order-0/1 kernels."""

from __future__ import annotations

import logging
import operator
from time import time
from typing import Iterable

from jnynpy.besseljn import jn
from jnynpy.besselyn import yn
from jnynpy.export import BesselTable
from jnynpy.kernels import BesselKernels, resolve_kernels

KINDS = ("j", "y")


class IntegerOrderBessel:
    """Integer-order Bessel functions ``J_n`` and ``Y_n``.

    Parameters
    ----------
    kernels:
        Order-0/1 kernels. Resolved once at construction; ``None`` selects
        :func:`jnynpy.kernels.default_kernels`.

    Notes
    -----
    The object holds no mutable state, so one instance can be shared between
    threads.
    """

    def __init__(self, kernels: BesselKernels | None = None):
        self.kernels = resolve_kernels(kernels)
        self.log = logging.getLogger(self.__class__.__module__)
        self.log.debug("Bound to %s kernels", self.kernels.name)

    def jn(self, n: int, x: float) -> float:
        return jn(n, x, self.kernels)

    def yn(self, n: int, x: float) -> float:
        return yn(n, x, self.kernels)

    def evaluate(self, kind: str, n: int, x: float) -> float:
        """Evaluate ``J_n(x)`` for ``kind="j"`` or ``Y_n(x)`` for ``kind="y"``."""

        match kind:
            case "j":
                return self.jn(n, x)
            case "y":
                return self.yn(n, x)
            case _:
                raise ValueError(
                    f"Unsupported Bessel kind: {kind!r}. Expected one of {KINDS}."
                )

    def table(
        self,
        orders: Iterable[int],
        arguments: Iterable[float],
        kind: str = "both",
    ) -> BesselTable:
        """Evaluate every requested kind on the ``orders x arguments`` grid.

        Parameters
        ----------
        orders:
            Integer orders (rows of the table).
        arguments:
            Arguments (columns of the table).
        kind:
            ``"j"``, ``"y"`` or ``"both"``.

        Returns
        -------
        BesselTable
            The evaluated grid, ready for :meth:`BesselTable.save`.
        """

        orders = [operator.index(n) for n in orders]
        arguments = [float(x) for x in arguments]
        kinds = KINDS if kind == "both" else (kind,)

        start = time()
        values = {
            k: [[self.evaluate(k, n, x) for x in arguments] for n in orders]
            for k in kinds
        }
        self.log.info(
            "Evaluating %d x %d %s table took %f s",
            len(orders),
            len(arguments),
            kind,
            time() - start,
        )
        return BesselTable(orders=orders, arguments=arguments, kind=kind, **values)
