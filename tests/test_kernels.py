import dataclasses

import pytest
from scipy import special

from jnynpy import BesselKernels, IntegerOrderBessel, default_kernels, jn, yn


@pytest.fixture
def counting_kernels() -> tuple[BesselKernels, list[str]]:
    calls: list[str] = []

    def _wrap(name, fn):
        def kernel(x):
            calls.append(name)
            return fn(x)

        return kernel

    kernels = BesselKernels(
        j0=_wrap("j0", special.j0),
        j1=_wrap("j1", special.j1),
        y0=_wrap("y0", special.y0),
        y1=_wrap("y1", special.y1),
        name="counting",
    )
    return kernels, calls


def test_default_kernels_are_looked_up_once():
    assert default_kernels() is default_kernels()
    assert default_kernels().name == "scipy"


def test_kernel_set_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        default_kernels().j0 = special.y0


def test_injected_kernels_seed_the_recurrences(counting_kernels):
    kernels, calls = counting_kernels

    assert jn(5, 50.0, kernels) == jn(5, 50.0)
    assert sorted(calls) == ["j0", "j1"]

    calls.clear()
    assert jn(50, 5.0, kernels) == jn(50, 5.0)
    assert sorted(calls) == ["j0", "j1"]

    calls.clear()
    assert yn(5, 50.0, kernels) == yn(5, 50.0)
    assert sorted(calls) == ["y0", "y1"]


def test_special_values_do_not_touch_kernels(counting_kernels):
    kernels, calls = counting_kernels

    jn(4, 0.0, kernels)
    jn(4, float("nan"), kernels)
    jn(40, 1e-10, kernels)
    jn(3, 1e95, kernels)
    yn(4, 0.0, kernels)
    yn(4, -1.0, kernels)
    yn(4, float("inf"), kernels)
    yn(4, 1e95, kernels)

    assert calls == []


def test_results_scale_with_the_kernels():
    doubled = BesselKernels(
        j0=lambda x: 2 * special.j0(x),
        j1=lambda x: 2 * special.j1(x),
        y0=lambda x: 2 * special.y0(x),
        y1=lambda x: 2 * special.y1(x),
    )
    assert jn(5, 50.0, doubled) == pytest.approx(2 * jn(5, 50.0), rel=1e-15)
    assert jn(50, 5.0, doubled) == pytest.approx(2 * jn(50, 5.0), rel=1e-15)
    assert yn(7, 3.0, doubled) == pytest.approx(2 * yn(7, 3.0), rel=1e-15)


def test_evaluator_binds_kernels(counting_kernels):
    kernels, calls = counting_kernels
    bessel = IntegerOrderBessel(kernels)

    assert bessel.kernels is kernels
    assert bessel.jn(5, 50.0) == jn(5, 50.0)
    assert bessel.yn(5, 50.0) == yn(5, 50.0)
    assert bessel.evaluate("j", 3, 2.0) == jn(3, 2.0)
    assert bessel.evaluate("y", 3, 2.0) == yn(3, 2.0)
    assert calls


def test_evaluator_rejects_unknown_kind():
    with pytest.raises(ValueError, match="Unsupported Bessel kind"):
        IntegerOrderBessel().evaluate("k", 2, 1.0)
