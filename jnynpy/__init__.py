from .bessel import IntegerOrderBessel
from .besseljn import jn
from .besselyn import yn
from .config import Config
from .export import BesselTable
from .kernels import BesselKernels, default_kernels, scipy_kernels

__version__ = "0.1.0"
