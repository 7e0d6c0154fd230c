"""
simrng
======

Random variate generation and chi-squared goodness-of-fit testing: seeded
uniform sources, samplers for the uniform, normal, exponential and Poisson
families, histogram binning, expected frequencies, interval merging and
critical values of the chi-squared distribution.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .config import *
from .config import __all__ as _config_all
from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import *
from .errors import __all__ as _errors_all
from .families import *
from .families import __all__ as _family_all
from .rng import *
from .rng import __all__ as _rng_all
from .service import *
from .service import __all__ as _service_all
from .stats import *
from .stats import __all__ as _stats_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("simrng")
__all__ = [
    "__version__",
    *_config_all,
    *_distr_all,
    *_errors_all,
    *_family_all,
    *_rng_all,
    *_service_all,
    *_stats_all,
    *_types_all,
]

del _config_all
del _distr_all
del _errors_all
del _family_all
del _rng_all
del _service_all
del _stats_all
del _types_all
