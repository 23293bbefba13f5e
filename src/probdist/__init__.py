"""probdist: probability distribution numerics built on high precision
special functions, the incomplete beta function and its inverse."""

import logging
import os
import typing
import warnings

from importlib import import_module


__version__ = "2026.10.1"

__copyright__ = "Copyright 2007-date, The probdist Project"
__license__ = "BSD-3"


def __getattr__(name: str) -> typing.Any:  # noqa: ANN401
    if (attr := globals().get(name)) is not None:
        return attr

    if name not in _import_mapping:
        raise AttributeError(name)

    module_name = _import_mapping[name]
    module = import_module(f".{module_name}", package=__name__)
    attr = getattr(module, name)
    globals()[name] = attr
    return attr


_import_mapping = {
    "incomplete_beta": "maths.stats.incomplete_beta",
    "incomplete_beta_complement": "maths.stats.incomplete_beta",
    "inverse_incomplete_beta": "maths.stats.inverse_beta",
    "find_root": "maths.solve",
    "NoRootInBracketError": "maths.solve",
    "ln_gamma": "maths.stats.special",
    "ln_factorial": "maths.stats.special",
    "ln_beta": "maths.stats.special",
    "digamma": "maths.stats.special",
    "trigamma": "maths.stats.special",
    "erf": "maths.stats.special",
    "erfc": "maths.stats.special",
    "bessel_k025": "maths.stats.special",
    "exp_bessel_k1": "maths.stats.special",
    "DEFAULT_DIGITS": "maths.stats.special",
    "InvalidArgumentError": "maths.stats.special",
    "NumericOverflowError": "maths.stats.special",
    "NonConvergenceWarning": "util.warning",
    "beta_mle": "maths.stats.fit",
    "weibull_mle": "maths.stats.fit",
}


def __dir__() -> list[str]:
    return list(_import_mapping.keys()) + list(globals().keys())


__all__ = list(_import_mapping.keys())

version = __version__
version_info = tuple(int(v) for v in version.split(".") if v.isdigit())


warn_env = "PROBDIST_WARNINGS"

if warn := os.environ.get(warn_env):
    warnings.simplefilter(warn)


# suppress numba warnings
__numba_logger = logging.getLogger("numba")
__numba_logger.setLevel(logging.WARNING)
