"""Maximum likelihood estimates of distribution parameters."""

import numpy

from scipy.optimize import root

from probdist.maths.solve import find_root
from probdist.maths.stats.special import (
    MINLOG,
    PI,
    InvalidArgumentError,
    digamma,
    trigamma,
)
from probdist.util.warning import not_converged


__author__ = "Gavin Huttley"
__copyright__ = "Copyright 2007-2026, The probdist Project"
__credits__ = ["Gavin Huttley"]
__license__ = "BSD-3"
__version__ = "2026.10.1"
__status__ = "Production"

# stands in for the log of a zero observation
LN_ZERO = MINLOG


def _observations(data, min_size=1):
    data = numpy.array(data, dtype=float).flatten()
    if data.size < min_size:
        raise InvalidArgumentError(
            f"at least {min_size} observations required, got {data.size}"
        )
    if not numpy.isfinite(data).all():
        raise InvalidArgumentError("observations must be finite")
    return data


def _safe_log(values):
    result = numpy.full(values.shape, LN_ZERO)
    numpy.log(values, out=result, where=values > 0)
    return result


def beta_mle(data):
    """returns (alpha, beta) maximising the beta likelihood of data on [0, 1]

    Notes
    -----
    The likelihood equations

        digamma(alpha) - digamma(alpha + beta) = mean(log(x))
        digamma(beta) - digamma(alpha + beta) = mean(log(1 - x))

    are solved by Levenberg-Marquardt from the method of moments estimates.
    The solver works on log(alpha), log(beta) so the parameters stay
    positive.
    """
    data = _observations(data, min_size=2)
    if ((data < 0) | (data > 1)).any():
        raise InvalidArgumentError("beta observations must lie in [0, 1]")

    mean_ln = _safe_log(data).mean()
    mean_ln1m = _safe_log(1.0 - data).mean()

    if data.min() == data.max():
        raise InvalidArgumentError("observations are all equal")
    mean = data.mean()
    var = data.var(ddof=1)
    common = mean * (1.0 - mean) / var - 1.0
    if common > 0:
        start = numpy.log([mean * common, (1.0 - mean) * common])
    else:
        start = numpy.zeros(2)

    def equations(log_params):
        alpha, beta = numpy.exp(log_params)
        psi_ab = digamma(alpha + beta)
        tri_ab = trigamma(alpha + beta)
        fvec = [
            digamma(alpha) - psi_ab - mean_ln,
            digamma(beta) - psi_ab - mean_ln1m,
        ]
        # chain rule for the log parameterisation
        jac = [
            [(trigamma(alpha) - tri_ab) * alpha, -tri_ab * beta],
            [-tri_ab * alpha, (trigamma(beta) - tri_ab) * beta],
        ]
        return fvec, jac

    result = root(equations, start, jac=True, method="lm")
    if not result.success:
        not_converged("beta_mle", result.message)
    alpha, beta = numpy.exp(result.x)
    return float(alpha), float(beta)


def weibull_mle(data):
    """returns (alpha, lambda), the shape and rate of a Weibull distribution
    F(x) = 1 - exp(-(lambda * x)**alpha), maximising the likelihood of data
    """
    data = _observations(data)
    if (data < 0).any():
        raise InvalidArgumentError("Weibull observations must be >= 0")
    if data.min() == data.max():
        raise InvalidArgumentError("observations are all equal")
    n = data.size
    ln_x = _safe_log(data)
    sum_ln = ln_x.sum()
    spread = (ln_x * ln_x).sum() - sum_ln * sum_ln / n
    alpha0 = numpy.sqrt(n / (6.0 / (PI * PI) * spread))

    # dividing by the largest observation keeps x**alpha finite and only
    # rescales the profile equation by a positive factor
    largest = data.max()
    scaled = data / largest
    ln_scaled = ln_x - numpy.log(largest)
    sum_ln_scaled = ln_scaled.sum()

    def profile(alpha):
        xa = scaled**alpha
        sum_xa = xa.sum()
        return alpha * (n * (xa * ln_scaled).sum() - sum_ln_scaled * sum_xa) - n * sum_xa

    # profile(alpha) tends to -n**2 as alpha goes to 0 and is positive
    # beyond the root
    lower = max(alpha0 - 20.0, 1.0e-5)
    upper = alpha0 + 20.0
    for _ in range(50):
        if profile(lower) <= 0:
            break
        lower /= 2.0
    for _ in range(50):
        if profile(upper) >= 0:
            break
        upper *= 2.0

    shape = find_root(profile, lower, upper, xtol=1e-5)
    rate = (n / (scaled**shape).sum()) ** (1.0 / shape) / largest
    return float(shape), float(rate)
