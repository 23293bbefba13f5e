"""The regularized incomplete beta function I_x(alpha, beta) to a requested
number of decimal digits.

For max(alpha, beta) <= 1000 the value is exact to the requested precision:
the smaller parameter is split into a fractional part in (0, 1] and an
integer shift, a power series gives the base values and the shift is taken by
recurrence (W. Gautschi, Algorithm 222: Incomplete Beta Function Ratios,
Comm. ACM 7, pp 143-144, 1964). For larger parameters the Bol'shev
approximation (small other parameter) or the normal approximation of Peizer
and Pratt is used.
"""

import numpy

from numpy import exp, isfinite, isnan, log, sqrt

from probdist.maths.stats.incomplete_beta_numba import (
    alphabeta_small_sum,
    backward_recurrence,
    forward_recurrence,
)
from probdist.maths.stats.special import (
    MAXLOG,
    InvalidArgumentError,
    NumericOverflowError,
    epsilon_for_digits,
    igam,
    igamc,
    lgam,
    ndtr,
)
from probdist.util.warning import not_converged


__author__ = "Gavin Huttley"
__copyright__ = "Copyright 2007-2026, The probdist Project"
__credits__ = ["Gavin Huttley"]
__license__ = "BSD-3"
__version__ = "2026.10.1"
__status__ = "Production"

# intermediate values are carried multiplied by RENORM to avoid underflow
RENORM = 1.0e300
# above this the exact recurrences are abandoned for an approximation
ALPHABETAMAX = 1000.0
# Bol'shev applies when the smaller parameter is below this
ALPHABETALIM = 30.0

MAX_SERIES_TERMS = 5000
MAX_BACKWARD_PASSES = 1000


def validate_shape(alpha, beta):
    """raises InvalidArgumentError unless both shape parameters are > 0"""
    for name, value in (("alpha", alpha), ("beta", beta)):
        if not (value > 0 and isfinite(value)):
            raise InvalidArgumentError(f"{name} must be > 0 and finite, got {value}")


def isubx_alphabeta_small(alpha, beta, x, digits):
    """I_x(alpha, beta) for 0 < alpha <= 1 and 0 < beta <= 2 from a power
    series in x"""
    if not 0 < alpha <= 1:
        raise InvalidArgumentError(f"alpha not in (0, 1], got {alpha}")
    if not 0 < beta <= 2:
        raise InvalidArgumentError(f"beta not in (0, 2], got {beta}")

    epsilon = epsilon_for_digits(digits)
    s, converged = alphabeta_small_sum(
        float(alpha), float(beta), float(x), epsilon, MAX_SERIES_TERMS
    )
    if not converged:
        not_converged(
            "isubx_alphabeta_small",
            f"series for alpha={alpha}, beta={beta}, x={x} used {MAX_SERIES_TERMS} terms",
        )

    v = lgam(alpha + beta) - lgam(alpha) - lgam(beta)
    if not isfinite(s) or v > MAXLOG:
        raise NumericOverflowError(
            f"normalising factor for alpha={alpha}, beta={beta} exceeds MAXNUM"
        )
    return s * exp(v)


def forward(alpha, beta, x, I0, I1, nmax):
    """returns [I_x(alpha, beta + n) for n in 0..nmax] given
    I0 = I_x(alpha, beta) and I1 = I_x(alpha, beta + 1)"""
    result = numpy.zeros(nmax + 1)
    return forward_recurrence(
        float(alpha), float(beta), float(x), float(I0), float(I1), nmax, result
    )


def backward(alpha, beta, x, I0, digits, nmax):
    """returns [I_x(alpha + n, beta) for n in 0..nmax] given
    I0 = I_x(alpha, beta), using Miller's backward recurrence"""
    epsilon = epsilon_for_digits(digits)
    result = numpy.zeros(nmax + 1)
    converged = backward_recurrence(
        float(alpha),
        float(beta),
        float(x),
        float(I0),
        epsilon,
        nmax,
        MAX_BACKWARD_PASSES,
        result,
    )
    if not converged:
        not_converged(
            "backward",
            f"ratios for alpha={alpha}, beta={beta}, x={x}, nmax={nmax} "
            f"still changing after {MAX_BACKWARD_PASSES} passes",
        )
    return result


def _split(value):
    """returns the integer shift and the part in (0, 1] of value"""
    n = int(value)
    frac = value - n
    if frac <= 0:
        # a zero fractional part is not allowed
        frac += 1.0
        n -= 1
    return n, frac


def isubx_beta_fixed(alpha, beta, x, digits, nmax):
    """returns [I_x(alpha + n, beta) for n in 0..nmax], 0 < alpha <= 1

    beta is first reduced to its part in (0, 1] and brought back up by
    forward recurrence, then the backward recurrence shifts alpha.
    """
    if not 0 < alpha <= 1:
        raise InvalidArgumentError(f"alpha not in (0, 1], got {alpha}")
    mmax, beta0 = _split(beta)
    Ibeta0 = RENORM * isubx_alphabeta_small(alpha, beta0, x, digits)
    Ibeta1 = 0.0
    if mmax > 0:
        Ibeta1 = RENORM * isubx_alphabeta_small(alpha, beta0 + 1.0, x, digits)

    Ibeta = forward(alpha, beta0, x, Ibeta0, Ibeta1, mmax)
    return backward(alpha, beta, x, Ibeta[mmax], digits, nmax) / RENORM


def isubx_alpha_fixed(alpha, beta, x, digits, nmax):
    """returns [I_x(alpha, beta + n) for n in 0..nmax], 0 < beta <= 1

    alpha is reduced to its part in (0, 1] and restored by backward recurrence
    for both beta and beta + 1, which seed the forward recurrence in beta.
    """
    if not 0 < beta <= 1:
        raise InvalidArgumentError(f"beta not in (0, 1], got {beta}")
    mmax, alpha0 = _split(alpha)
    I0 = RENORM * isubx_alphabeta_small(alpha0, beta, x, digits)
    I1 = RENORM * isubx_alphabeta_small(alpha0, beta + 1.0, x, digits)

    Ibeta0 = backward(alpha0, beta, x, I0, digits, mmax)[mmax]
    Ibeta1 = backward(alpha0, beta + 1.0, x, I1, digits, mmax)[mmax]
    return forward(alpha, beta, x, Ibeta0, Ibeta1, nmax) / RENORM


def beta_beta_fixed(alpha, beta, x, digits, nmax):
    """returns [I_x(alpha + n, beta) for n in 0..nmax], 0 < alpha <= 1"""
    if not 0 < alpha <= 1:
        raise InvalidArgumentError(f"alpha not in (0, 1], got {alpha}")
    if not beta > 0:
        raise InvalidArgumentError(f"beta must be > 0, got {beta}")
    if nmax < 0:
        raise InvalidArgumentError(f"nmax must be >= 0, got {nmax}")
    if x == 0.0 or x == 1.0:
        return numpy.full(nmax + 1, float(x))

    if x <= 0.5:
        return isubx_beta_fixed(alpha, beta, x, digits, nmax)
    # I_x(a, b) = 1 - I_{1-x}(b, a)
    return 1.0 - isubx_alpha_fixed(beta, alpha, 1.0 - x, digits, nmax)


def beta_alpha_fixed(alpha, beta, x, digits, nmax):
    """returns [I_x(alpha, beta + n) for n in 0..nmax], 0 < beta <= 1"""
    if not 0 < beta <= 1:
        raise InvalidArgumentError(f"beta not in (0, 1], got {beta}")
    if not alpha > 0:
        raise InvalidArgumentError(f"alpha must be > 0, got {alpha}")
    if nmax < 0:
        raise InvalidArgumentError(f"nmax must be >= 0, got {nmax}")
    if x == 0.0 or x == 1.0:
        return numpy.full(nmax + 1, float(x))

    if x <= 0.5:
        return isubx_alpha_fixed(alpha, beta, x, digits, nmax)
    return 1.0 - isubx_beta_fixed(beta, alpha, 1.0 - x, digits, nmax)


def beta_g(z, digits):
    """(1 - z**2 + 2 * z * log(z)) / (1 - z)**2, used by the normal
    approximation

    Near z = 1 the closed form loses all precision so a series in 1 - z is
    summed instead.
    """
    if z > 1.3:
        return -beta_g(1.0 / z, digits)
    if z < 1.0e-20:
        return 1.0
    if z < 0.7:
        return (1.0 - z * z + 2.0 * z * log(z)) / ((1.0 - z) * (1.0 - z))
    if z == 1.0:
        return 0.0

    epsilon = epsilon_for_digits(digits)
    y = 1.0 - z
    total = 0.0
    term = 1.0
    for j in range(2, MAX_SERIES_TERMS + 2):
        term *= y
        inc = term / (j * (j + 1))
        total += inc
        if not abs(inc / total) > epsilon:
            break
    else:
        not_converged("beta_g", f"series at z={z}")
    return 2.0 * total


def _bolshev(alpha, beta, digits, x):
    """approximation for a large and a small parameter, through the gamma
    distribution"""
    if x > 0.5:
        return 1.0 - _bolshev(beta, alpha, digits, 1.0 - x)

    # the large parameter is kept in alpha
    flag = alpha >= beta
    if not flag:
        alpha, beta = beta, alpha

    u = alpha + 0.5 * beta - 0.5
    temp = (1.0 - x) / (1.0 + x) if flag else x / (2.0 - x)
    yd = 2.0 * u * temp
    gam = (
        exp(beta * log(yd) - yd - lgam(beta))
        * (2.0 * yd * yd - (beta - 1.0) * yd - (beta * beta - 1.0))
        / (24.0 * u * u)
    )
    if flag:
        return igamc(beta, yd) - gam
    return igam(beta, yd) + gam


def _peizer_pratt(alpha, beta, digits, x):
    """normal approximation of Peizer and Pratt (1968) for two large
    parameters"""
    h1 = alpha + beta - 1.0
    y = 1.0 - x
    h3 = sqrt(
        (
            1.0
            + y * beta_g((alpha - 0.5) / (h1 * x), digits)
            + x * beta_g((beta - 0.5) / (h1 * y), digits)
        )
        / ((h1 + 1.0 / 6.0) * x * y)
    ) * (
        (h1 + 1.0 / 3.0 + 0.02 * (1.0 / alpha + 1.0 / beta + 1.0 / (alpha + beta)))
        * x
        - alpha
        + 1.0 / 3.0
        - 0.02 / alpha
        - 0.01 / (alpha + beta)
    )
    return ndtr(h3)


def _clamped(value):
    # round-off far in the tails
    if value <= 0.0:
        return 0.0
    if value >= 1.0:
        return 1.0
    return float(value)


def incomplete_beta(alpha, beta, digits, x):
    """returns I_x(alpha, beta), the beta(alpha, beta) distribution function
    at x, to roughly digits decimal digits

    Parameters
    ----------
    alpha, beta
        shape parameters, both > 0
    digits
        target number of decimal digits, an integer in 1..35
    x
        values <= 0 give 0, values >= 1 give 1

    Notes
    -----
    For max(alpha, beta) > 1000 the result is an approximation whose accuracy
    does not depend on digits.
    """
    validate_shape(alpha, beta)
    epsilon_for_digits(digits)
    if isnan(x):
        raise InvalidArgumentError("x is nan")
    if x <= 0.0:
        return 0.0
    if x >= 1.0:
        return 1.0
    if alpha == beta and x == 0.5:
        return 0.5

    if max(alpha, beta) <= ALPHABETAMAX:
        if alpha < beta:
            n, alpha0 = _split(alpha)
            values = beta_beta_fixed(alpha0, beta, x, digits, n)
        else:
            n, beta0 = _split(beta)
            values = beta_alpha_fixed(alpha, beta0, x, digits, n)
        return _clamped(values[n])

    if (alpha > ALPHABETAMAX and beta < ALPHABETALIM) or (
        beta > ALPHABETAMAX and alpha < ALPHABETALIM
    ):
        return _clamped(_bolshev(alpha, beta, digits, x))

    return _clamped(_peizer_pratt(alpha, beta, digits, x))


def incomplete_beta_complement(alpha, beta, digits, x):
    """returns 1 - I_x(alpha, beta)"""
    validate_shape(alpha, beta)
    if isnan(x):
        raise InvalidArgumentError("x is nan")
    if x <= 0.0:
        epsilon_for_digits(digits)
        return 1.0
    if x >= 1.0:
        epsilon_for_digits(digits)
        return 0.0
    if x > 0.5:
        # 1 - x is exact here
        return incomplete_beta(beta, alpha, digits, 1.0 - x)
    return 1.0 - incomplete_beta(alpha, beta, digits, x)
