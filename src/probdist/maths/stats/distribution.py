#!/usr/bin/env python
"""Distribution functions built on the incomplete beta and incomplete gamma
integrals.

Cumulative functions return the left-hand tail and the functions ending in
``c`` (or ``_sf``) the right-hand tail. Arguments outside the support are
clamped (0 or 1) while invalid parameters raise InvalidArgumentError.
"""

from numpy import exp, inf, isinf, isnan, log, sqrt

from probdist.maths.stats.incomplete_beta import (
    incomplete_beta,
    incomplete_beta_complement,
    validate_shape,
)
from probdist.maths.stats.inverse_beta import inverse_incomplete_beta
from probdist.maths.stats.special import (
    DEFAULT_DIGITS,
    MAXNUM,
    InvalidArgumentError,
    expm1,
    fix_rounding_error,
    igam,
    igamc,
    igami,
    ln_beta,
    log1p,
    ndtr,
    ndtri,
)

# Probability integrals: low gives left-hand tail, high gives right-hand tail.


def _check_probability(name, p):
    p = fix_rounding_error(p)
    if isnan(p) or p < 0 or p > 1:
        raise InvalidArgumentError(f"{name} must be between 0 and 1, got {p}")
    return p


def _check_interval(a, b):
    if not a < b:
        raise InvalidArgumentError(f"interval [{a}, {b}] requires a < b")


def beta_density(alpha, beta, x, a=0.0, b=1.0):
    """density of the beta distribution with shape parameters alpha, beta
    over [a, b]"""
    validate_shape(alpha, beta)
    _check_interval(a, b)
    if x <= a or x >= b:
        return 0.0
    z = (
        -ln_beta(alpha, beta)
        - (alpha + beta - 1) * log(b - a)
        + (alpha - 1) * log(x - a)
        + (beta - 1) * log(b - x)
    )
    return exp(z)


def beta_cdf(alpha, beta, x, a=0.0, b=1.0, digits=DEFAULT_DIGITS):
    """beta distribution over [a, b], a through x"""
    _check_interval(a, b)
    return incomplete_beta(alpha, beta, digits, (x - a) / (b - a))


def beta_sf(alpha, beta, x, a=0.0, b=1.0, digits=DEFAULT_DIGITS):
    """beta distribution over [a, b], x through b"""
    _check_interval(a, b)
    return incomplete_beta_complement(alpha, beta, digits, (x - a) / (b - a))


def beta_inv(alpha, beta, u, a=0.0, b=1.0, digits=DEFAULT_DIGITS):
    """returns x such that beta_cdf(alpha, beta, x, a, b) == u"""
    _check_interval(a, b)
    return a + (b - a) * inverse_incomplete_beta(alpha, beta, digits, u)


def beta_mean(alpha, beta, a=0.0, b=1.0):
    validate_shape(alpha, beta)
    return (alpha * b + beta * a) / (alpha + beta)


def beta_variance(alpha, beta, a=0.0, b=1.0):
    validate_shape(alpha, beta)
    ab = alpha + beta
    return (alpha * beta) * (b - a) * (b - a) / (ab * ab * (ab + 1))


def stdtr(df, t, digits=DEFAULT_DIGITS):
    """Student's t distribution, -infinity to t.

    df can be any real > 0. Uses the tail 0.5 * I_z(df / 2, 1 / 2) with
    z = df / (df + t**2).
    """
    if not df > 0:
        raise InvalidArgumentError(f"stdtr: df must be > 0, got {df}")
    if isnan(t):
        raise InvalidArgumentError("stdtr: t is nan")
    if t == 0:
        return 0.5
    z = df / (df + t * t)
    tail = 0.5 * incomplete_beta(0.5 * df, 0.5, digits, z)
    return tail if t < 0 else 1.0 - tail


def stdtrc(df, t, digits=DEFAULT_DIGITS):
    """Student's t distribution, t to infinity."""
    return stdtr(df, -t, digits=digits)


def stdtri(df, p, digits=DEFAULT_DIGITS):
    """Returns inverse of Student's t distribution. df = degrees of freedom."""
    if not df > 0:
        raise InvalidArgumentError(f"stdtri: df must be > 0, got {df}")
    p = _check_probability("p", p)
    if p == 0.0:
        return -inf
    if p == 1.0:
        return inf
    # handle intermediate values
    if 0.25 < p < 0.75:
        if p == 0.5:
            return 0.0
        z = 1.0 - 2.0 * p
        z = inverse_incomplete_beta(0.5, 0.5 * df, digits, abs(z))
        t = sqrt(df * z / (1.0 - z))
        if p < 0.5:
            t = -t
        return t
    # handle extreme values
    rflg = -1
    if p >= 0.5:
        p = 1.0 - p
        rflg = 1
    z = inverse_incomplete_beta(0.5 * df, 0.5, digits, 2.0 * p)

    if MAXNUM * z < df:
        return rflg * MAXNUM
    t = sqrt(df / z - df)
    return rflg * t


def _check_dfs(n1, n2):
    if not (n1 > 0 and n2 > 0):
        raise InvalidArgumentError(f"degrees of freedom must be > 0, got {n1}, {n2}")


def fdtr(n1, n2, x, digits=DEFAULT_DIGITS):
    """F distribution with n1, n2 degrees of freedom, 0 to x."""
    _check_dfs(n1, n2)
    if x <= 0:
        return 0.0
    if isinf(x):
        return 1.0
    w = n1 * x
    w = w / (n2 + w)
    return incomplete_beta(0.5 * n1, 0.5 * n2, digits, w)


def fdtrc(n1, n2, x, digits=DEFAULT_DIGITS):
    """F distribution with n1, n2 degrees of freedom, x to infinity."""
    _check_dfs(n1, n2)
    if x <= 0:
        return 1.0
    if isinf(x):
        return 0.0
    w = n2 / (n2 + n1 * x)
    return incomplete_beta(0.5 * n2, 0.5 * n1, digits, w)


def fdtri(n1, n2, y, digits=DEFAULT_DIGITS):
    """Returns inverse of F distribution."""
    _check_dfs(n1, n2)
    y = _check_probability("y", y)
    if y == 0.0:
        return 0.0
    if y == 1.0:
        return inf
    y = 1.0 - y
    # Compute probability for x = 0.5
    w = incomplete_beta(0.5 * n2, 0.5 * n1, digits, 0.5)
    # If that is greater than y, then the solution w < .5.
    # Otherwise, solve at 1-y to remove cancellation in (n2 - n2*w).
    if w > y or y < 0.001:
        w = inverse_incomplete_beta(0.5 * n2, 0.5 * n1, digits, y)
        x = (n2 - n2 * w) / (n1 * w)
    else:
        w = inverse_incomplete_beta(0.5 * n1, 0.5 * n2, digits, 1.0 - y)
        x = n2 * w / (n1 * (1.0 - w))
    return x


def _check_binomial(n, p):
    if not n > 0 or int(n) != n:
        raise InvalidArgumentError(f"Binomial n must be an integer > 0, got {n}")
    return _check_probability("Binomial p", p)


def bdtr(k, n, p, digits=DEFAULT_DIGITS):
    """Binomial distribution, 0 through k.

    Uses formula bdtr(k, n, p) = I_{1-p}(n-k, k+1)
    """
    p = _check_binomial(n, p)
    if k < 0:
        return 0.0
    if k >= n:
        return 1.0
    k = int(k)
    dn = n - k
    if k == 0:
        return pow(1.0 - p, dn)
    return incomplete_beta(dn, k + 1, digits, 1.0 - p)


def bdtrc(k, n, p, digits=DEFAULT_DIGITS):
    """Complement of binomial distribution, k+1 through n.

    Uses formula bdtrc(k, n, p) = I_p(k+1, n-k)
    """
    p = _check_binomial(n, p)
    if k < 0:
        return 1.0
    if k >= n:
        return 0.0
    k = int(k)
    dn = n - k
    if k == 0:
        if p < 0.01:
            return -expm1(dn * log1p(-p))
        return 1.0 - pow(1.0 - p, dn)
    return incomplete_beta(k + 1, dn, digits, p)


def bdtri(k, n, y, digits=DEFAULT_DIGITS):
    """Inverse of binomial distribution.

    Finds binomial p such that sum of terms 0-k reaches cum probability y.
    """
    y = _check_binomial(n, y)
    if k < 0 or n <= k:
        raise InvalidArgumentError(f"k must be in [0, n), got k={k}, n={n}")
    dn = n - k
    if k == 0:
        if y > 0.8:
            p = -expm1(log1p(y - 1.0) / dn)
        else:
            p = 1.0 - y ** (1.0 / dn)
    else:
        dk = k + 1
        p = incomplete_beta(dn, dk, digits, 0.5)
        if p > 0.5:
            p = inverse_incomplete_beta(dk, dn, digits, 1.0 - y)
        else:
            p = 1.0 - inverse_incomplete_beta(dn, dk, digits, y)
    return p


def _check_pearson6(alpha1, alpha2, scale):
    validate_shape(alpha1, alpha2)
    if not scale > 0:
        raise InvalidArgumentError(f"scale must be > 0, got {scale}")


def pearson6_density(alpha1, alpha2, scale, x):
    """density of the Pearson type VI (beta prime) distribution"""
    _check_pearson6(alpha1, alpha2, scale)
    if x <= 0:
        return 0.0
    z = x / scale
    return (
        exp(
            (alpha1 - 1.0) * log(z)
            - ln_beta(alpha1, alpha2)
            - (alpha1 + alpha2) * log1p(z)
        )
        / scale
    )


def pearson6_cdf(alpha1, alpha2, scale, x, digits=DEFAULT_DIGITS):
    """Pearson type VI distribution, 0 to x, via I_{x/(x+scale)}(alpha1, alpha2)"""
    _check_pearson6(alpha1, alpha2, scale)
    if x <= 0:
        return 0.0
    return incomplete_beta(alpha1, alpha2, digits, x / (x + scale))


def pearson6_sf(alpha1, alpha2, scale, x, digits=DEFAULT_DIGITS):
    """Pearson type VI distribution, x to infinity"""
    _check_pearson6(alpha1, alpha2, scale)
    if x <= 0:
        return 1.0
    # I_{1 - w}(alpha2, alpha1) with 1 - w = scale / (x + scale)
    return incomplete_beta(alpha2, alpha1, digits, scale / (x + scale))


def pearson6_inv(alpha1, alpha2, scale, u, digits=DEFAULT_DIGITS):
    """returns x such that pearson6_cdf(alpha1, alpha2, scale, x) == u"""
    _check_pearson6(alpha1, alpha2, scale)
    y = inverse_incomplete_beta(alpha1, alpha2, digits, u)
    if y >= 1.0:
        return inf
    return y * scale / (1.0 - y)


def _check_gamma(a, b):
    if not (a > 0 and b > 0):
        raise InvalidArgumentError(f"Gamma a and b must be > 0, got {a}, {b}")


def gdtr(a, b, x):
    """Returns integral from 0 to x of Gamma distribution with rate a and
    shape b."""
    _check_gamma(a, b)
    if x <= 0.0:
        return 0.0
    return igam(b, a * x)


def gdtrc(a, b, x):
    """Returns integral from x to inf of Gamma distribution with rate a and
    shape b."""
    _check_gamma(a, b)
    if x <= 0.0:
        return 1.0
    return igamc(b, a * x)


def gdtri(a, b, y):
    """Returns x such that y is the probability in the integral from 0 to x.

    Only use this function for values of y greater than 1e-15 or so, as
    1 - y is what is inverted.
    """
    _check_gamma(a, b)
    y = _check_probability("y", y)
    return igami(b, 1.0 - y) / a
