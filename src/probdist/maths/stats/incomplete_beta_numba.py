import numpy

from numba import njit


__author__ = "Gavin Huttley"
__copyright__ = "Copyright 2007-2026, The probdist Project"
__credits__ = ["Gavin Huttley"]
__license__ = "BSD-3"
__version__ = "2026.10.1"
__maintainer__ = "Gavin Huttley"
__status__ = "Production"

# turn off code coverage as njit-ted code not accessible to coverage


@njit(cache=True, error_model="numpy")
def alphabeta_small_sum(alpha, beta, x, epsilon, max_terms):  # pragma: no cover
    """power series part of I_x(alpha, beta) for 0 < alpha <= 1, 0 < beta <= 2

    Returns the sum (still to be multiplied by 1/B(alpha, beta)) and whether
    the terms fell below epsilon before max_terms were used.
    """
    u = x**alpha
    s = u / alpha
    k = 0
    while k < max_terms:
        u = (k + 1 - beta) * x * u / (k + 1)
        v = u / (k + 1 + alpha)
        s += v
        k += 1
        if not abs(v) / s > epsilon:
            return s, True
    return s, False


@njit(cache=True, error_model="numpy")
def forward_recurrence(alpha, beta, x, I0, I1, nmax, result):  # pragma: no cover
    """fills result[n] with I_x(alpha, beta + n) for n = 0..nmax, starting
    from I0 = I_x(alpha, beta) and I1 = I_x(alpha, beta + 1)"""
    result[0] = I0
    if nmax > 0:
        result[1] = I1
    y = 1.0 - x
    for n in range(1, nmax):
        c = (n - 1 + alpha + beta) * y
        result[n + 1] = (1 + c / (n + beta)) * result[n] - c * result[n - 1] / (n + beta)
    return result


@njit(cache=True)
def _resized(values, size):  # pragma: no cover
    grown = numpy.zeros(size, dtype=values.dtype)
    grown[: values.shape[0]] = values
    return grown


@njit(cache=True, error_model="numpy")
def backward_recurrence(
    alpha, beta, x, I0, epsilon, nmax, max_passes, result
):  # pragma: no cover
    """fills result[n] with I_x(alpha + n, beta) for n = 0..nmax, starting
    from I0 = I_x(alpha, beta)

    Miller's algorithm: the ratios I[n] / I[n - 1] are generated downward from
    an index nu well above nmax, which is raised by 5 until two successive
    passes agree to epsilon. Returns whether the passes agreed within
    max_passes.
    """
    result[0] = I0
    if nmax == 0:
        return True

    nu = 2 * nmax + 5
    ntab = 64
    while ntab <= nu:
        ntab *= 2

    ratios = numpy.zeros(ntab)
    approx = numpy.zeros(nmax + 1)
    current = numpy.zeros(nmax + 1)
    current[0] = I0

    for _ in range(max_passes):
        r = 0.0
        for n in range(nu, 0, -1):
            c = (n - 1 + alpha + beta) * x
            r = c / (n + alpha + c - (n + alpha) * r)
            ratios[n - 1] = r

        for n in range(nmax):
            current[n + 1] = ratios[n] * current[n]

        again = False
        for n in range(1, nmax + 1):
            if abs((current[n] - approx[n]) / current[n]) > epsilon:
                again = True
                break

        if not again:
            result[: nmax + 1] = current
            return True

        approx[:] = current
        nu += 5
        if ntab <= nu:
            ntab *= 2
            ratios = _resized(ratios, ntab)

    result[: nmax + 1] = current
    return False
