"""Inverse of the regularized incomplete beta function.

Adapted from incbi in the Cephes Math Library Release 2.8, (c) Stephen L.
Moshier 1984, 1996, 2000. The solver keeps a bracket [x0, x1] with function
values [yl, yh] around the root and moves between three phases: an initial
guess from the normal approximation, guided interval halving, and Newton
steps on the analytic density.
"""

from numpy import exp, isnan, log, log1p, sqrt

from probdist.maths.stats.incomplete_beta import incomplete_beta, validate_shape
from probdist.maths.stats.special import (
    MACHEP,
    MAXLOG,
    MINLOG,
    InvalidArgumentError,
    epsilon_for_digits,
    ln_beta,
    ndtri,
)
from probdist.util.warning import not_converged


__author__ = "Gavin Huttley"
__copyright__ = "Copyright 2007-2026, The probdist Project"
__credits__ = ["Gavin Huttley", "Rob Knight"]
__license__ = "BSD-3"
__version__ = "2026.10.1"
__status__ = "Production"

MAX_HALVINGS = 100
MAX_NEWTON = 8

# solver phases
_GUESS = "guess"
_HALVE = "halve"
_NEWTON = "newton"
_DONE = "done"


def _reflected(rflg, x):
    """maps a root of the reflected problem I_x(beta, alpha) = 1 - u back"""
    if not rflg:
        return x
    if x <= MACHEP:
        return 1.0 - MACHEP
    return 1.0 - x


def inverse_incomplete_beta(alpha, beta, digits, u):
    """returns x such that I_x(alpha, beta) = u

    Parameters
    ----------
    alpha, beta
        shape parameters, both > 0
    digits
        decimal digits used for the incomplete beta evaluations, in 1..35
    u
        probability in [0, 1]

    Notes
    -----
    Whenever the lower end of the bracket passes 0.75 the problem is
    reflected to I_{1-x}(beta, alpha) = 1 - u, where the function is better
    conditioned, and the halving restarts.
    """
    validate_shape(alpha, beta)
    epsilon_for_digits(digits)
    if isnan(u) or not 0.0 <= u <= 1.0:
        raise InvalidArgumentError(f"u must be in [0, 1], got {u}")
    if u <= 0.0:
        return 0.0
    if u >= 1.0:
        return 1.0
    if alpha == beta and u == 0.5:
        return 0.5

    def cdf(p, q, x):
        return incomplete_beta(p, q, digits, x)

    x0 = 0.0
    yl = 0.0
    x1 = 1.0
    yh = 1.0
    newton_entered = False
    rflg = False
    p = alpha
    q = beta
    y0 = u
    if alpha <= 1.0 or beta <= 1.0:
        dithresh = 1.0e-6
        x = p / (p + q)
        y = cdf(p, q, x)
        state = _HALVE
    else:
        dithresh = 1.0e-4
        x = y = 0.0
        state = _GUESS

    while state != _DONE:
        if state == _GUESS:
            # approximation to the inverse function
            yp = -ndtri(u)
            if u > 0.5:
                rflg = True
                p = beta
                q = alpha
                y0 = 1.0 - u
                yp = -yp
            else:
                rflg = False
                p = alpha
                q = beta
                y0 = u

            lgm = (yp * yp - 3.0) / 6.0
            x = 2.0 / (1.0 / (2.0 * p - 1.0) + 1.0 / (2.0 * q - 1.0))
            d = yp * sqrt(x + lgm) / x - (1.0 / (2.0 * q - 1.0) - 1.0 / (2.0 * p - 1.0)) * (
                lgm + 5.0 / 6.0 - 2.0 / (3.0 * x)
            )
            d *= 2.0
            if d < MINLOG:
                # underflow
                x = 0.0
                state = _DONE
                continue

            x = 0.0 if d > MAXLOG else p / (p + q * exp(d))
            y = cdf(p, q, x)
            yp = (y - y0) / y0
            state = _NEWTON if abs(yp) < 0.2 else _HALVE

        elif state == _HALVE:
            dir = 0
            di = 0.5
            for i in range(MAX_HALVINGS):
                if i != 0:
                    x = x0 + di * (x1 - x0)
                    if x == 1.0:
                        x = 1.0 - MACHEP
                    if x == 0.0:
                        di = 0.5
                        x = x0 + di * (x1 - x0)
                        if x == 0.0:
                            # underflow
                            state = _DONE
                            break
                    y = cdf(p, q, x)
                    yp = (x1 - x0) / (x1 + x0)
                    if abs(yp) < dithresh:
                        state = _NEWTON
                        break
                    yp = (y - y0) / y0
                    if abs(yp) < dithresh:
                        state = _NEWTON
                        break
                if y < y0:
                    x0 = x
                    yl = y
                    if dir < 0:
                        dir = 0
                        di = 0.5
                    elif dir > 3:
                        di = 1.0 - (1.0 - di) * (1.0 - di)
                    elif dir > 1:
                        di = 0.5 * di + 0.5
                    else:
                        di = (y0 - y) / (yh - yl)
                    dir += 1
                    if x0 > 0.75:
                        if rflg:
                            rflg = False
                            p = alpha
                            q = beta
                            y0 = u
                        else:
                            rflg = True
                            p = beta
                            q = alpha
                            y0 = 1.0 - u
                        x = 1.0 - x
                        y = cdf(p, q, x)
                        x0 = 0.0
                        yl = 0.0
                        x1 = 1.0
                        yh = 1.0
                        # halving restarts on the reflected problem
                        break
                else:
                    x1 = x
                    if rflg and x1 < MACHEP:
                        x = 0.0
                        state = _DONE
                        break
                    yh = y
                    if dir > 0:
                        dir = 0
                        di = 0.5
                    elif dir < -3:
                        di *= di
                    elif dir < -1:
                        di *= 0.5
                    else:
                        di = (y - y0) / (yh - yl)
                    dir -= 1
            else:
                if x0 >= 1.0:
                    x = 1.0 - MACHEP
                    state = _DONE
                elif x <= 0.0:
                    x = 0.0
                    state = _DONE
                else:
                    not_converged(
                        "inverse_incomplete_beta",
                        f"{MAX_HALVINGS} halvings left bracket [{x0}, {x1}]",
                    )
                    state = _NEWTON

        else:
            if newton_entered:
                break
            newton_entered = True
            lgm = -ln_beta(p, q)
            converged = False
            for i in range(MAX_NEWTON):
                if i != 0:
                    y = cdf(p, q, x)
                if y < yl:
                    x = x0
                    y = yl
                elif y > yh:
                    x = x1
                    y = yh
                elif y < y0:
                    x0 = x
                    yl = y
                else:
                    x1 = x
                    yh = y
                if x >= 1.0 or x <= 0.0:
                    break
                # log of the density at x
                d = (p - 1.0) * log(x) + (q - 1.0) * log1p(-x) + lgm
                if d < MINLOG:
                    converged = True
                    break
                if d > MAXLOG:
                    break
                d = (y - y0) / exp(d)
                xt = x - d
                # steps leaving the bracket bisect the sub-interval instead
                if xt <= x0:
                    frac = (x - x0) / (x1 - x0)
                    xt = x0 + 0.5 * frac * (x - x0)
                    if xt <= 0.0:
                        break
                if xt >= x1:
                    frac = (x1 - x) / (x1 - x0)
                    xt = x1 - 0.5 * frac * (x1 - x)
                    if xt >= 1.0:
                        break
                x = xt
                if abs(d / x) < 128.0 * MACHEP:
                    converged = True
                    break

            if converged:
                state = _DONE
            else:
                dithresh = 256.0 * MACHEP
                state = _HALVE

    return float(_reflected(rflg, x))
