#!/usr/bin/env python

from probdist.maths.stats.special import InvalidArgumentError
from probdist.util.warning import not_converged


__author__ = "Peter Maxwell"
__copyright__ = "Copyright 2007-2026, The probdist Project"
__credits__ = ["Peter Maxwell", "Gavin Huttley"]
__license__ = "BSD-3"
__version__ = "2026.10.1"
__maintainer__ = "Peter Maxwell"
__email__ = "pm67nz@gmail.com"
__status__ = "Production"

EPS = 1e-15


class NoRootInBracketError(ValueError):
    """func(a) and func(b) have the same sign"""


def _check_bracket(fa, fb, a, b):
    if fa * fb > 0:
        raise NoRootInBracketError(
            f"func({a}) = {fa} and func({b}) = {fb} have the same sign"
        )


def bisection(func, a, b, args=(), xtol=1e-10, maxiter=400):
    """Bisection root-finding method.  Given a function and an interval with
    func(a) * func(b) <= 0, find the root between a and b.
    """
    if b < a:
        (a, b) = (b, a)
    eva = func(a, *args)
    evb = func(b, *args)
    if eva == 0:
        return a
    if evb == 0:
        return b
    _check_bracket(eva, evb, a, b)
    p = a
    for _ in range(maxiter):
        dist = (b - a) / 2.0
        p = a + dist
        if dist / max(1.0, abs(p)) < xtol:
            return p
        ev = func(p, *args)
        if ev == 0:
            return p
        if ev * eva > 0:
            a = p
            eva = ev
        else:
            b = p
    not_converged("bisection", f"{maxiter} iterations, bracket [{a}, {b}]")
    return p


def brent(func, a, b, args=(), xtol=1e-10, maxiter=100):
    """Fast and robust root-finding method.  Given a function and an
    interval with func(a) * func(b) <= 0, find the root between a and b.

    Combines bisection, the secant method and inverse quadratic
    interpolation (Brent-Dekker). From Numerical Recipes.
    """
    if b < a:
        (a, b) = (b, a)
    fa = func(a, *args)
    fb = func(b, *args)
    if fa == 0:
        return a
    if fb == 0:
        return b
    _check_bracket(fa, fb, a, b)
    (c, fc) = (b, fb)
    for _ in range(maxiter):
        if fb * fc > 0.0:
            (c, fc) = (a, fa)
            d = e = b - a
        if abs(fc) < abs(fb):
            (a, fa) = (b, fb)
            (b, fb) = (c, fc)
            (c, fc) = (a, fa)
        tol1 = 2.0 * EPS * abs(b) + 0.5 * xtol
        xm = 0.5 * (c - b)
        if abs(xm) <= tol1 or fb == 0:
            return b
        if abs(e) >= tol1 and abs(fa) > abs(fb):
            s = fb / fa
            if a == c:
                # secant
                p = 2.0 * xm * s
                q = 1.0 - s
            else:
                # inverse quadratic interpolation
                q = fa / fc
                r = fb / fc
                p = s * (2.0 * xm * q * (q - r) - (b - a) * (r - 1.0))
                q = (q - 1.0) * (r - 1.0) * (s - 1.0)
            if p > 0.0:
                q = -1.0 * q
            p = abs(p)
            min1 = 3.0 * xm * q - abs(tol1 * q)
            min2 = abs(e * q)
            if 2.0 * p < min(min1, min2):
                e = d
                d = p / q
            else:
                d = xm
                e = d
        else:
            d = xm
            e = d
        (a, fa) = (b, fb)
        if abs(d) > tol1:
            b += d
        elif xm < 0.0:
            b -= tol1
        else:
            b += tol1
        fb = func(b, *args)
    not_converged("brent", f"{maxiter} iterations, estimate {b}")
    return b


def bracket_root(func, a, b, args=(), factor=1.6, maxiter=50):
    """returns (a, b) grown geometrically until func changes sign across it

    The end whose function value is smaller in magnitude is moved outward at
    each step. Raises NoRootInBracketError if no sign change is found.
    """
    if a == b:
        raise InvalidArgumentError("a and b must differ")
    if b < a:
        (a, b) = (b, a)
    fa = func(a, *args)
    fb = func(b, *args)
    for _ in range(maxiter):
        if fa * fb <= 0:
            return a, b
        if abs(fa) < abs(fb):
            a += factor * (a - b)
            fa = func(a, *args)
        else:
            b += factor * (b - a)
            fb = func(b, *args)
    if fa * fb <= 0:
        return a, b
    raise NoRootInBracketError(f"no sign change found out to [{a}, {b}]")


def find_root(func, a, b, args=(), xtol=1e-10, expand=False):
    """returns a root of func within [a, b]

    Parameters
    ----------
    func
        callable, func(x, *args) returns a float
    a, b
        interval ends, func(a) and func(b) must differ in sign
    xtol
        absolute tolerance on the root
    expand
        if True, the interval is grown outward until it brackets a root

    Notes
    -----
    An end at which func is exactly zero is returned without iterating.
    """
    if b < a:
        (a, b) = (b, a)
    fa = func(a, *args)
    if fa == 0:
        return a
    fb = func(b, *args)
    if fb == 0:
        return b
    if fa * fb > 0:
        if not expand:
            _check_bracket(fa, fb, a, b)
        a, b = bracket_root(func, a, b, args=args)
    return brent(func, a, b, args=args, xtol=xtol)
