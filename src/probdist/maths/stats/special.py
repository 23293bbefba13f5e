"""Special functions underlying the distribution numerics.

The log-gamma, error function, incomplete gamma and normal quantile routines
are translations of functions from Release 2.3 of the Cephes Math Library,
(c) Stephen L. Moshier 1984, 1995.
"""

import math

from numpy import cosh, exp, floor, isinf, isnan, log, sin, sinh, sqrt, tan

from probdist.util.warning import not_converged


__author__ = "Rob Knight"
__copyright__ = "Copyright 2007-2026, The probdist Project"
__credits__ = ["Gavin Huttley", "Rob Knight", "Sandra Smit", "Daniel McDonald"]
__license__ = "BSD-3"
__version__ = "2026.10.1"
__status__ = "Production"


class InvalidArgumentError(ValueError):
    """a parameter is outside the mathematical domain of a function"""


class NumericOverflowError(OverflowError):
    """an intermediate value exceeds the floating point exponent range"""


# For IEEE arithmetic (IBMPC):
MACHEP = 1.11022302462515654042e-16  # 2**-53
MAXLOG = 7.09782712893383996843e2  # log(2**1024)
MINLOG = -7.08396418532264106224e2  # log(2**-1022)
MAXNUM = 1.7976931348623158e308  # 2**1024

PI = 3.14159265358979323846  # pi
SQRT2 = 1.41421356237309504880  # sqrt(2)
SQRTH = 7.07106781186547524401e-1  # sqrt(2)/2
LOGE2 = 6.93147180559945309417e-1  # log(2)

ROUND_ERROR = 1e-14  # fp rounding error: causes some tests to fail
# will round to 0 if smaller in magnitude than this

# EPSARRAY[d] is the convergence threshold for a target of d decimal digits
EPSARRAY = [0.5 * 10.0**-d for d in range(36)]
DEFAULT_DIGITS = 15

# caps on the Cephes series and continued fractions
MAXITER = 2000


def epsilon_for_digits(digits):
    """returns the convergence threshold for a target of digits decimal digits"""
    if not 0 < digits < len(EPSARRAY) or int(digits) != digits:
        raise InvalidArgumentError(
            f"digits must be an integer in 1..{len(EPSARRAY) - 1}, got {digits!r}"
        )
    return EPSARRAY[int(digits)]


def fix_rounding_error(x):
    """If x is almost in the range 0-1, fixes it.

    Specifically, if x is between -ROUND_ERROR and 0, returns 0.
    If x is between 1 and 1+ROUND_ERROR, returns 1.
    """
    if -ROUND_ERROR < x < 0:
        return 0
    elif 1 < x < 1 + ROUND_ERROR:
        return 1
    else:
        return x


def polevl(x, coef):
    """evaluates a polynomial y = C_0 + C_1x + C_2x^2 + ... + C_Nx^N

    Coefficients are stored in reverse order, i.e. coef[0] = C_N
    """
    result = 0
    for c in coef:
        result = result * x + c
    return result


# Coefficients for erfc follow:
ZP = [
    2.46196981473530512524e-10,
    5.64189564831068821977e-1,
    7.46321056442269912687e0,
    4.86371970985681366614e1,
    1.96520832956077098242e2,
    5.26445194995477358631e2,
    9.34528527171957607540e2,
    1.02755188689515710272e3,
    5.57535335369399327526e2,
]

ZQ = [
    1.0,
    1.32281951154744992508e1,
    8.67072140885989742329e1,
    3.54937778887819891062e2,
    9.75708501743205489753e2,
    1.82390916687909736289e3,
    2.24633760818710981792e3,
    1.65666309194161350182e3,
    5.57535340817727675546e2,
]

ZR = [
    5.64189583547755073984e-1,
    1.27536670759978104416e0,
    5.01905042251180477414e0,
    6.16021097993053585195e0,
    7.40974269950448939160e0,
    2.97886665372100240670e0,
]
ZS = [
    1.00000000000000000000e0,
    2.26052863220117276590e0,
    9.39603524938001434673e0,
    1.20489539808096656605e1,
    1.70814450747565897222e1,
    9.60896809063285878198e0,
    3.36907645100081516050e0,
]
ZT = [
    9.60497373987051638749e0,
    9.00260197203842689217e1,
    2.23200534594684319226e3,
    7.00332514112805075473e3,
    5.55923013010394962768e4,
]
ZU = [
    1.00000000000000000000e0,
    3.35617141647503099647e1,
    5.21357949780152679795e2,
    4.59432382970980127987e3,
    2.26290000613890934246e4,
    4.92673942608635921086e4,
]


def erf(a):
    """Returns the error function of a: see Cephes docs."""
    if isnan(a):
        raise InvalidArgumentError("erf: argument is nan")
    if abs(a) > 1:
        return 1 - erfc(a)
    z = a * a
    return a * polevl(z, ZT) / polevl(z, ZU)


def erfc(a):
    """Returns the complement of the error function of a: see Cephes docs."""
    if isnan(a):
        raise InvalidArgumentError("erfc: argument is nan")
    x = -a if a < 0 else a

    if x < 1:
        return 1 - erf(a)

    z = -a * a
    if z < -MAXLOG:  # underflow
        return 2 if a < 0 else 0
    z = exp(z)

    if x < 8:
        p = polevl(x, ZP)
        q = polevl(x, ZQ)
    else:
        p = polevl(x, ZR)
        q = polevl(x, ZS)

    y = z * p / q

    if a < 0:
        y = 2 - y

    if y == 0:  # underflow
        return 2 if a < 0 else 0
    return y


def ndtr(a):
    """Returns the area under the standard normal density from -inf to a."""
    x = a * SQRTH
    z = abs(x)
    if z < SQRTH:
        return 0.5 + 0.5 * erf(x)
    y = 0.5 * erfc(z)
    return 1.0 - y if x > 0 else y


# Coefficients for log Gamma follow:
GA = [
    8.11614167470508450300e-4,
    -5.95061904284301438324e-4,
    7.93650340457716943945e-4,
    -2.77777777730099687205e-3,
    8.33333333333331927722e-2,
]

GB = [
    -1.37825152569120859100e3,
    -3.88016315134637840924e4,
    -3.31612992738871184744e5,
    -1.16237097492762307383e6,
    -1.72173700820839662146e6,
    -8.53555664245765465627e5,
]

GC = [
    1.00000000000000000000e0,
    -3.51815701436523470549e2,
    -1.70642106651881159223e4,
    -2.20528590553854454839e5,
    -1.13933444367982507207e6,
    -2.53252307177582951285e6,
    -2.01889141433532773231e6,
]

MAXLGM = 2.556348e305
LOGPI = 1.14472988584940017414
LS2PI = 0.91893853320467274178

big = 4.503599627370496e15
biginv = 2.22044604925031308085e-16


def lgam(x):
    """Natural log of the absolute value of the gamma function: see Cephes
    docs for details. Raises NumericOverflowError at the poles."""
    if isnan(x):
        raise InvalidArgumentError("lgam: argument is nan")
    if x < -34:
        q = -x
        w = lgam(q)
        p = floor(q)
        if p == q:
            raise NumericOverflowError("lgam returned infinity.")

        z = q - p
        if z > 0.5:
            p += 1
            z = p - q
        z = q * sin(PI * z)
        if z == 0:
            raise NumericOverflowError("lgam returned infinity.")
        return LOGPI - log(z) - w

    if x < 13:
        z = 1
        p = 0
        u = x
        while u >= 3:
            p -= 1
            u = x + p
            z *= u
        while u < 2:
            if u == 0:
                raise NumericOverflowError("lgam returned infinity.")
            z /= u
            p += 1
            u = x + p
        if z < 0:
            z = -z
        if u == 2:
            return log(z)
        p -= 2
        x = x + p
        p = x * polevl(x, GB) / polevl(x, GC)
        return log(z) + p
    if x > MAXLGM:
        raise NumericOverflowError("Too large a value of x in lgam.")
    q = (x - 0.5) * log(x) - x + LS2PI
    if x > 1.0e8:
        return q
    p = 1 / (x * x)
    if x >= 1000:
        q += (
            (7.9365079365079365079365e-4 * p - 2.7777777777777777777778e-3) * p
            + 0.0833333333333333333333
        ) / x
    else:
        q += polevl(p, GA) / x
    return q


# Coefficients for Gamma follow:
GP = [
    1.60119522476751861407e-4,
    1.19135147006586384913e-3,
    1.04213797561761569935e-2,
    4.76367800457137231464e-2,
    2.07448227648435975150e-1,
    4.94214826801497100753e-1,
    9.99999999999999996796e-1,
]

GQ = [
    -2.31581873324120129819e-5,
    5.39605580493303397842e-4,
    -4.45641913851797240494e-3,
    1.18139785222060435552e-2,
    3.58236398605498653373e-2,
    -2.34591795718243348568e-1,
    7.14304917030273074085e-2,
    1.00000000000000000320e0,
]

STIR = [
    7.87311395793093628397e-4,
    -2.29549961613378126380e-4,
    -2.68132617805781232825e-3,
    3.47222221605458667310e-3,
    8.33333333333482257126e-2,
]

MAXSTIR = 143.01608
MAXGAM = 171.624376956302725
SQTPI = 2.50662827463100050242e0


def stirf(x):
    """Stirling's approximation for the Gamma function.

    Valid for 33 <= x <= 172.

    See Cephes docs for details.
    """
    w = 1.0 / x
    w = 1 + w * polevl(w, STIR)
    y = exp(x)
    if x > MAXSTIR:
        # avoid overflow in pow()
        v = pow(x, 0.5 * x - 0.25)
        y = v * (v / y)
    else:
        y = pow(x, x - 0.5) / y
    return SQTPI * y * w


def _gamma_small(x, z):
    if x == 0:
        raise NumericOverflowError("Bad value of x in Gamma function.")
    return z / ((1 + 0.5772156649015329 * x) * x)


def Gamma(x):
    """Returns the gamma function, a generalization of the factorial.

    See Cephes docs for details."""
    if hasattr(x, "item"):
        # avoid issue of x being a limited precision numpy type
        # use item() method casts to the nearest Python type
        x = x.item()
    if isnan(x):
        raise InvalidArgumentError("Gamma: argument is nan")
    if x > MAXGAM:
        raise NumericOverflowError(f"Gamma({x}) exceeds MAXNUM")

    sgngam = 1
    q = abs(x)
    if q > 33:
        if x < 0:
            p = floor(q)
            if p == q:
                raise NumericOverflowError("Bad value of x in Gamma function.")
            if (int(p) & 1) == 0:
                sgngam = -1
            z = q - p
            if z > 0.5:
                p += 1
                z = q - p
            z = q * sin(PI * z)
            if z == 0:
                raise NumericOverflowError("Bad value of x in Gamma function.")
            z = abs(z)
            z = PI / (z * stirf(q))
        else:
            z = stirf(x)
        return sgngam * z
    z = 1
    while x >= 3:
        x -= 1
        z *= x
    while x < 0:
        if x > -1e-9:
            return _gamma_small(x, z)
        z /= x
        x += 1
    while x < 2:
        if x < 1e-9:
            return _gamma_small(x, z)
        z /= x
        x += 1
    if x == 2:
        return float(z)
    x -= 2
    p = polevl(x, GP)
    q = polevl(x, GQ)
    return z * p / q


def ln_gamma(x):
    """returns the natural log of the gamma function for x > 0"""
    if not x > 0:
        raise InvalidArgumentError(f"ln_gamma: x must be > 0, got {x}")
    return lgam(x)


# exact values for the small factorials
_LN_FACTORIALS = [math.log(math.factorial(n)) for n in range(30)]


def ln_factorial(n):
    """returns the natural log of n! for integer n >= 0"""
    if not n >= 0 or int(n) != n:
        raise InvalidArgumentError(f"ln_factorial: n must be an integer >= 0, got {n}")
    n = int(n)
    if n < len(_LN_FACTORIALS):
        return _LN_FACTORIALS[n]
    return lgam(n + 1.0)


def ln_beta(alpha, beta):
    """returns log(Beta(alpha, beta)) = lgam(alpha) + lgam(beta) - lgam(alpha + beta)

    When alpha == beta, the duplication formula for Gamma(2 * alpha) avoids
    the cancellation between the large terms.
    """
    if not (alpha > 0 and beta > 0):
        raise InvalidArgumentError(
            f"ln_beta: alpha and beta must be > 0, got {alpha}, {beta}"
        )
    if alpha == beta:
        return (
            lgam(alpha) - lgam(alpha + 0.5) + 0.5 * LOGPI - (2 * alpha - 1) * LOGE2
        )
    return lgam(alpha) + lgam(beta) - lgam(alpha + beta)


# asymptotic series in 1/x**2 for digamma and trigamma, highest order first,
# from the Bernoulli numbers B_2 .. B_14
DIGAMMA_ASYMP = [
    1.0 / 12,
    -691.0 / 32760,
    1.0 / 132,
    -1.0 / 240,
    1.0 / 252,
    -1.0 / 120,
    1.0 / 12,
]

TRIGAMMA_ASYMP = [
    7.0 / 6,
    -691.0 / 2730,
    5.0 / 66,
    -1.0 / 30,
    1.0 / 42,
    -1.0 / 30,
    1.0 / 6,
]

# recurrence moves the argument up to here before the asymptotic series
PSI_ASYMP_START = 10.0


def _check_not_pole(name, x):
    if isnan(x) or isinf(x):
        raise InvalidArgumentError(f"{name}: argument must be finite, got {x}")
    if x <= 0 and floor(x) == x:
        raise InvalidArgumentError(f"{name}: pole at non-positive integer {x}")


def digamma(x):
    """returns the logarithmic derivative of the gamma function"""
    _check_not_pole("digamma", x)
    result = 0.0
    if x < 0:
        # reflection: psi(1 - x) - psi(x) = pi / tan(pi * x)
        result = -PI / tan(PI * x)
        x = 1.0 - x

    while x < PSI_ASYMP_START:
        result -= 1.0 / x
        x += 1.0

    z = 1.0 / (x * x)
    return result + log(x) - 0.5 / x - z * polevl(z, DIGAMMA_ASYMP)


def trigamma(x):
    """returns the second logarithmic derivative of the gamma function"""
    _check_not_pole("trigamma", x)
    if x < 0:
        # reflection: psi'(1 - x) + psi'(x) = (pi / sin(pi * x)) ** 2
        s = PI / sin(PI * x)
        return s * s - trigamma(1.0 - x)

    result = 0.0
    while x < PSI_ASYMP_START:
        result += 1.0 / (x * x)
        x += 1.0

    t = 1.0 / x
    z = t * t
    return result + t + 0.5 * z + t * z * polevl(z, TRIGAMMA_ASYMP)


# trapezoid rule on the integral representation of the Bessel K functions
BESSEL_STEP = 0.125
BESSEL_MAXTERMS = 8000


def _scaled_bessel_k(nu, y):
    """returns exp(y) * K_nu(y) for y > 0

    Evaluates int_0^inf exp(-y * (cosh(t) - 1)) * cosh(nu * t) dt with the
    trapezoid rule. The integrand is analytic and decays doubly
    exponentially, so the rule converges geometrically in 1/h. For large y
    the peak at t=0 has width 1/sqrt(y) and the step is scaled to suit.
    """
    h = min(BESSEL_STEP, 0.5 / sqrt(y))
    total = 0.5  # the integrand is 1 at t=0
    for k in range(1, BESSEL_MAXTERMS):
        t = k * h
        half = sinh(0.5 * t)
        term = exp(-2.0 * y * half * half) * cosh(nu * t)
        total += term
        # past the peak of the integrand and negligible
        if term < MACHEP * total and y * sinh(t) > nu:
            return h * total

    not_converged(
        "bessel_k", f"trapezoid sum for nu={nu}, y={y} stopped at t={t}"
    )
    return h * total


def bessel_k025(x):
    """returns the modified Bessel function of the second kind K_{1/4}(x)"""
    if not x > 0:
        raise InvalidArgumentError(f"bessel_k025: x must be > 0, got {x}")
    if isinf(x):
        return 0.0
    return exp(-x) * _scaled_bessel_k(0.25, x)


def exp_bessel_k1(x, y):
    """returns exp(x) * K_1(y), with K_1 the modified Bessel function of the
    second kind of order 1

    Computed as exp(x - y) * (exp(y) * K_1(y)) so that large y does not
    underflow before the factor exp(x) is applied.
    """
    if not y > 0:
        raise InvalidArgumentError(f"exp_bessel_k1: y must be > 0, got {y}")
    if isnan(x):
        raise InvalidArgumentError("exp_bessel_k1: x is nan")
    if isinf(y):
        return 0.0
    scaled = _scaled_bessel_k(1.0, y)
    z = x - y + log(scaled)
    if z > MAXLOG:
        raise NumericOverflowError(f"exp_bessel_k1({x}, {y}) exceeds MAXNUM")
    if z < MINLOG:
        return 0.0
    return exp(z)


def igamc(a, x):
    """Complemented incomplete Gamma integral: see Cephes docs."""
    if x <= 0 or a <= 0:
        return 1
    if x < 1 or x < a:
        return 1 - igam(a, x)
    ax = a * log(x) - x - lgam(a)
    if ax < -MAXLOG:  # underflow
        return 0
    ax = exp(ax)
    # continued fraction
    y = 1 - a
    z = x + y + 1
    c = 0
    pkm2 = 1
    qkm2 = x
    pkm1 = x + 1
    qkm1 = z * x
    ans = pkm1 / qkm1

    for _ in range(MAXITER):
        c += 1
        y += 1
        z += 2
        yc = y * c
        pk = pkm1 * z - pkm2 * yc
        qk = qkm1 * z - qkm2 * yc
        if qk != 0:
            r = pk / qk
            t = abs((ans - r) / r)
            ans = r
        else:
            t = 1
        pkm2 = pkm1
        pkm1 = pk
        qkm2 = qkm1
        qkm1 = qk
        if abs(pk) > big:
            pkm2 *= biginv
            pkm1 *= biginv
            qkm2 *= biginv
            qkm1 *= biginv
        if t <= MACHEP:
            break
    else:
        not_converged("igamc", f"continued fraction for a={a}, x={x}")
    return ans * ax


def igam(a, x):
    """Left tail of incomplete gamma function: see Cephes docs for details"""
    if x <= 0 or a <= 0:
        return 0
    if x > 1 and x > a:
        return 1 - igamc(a, x)

    # Compute x**a * exp(x) / Gamma(a)
    ax = a * log(x) - x - lgam(a)
    if ax < -MAXLOG:  # underflow
        return 0.0
    ax = exp(ax)

    # power series
    r = a
    c = 1
    ans = 1
    for _ in range(MAXITER):
        r += 1
        c *= x / r
        ans += c
        if c / ans <= MACHEP:
            break
    else:
        not_converged("igam", f"power series for a={a}, x={x}")

    return ans * ax / a


def log1p(x):
    """Log for values close to 1: from Cephes math library"""
    z = 1 + x
    if (z < SQRTH) or (z > SQRT2):
        return log(z)
    z = x * x
    z = -0.5 * z + x * (z * polevl(x, LP) / polevl(x, LQ))
    return x + z


LP = [
    4.5270000862445199635215e-5,
    4.9854102823193375972212e-1,
    6.5787325942061044846969e0,
    2.9911919328553073277375e1,
    6.0949667980987787057556e1,
    5.7112963590585538103336e1,
    2.0039553499201281259648e1,
]
LQ = [
    1,
    1.5062909083469192043167e1,
    8.3047565967967209469434e1,
    2.2176239823732856465394e2,
    3.0909872225312059774938e2,
    2.1642788614495947685003e2,
    6.0118660497603843919306e1,
]


def expm1(x):
    """exp(x) - 1, accurate for x near 0. From Cephes."""
    if (x < -0.5) or (x > 0.5):
        return exp(x) - 1.0
    xx = x * x
    r = x * polevl(xx, EP)
    r /= polevl(xx, EQ) - r
    return r + r


EP = [
    1.2617719307481059087798e-4,
    3.0299440770744196129956e-2,
    9.9999999999999999991025e-1,
]

EQ = [
    3.0019850513866445504159e-6,
    2.5244834034968410419224e-3,
    2.2726554820815502876593e-1,
    2.0000000000000000000897e0,
]


def igami(a, y0):
    """Inverse of the complemented incomplete Gamma integral.

    Returns x such that igamc(a, x) = y0.
    """
    # bound the solution
    x0 = MAXNUM
    yl = 0
    x1 = 0
    yh = 1.0
    dithresh = 5.0 * MACHEP

    # handle easy cases
    if (y0 < 0.0) or (y0 > 1.0) or (a <= 0):
        raise InvalidArgumentError("y0 must be between 0 and 1; a > 0")
    elif y0 == 0.0:
        return MAXNUM
    elif y0 == 1.0:
        return 0.0
    # approximation to inverse function
    d = 1.0 / (9.0 * a)
    y = 1.0 - d - ndtri(y0) * sqrt(d)
    x = a * y * y * y

    lgm = lgam(a)

    # Newton iterations, abandoned as soon as a step leaves the bracket
    for _ in range(10):
        if x > x0 or x < x1:
            break
        y = igamc(a, x)
        if y < yl or y > yh:
            break
        if y < y0:
            x0 = x
            yl = y
        else:
            x1 = x
            yh = y
        # compute the derivative of the function at this point
        d = (a - 1.0) * log(x) - x - lgm
        if d < -MAXLOG:
            break
        d = -exp(d)
        # compute the step to the next approximation of x
        d = (y - y0) / d
        if abs(d / x) < MACHEP:
            return x
        x -= d

    # Resort to interval halving if Newton iteration did not converge.
    d = 0.0625
    if x0 == MAXNUM:
        if x <= 0.0:
            x = 1.0
        while x0 == MAXNUM:
            x = (1.0 + d) * x
            y = igamc(a, x)
            if y < y0:
                x0 = x
                yl = y
                break
            d += d
    d = 0.5
    dir = 0

    for _ in range(400):
        x = x1 + d * (x0 - x1)
        y = igamc(a, x)
        lgm = (x0 - x1) / (x1 + x0)
        if abs(lgm) < dithresh:
            break
        lgm = (y - y0) / y0
        if abs(lgm) < dithresh:
            break
        if x <= 0.0:
            break
        if y >= y0:
            x1 = x
            yh = y
            if dir < 0:
                dir = 0
                d = 0.5
            elif dir > 1:
                d = 0.5 * d + 0.5
            else:
                d = (y0 - yl) / (yh - yl)
            dir += 1
        else:
            x0 = x
            yl = y
            if dir > 0:
                dir = 0
                d = 0.5
            elif dir < -1:
                d *= 0.5
            else:
                d = (y0 - yl) / (yh - yl)
            dir -= 1
    else:
        not_converged("igami", f"interval halving for a={a}, y0={y0} at x={x}")
    if x == 0.0:
        return 0
    return x


P0 = [
    -5.99633501014107895267e1,
    9.80010754185999661536e1,
    -5.66762857469070293439e1,
    1.39312609387279679503e1,
    -1.23916583867381258016e0,
]

Q0 = [
    1.00000000000000000000e0,
    1.95448858338141759834e0,
    4.67627912898881538453e0,
    8.63602421390890590575e1,
    -2.25462687854119370527e2,
    2.00260212380060660359e2,
    -8.20372256168333339912e1,
    1.59056225126211695515e1,
    -1.18331621121330003142e0,
]

s2pi = 2.50662827463100050242e0

P1 = [
    4.05544892305962419923e0,
    3.15251094599893866154e1,
    5.71628192246421288162e1,
    4.40805073893200834700e1,
    1.46849561928858024014e1,
    2.18663306850790267539e0,
    -1.40256079171354495875e-1,
    -3.50424626827848203418e-2,
    -8.57456785154685413611e-4,
]

Q1 = [
    1.00000000000000000000e0,
    1.57799883256466749731e1,
    4.53907635128879210584e1,
    4.13172038254672030440e1,
    1.50425385692907503408e1,
    2.50464946208309415979e0,
    -1.42182922854787788574e-1,
    -3.80806407691578277194e-2,
    -9.33259480895457427372e-4,
]

P2 = [
    3.23774891776946035970e0,
    6.91522889068984211695e0,
    3.93881025292474443415e0,
    1.33303460815807542389e0,
    2.01485389549179081538e-1,
    1.23716634817820021358e-2,
    3.01581553508235416007e-4,
    2.65806974686737550832e-6,
    6.23974539184983293730e-9,
]

Q2 = [
    1.00000000000000000000e0,
    6.02427039364742014255e0,
    3.67983563856160859403e0,
    1.37702099489081330271e0,
    2.16236993594496635890e-1,
    1.34204006088543189037e-2,
    3.28014464682127739104e-4,
    2.89247864745380683936e-6,
    6.79019408009981274425e-9,
]

exp_minus_2 = 0.13533528323661269189


def ndtri(y0):
    """Inverse normal distribution function."""
    y0 = fix_rounding_error(y0)
    # handle easy cases
    if y0 <= 0.0:
        return -MAXNUM
    elif y0 >= 1.0:
        return MAXNUM
    code = 1
    y = y0
    if y > (1.0 - exp_minus_2):
        y = 1.0 - y
        code = 0

    if y > exp_minus_2:
        y -= 0.5
        y2 = y * y
        x = y + y * (y2 * polevl(y2, P0) / polevl(y2, Q0))
        x = x * s2pi
        return x

    x = sqrt(-2.0 * log(y))
    x0 = x - log(x) / x

    z = 1.0 / x
    if x < 8.0:  # y > exp(-32) = 1.2664165549e-14
        x1 = z * polevl(z, P1) / polevl(z, Q1)
    else:
        x1 = z * polevl(z, P2) / polevl(z, Q2)
    x = x0 - x1
    if code != 0:
        x = -x
    return x
