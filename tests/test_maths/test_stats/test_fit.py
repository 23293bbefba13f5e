import numpy
import pytest

from numpy.testing import assert_allclose
from scipy import special, stats

from probdist.maths.stats.fit import beta_mle, weibull_mle
from probdist.maths.stats.special import InvalidArgumentError


__author__ = "Gavin Huttley"
__copyright__ = "Copyright 2007-2026, The probdist Project"
__credits__ = ["Gavin Huttley"]
__license__ = "BSD-3"
__version__ = "2026.10.1"
__status__ = "Production"


@pytest.fixture(scope="module")
def beta_sample():
    rng = numpy.random.default_rng(2357)
    return rng.beta(2.5, 4.0, size=4000)


@pytest.fixture(scope="module")
def weibull_sample():
    rng = numpy.random.default_rng(1113)
    return 3.0 * rng.weibull(1.7, size=3000)


def test_beta_mle_likelihood_equations(beta_sample):
    """the estimates solve the beta likelihood equations"""
    alpha, beta = beta_mle(beta_sample)
    psi_ab = special.psi(alpha + beta)
    assert_allclose(special.psi(alpha) - psi_ab, numpy.log(beta_sample).mean(), atol=1e-7)
    assert_allclose(
        special.psi(beta) - psi_ab, numpy.log1p(-beta_sample).mean(), atol=1e-7
    )


def test_beta_mle_recovers_parameters(beta_sample):
    """with a large sample the estimates are near the generating values"""
    alpha, beta = beta_mle(beta_sample)
    assert_allclose([alpha, beta], [2.5, 4.0], rtol=0.1)
    assert isinstance(alpha, float)


def test_beta_mle_matches_scipy(beta_sample):
    """agrees with scipy's fit for fixed location and scale"""
    alpha, beta = beta_mle(beta_sample)
    expect = stats.beta.fit(beta_sample, floc=0, fscale=1)[:2]
    assert_allclose([alpha, beta], expect, rtol=1e-3)


def test_beta_mle_small_sample():
    """a handful of values still solves the likelihood equations"""
    data = numpy.array([0.1, 0.4, 0.35, 0.8, 0.55, 0.62])
    alpha, beta = beta_mle(data)
    psi_ab = special.psi(alpha + beta)
    assert_allclose(special.psi(alpha) - psi_ab, numpy.log(data).mean(), atol=1e-7)
    assert_allclose(special.psi(beta) - psi_ab, numpy.log1p(-data).mean(), atol=1e-7)


@pytest.mark.parametrize(
    "data", [[0.5], [], [0.2, 1.3], [-0.1, 0.5], [0.3, 0.3, 0.3], [0.2, numpy.nan]]
)
def test_beta_mle_invalid(data):
    with pytest.raises(InvalidArgumentError):
        beta_mle(data)


def _profile_score(alpha, data):
    xa = data**alpha
    return 1.0 / alpha + numpy.log(data).mean() - (xa * numpy.log(data)).sum() / xa.sum()


def test_weibull_mle_profile_equation(weibull_sample):
    """the shape solves the profile likelihood equation"""
    shape, rate = weibull_mle(weibull_sample)
    assert abs(_profile_score(shape, weibull_sample)) < 1e-4
    n = weibull_sample.size
    assert_allclose(rate, (n / (weibull_sample**shape).sum()) ** (1 / shape), rtol=1e-10)


def test_weibull_mle_recovers_parameters(weibull_sample):
    """with a large sample the estimates are near the generating values"""
    shape, rate = weibull_mle(weibull_sample)
    assert_allclose([shape, rate], [1.7, 1 / 3.0], rtol=0.1)
    assert isinstance(shape, float)


def test_weibull_mle_matches_scipy(weibull_sample):
    """agrees with scipy's fit of weibull_min with the location fixed at 0"""
    shape, rate = weibull_mle(weibull_sample)
    c, _, scale = stats.weibull_min.fit(weibull_sample, floc=0)
    assert_allclose([shape, rate], [c, 1 / scale], rtol=1e-3)


def test_weibull_mle_scale_invariant(weibull_sample):
    """rescaling the data rescales the rate and leaves the shape"""
    shape, rate = weibull_mle(weibull_sample)
    shape2, rate2 = weibull_mle(weibull_sample * 1e6)
    assert_allclose(shape2, shape, rtol=1e-4)
    assert_allclose(rate2, rate / 1e6, rtol=1e-4)


def test_weibull_mle_steep_shape():
    """a large shape is located"""
    rng = numpy.random.default_rng(8)
    data = rng.weibull(60.0, size=500)
    shape, _ = weibull_mle(data)
    assert abs(_profile_score(shape, data)) < 1e-4
    assert 40 < shape < 90


def test_weibull_mle_small_steep_samples():
    """moment estimates above the root still give a bracketed shape"""
    rng = numpy.random.default_rng(0)
    for _ in range(300):
        data = rng.weibull(60.0, size=4)
        shape, rate = weibull_mle(data)
        assert shape > 0 and rate > 0
        scaled = data / data.max()
        assert abs(_profile_score(shape, scaled)) < 1e-4

    # moment estimate overshoots the root by more than 20
    data = numpy.array([0.9901, 1.0082, 0.9934, 0.9953])
    shape, _ = weibull_mle(data)
    assert abs(_profile_score(shape, data / data.max())) < 1e-4


@pytest.mark.parametrize("data", [[], [-1.0, 2.0], [2.0, 2.0, 2.0], [1.0, numpy.inf]])
def test_weibull_mle_invalid(data):
    with pytest.raises(InvalidArgumentError):
        weibull_mle(data)
