import warnings

import pytest

from probdist.util.warning import NonConvergenceWarning


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: long running numerical sweeps")


@pytest.fixture
def strict_convergence():
    """treats any NonConvergenceWarning as an error for the test"""
    with warnings.catch_warnings():
        warnings.simplefilter("error", NonConvergenceWarning)
        yield
