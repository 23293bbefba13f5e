from warnings import warn as _warn


class NonConvergenceWarning(RuntimeWarning):
    """an iterative algorithm hit its iteration cap and returned its best
    estimate"""


def not_converged(func_name, detail, stack_level=3):
    """convenience func to report an iterative loop that stopped at its cap

    Parameters
    ----------
    func_name
        name of the routine whose loop stopped
    detail
        what cap was hit, and the state of the estimate when it stopped
    stack_level
        as per warnings.warn

    Notes
    -----
    The result is still returned to the caller. To treat this as an error,
    use ``warnings.simplefilter("error", NonConvergenceWarning)``.
    """
    msg = f"{func_name} did not converge: {detail}"
    _warn(msg, NonConvergenceWarning, stacklevel=stack_level)
