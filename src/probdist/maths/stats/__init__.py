#!/usr/bin/env python
"""Provides the special functions, the incomplete beta function and its
inverse, and the distributions built on them.
"""


__all__ = [
    "distribution",
    "fit",
    "incomplete_beta",
    "incomplete_beta_numba",
    "inverse_beta",
    "special",
]
