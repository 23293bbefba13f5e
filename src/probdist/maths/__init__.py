#!/usr/bin/env python

__all__ = [
    "solve",
    "stats",
]
