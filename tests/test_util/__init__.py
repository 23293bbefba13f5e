#!/usr/bin/env python
__all__ = [
    "test_warning",
]

__copyright__ = "Copyright 2007-2026, The probdist Project"
__license__ = "BSD-3"
__status__ = "Production"
