"""
.. This module acts as the top-level API documentation.

.. module: rootsearch

Bounded numerical root finding for scalar functions: bisection for one
or several roots on an interval and a bracketed Newton's method.

.. autosummary::
    :toctree: generated/

    numeric
    util

"""

__version__ = "0.1.0"

import sys

# ======================================================================

assert sys.version_info >= (3, 9)

from .numeric import close, near_zero
from .numeric.solve import bisect_one, bisect_multi, newton_one
