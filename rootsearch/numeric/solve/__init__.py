"""
==========================================
Solvers (:mod:`rootsearch.numeric.solve`)
==========================================

.. currentmodule:: rootsearch.numeric.solve

Functions for finding roots of scalar functions on bounded intervals.
Where no root can be found the result is `None` rather than an
exception.

Functions
---------

.. autosummary::
    :toctree:

    bisect_one
    bisect_multi
    newton_one

"""

from .bisect import bisect_one, bisect_multi
from .newton import newton_one
