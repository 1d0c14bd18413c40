"""
Numeric (:mod:`rootsearch.numeric`)
===================================

.. currentmodule:: rootsearch.numeric

Core numeric functions used throughout RootSearch.

.. autosummary::
    :toctree:

    solve
    math_ext

"""
from .math_ext import close, near_zero, scalar_from_index
