"""
=====================================
Utilities (:mod:`rootsearch.util`)
=====================================

.. currentmodule:: rootsearch.util

Support functions used by the solvers.

Display
-------

.. autosummary::
    :toctree:

    FormatStyle
    PrintStyles
    AddDotStyle
    LevelTabStyle

"""

from .print_styles import (FormatStyle, PrintStyles, AddDotStyle,
                           LevelTabStyle)
