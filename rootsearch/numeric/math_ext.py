"""
Math Extensions (:mod:`rootsearch.numeric.math_ext`)
====================================================

.. currentmodule:: rootsearch.numeric.math_ext

Approximate comparisons and scalar conversions shared by the root
finding algorithms.
"""
from __future__ import annotations

from typing import TypeVar

import numpy as np
import numpy.typing as npt


_T = TypeVar('_T')


# ======================================================================

def close(a: npt.ArrayLike, b: npt.ArrayLike,
          precision: npt.ArrayLike) -> bool | np.ndarray:
    """
    Returns ``True`` if `a` and `b` differ by strictly less than the
    magnitude of `precision`, i.e. :math:`|b - a| < |p|`.  The sign of
    `precision` is ignored.

    Works element-wise on arrays.  Following IEEE comparison rules a
    `NaN` value is never close to anything (including another `NaN`).

    Examples
    --------
    >>> bool(close(1.0, 1.0 + 1e-9, 1e-6))
    True
    >>> bool(close(1.0, 1.1, -1e-6))
    False
    """
    return np.less(np.abs(np.subtract(b, a)), np.abs(precision))


def near_zero(x: npt.ArrayLike, precision: npt.ArrayLike) -> bool | np.ndarray:
    """
    Returns ``True`` if :math:`|x| < |p|`.  The sign of `precision` is
    ignored.  `NaN` is never near zero.

    Examples
    --------
    >>> bool(near_zero(-1e-9, 1e-6))
    True
    """
    return np.less(np.abs(x), np.abs(precision))


def scalar_from_index(n: int, like: _T) -> _T:
    """
    Convert integer `n` (e.g. a loop index or a count) into the same
    scalar type as `like`.  NumPy floating scalars keep their type
    (e.g. ``np.float32``), any other number gives a Python `float`.

    Raises
    ------
    ValueError
        If `n` cannot be represented as a finite value of the target
        type.  This is a programming error, not a solver failure.
    """
    kind = type(like) if isinstance(like, np.floating) else float
    try:
        with np.errstate(over='raise'):
            x = kind(n)
    except (OverflowError, FloatingPointError) as e:
        raise ValueError(f"Cannot convert {n} to {kind.__name__}.") from e

    if not np.isfinite(x):
        raise ValueError(f"Cannot convert {n} to a finite "
                         f"{kind.__name__}.")
    return x
