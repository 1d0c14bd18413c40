"""
Find a root of a scalar function using Newton's method, with the
following additional features:

    - A bracketing interval is tracked and re-tightened after every
      step, so that it always encloses the sign change.
    - If the derivative is nearly zero or the Newton step would leave
      the bracket, a linear interpolation (secant-style) step between
      the bracket ends is used instead.
"""
from __future__ import annotations

import warnings
from collections.abc import Callable
from typing import TypeVar

from rootsearch.numeric.math_ext import close, near_zero
from ._common import check_count, pstyles

_T = TypeVar('_T')


# ======================================================================

def newton_one(precision: _T, max_iters: int | None, left: _T, right: _T,
               first_approx: _T, target_fn: Callable[[_T], _T],
               derivative_fn: Callable[[_T], _T], *,
               display_level: int = 0) -> _T | None:
    """
    Find a root of `target_fn` using Newton's method, starting from
    `first_approx` and keeping all estimates inside the bracket
    [`left`, `right`].

    Parameters
    ----------
    precision : scalar
        Iteration stops once two consecutive estimates differ by less
        than :math:`|p|`.  The real root is most likely (but not
        guaranteed) to be within this distance of the result.
    max_iters : int or None
        Maximum number of iterations, or `None` for no limit.
    left, right : scalar
        Bracketing interval, with ``left <= right``.
    first_approx : scalar
        Starting estimate of the root.
    target_fn : Callable[[scalar], scalar]
        Function which we are searching for root.
    derivative_fn : Callable[[scalar], scalar]
        Derivative of `target_fn`.
    display_level : int, default = 0
        Print progress if > 0 (``1`` = start / result, ``2`` = also
        each iteration).

    Returns
    -------
    x : scalar or None
        Best estimate of root.  `None` if neither the Newton step nor
        the linear interpolation fallback stays inside the bracket.

    Raises
    ------
    ValueError
        If `max_iters` is negative.

    Warns
    -----
    RuntimeWarning
        If `max_iters` is reached before the estimates converge.  The
        last estimate is still returned, but carries no guarantee of
        accuracy; check ``target_fn(x)`` if this matters.

    Examples
    --------
    >>> f = lambda x: (x - 1) * (x - 2) * (x - 3)
    >>> df = lambda x: 3 * x ** 2 - 12 * x + 11
    >>> abs(newton_one(1e-6, None, 1.5, 2.5, 1.55, f, df) - 2.0) < 1e-6
    True
    >>> print(newton_one(1e-6, None, 5.0, 6.0, 5.5, f, df))
    None
    """
    max_iters = check_count(max_iters, 'max_iters', allow_none=True)
    pstyles.print('solver', f"Newton root on [{left}, {right}] from "
                            f"x = {first_approx}:",
                  display_level=display_level)

    root, prev_root = first_approx, None
    it = 0
    while prev_root is None or not close(root, prev_root, precision):
        if max_iters is not None and it >= max_iters:
            warnings.warn(f"newton_one() reached {max_iters} iteration "
                          f"limit, value is {root}.", RuntimeWarning)
            break

        it += 1
        left_val, right_val = target_fn(left), target_fn(right)

        step = 'Newton'
        next_root = _newton_step(precision, left, right, root, target_fn,
                                 derivative_fn)
        if next_root is None:
            step = 'Fallback'
            next_root = _linear_fallback(left, right, left_val, right_val)
            if next_root is None:
                pstyles.print('solver', f"No root: fallback step left "
                                        f"[{left}, {right}].",
                              display_level=display_level)
                return None

        prev_root, root = root, next_root

        # Re-tighten the bracket around the sign change.
        if left_val * target_fn(root) <= 0:
            right = root
        else:
            left = root

        pstyles.print('step', f"Iteration {it}: {step} x = {root}, "
                              f"bracket = [{left}, {right}]",
                      display_level=display_level)

    pstyles.print('solver', f"Root x = {root} after {it} iterations.",
                  display_level=display_level)
    return root


# ----------------------------------------------------------------------

def _newton_step(precision, left, right, x, target_fn, derivative_fn):
    # Returns None if the step is unsafe.
    d = derivative_fn(x)
    if near_zero(d, precision):
        return None

    x_new = x - target_fn(x) / d
    if not (left <= x_new <= right):  # Also rejects NaN.
        return None
    return x_new


def _linear_fallback(x1, x2, y1, y2):
    # Zero crossing of the line through (x1, y1), (x2, y2), if it lies
    # within [x1, x2].
    if y2 == y1:
        return None

    x_new = ((y2 - y1) * x1 - (x2 - x1) * y1) / (y2 - y1)
    if not (x1 <= x_new <= x2):
        return None
    return x_new
