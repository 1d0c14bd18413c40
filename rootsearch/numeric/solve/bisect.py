from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TypeVar

from rootsearch.numeric.math_ext import close, scalar_from_index
from ._common import check_count, pstyles

_T = TypeVar('_T')


# ======================================================================

def bisect_one(precision: _T, max_iters: int | None, left: _T, right: _T,
               target_fn: Callable[[_T], _T], *,
               display_level: int = 0) -> _T | None:
    r"""
    Approximate solution of :math:`f(x) = 0` on the interval
    :math:`x \in [x_l, x_r]` by the bisection method, assuming there is
    only one root in the interval.  For bisection to work :math:`f(x)`
    must change sign across the interval, i.e. ``target_fn(left)`` and
    ``target_fn(right)`` must have opposite sign (or one of them must
    be zero).

    Examples
    --------
    >>> f = lambda x: (x - 2) * (x + 2)
    >>> abs(bisect_one(1e-9, None, 1.8, 2.1, f) - 2.0) < 1e-9
    True
    >>> print(bisect_one(1e-6, None, 1.0, 2.0, lambda x: x))
    None

    Parameters
    ----------
    precision : scalar
        Stop once the bracket is narrower than :math:`|p|`.  Only the
        magnitude is used.
    max_iters : int or None
        Maximum number of iterations, or `None` for no limit.
    left, right : scalar
        Each end of the search interval.
    target_fn : Callable[[scalar], scalar]
        Function which we are searching for root.
    display_level : int, default = 0
        Print progress if > 0 (``1`` = start / result, ``2`` = also
        each iteration).

    Returns
    -------
    x : scalar or None
        Best estimate of root found.  Of the final bracket ends and
        midpoint, the point giving the smallest :math:`|f(x)|` is
        returned.  `None` if there is no sign change across the
        interval, or the sign pattern became inconsistent during the
        search.

    Raises
    ------
    ValueError
        If `max_iters` is negative.

    Notes
    -----
    If the loop stops because the bracket is narrower than `precision`
    the returned value is within `precision` of the root.  If it stops
    because `max_iters` was reached there is no such guarantee.
    """
    max_iters = check_count(max_iters, 'max_iters', allow_none=True)
    pstyles.print('solver', f"Bisecting root on [{left}, {right}]:",
                  display_level=display_level)

    left_val, right_val = target_fn(left), target_fn(right)
    if left_val * right_val > 0:
        pstyles.print('step', f"No sign change: f = [{left_val}, "
                              f"{right_val}].", display_level=display_level)
        return None

    two = scalar_from_index(2, left)
    mid = (left + right) / two
    mid_val = target_fn(mid)
    it = 0
    while (abs(right - left) > abs(precision) and
           (max_iters is None or it < max_iters)):

        # Check which side root is on, narrow interval.
        if left_val * mid_val <= 0:
            right, right_val = mid, mid_val
        elif mid_val * right_val <= 0:
            left, left_val = mid, mid_val
        else:
            pstyles.print('step', f"Inconsistent signs f = [{left_val}, "
                                  f"{mid_val}, {right_val}].",
                          display_level=display_level)
            return None

        it += 1
        mid = (left + right) / two
        mid_val = target_fn(mid)
        pstyles.print('step', f"Iteration {it}: x = [{left}, {mid}, "
                              f"{right}], f = [{left_val}, {mid_val}, "
                              f"{right_val}]", display_level=display_level)

    if abs(left_val) < abs(mid_val):
        root = left
    elif abs(right_val) < abs(mid_val):
        root = right
    else:
        root = mid

    pstyles.print('solver', f"Root x = {root} after {it} iterations.",
                  display_level=display_level)
    return root


# ----------------------------------------------------------------------

def bisect_multi(precision: _T, max_iters: int | None, num_intervals: int,
                 left: _T, right: _T, target_fn: Callable[[_T], _T], *,
                 display_level: int = 0) -> Iterator[_T]:
    """
    Find roots of a function that may have several roots on an
    interval.  The interval is split into `num_intervals` equal
    chunks and `bisect_one` is applied to each chunk in turn.

    Roots are generated lazily in order of the chunks, so for
    ``left < right`` they are ascending.  A root closer than
    ``2 * precision`` to the previously generated root is taken to be
    the same root (e.g. one lying on a chunk boundary) and is skipped.
    Only the most recent root is remembered for this check.

    Examples
    --------
    >>> f = lambda x: (x - 2) * (x + 2)
    >>> roots = list(bisect_multi(1e-6, None, 20, -3.0, 3.0, f))
    >>> len(roots), abs(roots[0] + 2.0) < 1e-6, abs(roots[1] - 2.0) < 1e-6
    (2, True, True)

    Parameters
    ----------
    precision : scalar
        Reported roots are within this distance of the real roots (see
        `bisect_one`).
    max_iters : int or None
        Maximum number of bisection iterations for each chunk, or `None`
        for no limit.
    num_intervals : int
        Number of chunks.  If zero, no roots are generated.
    left, right : scalar
        Each end of the search interval.
    target_fn : Callable[[scalar], scalar]
        Function which we are searching for roots.
    display_level : int, default = 0
        Print progress if > 0 (``1`` = start / roots, ``2`` = also each
        chunk).

    Returns
    -------
    roots : Iterator[scalar]
        Generator giving each distinct root found.  Fully consuming it
        requires exactly `num_intervals` calls to `bisect_one`.

    Raises
    ------
    ValueError
        If `max_iters` or `num_intervals` is negative.  These are
        checked immediately, not when the first root is requested.
    """
    max_iters = check_count(max_iters, 'max_iters', allow_none=True)
    num_intervals = check_count(num_intervals, 'num_intervals')
    return _bisect_chunks(precision, max_iters, num_intervals, left, right,
                          target_fn, display_level)


def _bisect_chunks(precision, max_iters, num_intervals, left, right,
                   target_fn, display_level):
    pstyles.print('solver', f"Bisecting roots on [{left}, {right}] in "
                            f"{num_intervals} intervals:",
                  display_level=display_level)
    if num_intervals == 0:
        return

    width = (right - left) / scalar_from_index(num_intervals, left)
    double_prec = scalar_from_index(2, left) * precision
    last_root = None
    for i in range(num_intervals):
        x_l = left + width * scalar_from_index(i, left)
        x_r = x_l + width
        root = bisect_one(precision, max_iters, x_l, x_r, target_fn)

        if root is None:
            pstyles.print('step', f"Interval {i}: [{x_l}, {x_r}] no root.",
                          display_level=display_level)
            continue

        if last_root is not None and close(last_root, root, double_prec):
            pstyles.print('step', f"Interval {i}: [{x_l}, {x_r}] duplicate "
                                  f"root x = {root}.",
                          display_level=display_level)
            continue

        pstyles.print('solver', f"Root x = {root} in interval {i}.",
                      display_level=display_level)
        last_root = root
        yield root


