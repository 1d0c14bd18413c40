from __future__ import annotations

import operator

from rootsearch.util.print_styles import (PrintStyles, AddDotStyle,
                                          LevelTabStyle)

# Shared output styles for the solvers.  Each solver passes its own
# `display_level` when printing, the collection itself is silent.
pstyles = PrintStyles(display_level=0)
pstyles.add('solver', LevelTabStyle())
pstyles.add('step', AddDotStyle(), parent='solver')


# ----------------------------------------------------------------------

def check_count(n: int | None, name: str, allow_none: bool = False):
    """
    Check that iteration limit / interval count `n` is a non-negative
    integer (or `None` if `allow_none`) and return it as an `int`.
    """
    if n is None and allow_none:
        return None

    n = operator.index(n)
    if n < 0:
        raise ValueError(f"{name} must be >= 0, got {n}.")
    return n
