#!usr/bin/env python3

# Examples of finding the roots of a scalar function on an interval.

from rootsearch import bisect_multi, newton_one


def cubic(x):
    """Roots at x = 1, 2, 3."""
    return (x - 1) * (x - 2) * (x - 3)


def dcubic_dx(x):
    return 3 * x ** 2 - 12 * x + 11


# Enumerate all roots on [0, 4] by bisecting 40 chunks.
roots = list(bisect_multi(1e-9, None, 40, 0.0, 4.0, cubic,
                          display_level=1))
print(f"\nBisection roots = {roots}\n")

# Polish each with Newton's method, using a small bracket around it.
for x0 in roots:
    x = newton_one(1e-12, 50, x0 - 0.1, x0 + 0.1, x0, cubic, dcubic_dx,
                   display_level=2)
    print(f"Newton root x = {x}, f(x) = {cubic(x)}\n")
