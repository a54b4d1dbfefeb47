"""Geometric operations on anchor polygons.

Signed area (shoelace formula) used by contour winding. The function is
pure and stateless. Points are plain ``(x, y)`` tuples.
"""

from collections.abc import Sequence

from pathcompose.domain import Point


def signed_area(points: Sequence[Point]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    The sign follows the mathematical (y-up) convention:
    - Positive area: counter-clockwise winding
    - Negative area: clockwise winding

    Args:
        points: Points forming the polygon boundary (closing edge implied)

    Returns:
        Signed area in square units. Returns 0.0 for degenerate polygons.

    Examples:
        >>> signed_area([(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)])
        1.0
        >>> signed_area([(0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0)])
        -1.0
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i][0] * points[j][1]
        area -= points[j][0] * points[i][1]

    return area / 2.0
