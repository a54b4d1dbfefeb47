"""Bounding-box relation classifier.

Pure box comparisons used as a cheap pre-filter before any boolean
operation reaches the engine.
"""

from pathcompose.domain import Bounds, Relation


def bounds_overlap(a: Bounds, b: Bounds) -> bool:
    """Check whether two boxes overlap with positive extent on both axes.

    Boxes that only touch along an edge or at a corner do not overlap.
    """
    overlap_x = a[0][0] < b[1][0] and a[1][0] > b[0][0]
    overlap_y = a[0][1] < b[1][1] and a[1][1] > b[0][1]
    return overlap_x and overlap_y


def bounds_contain(outer: Bounds, inner: Bounds) -> bool:
    """Check whether ``inner`` lies within ``outer`` on both axes (edges inclusive)."""
    return (
        inner[0][0] >= outer[0][0]
        and inner[0][1] >= outer[0][1]
        and inner[1][0] <= outer[1][0]
        and inner[1][1] <= outer[1][1]
    )


def classify(bounds_a: Bounds, bounds_b: Bounds) -> Relation:
    """Classify how box B relates to box A.

    Args:
        bounds_a: Reference box (the accumulator)
        bounds_b: Box being merged

    Returns:
        INDEPENDENT if the boxes do not overlap, CONTAINED if B lies within A,
        OVERLAP otherwise
    """
    if not bounds_overlap(bounds_a, bounds_b):
        return Relation.INDEPENDENT

    if bounds_contain(bounds_a, bounds_b):
        return Relation.CONTAINED

    return Relation.OVERLAP
