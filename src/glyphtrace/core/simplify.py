"""Polyline reduction and refinement for closed outlines.

- remove_collinear: drop pixel-staircase points lying exactly on a line
- decimate: lossy thinning that keeps every other point
- smooth: corner cutting that doubles the point count

All functions are pure and return new lists; the input is never modified.
"""

from glyphtrace.domain import Point

DECIMATE_MIN_POINTS = 6


def _cross(prev: Point, curr: Point, nxt: Point) -> float:
    """Cross product of the edges prev->curr and curr->nxt."""
    dx1 = curr.x - prev.x
    dy1 = curr.y - prev.y
    dx2 = nxt.x - curr.x
    dy2 = nxt.y - curr.y
    return dx1 * dy2 - dy1 * dx2


def remove_collinear(points: list[Point], closed: bool = True) -> list[Point]:
    """Drop points lying exactly on the line through their neighbours.

    Each interior point is compared with the last point kept and the next
    raw point, so runs of collinear points collapse to their endpoints. The
    first and last raw points are kept as anchors. When closed is True the
    two anchors are then checked once more across the seam where the loop
    closes, so a traced rectangle reduces to its four corners.

    Args:
        points: Ordered boundary points
        closed: Treat the sequence as a closed loop

    Returns:
        Reduced point list
    """
    if len(points) < 3:
        return list(points)

    kept = [points[0]]
    for i in range(1, len(points) - 1):
        if _cross(kept[-1], points[i], points[i + 1]) != 0:
            kept.append(points[i])
    kept.append(points[-1])

    if not closed:
        return kept

    if len(kept) > 3 and _cross(kept[-2], kept[-1], kept[0]) == 0:
        kept.pop()
    if len(kept) > 3 and _cross(kept[-1], kept[0], kept[1]) == 0:
        kept.pop(0)

    return kept


def decimate(points: list[Point], min_points: int = DECIMATE_MIN_POINTS) -> list[Point]:
    """Keep the points at even indices.

    Only paths with more than min_points points are thinned; shorter paths
    are returned unchanged. This is position-independent, not curvature
    aware.
    """
    if len(points) <= min_points:
        return list(points)
    return points[::2]


def smooth(points: list[Point]) -> list[Point]:
    """Cut every corner of a closed polygon.

    Each edge curr->next is replaced by the points at 1/4 and 3/4 along it,
    so N points become 2N. Paths with fewer than three points are returned
    unchanged.
    """
    n = len(points)
    if n < 3:
        return list(points)

    result: list[Point] = []
    for i, curr in enumerate(points):
        nxt = points[(i + 1) % n]
        result.append(Point(0.75 * curr.x + 0.25 * nxt.x, 0.75 * curr.y + 0.25 * nxt.y))
        result.append(Point(0.25 * curr.x + 0.75 * nxt.x, 0.25 * curr.y + 0.75 * nxt.y))
    return result
