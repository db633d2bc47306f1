"""
Geometry utilities for parametric line-segment intersection.
"""

from dataclasses import dataclass
from typing import Optional, Tuple
import numpy as np
from numpy.typing import ArrayLike, NDArray


def as_point(value: ArrayLike, name: str = "point") -> NDArray[np.float64]:
    """
    Coerce a 2-D point to a float64 array.

    Parameters:
        value: Any 2-element sequence or array holding (x, y)
        name: Argument name used in error messages

    Returns:
        Array of shape (2,)

    Raises:
        ValueError: If value is not a 2-element numeric point
    """
    try:
        point = np.asarray(value, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{name} must be numeric (x, y), got {value!r}") from e

    if point.shape != (2,):
        raise ValueError(f"{name} must have shape (2,), got {point.shape}")

    return point


def lerp(start: float, end: float, t: float) -> float:
    """Linearly interpolate between start and end by t (t is not clamped)."""
    return start + t * (end - start)


@dataclass(frozen=True)
class IntersectionResult:
    """
    Intersection of two finite segments.

    Attributes:
        x: X coordinate of the intersection point
        y: Y coordinate of the intersection point
        offset: Parameter t in [0, 1] locating the point along the first
                segment (0 at its start, 1 at its end)
    """
    x: float
    y: float
    offset: float

    @property
    def point(self) -> NDArray[np.float64]:
        """Return the intersection point as a numpy array."""
        return np.array([self.x, self.y], dtype=np.float64)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


def segment_parameters(
    a: NDArray[np.float64],
    b: NDArray[np.float64],
    c: NDArray[np.float64],
    d: NDArray[np.float64]
) -> Tuple[float, float, float]:
    """
    Compute the numerators and shared denominator of the parametric solution.

    Segment 1 is a->b, segment 2 is c->d. When bottom is non-zero the
    parameters are t = t_top / bottom along segment 1 and u = u_top / bottom
    along segment 2.

    Returns:
        Tuple of (t_top, u_top, bottom)
    """
    ax, ay = float(a[0]), float(a[1])
    bx, by = float(b[0]), float(b[1])
    cx, cy = float(c[0]), float(c[1])
    dx, dy = float(d[0]), float(d[1])

    t_top = (dx - cx) * (ay - cy) - (dy - cy) * (ax - cx)
    u_top = (cy - ay) * (ax - bx) - (cx - ax) * (ay - by)
    bottom = (dy - cy) * (bx - ax) - (dx - cx) * (by - ay)
    return t_top, u_top, bottom


def intersect_segments(
    a: ArrayLike,
    b: ArrayLike,
    c: ArrayLike,
    d: ArrayLike
) -> Optional[IntersectionResult]:
    """
    Intersect finite segment a->b with finite segment c->d.

    Parallel and collinear segments (zero denominator) never intersect,
    including collinear segments that overlap. Non-finite coordinates are
    not rejected; NaN fails every range comparison and so yields None.

    Parameters:
        a: Start of segment 1, (x, y)
        b: End of segment 1, (x, y)
        c: Start of segment 2, (x, y)
        d: End of segment 2, (x, y)

    Returns:
        IntersectionResult with the crossing point and its offset along a->b,
        or None if the segments do not intersect

    Raises:
        ValueError: If any argument is not a 2-element numeric point

    Example:
        >>> intersect_segments((0, 0), (10, 0), (5, -5), (5, 5))
        IntersectionResult(x=5.0, y=0.0, offset=0.5)
    """
    a = as_point(a, "a")
    b = as_point(b, "b")
    c = as_point(c, "c")
    d = as_point(d, "d")

    t_top, u_top, bottom = segment_parameters(a, b, c, d)
    if bottom == 0:
        return None

    t = t_top / bottom
    u = u_top / bottom
    if 0.0 <= t <= 1.0 and 0.0 <= u <= 1.0:
        return IntersectionResult(
            x=lerp(float(a[0]), float(b[0]), t),
            y=lerp(float(a[1]), float(b[1]), t),
            offset=t,
        )

    return None
