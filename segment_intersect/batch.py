"""
Vectorised segment intersection over many segment pairs and against contours.
"""

from dataclasses import dataclass
from typing import Any, Optional
import numpy as np
from numpy.typing import ArrayLike, NDArray

from segment_intersect.geometry import as_point


@dataclass
class BatchIntersection:
    """
    Row-wise result of intersecting N segment pairs.

    Attributes:
        points: Intersection points (N, 2); NaN where there is no hit
        offsets: Parameter t along each first segment (N,); NaN where there is no hit
        hits: Boolean mask (N,) of rows whose segments intersect
    """
    points: NDArray[np.float64]
    offsets: NDArray[np.float64]
    hits: NDArray[np.bool_]

    def __len__(self) -> int:
        return int(self.hits.shape[0])

    @property
    def hit_count(self) -> int:
        """Number of intersecting rows."""
        return int(np.count_nonzero(self.hits))


@dataclass(frozen=True)
class ContourHit:
    """
    Nearest crossing of a segment with a contour.

    Attributes:
        x: X coordinate of the crossing
        y: Y coordinate of the crossing
        offset: Parameter t along the query segment
        edge_index: Index i of the contour edge (vertex i -> vertex i+1)
    """
    x: float
    y: float
    offset: float
    edge_index: int

    @property
    def point(self) -> NDArray[np.float64]:
        """Return the crossing point as a numpy array."""
        return np.array([self.x, self.y], dtype=np.float64)


def _as_point_rows(value: ArrayLike, name: str) -> NDArray[np.float64]:
    """Coerce a (2,) point or (N, 2) array of points to float64 rows."""
    try:
        rows = np.asarray(value, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{name} must be numeric points") from e

    if rows.ndim == 1:
        rows = rows.reshape(1, -1)
    if rows.ndim != 2 or rows.shape[1] != 2:
        raise ValueError(f"{name} must have shape (2,) or (N, 2), got {np.shape(value)}")
    return rows


def intersect_segments_batch(
    a: ArrayLike,
    b: ArrayLike,
    c: ArrayLike,
    d: ArrayLike
) -> BatchIntersection:
    """
    Intersect segments a[i]->b[i] with c[i]->d[i] for every row i.

    Each argument is either a single point (2,) or an array (N, 2); single
    points are broadcast against the others. Row results match
    intersect_segments() applied to the same four points.

    Parameters:
        a: Starts of the first segments
        b: Ends of the first segments
        c: Starts of the second segments
        d: Ends of the second segments

    Returns:
        BatchIntersection with points, offsets and hit mask

    Raises:
        ValueError: If inputs are not points or cannot be broadcast together
    """
    rows = [_as_point_rows(v, name) for v, name in ((a, "a"), (b, "b"), (c, "c"), (d, "d"))]
    try:
        a, b, c, d = np.broadcast_arrays(*rows)
    except ValueError as e:
        raise ValueError(
            f"segment arrays cannot be broadcast together: {[r.shape for r in rows]}"
        ) from e

    ax, ay = a[:, 0], a[:, 1]
    bx, by = b[:, 0], b[:, 1]
    cx, cy = c[:, 0], c[:, 1]
    dx, dy = d[:, 0], d[:, 1]

    t_top = (dx - cx) * (ay - cy) - (dy - cy) * (ax - cx)
    u_top = (cy - ay) * (ax - bx) - (cx - ax) * (ay - by)
    bottom = (dy - cy) * (bx - ax) - (dx - cx) * (by - ay)

    # Zero denominators produce inf/nan here; they are masked out below
    with np.errstate(divide="ignore", invalid="ignore"):
        t = t_top / bottom
        u = u_top / bottom

    hits = (bottom != 0) & (t >= 0.0) & (t <= 1.0) & (u >= 0.0) & (u <= 1.0)

    offsets = np.where(hits, t, np.nan)
    points = np.full(a.shape, np.nan, dtype=np.float64)
    points[hits] = a[hits] + t[hits, np.newaxis] * (b[hits] - a[hits])

    return BatchIntersection(points=points, offsets=offsets, hits=hits)


def contour_edges(
    contour: NDArray[np.floating[Any]],
    closed: bool = True
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """
    Split a contour into edge start and end arrays.

    Parameters:
        contour: Vertices (M, 2), M >= 2
        closed: If True, include the closing edge from the last vertex to the first

    Returns:
        Tuple of (starts, ends), each (E, 2)

    Raises:
        ValueError: If contour is not (M, 2) or has fewer than 2 vertices
    """
    contour = np.asarray(contour, dtype=np.float64)
    if contour.ndim != 2 or contour.shape[1] != 2:
        raise ValueError(f"contour must have shape (M, 2), got {contour.shape}")
    if contour.shape[0] < 2:
        raise ValueError(
            f"contour must have at least 2 vertices, got {contour.shape[0]}"
        )

    starts = contour
    ends = np.roll(contour, -1, axis=0)
    if not closed:
        starts = starts[:-1]
        ends = ends[:-1]
    return starts, ends


def intersect_segment_contour(
    start: ArrayLike,
    end: ArrayLike,
    contour: NDArray[np.floating[Any]],
    closed: bool = True
) -> Optional[ContourHit]:
    """
    Find the first crossing of segment start->end with a contour.

    "First" means smallest offset along start->end; when several edges are hit
    at the same offset (e.g. at a shared vertex) the lowest edge index wins.
    Edges parallel to the segment are never reported, as with
    intersect_segments().

    Parameters:
        start: Segment start (x, y)
        end: Segment end (x, y)
        contour: Polygon or polyline vertices (M, 2)
        closed: Treat contour as a closed polygon (True) or an open polyline

    Returns:
        ContourHit for the nearest crossing, or None if the segment misses
        every edge
    """
    start = as_point(start, "start")
    end = as_point(end, "end")
    edge_starts, edge_ends = contour_edges(contour, closed=closed)

    batch = intersect_segments_batch(start, end, edge_starts, edge_ends)
    if not batch.hits.any():
        return None

    candidates = np.where(batch.hits, batch.offsets, np.inf)
    edge_index = int(np.argmin(candidates))
    return ContourHit(
        x=float(batch.points[edge_index, 0]),
        y=float(batch.points[edge_index, 1]),
        offset=float(batch.offsets[edge_index]),
        edge_index=edge_index,
    )
