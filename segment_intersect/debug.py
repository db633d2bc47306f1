"""
Debug helpers: logging setup and a step-by-step view of the intersection test.
"""

import logging
from dataclasses import dataclass
from typing import Literal, Optional
import numpy as np
from numpy.typing import ArrayLike

from segment_intersect.geometry import (
    IntersectionResult,
    as_point,
    intersect_segments,
    segment_parameters,
)

logger = logging.getLogger("segment_intersect")

_DEBUG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
_handler: Optional[logging.Handler] = None


@dataclass
class IntersectionBreakdown:
    """
    Intermediate values of a single intersection test.

    Attributes:
        t_top: Numerator of the parameter along segment 1
        u_top: Numerator of the parameter along segment 2
        bottom: Shared denominator (zero for parallel or collinear segments)
        t: Parameter along segment 1, or None when bottom is zero
        u: Parameter along segment 2, or None when bottom is zero
        reason: Which branch decided the outcome
        result: Same value intersect_segments() returns for these points
    """
    t_top: float
    u_top: float
    bottom: float
    t: Optional[float]
    u: Optional[float]
    reason: Literal["parallel", "outside", "intersect"]
    result: Optional[IntersectionResult]


def format_point(point: ArrayLike, precision: int = 3) -> str:
    """Format an (x, y) point for log output."""
    x, y = np.asarray(point, dtype=np.float64).reshape(2)
    return f"({x:.{precision}f}, {y:.{precision}f})"


def explain_intersection(
    a: ArrayLike,
    b: ArrayLike,
    c: ArrayLike,
    d: ArrayLike
) -> IntersectionBreakdown:
    """
    Recompute the intersection of a->b and c->d, keeping every intermediate.

    Parameters:
        a, b: Endpoints of segment 1
        c, d: Endpoints of segment 2

    Returns:
        IntersectionBreakdown whose result matches intersect_segments()
    """
    a = as_point(a, "a")
    b = as_point(b, "b")
    c = as_point(c, "c")
    d = as_point(d, "d")

    t_top, u_top, bottom = segment_parameters(a, b, c, d)
    result = intersect_segments(a, b, c, d)

    if bottom == 0:
        return IntersectionBreakdown(t_top, u_top, bottom, None, None, "parallel", None)

    t = t_top / bottom
    u = u_top / bottom
    reason: Literal["outside", "intersect"] = "intersect" if result is not None else "outside"
    return IntersectionBreakdown(t_top, u_top, bottom, t, u, reason, result)


def log_breakdown(
    breakdown: IntersectionBreakdown,
    level: int = logging.DEBUG
) -> None:
    """Write an IntersectionBreakdown to the package logger."""
    if not logger.isEnabledFor(level):
        return

    logger.log(
        level,
        "t_top=%.6g u_top=%.6g bottom=%.6g",
        breakdown.t_top, breakdown.u_top, breakdown.bottom,
    )
    if breakdown.reason == "parallel":
        logger.log(level, "bottom is zero: segments are parallel or collinear")
        return

    logger.log(level, "t=%.6g u=%.6g", breakdown.t, breakdown.u)
    if breakdown.result is None:
        logger.log(level, "parameters outside [0, 1]: no intersection")
    else:
        logger.log(
            level,
            "intersection at %s, offset=%.6g",
            format_point(breakdown.result.as_tuple()),
            breakdown.result.offset,
        )


def setup_debug_logging(level: int = logging.DEBUG) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Calling it again only updates the level; a second handler is never added.

    Parameters:
        level: Logging level for the package logger and its handler

    Returns:
        The package logger
    """
    global _handler

    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(_DEBUG_FORMAT))
        logger.addHandler(_handler)

    _handler.setLevel(level)
    logger.setLevel(level)
    return logger


def disable_debug_logging() -> None:
    """Remove the handler installed by setup_debug_logging()."""
    global _handler

    if _handler is not None:
        logger.removeHandler(_handler)
        _handler = None
    logger.setLevel(logging.WARNING)
