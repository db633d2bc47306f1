"""
Segment Intersect
=================

Public API for the parametric intersection test between two finite
2-D line segments.
"""

from segment_intersect.geometry import (
    IntersectionResult,
    as_point,
    intersect_segments,
    lerp,
)
from segment_intersect.batch import (
    BatchIntersection,
    ContourHit,
    contour_edges,
    intersect_segment_contour,
    intersect_segments_batch,
)
from segment_intersect.debug import (
    IntersectionBreakdown,
    disable_debug_logging,
    explain_intersection,
    format_point,
    log_breakdown,
    setup_debug_logging,
)

__all__ = [
    # Main API
    'intersect_segments',
    'IntersectionResult',
    'lerp',
    'as_point',
    # Batch API
    'intersect_segments_batch',
    'intersect_segment_contour',
    'contour_edges',
    'BatchIntersection',
    'ContourHit',
    # Debug utilities
    'IntersectionBreakdown',
    'explain_intersection',
    'log_breakdown',
    'format_point',
    'setup_debug_logging',
    'disable_debug_logging',
]
__version__ = '0.1.0'
