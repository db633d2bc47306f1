"""
Segment Intersection - Walkthrough

Runs the intersection test on the reference configurations (crossing,
parallel, collinear, crossing only when extended), then queries the first
hit of a segment against a square contour.

Run with: python examples/segment_intersection_example.py
"""

import logging

import numpy as np

from segment_intersect import (
    explain_intersection,
    format_point,
    intersect_segment_contour,
    intersect_segments,
    log_breakdown,
    setup_debug_logging,
)

CASES = [
    ("crossing", (0, 0), (10, 0), (5, -5), (5, 5)),
    ("parallel", (0, 0), (10, 0), (0, 1), (10, 1)),
    ("collinear", (0, 0), (1, 1), (2, 2), (3, 3)),
    ("extended only", (0, 0), (10, 0), (20, -5), (20, 5)),
]


def example_reference_cases() -> None:
    print("=" * 60)
    print("Reference cases")
    print("=" * 60)
    for name, a, b, c, d in CASES:
        result = intersect_segments(a, b, c, d)
        if result is None:
            print(f"{name:>14}: no intersection")
        else:
            print(f"{name:>14}: {format_point(result.as_tuple())} offset={result.offset:.3f}")
        log_breakdown(explain_intersection(a, b, c, d))


def example_contour_hit() -> None:
    print("=" * 60)
    print("First hit against a square")
    print("=" * 60)
    square = np.array([[15, -5], [25, -5], [25, 5], [15, 5]], dtype=np.float64)
    hit = intersect_segment_contour((0, 0), (40, 0), square)
    if hit is None:
        print("segment misses the square")
    else:
        print(f"edge {hit.edge_index} at {format_point(hit.point)} offset={hit.offset:.3f}")


def main() -> None:
    setup_debug_logging(logging.DEBUG)
    example_reference_cases()
    example_contour_hit()


if __name__ == "__main__":
    main()
