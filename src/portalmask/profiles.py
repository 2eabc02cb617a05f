## portal profile construction for portalmask
## Copyright (c) 2026 portalmask contributors

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Profile builders for the five portal variants.

Every builder returns a ``Profile``: the profile kind, the frozen
depth and outer scale, and either a filled ``OutlinePath`` (rectangle,
polygon, arc and path profiles) or a ``TubeSpec`` (tube profile).
Depth and outer scale are resolved here, once, from the defaults in
``portalmask.config``; nothing downstream recomputes them.

Outer masks are centered on the origin.  For rectangle, polygon and
arc profiles the outer mask is a square sized by the larger dimension
of the hole; only path profiles get a rectangle that follows the
path's bounding box.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from portalmask.config import (
    ARC_FLATNESS_CEILING,
    DEFAULTS,
    FALLBACK_DEPTH,
    INNER_DIVISOR,
    ProfileKind,
    default_depth,
    segment_count,
)
from portalmask.geom import pi2
from portalmask.outline import OutlinePath

logger = logging.getLogger(__name__)

Point2D = Tuple[float, float]


@dataclass(frozen=True)
class TubeSpec:
    """Radii and radial segment count of a tube profile."""

    inner_radius: float
    outer_radius: float
    segments: int


@dataclass
class Profile:
    """Result of a profile builder."""

    kind: ProfileKind
    depth: float
    outer_scale: float
    outline: Optional[OutlinePath] = None
    tube: Optional[TubeSpec] = None


def _outer_scale(outer_mult: float) -> float:
    return max(1.0, float(outer_mult))


def _resolve_depth(kind: ProfileKind, depth: Optional[float], size: float) -> float:
    if depth is None:
        resolved = default_depth(kind, size)
        if resolved <= 0:
            logger.warning('no usable size for a %s depth, falling back to %g',
                           kind.value, FALLBACK_DEPTH)
            return FALLBACK_DEPTH
        return resolved
    if depth <= 0:
        raise ValueError('depth must be positive, got {}'.format(depth))
    return float(depth)


def _check_radius(radius: float) -> None:
    if radius <= 0:
        raise ValueError('radius must be positive, got {}'.format(radius))


def polygon_points(radius: float, subdivisions: int) -> List[Point2D]:
    """Regular polygon of ``2**subdivisions`` points (at least 4) on a
    circle of ``radius``, counter-clockwise from ``(radius, 0)``."""
    segments = segment_count(subdivisions)
    step = pi2 / segments
    return [(radius * math.cos(k * step), radius * math.sin(k * step))
            for k in range(segments)]


def path_rings(outline: OutlinePath, points: Sequence[Sequence[float]],
               outer_scale: float) -> Tuple[float, float]:
    """Fill ``outline`` with an arbitrary-path inner ring and its outer
    rectangle.

    Shared by path construction and re-shaping.  Returns the bounding
    box ``(width, height)`` of the inner ring; an empty or degenerate
    point list adds no inner ring and yields a zero box.
    """
    outline.add_ring(points)
    width, height = outline.bounds()
    outline.add_frame(width * outer_scale, height * outer_scale)
    return width, height


def build_frame(frame_size: Sequence[float], depth: Optional[float] = None,
                outer_mult: float = DEFAULTS[ProfileKind.RECTANGLE].outer_mult) -> Profile:
    """Rectangular frame around a ``(width, height)`` hole."""
    width, height = float(frame_size[0]), float(frame_size[1])
    largest = max(width, height)
    if largest <= 0:
        raise ValueError('frame size must be positive, got {}'.format(tuple(frame_size)))

    kind = ProfileKind.RECTANGLE
    scale = _outer_scale(outer_mult)
    outline = OutlinePath()

    hider = largest * scale
    outline.add_frame(hider, hider)
    outline.add_frame(width / INNER_DIVISOR, height / INNER_DIVISOR)

    return Profile(kind, _resolve_depth(kind, depth, largest), scale, outline=outline)


def build_polygon(radius: float, subdivisions: int = DEFAULTS[ProfileKind.POLYGON].subdivisions,
                  depth: Optional[float] = None,
                  outer_mult: float = DEFAULTS[ProfileKind.POLYGON].outer_mult) -> Profile:
    """Circular hole approximated by a regular polygon."""
    _check_radius(radius)
    kind = ProfileKind.POLYGON
    scale = _outer_scale(outer_mult)
    outline = OutlinePath()

    outline.add_ring(polygon_points(radius, subdivisions))
    hider = radius * scale
    outline.add_frame(hider, hider)

    return Profile(kind, _resolve_depth(kind, depth, radius), scale, outline=outline)


def build_arc(radius: float, flatness: float = DEFAULTS[ProfileKind.ARC].flatness,
              depth: Optional[float] = None,
              outer_mult: float = DEFAULTS[ProfileKind.ARC].outer_mult) -> Profile:
    """Circular hole sampled at extrusion time to within
    ``radius * flatness`` of the true circle."""
    _check_radius(radius)
    if flatness <= 0:
        raise ValueError('flatness must be positive, got {}'.format(flatness))
    if flatness > ARC_FLATNESS_CEILING:
        logger.info('arc flatness %g exceeds the recommended ceiling of %g',
                    flatness, ARC_FLATNESS_CEILING)

    kind = ProfileKind.ARC
    scale = _outer_scale(outer_mult)
    outline = OutlinePath(flatness=radius * flatness)

    outline.add_circle((0.0, 0.0), radius)
    hider = radius * scale
    outline.add_frame(hider, hider)

    return Profile(kind, _resolve_depth(kind, depth, radius), scale, outline=outline)


def build_tube(radius: float, subdivisions: int = DEFAULTS[ProfileKind.TUBE].subdivisions,
               depth: Optional[float] = None,
               outer_mult: float = DEFAULTS[ProfileKind.TUBE].outer_mult) -> Profile:
    """Annular tube; no planar outline."""
    _check_radius(radius)
    kind = ProfileKind.TUBE
    scale = _outer_scale(outer_mult)
    tube = TubeSpec(inner_radius=radius / INNER_DIVISOR,
                    outer_radius=radius * scale,
                    segments=segment_count(subdivisions))
    return Profile(kind, _resolve_depth(kind, depth, radius), scale, tube=tube)


def build_path(points: Sequence[Sequence[float]],
               flatness: float = DEFAULTS[ProfileKind.PATH].flatness,
               depth: Optional[float] = None,
               outer_mult: float = DEFAULTS[ProfileKind.PATH].outer_mult) -> Profile:
    """Hole following a caller-supplied closed polyline."""
    if flatness <= 0:
        raise ValueError('flatness must be positive, got {}'.format(flatness))
    kind = ProfileKind.PATH
    scale = _outer_scale(outer_mult)
    outline = OutlinePath()

    width, height = path_rings(outline, points, scale)
    largest = max(width, height)
    if largest > 0:
        outline.flatness = largest * flatness
    else:
        logger.warning('path of %d point(s) has an empty bounding box', len(points))

    return Profile(kind, _resolve_depth(kind, depth, largest), scale, outline=outline)


BUILDERS: Dict[ProfileKind, Callable[..., Profile]] = {
    ProfileKind.RECTANGLE: build_frame,
    ProfileKind.POLYGON: build_polygon,
    ProfileKind.ARC: build_arc,
    ProfileKind.TUBE: build_tube,
    ProfileKind.PATH: build_path,
}


def build(kind: ProfileKind, *args, **kwargs) -> Profile:
    """Dispatch to the builder registered for ``kind``."""
    try:
        builder = BUILDERS[ProfileKind(kind)]
    except (KeyError, ValueError):
        raise ValueError('unknown profile kind {!r}'.format(kind)) from None
    return builder(*args, **kwargs)


__all__ = [
    "BUILDERS",
    "Profile",
    "TubeSpec",
    "build",
    "build_arc",
    "build_frame",
    "build_path",
    "build_polygon",
    "build_tube",
    "path_rings",
    "polygon_points",
]
