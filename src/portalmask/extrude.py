## outline extrusion for portalmask
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

"""Extrusion of outlines into portal solids.

Solids are built centered on z=0 in their own coordinates: the front
cap lies at ``z = +depth/2`` facing +z and the back cap at
``z = -depth/2`` facing -z.  The portal placement offset of
``-depth/2 + 0.0003`` then moves the front cap just in front of the
portal plane and the back cap to ``z = -depth + 0.0003``.

Surface order within a solid is fixed, because paint intents are
assigned by index:

* outline solids: ``[front cap, back cap, side walls]``
* tube solids: ``[outer wall, inner wall]``
"""

from __future__ import annotations

import logging
import math
from typing import List, Sequence, Tuple

from portalmask.geom import epsilon, point, pi2
from portalmask.geom3d import solid, surface
from portalmask.outline import OutlinePath
from portalmask.triangulator import Point2D, evenodd_regions, triangulate_region

logger = logging.getLogger(__name__)

UP = [0, 0, 1, 0]
DOWN = [0, 0, -1, 0]


def _cap_surface(regions, z: float, normal: list, flip: bool) -> list:
    vrts, nrms, faces = [], [], []
    boundary: List[int] = []
    holes: List[List[int]] = []
    for region in regions:
        offset = len(vrts)
        for x, y in region.vertices:
            vrts.append(point(x, y, z))
            nrms.append(list(normal))
        for a, b, c in triangulate_region(region):
            if flip:
                faces.append([a + offset, c + offset, b + offset])
            else:
                faces.append([a + offset, b + offset, c + offset])
        for loop in region.loop_indices():
            shifted = [i + offset for i in loop]
            if not boundary:
                boundary = shifted
            else:
                holes.append(shifted)
    return surface(vrts, nrms, faces, boundary, holes)


def _wall_surface(loops: Sequence[Sequence[Point2D]], half: float) -> list:
    """Side walls along each loop.

    Each loop must keep the solid's material on its left; the wall
    normals then face away from the material (outward on outer
    boundaries, into the hole on inner ones).  Vertices are not shared
    between quads so every wall face carries a flat normal.
    """
    vrts, nrms, faces = [], [], []
    for loop in loops:
        n = len(loop)
        for i in range(n):
            ax, ay = loop[i]
            bx, by = loop[(i + 1) % n]
            dx, dy = bx - ax, by - ay
            length = math.hypot(dx, dy)
            if length <= epsilon:
                continue
            normal = [dy / length, -dx / length, 0, 0]
            k = len(vrts)
            vrts.extend([point(ax, ay, -half), point(bx, by, -half),
                         point(bx, by, half), point(ax, ay, half)])
            nrms.extend([list(normal) for _ in range(4)])
            faces.append([k, k + 1, k + 2])
            faces.append([k, k + 2, k + 3])
    return surface(vrts, nrms, faces)


def extrude_outline(path: OutlinePath, depth: float, minseg: int = 4) -> list:
    """Extrude the even-odd filled region of ``path`` to ``depth``.

    Returns ``solid([front, back, walls])`` with no paint intents
    assigned yet.  An outline without any filled region yields three
    empty surfaces; otherwise a non-positive depth raises
    ``ValueError``.
    """
    regions = evenodd_regions(path.tessellate(minseg))
    if not regions:
        # nothing to carve; keep the surface layout so intents still line up
        logger.warning('outline with %d ring(s) has no filled region, extruding nothing', len(path))
        return solid([surface(), surface(), surface()], [],
                     ['procedure', 'portalmask.extrude.extrude_outline(empty)'])

    if depth <= epsilon:
        raise ValueError('bad depth passed to extrude_outline: {}'.format(depth))

    half = depth / 2.0
    front = _cap_surface(regions, half, UP, flip=False)
    back = _cap_surface(regions, -half, DOWN, flip=True)
    walls = _wall_surface([loop for region in regions for loop in region.loops], half)

    logger.debug('extruded %d region(s) from %d ring(s) to depth %g: %d cap faces, %d wall faces',
                 len(regions), len(path), depth, len(front[3]), len(walls[3]))

    call = 'portalmask.extrude.extrude_outline({} rings, {})'.format(len(path), depth)
    return solid([front, back, walls], [], ['procedure', call])


def _circle_loop(radius: float, segments: int, ccw: bool = True) -> List[Point2D]:
    step = pi2 / segments
    loop = [(radius * math.cos(k * step), radius * math.sin(k * step))
            for k in range(segments)]
    if not ccw:
        loop.reverse()
    return loop


def extrude_tube(inner_radius: float, outer_radius: float, depth: float,
                 segments: int) -> list:
    """Annular side-wall solid, open at both ends.

    Returns ``solid([outer wall, inner wall])``; the outer wall faces
    away from the axis, the inner wall toward it.
    """
    if depth <= epsilon:
        raise ValueError('bad depth passed to extrude_tube: {}'.format(depth))
    if inner_radius <= epsilon or outer_radius <= inner_radius:
        raise ValueError('bad radii passed to extrude_tube: {}, {}'
                         .format(inner_radius, outer_radius))
    if segments < 3:
        raise ValueError('tube needs at least three radial segments')

    half = depth / 2.0
    outer = _wall_surface([_circle_loop(outer_radius, segments)], half)
    inner = _wall_surface([_circle_loop(inner_radius, segments, ccw=False)], half)

    call = 'portalmask.extrude.extrude_tube({}, {}, {}, {})'.format(
        inner_radius, outer_radius, depth, segments)
    return solid([outer, inner], [], ['procedure', call])


__all__ = ["extrude_outline", "extrude_tube"]
