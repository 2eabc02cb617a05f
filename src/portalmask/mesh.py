## renderer handoff for portalmask
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

"""Utilities for handing triangulated portal solids to a renderer."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence, Tuple

from portalmask.geom import cross, epsilon, mag, sub
from portalmask.geom3d import issolid, issurface
from portalmask.materials import PaintIntent, intent_for

Vec3 = Tuple[float, float, float]
TriTuple = Tuple[Vec3, Vec3, Vec3, Vec3]


def to_vec3(point_like: Sequence[float]) -> Vec3:
    """Return the XYZ components of a point/vector as a tuple."""

    if len(point_like) < 3:
        raise ValueError("value must have at least three components")
    return float(point_like[0]), float(point_like[1]), float(point_like[2])


def triangle_normal(v0: Sequence[float], v1: Sequence[float], v2: Sequence[float]) -> Vec3 | None:
    """Return the unit normal of a triangle or ``None`` if degenerate."""

    n = cross(sub(v1, v0), sub(v2, v0))
    length = mag(n)
    if length <= epsilon * epsilon:
        return None
    return (n[0] / length, n[1] / length, n[2] / length)


def mesh_view(obj: Sequence) -> Iterator[TriTuple]:
    """Yield triangles for a surface or solid as ``(normal, v0, v1, v2)``.

    Normals are unit vectors following the face winding. Degenerate
    faces are skipped.
    """

    surfaces: Iterable[Sequence]
    if issurface(obj):
        surfaces = [obj]
    elif issolid(obj):
        surfaces = obj[1]
    else:
        raise ValueError("mesh_view expects a surface or solid")

    for surf in surfaces:
        verts = surf[1]
        for face in surf[3]:
            v0, v1, v2 = (verts[i] for i in face)
            normal = triangle_normal(v0, v1, v2)
            if normal is None:
                continue
            yield normal, to_vec3(v0), to_vec3(v1), to_vec3(v2)


def render_batches(placement) -> List[Tuple[PaintIntent, List[TriTuple]]]:
    """One ``(intent, triangles)`` batch per surface of a placement.

    Triangles are in placed coordinates, i.e. with the z-offset
    applied, and batches follow the solid's surface order.
    """

    placed = placement.placed_solid()
    batches = []
    for index, surf in enumerate(placed[1]):
        batches.append((intent_for(placed, index), list(mesh_view(surf))))
    return batches


__all__ = ["mesh_view", "render_batches", "to_vec3", "triangle_normal"]
