## surfaces and solids for portalmask
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

"""
========================================================
geom3d -- triangulated surfaces and solids for portalmask
========================================================

Extrusion turns planar outlines into explicit, triangulated geometry
that a conventional rendering pipeline can draw.  This module defines
that representation and the handful of operations the portal
pipeline needs on it.

surfaces
--------

``surface = ['surface',vertices,normals,faces,boundary,holes]``, where:

           ``vertices`` is a list of ``portalmask.geom`` points,

           ``normals`` is a list of direction vectors of the same
           length as ``vertices``,

           ``faces`` is a list of faces, each a list of three
           indices into ``vertices`` in counter-clockwise order
           when seen from the side the normals point to,

           ``boundary`` is a list of indices of the vertices that
           form the outer perimeter of the surface, or [] if the
           surface has none (a tube wall, for example),

           ``holes`` is a possibly empty list of lists of indices
           of vertices that form the perimeter of holes.

solids
------

``solid = ['solid', surfaces, material, construction ]``, where:

           ``surfaces`` is the ordered list of surfaces of the solid.
           The order matters: entry ``i`` of ``material`` paints
           surface ``i``.

           ``material`` is the ordered list of paint intents for the
           surfaces (see ``portalmask.materials``), possibly empty.

           ``construction`` records how the solid was made, e.g.
           ``['procedure', 'portalmask.extrude.extrude_outline(...)']``.

A solid is not required to be closed: tube solids are open at both
ends.  ``issolidclosed()`` reports whether every edge is shared by
exactly two faces.
"""

from copy import deepcopy
from functools import reduce

from portalmask.geom import *


def surface(*args):
    """given a surface or a list of surface parameters as arguments,
    return a conforming surface representation.  Checks arguments
    for data-type correctness.
    """
    if len(args) == 0:
        return ['surface',[],[],[],[],[] ]
    if len(args) == 1 and issurface(args[0],fast=False):
        return deepcopy(args[0])
    if 3 <= len(args) <= 5:
        vrts = args[0]
        nrms = args[1]
        facs = args[2]
        bndr = args[3] if len(args) > 3 else []
        hle = args[4] if len(args) > 4 else []
        surf = ['surface',vrts,nrms,facs,bndr,hle]
        if issurface(surf,fast=False):
            return surf
    raise ValueError('bad arguments to surface')

def issurface(s,fast=True):
    """
    Check to see if ``s`` is a valid surface.
    """
    def goodInds(inds,l):
        return all(isinstance(x,int) and 0 <= x < l for x in inds)

    if not isinstance(s,list) or len(s) != 6 or s[0] != 'surface':
        return False
    if fast:
        return True
    verts,norms,faces,boundary,holes = s[1:]
    if not (isinstance(verts,list) and isinstance(norms,list)
            and len(verts) == len(norms)):
        return False
    if not all(ispoint(v) for v in verts):
        return False
    if not all(isvect(n) for n in norms):
        return False
    l = len(verts)
    if any(len(f) != 3 for f in faces):
        return False
    if faces and not goodInds(reduce(lambda x,y: x + list(y),faces,[]),l):
        return False
    if not goodInds(boundary,l):
        return False
    return all(goodInds(h,l) for h in holes)

def surfacebbox(s):
    """return bounding box for surface"""
    if not issurface(s):
        raise ValueError('bad surface passed to surfacebbox')
    return ringbbox(s[1])

def solid(*args):
    """given a solid or a list of solid parameters as arguments,
    return a conforming solid representation.  Checks arguments
    for data-type correctness.
    """
    if len(args) == 0 or (len(args) == 1 and args[0] == []):
        return ['solid',[],[],[] ]

    if len(args) == 1 and issolid(args[0],fast=False):
        return deepcopy(args[0])

    if 1 <= len(args) <= 3:
        surfaces = args[0]
        if not isinstance(surfaces,list) or not all(issurface(s) for s in surfaces):
            raise ValueError('bad arguments to solid')
        material = args[1] if len(args) > 1 else []
        construction = args[2] if len(args) > 2 else []
        if not (isinstance(material,list) and isinstance(construction,list)):
            raise ValueError('bad arguments to solid')
        return ['solid', surfaces, material, construction]

    raise ValueError('bad arguments to solid')

def issolid(s,fast=True):
    """
    Check to see if ``s`` is a solid.  NOTE: this function only determines
    if the data structure is correct, it does not verify that the surfaces
    bound a volume
    """
    if not isinstance(s,list) or len(s) != 4 or s[0] != 'solid':
        return False
    if fast:
        return True
    if not (isinstance(s[1],list) and isinstance(s[2],list) and isinstance(s[3],list)):
        return False
    return all(issurface(srf,fast=False) for srf in s[1])

def solidbbox(sld):
    if not issolid(sld):
        raise ValueError('bad argument to solidbbox')
    box = False
    for surf in sld[1]:
        box = bboxunion(box,surfacebbox(surf))
    return box

def transformsolid(x,m):
    """apply the ``portalmask.xform.Matrix`` ``m`` to every vertex and
    normal of solid ``x``"""
    if not issolid(x):
        raise ValueError('bad solid passed to transformsolid')
    s2 = deepcopy(x)
    for s in s2[1]:
        s[1] = [ m.mul(v) for v in s[1] ]
        s[2] = [ m.mul(n) for n in s[2] ]
    return s2

## edges are keyed by rounded vertex positions, not indices, because
## separate surfaces of one solid do not share vertex lists
def _point_to_key(p):
    return (round(p[0]/epsilon),
            round(p[1]/epsilon),
            round(p[2]/epsilon))

def _canonical_edge_key(p1,p2):
    k1 = _point_to_key(p1)
    k2 = _point_to_key(p2)
    return (min(k1,k2),max(k1,k2))

def issolidclosed(x):
    """
    True if every edge of solid ``x`` is shared by exactly two faces
    across all of its surfaces, i.e. the surfaces bound a volume
    without gaps.
    """
    if not issolid(x,fast=False):
        raise ValueError('invalid solid passed to issolidclosed')

    counts = {}
    for surf in x[1]:
        vertices = surf[1]
        for face in surf[3]:
            p0,p1,p2 = (vertices[i] for i in face)
            for edge in (_canonical_edge_key(p0,p1),
                         _canonical_edge_key(p1,p2),
                         _canonical_edge_key(p2,p0)):
                counts[edge] = counts.get(edge,0) + 1

    return all(c == 2 for c in counts.values())

def volumeof(x):
    """
    Volume enclosed by a closed solid, by the divergence theorem: each
    face contributes the signed volume of the tetrahedron it forms with
    the origin.
    """
    if not issolidclosed(x):
        raise ValueError('solid must be topologically closed to compute volume')

    total = 0.0
    for surf in x[1]:
        vertices = surf[1]
        for face in surf[3]:
            p0 = vertices[face[0]]
            v1 = sub(vertices[face[1]],p0)
            v2 = sub(vertices[face[2]],p0)
            total += dot(p0,cross(v1,v2))/6.0

    return abs(total)
