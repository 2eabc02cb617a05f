## foundational computational geometry for portalmask
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

"""foundational geometry for **portalmask**

====================
OVERVIEW
====================

Points, vectors, circles and rings used by the outline and extrusion
stages.  All of the portal construction happens in the XY plane; the
third coordinate only becomes interesting once an outline is extruded.

vectors and points
==================

Vectors are lists of four numbers, ``[x,y,z,w]``.  The ``w``
coordinate is a homogeneous normalization factor, which lets the
placement transforms in ``portalmask.xform`` treat translation as a
matrix product.  Points lie in the ``w=1`` hyperplane, direction
vectors (normals) in the ``w=0`` hyperplane.

``point()`` will make a point from scalars, from an existing point, or
from any ``(x, y)`` or ``(x, y, z)`` sequence, which is how
caller-supplied Point2D values enter the system: ::

   p1 = point(0,0)
   p2 = point((1.5, -2.0))
   p3 = point(2.0,-2.0,5.0)

rings
=====

A ring is a list of three or more points describing a closed
boundary.  The closing segment from the last point back to the first
is implicit; a ring never repeats its first point at the end.

circles
=======

A circle is ``[center, [radius, 0, 360, -1]]``, the full-circle arc
convention of the yapCAD lineage.  The second element is a
quasivector (``w < 0``) so it can never be mistaken for a point.
Circles are kept unsampled in an outline until the extrusion stage
asks for a polygon, so the tessellation tolerance can be chosen late.

bounding boxes
==============

A bounding box is a pair of points ``[min, max]`` spanning the lower
left and upper right corners of a figure.

"""

from math import *
from copy import deepcopy

## constants
epsilon=0.000005
pi2 = 2.0*pi

## operations on scalars
## -----------------------

## booleans are ints as far as isinstance() is concerned, but True and
## False are never coordinates
def isgoodnum(n):
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n,bool)) and isinstance(n,(int,float))

def close(a,b):
    """ are two scalars the same within epsilon
    """
    return abs(a-b) < epsilon

## operations on vectors
## ------------------------

def isvect(x):
    """
    check to see if argument is a proper vector for our purposes
    """
    return isinstance(x,list) and len(x) == 4 and all(isgoodnum(v) for v in x)

## R^3 -> R^3 functions: ignore w component
def add(a,b):
    """ 3 vector, `a + b`"""
    return [a[0]+b[0],a[1]+b[1],a[2]+b[2],1.0]

def sub(a,b):
    """ 3 vector, `a - b`"""
    return [a[0]-b[0],a[1]-b[1],a[2]-b[2],1.0]

def scale3(a,c):
    """ 3 vector, vector ``a`` times scalar ``c``"""
    return [a[0]*c,a[1]*c,a[2]*c,1.0]

def cross(a,b):
    """Compute the cross product of a x b, assuming that both
    fall into the w=1 hyperplane
    """
    return [ a[1]*b[2] - a[2]*b[1],
             a[2]*b[0] - a[0]*b[2],
             a[0]*b[1] - a[1]*b[0],
             1.0 ]

def dot(a,b):
    """ 3 vector ``a`` dot ``b`` """
    return a[0]*b[0]+a[1]*b[1]+a[2]*b[2]

def dot4(a,b):
    return a[0]*b[0]+a[1]*b[1]+a[2]*b[2]+a[3]*b[3]

def mag(a):
    """ compute the magnitude of 3 vector ``a``"""
    return sqrt(a[0]*a[0]+a[1]*a[1]+a[2]*a[2])

def dist(a,b):
    """ euclidean distance between two points ``a`` and ``b``"""
    return mag(sub(a,b))

## points
## ------

def point(x=False,y=False,z=False,w=False):
    """Point creation from a point, an (x, y[, z]) sequence, or scalars"""
    if ispoint(x):
        return deepcopy(x)
    r = [0,0,0,1]
    if isinstance(x,(tuple,list)):
        if len(x) < 2 or not (isgoodnum(x[0]) and isgoodnum(x[1])):
            raise ValueError('bad coordinate sequence passed to point(): {}'.format(x))
        r[0]=x[0]
        r[1]=x[1]
        if len(x) > 2 and isgoodnum(x[2]):
            r[2]=x[2]
        return r
    if isgoodnum(x):
        r[0]=x
        if isgoodnum(y):
            r[1]=y
            if isgoodnum(z):
                r[2]=z
                if isgoodnum(w):
                    r[3]=w
    if r[3] > 0:
        return r
    else:
        raise ValueError('bad w argument to point()')

def ispoint(x):
    """ is it a point?"""
    return isvect(x) and x[3] > 0.0

## circles
## -------

def circle(c,r):
    """Construct a full circle of radius ``r`` centered on point ``c``"""
    if not isgoodnum(r) or r < 0:
        raise ValueError('bad radius passed to circle(): {}'.format(r))
    return [ point(c), [r,0,360,-1] ]

def iscircle(a):
    """ is it a circle? """
    if not (isinstance(a,list) and len(a) == 2):
        return False
    if not (ispoint(a[0]) and isvect(a[1])):
        return False
    r,start,end,w = a[1]
    ## integer 0/360 flags a true full circle
    return w == -1 and r >= 0 and start == 0 and end == 360

def circlebbox(c):
    r = c[1][0]
    return [ sub(c[0],point(r,r)), add(c[0],point(r,r)) ]

## number of segments needed so that a polygon inscribed in a circle of
## radius ``r`` deviates from it by no more than ``tol`` (the sagitta
## of each chord)
def circlesegments(r,tol,minseg=4):
    if r <= epsilon:
        return minseg
    ratio = 1.0 - max(tol,epsilon)/r
    ratio = max(-1.0,min(1.0,ratio))
    halfang = acos(ratio)
    if halfang <= epsilon:
        raise ValueError('tolerance too small to tessellate circle of radius {}'.format(r))
    return max(minseg,int(ceil(pi/halfang)))

def circle2ring(c,tol,minseg=4):
    """Sample circle ``c`` into a counter-clockwise ring whose chordal
    deviation from the true circle is no more than ``tol``
    """
    cen = c[0]
    r = c[1][0]
    n = circlesegments(r,tol,minseg)
    step = pi2/n
    return [ point(cen[0]+r*cos(i*step),cen[1]+r*sin(i*step),cen[2])
             for i in range(n) ]

## bounding boxes
## --------------

def ringbbox(a):
    """Compute the bounding box of a ring, or ``False`` if it is empty"""
    if len(a) == 0:
        return False
    minx = maxx = a[0][0]
    miny = maxy = a[0][1]
    minz = maxz = a[0][2]
    for p in a[1:]:
        minx = min(minx,p[0])
        maxx = max(maxx,p[0])
        miny = min(miny,p[1])
        maxy = max(maxy,p[1])
        minz = min(minz,p[2])
        maxz = max(maxz,p[2])
    return [ point(minx,miny,minz),point(maxx,maxy,maxz) ]

def bbox(x):
    """bounding box of a ring or circle"""
    if iscircle(x):
        return circlebbox(x)
    elif isinstance(x,list):
        return ringbbox(x)
    raise ValueError('bad argument to bbox(): {}'.format(x))

def bboxunion(b1,b2):
    if not b1:
        return b2
    if not b2:
        return b1
    return [ point(min(b1[0][0],b2[0][0]),
                   min(b1[0][1],b2[0][1]),
                   min(b1[0][2],b2[0][2])),
             point(max(b1[1][0],b2[1][0]),
                   max(b1[1][1],b2[1][1]),
                   max(b1[1][2],b2[1][2])) ]

## planar ring operations
## ----------------------

## signed area of a ring projected onto the XY plane; positive for
## right-hand (counter-clockwise) point order
def ringarea(a):
    area = 0.0
    l = len(a)
    for i in range(l):
        x0,y0 = a[i][0],a[i][1]
        x1,y1 = a[(i+1)%l][0],a[(i+1)%l][1]
        area += x0*y1 - x1*y0
    return area/2.0

## crossing-number inside test.  Counts the ring edges crossed by a ray
## running from ``p`` in the +x direction; odd means inside.
def isinsideringXY(a,p):
    """is point ``p`` inside ring ``a``, both in the same XY plane"""
    inside = False
    l = len(a)
    px,py = p[0],p[1]
    for i in range(l):
        x0,y0 = a[i][0],a[i][1]
        x1,y1 = a[(i+1)%l][0],a[(i+1)%l][1]
        if (y0 > py) != (y1 > py):
            xc = x0 + (py-y0)*(x1-x0)/(y1-y0)
            if px < xc:
                inside = not inside
    return inside

