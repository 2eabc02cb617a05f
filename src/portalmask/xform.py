## homogeneous placement transforms for portalmask
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

## A matrix is a list of four row vectors.  We assume Mx means a column
## vector.  Only the affine transforms the portal placement needs are
## provided; the inverse of each is built analytically by passing
## ``inverse=True`` to its constructor function.

import portalmask.geom as geom


class Matrix:
    """4x4 transformation matrix for homogeneous 3D coordinates"""

    def __init__(self,a=False):
        self.m = [[1,0,0,0],
                  [0,1,0,0],
                  [0,0,1,0],
                  [0,0,0,1]]

        if isinstance(a,Matrix):
            self.m = [list(row) for row in a.m]
        elif isinstance(a,(tuple,list)):
            if len(a) != 4 or any(len(row) != 4 for row in a):
                raise ValueError('bad shape in matrix initialization: {}'.format(a))
            for i in range(4):
                for j in range(4):
                    x = a[i][j]
                    if not geom.isgoodnum(x):
                        raise ValueError('bad element in matrix initialization: {}'.format(x))
                    self.m[i][j]=x
        elif a is not False:
            raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))

    def __repr__(self):
        return "Matrix({},{},{},{})".format(*self.m)

    def __eq__(self,other):
        if not isinstance(other,Matrix):
            return NotImplemented
        return all(geom.close(self.m[i][j],other.m[i][j])
                   for i in range(4) for j in range(4))

    def get(self,i,j):
        if i < 0 or i > 3 or j < 0 or j > 3:
            raise ValueError('bad index passed to get: {},{}'.format(i,j))
        return self.m[i][j]

    def getrow(self,i):
        return list(self.m[i])

    def getcol(self,j):
        return [self.m[0][j],self.m[1][j],self.m[2][j],self.m[3][j]]

    # matrix multiply.  If x is a matrix, compute MX.  If x is a
    # vector, compute Mx.
    def mul(self,x):
        if isinstance(x,Matrix):
            return Matrix([[geom.dot4(self.getrow(i),x.getcol(j))
                            for j in range(4)] for i in range(4)])
        elif geom.isvect(x):
            return [geom.dot4(self.m[i],x) for i in range(4)]
        raise ValueError('bad thing passed to mul(): {}'.format(x))

    @property
    def translation(self):
        """the translation component as a direction vector"""
        return [self.m[0][3],self.m[1][3],self.m[2][3],0]


def Identity():
    return Matrix()

def Translation(delta,inverse=False):
    if inverse:
        delta = geom.scale3(delta,-1.0)
    T = [[1,0,0,delta[0]],
         [0,1,0,delta[1]],
         [0,0,1,delta[2]],
         [0,0,0,1]]
    return Matrix(T)
