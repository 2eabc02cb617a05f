## exception types for portalmask
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

"""Exceptions raised by portal construction."""


class PortalError(Exception):
    """Base exception for portalmask errors."""
    pass


class UnsupportedOperation(PortalError, NotImplementedError):
    """The requested operation is deliberately not implemented.

    Raised when asked to rebuild a portal from persisted or encoded
    state, and when a profile cannot honour a request (re-shaping a
    tube, which has no outline).
    """
    pass


class DegenerateInput(PortalError, ValueError):
    """A profile parameter cannot yield a valid ring.

    Profile builders do not raise this: they skip the ring and log a
    warning.  It is raised only by strict callers of
    :meth:`portalmask.outline.OutlinePath.add_ring`.
    """

    def __init__(self, message, points=None):
        super().__init__(message)
        self.points = points
