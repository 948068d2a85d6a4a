#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import numpy as np

from simmath.src.MathLogging import MATH_LOGGER
from simmath.src.Object import Object
from simmath.src.vecmath import (
    Vector3r,
    asVector3r,
    vectorEqual,
    vectorMax,
    vectorMin,
    vectorToString,
)


@MATH_LOGGER
class Box(Object):
    """
    Axis-aligned bounding box in 3D space.

    The box is stored as its minimum and maximum corners. Constructors always
    produce min <= max on every axis; the ``min``/``max`` accessors expose the
    underlying arrays and may break that ordering if the caller edits them.

    Box(), Box(box), Box(v1, v2) and Box(x1, y1, z1, x2, y2, z2) are accepted.
    """

    __hash__ = None
    # Let numpy defer to Box in mixed arithmetic
    __array_ufunc__ = None

    def __init__(self, *args):
        if len(args) == 0:
            self._min = Vector3r()
            self._max = Vector3r()
        elif len(args) == 1 and isinstance(args[0], Box):
            self._min = args[0]._min.copy()
            self._max = args[0]._max.copy()
        elif len(args) == 2:
            v1 = asVector3r(args[0])
            v2 = asVector3r(args[1])
            self._min = vectorMin(v1, v2)
            self._max = vectorMax(v1, v2)
        elif len(args) == 6:
            self.__init__(Vector3r(*args[:3]), Vector3r(*args[3:]))
        else:
            raise ValueError("Box requires 0, 1, 2 or 6 arguments")

    # Corner access. No re-normalization happens here.

    @property
    def min(self):
        """Minimum corner (mutable, unchecked)."""
        return self._min

    @min.setter
    def min(self, value):
        self._min = asVector3r(value)

    @property
    def max(self):
        """Maximum corner (mutable, unchecked)."""
        return self._max

    @max.setter
    def max(self, value):
        self._max = asVector3r(value)

    def isValid(self):
        """Check that min <= max on every axis."""
        return bool(np.all(self._min <= self._max))

    # Measurements

    def xLength(self):
        """Get the length along the x dimension."""
        return float(self._max[0] - self._min[0])

    def yLength(self):
        """Get the length along the y dimension."""
        return float(self._max[1] - self._min[1])

    def zLength(self):
        """Get the length along the z dimension."""
        return float(self._max[2] - self._min[2])

    def size(self):
        """Get the size of the box as (xLength, yLength, zLength)."""
        return Vector3r(self.xLength(), self.yLength(), self.zLength())

    def center(self):
        """Get the box center."""
        return self._min + self.size() / 2

    # Union algebra

    def merge(self, other):
        """Grow this box so that it also contains other."""
        self._min = vectorMin(self._min, other._min)
        self._max = vectorMax(self._max, other._max)

    def copy(self):
        """Return an independent copy of this box."""
        return Box(self)

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def __add__(self, other):
        if not isinstance(other, Box):
            return NotImplemented
        result = self.copy()
        result.merge(other)
        return result

    def __iadd__(self, other):
        if not isinstance(other, Box):
            return NotImplemented
        self.merge(other)
        return self

    def __sub__(self, vec):
        """Translate both corners by -vec."""
        if isinstance(vec, Box):
            return NotImplemented
        v = asVector3r(vec)
        result = Box()
        result._min = self._min - v
        result._max = self._max - v
        return result

    # Comparison

    def __eq__(self, other):
        if not isinstance(other, Box):
            return NotImplemented
        return vectorEqual(self._min, other._min) and vectorEqual(
            self._max, other._max
        )

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def intersects(self, other):
        """
        Test box intersection.

        Touching boxes count as intersecting. Only meaningful when both boxes
        have min <= max on every axis.
        """
        if not (self.isValid() and other.isValid()):
            self.debug("intersects() on a box with min > max: %s / %s", self, other)

        for axis in range(3):
            if self._max[axis] < other._min[axis]:
                return False
            if other._max[axis] < self._min[axis]:
                return False
        return True

    # Output

    def write(self, stream):
        """Write the box to a text stream and return the stream."""
        stream.write(str(self))
        return stream

    def __str__(self):
        return f"Min[{vectorToString(self._min)}] Max[{vectorToString(self._max)}]"

    def __repr__(self):
        return (
            f"Box(min=[{self._min[0]}, {self._min[1]}, {self._min[2]}], "
            f"max=[{self._max[0]}, {self._max[1]}, {self._max[2]}])"
        )
