#!/usr/bin/env python3
# -*- coding: utf-8 -*-


class Object:
    """Base class for SimMath value types."""

    def getClassName(self) -> str:
        """Returns the class name of this instance."""
        return self.__class__.__name__

    def toString(self) -> str:
        """Returns the printable form of this object."""
        return str(self)

    def isA(self, classType) -> bool:
        return isinstance(self, classType)

    def cast(self, classType):
        """Returns this object as the given type if possible, otherwise raises TypeError."""
        if not self.isA(classType):
            raise TypeError(
                f"Cannot cast {self.getClassName()} to {classType.__name__}"
            )
        return self
