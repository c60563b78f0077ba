# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
This module provides the fixed arity vectors :class:`Vector2`, :class:`Vector3`, and :class:`Vector4`.

Each works with any :class:`.ComponentType` and only differs from :class:`.Vector` in the names of its components and
the products that are defined for its dimension.
"""

import math

from typing import Any, TYPE_CHECKING

from vectoral.vectors.capabilities import ComplexProduct, CrossProduct, HamiltonProduct
from vectoral.vectors.vector import Vector

if TYPE_CHECKING:
    from vectoral.vectors.quaternion import Quaternion


class Vector2(ComplexProduct, Vector):
    """
    A 2 element vector ``(x, y)``.

    Multiplying two :class:`Vector2` instances gives their complex product::

        >>> Vector2(0., 1.) * Vector2(0., 1.)
        Vector2{x=-1.0, y=0.0}
    """

    __slots__ = ()

    _DIMENSION = 2
    _FIELD_NAMES = ('x', 'y')

    @property
    def x(self) -> Any:
        return self[0]

    @property
    def y(self) -> Any:
        return self[1]

    def rotate(self, angle: float) -> 'Vector2':
        """
        Rotates this vector counter-clockwise about the origin.

        :param angle: the angle to rotate by in radians
        :return: the rotated vector (truncated toward zero for integer vectors)
        """

        cos_angle = math.cos(angle)
        sin_angle = math.sin(angle)

        x, y = self.to_list()

        return self._with_components((x * cos_angle - y * sin_angle, x * sin_angle + y * cos_angle))


class Vector3(CrossProduct, Vector):
    """
    A 3 element vector ``(x, y, z)``.

    Multiplying two :class:`Vector3` instances is not defined; use :meth:`dot` or :meth:`cross` instead.
    """

    __slots__ = ()

    _DIMENSION = 3
    _FIELD_NAMES = ('x', 'y', 'z')

    POSITIVE_X: 'Vector3'
    NEGATIVE_X: 'Vector3'
    POSITIVE_Y: 'Vector3'
    NEGATIVE_Y: 'Vector3'
    POSITIVE_Z: 'Vector3'
    NEGATIVE_Z: 'Vector3'

    @property
    def x(self) -> Any:
        return self[0]

    @property
    def y(self) -> Any:
        return self[1]

    @property
    def z(self) -> Any:
        return self[2]

    def quaternion(self) -> 'Quaternion':
        """
        The pure quaternion ``(0, x, y, z)`` formed from this vector.
        """

        from vectoral.vectors.quaternion import Quaternion

        return Quaternion(0, *(float(value) for value in self.to_list()))

    def rotate(self, rotation: 'Quaternion') -> 'Vector3':
        """
        Rotates this vector by a unit quaternion.

        This is a convenience for ``rotation.rotate(self)``.  The result keeps this vector's component type.

        :param rotation: the rotation to apply
        :return: the rotated vector
        """

        return rotation.rotate(self).as_type(self.component_type)


class Vector4(HamiltonProduct, Vector):
    """
    A 4 element vector ``(w, x, y, z)``.

    Multiplying two :class:`Vector4` instances gives their Hamilton (quaternion) product.
    """

    __slots__ = ()

    _DIMENSION = 4
    _FIELD_NAMES = ('w', 'x', 'y', 'z')

    @property
    def w(self) -> Any:
        return self[0]

    @property
    def x(self) -> Any:
        return self[1]

    @property
    def y(self) -> Any:
        return self[2]

    @property
    def z(self) -> Any:
        return self[3]


Vector2.ZERO = Vector2(0., 0.)
Vector3.ZERO = Vector3(0., 0., 0.)
Vector4.ZERO = Vector4(0., 0., 0., 0.)

Vector3.POSITIVE_X = Vector3(1., 0., 0.)
Vector3.NEGATIVE_X = Vector3(-1., 0., 0.)
Vector3.POSITIVE_Y = Vector3(0., 1., 0.)
Vector3.NEGATIVE_Y = Vector3(0., -1., 0.)
Vector3.POSITIVE_Z = Vector3(0., 0., 1.)
Vector3.NEGATIVE_Z = Vector3(0., 0., -1.)
