# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


r"""
This module provides the :class:`Quaternion` class, the rotation primitive of vectoral.

Quaternions are stored scalar first as :math:`\mathbf{q}=[w, x, y, z]` which represents
:math:`w+x\mathbf{i}+y\mathbf{j}+z\mathbf{k}`.  For a rotation of :math:`\theta` radians about the unit axis
:math:`\hat{\mathbf{a}}` (following the right hand rule)

.. math::
    \mathbf{q}=\left[\begin{array}{c}\text{cos}(\frac{\theta}{2})\\
    \text{sin}(\frac{\theta}{2})\hat{\mathbf{a}}\end{array}\right]

and a vector :math:`\mathbf{v}` is rotated as :math:`\mathbf{q}\otimes[0, \mathbf{v}]\otimes\mathbf{q}^{-1}` where
:math:`\otimes` is the Hamilton product.  Rotations compose right to left, so ``(q2 * q1).rotate(v)`` applies ``q1``
first.

Unit length is not enforced on construction; methods that interpret a quaternion as a rotation assume it is a unit
quaternion unless stated otherwise.
"""

import math

from typing import Any, Sequence

import numpy as np

from vectoral._typing import ARRAY_LIKE, DOUBLE_ARRAY
from vectoral.scalars import clamp
from vectoral.vectors.component_types import ComponentType
from vectoral.vectors.fixed import Vector3, Vector4
from vectoral.vectors.vector import Vector


class Quaternion(Vector4):
    """
    A quaternion ``(w, x, y, z)`` of doubles with the Hamilton product as its multiplication.

    All arithmetic returns :class:`Quaternion` instances::

        >>> from math import pi
        >>> from vectoral import Quaternion, Vector3
        >>> q = Quaternion.from_axis_angle(Vector3.POSITIVE_Z, pi/2)
        >>> q.rotate(Vector3.POSITIVE_X).is_close(Vector3.POSITIVE_Y)
        True
        >>> (q * q).angle()
        3.14159...
    """

    __slots__ = ()

    IDENTITY: 'Quaternion'
    """
    The identity quaternion ``(1, 0, 0, 0)`` which represents no rotation
    """

    def __init__(self, w: Any = 1.0, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        """
        :param w: the scalar term, or a length 4 sequence/array/vector of ``(w, x, y, z)``
        :param x: the i term
        :param y: the j term
        :param z: the k term
        """

        if isinstance(w, (Sequence, np.ndarray, Vector)) and not isinstance(w, str):
            super().__init__(w, component_type=ComponentType.DOUBLE)
        else:
            super().__init__(w, x, y, z, component_type=ComponentType.DOUBLE)

    @classmethod
    def _from_array(cls, array: np.ndarray, component_type: ComponentType) -> 'Quaternion':
        if component_type is not ComponentType.DOUBLE:
            array = ComponentType.DOUBLE.convert(array)
        return super()._from_array(array, ComponentType.DOUBLE)

    @classmethod
    def from_parts(cls, scalar: float, vector: Vector3 | ARRAY_LIKE) -> 'Quaternion':
        """
        Builds a quaternion from its scalar and vector parts.
        """

        x, y, z = (float(value) for value in vector)
        return cls(float(scalar), x, y, z)

    @classmethod
    def from_axis_angle(cls, axis: Vector3 | ARRAY_LIKE, angle: float) -> 'Quaternion':
        """
        Builds the unit quaternion for a rotation of `angle` radians about `axis` (right hand rule).

        :param axis: the axis of rotation.  It does not need to be unit length
        :param angle: the angle of rotation in radians
        :return: the rotation quaternion
        :raises UnsupportedOperationError: if the axis has a length of 0
        """

        unit_axis = Vector3(axis, component_type=ComponentType.DOUBLE).normalize()
        half_angle = angle / 2

        return cls.from_parts(math.cos(half_angle), unit_axis * math.sin(half_angle))

    def as_type(self, component_type: ComponentType | str) -> Vector:
        """
        Quaternions are always stored as doubles, so converting to another component type gives a :class:`.Vector4`.
        """

        ctype = ComponentType.coerce(component_type)

        if ctype is ComponentType.DOUBLE:
            return self

        return Vector4._from_array(ctype.convert(self._data), ctype)

    # ------------------------------------------------------------------------------------------------------------------
    # parts

    @property
    def scalar(self) -> float:
        """
        The scalar (real) part ``w``.
        """
        return self[0]

    @property
    def vector(self) -> Vector3:
        """
        The vector (imaginary) part ``(x, y, z)``.
        """
        return Vector3._from_array(self._data[1:].copy(), ComponentType.DOUBLE)

    # ------------------------------------------------------------------------------------------------------------------
    # algebra

    def conjugate(self) -> 'Quaternion':
        """
        Negates the vector part.  For unit quaternions this is the inverse rotation.
        """

        return self._like(self._data * np.array([1., -1., -1., -1.]))

    def inverse(self) -> 'Quaternion':
        r"""
        The multiplicative inverse :math:`\mathbf{q}^*/\|\mathbf{q}\|^2`.

        A quaternion with a magnitude of 0 has no inverse; :attr:`IDENTITY` is returned in that case.
        """

        norm2 = self.magnitude2()

        if norm2 == 0:
            return Quaternion.IDENTITY

        return self.conjugate().divide(norm2)

    def rotate(self, vector: Vector3 | ARRAY_LIKE) -> Vector3:
        """
        Rotates a vector by this quaternion, computing :math:`\\mathbf{q}\\otimes[0, \\mathbf{v}]\\otimes\\mathbf{q}^{-1}`.

        :param vector: the vector to rotate
        :return: the rotated vector as a ``DOUBLE`` :class:`.Vector3`
        """

        if not isinstance(vector, Vector3):
            vector = Vector3(vector, component_type=ComponentType.DOUBLE)

        return self.multiply(vector.quaternion()).multiply(self.inverse()).vector

    # ------------------------------------------------------------------------------------------------------------------
    # rotation properties

    def axis(self) -> Vector3:
        """
        The unit axis of the rotation represented by this unit quaternion.

        When there is no rotation (``|w| >= 1``) the zero vector is returned.
        """

        w = self.scalar

        if abs(w) >= 1:
            return Vector3.ZERO

        return self.vector.divide(math.sqrt(1 - w * w)).normalize()

    def angle(self) -> float:
        """
        The angle of the rotation represented by this unit quaternion in radians.

        When ``|w| > 1`` the quaternion is not a rotation and 0 is returned.
        """

        w = self.scalar

        if abs(w) > 1:
            return 0.0

        return 2 * math.acos(w)

    def pitch(self) -> float:
        """
        The counter-clockwise rotation about the x axis in radians.
        """

        w, x, y, z = self.to_list()
        return math.atan2(2 * (w * x + y * z), 1 - 2 * (x * x + y * y))

    def yaw(self) -> float:
        """
        The counter-clockwise rotation about the y axis in radians.
        """

        w, x, y, z = self.to_list()
        return math.atan2(2 * (w * y - z * x), 1 - 2 * (y * y + z * z))

    def roll(self) -> float:
        """
        The counter-clockwise rotation about the z axis in radians.
        """

        w, x, y, z = self.to_list()
        return math.atan2(2 * (w * z + x * y), 1 - 2 * (y * y + z * z))

    def scale(self, power: float) -> 'Quaternion':
        """
        Scales the rotation angle of this unit quaternion by `power` while keeping the axis.

        ``q.scale(0.5)`` is the rotation half way from no rotation to ``q`` and ``q.scale(2)`` is ``q * q``.

        :param power: the factor to scale the rotation angle by
        :return: the scaled rotation
        """

        w = self.scalar

        if w >= 1:
            return Quaternion.IDENTITY

        half_angle = math.acos(clamp(w, -1.0, 1.0))

        return self.from_parts(math.cos(half_angle * power),
                               self.vector * (math.sin(half_angle * power) / math.sin(half_angle)))

    def rotation_matrix(self) -> DOUBLE_ARRAY:
        r"""
        The 3x3 rotation matrix equivalent to this unit quaternion.

        The matrix satisfies ``q.rotation_matrix() @ v == q.rotate(v)`` for unit quaternions:

        .. math::
            \mathbf{T}=\left[\begin{array}{ccc}1-2(y^2+z^2) & 2(xy-wz) & 2(xz+wy)\\
            2(xy+wz) & 1-2(x^2+z^2) & 2(yz-wx)\\
            2(xz-wy) & 2(yz+wx) & 1-2(x^2+y^2)\end{array}\right]
        """

        w, x, y, z = self.to_list()

        return np.array([[1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
                         [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
                         [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)]])


Quaternion.IDENTITY = Quaternion(1.0, 0.0, 0.0, 0.0)
