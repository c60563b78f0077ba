# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


r"""
This module provides the mixin classes that add the dimension specific products to the fixed arity vectors.

Each mixin is combined with :class:`.Vector` (mixin first) and relies on the ``to_list``, ``_other_components`` and
``_with_components`` methods of the vector.  The other operand is converted into the component type of the left
operand before the product is formed.

=======================  =========================  =============================================================
Mixin                    Used by                    Product
=======================  =========================  =============================================================
:class:`ComplexProduct`  :class:`.Vector2`          :math:`(a+bi)(c+di)=(ac-bd)+(ad+bc)i` through ``multiply``
:class:`CrossProduct`    :class:`.Vector3`          the cross product through ``cross``
:class:`HamiltonProduct` :class:`.Vector4`          the Hamilton product of ``(w, x, y, z)`` through ``multiply``
=======================  =========================  =============================================================
"""

from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from vectoral.vectors.vector import Vector


class ComplexProduct:
    """
    Treats a 2 element vector ``(x, y)`` as the complex number :math:`x+yi` when multiplying two vectors.
    """

    __slots__ = ()

    def _vector_product(self, other: 'Vector') -> Any:
        a, b = self.to_list()
        c, d = self._other_components(other, 'multiply').tolist()

        return self._with_components((a * c - b * d, a * d + b * c))


class CrossProduct:
    """
    Adds the cross product to 3 element vectors.
    """

    __slots__ = ()

    def cross(self, other: 'Vector') -> Any:
        r"""
        Computes the cross product :math:`\mathbf{a}\times\mathbf{b}`.

        :param other: the vector on the right of the product
        :return: the cross product with the same class and component type as this vector
        :raises DimensionMismatchError: if `other` does not have 3 components
        """

        x1, y1, z1 = self.to_list()
        x2, y2, z2 = self._other_components(other, 'cross').tolist()

        return self._with_components((y1 * z2 - z1 * y2,
                                      z1 * x2 - x1 * z2,
                                      x1 * y2 - y1 * x2))


class HamiltonProduct:
    r"""
    Treats a 4 element vector ``(w, x, y, z)`` as the quaternion :math:`w+x\mathbf{i}+y\mathbf{j}+z\mathbf{k}` when
    multiplying two vectors.

    The Hamilton product is given by

    .. math::
        \mathbf{q}_1\otimes\mathbf{q}_2=\left[\begin{array}{c}w_1w_2-\mathbf{v}_1^T\mathbf{v}_2\\
        w_1\mathbf{v}_2+w_2\mathbf{v}_1+\mathbf{v}_1\times\mathbf{v}_2\end{array}\right]

    where :math:`\mathbf{v}` is the ``(x, y, z)`` portion.  It is not commutative.
    """

    __slots__ = ()

    def _vector_product(self, other: 'Vector') -> Any:
        w1, x1, y1, z1 = self.to_list()
        w2, x2, y2, z2 = self._other_components(other, 'multiply').tolist()

        return self._with_components((w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
                                      w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
                                      w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
                                      w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2))
