r"""
This package provides the vector types of vectoral.

=============================  ==========================================================================================
Class                          Description
=============================  ==========================================================================================
:class:`.Vector`               The immutable base vector of any length which implements the shared arithmetic contract
:class:`.Vector2`              A 2 element vector ``(x, y)`` whose product with another :class:`.Vector2` is the
                               complex product
:class:`.Vector3`              A 3 element vector ``(x, y, z)`` with the cross product and no vector-vector product
:class:`.Vector4`              A 4 element vector ``(w, x, y, z)`` whose product is the Hamilton product
:class:`.Quaternion`           A :class:`.Vector4` of doubles with rotation specific operations
:class:`.MutableVector`        A variable length vector that can be modified in place for accumulation
=============================  ==========================================================================================

Every vector stores its components with one of the :class:`.ComponentType` values (``DOUBLE``, ``FLOAT``, ``INT``,
``LONG``, or ``REAL`` for :class:`.RealNumber` components).
"""

from vectoral.vectors.component_types import ComponentType
from vectoral.vectors.vector import Vector
from vectoral.vectors.capabilities import ComplexProduct, CrossProduct, HamiltonProduct
from vectoral.vectors.fixed import Vector2, Vector3, Vector4
from vectoral.vectors.quaternion import Quaternion
from vectoral.vectors.mutable_vector import MutableVector

__all__ = ['ComponentType', 'Vector', 'ComplexProduct', 'CrossProduct', 'HamiltonProduct',
           'Vector2', 'Vector3', 'Vector4', 'Quaternion', 'MutableVector']
