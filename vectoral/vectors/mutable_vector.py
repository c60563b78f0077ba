# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
This module provides the :class:`MutableVector` class, a variable length vector that can be modified in place.

Mutable vectors are meant for accumulation::

    >>> from vectoral import MutableVector, Vector3
    >>> total = MutableVector.zeros(3)
    >>> for point in (Vector3(1., 2., 3.), Vector3(2., 2., 2.)):
    ...     total += point
    >>> total.freeze()
    Vector3{x=3.0, y=4.0, z=5.0}

Because the length of a mutable vector is not part of its type, no vector-vector product is defined for it.
"""

from typing import Any, Iterable

import numpy as np

from vectoral._typing import SCALAR
from vectoral.errors import UnsupportedOperationError
from vectoral.vectors.component_types import ComponentType
from vectoral.vectors.vector import Vector, _is_scalar


class MutableVector(Vector):
    """
    A variable length vector whose components can be changed in place.

    Unlike the other vectors, mutable vectors are not hashable.  The non in-place arithmetic methods
    (:meth:`add`, ``+``, ...) still return new :class:`MutableVector` instances.
    """

    __slots__ = ()

    _MUTABLE = True

    __hash__ = None

    def __init__(self, components: Iterable[Any] = (), component_type: ComponentType | str | None = None):
        """
        :param components: the initial components
        :param component_type: the type to store the components as.  If ``None`` it is inferred from the components
        """

        if isinstance(components, (Vector, np.ndarray)):
            super().__init__(components, component_type=component_type)
        else:
            super().__init__(list(components), component_type=component_type)

    @classmethod
    def zeros(cls, dimension: int, component_type: ComponentType | str | None = None) -> 'MutableVector':
        """
        Creates a mutable vector of `dimension` zeros.
        """

        ctype = ComponentType.coerce(component_type)
        return cls._from_array(ctype.convert([ctype.zero] * dimension), ctype)

    def set(self, index: int, value: SCALAR) -> None:
        """
        Replaces a single component, converting `value` into this vector's component type.

        :raises IndexError: if `index` is out of range
        """

        self._data[index] = self._component_type.convert([value])[0]

    def __setitem__(self, index: int, value: SCALAR) -> None:
        self.set(index, value)

    def append(self, value: SCALAR) -> None:
        """
        Adds a component to the end of the vector.
        """

        self._replace(np.concatenate([self._data, self._component_type.convert([value])]))

    def resize(self, dimension: int) -> None:
        """
        Changes the length of the vector, truncating extra components or padding with zeros.

        :raises ValueError: if `dimension` is negative
        """

        if dimension < 0:
            raise ValueError(f'A vector cannot have a negative length ({dimension})')

        current = len(self)

        if dimension <= current:
            self._replace(self._data[:dimension].copy())
        else:
            padding = self._component_type.convert([self._component_type.zero] * (dimension - current))
            self._replace(np.concatenate([self._data, padding]))

    def _replace(self, array: np.ndarray) -> None:
        if array.dtype != self._data.dtype:
            array = array.astype(self._data.dtype)
        self._data = array
        self._data.flags.writeable = True

    def multiply(self, other: 'Vector | SCALAR') -> 'MutableVector':
        """
        Multiplies every component by a scalar.

        :raises UnsupportedOperationError: if `other` is a vector
        """

        if isinstance(other, Vector):
            raise UnsupportedOperationError('Vector multiplication is not defined for mutable vectors. '
                                            'Use dot instead')

        return super().multiply(other)

    def __iadd__(self, other: Any) -> 'MutableVector':
        if not isinstance(other, Vector) and not _is_scalar(other):
            return NotImplemented

        self._data[:] = self.add(other)._data
        return self

    def __isub__(self, other: Any) -> 'MutableVector':
        if not isinstance(other, Vector) and not _is_scalar(other):
            return NotImplemented

        self._data[:] = self.subtract(other)._data
        return self

    def freeze(self) -> Vector:
        """
        Copies this vector into an immutable vector of the class matching its length (see :meth:`.Vector.of`).
        """

        return Vector.of(self.array, component_type=self._component_type)
