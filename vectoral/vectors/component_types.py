# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
This module defines the component types that vectors may be built from and how values are coerced into them.

=================  ===================  ===============================================================================
Component type     Storage              Notes
=================  ===================  ===============================================================================
``DOUBLE``         ``numpy.float64``    the default
``FLOAT``          ``numpy.float32``
``INT``            ``numpy.int32``      results are truncated toward zero, out of range values raise
``LONG``           ``numpy.int64``      results are truncated toward zero, out of range values raise
``REAL``           ``object``           each component is a :class:`.RealNumber`
=================  ===================  ===============================================================================
"""

import math

from enum import Enum

from typing import Any, Iterable

import numpy as np

from vectoral.real_number import RealNumber


class ComponentType(Enum):
    """
    The numeric type of the components of a vector.
    """

    DOUBLE = 'float64'
    FLOAT = 'float32'
    INT = 'int32'
    LONG = 'int64'
    REAL = 'real'

    @property
    def dtype(self) -> np.dtype:
        """
        The numpy dtype used to store components of this type.
        """

        if self is ComponentType.REAL:
            return np.dtype(object)

        return np.dtype(self.value)

    @property
    def is_integer(self) -> bool:
        return self in (ComponentType.INT, ComponentType.LONG)

    @property
    def is_real(self) -> bool:
        return self is ComponentType.REAL

    @property
    def zero(self) -> Any:
        """
        The additive identity for this component type.
        """

        if self is ComponentType.REAL:
            return RealNumber.ZERO

        return self.dtype.type(0)

    @classmethod
    def coerce(cls, value: 'ComponentType | str | np.dtype | type | None') -> 'ComponentType':
        """
        Interprets a component type given by name, dtype, or python type.

        Accepts a :class:`ComponentType`, its name or value (``'DOUBLE'``, ``'float64'``, ``'real'``), a numpy dtype
        or scalar type, or the :class:`.RealNumber` class.  ``None`` gives :attr:`DOUBLE`.

        :raises ValueError: if the value is not understood
        """

        if value is None:
            return cls.DOUBLE

        if isinstance(value, ComponentType):
            return value

        if value is RealNumber:
            return cls.REAL

        if isinstance(value, str):
            upper = value.upper()
            if upper in cls.__members__:
                return cls[upper]
            for member in cls:
                if member.value == value.lower():
                    return member
            raise ValueError(f'Unknown component type {value!r}')

        dtype = np.dtype(value)
        for member in cls:
            if member is not ComponentType.REAL and member.dtype == dtype:
                return member

        raise ValueError(f'Unsupported component dtype {dtype}')

    @classmethod
    def infer(cls, values: Iterable[Any]) -> 'ComponentType':
        """
        Picks a component type for raw values.

        Any :class:`.RealNumber` gives :attr:`REAL`, all (non-boolean) integers give :attr:`LONG`, and anything else
        gives :attr:`DOUBLE`.
        """

        values = list(values)

        if any(isinstance(value, RealNumber) for value in values):
            return cls.REAL

        if values and all(isinstance(value, (int, np.integer)) and not isinstance(value, bool) for value in values):
            return cls.LONG

        return cls.DOUBLE

    def convert(self, values: Iterable[Any]) -> np.ndarray:
        """
        Converts raw values into a new (writeable) 1D numpy array of this component type.

        Integer types truncate floating point input toward zero and refuse values that cannot be stored instead of
        wrapping them around.  :attr:`REAL` converts plain numbers with :meth:`.RealNumber.from_float`.

        :raises OverflowError: if a value is infinite or outside of the range of an integer type
        :raises ValueError: if a NaN value is converted into an integer type
        """

        if self is ComponentType.REAL:
            values = list(values)
            out = np.empty(len(values), dtype=object)
            for index, value in enumerate(values):
                out[index] = RealNumber.from_float(value)
            return out

        array = np.asarray(values)

        if self.is_integer:
            return self._convert_integers(array)

        if array.dtype == object:
            array = np.array([float(value) for value in array.ravel()], dtype=np.float64)

        return np.array(array.ravel(), dtype=self.dtype)

    def _convert_integers(self, array: np.ndarray) -> np.ndarray:
        limits = np.iinfo(self.dtype)

        if array.dtype.kind in 'iub':
            if array.size and (array.min() < limits.min or array.max() > limits.max):
                raise OverflowError(f'Integer components must be within [{limits.min}, {limits.max}] for {self.name}')

            return np.array(array.ravel(), dtype=self.dtype)

        out = []
        for value in array.ravel().tolist():
            if isinstance(value, complex):
                value = value.real
            elif isinstance(value, np.integer):
                value = int(value)

            if not isinstance(value, int):
                value = float(value)

                if math.isnan(value):
                    raise ValueError(f'Cannot store NaN in a {self.name} component')
                if math.isinf(value):
                    raise OverflowError(f'Cannot store {value} in a {self.name} component')

                value = int(value)

            if not limits.min <= value <= limits.max:
                raise OverflowError(f'{value} is outside of [{limits.min}, {limits.max}] for {self.name}')

            out.append(value)

        return np.array(out, dtype=self.dtype)
