# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


r"""
This module provides the :class:`RealNumber` class, a number stored in scientific notation with two floats.

A real number represents the value

.. math::
    v = 2^{e}m

where :math:`e` is the exponent and :math:`m` is the mantissa.  Because the exponent is itself a double, real numbers
can represent values far outside the range of a double (for instance ``RealNumber(5000, 1.5)``).

Arithmetic aligns exponents, operates on the mantissas, and then renormalizes the result a single time (halving the
mantissa and incrementing the exponent when the mantissa reaches 2).  This single renormalization step is kept so
that results match reference outputs exactly; it means a result is not guaranteed to have a mantissa in
:math:`[1, 2)`.  Use :meth:`RealNumber.normalized` to fully renormalize a value.  Comparison and hashing always work
on the fully normalized form so that equal values compare equal regardless of representation.
"""

import math

from numbers import Real

from typing import Any, Iterable, Union

import numpy as np

from vectoral._typing import SCALAR
from vectoral.errors import ParseError
from vectoral.scalars import Sign
from vectoral.utilities.mixin_classes.text_serialization import (TextSerializable, split_text_fields, require_fields,
                                                                   parse_float)


REAL_LIKE = Union['RealNumber', SCALAR]
"""
Anything that can be used as an operand in real number arithmetic
"""

_NAN_HASH = hash('RealNumber.NaN')


def _power_of_two(exponent: float) -> float:
    """
    Computes ``2**exponent`` returning inf/0 instead of raising on overflow/underflow.
    """

    if exponent != exponent:
        return math.nan
    if math.isfinite(exponent) and float(exponent).is_integer():
        try:
            return math.ldexp(1.0, int(exponent))
        except OverflowError:
            return math.inf
    try:
        return 2.0 ** exponent
    except OverflowError:
        return math.inf


def _exponent_sign(exponent: float) -> Sign:
    """
    The sign of ``2**exponent`` without evaluating it (which could overflow or underflow).
    """

    if math.isnan(exponent):
        return Sign.NAN
    if exponent == math.inf:
        return Sign.POSITIVE_INFINITY
    if exponent == -math.inf:
        return Sign.ZERO
    return Sign.POSITIVE


class RealNumber(TextSerializable):
    """
    An immutable number of the form :math:`2^{e}m` stored as an (exponent, mantissa) pair of doubles.

    Real numbers are created either directly from an exponent and mantissa or from a native number::

        >>> from vectoral import RealNumber
        >>> RealNumber.from_float(12)
        RealNumber{e=3.0, m=1.5}
        >>> RealNumber.from_float(12) * 2
        RealNumber{e=4.0, m=1.5}
        >>> RealNumber.from_float(10).sqrt().double_value()
        3.16227766...

    Plain numbers used as operands are converted using :meth:`from_float`.
    """

    __slots__ = ('_exponent', '_mantissa')

    def __init__(self, exponent: SCALAR = 0.0, mantissa: SCALAR = 0.0):
        """
        :param exponent: the base 2 exponent
        :param mantissa: the mantissa
        """

        self._exponent: float = float(exponent)
        self._mantissa: float = float(mantissa)

    @classmethod
    def from_float(cls, value: Union[SCALAR, 'RealNumber']) -> 'RealNumber':
        """
        Converts a native number into a real number with the mantissa in ``[1, 2)``.

        Zero is represented as ``(0, 0)`` and non-finite values are stored as the mantissa with an exponent of 0.

        :param value: the number to convert (real numbers are returned as is)
        :return: the converted real number
        """

        if isinstance(value, RealNumber):
            return value

        value = float(value)

        if value == 0 or not math.isfinite(value):
            return cls(0, value)

        fraction, exponent = math.frexp(value)

        # frexp gives a fraction in [0.5, 1)
        return cls(exponent - 1, fraction * 2)

    @classmethod
    def from_base10(cls, exponent: SCALAR, mantissa: SCALAR) -> 'RealNumber':
        """
        Creates a real number from base 10 scientific notation (:math:`10^{e}m`).

        The base 10 exponent is converted into base 2 so values beyond the range of a double are supported.
        """

        base_two = exponent * math.log2(10)
        whole = math.floor(base_two)

        return cls(whole, mantissa * 2.0 ** (base_two - whole)).normalized()

    # ------------------------------------------------------------------------------------------------------------------
    # properties

    @property
    def exponent(self) -> float:
        return self._exponent

    @property
    def mantissa(self) -> float:
        return self._mantissa

    def double_value(self) -> float:
        """
        The value of this number as a double.

        Values beyond the range of a double overflow to infinity or underflow to zero.
        """

        if self._mantissa == 0 and math.isfinite(self._exponent):
            return self._mantissa

        return _power_of_two(self._exponent) * self._mantissa

    def sign(self) -> Sign:
        """
        The sign of the number, computed as the sign of :math:`2^e` times the sign of :math:`m`.
        """

        return _exponent_sign(self._exponent).multiply(Sign.of(self._mantissa))

    def is_nan(self) -> bool:
        return self.sign() is Sign.NAN

    def is_finite(self) -> bool:
        return self.sign().is_finite()

    def is_infinite(self) -> bool:
        return self.sign().is_infinite()

    def is_zero(self) -> bool:
        return self.sign() is Sign.ZERO

    def normalized(self) -> 'RealNumber':
        """
        Fully renormalizes the number so that the exponent is an integer and the mantissa is in ``[1, 2)`` (or
        ``(-2, -1]`` for negative numbers).

        Zero is returned as ``(0, 0)``.  Non-finite numbers are returned unchanged.
        """

        current_sign = self.sign()

        if current_sign is Sign.ZERO:
            return RealNumber(0, 0)

        if not current_sign.is_finite():
            return self

        whole = math.floor(self._exponent)
        mantissa = self._mantissa * 2.0 ** (self._exponent - whole)

        fraction, shift = math.frexp(mantissa)

        return RealNumber(whole + shift - 1, fraction * 2)

    # ------------------------------------------------------------------------------------------------------------------
    # arithmetic

    @staticmethod
    def _renormalize_once(exponent: float, mantissa: float) -> 'RealNumber':
        if mantissa >= 2:
            mantissa /= 2
            exponent += 1

        return RealNumber(exponent, mantissa)

    def add(self, other: REAL_LIKE) -> 'RealNumber':
        """
        Adds two real numbers by aligning to the larger exponent.

        Both mantissas are scaled by :math:`2^{e_i-e_{max}}`, summed, and then renormalized once.
        """

        other = RealNumber.from_float(other)

        max_exponent = max(self._exponent, other._exponent)

        m1 = self._mantissa * _power_of_two(self._exponent - max_exponent)
        m2 = other._mantissa * _power_of_two(other._exponent - max_exponent)

        return self._renormalize_once(max_exponent, m1 + m2)

    def subtract(self, other: REAL_LIKE) -> 'RealNumber':
        """
        Subtracts `other` from this number by aligning to the larger exponent.

        Both mantissas are scaled by :math:`2^{e_i-e_{max}}`, differenced, and then renormalized once.
        """

        other = RealNumber.from_float(other)

        max_exponent = max(self._exponent, other._exponent)

        m1 = self._mantissa * _power_of_two(self._exponent - max_exponent)
        m2 = other._mantissa * _power_of_two(other._exponent - max_exponent)

        return self._renormalize_once(max_exponent, m1 - m2)

    def multiply(self, other: REAL_LIKE) -> 'RealNumber':
        """
        Multiplies the mantissas and sums the exponents, renormalizing once.
        """

        other = RealNumber.from_float(other)

        return self._renormalize_once(self._exponent + other._exponent, self._mantissa * other._mantissa)

    def divide(self, other: REAL_LIKE) -> 'RealNumber':
        """
        Divides the mantissas and subtracts the exponents, renormalizing once.

        :raises ZeroDivisionError: if `other` is zero
        """

        other = RealNumber.from_float(other)

        if other._mantissa == 0:
            raise ZeroDivisionError('Cannot divide a RealNumber by zero')

        return self._renormalize_once(self._exponent - other._exponent, self._mantissa / other._mantissa)

    def negate(self) -> 'RealNumber':
        return RealNumber(self._exponent, -self._mantissa)

    def pow2(self, n: SCALAR = 1) -> 'RealNumber':
        """
        Multiplies this number by :math:`2^n` by shifting the exponent.
        """

        return RealNumber(self._exponent + n, self._mantissa)

    def halve(self, n: SCALAR = 1) -> 'RealNumber':
        """
        Divides this number by :math:`2^n` by shifting the exponent.
        """

        return RealNumber(self._exponent - n, self._mantissa)

    def sqrt(self) -> 'RealNumber':
        """
        Approximates the square root of this number.

        The initial guess halves the exponent and keeps the mantissa.  It is then refined with exactly three Newton
        iterations (``guess = (guess + self/guess)/2``), which bounds the relative error to roughly :math:`10^{-6}` for
        normalized inputs.

        :raises ValueError: if the number is negative
        """

        current_sign = self.sign()

        if current_sign is Sign.ZERO:
            return RealNumber(0, 0)

        if current_sign.polarity < 0:
            raise ValueError('Cannot take the square root of a negative RealNumber')

        if not current_sign.is_finite():
            # sqrt(inf) is inf and sqrt(nan) is nan
            return self

        guess = RealNumber(self._exponent / 2, self._mantissa)

        guess = guess.add(self.divide(guess)).divide(2)
        guess = guess.add(self.divide(guess)).divide(2)
        guess = guess.add(self.divide(guess)).divide(2)

        return guess

    # ------------------------------------------------------------------------------------------------------------------
    # comparison

    def compare_to(self, other: Any) -> int:
        """
        Compares this number with another real number, :class:`.Fraction`, or plain number.

        Non-finite values are ordered by their :class:`.Sign` (``-inf < finite < +inf < NaN``).  Finite values are
        ordered by sign, then by exponent and mantissa of their normalized forms.

        :return: -1, 0, or 1 if this number is less than, equal to, or greater than `other`
        """

        other = _as_real_number(other)

        s1 = self.sign()
        s2 = other.sign()

        if not s1.is_finite() or not s2.is_finite() or s1 is not s2 or s1 is Sign.ZERO:
            return (s1 > s2) - (s1 < s2)

        n1 = self.normalized()
        n2 = other.normalized()

        first = (n1._exponent, abs(n1._mantissa))
        second = (n2._exponent, abs(n2._mantissa))

        result = (first > second) - (first < second)

        return result * s1.polarity

    def strict_equals(self, other: Any) -> bool:
        """
        Checks that `other` is a real number with exactly the same exponent and mantissa fields.
        """

        return (isinstance(other, RealNumber) and self._exponent == other._exponent and
                self._mantissa == other._mantissa)

    def __eq__(self, other: Any) -> bool:
        try:
            return self.compare_to(other) == 0
        except TypeError:
            return NotImplemented

    def __lt__(self, other: Any) -> bool:
        try:
            return self.compare_to(other) < 0
        except TypeError:
            return NotImplemented

    def __le__(self, other: Any) -> bool:
        try:
            return self.compare_to(other) <= 0
        except TypeError:
            return NotImplemented

    def __gt__(self, other: Any) -> bool:
        try:
            return self.compare_to(other) > 0
        except TypeError:
            return NotImplemented

    def __ge__(self, other: Any) -> bool:
        try:
            return self.compare_to(other) >= 0
        except TypeError:
            return NotImplemented

    def __hash__(self) -> int:
        if self.is_nan():
            return _NAN_HASH

        normalized = self.normalized()
        value = normalized.double_value()

        if math.isinf(value) or (value == 0 and not normalized.is_zero()):
            # outside of the range of a double
            return hash((normalized._exponent, normalized._mantissa))

        return hash(value)

    # ------------------------------------------------------------------------------------------------------------------
    # operators

    def __add__(self, other: Any) -> 'RealNumber':
        if isinstance(other, (RealNumber, Real, np.number)):
            return self.add(other)
        return NotImplemented

    def __radd__(self, other: Any) -> 'RealNumber':
        if isinstance(other, (Real, np.number)):
            return RealNumber.from_float(other).add(self)
        return NotImplemented

    def __sub__(self, other: Any) -> 'RealNumber':
        if isinstance(other, (RealNumber, Real, np.number)):
            return self.subtract(other)
        return NotImplemented

    def __rsub__(self, other: Any) -> 'RealNumber':
        if isinstance(other, (Real, np.number)):
            return RealNumber.from_float(other).subtract(self)
        return NotImplemented

    def __mul__(self, other: Any) -> 'RealNumber':
        if isinstance(other, (RealNumber, Real, np.number)):
            return self.multiply(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> 'RealNumber':
        if isinstance(other, (Real, np.number)):
            return RealNumber.from_float(other).multiply(self)
        return NotImplemented

    def __truediv__(self, other: Any) -> 'RealNumber':
        if isinstance(other, (RealNumber, Real, np.number)):
            return self.divide(other)
        return NotImplemented

    def __rtruediv__(self, other: Any) -> 'RealNumber':
        if isinstance(other, (Real, np.number)):
            return RealNumber.from_float(other).divide(self)
        return NotImplemented

    def __neg__(self) -> 'RealNumber':
        return self.negate()

    def __abs__(self) -> 'RealNumber':
        return RealNumber(self._exponent, abs(self._mantissa))

    def __float__(self) -> float:
        return self.double_value()

    def __bool__(self) -> bool:
        return not self.is_zero()

    # ------------------------------------------------------------------------------------------------------------------
    # serialization

    def _text_fields(self) -> Iterable[tuple[str, Any]]:
        return ('e', self._exponent), ('m', self._mantissa)

    @classmethod
    def parse(cls, text: str) -> 'RealNumber':
        """
        Parses the ``RealNumber{e=3.0, m=1.5}`` text form.

        :raises ParseError: if the text is not of this form
        """

        name, fields = split_text_fields(text, cls.__name__)
        exponent, mantissa = require_fields(fields, ('e', 'm'), text, name)

        return cls(parse_float(exponent, text, name), parse_float(mantissa, text, name))

    def __reduce__(self):
        return self.__class__, (self._exponent, self._mantissa)


def _as_real_number(value: Any) -> RealNumber:
    """
    Converts anything real-number-like into a :class:`RealNumber` for comparison.

    :raises TypeError: if the value cannot be compared with a real number
    """

    if isinstance(value, RealNumber):
        return value

    if isinstance(value, (Real, np.number)):
        return RealNumber.from_float(value)

    if hasattr(value, 'double_value'):
        return RealNumber.from_float(value.double_value())

    raise TypeError(f'Cannot compare a RealNumber with {type(value).__name__}')


RealNumber.ZERO = RealNumber(0, 0)
RealNumber.ONE = RealNumber.from_float(1)
RealNumber.TWO = RealNumber.from_float(2)
RealNumber.TEN = RealNumber.from_float(10)
