# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
This module provides the :class:`Fraction` class, an exact two field (numerator/denominator) rational.

Unlike :class:`fractions.Fraction` from the standard library, the numerator and denominator are stored as floats and
are never simplified automatically.  A zero denominator is a valid state representing a non-finite value:

=============  ===================
Fraction       Value
=============  ===================
``0/0``        NaN
``n/0, n>0``   positive infinity
``n/0, n<0``   negative infinity
=============  ===================

Constructing such a fraction never raises; performing sum/product arithmetic on one raises
:class:`.NonFiniteArithmeticError`.

Fractions are ordered (and compared for equality) by their double value using the single total order
``-inf < finite values < +inf < NaN``, so that all NaN fractions are equal to each other and all fractions with the
same infinite sign are equal to each other.  Use :meth:`Fraction.strict_equals` to compare the raw fields.
"""

import math

import decimal

from fractions import Fraction as _ExactFraction

from typing import Any, Union

from vectoral._typing import SCALAR
from vectoral.errors import NonFiniteArithmeticError, ParseError
from vectoral.real_number import RealNumber
from vectoral.scalars import Sign, gcd, lcm, require_finite


REPEATING_PRECISION: int = 100
"""
The number of significant digits inspected by :meth:`Fraction.repeating`.
"""

_NAN_HASH = hash('Fraction.NaN')


class Fraction:
    """
    An immutable rational stored as a (numerator, denominator) pair of finite floats.

    Fractions support the usual arithmetic operators::

        >>> from vectoral import Fraction
        >>> Fraction(1, 3) + Fraction(1, 6)
        Fraction(3.0/6.0)
        >>> Fraction(1, 3) + Fraction(1, 6) == Fraction(1, 2)
        True
        >>> Fraction(1, 0) == Fraction(5, 0)
        True

    Note that no simplification is performed unless :meth:`simplify` is called.
    """

    __slots__ = ('_numerator', '_denominator')

    def __init__(self, numerator: SCALAR, denominator: SCALAR = 1.0):
        """
        :param numerator: the numerator of the fraction.  Must be finite
        :param denominator: the denominator of the fraction.  Must be finite but may be zero
        :raises ValueError: if either field is NaN or infinite
        """

        self._numerator: float = require_finite(numerator)
        self._denominator: float = require_finite(denominator)

    @property
    def numerator(self) -> float:
        return self._numerator

    @property
    def denominator(self) -> float:
        return self._denominator

    # ------------------------------------------------------------------------------------------------------------------
    # properties

    def double_value(self) -> float:
        """
        Collapses the fraction into a float.

        A zero denominator gives NaN for a zero numerator and a signed infinity otherwise (following the sign of both
        the numerator and the (signed zero) denominator).
        """

        if self._denominator == 0:
            if self._numerator == 0:
                return math.nan
            return math.copysign(math.inf, self._numerator) * math.copysign(1.0, self._denominator)

        return self._numerator / self._denominator

    def sign(self) -> Sign:
        """
        The sign of the value this fraction represents.
        """
        return Sign.of(self.double_value())

    def is_finite(self) -> bool:
        return self._denominator != 0

    def is_nan(self) -> bool:
        return self._denominator == 0 and self._numerator == 0

    def is_infinite(self) -> bool:
        return self._denominator == 0 and self._numerator != 0

    def decimal_value(self, precision: int = 28) -> decimal.Decimal:
        """
        Divides the numerator by the denominator using decimal arithmetic with `precision` significant digits.

        :raises ZeroDivisionError: if the denominator is zero
        """

        if self._denominator == 0:
            raise ZeroDivisionError('Cannot compute the decimal value of a fraction with a zero denominator')

        context = decimal.Context(prec=precision, rounding=decimal.ROUND_HALF_EVEN)
        return context.divide(decimal.Decimal(self._numerator), decimal.Decimal(self._denominator))

    def rational(self) -> bool:
        """
        Checks whether the fraction can be converted exactly into a (terminating) decimal.

        The conversion fails when the denominator is zero or when the reduced denominator has prime factors other than
        2 and 5.
        """

        if self._denominator == 0:
            return False

        exact = _ExactFraction(self._numerator) / _ExactFraction(self._denominator)

        denominator = exact.denominator
        for factor in (2, 5):
            while denominator % factor == 0:
                denominator //= factor

        return denominator == 1

    def repeating(self) -> bool:
        """
        Checks whether the decimal expansion of this fraction ends in a repeating digit pattern.

        The expansion is computed to :data:`REPEATING_PRECISION` significant digits.  Expansions that terminate within
        that precision are not repeating.  The final (rounded) digit is ignored and the remaining fractional digits
        are checked for a suffix consisting of at least two repetitions of a pattern that reaches back at least half
        of the inspected digits.
        """

        if self._denominator == 0:
            return False

        context = decimal.Context(prec=REPEATING_PRECISION, rounding=decimal.ROUND_HALF_EVEN)
        quotient = context.divide(decimal.Decimal(self._numerator), decimal.Decimal(self._denominator))

        if not context.flags[decimal.Inexact]:
            return False

        text = format(abs(quotient), 'f')
        _, _, digits = text.partition('.')

        # drop the rounded digit
        digits = digits[:-1]

        length = len(digits)
        # the repeating part must cover the back half of the digits
        for start in range(length // 2 + 1):
            tail = digits[start:]
            for period in range(1, len(tail) // 2 + 1):
                if all(tail[i] == tail[i - period] for i in range(period, len(tail))):
                    return True

        return False

    # ------------------------------------------------------------------------------------------------------------------
    # arithmetic

    def _require_finite_operands(self, other: 'Fraction'):
        if self._denominator == 0 or other._denominator == 0:
            raise NonFiniteArithmeticError('Cannot perform arithmetic on non-finite fractions')

    def add(self, other: 'Fraction') -> 'Fraction':
        """
        Adds two fractions using the least common multiple of the denominators.

        :raises NonFiniteArithmeticError: if either fraction has a zero denominator
        :raises OverflowError: if the result does not fit in a double
        """

        other = _as_fraction(other)
        self._require_finite_operands(other)

        multiple = lcm(self._denominator, other._denominator)

        numerator = self._numerator * (multiple / self._denominator) + other._numerator * (multiple / other._denominator)

        return _arithmetic_result(numerator, multiple, 'sum')

    def subtract(self, other: 'Fraction') -> 'Fraction':
        """
        Subtracts `other` from this fraction using the least common multiple of the denominators.

        :raises NonFiniteArithmeticError: if either fraction has a zero denominator
        :raises OverflowError: if the result does not fit in a double
        """

        other = _as_fraction(other)
        self._require_finite_operands(other)

        multiple = lcm(self._denominator, other._denominator)

        numerator = self._numerator * (multiple / self._denominator) - other._numerator * (multiple / other._denominator)

        return _arithmetic_result(numerator, multiple, 'difference')

    def multiply(self, other: Union['Fraction', SCALAR]) -> 'Fraction':
        """
        Multiplies this fraction by another fraction (cross multiplication) or by a scalar (scaling the numerator).

        :raises NonFiniteArithmeticError: if either fraction has a zero denominator
        :raises OverflowError: if the result does not fit in a double
        """

        if not isinstance(other, Fraction):
            return _arithmetic_result(self._numerator * require_finite(other), self._denominator, 'product')

        self._require_finite_operands(other)

        return _arithmetic_result(self._numerator * other._numerator, self._denominator * other._denominator, 'product')

    def divide(self, other: Union['Fraction', SCALAR]) -> 'Fraction':
        """
        Divides this fraction by another fraction (multiplying by its reciprocal) or by a scalar (scaling the
        denominator).

        Dividing by a scalar 0 produces a non-finite fraction.

        :raises ZeroDivisionError: if `other` is a fraction whose numerator is zero
        """

        if not isinstance(other, Fraction):
            return _arithmetic_result(self._numerator, self._denominator * require_finite(other), 'quotient')

        if other._numerator == 0:
            raise ZeroDivisionError('Cannot divide by a fraction with a value of zero')

        return self.multiply(other.reciprocal())

    def reciprocal(self) -> 'Fraction':
        """
        Returns ``denominator/numerator``.

        :raises ZeroDivisionError: if the numerator is zero
        """

        if self._numerator == 0:
            raise ZeroDivisionError('Cannot take the reciprocal of a fraction with a zero numerator')

        return Fraction(self._denominator, self._numerator)

    def inverse(self) -> 'Fraction':
        """
        Returns ``denominator/numerator`` without any checks, which may produce a non-finite fraction.
        """

        return Fraction(self._denominator, self._numerator)

    def negate(self) -> 'Fraction':
        return Fraction(-self._numerator, self._denominator)

    def rescale(self, scale: SCALAR) -> 'Fraction':
        """
        Multiplies both the numerator and denominator by `scale`, preserving the value.
        """

        return Fraction(self._numerator * scale, self._denominator * scale)

    def simplify(self) -> 'Fraction':
        """
        Divides both fields by their greatest common divisor.

        :raises ArithmeticError: for ``0/0`` which has no greatest common divisor
        """

        divisor = gcd(self._numerator, self._denominator)

        if divisor == 0:
            raise ArithmeticError('Cannot simplify a fraction of 0/0')

        return Fraction(self._numerator / divisor, self._denominator / divisor)

    def normalize(self) -> 'Fraction':
        """
        Returns the value of this fraction over a denominator of 1.

        :raises ZeroDivisionError: if the denominator is zero
        """

        if self._denominator == 0:
            raise ZeroDivisionError('Cannot normalize a fraction with a zero denominator')

        return Fraction(self._numerator / self._denominator, 1)

    # ------------------------------------------------------------------------------------------------------------------
    # comparison

    def _order_key(self) -> tuple[int, float]:
        value = self.double_value()

        if math.isnan(value):
            return 3, 0.0
        if math.isinf(value):
            return (2, 0.0) if value > 0 else (0, 0.0)
        # collapse -0.0 into 0.0
        return 1, value + 0.0

    def compare_to(self, other: Any) -> int:
        """
        Compares this fraction to another fraction, :class:`.RealNumber`, or plain number by double value.

        The order is ``-inf < finite values < +inf < NaN``.  Comparisons with a :class:`.RealNumber` are made by
        :meth:`.RealNumber.compare_to` so that real numbers outside of the range of a double are ordered the same way
        from either side.

        :return: -1, 0, or 1 if this fraction is less than, equal to, or greater than `other`
        """

        if isinstance(other, RealNumber):
            return -other.compare_to(self)

        mine = self._order_key()
        theirs = _as_fraction_key(other)

        return (mine > theirs) - (mine < theirs)

    def strict_equals(self, other: Any) -> bool:
        """
        Checks that `other` is a fraction with exactly the same numerator and denominator.
        """

        return (isinstance(other, Fraction) and self._numerator == other._numerator and
                self._denominator == other._denominator)

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
        value = self.double_value()
        if math.isnan(value):
            return _NAN_HASH
        return hash(value)

    # ------------------------------------------------------------------------------------------------------------------
    # operators

    def __add__(self, other: Any) -> 'Fraction':
        if isinstance(other, (Fraction, int, float)):
            return self.add(other)
        return NotImplemented

    def __radd__(self, other: Any) -> 'Fraction':
        if isinstance(other, (int, float)):
            return Fraction(other).add(self)
        return NotImplemented

    def __sub__(self, other: Any) -> 'Fraction':
        if isinstance(other, (Fraction, int, float)):
            return self.subtract(other)
        return NotImplemented

    def __rsub__(self, other: Any) -> 'Fraction':
        if isinstance(other, (int, float)):
            return Fraction(other).subtract(self)
        return NotImplemented

    def __mul__(self, other: Any) -> 'Fraction':
        if isinstance(other, (Fraction, int, float)):
            return self.multiply(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> 'Fraction':
        if isinstance(other, (int, float)):
            return self.multiply(other)
        return NotImplemented

    def __truediv__(self, other: Any) -> 'Fraction':
        if isinstance(other, (Fraction, int, float)):
            return self.divide(other)
        return NotImplemented

    def __rtruediv__(self, other: Any) -> 'Fraction':
        if isinstance(other, (int, float)):
            return Fraction(other).divide(self)
        return NotImplemented

    def __neg__(self) -> 'Fraction':
        return self.negate()

    def __abs__(self) -> 'Fraction':
        return Fraction(abs(self._numerator), abs(self._denominator))

    def __float__(self) -> float:
        return self.double_value()

    def __int__(self) -> int:
        return int(self.double_value())

    # ------------------------------------------------------------------------------------------------------------------
    # serialization

    @classmethod
    def parse(cls, text: str) -> 'Fraction':
        """
        Parses the ``numerator/denominator`` text form, for instance ``"1.0/3.0"``.

        :raises ParseError: if the text is not of this form or a field is not a finite number
        """

        pieces = text.strip().split('/')

        if len(pieces) != 2:
            raise ParseError(text, cls.__name__, 'expected exactly one "/"')

        if '_' in text:
            raise ParseError(text, cls.__name__, 'digit separators are not allowed')

        try:
            return cls(float(pieces[0]), float(pieces[1]))
        except ValueError as err:
            raise ParseError(text, cls.__name__, str(err)) from err

    def __str__(self) -> str:
        return f'{self._numerator!r}/{self._denominator!r}'

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self})'

    def __reduce__(self):
        return self.__class__, (self._numerator, self._denominator)


def _as_fraction(value: Union[Fraction, SCALAR]) -> Fraction:
    if isinstance(value, Fraction):
        return value
    return Fraction(value)


def _arithmetic_result(numerator: float, denominator: float, operation: str) -> Fraction:
    """
    Wraps the fields computed by an arithmetic operation in a new fraction.

    :raises OverflowError: if either field overflowed the range of a double
    """

    if not (math.isfinite(numerator) and math.isfinite(denominator)):
        raise OverflowError(f'The {operation} overflowed the range of a double ({numerator}/{denominator})')

    return Fraction(numerator, denominator)


def _as_fraction_key(value: Any) -> tuple[int, float]:
    """
    Turns anything fraction-like into the ordering key used by :meth:`Fraction.compare_to`.

    :raises TypeError: if the value cannot be compared with a fraction
    """

    if isinstance(value, Fraction):
        return value._order_key()

    if hasattr(value, 'double_value'):
        value = value.double_value()
    elif isinstance(value, (int, float)) or hasattr(value, '__float__'):
        value = float(value)
    else:
        raise TypeError(f'Cannot compare a Fraction with {type(value).__name__}')

    if math.isnan(value):
        return 3, 0.0
    if math.isinf(value):
        return (2, 0.0) if value > 0 else (0, 0.0)
    return 1, value + 0.0


Fraction.ZERO = Fraction(0)
Fraction.ONE = Fraction(1)
Fraction.HALF = Fraction(1, 2)
Fraction.NaN = Fraction(0, 0)
Fraction.POSITIVE_INFINITY = Fraction(1, 0)
Fraction.NEGATIVE_INFINITY = Fraction(-1, 0)
