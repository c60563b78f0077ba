# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


r"""
This module provides the scalar helpers shared by the rest of vectoral.

It contains epsilon based equality (:func:`equals`), clamping and range utilities, the :class:`Sign` classification
with its multiplication table, integer helpers for fractions (:func:`gcd`, :func:`lcm`), and the :func:`factorial`
and :func:`gamma` functions.

The gamma function is computed with the Lanczos approximation using :math:`g=7` and 9 coefficients:

.. math::
    \Gamma(z+1) = \sqrt{2\pi}\left(z+g+\tfrac{1}{2}\right)^{z+\frac{1}{2}}e^{-(z+g+\frac{1}{2})}A_g(z)

with the reflection formula :math:`\Gamma(z)\Gamma(1-z)=\pi/\sin(\pi z)` used for :math:`z<0.5`.
"""

import logging

import math

from enum import Enum

from numbers import Integral

from typing import Any, TypeVar

import numpy as np

from vectoral._typing import SCALAR


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting status, results, issues, and other information.
"""


EPSILON: float = 1e-6
"""
The tolerance used for approximate equality throughout vectoral.
"""

FACTORIAL_TABLE_LIMIT: int = 20
"""
The largest integer whose factorial is exactly representable as a signed 64 bit integer.
"""

_FACTORIALS: tuple[int, ...] = tuple(math.prod(range(1, n + 1)) for n in range(FACTORIAL_TABLE_LIMIT + 1))

_LANCZOS_G: float = 7

_LANCZOS_COEFFICIENTS: tuple[float, ...] = (0.99999999999980993,
                                            676.5203681218851,
                                            -1259.1392167224028,
                                            771.32342877765313,
                                            -176.61502916214059,
                                            12.507343278686905,
                                            -0.13857109526572012,
                                            9.9843695780195716e-6,
                                            1.5056327351493116e-7)

_T = TypeVar('_T')


class Sign(Enum):
    """
    The sign classification of a number.

    Members are totally ordered ``NEGATIVE_INFINITY < NEGATIVE < ZERO < POSITIVE < POSITIVE_INFINITY < NAN`` and may
    be multiplied together (``Sign.NEGATIVE * Sign.POSITIVE_INFINITY``) to get the sign of a product.
    """

    NEGATIVE_INFINITY = 0
    NEGATIVE = 1
    ZERO = 2
    POSITIVE = 3
    POSITIVE_INFINITY = 4
    NAN = 5

    @classmethod
    def of(cls, value: Any) -> 'Sign':
        """
        Classifies a plain numeric value.

        :param value: the value to classify (int, float, or numpy scalar)
        :return: the sign of the value
        """

        if isinstance(value, (Integral, np.integer)):
            return cls.ZERO if value == 0 else (cls.POSITIVE if value > 0 else cls.NEGATIVE)

        value = float(value)

        if math.isnan(value):
            return cls.NAN
        if math.isinf(value):
            return cls.POSITIVE_INFINITY if value > 0 else cls.NEGATIVE_INFINITY

        return cls.ZERO if value == 0 else (cls.POSITIVE if value > 0 else cls.NEGATIVE)

    def is_nan(self) -> bool:
        return self is Sign.NAN

    def is_finite(self) -> bool:
        return self in (Sign.NEGATIVE, Sign.ZERO, Sign.POSITIVE)

    def is_infinite(self) -> bool:
        return self in (Sign.NEGATIVE_INFINITY, Sign.POSITIVE_INFINITY)

    @property
    def polarity(self) -> int:
        """
        -1 for negative signs, 1 for positive signs, and 0 for zero and NaN.
        """

        if self in (Sign.NEGATIVE, Sign.NEGATIVE_INFINITY):
            return -1
        if self in (Sign.POSITIVE, Sign.POSITIVE_INFINITY):
            return 1
        return 0

    def multiply(self, other: 'Sign') -> 'Sign':
        """
        Returns the sign of the product of a number with this sign and a number with the `other` sign.

        NaN absorbs everything, zero times infinity is NaN, zero times any finite value is zero, and otherwise the
        result is infinite when either factor is infinite with the usual rule of signs.

        :param other: the sign of the other factor
        :return: the sign of the product
        """

        if self is Sign.NAN or other is Sign.NAN:
            return Sign.NAN

        if self is Sign.ZERO or other is Sign.ZERO:
            if self.is_infinite() or other.is_infinite():
                return Sign.NAN
            return Sign.ZERO

        negative = self.polarity * other.polarity < 0

        if self.is_infinite() or other.is_infinite():
            return Sign.NEGATIVE_INFINITY if negative else Sign.POSITIVE_INFINITY

        return Sign.NEGATIVE if negative else Sign.POSITIVE

    def __mul__(self, other: 'Sign') -> 'Sign':
        if not isinstance(other, Sign):
            return NotImplemented
        return self.multiply(other)

    def __lt__(self, other: 'Sign') -> bool:
        if not isinstance(other, Sign):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: 'Sign') -> bool:
        if not isinstance(other, Sign):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: 'Sign') -> bool:
        if not isinstance(other, Sign):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: 'Sign') -> bool:
        if not isinstance(other, Sign):
            return NotImplemented
        return self.value >= other.value


def sign(value: Any) -> Sign:
    """
    Returns the :class:`Sign` of a value.

    Objects that know their own sign (:class:`.Fraction`, :class:`.RealNumber`) are asked for it directly.

    :param value: the value to classify
    :return: the sign of the value
    """

    if hasattr(value, 'sign') and callable(value.sign):
        return value.sign()

    return Sign.of(value)


def equals(a: SCALAR, b: SCALAR, epsilon: float = EPSILON) -> bool:
    """
    Approximate equality of two scalars.

    :param a: the first value
    :param b: the second value
    :param epsilon: the (exclusive) absolute tolerance
    :return: ``True`` if ``|a - b| < epsilon``
    """

    return abs(a - b) < epsilon


def minimum(a: _T, b: _T) -> _T:
    """
    Returns the smaller of two values, preferring `a` when they compare equal.
    """

    return b if b < a else a


def maximum(a: _T, b: _T) -> _T:
    """
    Returns the larger of two values, preferring `a` when they compare equal.
    """

    return b if b > a else a


def clamp(value: _T, lower: _T, upper: _T) -> _T:
    """
    Clamps `value` to be within ``[lower, upper]``.

    This works for any ordered type (ints, floats, :class:`.RealNumber`, :class:`.Fraction`).
    """

    return minimum(maximum(value, lower), upper)


def is_in_range(value: SCALAR, lower: SCALAR, upper: SCALAR) -> bool:
    """
    Checks whether `value` is within the closed interval ``[lower, upper]``.
    """

    return lower <= value <= upper


def require_range(value: SCALAR, lower: SCALAR, upper: SCALAR) -> SCALAR:
    """
    Returns `value` if it is within ``[lower, upper]``.

    :raises ValueError: if the value is out of range
    """

    if not is_in_range(value, lower, upper):
        raise ValueError(f'The value is required to be within the range {lower}-{upper}.  It was {value}')

    return value


def require_finite(value: SCALAR) -> float:
    """
    Returns `value` as a float if it is finite.

    :raises ValueError: if the value is NaN or infinite
    """

    value = float(value)

    if not math.isfinite(value):
        raise ValueError(f'A finite value is required.  The provided value was {value}')

    return value


def rescale(value: float, input_min: float, input_max: float, output_min: float, output_max: float) -> float:
    """
    Linearly maps `value` from ``[input_min, input_max]`` onto ``[output_min, output_max]``.

    Values outside of the input range are extrapolated.  If the input range is empty 0 is returned.
    """

    input_range = input_max - input_min

    if input_range == 0:
        return 0.0

    return output_min + (value - input_min) * (output_max - output_min) / input_range


def _is_integral(value: float) -> bool:
    return math.isfinite(value) and float(value).is_integer()


def gcd(a: SCALAR, b: SCALAR) -> float:
    """
    The greatest common divisor of two (possibly non-integer) values.

    Integral inputs use exact integer arithmetic.  Otherwise the Euclidean algorithm is applied with floating point
    remainders, which gives the expected result for values such as ``gcd(0.5, 0.75) == 0.25``.

    :return: the non-negative greatest common divisor (0 when both inputs are 0)
    """

    a, b = abs(float(a)), abs(float(b))

    if _is_integral(a) and _is_integral(b):
        return float(math.gcd(int(a), int(b)))

    while b:
        a, b = b, math.fmod(a, b)

    return a


def lcm(a: SCALAR, b: SCALAR) -> float:
    """
    The least common multiple of two (possibly non-integer) values.

    :return: the non-negative least common multiple (0 when either input is 0)
    """

    a, b = abs(float(a)), abs(float(b))

    if a == 0 or b == 0:
        return 0.0

    if _is_integral(a) and _is_integral(b):
        return float(math.lcm(int(a), int(b)))

    return a / gcd(a, b) * b


def gamma(x: SCALAR) -> float:
    """
    The gamma function computed using a 9 term Lanczos approximation with ``g = 7``.

    :param x: the value to evaluate the gamma function at
    :return: :math:`\\Gamma(x)`
    :raises ValueError: if `x` is a pole of the gamma function (0 or a negative integer)
    """

    x = float(x)

    if x <= 0 and x.is_integer():
        raise ValueError(f'The gamma function is undefined at {x}')

    if x < 0.5:
        # reflection formula
        return math.pi / (math.sin(math.pi * x) * gamma(1 - x))

    x -= 1

    series = _LANCZOS_COEFFICIENTS[0]
    for index, coefficient in enumerate(_LANCZOS_COEFFICIENTS[1:], start=1):
        series += coefficient / (x + index)

    t = x + _LANCZOS_G + 0.5

    return math.sqrt(2 * math.pi) * t ** (x + 0.5) * math.exp(-t) * series


def factorial(n: SCALAR) -> int | float:
    """
    Computes the factorial of `n`.

    Integers use an exact lookup table covering ``0 <= n <= 20``.  Real valued (floating point) inputs are evaluated
    as ``gamma(n + 1)``.

    :param n: the value to compute the factorial of
    :return: the exact factorial (int) for integer inputs, or the gamma based value (float) for real inputs
    :raises ValueError: if `n` is a negative integer
    :raises OverflowError: if `n` is an integer larger than :data:`FACTORIAL_TABLE_LIMIT`
    """

    if isinstance(n, (Integral, np.integer)) and not isinstance(n, bool):
        n = int(n)

        if n < 0:
            raise ValueError(f'The factorial of a negative integer ({n}) is undefined')

        if n > FACTORIAL_TABLE_LIMIT:
            raise OverflowError(f'{n}! cannot be represented exactly.  '
                                f'Only values up to {FACTORIAL_TABLE_LIMIT} are supported for integers')

        return _FACTORIALS[n]

    _LOGGER.debug(f'evaluating factorial of real value {n} using the gamma function')

    return gamma(float(n) + 1)
