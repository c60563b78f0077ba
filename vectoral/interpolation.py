# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


r"""
This module provides stateless interpolation functions built on the vector and number contracts.

:func:`lerp` works with anything that supports ``+``, ``-`` and multiplication by a float (floats, :class:`.RealNumber`,
:class:`.Fraction`, and every vector).  :func:`slerp` and :func:`nlerp` interpolate rotation quaternions.

None of these functions clamp the interpolation parameter.  Values outside of :math:`[0, 1]` extrapolate:

    >>> from vectoral.interpolation import lerp
    >>> lerp(0., 10., 1.5)
    15.0

The quaternion interpolators accept either the fractional percent directly or, like the rest of vectoral, a time
along with the times of the two key frames (`time0` and `time1`) which may also be datetimes.
"""

import logging

import math

from typing import Any, TypeVar

from vectoral._typing import ARRAY_LIKE, TIME_LIKE
from vectoral.scalars import EPSILON
from vectoral.vectors.quaternion import Quaternion


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting status, results, issues, and other information.
"""


_T = TypeVar('_T')


def interpolation_fraction(time: TIME_LIKE, time0: TIME_LIKE = 0, time1: TIME_LIKE = 1) -> float:
    """
    Computes the fractional percent ``(time - time0)/(time1 - time0)`` that `time` is between two key times.

    The times may be numbers or datetimes (in which case all three must be datetimes).

    :param time: the time to interpolate at
    :param time0: the time corresponding to the start of the interpolation
    :param time1: the time corresponding to the end of the interpolation
    :return: the fractional percent between `time0` and `time1`
    :raises TypeError: if the times cannot be subtracted and divided
    :raises ZeroDivisionError: if `time0` and `time1` are the same
    """

    try:
        return float((time - time0) / (time1 - time0))  # type: ignore
    except TypeError:
        raise TypeError('time, time0, and time1 must support subtraction resulting in a type that supports true '
                        'division.  Typically this means they should all be floats or all be DatetimeLike objects')


def lerp(start: _T, end: _T, t: float) -> _T:
    r"""
    Linear interpolation :math:`\mathbf{s}+(\mathbf{e}-\mathbf{s})t`.

    :param start: the value at :math:`t=0`
    :param end: the value at :math:`t=1`
    :param t: the interpolation parameter.  It is not clamped
    :return: the interpolated value with the type of `start`
    """

    return start + (end - start) * t


def _as_quaternion(value: Quaternion | ARRAY_LIKE) -> Quaternion:
    if isinstance(value, Quaternion):
        return value
    return Quaternion(value)


def nlerp(start: Quaternion | ARRAY_LIKE, end: Quaternion | ARRAY_LIKE, time: TIME_LIKE,
          time0: TIME_LIKE = 0, time1: TIME_LIKE = 1) -> Quaternion:
    r"""
    Performs normalized linear interpolation of rotation quaternions.

    NLERP first performs a linear interpolation between the two quaternions and then normalizes the result to unit
    length:

    .. math::
        \mathbf{q}=\frac{\mathbf{q}_0(1-p)+\mathbf{q}_1p}
        {\left\|\mathbf{q}_0(1-p)+\mathbf{q}_1p\right\|}

    .. warning::
        NLERP does not interpolate at a constant angular velocity.  Use :func:`slerp` when that matters.

    :param start: the starting quaternion
    :param end: the ending quaternion
    :param time: the fractional percent to interpolate at, or the time between `time0` and `time1`
    :param time0: the time corresponding to `start`.  Leave at 0 if `time` is a fractional percent
    :param time1: the time corresponding to `end`.  Leave at 1 if `time` is a fractional percent
    :return: the interpolated unit quaternion
    :raises UnsupportedOperationError: if the interpolated quaternion has a magnitude of 0
    """

    t = interpolation_fraction(time, time0, time1)

    return lerp(_as_quaternion(start), _as_quaternion(end), t).normalize()


def slerp(start: Quaternion | ARRAY_LIKE, end: Quaternion | ARRAY_LIKE, time: TIME_LIKE,
          time0: TIME_LIKE = 0, time1: TIME_LIKE = 1) -> Quaternion:
    r"""
    Performs spherical linear interpolation of unit quaternions along the shortest great circle arc.

    With :math:`d=\mathbf{q}_0^T\mathbf{q}_1` (after negating :math:`\mathbf{q}_1` and :math:`d` when :math:`d<0`),
    :math:`\theta_0=\text{cos}^{-1}(d)`, and :math:`\theta_1=\theta_0t`

    .. math::
        s_0 = \text{cos}(\theta_1)-d\frac{\text{sin}(\theta_1)}{\text{sin}(\theta_0)}\\
        s_1 = \frac{\text{sin}(\theta_1)}{\text{sin}(\theta_0)}\\
        \mathbf{q}=s_0\mathbf{q}_0+s_1\mathbf{q}_1

    When the quaternions are nearly parallel (:math:`1-d<\epsilon`) the sine terms are numerically unstable and the
    result of :func:`lerp` is returned instead.

    The inputs are not normalized and `time` is not clamped.

    :param start: the starting quaternion
    :param end: the ending quaternion
    :param time: the fractional percent to interpolate at, or the time between `time0` and `time1`
    :param time0: the time corresponding to `start`.  Leave at 0 if `time` is a fractional percent
    :param time1: the time corresponding to `end`.  Leave at 1 if `time` is a fractional percent
    :return: the interpolated quaternion
    """

    t = interpolation_fraction(time, time0, time1)

    q0 = _as_quaternion(start)
    q1 = _as_quaternion(end)

    dot = q0.dot(q1)

    if dot < 0:
        # take the shorter path
        q1 = q1.negate()
        dot = -dot

    if 1 - dot < EPSILON:
        _LOGGER.debug(f'quaternions are nearly parallel (dot={dot}), falling back to linear interpolation')
        return lerp(q0, q1, t)

    theta0 = math.acos(dot)
    theta1 = theta0 * t

    sin_theta0 = math.sin(theta0)
    sin_theta1 = math.sin(theta1)

    s0 = math.cos(theta1) - dot * sin_theta1 / sin_theta0
    s1 = sin_theta1 / sin_theta0

    return q0 * s0 + q1 * s1


def interpolate(start: Any, end: Any, time: TIME_LIKE, time0: TIME_LIKE = 0, time1: TIME_LIKE = 1) -> Any:
    """
    Interpolates between two values at a time between two key times.

    Quaternions are interpolated with :func:`slerp`; everything else uses :func:`lerp`.

    :param start: the value at `time0`
    :param end: the value at `time1`
    :param time: the time to interpolate at
    :param time0: the time corresponding to `start`
    :param time1: the time corresponding to `end`
    :return: the interpolated value
    """

    if isinstance(start, Quaternion) and isinstance(end, Quaternion):
        return slerp(start, end, time, time0, time1)

    return lerp(start, end, interpolation_fraction(time, time0, time1))
