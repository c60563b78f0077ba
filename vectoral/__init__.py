# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
vectoral provides extended precision numbers and vector algebra.

=================================  =====================================================================================
Module                             Description
=================================  =====================================================================================
:mod:`.scalars`                    epsilon equality, clamping, sign classification, factorial and gamma
:mod:`.fraction`                   :class:`.Fraction`, a two field rational that can represent non-finite values
:mod:`.real_number`                :class:`.RealNumber`, a :math:`2^em` number with a range beyond a double
:mod:`.vectors`                    the vector classes and :class:`.Quaternion`
:mod:`.interpolation`              :func:`.lerp`, :func:`.slerp`, and :func:`.nlerp`
:mod:`.random_vectors`             :class:`.RandomVectorGenerator` for seeded random vectors and rotations
:mod:`.errors`                     the exceptions raised by vectoral
=================================  =====================================================================================
"""

from vectoral.errors import (VectoralError, DimensionMismatchError, UnsupportedOperationError,
                             NonFiniteArithmeticError, ParseError)
from vectoral.scalars import Sign, EPSILON, sign, equals, clamp, factorial, gamma
from vectoral.fraction import Fraction
from vectoral.real_number import RealNumber
from vectoral.vectors import (ComponentType, Vector, Vector2, Vector3, Vector4, Quaternion, MutableVector)
from vectoral.interpolation import lerp, slerp, nlerp, interpolation_fraction
from vectoral.random_vectors import RandomVectorGenerator, RandomVectorGeneratorOptions

__all__ = ['VectoralError', 'DimensionMismatchError', 'UnsupportedOperationError', 'NonFiniteArithmeticError',
           'ParseError', 'Sign', 'EPSILON', 'sign', 'equals', 'clamp', 'factorial', 'gamma', 'Fraction', 'RealNumber',
           'ComponentType', 'Vector', 'Vector2', 'Vector3', 'Vector4', 'Quaternion', 'MutableVector',
           'lerp', 'slerp', 'nlerp', 'interpolation_fraction', 'RandomVectorGenerator', 'RandomVectorGeneratorOptions']
