from unittest import TestCase

import numpy as np

from vectoral.errors import DimensionMismatchError, UnsupportedOperationError
from vectoral.real_number import RealNumber
from vectoral.vectors import ComponentType, Vector, Vector2, Vector3, MutableVector


class TestMutableVector(TestCase):

    def test_construction(self):

        vector = MutableVector([1., 2.])

        self.assertEqual(vector.to_list(), [1., 2.])
        self.assertIs(vector.component_type, ComponentType.DOUBLE)

        self.assertEqual(len(MutableVector()), 0)
        self.assertIs(MutableVector([1, 2]).component_type, ComponentType.LONG)
        self.assertIs(MutableVector((value for value in [1., 2., 3.])).component_type, ComponentType.DOUBLE)
        self.assertIs(MutableVector(Vector3(1, 2, 3), 'int').component_type, ComponentType.INT)
        self.assertEqual(MutableVector(np.array([1., 2.])).to_list(), [1., 2.])

    def test_zeros(self):

        vector = MutableVector.zeros(3)

        self.assertEqual(vector.to_list(), [0., 0., 0.])
        self.assertIs(vector.component_type, ComponentType.DOUBLE)

        vector = MutableVector.zeros(2, 'real')
        self.assertTrue(vector.is_zero())
        self.assertIsInstance(vector[0], RealNumber)

    def test_set(self):

        vector = MutableVector.zeros(3, ComponentType.LONG)

        vector.set(0, 5)
        vector[1] = 2.7
        vector[-1] = -3

        self.assertEqual(vector.to_list(), [5, 2, -3])

        with self.assertRaises(IndexError):
            vector.set(3, 1)

    def test_set_real(self):

        vector = MutableVector.zeros(2, 'real')

        vector[0] = 12

        self.assertTrue(vector[0].strict_equals(RealNumber(3, 1.5)))

    def test_append(self):

        vector = MutableVector([1., 2.])

        vector.append(3)

        self.assertEqual(vector.dimension, 3)
        self.assertEqual(vector.to_list(), [1., 2., 3.])

        vector[2] = 4.
        self.assertEqual(vector[2], 4.)

        empty = MutableVector()
        empty.append(1.5)
        self.assertEqual(empty.to_list(), [1.5])

    def test_resize(self):

        vector = MutableVector([1, 2, 3])

        vector.resize(5)
        self.assertEqual(vector.to_list(), [1, 2, 3, 0, 0])
        self.assertIs(vector.component_type, ComponentType.LONG)

        vector.resize(2)
        self.assertEqual(vector.to_list(), [1, 2])

        vector[1] = 7
        self.assertEqual(vector.to_list(), [1, 7])

        vector.resize(0)
        self.assertEqual(len(vector), 0)

        with self.assertRaises(ValueError):
            vector.resize(-1)

    def test_in_place_arithmetic(self):

        total = MutableVector.zeros(3)
        original = total

        for point in (Vector3(1., 2., 3.), Vector3(2., 2., 2.)):
            total += point

        self.assertIs(total, original)
        self.assertEqual(total.to_list(), [3., 4., 5.])

        total -= 1
        self.assertIs(total, original)
        self.assertEqual(total.to_list(), [2., 3., 4.])

        with self.assertRaises(DimensionMismatchError):
            total += Vector2(1., 1.)

        with self.assertRaises(DimensionMismatchError):
            MutableVector([1., 2., 3.]) + MutableVector([1., 2., 3., 4.])

        with self.assertRaises(TypeError):
            total += 'a'

    def test_arithmetic_returns_new(self):

        vector = MutableVector([1., 2.])

        result = vector + Vector2(1., 1.)

        self.assertIsInstance(result, MutableVector)
        self.assertIsNot(result, vector)
        self.assertEqual(vector.to_list(), [1., 2.])

        scaled = vector * 2
        self.assertIsInstance(scaled, MutableVector)
        self.assertEqual(scaled.to_list(), [2., 4.])

        scaled[0] = 0.
        self.assertEqual(scaled.to_list(), [0., 4.])

    def test_no_vector_product(self):

        with self.assertRaises(UnsupportedOperationError):
            MutableVector([1., 2.]) * MutableVector([1., 2.])

        with self.assertRaises(UnsupportedOperationError):
            MutableVector([1., 2.]).multiply(Vector2(1., 2.))

        self.assertEqual(MutableVector([1., 2.]).dot(Vector2(3., 4.)), 11.)

    def test_unhashable(self):

        with self.assertRaises(TypeError):
            hash(MutableVector([1., 2.]))

    def test_freeze(self):

        vector = MutableVector([1., 2., 3.])

        frozen = vector.freeze()

        self.assertIs(type(frozen), Vector3)
        self.assertEqual(frozen, Vector3(1., 2., 3.))

        vector[0] = 10.
        self.assertEqual(frozen.x, 1.)

        self.assertIs(type(MutableVector([1., 2., 3., 4., 5.]).freeze()), Vector)
        self.assertIs(MutableVector([1, 2], 'int').freeze().component_type, ComponentType.INT)

        hash(frozen)

    def test_equality(self):

        self.assertEqual(MutableVector([1., 2., 3.]), Vector3(1., 2., 3.))
        self.assertNotEqual(MutableVector([1., 2.]), Vector3(1., 2., 0.))

    def test_str(self):

        self.assertEqual(str(MutableVector([1., 2.])), 'MutableVector{values=[1.0, 2.0]}')
