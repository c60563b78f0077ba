from unittest import TestCase

import datetime

import math

import numpy as np

from vectoral.fraction import Fraction
from vectoral.interpolation import interpolation_fraction, lerp, nlerp, slerp, interpolate
from vectoral.real_number import RealNumber
from vectoral.vectors import Vector2, Vector3, Quaternion


class TestInterpolationFraction(TestCase):

    def test_numbers(self):

        self.assertEqual(interpolation_fraction(0.25), 0.25)
        self.assertEqual(interpolation_fraction(15, 10, 20), 0.5)
        self.assertEqual(interpolation_fraction(25, 10, 20), 1.5)

    def test_datetimes(self):

        start = datetime.datetime(2020, 1, 1)
        end = start + datetime.timedelta(hours=4)

        self.assertEqual(interpolation_fraction(start + datetime.timedelta(hours=1), start, end), 0.25)

    def test_errors(self):

        with self.assertRaises(TypeError):
            interpolation_fraction(datetime.datetime(2020, 1, 1))

        with self.assertRaises(ZeroDivisionError):
            interpolation_fraction(1, 2, 2)


class TestLerp(TestCase):

    def test_scalars(self):

        self.assertEqual(lerp(0., 10., 0.25), 2.5)
        self.assertEqual(lerp(0., 10., 1.5), 15.)
        self.assertEqual(lerp(0., 10., -0.5), -5.)
        self.assertEqual(lerp(2., 4., 0), 2.)
        self.assertEqual(lerp(2., 4., 1), 4.)

    def test_vectors(self):

        result = lerp(Vector3(0., 0., 0.), Vector3(2., 4., -6.), 0.5)

        self.assertIs(type(result), Vector3)
        self.assertEqual(result, Vector3(1., 2., -3.))

        self.assertEqual(lerp(Vector2(0, 0), Vector2(3, 3), 0.5), Vector2(1, 1))

    def test_numbers(self):

        self.assertEqual(lerp(Fraction(0, 1), Fraction(1, 1), 0.5), Fraction(1, 2))

        result = lerp(RealNumber.from_float(2), RealNumber.from_float(4), 0.5)
        self.assertIsInstance(result, RealNumber)
        self.assertEqual(result, 3)

    def test_arrays(self):

        np.testing.assert_array_equal(lerp(np.array([0., 1.]), np.array([2., 3.]), 0.5), [1., 2.])


class TestSlerp(TestCase):

    def setUp(self):

        self.start = Quaternion.IDENTITY
        self.end = Quaternion.from_axis_angle(Vector3.POSITIVE_Z, math.pi / 2)

    def test_end_points(self):

        self.assertTrue(slerp(self.start, self.end, 0).is_close(self.start))
        self.assertTrue(slerp(self.start, self.end, 1).is_close(self.end))

    def test_midpoint(self):

        result = slerp(self.start, self.end, 0.5)

        self.assertIsInstance(result, Quaternion)
        self.assertTrue(result.is_close(Quaternion.from_axis_angle(Vector3.POSITIVE_Z, math.pi / 4)))
        self.assertAlmostEqual(result.magnitude(), 1, places=12)

    def test_constant_angular_rate(self):

        end = Quaternion.from_axis_angle(Vector3(1., 2., 3.), 2.5)

        for t in [0.1, 0.3, 0.6, 0.9]:
            with self.subTest(t=t):
                self.assertAlmostEqual(slerp(self.start, end, t).angle(), 2.5 * t, places=10)

    def test_shortest_path(self):

        result = slerp(self.start, -self.end, 0.5)

        self.assertTrue(result.is_close(Quaternion.from_axis_angle(Vector3.POSITIVE_Z, math.pi / 4)))

    def test_extrapolation(self):

        result = slerp(self.start, self.end, 2)

        self.assertTrue(result.is_close(Quaternion.from_axis_angle(Vector3.POSITIVE_Z, math.pi)))

    def test_times(self):

        result = slerp(self.start, self.end, 15, 10, 20)

        self.assertTrue(result.is_close(slerp(self.start, self.end, 0.5)))

        start_time = datetime.datetime(2021, 3, 1, 12)
        end_time = start_time + datetime.timedelta(seconds=10)

        result = slerp(self.start, self.end, start_time + datetime.timedelta(seconds=5), start_time, end_time)

        self.assertTrue(result.is_close(slerp(self.start, self.end, 0.5)))

    def test_nearly_parallel(self):

        end = Quaternion.from_axis_angle(Vector3.POSITIVE_X, 1e-5)

        with self.assertLogs('vectoral.interpolation', level='DEBUG'):
            result = slerp(self.start, end, 0.5)

        self.assertTrue(result.is_close(lerp(self.start, end, 0.5)))

    def test_arrays(self):

        result = slerp([1., 0., 0., 0.], np.array(self.end.to_list()), 0.5)

        self.assertIsInstance(result, Quaternion)
        self.assertTrue(result.is_close(Quaternion.from_axis_angle(Vector3.POSITIVE_Z, math.pi / 4)))


class TestNlerp(TestCase):

    def test_unit_result(self):

        start = Quaternion.from_axis_angle(Vector3.POSITIVE_Y, 0.2)
        end = Quaternion.from_axis_angle(Vector3(1., 1., 0.), 1.7)

        for t in [0, 0.25, 0.5, 1]:
            with self.subTest(t=t):
                result = nlerp(start, end, t)
                self.assertIsInstance(result, Quaternion)
                self.assertAlmostEqual(result.magnitude(), 1, places=12)

        self.assertTrue(nlerp(start, end, 0).is_close(start))
        self.assertTrue(nlerp(start, end, 1).is_close(end))

    def test_symmetric_midpoint(self):

        end = Quaternion.from_axis_angle(Vector3.POSITIVE_Z, math.pi / 2)

        result = nlerp(Quaternion.IDENTITY, end, 5, 0, 10)

        self.assertTrue(result.is_close(Quaternion.from_axis_angle(Vector3.POSITIVE_Z, math.pi / 4)))


class TestInterpolate(TestCase):

    def test_dispatch(self):

        end = Quaternion.from_axis_angle(Vector3.POSITIVE_Z, math.pi / 2)

        self.assertTrue(interpolate(Quaternion.IDENTITY, end, 1, 0, 4).is_close(
            slerp(Quaternion.IDENTITY, end, 0.25)))

        self.assertEqual(interpolate(Vector2(0., 0.), Vector2(4., 8.), 3, 2, 6), Vector2(1., 2.))
        self.assertEqual(interpolate(10., 20., 0.5), 15.)
