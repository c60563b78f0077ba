from unittest import TestCase

import itertools

import math

from vectoral import scalars
from vectoral.scalars import Sign
from vectoral.fraction import Fraction
from vectoral.real_number import RealNumber


class TestSign(TestCase):

    def test_of(self):

        self.assertIs(Sign.of(0), Sign.ZERO)
        self.assertIs(Sign.of(-0.0), Sign.ZERO)
        self.assertIs(Sign.of(3), Sign.POSITIVE)
        self.assertIs(Sign.of(-2.5), Sign.NEGATIVE)
        self.assertIs(Sign.of(math.inf), Sign.POSITIVE_INFINITY)
        self.assertIs(Sign.of(-math.inf), Sign.NEGATIVE_INFINITY)
        self.assertIs(Sign.of(math.nan), Sign.NAN)

    def test_order(self):

        expected = [Sign.NEGATIVE_INFINITY, Sign.NEGATIVE, Sign.ZERO, Sign.POSITIVE, Sign.POSITIVE_INFINITY, Sign.NAN]

        self.assertEqual(sorted(Sign, key=lambda s: s.value), expected)
        self.assertEqual(sorted(reversed(expected)), expected)
        self.assertLess(Sign.POSITIVE_INFINITY, Sign.NAN)
        self.assertGreaterEqual(Sign.ZERO, Sign.NEGATIVE)

    def test_multiply(self):

        self.assertIs(Sign.ZERO * Sign.POSITIVE_INFINITY, Sign.NAN)
        self.assertIs(Sign.NEGATIVE_INFINITY * Sign.ZERO, Sign.NAN)
        self.assertIs(Sign.NEGATIVE * Sign.NEGATIVE, Sign.POSITIVE)
        self.assertIs(Sign.NEGATIVE * Sign.POSITIVE_INFINITY, Sign.NEGATIVE_INFINITY)
        self.assertIs(Sign.POSITIVE_INFINITY * Sign.NEGATIVE_INFINITY, Sign.NEGATIVE_INFINITY)
        self.assertIs(Sign.NAN * Sign.ZERO, Sign.NAN)
        self.assertIs(Sign.ZERO * Sign.NEGATIVE, Sign.ZERO)
        self.assertIs(Sign.POSITIVE.multiply(Sign.POSITIVE), Sign.POSITIVE)

    def test_multiply_matches_floats(self):

        samples = {Sign.NEGATIVE_INFINITY: -math.inf, Sign.NEGATIVE: -2.0, Sign.ZERO: 0.0, Sign.POSITIVE: 3.0,
                   Sign.POSITIVE_INFINITY: math.inf, Sign.NAN: math.nan}

        for first, second in itertools.product(Sign, repeat=2):
            with self.subTest(first=first, second=second):
                self.assertIs(first * second, Sign.of(samples[first] * samples[second]))
                self.assertIs(first * second, second * first)

    def test_predicates(self):

        self.assertTrue(Sign.NAN.is_nan())
        self.assertTrue(Sign.ZERO.is_finite())
        self.assertFalse(Sign.POSITIVE_INFINITY.is_finite())
        self.assertTrue(Sign.NEGATIVE_INFINITY.is_infinite())
        self.assertEqual(Sign.NEGATIVE_INFINITY.polarity, -1)
        self.assertEqual(Sign.NAN.polarity, 0)

    def test_sign_function(self):

        self.assertIs(scalars.sign(-4), Sign.NEGATIVE)
        self.assertIs(scalars.sign(Fraction(-1, 2)), Sign.NEGATIVE)
        self.assertIs(scalars.sign(Fraction(1, 0)), Sign.POSITIVE_INFINITY)
        self.assertIs(scalars.sign(RealNumber(3, -1.5)), Sign.NEGATIVE)


class TestScalarHelpers(TestCase):

    def test_equals(self):

        self.assertTrue(scalars.equals(1.0, 1.0 + 1e-7))
        self.assertFalse(scalars.equals(1.0, 1.00001))
        self.assertFalse(scalars.equals(0, scalars.EPSILON))
        self.assertTrue(scalars.equals(1.0, 1.05, epsilon=0.1))

    def test_min_max(self):

        self.assertEqual(scalars.minimum(3, 2), 2)
        self.assertEqual(scalars.maximum(3, 2), 3)
        self.assertIsInstance(scalars.minimum(1, 1.0), int)
        self.assertIsInstance(scalars.maximum(1, 1.0), int)

    def test_clamp(self):

        self.assertEqual(scalars.clamp(5, 0, 3), 3)
        self.assertEqual(scalars.clamp(-1, 0, 3), 0)
        self.assertEqual(scalars.clamp(2, 0, 3), 2)
        self.assertEqual(scalars.clamp(Fraction(5, 2), Fraction(0), Fraction(1)), Fraction(1))
        self.assertEqual(scalars.clamp(RealNumber.from_float(-3), RealNumber.ZERO, RealNumber.ONE), 0)

    def test_ranges(self):

        self.assertTrue(scalars.is_in_range(1, 1, 2))
        self.assertFalse(scalars.is_in_range(2.5, 1, 2))
        self.assertEqual(scalars.require_range(1.5, 1, 2), 1.5)

        with self.assertRaises(ValueError):
            scalars.require_range(3, 1, 2)

    def test_require_finite(self):

        self.assertEqual(scalars.require_finite(2), 2.0)

        for value in [math.nan, math.inf, -math.inf]:
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    scalars.require_finite(value)

    def test_rescale(self):

        self.assertEqual(scalars.rescale(5, 0, 10, 0, 100), 50)
        self.assertEqual(scalars.rescale(15, 0, 10, 0, 100), 150)
        self.assertEqual(scalars.rescale(1, 1, 1, 0, 2), 0)

    def test_gcd_lcm(self):

        self.assertEqual(scalars.gcd(12, 18), 6)
        self.assertEqual(scalars.gcd(-12, 18), 6)
        self.assertEqual(scalars.gcd(0.5, 0.75), 0.25)
        self.assertEqual(scalars.gcd(0, 0), 0)

        self.assertEqual(scalars.lcm(4, 6), 12)
        self.assertEqual(scalars.lcm(0, 5), 0)
        self.assertEqual(scalars.lcm(0.5, 0.75), 1.5)


class TestFactorial(TestCase):

    def test_table(self):

        self.assertEqual(scalars.factorial(0), 1)
        self.assertEqual(scalars.factorial(1), 1)
        self.assertEqual(scalars.factorial(5), 120)
        self.assertEqual(scalars.factorial(20), 2432902008176640000)

        for n in range(21):
            with self.subTest(n=n):
                self.assertEqual(scalars.factorial(n), math.factorial(n))

    def test_overflow(self):

        with self.assertRaises(OverflowError):
            scalars.factorial(21)

    def test_negative(self):

        with self.assertRaises(ValueError):
            scalars.factorial(-1)

    def test_real_values(self):

        with self.assertLogs('vectoral.scalars', level='DEBUG'):
            self.assertAlmostEqual(scalars.factorial(4.0), 24, places=8)

        self.assertAlmostEqual(scalars.factorial(0.5), math.sqrt(math.pi) / 2, places=10)
        self.assertAlmostEqual(scalars.factorial(25.0) / math.factorial(25), 1, places=10)


class TestGamma(TestCase):

    def test_values(self):

        self.assertAlmostEqual(scalars.gamma(0.5), math.sqrt(math.pi), places=10)
        self.assertAlmostEqual(scalars.gamma(1), 1, places=10)
        self.assertAlmostEqual(scalars.gamma(6), 120, places=8)

        for x in [0.1, 0.7, 1.5, 3.3, 10.2]:
            with self.subTest(x=x):
                self.assertAlmostEqual(scalars.gamma(x) / math.gamma(x), 1, places=10)

    def test_reflection(self):

        self.assertAlmostEqual(scalars.gamma(-0.5), -2 * math.sqrt(math.pi), places=10)
        self.assertAlmostEqual(scalars.gamma(-1.5) / math.gamma(-1.5), 1, places=10)

    def test_poles(self):

        for x in [0, -1, -2.0]:
            with self.subTest(x=x):
                with self.assertRaises(ValueError):
                    scalars.gamma(x)
