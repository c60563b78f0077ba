from unittest import TestCase

import numpy as np

from vectoral.real_number import RealNumber
from vectoral.random_vectors import RandomVectorGenerator, RandomVectorGeneratorOptions
from vectoral.vectors import ComponentType, Vector, Vector2, Vector3, Vector4, Quaternion, MutableVector


class TestRandomVectorGeneratorOptions(TestCase):

    def test_defaults(self):

        generator = RandomVectorGenerator()

        self.assertIsNone(generator.seed)
        self.assertEqual(generator.low, -1.0)
        self.assertEqual(generator.high, 1.0)
        self.assertIs(generator.component_type, ComponentType.DOUBLE)

    def test_options_applied(self):

        options = RandomVectorGeneratorOptions(seed=3, low=2., high=5., component_type='long')

        generator = RandomVectorGenerator(options=options)

        self.assertEqual(generator.seed, 3)
        self.assertEqual(generator.low, 2.)
        self.assertEqual(generator.high, 5.)
        self.assertIs(generator.component_type, ComponentType.LONG)

    def test_bounds_validated(self):

        with self.assertRaises(ValueError):
            RandomVectorGenerator(options=RandomVectorGeneratorOptions(low=1., high=0.))

    def test_bad_component_type(self):

        with self.assertRaises(ValueError):
            RandomVectorGenerator(options=RandomVectorGeneratorOptions(component_type='quad'))


class TestRandomVectorGenerator(TestCase):

    def test_reproducible(self):

        first = RandomVectorGenerator(options=RandomVectorGeneratorOptions(seed=42))
        second = RandomVectorGenerator(options=RandomVectorGeneratorOptions(seed=42))

        self.assertEqual(first.vector3(), second.vector3())
        self.assertEqual(first.quaternion(), second.quaternion())
        self.assertEqual(first.scalar(), second.scalar())

        self.assertNotEqual(first.vector3(), RandomVectorGenerator(
            options=RandomVectorGeneratorOptions(seed=43)).vector3())

    def test_independent_generators(self):

        first = RandomVectorGenerator(options=RandomVectorGeneratorOptions(seed=7))
        second = RandomVectorGenerator(options=RandomVectorGeneratorOptions(seed=7))

        expected = second.vector4()

        RandomVectorGenerator(options=RandomVectorGeneratorOptions(seed=7)).vector(100)

        self.assertEqual(first.vector4(), expected)

    def test_reset_settings(self):

        generator = RandomVectorGenerator(options=RandomVectorGeneratorOptions(seed=11))

        expected = generator.vector2()

        generator.low = 100.
        generator.high = 200.
        generator.vector(10)

        generator.reset_settings()

        self.assertEqual(generator.low, -1.)
        self.assertEqual(generator.vector2(), expected)

    def test_external_rng(self):

        rng = np.random.default_rng(5)

        generator = RandomVectorGenerator(options=RandomVectorGeneratorOptions(seed=1), rng=rng)

        self.assertIs(generator.rng, rng)

        expected = np.random.default_rng(5).uniform(-1, 1, size=3)
        np.testing.assert_array_equal(generator.vector3().to_list(), expected)

        generator.reset_settings()
        self.assertIs(generator.rng, rng)

    def test_scalar(self):

        generator = RandomVectorGenerator(options=RandomVectorGeneratorOptions(seed=0, low=3., high=4.))

        for _ in range(20):
            value = generator.scalar()
            self.assertIsInstance(value, float)
            self.assertGreaterEqual(value, 3.)
            self.assertLess(value, 4.)

        generator.component_type = ComponentType.LONG
        self.assertEqual(generator.scalar(), 3)
        self.assertIsInstance(generator.scalar(), int)

        generator.component_type = 'real'
        self.assertIsInstance(generator.scalar(), RealNumber)

    def test_bounds(self):

        generator = RandomVectorGenerator(options=RandomVectorGeneratorOptions(seed=2, low=-5., high=-2.))

        vector = generator.vector(1000)

        self.assertIs(type(vector), Vector)
        self.assertEqual(len(vector), 1000)
        self.assertTrue(all(-5. <= value < -2. for value in vector))

    def test_classes(self):

        generator = RandomVectorGenerator(options=RandomVectorGeneratorOptions(seed=3))

        self.assertIs(type(generator.vector(2)), Vector2)
        self.assertIs(type(generator.vector(3)), Vector3)
        self.assertIs(type(generator.vector(4)), Vector4)
        self.assertIs(type(generator.vector2()), Vector2)
        self.assertIs(type(generator.vector3()), Vector3)
        self.assertIs(type(generator.vector4()), Vector4)

        mutable = generator.mutable_vector(6)
        self.assertIs(type(mutable), MutableVector)
        self.assertEqual(len(mutable), 6)
        mutable[0] = 10.
        self.assertEqual(mutable[0], 10.)

    def test_component_type(self):

        generator = RandomVectorGenerator(options=RandomVectorGeneratorOptions(seed=4, low=-10., high=10.,
                                                                               component_type=ComponentType.INT))

        vector = generator.vector3()

        self.assertIs(vector.component_type, ComponentType.INT)
        self.assertTrue(all(-10 <= value <= 9 for value in vector))

        real = RandomVectorGenerator(options=RandomVectorGeneratorOptions(seed=4, component_type='real')).vector(5)
        self.assertIs(real.component_type, ComponentType.REAL)

    def test_unit_vector3(self):

        generator = RandomVectorGenerator(options=RandomVectorGeneratorOptions(seed=8, component_type='long'))

        for _ in range(50):
            vector = generator.unit_vector3()
            self.assertIs(vector.component_type, ComponentType.DOUBLE)
            self.assertAlmostEqual(vector.magnitude(), 1, places=12)

    def test_unit_vector3_distribution(self):

        generator = RandomVectorGenerator(options=RandomVectorGeneratorOptions(seed=9))

        mean = np.mean([generator.unit_vector3().to_list() for _ in range(4000)], axis=0)

        np.testing.assert_array_less(np.abs(mean), 0.05)

    def test_quaternion(self):

        generator = RandomVectorGenerator(options=RandomVectorGeneratorOptions(seed=10))

        for _ in range(50):
            rotation = generator.quaternion()
            self.assertIsInstance(rotation, Quaternion)
            self.assertAlmostEqual(rotation.magnitude(), 1, places=12)

            vector = Vector3(1., -2., 0.5)
            self.assertAlmostEqual(rotation.rotate(vector).magnitude(), vector.magnitude(), places=10)
