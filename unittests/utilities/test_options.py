from unittest import TestCase

from dataclasses import dataclass, field

from vectoral.utilities.options import UserOptions
from vectoral.utilities.mixin_classes import UserOptionConfigured


@dataclass
class ExampleOptions(UserOptions):

    count: int = 3

    scale: float = 1.5

    names: list = field(default_factory=lambda: ['a', 'b'])

    def override_options(self):
        if self.count < 0:
            raise ValueError('count must be positive')


class Example(UserOptionConfigured[ExampleOptions], ExampleOptions):

    def __init__(self, options: ExampleOptions | None = None):
        super().__init__(ExampleOptions, options=options)


class TestUserOptions(TestCase):

    def test_options_dict(self):

        options = ExampleOptions(count=5)

        self.assertEqual(options.options_dict, {'count': 5, 'scale': 1.5, 'names': ['a', 'b']})

    def test_apply_options(self):

        class Target:
            pass

        target = Target()

        ExampleOptions(scale=2.).apply_options(target)

        self.assertEqual(target.count, 3)
        self.assertEqual(target.scale, 2.)

    def test_override_options(self):

        with self.assertRaises(ValueError):
            ExampleOptions(count=-1).options_dict


class TestUserOptionConfigured(TestCase):

    def test_defaults(self):

        example = Example()

        self.assertEqual(example.count, 3)
        self.assertEqual(example.scale, 1.5)
        self.assertEqual(example.original_options, ExampleOptions())

    def test_options(self):

        example = Example(options=ExampleOptions(count=10, names=['c']))

        self.assertEqual(example.count, 10)
        self.assertEqual(example.names, ['c'])

    def test_reset_settings(self):

        options = ExampleOptions(count=4)

        example = Example(options=options)

        example.count = 100
        example.scale = -1.
        options.count = 50

        example.reset_settings()

        self.assertEqual(example.count, 4)
        self.assertEqual(example.scale, 1.5)

    def test_validation(self):

        with self.assertRaises(ValueError):
            Example(options=ExampleOptions(count=-2))
