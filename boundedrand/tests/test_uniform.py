"""
Unit tests for the uniform source and default configuration.
"""

import unittest

import numpy as np

from boundedrand.config import get_defaults
from boundedrand.uniform import draw_uniform, get_uniform_source


class TestUniformSource(unittest.TestCase):

    def test_seed_gives_random_state(self):
        source = get_uniform_source(5)
        self.assertIsInstance(source, np.random.RandomState)

    def test_generator_passes_through(self):
        rng = np.random.default_rng(0)
        self.assertIs(get_uniform_source(rng), rng)

    def test_draw_shape_and_range(self):
        u = draw_uniform((4, 3, 2), random_state=0)
        self.assertEqual(u.shape, (4, 3, 2))
        self.assertTrue(np.all((u >= 0.0) & (u < 1.0)))

    def test_wrong_shape_from_source_raises_error(self):
        class ScalarSource:
            def random(self, size=None):
                return 0.5

        with self.assertRaises(ValueError):
            draw_uniform((2, 2), random_state=ScalarSource())

    def test_defaults(self):
        defaults = get_defaults()
        self.assertEqual(defaults["lambda"], 4.0)
        self.assertEqual(defaults["shape"], (1, 1))


if __name__ == "__main__":
    unittest.main()
