"""
Unit tests for unit-carrying bounds.

STRATEGY:
    Use a minimal gram quantity that, like real units libraries, wraps its
    magnitude, refuses to mix with bare numbers, has no .flat iterator and
    makes numpy defer arithmetic to it. Verify units survive the mode-first,
    uniform and degenerate paths of both samplers.
"""

import unittest

import numpy as np

from boundedrand.pert import sample_pert
from boundedrand.triangular import sample_triangular
from boundedrand.uncertain import uncertain_variable


class Grams:
    """Mass in grams wrapping a float or ndarray magnitude."""

    __array_ufunc__ = None
    __hash__ = None

    def __init__(self, magnitude):
        self.magnitude = magnitude

    @staticmethod
    def _mag(other):
        if not isinstance(other, Grams):
            raise TypeError(f"cannot combine grams with {type(other).__name__}")
        return other.magnitude

    def __add__(self, other):
        return Grams(self.magnitude + self._mag(other))

    __radd__ = __add__

    def __sub__(self, other):
        return Grams(self.magnitude - self._mag(other))

    def __mul__(self, other):
        if isinstance(other, Grams):
            raise TypeError("grams squared are not supported")
        return Grams(self.magnitude * other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, Grams):
            return self.magnitude / other.magnitude
        return Grams(self.magnitude / other)

    def __eq__(self, other):
        if not isinstance(other, Grams):
            return NotImplemented
        return self.magnitude == other.magnitude

    def __ne__(self, other):
        if not isinstance(other, Grams):
            return NotImplemented
        return self.magnitude != other.magnitude

    def __lt__(self, other):
        return self.magnitude < self._mag(other)

    def __gt__(self, other):
        return self.magnitude > self._mag(other)

    def __getitem__(self, index):
        return Grams(self.magnitude[index])

    def __setitem__(self, index, value):
        self.magnitude[index] = self._mag(value)

    @property
    def shape(self):
        return np.shape(self.magnitude)

    @property
    def ndim(self):
        return np.ndim(self.magnitude)

    @property
    def size(self):
        return np.size(self.magnitude)


def grams(*values):
    return [Grams(value) for value in values]


class TestQuantityBounds(unittest.TestCase):

    def test_triangular_mode_first_keeps_units(self):
        samples = sample_triangular(grams(1.0, 1.5, 3.5), [1000, 1], force_mode_first=True, random_state=0)
        self.assertIsInstance(samples, Grams)
        self.assertEqual(samples.shape, (1000, 1))
        self.assertEqual(samples.magnitude[0, 0], 1.5)
        self.assertTrue(np.all(samples.magnitude >= 1.0))
        self.assertTrue(np.all(samples.magnitude <= 3.5))

    def test_pert_mode_first_keeps_units(self):
        samples = sample_pert(grams(3.0, 5.0, 6.0), [2, 3, 4], force_mode_first=True, random_state=0)
        self.assertIsInstance(samples, Grams)
        self.assertEqual(samples.magnitude[0, 0, 0], 5.0)
        self.assertTrue(np.all(samples.magnitude >= 3.0))
        self.assertTrue(np.all(samples.magnitude <= 6.0))

    def test_symmetric_pert_with_units(self):
        samples = sample_pert(grams(-1.7, 1.5), [500, 1], random_state=1)
        self.assertFalse(np.any(np.isnan(samples.magnitude)))

    def test_nan_mode_first_uses_midpoint(self):
        for sampler in (sample_triangular, sample_pert):
            samples = sampler(grams(2.0, np.nan, 4.0), [100, 1], force_mode_first=True, random_state=2)
            self.assertIsInstance(samples, Grams)
            self.assertEqual(samples.magnitude[0, 0], 3.0)

    def test_degenerate_keeps_units(self):
        for sampler in (sample_triangular, sample_pert):
            samples = sampler(grams(2.0), [2, 1])
            self.assertIsInstance(samples, Grams)
            np.testing.assert_array_equal(samples.magnitude, np.full((2, 1), 2.0))

    def test_uncertain_variable_with_units(self):
        dime = uncertain_variable(grams(1.0, 1.5, 3.5), n=1000, random_state=3)
        nickel = uncertain_variable(grams(3.0, 5.0, 6.0), n=1000, random_state=4)
        total = dime + nickel
        self.assertIsInstance(total, Grams)
        self.assertEqual(total.magnitude[0, 0], 6.5)


if __name__ == "__main__":
    unittest.main()
