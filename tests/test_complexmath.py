"""Tests for the single-precision complex value."""

import numpy as np
import pytest


class TestComplex:
    """Arithmetic on Complex values."""

    def test_components_are_float32(self):
        from fractals import Complex

        z = Complex(1.5, -2)
        assert isinstance(z.real, np.float32)
        assert isinstance(z.imag, np.float32)

    def test_add_is_componentwise(self):
        from fractals import Complex

        z = Complex(1.0, 2.0) + Complex(3.0, 4.0)
        assert z == Complex(4.0, 6.0)

    def test_multiply(self):
        from fractals import Complex

        z = Complex(1.0, 2.0) * Complex(3.0, 4.0)
        assert z.real == pytest.approx(-5.0)
        assert z.imag == pytest.approx(10.0)

    def test_square_of_i_is_minus_one(self):
        from fractals import Complex

        i = Complex(0.0, 1.0)
        assert i * i == Complex(-1.0, 0.0)

    def test_norm_sqr_and_magnitude(self):
        from fractals import Complex

        z = Complex(3.0, 4.0)
        assert z.norm_sqr() == pytest.approx(25.0)
        assert z.magnitude() == pytest.approx(5.0)
        assert isinstance(z.magnitude(), np.float32)

    def test_values_are_immutable(self):
        from dataclasses import FrozenInstanceError
        from fractals import Complex

        z = Complex(0.0, 0.0)
        with pytest.raises(FrozenInstanceError):
            z.real = np.float32(1.0)
