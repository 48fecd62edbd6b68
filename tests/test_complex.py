"""Tests for the complex amplitude type."""

import numpy as np
import pytest

from qulite import Complex


class TestArithmetic:
    """Tests for complex arithmetic."""

    def test_add_and_subtract(self):
        a, b = Complex(1, 2), Complex(3, -4)
        assert a + b == Complex(4, -2)
        assert a - b == Complex(-2, 6)

    def test_multiply_complex(self):
        """(1 + 2i)(3 + 4i) = -5 + 10i"""
        assert Complex(1, 2) * Complex(3, 4) == Complex(-5, 10)

    def test_multiply_real_scalar(self):
        assert Complex(1, -2) * 2 == Complex(2, -4)
        assert 2 * Complex(1, -2) == Complex(2, -4)
        assert Complex(1, -2) * 0.5 == Complex(0.5, -1.0)

    def test_divide(self):
        assert Complex(-5, 10) / Complex(3, 4) == Complex(1, 2)

    def test_divide_by_zero_raises(self):
        with pytest.raises(ZeroDivisionError):
            Complex(1, 1) / Complex(0, 0)

    def test_negate(self):
        assert -Complex(1, -2) == Complex(-1, 2)


class TestPower:
    """Tests for integer powers via polar form."""

    def test_i_squared(self):
        z = Complex(0, 1) ** 2
        assert np.isclose(z.re, -1) and np.isclose(z.im, 0)

    def test_one_plus_i_to_the_fourth(self):
        """(1 + i)^4 = -4"""
        z = Complex(1, 1) ** 4
        assert np.isclose(z.re, -4) and np.isclose(z.im, 0, atol=1e-12)

    def test_zero_exponent(self):
        z = Complex(3, -7) ** 0
        assert np.isclose(z.re, 1) and np.isclose(z.im, 0)

    def test_negative_exponent(self):
        z = Complex(0, 2) ** -1
        assert np.isclose(z.re, 0, atol=1e-12) and np.isclose(z.im, -0.5)

    def test_large_exponent_saturates_to_infinity(self):
        """Overflowing powers degrade to inf instead of raising."""
        z = Complex(2.0, 0.0) ** 2000
        assert np.isinf(z.re) and z.re > 0

    def test_large_exponent_of_small_base_underflows_to_zero(self):
        z = Complex(0.5, 0.0) ** 2000
        assert z.re == 0.0

    def test_zero_to_negative_power_raises(self):
        with pytest.raises(ZeroDivisionError):
            Complex(0, 0) ** -2

    def test_matches_builtin_complex(self):
        z = Complex(0.3, -1.2)
        expected = complex(0.3, -1.2) ** 5
        assert np.isclose(complex(z ** 5), expected)


class TestProperties:
    """Tests for magnitude, conjugate, and zero test."""

    def test_magnitude(self):
        assert abs(Complex(3, 4)) == 5.0
        assert Complex(3, 4).magnitude() == 5.0

    def test_conjugate(self):
        assert Complex(1, 2).conjugate() == Complex(1, -2)

    def test_is_zero(self):
        assert Complex(0, 0).is_zero()
        assert not Complex(0, 1e-30).is_zero()

    def test_conversion_round_trip(self):
        z = Complex.from_complex(np.complex128(1.5 - 2j))
        assert z == Complex(1.5, -2.0)
        assert complex(z) == 1.5 - 2j


class TestFormatting:
    """Tests for display."""

    def test_default_precision(self):
        assert str(Complex(0, 1)) == "0.000 + 1.000i"

    def test_negative_imaginary_has_explicit_sign(self):
        assert Complex(1.5, -0.25).format(2) == "1.50 - 0.25i"

    def test_negative_zero_imaginary(self):
        assert Complex(1, -0.0).format(1) == "1.0 + 0.0i"
