"""
Immutable complex number used for qubit amplitudes.

Python's builtin ``complex`` has no integer power via polar form and no
fixed-precision display with an explicit imaginary sign, so amplitudes
are carried in this small value type. It converts to and from ``complex``
for numpy interop.
"""

from dataclasses import dataclass
from numbers import Integral, Real

import numpy as np

DEFAULT_PRECISION = 3


@dataclass(frozen=True)
class Complex:
    """A complex value ``re + im·i``. Equality is by value."""

    re: float = 0.0
    im: float = 0.0

    @classmethod
    def from_complex(cls, z) -> "Complex":
        """Build from a builtin or numpy complex."""
        z = complex(z)
        return cls(z.real, z.imag)

    def __complex__(self) -> complex:
        return complex(self.re, self.im)

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def __add__(self, other):
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(self.re + other.re, self.im + other.im)

    def __sub__(self, other):
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(self.re - other.re, self.im - other.im)

    def __mul__(self, other):
        if isinstance(other, Complex):
            return Complex(self.re * other.re - self.im * other.im,
                           self.re * other.im + self.im * other.re)
        if isinstance(other, Real):
            return Complex(self.re * other, self.im * other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other):
        """
        Divide by another complex number.

        Raises:
            ZeroDivisionError: If the divisor has zero magnitude
        """
        if not isinstance(other, Complex):
            return NotImplemented
        denominator = other.re * other.re + other.im * other.im
        if denominator == 0:
            raise ZeroDivisionError("complex division by zero")
        return Complex((self.re * other.re + self.im * other.im) / denominator,
                       (self.im * other.re - self.re * other.im) / denominator)

    def __pow__(self, n):
        """
        Integer power via De Moivre: z^n = r^n (cos nθ + i sin nθ).

        Precision degrades for large exponents, since the angle is scaled
        before the trigonometric functions are evaluated.
        """
        if not isinstance(n, Integral) or isinstance(n, bool):
            return NotImplemented
        r = abs(self)
        if r == 0 and n < 0:
            raise ZeroDivisionError("zero raised to a negative power")
        theta = np.arctan2(self.im, self.re) * n
        # Overflow saturates to inf rather than raising
        with np.errstate(over="ignore", invalid="ignore"):
            scale = np.power(r, float(n))
            re, im = scale * np.cos(theta), scale * np.sin(theta)
        return Complex(float(re), float(im))

    def __neg__(self):
        return Complex(-self.re, -self.im)

    def __abs__(self) -> float:
        """Magnitude |a + bi| = sqrt(a² + b²)."""
        return float(np.sqrt(self.re * self.re + self.im * self.im))

    def magnitude(self) -> float:
        return abs(self)

    def conjugate(self) -> "Complex":
        """(a + bi) -> (a - bi)"""
        return Complex(self.re, -self.im)

    def is_zero(self) -> bool:
        return self.re == 0 and self.im == 0

    # =========================================================================
    # Display
    # =========================================================================

    def format(self, precision: int = DEFAULT_PRECISION) -> str:
        """Render as ``a + bi`` / ``a - bi`` with ``precision`` decimals."""
        sign = "+" if self.im >= 0 else "-"
        return f"{self.re:.{precision}f} {sign} {abs(self.im):.{precision}f}i"

    def __str__(self) -> str:
        return self.format()
