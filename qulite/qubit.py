"""
Single-qubit state.

A qubit is a pair of complex amplitudes (u, v) for |0⟩ and |1⟩. Qubits are
independent values: there is no joint state vector, so a register is just
an ordered list of Qubit objects. Every operation returns a new Qubit.

The unit invariant |u|² + |v|² = 1 is not enforced on construction; it is
checked with is_unit() and restored with make_unit().
"""

from dataclasses import dataclass
from numbers import Real
from typing import Optional, Tuple

import numpy as np

from .complex_number import Complex, DEFAULT_PRECISION
from .randomness import resolve_rng

UNIT_TOLERANCE = 1e-9


@dataclass(frozen=True)
class Qubit:
    """Amplitudes u (of |0⟩) and v (of |1⟩)."""

    u: Complex = Complex(1.0, 0.0)
    v: Complex = Complex(0.0, 0.0)

    @classmethod
    def from_parts(cls, u_re: float, u_im: float, v_re: float, v_im: float) -> "Qubit":
        """Build from the four real components (Re u, Im u, Re v, Im v)."""
        return cls(Complex(u_re, u_im), Complex(v_re, v_im))

    @classmethod
    def zero(cls) -> "Qubit":
        """The basis state |0⟩ = (1, 0, 0, 0)."""
        return cls(Complex(1.0, 0.0), Complex(0.0, 0.0))

    @classmethod
    def one(cls) -> "Qubit":
        """The basis state |1⟩ = (0, 0, 1, 0)."""
        return cls(Complex(0.0, 0.0), Complex(1.0, 0.0))

    @classmethod
    def from_vector(cls, vector) -> "Qubit":
        """Build from a length-2 array [u, v]."""
        u, v = np.asarray(vector, dtype=complex).reshape(2)
        return cls(Complex.from_complex(u), Complex.from_complex(v))

    def to_vector(self) -> np.ndarray:
        """Return the amplitudes as a complex numpy array [u, v]."""
        return np.array([complex(self.u), complex(self.v)], dtype=complex)

    # =========================================================================
    # Measurement
    # =========================================================================

    def probabilities(self) -> Tuple[float, float]:
        """Return (|u|², |v|²) without normalizing."""
        return abs(self.u) ** 2, abs(self.v) ** 2

    def measure(self, rng: Optional[np.random.Generator] = None) -> bool:
        """
        Sample a classical outcome without changing the qubit.

        Draws one uniform sample in [0, 1) and reports one if it exceeds
        |u|², so P(one) = |v|² for a unit qubit.

        Returns:
            True for one, False for zero
        """
        sample = resolve_rng(rng).random()
        return bool(sample > abs(self.u) ** 2)

    def collapse(self, rng: Optional[np.random.Generator] = None) -> "Qubit":
        """Measure and return the matching basis state as a new Qubit."""
        return Qubit.one() if self.measure(rng) else Qubit.zero()

    def is_one(self) -> bool:
        """True if this is exactly |1⟩ (meaningful after a collapse)."""
        return self == Qubit.one()

    def is_zero(self) -> bool:
        """True if this is exactly |0⟩ (meaningful after a collapse)."""
        return self == Qubit.zero()

    # =========================================================================
    # Normalization
    # =========================================================================

    def weight(self) -> float:
        """|u|² + |v|²"""
        p0, p1 = self.probabilities()
        return p0 + p1

    def is_unit(self) -> bool:
        return abs(self.weight() - 1.0) < UNIT_TOLERANCE

    def make_unit(self) -> "Qubit":
        """
        Scale both amplitudes by 1/sqrt(weight).

        Returns self unchanged if already unit.

        Raises:
            ZeroDivisionError: If both amplitudes are zero
        """
        weight = self.weight()
        if abs(weight - 1.0) < UNIT_TOLERANCE:
            return self
        if weight == 0:
            raise ZeroDivisionError("cannot normalize a qubit with zero weight")
        factor = 1 / np.sqrt(weight)
        return self * float(factor)

    # =========================================================================
    # Elementary transforms
    # =========================================================================

    def flip(self) -> "Qubit":
        """Swap u and v (the NOT operation)."""
        return Qubit(self.v, self.u)

    def compare(self, other: "Qubit") -> bool:
        """True if this qubit is more likely than ``other`` to measure one."""
        return abs(self.v) > abs(other.v)

    def __mul__(self, other):
        if isinstance(other, (Complex, Real)):
            return Qubit(self.u * other, self.v * other)
        return NotImplemented

    __rmul__ = __mul__

    # =========================================================================
    # Display
    # =========================================================================

    def format(self, precision: int = DEFAULT_PRECISION) -> str:
        return f"({self.u.format(precision)}) |0> + ({self.v.format(precision)}) |1>"

    def __str__(self) -> str:
        return self.format()
