"""
Utility functions for qubit registers.

This module provides helper functions for:
- Generating registers (all-zero or random normalized)
- Classical readout (bit lists, binary strings, integers)
- Display of multi-qubit registers
- Amplitude comparison
"""

import numpy as np
from typing import List, Optional, Sequence

from .complex_number import Complex, DEFAULT_PRECISION
from .qubit import Qubit
from .randomness import resolve_rng

_ROW_SEPARATOR = "-" * 92


# =============================================================================
# Register generators
# =============================================================================

def default_register(num_qubits: int) -> List[Qubit]:
    """Return ``num_qubits`` qubits, all |0⟩."""
    if num_qubits < 0:
        raise ValueError(f"num_qubits must be >= 0, got {num_qubits}")
    return [Qubit.zero() for _ in range(num_qubits)]


def random_register(num_qubits: int, rng: Optional[np.random.Generator] = None) -> List[Qubit]:
    """
    Return ``num_qubits`` normalized qubits with random amplitudes.

    Each real and imaginary part is drawn uniformly from [-1, 1) before
    normalization. Intended for testing.
    """
    if num_qubits < 0:
        raise ValueError(f"num_qubits must be >= 0, got {num_qubits}")
    rng = resolve_rng(rng)
    register = []
    for _ in range(num_qubits):
        u_re, u_im, v_re, v_im = rng.uniform(-1.0, 1.0, size=4)
        qubit = Qubit(Complex(float(u_re), float(u_im)), Complex(float(v_re), float(v_im)))
        register.append(qubit.make_unit())
    return register


def int_to_register(x: int, n: int) -> List[Qubit]:
    """
    Basis-state register encoding ``x`` (LSB first).

    Args:
        x: Integer to encode, 0 <= x < 2^n
        n: Number of qubits

    Returns:
        List of n qubits, qubit i is |1⟩ when bit i of x is set
    """
    if not (0 <= x < 2 ** n):
        raise ValueError(f"x must be in [0, {2 ** n - 1}], got {x}")
    return [Qubit.one() if (x >> i) & 1 else Qubit.zero() for i in range(n)]


# =============================================================================
# Classical readout
# =============================================================================

def register_to_bits(register: Sequence[Qubit], rng: Optional[np.random.Generator] = None) -> List[int]:
    """Measure every qubit (without collapsing) and return 0/1 bits, index 0 first."""
    rng = resolve_rng(rng)
    return [int(q.measure(rng)) for q in register]


def register_to_binary_string(register: Sequence[Qubit], rng: Optional[np.random.Generator] = None) -> str:
    """Measure every qubit and render the outcomes as a string such as ``"0110"``."""
    return "".join(str(bit) for bit in register_to_bits(register, rng))


def register_to_int(register: Sequence[Qubit]) -> int:
    """
    Read a collapsed register as an integer.

    Qubit i contributes 2^i when it is exactly |1⟩. Qubits still in
    superposition contribute nothing; collapse the register first.
    """
    result = 0
    for i, qubit in enumerate(register):
        if qubit.is_one():
            result += 2 ** i
    return result


# =============================================================================
# Display
# =============================================================================

def format_register(register: Sequence[Qubit], precision: int = DEFAULT_PRECISION) -> str:
    """
    Render a register two qubits per row.

    Pairs are shown side by side separated by ``|||`` with a rule after
    each row. Display only.
    """
    lines = []
    for i in range(0, len(register), 2):
        row = register[i].format(precision)
        if i + 1 < len(register):
            row += " ||| " + register[i + 1].format(precision)
        lines.append(row)
        lines.append(_ROW_SEPARATOR)
    return "\n".join(lines) + ("\n" if lines else "")


# =============================================================================
# Comparison
# =============================================================================

def allclose_qubits(a: Sequence[Qubit], b: Sequence[Qubit], atol: float = 1e-9) -> bool:
    """True if two registers have the same length and matching amplitudes within ``atol``."""
    if len(a) != len(b):
        return False
    if not a:
        return True
    va = np.array([q.to_vector() for q in a])
    vb = np.array([q.to_vector() for q in b])
    return bool(np.allclose(va, vb, atol=atol))
