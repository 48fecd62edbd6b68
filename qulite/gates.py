"""
Gate operations.

Each operation takes the qubits addressed by a gate and returns a new list
of the same length; the input sequence is never modified. Unitary gates act
on every qubit independently through a 2x2 matrix. Logical gates collapse
all operands, combine the classical values, and write the result as a basis
qubit at index 0; the other slots hold the collapsed operands.
"""

import numpy as np
from typing import Callable, List, Optional, Sequence

from .qubit import Qubit
from .randomness import resolve_rng

# =============================================================================
# Single-qubit matrices
# =============================================================================

X_gate = np.array([[0, 1],      # Pauli X gate (NOT gate)
                   [1, 0]])

Y_gate = np.array([[ 0, -1j],   # Pauli Y gate
                   [1j,   0]])

Z_gate = np.array([[1,  0],     # Pauli Z gate = P(π)
                   [0, -1]])

H_gate = np.array([[1,  1],     # Hadamard gate
                   [1, -1]]) * np.sqrt(1/2)


def P_gate(phi):
    """Phase shift gate P(φ) = diag(1, e^{iφ})"""
    return np.array([[1,              0],
                     [0, np.exp(phi * 1j)]])


def apply_matrix(gate: np.ndarray, bits: Sequence[Qubit]) -> List[Qubit]:
    """Apply a 2x2 gate matrix to each qubit."""
    return [Qubit.from_vector(gate @ q.to_vector()) for q in bits]


# =============================================================================
# Gates that change probability amplitudes
# =============================================================================

def not_gate(bits: Sequence[Qubit]) -> List[Qubit]:
    """Swap u and v of each qubit: |0⟩ ↔ |1⟩."""
    return [q.flip() for q in bits]


def pauli_y(bits: Sequence[Qubit]) -> List[Qubit]:
    """(u, v) → (-i·v, i·u)"""
    return apply_matrix(Y_gate, bits)


def pauli_z(bits: Sequence[Qubit]) -> List[Qubit]:
    """(u, v) → (u, -v)"""
    return apply_matrix(Z_gate, bits)


def hadamard(bits: Sequence[Qubit]) -> List[Qubit]:
    """(u, v) → ((u + v)/√2, (u - v)/√2)"""
    return apply_matrix(H_gate, bits)


def phase_shift(bits: Sequence[Qubit], phi: float) -> List[Qubit]:
    """
    Multiply v by e^{iφ}, leaving u alone.

    This is a rotation about the z-axis; measurement probabilities are
    unchanged.
    """
    return apply_matrix(P_gate(phi), bits)


# =============================================================================
# Gates that measure
# =============================================================================

def measure(bits: Sequence[Qubit], rng: Optional[np.random.Generator] = None) -> List[bool]:
    """Measure each qubit, returning classical outcomes (True = one)."""
    rng = resolve_rng(rng)
    return [q.measure(rng) for q in bits]


def collapse(bits: Sequence[Qubit], rng: Optional[np.random.Generator] = None) -> List[Qubit]:
    """Measure each qubit but keep Qubit form, as basis states."""
    rng = resolve_rng(rng)
    return [q.collapse(rng) for q in bits]


def _logical(predicate: Callable[[int, int], bool]):
    """
    Build a logical gate from a predicate over (ones, total).

    The returned gate collapses its operands, counts the ones, and writes
    |1⟩ or |0⟩ at index 0 depending on the predicate.
    """
    def gate(bits: Sequence[Qubit], rng: Optional[np.random.Generator] = None) -> List[Qubit]:
        collapsed = collapse(bits, rng)
        if not collapsed:
            return collapsed
        ones = sum(1 for q in collapsed if q.is_one())
        collapsed[0] = Qubit.one() if predicate(ones, len(collapsed)) else Qubit.zero()
        return collapsed
    return gate


and_gate = _logical(lambda ones, total: ones == total)
and_gate.__doc__ = "One iff no operand collapses to zero."

or_gate = _logical(lambda ones, total: ones > 0)
or_gate.__doc__ = "One iff any operand collapses to one."

xor_gate = _logical(lambda ones, total: ones % 2 == 1)
xor_gate.__doc__ = "One iff an odd number of operands collapse to one."

xnor_gate = _logical(lambda ones, total: ones % 2 == 0)
xnor_gate.__doc__ = "One iff an even number of operands collapse to one."

nor_gate = _logical(lambda ones, total: ones == 0)
nor_gate.__doc__ = "One iff no operand collapses to one."
