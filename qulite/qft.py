"""
Quantum Fourier Transform-like pass over a qubit register.

Each qubit gets a Hadamard followed by controlled phase rotations R_k
controlled by higher-index qubits. With independent qubits this mirrors
the gate structure of the QFT rather than its exact joint-state result.
Angles π/2^(k-1) underflow to 0 for very large k, so big registers lose
precision.
"""

import numpy as np
from typing import List, Optional, Sequence

from .circuit import Circuit
from .qubit import Qubit


def rk_phase(k: int) -> float:
    """Phase angle of R_k: φ = π / 2^(k-1)."""
    if k < 1:
        raise ValueError(f"k must be >= 1, got {k}")
    with np.errstate(over="ignore"):
        return float(np.pi / np.power(2.0, k - 1))


def qft_circuit(n: int, rng: Optional[np.random.Generator] = None,
                verbose: bool = False) -> Circuit:
    """
    Build the QFT gate sequence for n qubits.

    Args:
        n: Number of qubits
        rng: Generator for the control checks
        verbose: If True, print each gate as it is queued

    Returns:
        Circuit of n qubits
    """
    circuit = Circuit(n, rng=rng)

    for i in range(n):
        circuit.queue_gate("H", i)

        if verbose:
            print(f"H on Q{i}")

        # Controlled phase rotations
        for k in range(2, n - i + 1):
            circuit.queue_gate("CS", rk_phase(k), k + i - 1, i)

            if verbose:
                print(f"CS(π/{2 ** (k - 1)}) controlled by Q{k + i - 1} on Q{i}")

    return circuit


def qft(register: Sequence[Optional[Qubit]], rng: Optional[np.random.Generator] = None,
        verbose: bool = False) -> List[Qubit]:
    """
    Apply the QFT pass to a register.

    Missing entries (None) are treated as |0⟩.

    Returns:
        The transformed register
    """
    register = [Qubit.zero() if q is None else q for q in register]
    circuit = qft_circuit(len(register), rng=rng, verbose=verbose)
    return circuit.execute(register, verbose=verbose)
