"""
Qulite - a single-qubit-state quantum circuit simulator in Python.

Qubits are modeled as independent amplitude pairs rather than a joint
state vector, so circuits are cheap to build and replay but do not capture
true entanglement. Intended for small educational circuits.

Modules:
    complex_number - Immutable complex amplitudes
    qubit          - Qubit state, measurement and normalization
    gates          - Gate operations (H, X, Y, Z, phase shift, logical gates)
    variants       - Gate kinds and the queued gate record
    indexspec      - Parsing of qubit index specifications ("0-2,5")
    circuit        - Replayable circuits
    utils          - Register generation, readout and display
    grover, qft    - Example algorithms built on Circuit

Quick Start:
    >>> from qulite import *
    >>> c = Circuit(2)
    >>> c.queue_gate("H", 0)
    >>> c.queue_gate("CX", 0, 1)
    >>> print(register_to_binary_string(c.execute()))  # "00" or "11"
"""

# Core types
from .complex_number import Complex
from .qubit import Qubit, UNIT_TOLERANCE
from .errors import (
    QuliteError,
    CircuitConfigError,
    IndexSpecError,
    RegisterIndexError,
    GateDispatchError,
)
from .randomness import get_rng, set_rng, seed

# Gates
from .gates import (
    X_gate,
    Y_gate,
    Z_gate,
    H_gate,
    P_gate,
    not_gate,
    pauli_y,
    pauli_z,
    hadamard,
    phase_shift,
    measure,
    collapse,
    and_gate,
    or_gate,
    xor_gate,
    nor_gate,
    xnor_gate,
)

# Circuits
from .variants import GateKind, GateVariant, parse_gate_label, resolve_operation
from .indexspec import parse_indices
from .circuit import Circuit

# Utilities
from .utils import (
    default_register,
    random_register,
    int_to_register,
    register_to_bits,
    register_to_binary_string,
    register_to_int,
    format_register,
    allclose_qubits,
)

# Algorithms
from .grover import grover_circuit, grover_search, random_binary_string
from .qft import qft, qft_circuit, rk_phase

__version__ = "0.1.0"
__all__ = [
    # Core
    "Complex",
    "Qubit",
    "UNIT_TOLERANCE",
    "QuliteError",
    "CircuitConfigError",
    "IndexSpecError",
    "RegisterIndexError",
    "GateDispatchError",
    "get_rng",
    "set_rng",
    "seed",
    # Gates
    "X_gate",
    "Y_gate",
    "Z_gate",
    "H_gate",
    "P_gate",
    "not_gate",
    "pauli_y",
    "pauli_z",
    "hadamard",
    "phase_shift",
    "measure",
    "collapse",
    "and_gate",
    "or_gate",
    "xor_gate",
    "nor_gate",
    "xnor_gate",
    # Circuits
    "GateKind",
    "GateVariant",
    "parse_gate_label",
    "resolve_operation",
    "parse_indices",
    "Circuit",
    # Utils
    "default_register",
    "random_register",
    "int_to_register",
    "register_to_bits",
    "register_to_binary_string",
    "register_to_int",
    "format_register",
    "allclose_qubits",
    # Algorithms
    "grover_circuit",
    "grover_search",
    "random_binary_string",
    "qft",
    "qft_circuit",
    "rk_phase",
]
