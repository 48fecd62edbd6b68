"""
Grover-style search over a qubit register.

This is the oracle-plus-diffusion construction expressed as a replayable
Circuit. Because qubits here are independent (no joint state vector) it
is an exploratory approximation of Grover's algorithm, not an exact one.

Bit ordering convention:
    target strings are index-first: target[i] is the bit for qubit i.
"""

import numpy as np
from typing import List, Optional

from .circuit import Circuit
from .qubit import Qubit
from .randomness import resolve_rng


def _check_target(target: str) -> int:
    n = len(target)
    if n < 2:
        raise ValueError(f"target must have at least 2 bits, got {target!r}")
    if set(target) - {"0", "1"}:
        raise ValueError(f"target must be a binary string, got {target!r}")
    return n


def grover_circuit(target: str, rng: Optional[np.random.Generator] = None) -> Circuit:
    """
    Build one oracle + diffusion round for a binary target.

    Args:
        target: Binary string to mark, e.g. "101". At least 2 bits.
        rng: Generator for the circuit's measurements

    Returns:
        Circuit of len(target) qubits

    Raises:
        ValueError: If target is too short or not binary
    """
    n = _check_target(target)
    last = n - 1
    circuit = Circuit(n, rng=rng)

    # Oracle: mark the target
    for i, bit in enumerate(target):
        if bit == "0":
            circuit.queue_gate("X", i)
    circuit.queue_gate("CZ", f"0-{last - 1}", f"0-{last}")
    circuit.queue_gate("X", f"0-{last}")

    # Diffusion
    circuit.queue_gate("X", f"0-{last}")
    circuit.queue_gate("CX", f"0-{last - 1}", f"0-{last}")
    circuit.queue_gate("X", f"0-{last}")

    return circuit


def grover_search(
    target: str,
    iterations: int = 3,
    rng: Optional[np.random.Generator] = None,
    verbose: bool = False
) -> List[Qubit]:
    """
    Run the Grover round on a default register, then replay it.

    The first execution sets up the register; each further iteration feeds
    the previous output back through the same circuit.

    Args:
        target: Binary string to search for
        iterations: Number of replays after the first execution
        rng: Generator for measurements
        verbose: If True, print progress

    Returns:
        The final register
    """
    if iterations < 0:
        raise ValueError(f"iterations must be >= 0, got {iterations}")

    circuit = grover_circuit(target, rng=rng)

    if verbose:
        print(f"Grover search on {circuit.size} qubits for {target}")
        print(f"Circuit has {len(circuit)} gates, replaying {iterations} times")

    register = circuit.execute()
    for iteration in range(iterations):
        register = circuit.execute(register)
        if verbose:
            print(f"Iteration {iteration + 1} complete")

    return register


def random_binary_string(n: int, rng: Optional[np.random.Generator] = None) -> str:
    """Return a random string of n bits, each 1 with probability 1/2."""
    rng = resolve_rng(rng)
    return "".join("1" if rng.random() > 0.5 else "0" for _ in range(n))
