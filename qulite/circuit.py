"""
Replayable quantum circuits.

A Circuit is built once by queueing gates and then executed as a function:
against fresh registers, against different inputs, or against its own
previous output. Execution never consumes the program.

Example:
    >>> c = Circuit(2)
    >>> c.queue_gate("H", 0)
    >>> c.queue_gate("CX", 0, 1)       # control 0, target 1
    >>> register = c.execute()
"""

from numbers import Real
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from .errors import CircuitConfigError, RegisterIndexError
from .indexspec import parse_indices
from .qubit import Qubit
from .randomness import resolve_rng
from .utils import default_register
from .variants import GateKind, GateVariant, parse_gate_label


class Circuit:
    """
    An ordered gate program bound to a fixed register size.

    Args:
        size: Number of qubits every executed register must have
        rng: Generator used for measurement; the shared one if omitted
    """

    def __init__(self, size: int, rng: Optional[np.random.Generator] = None):
        if size < 0:
            raise CircuitConfigError(f"size must be >= 0, got {size}")
        self._size = size
        self._program: List[GateVariant] = []
        self.rng = rng

    @property
    def size(self) -> int:
        return self._size

    @property
    def program(self) -> Tuple[GateVariant, ...]:
        """The queued gates, in execution order."""
        return tuple(self._program)

    def __len__(self) -> int:
        return len(self._program)

    def __repr__(self) -> str:
        return f"Circuit(size={self._size}, gates={len(self._program)})"

    def clear(self):
        """Remove every queued gate."""
        self._program.clear()

    # =========================================================================
    # Queueing
    # =========================================================================

    def queue_gate(self, kind: Union[str, GateKind], *args, controlled: bool = False) -> GateVariant:
        """
        Append a gate at the next time step.

        The argument shape depends on the gate:

            queue_gate(kind, targets)                  plain gates
            queue_gate(ckind, controls, targets)       controlled gates
            queue_gate("S", phi, targets)              phase shift
            queue_gate("CS", phi, controls, targets)   controlled phase shift

        ``targets`` and ``controls`` are index specifications (see
        indexspec.parse_indices). Passing ``controlled=True`` selects the
        controlled form of a plain label or GateKind, so
        ``queue_gate(GateKind.NOT, 0, 1, controlled=True)`` equals
        ``queue_gate("CX", 0, 1)``.

        Returns:
            The queued GateVariant

        Raises:
            CircuitConfigError: If the label is unknown or the arguments do
                                not match the gate's shape
        """
        kind, labelled_controlled = parse_gate_label(kind)
        controlled = controlled or labelled_controlled
        phased = kind is GateKind.PHASE_SHIFT
        expected = 1 + int(controlled) + int(phased)
        if len(args) != expected:
            raise CircuitConfigError(_shape_message(kind, controlled, len(args)))

        args = list(args)
        phi = None
        if phased:
            phi = args.pop(0)
            if not isinstance(phi, Real) or isinstance(phi, bool):
                raise CircuitConfigError(f"Phase angle must be a real number, got {phi!r}")
            phi = float(phi)
        controls = parse_indices(args.pop(0)) if controlled else None
        targets = parse_indices(args.pop(0))

        gate = GateVariant(kind, targets, controls, phi)
        self._program.append(gate)
        return gate

    # =========================================================================
    # Execution
    # =========================================================================

    def execute(self, register: Optional[Sequence[Qubit]] = None,
                verbose: bool = False) -> List[Qubit]:
        """
        Run every queued gate, in order, on a register.

        The input sequence is copied into a working buffer; the caller's
        sequence is not modified. For each gate the control check runs
        first (collapsing the controls); if it passes, the target qubits
        are gathered, transformed, and scattered back to the same indices.

        Args:
            register: Input qubits, length must equal ``size``; all |0⟩ if omitted
            verbose: If True, print each gate as it runs

        Returns:
            The output register

        Raises:
            CircuitConfigError: If the register size does not match
            RegisterIndexError: If a gate addresses a qubit outside the register
        """
        if register is None:
            register = default_register(self._size)
        if len(register) != self._size:
            raise CircuitConfigError(
                f"Circuit input did not match required size {self._size}, got {len(register)}"
            )

        rng = resolve_rng(self.rng)
        buffer = list(register)
        program = tuple(self._program)

        for step, gate in enumerate(program):
            self._check_bounds(gate, step)

            if not gate.control_check(buffer, rng):
                if verbose:
                    print(f"Step {step}: {gate} skipped, controls not satisfied")
                continue

            bits = [buffer[i] for i in gate.targets]
            output = gate.apply(bits, rng)
            for i, qubit in zip(gate.targets, output):
                buffer[i] = qubit

            if verbose:
                print(f"Step {step}: {gate}")

        return buffer

    def _check_bounds(self, gate: GateVariant, step: int):
        indices = gate.targets + (gate.controls or ())
        if max(indices) >= self._size:
            raise RegisterIndexError(
                f"Gate at step {step} ({gate}) addresses a qubit outside "
                f"a register of size {self._size}"
            )


def _shape_message(kind: GateKind, controlled: bool, given: int) -> str:
    if controlled and kind is GateKind.PHASE_SHIFT:
        shape = "(phi, controls, targets)"
    elif controlled:
        shape = "(controls, targets)"
    elif kind is GateKind.PHASE_SHIFT:
        shape = "(phi, targets)"
    else:
        shape = "(targets)"
    prefix = "controlled " if controlled else ""
    return (f"{prefix}{kind.name} gate takes arguments {shape}, "
            f"got {given} argument(s)")
