"""
Gate variants: plain, controlled, and phase-shift.

A GateVariant is the immutable record a circuit queues. Its kind selects
exactly one operation from gates.py through resolve_operation(). A
variant with controls only fires when every control qubit measures one.
"""

import enum
from dataclasses import dataclass
from typing import Callable, List, MutableSequence, Optional, Sequence, Tuple, Union

import numpy as np

from . import gates
from .errors import CircuitConfigError, GateDispatchError
from .qubit import Qubit
from .randomness import resolve_rng

Operation = Callable[[Sequence[Qubit], np.random.Generator], List[Qubit]]


class GateKind(enum.Enum):
    """Gate catalog. Controlled forms are a GateVariant with controls."""

    MEASURE = "M"
    HADAMARD = "H"
    NOT = "X"
    PAULI_Y = "Y"
    PAULI_Z = "Z"
    PHASE_SHIFT = "S"
    AND = "AND"
    OR = "OR"
    XOR = "XOR"
    NOR = "NOR"
    XNOR = "XNOR"


_LABELS = {
    "M": GateKind.MEASURE,
    "MEASURE": GateKind.MEASURE,
    "H": GateKind.HADAMARD,
    "HADAMARD": GateKind.HADAMARD,
    "X": GateKind.NOT,
    "N": GateKind.NOT,
    "NOT": GateKind.NOT,
    "PAULIX": GateKind.NOT,
    "Y": GateKind.PAULI_Y,
    "PAULIY": GateKind.PAULI_Y,
    "Z": GateKind.PAULI_Z,
    "PAULIZ": GateKind.PAULI_Z,
    "S": GateKind.PHASE_SHIFT,
    "P": GateKind.PHASE_SHIFT,
    "PHASE": GateKind.PHASE_SHIFT,
    "PHASESHIFT": GateKind.PHASE_SHIFT,
    "AND": GateKind.AND,
    "OR": GateKind.OR,
    "XOR": GateKind.XOR,
    "NOR": GateKind.NOR,
    "XNOR": GateKind.XNOR,
}


def parse_gate_label(label: Union[str, GateKind]) -> Tuple[GateKind, bool]:
    """
    Resolve a gate label to its kind and whether it is the controlled form.

    Labels are case-insensitive; ``_`` and ``-`` are ignored. A leading
    ``C`` marks the controlled form: ``"CX"``, ``"CNOT"``, ``"CS"``.

    Returns:
        (kind, controlled)

    Raises:
        CircuitConfigError: If the label is not in the catalog
    """
    if isinstance(label, GateKind):
        return label, False
    if not isinstance(label, str):
        raise CircuitConfigError(f"Gate label must be a string, got {type(label).__name__}")

    key = label.upper().replace("_", "").replace("-", "")
    if key in _LABELS:
        return _LABELS[key], False
    if key.startswith("C") and key[1:] in _LABELS:
        return _LABELS[key[1:]], True
    raise CircuitConfigError(f"Cannot resolve gate type: {label!r}")


_UNITARY = {
    GateKind.HADAMARD: gates.hadamard,
    GateKind.NOT: gates.not_gate,
    GateKind.PAULI_Y: gates.pauli_y,
    GateKind.PAULI_Z: gates.pauli_z,
}

_MEASURING = {
    GateKind.MEASURE: gates.collapse,
    GateKind.AND: gates.and_gate,
    GateKind.OR: gates.or_gate,
    GateKind.XOR: gates.xor_gate,
    GateKind.NOR: gates.nor_gate,
    GateKind.XNOR: gates.xnor_gate,
}


def resolve_operation(kind: GateKind, phi: Optional[float] = None) -> Operation:
    """
    Map a gate kind to its operation, as a callable ``(bits, rng) -> bits``.

    Raises:
        GateDispatchError: If the kind has no operation
    """
    if kind is GateKind.PHASE_SHIFT:
        if phi is None:
            raise GateDispatchError("Phase shift gate resolved without a phase angle")
        return lambda bits, rng: gates.phase_shift(bits, phi)
    if kind in _UNITARY:
        op = _UNITARY[kind]
        return lambda bits, rng: op(bits)
    if kind in _MEASURING:
        op = _MEASURING[kind]
        return lambda bits, rng: op(bits, rng=rng)
    raise GateDispatchError(f"Cannot resolve gate type: {kind!r}")


@dataclass(frozen=True)
class GateVariant:
    """
    One queued gate.

    Attributes:
        kind: Which operation to apply
        targets: Ascending qubit indices the operation acts on
        controls: Ascending control indices, or None for a plain gate
        phi: Phase angle, required for PHASE_SHIFT and forbidden otherwise
    """

    kind: GateKind
    targets: Tuple[int, ...]
    controls: Optional[Tuple[int, ...]] = None
    phi: Optional[float] = None

    def __post_init__(self):
        if not self.targets:
            raise CircuitConfigError("A gate needs at least one target qubit")
        if self.kind is GateKind.PHASE_SHIFT and self.phi is None:
            raise CircuitConfigError("Phase shift gate must be given a phase angle")
        if self.kind is not GateKind.PHASE_SHIFT and self.phi is not None:
            raise CircuitConfigError(f"{self.kind.name} gate does not take a phase angle")
        if self.controls is not None:
            if not self.controls:
                raise CircuitConfigError("Controlled gate must be given control qubits")
            if self.kind is GateKind.MEASURE:
                raise CircuitConfigError("Measurement has no controlled form")

    @property
    def is_controlled(self) -> bool:
        return self.controls is not None

    @property
    def label(self) -> str:
        return ("C" if self.is_controlled else "") + self.kind.value

    def operation(self) -> Operation:
        return resolve_operation(self.kind, self.phi)

    def control_check(self, register: MutableSequence[Qubit],
                      rng: Optional[np.random.Generator] = None) -> bool:
        """
        Measure every control qubit and report whether all are one.

        Each control is collapsed in ``register`` to the basis state it
        measured as, so later gates see a committed classical value. A
        plain gate always passes.
        """
        if not self.is_controlled:
            return True
        rng = resolve_rng(rng)
        passed = True
        for index in self.controls:
            collapsed = register[index].collapse(rng)
            register[index] = collapsed
            passed = passed and collapsed.is_one()
        return passed

    def apply(self, bits: Sequence[Qubit], rng: Optional[np.random.Generator] = None) -> List[Qubit]:
        """Run the operation on already-gathered target qubits."""
        return self.operation()(bits, resolve_rng(rng))

    def __str__(self) -> str:
        text = f"Gate Type: {self.label}, indexes: {list(self.targets)}"
        if self.is_controlled:
            text += f", controls: {list(self.controls)}"
        if self.phi is not None:
            text += f", phi: {self.phi}"
        return text
