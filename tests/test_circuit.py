"""Tests for circuit queueing and execution."""

import numpy as np
import pytest

from qulite import (
    Circuit, CircuitConfigError, GateKind, IndexSpecError, Qubit, RegisterIndexError,
    default_register, random_register, register_to_binary_string, allclose_qubits,
)


class TestQueueGate:
    """Tests for the enqueue overloads."""

    def test_plain_gate(self):
        c = Circuit(3)
        gate = c.queue_gate("H", "0-1")
        assert gate.kind is GateKind.HADAMARD
        assert gate.targets == (0, 1)
        assert gate.controls is None
        assert c.program == (gate,)

    def test_controlled_gate(self):
        c = Circuit(3)
        gate = c.queue_gate("CX", "0,2", 1)
        assert gate.kind is GateKind.NOT
        assert gate.controls == (0, 2)
        assert gate.targets == (1,)

    def test_phase_shift_gate(self):
        gate = Circuit(2).queue_gate("S", np.pi / 4, [1, 0])
        assert gate.phi == pytest.approx(np.pi / 4)
        assert gate.targets == (0, 1)

    def test_controlled_phase_shift_gate(self):
        gate = Circuit(3).queue_gate("CS", 0.5, 2, 0)
        assert gate.kind is GateKind.PHASE_SHIFT
        assert gate.phi == 0.5
        assert gate.controls == (2,)
        assert gate.targets == (0,)

    def test_controlled_form_from_gate_kind(self):
        gate = Circuit(2).queue_gate(GateKind.NOT, 0, 1, controlled=True)
        assert gate == Circuit(2).queue_gate("CX", 0, 1)
        assert gate.controls == (0,)
        assert gate.targets == (1,)

    def test_controlled_phase_shift_from_gate_kind(self):
        gate = Circuit(3).queue_gate(GateKind.PHASE_SHIFT, 0.5, 2, 0, controlled=True)
        assert gate.controls == (2,)
        assert gate.phi == 0.5

    def test_gate_kind_without_flag_is_plain(self):
        with pytest.raises(CircuitConfigError):
            Circuit(2).queue_gate(GateKind.NOT, 0, 1)

    def test_integer_phase_angle(self):
        gate = Circuit(1).queue_gate("S", 1, 0)
        assert gate.phi == 1.0

    @pytest.mark.parametrize(
        "args",
        [
            ("CX", 1),                  # controlled gate without controls
            ("H", 0, 1),                # plain gate given controls
            ("S", 0),                   # phase shift without angle
            ("X", 0.5, 0),              # non-phase gate given an angle
            ("CS", 0.5, 1),             # controlled phase shift without controls
            ("S", "abc", 0),            # angle is not a number
            ("CM", 0, 1),               # measurement has no controlled form
            ("FOO", 0),                 # unknown label
        ],
    )
    def test_shape_mismatch_rejected(self, args):
        c = Circuit(2)
        with pytest.raises(CircuitConfigError):
            c.queue_gate(*args)
        assert len(c) == 0

    def test_malformed_index_text_rejected(self):
        with pytest.raises(IndexSpecError):
            Circuit(4).queue_gate("H", "0-x")

    def test_clear(self):
        c = Circuit(1)
        c.queue_gate("H", 0)
        c.clear()
        assert len(c) == 0


class TestExecute:
    """Tests for the execution engine."""

    def test_default_register(self):
        c = Circuit(2)
        c.queue_gate("X", 0)
        assert c.execute() == [Qubit.one(), Qubit.zero()]

    def test_empty_circuit_is_identity(self):
        register = random_register(3, rng=np.random.default_rng(0))
        assert Circuit(3).execute(register) == register

    def test_size_mismatch_rejected(self):
        c = Circuit(2)
        with pytest.raises(CircuitConfigError):
            c.execute(default_register(3))

    def test_out_of_range_index_fails_at_execute(self):
        c = Circuit(2)
        c.queue_gate("X", "1-2")
        with pytest.raises(RegisterIndexError):
            c.execute()

    def test_out_of_range_control_fails_at_execute(self):
        c = Circuit(2)
        c.queue_gate("CX", 5, 0)
        with pytest.raises(IndexError):
            c.execute()

    def test_input_register_not_modified(self):
        register = default_register(2)
        c = Circuit(2)
        c.queue_gate("X", "0-1")
        out = c.execute(register)
        assert register == default_register(2)
        assert out == [Qubit.one(), Qubit.one()]

    def test_fifo_order(self):
        """H then X on |0⟩ differs from X then H."""
        hx = Circuit(1)
        hx.queue_gate("X", 0)
        hx.queue_gate("H", 0)
        [q] = hx.execute()
        assert np.allclose(q.to_vector(), np.array([1, -1]) / np.sqrt(2))

    def test_controlled_gate_applies_when_controls_one(self):
        c = Circuit(2, rng=np.random.default_rng(1))
        c.queue_gate("CX", 0, 1)
        assert c.execute([Qubit.one(), Qubit.zero()]) == [Qubit.one(), Qubit.one()]

    def test_controlled_gate_skipped_when_control_zero(self):
        c = Circuit(2, rng=np.random.default_rng(2))
        c.queue_gate("CX", 0, 1)
        assert c.execute([Qubit.zero(), Qubit.zero()]) == [Qubit.zero(), Qubit.zero()]

    def test_controlled_gate_needs_all_controls(self):
        c = Circuit(3, rng=np.random.default_rng(3))
        c.queue_gate("CX", "0-1", 2)
        out = c.execute([Qubit.one(), Qubit.zero(), Qubit.zero()])
        assert out[2] == Qubit.zero()

    def test_controlled_phase_shift(self):
        c = Circuit(2, rng=np.random.default_rng(4))
        c.queue_gate("CS", np.pi, 0, 1)
        out = c.execute([Qubit.one(), Qubit.one()])
        assert np.allclose(out[1].to_vector(), [0, -1])

    def test_logical_gate_writes_index_zero(self):
        c = Circuit(3, rng=np.random.default_rng(5))
        c.queue_gate("AND", "1-2")
        out = c.execute([Qubit.zero(), Qubit.one(), Qubit.one()])
        assert out == [Qubit.zero(), Qubit.one(), Qubit.one()]

        c = Circuit(2, rng=np.random.default_rng(5))
        c.queue_gate("XOR", "0-1")
        assert c.execute([Qubit.one(), Qubit.one()])[0] == Qubit.zero()

    def test_measure_collapses_targets(self):
        c = Circuit(3, rng=np.random.default_rng(6))
        c.queue_gate("H", "0-2")
        c.queue_gate("M", "0-2")
        assert all(q.is_zero() or q.is_one() for q in c.execute())

    def test_seeded_runs_are_reproducible(self):
        register = random_register(4, rng=np.random.default_rng(7))
        outputs = []
        for _ in range(2):
            c = Circuit(4, rng=np.random.default_rng(8))
            c.queue_gate("H", "0-3")
            c.queue_gate("M", "0-3")
            outputs.append(c.execute(register))
        assert outputs[0] == outputs[1]

    def test_verbose(self, capsys):
        c = Circuit(2, rng=np.random.default_rng(9))
        c.queue_gate("H", 0)
        c.queue_gate("CX", 1, 0)
        c.execute(verbose=True)
        captured = capsys.readouterr().out
        assert "Step 0: Gate Type: H" in captured
        assert "Step 1" in captured and "skipped" in captured


class TestBellCorrelation:
    """H on qubit 0 then CNOT(0 → 1) gives correlated outcomes."""

    def test_outcomes_are_correlated(self):
        c = Circuit(2, rng=np.random.default_rng(10))
        c.queue_gate("H", 0)
        c.queue_gate("CX", 0, 1)

        rng = np.random.default_rng(11)
        counts = {"00": 0, "01": 0, "10": 0, "11": 0}
        n_trials = 1000
        for _ in range(n_trials):
            counts[register_to_binary_string(c.execute(), rng=rng)] += 1

        assert counts["01"] == 0
        assert counts["10"] == 0
        assert 0.4 < counts["00"] / n_trials < 0.6
        assert 0.4 < counts["11"] / n_trials < 0.6


class TestReplay:
    """A circuit is not consumed by execution."""

    def test_program_survives_execution(self):
        c = Circuit(2)
        c.queue_gate("X", 0)
        c.queue_gate("H", 1)
        c.queue_gate("Z", 1)
        program = c.program

        first = c.execute(default_register(2))
        second = c.execute(default_register(2))

        assert c.program == program
        assert len(c) == 3
        assert first[0] == Qubit.one()
        assert allclose_qubits(first, second)

    def test_replay_on_own_output(self):
        c = Circuit(1)
        c.queue_gate("X", 0)
        once = c.execute()
        twice = c.execute(once)
        assert once == [Qubit.one()]
        assert twice == [Qubit.zero()]

    def test_failed_execution_leaves_program(self):
        c = Circuit(2)
        c.queue_gate("X", 0)
        c.queue_gate("X", 3)
        with pytest.raises(RegisterIndexError):
            c.execute()
        assert len(c) == 2
