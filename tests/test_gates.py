"""Tests for the gate library."""

import math

import numpy as np
import pytest
from numpy.testing import assert_allclose

from qperceptron.core.quantum import gates
from qperceptron.core_types import GateDescriptor, GateKind
from qperceptron.errors import InvalidArgumentError, QubitIndexError


def basis(index, n=2):
    v = np.zeros(1 << n, dtype=np.complex128)
    v[index] = 1.0
    return v


class TestMatrices:
    """Gate matrices are unitary"""

    @pytest.mark.parametrize("theta", [0.0, 0.3, math.pi / 2, math.pi, -2.1, 7.0])
    def test_ry_is_unitary(self, theta):
        assert gates.is_unitary(gates.ry_matrix(theta))

    def test_x_is_unitary(self):
        assert gates.is_unitary(gates.X_MATRIX)

    def test_non_unitary_rejected(self):
        assert not gates.is_unitary(np.array([[1, 1], [0, 1]]))
        assert not gates.is_unitary(np.ones((2, 3)))

    def test_ry_matrix_entries(self):
        m = gates.ry_matrix(math.pi / 3)
        c, s = math.cos(math.pi / 6), math.sin(math.pi / 6)
        assert_allclose(m, [[c, -s], [s, c]])


class TestRotationY:
    """Tests for Ry"""

    def test_encodes_angle_on_zero(self):
        theta = 0.7
        out = gates.apply_ry(basis(0, 1), 1, 0, theta)
        assert_allclose(out, [math.cos(theta / 2), math.sin(theta / 2)])

    def test_qubit_zero_is_most_significant(self):
        out = gates.apply_ry(basis(0), 2, 0, math.pi)
        assert_allclose(np.abs(out) ** 2, [0, 0, 1, 0], atol=1e-15)

    def test_acts_only_on_target(self):
        out = gates.apply_ry(basis(0), 2, 1, math.pi)
        assert_allclose(np.abs(out) ** 2, [0, 1, 0, 0], atol=1e-15)

    def test_inverse_rotation_restores_state(self):
        v = gates.apply_ry(basis(1), 2, 0, 1.234)
        back = gates.apply_ry(v, 2, 0, -1.234)
        assert_allclose(back, basis(1), atol=1e-12)

    def test_input_not_mutated(self):
        v = basis(0)
        gates.apply_ry(v, 2, 0, 1.0)
        assert_allclose(v, basis(0))


class TestPauliX:
    """Tests for X"""

    @pytest.mark.parametrize("qubit,start,expected", [
        (0, 0b00, 0b10),
        (0, 0b01, 0b11),
        (1, 0b00, 0b01),
        (1, 0b10, 0b11),
    ])
    def test_flips_target_bit(self, qubit, start, expected):
        assert_allclose(gates.apply_x(basis(start), 2, qubit), basis(expected))

    def test_swaps_superposed_amplitudes(self):
        v = np.array([0.6, 0.8, 0, 0], dtype=np.complex128)
        assert_allclose(gates.apply_x(v, 2, 1), [0.8, 0.6, 0, 0])


class TestCNOT:
    """Tests for CNOT"""

    @pytest.mark.parametrize("start,expected", [
        (0b00, 0b00),
        (0b01, 0b01),
        (0b10, 0b11),
        (0b11, 0b10),
    ])
    def test_truth_table_control_zero(self, start, expected):
        assert_allclose(gates.apply_cnot(basis(start), 2, 0, 1), basis(expected))

    @pytest.mark.parametrize("start,expected", [
        (0b00, 0b00),
        (0b10, 0b10),
        (0b01, 0b11),
        (0b11, 0b01),
    ])
    def test_truth_table_control_one(self, start, expected):
        assert_allclose(gates.apply_cnot(basis(start), 2, 1, 0), basis(expected))

    def test_same_control_and_target_rejected(self):
        with pytest.raises(InvalidArgumentError):
            gates.apply_cnot(basis(0), 2, 1, 1)

    def test_three_qubit_register(self):
        # control qubit 0, target qubit 2; qubit 1 untouched
        assert_allclose(gates.apply_cnot(basis(0b110, 3), 3, 0, 2), basis(0b111, 3))
        assert_allclose(gates.apply_cnot(basis(0b010, 3), 3, 0, 2), basis(0b010, 3))


class TestDispatch:
    """Tests for descriptor dispatch and validation"""

    def test_dispatches_each_kind(self):
        v = basis(0)
        v = gates.apply_gate(v, 2, GateDescriptor.x(0))
        v = gates.apply_gate(v, 2, GateDescriptor.cnot(0, 1))
        assert_allclose(v, basis(0b11))
        v = gates.apply_gate(v, 2, GateDescriptor.ry(1, math.pi))
        assert_allclose(np.abs(v) ** 2, [0, 0, 1, 0], atol=1e-15)

    @pytest.mark.parametrize("qubit", [-1, 2, 5])
    def test_out_of_range_qubit(self, qubit):
        with pytest.raises(QubitIndexError):
            gates.apply_x(basis(0), 2, qubit)

    def test_qubit_index_error_is_index_error(self):
        with pytest.raises(IndexError):
            gates.apply_ry(basis(0), 2, 3, 0.1)

    def test_non_integer_qubit(self):
        with pytest.raises(QubitIndexError):
            gates.apply_x(basis(0), 2, 0.5)

    def test_wrong_target_count(self):
        with pytest.raises(InvalidArgumentError):
            gates.apply_gate(basis(0), 2, GateDescriptor(GateKind.CNOT, (0,)))

    def test_reset_is_not_a_unitary_gate(self):
        with pytest.raises(InvalidArgumentError):
            gates.apply_gate(basis(0), 2, GateDescriptor.reset())

    def test_vector_size_mismatch(self):
        with pytest.raises(InvalidArgumentError):
            gates.apply_x(basis(0, 3), 2, 0)


def test_random_gate_sequences_preserve_norm(rng):
    v = basis(0)
    for _ in range(500):
        choice = rng.integers(3)
        if choice == 0:
            v = gates.apply_ry(v, 2, int(rng.integers(2)), float(rng.uniform(-10, 10)))
        elif choice == 1:
            v = gates.apply_x(v, 2, int(rng.integers(2)))
        else:
            control = int(rng.integers(2))
            v = gates.apply_cnot(v, 2, control, 1 - control)
        assert abs(np.vdot(v, v).real - 1.0) < 1e-9
