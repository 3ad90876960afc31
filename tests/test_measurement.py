"""Tests for Born-rule measurement and collapse."""

import math

import numpy as np
import pytest
from numpy.testing import assert_allclose

from qperceptron.core.quantum import measurement
from qperceptron.errors import DegenerateStateError


class TestProbabilities:
    """Outcome probabilities"""

    def test_probability_of_one_bell(self, bell_state):
        assert measurement.probability_of_one(bell_state, 2, 0) == pytest.approx(0.5)
        assert measurement.probability_of_one(bell_state, 2, 1) == pytest.approx(0.5)

    def test_probability_of_one_product_state(self):
        # Ry(theta)|0> on qubit 1 gives p1 = sin^2(theta/2)
        theta = 1.1
        v = np.array([math.cos(theta / 2), math.sin(theta / 2), 0, 0], dtype=np.complex128)
        assert measurement.probability_of_one(v, 2, 1) == pytest.approx(math.sin(theta / 2) ** 2)
        assert measurement.probability_of_one(v, 2, 0) == pytest.approx(0.0)

    def test_probabilities_sum_to_one(self, bell_state):
        assert measurement.probabilities(bell_state).sum() == pytest.approx(1.0)


class TestSampling:
    """Outcome selection"""

    @pytest.mark.parametrize("p1,expected", [(0.0, 0), (1e-13, 0), (1.0, 1), (1.0 - 1e-13, 1)])
    def test_certain_outcomes_do_not_draw(self, p1, expected, forbidden_source):
        assert measurement.sample_outcome(p1, forbidden_source) == expected

    def test_draw_below_p1_gives_one(self, fixed_source):
        source = fixed_source(0.29)
        assert measurement.sample_outcome(0.3, source) == 1
        assert source.draws == 1

    def test_draw_at_or_above_p1_gives_zero(self, fixed_source):
        source = fixed_source(0.3, 0.9)
        assert measurement.sample_outcome(0.3, source) == 0
        assert measurement.sample_outcome(0.3, source) == 0

    def test_out_of_range_probability_is_clipped(self, forbidden_source):
        assert measurement.sample_outcome(1.0000001, forbidden_source) == 1
        assert measurement.sample_outcome(-1e-9, forbidden_source) == 0


class TestCollapse:
    """State collapse after measurement"""

    def test_bell_collapse_is_correlated(self, bell_state):
        out = measurement.collapse(bell_state, 2, 0, 1)
        assert_allclose(out, [0, 0, 0, 1], atol=1e-12)
        out = measurement.collapse(bell_state, 2, 1, 0)
        assert_allclose(out, [1, 0, 0, 0], atol=1e-12)

    def test_collapse_renormalizes(self):
        v = np.array([0.6, 0.0, 0.8, 0.0], dtype=np.complex128)
        out = measurement.collapse(v, 2, 0, 0)
        assert_allclose(out, [1, 0, 0, 0])
        assert np.vdot(out, out).real == pytest.approx(1.0)

    def test_partial_collapse_keeps_relative_phase(self):
        v = np.array([0.5, 0.5j, 0.5, -0.5], dtype=np.complex128)
        out = measurement.collapse(v, 2, 0, 1)
        assert_allclose(out, [0, 0, 1 / math.sqrt(2), -1 / math.sqrt(2)])

    def test_zero_probability_outcome_raises(self):
        v = np.array([1, 0, 0, 0], dtype=np.complex128)
        with pytest.raises(DegenerateStateError):
            measurement.collapse(v, 2, 0, 1)

    def test_measure_returns_bit_and_state(self, bell_state, fixed_source):
        bit, out = measurement.measure(bell_state, 2, 1, fixed_source(0.1))
        assert bit == 1
        assert_allclose(out, [0, 0, 0, 1], atol=1e-12)

    def test_measure_does_not_mutate_input(self, bell_state, fixed_source):
        before = bell_state.copy()
        measurement.measure(bell_state, 2, 0, fixed_source(0.9))
        assert_allclose(bell_state, before)


def test_make_rng_is_reproducible():
    a = measurement.make_rng(42)
    b = measurement.make_rng(42)
    assert [a.random() for _ in range(5)] == [b.random() for _ in range(5)]


@pytest.mark.slow
def test_sampling_frequency_follows_born_rule():
    rng = measurement.make_rng(7)
    theta = 2.0
    v = np.array([math.cos(theta / 2), 0, math.sin(theta / 2), 0], dtype=np.complex128)
    n = 20000
    ones = sum(measurement.measure(v, 2, 0, rng)[0] for _ in range(n))
    assert ones / n == pytest.approx(math.sin(theta / 2) ** 2, abs=0.02)
