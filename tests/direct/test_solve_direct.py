"""
Tests for solve_direct().

Tests the complete pipeline: Design construction, backend selection,
and solution properties.
"""

import warnings

import pytest
import numpy as np
from scipy import linalg as sla

from pylinsolve.direct import solve_direct, DirectDesign, DirectSolution
from pylinsolve.direct.backends import CPUGaussBackend
from pylinsolve.core.compute.linalg import gaussian_elimination_cpu
from pylinsolve.core.exceptions import DimensionError, SingularMatrixError, ValidationError


class TestSolveDirectBasic:
    """Basic solve_direct() functionality tests."""

    def test_returns_solution(self, small_system):
        A, b, _ = small_system
        solution = solve_direct(A, b)
        assert isinstance(solution, DirectSolution)
        assert solution.x.shape == (3,)

    def test_small_system_exact(self, small_system):
        A, b, x_true = small_system
        solution = solve_direct(A, b)
        np.testing.assert_allclose(solution.x, x_true, atol=1e-12)

    def test_accepts_nested_lists(self):
        solution = solve_direct([[1, 2, 3], [2, 3, 1], [3, 1, 2]], [14, 11, 11])
        np.testing.assert_allclose(solution.x, [1.0, 2.0, 3.0], atol=1e-12)

    def test_column_vector_b(self, small_system):
        A, b, x_true = small_system
        solution = solve_direct(A, b.reshape(-1, 1))
        assert solution.x.shape == (3,)
        np.testing.assert_allclose(solution.x, x_true, atol=1e-12)

    def test_row_vector_b(self, small_system):
        A, b, x_true = small_system
        solution = solve_direct(A, b.reshape(1, -1))
        np.testing.assert_allclose(solution.x, x_true, atol=1e-12)

    def test_one_by_one(self):
        solution = solve_direct([[4.0]], [2.0])
        np.testing.assert_array_equal(solution.x, [0.5])

    def test_residual_small(self, random_dominant):
        A, b, _ = random_dominant
        solution = solve_direct(A, b)
        assert np.linalg.norm(A @ solution.x - b) < 1e-9
        assert solution.residual_norm < 1e-9

    def test_matches_scipy(self, random_dominant):
        A, b, x_true = random_dominant
        solution = solve_direct(A, b)
        np.testing.assert_allclose(solution.x, sla.solve(A, b), rtol=1e-10, atol=1e-12)
        np.testing.assert_allclose(solution.x, x_true, rtol=1e-8, atol=1e-10)

    def test_idempotent(self, random_dominant):
        A, b, _ = random_dominant
        first = solve_direct(A, b)
        second = solve_direct(A, b)
        np.testing.assert_array_equal(first.x, second.x)

    def test_inputs_not_mutated(self, small_system):
        A, b, _ = small_system
        A_before, b_before = A.copy(), b.copy()
        solve_direct(A, b)
        np.testing.assert_array_equal(A, A_before)
        np.testing.assert_array_equal(b, b_before)

    def test_integer_inputs(self):
        A = np.array([[2, 1], [1, 3]], dtype=np.int64)
        b = np.array([3, 5], dtype=np.int64)
        solution = solve_direct(A, b)
        assert solution.x.dtype == np.float64
        np.testing.assert_allclose(solution.x, [0.8, 1.4])


class TestSolveDirectValidation:
    """Invalid inputs are rejected before any computation."""

    def test_non_square(self):
        with pytest.raises(DimensionError, match="square"):
            solve_direct(np.zeros((2, 3)), np.zeros(2))

    def test_length_mismatch(self, small_system):
        A, _, _ = small_system
        with pytest.raises(DimensionError, match="A=3, b=2"):
            solve_direct(A, [1.0, 2.0])

    def test_matrix_b_rejected(self, small_system):
        A, _, _ = small_system
        with pytest.raises(DimensionError):
            solve_direct(A, np.ones((3, 2)))

    def test_empty(self):
        with pytest.raises(DimensionError, match="empty"):
            solve_direct(np.zeros((0, 0)), np.zeros(0))

    def test_non_numeric(self):
        with pytest.raises(ValidationError):
            solve_direct([["a", "b"], ["c", "d"]], [1, 2])

    def test_unknown_backend(self, small_system):
        A, b, _ = small_system
        with pytest.raises(ValueError, match="Unknown backend"):
            solve_direct(A, b, backend='tpu')


class TestSolveDirectZeroPivot:
    """A zero pivot propagates silently unless check_pivots=True."""

    def test_zero_first_pivot_propagates_nan(self):
        A = np.array([[0.0, 1.0], [1.0, 0.0]])
        with pytest.warns(RuntimeWarning, match="non-finite"):
            solution = solve_direct(A, [1.0, 2.0])
        assert not solution.is_finite
        assert solution.zero_pivot
        assert solution.info['zero_pivot_index'] == 0

    def test_no_pivoting_even_when_rows_could_be_swapped(self):
        # Permutation matrix: trivially solvable with a row swap
        A = np.array([[0.0, 1.0], [1.0, 0.0]])
        with pytest.warns(RuntimeWarning):
            solution = solve_direct(A, [1.0, 2.0])
        assert np.all(np.isnan(solution.x))

    def test_singular_matrix(self):
        A = np.array([[1.0, 2.0], [2.0, 4.0]])
        with pytest.warns(RuntimeWarning):
            solution = solve_direct(A, [3.0, 6.0])
        assert solution.info['zero_pivot_index'] == 1
        assert solution.warnings
        assert any("Zero pivot" in w for w in solution.warnings)

    def test_check_pivots_raises(self):
        A = np.array([[0.0, 1.0], [1.0, 0.0]])
        with pytest.raises(SingularMatrixError) as excinfo:
            solve_direct(A, [1.0, 2.0], check_pivots=True)
        assert excinfo.value.pivot_index == 0
        assert excinfo.value.matrix_name == 'A'

    def test_check_pivots_passes_regular_system(self, small_system):
        A, b, x_true = small_system
        solution = solve_direct(A, b, check_pivots=True)
        np.testing.assert_allclose(solution.x, x_true, atol=1e-12)

    def test_no_warning_on_regular_system(self, small_system):
        A, b, _ = small_system
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            solution = solve_direct(A, b)
        assert solution.warnings == ()

    def test_nan_entry_propagates(self):
        A = np.array([[np.nan, 1.0], [1.0, 2.0]])
        with pytest.warns(RuntimeWarning):
            solution = solve_direct(A, [1.0, 1.0])
        assert not solution.is_finite


class TestDirectSolutionProperties:
    """Derived properties and metadata of DirectSolution."""

    def test_pivots(self, small_system):
        A, b, _ = small_system
        solution = solve_direct(A, b)
        np.testing.assert_array_equal(solution.pivots, [1.0, -1.0, 18.0])
        assert solution.info['min_abs_pivot'] == 1.0
        assert solution.info['pivoting'] == 'none'

    def test_residual_vector(self, small_system):
        A, b, _ = small_system
        solution = solve_direct(A, b)
        np.testing.assert_allclose(solution.residual, A @ solution.x - b)

    def test_condition_number_cached(self, small_system):
        A, b, _ = small_system
        solution = solve_direct(A, b)
        first = solution.condition_number
        assert first == pytest.approx(np.linalg.cond(A))
        assert solution.condition_number is first

    def test_timing_sections(self, small_system):
        A, b, _ = small_system
        timing = solve_direct(A, b).timing
        assert 'total_seconds' in timing
        assert 'elimination' in timing
        assert 'residual' in timing

    def test_info_matches_kernel(self):
        A = np.array([[1.0, 2.0], [2.0, 4.0]])
        with pytest.warns(RuntimeWarning):
            solution = solve_direct(A, [3.0, 6.0])
        elim = gaussian_elimination_cpu(A, np.array([3.0, 6.0]))
        assert solution.info['zero_pivot_index'] == elim.zero_pivot_index
        np.testing.assert_array_equal(solution.pivots, elim.pivots)

    def test_backend_name(self, small_system):
        A, b, _ = small_system
        assert solve_direct(A, b).backend_name == 'cpu_gauss'
        assert solve_direct(A, b, backend='cpu_gauss').backend_name == 'cpu_gauss'

    def test_summary_runs(self, small_system):
        A, b, _ = small_system
        s = solve_direct(A, b).summary()
        assert "Solution:" in s
        assert "x[2] =     3.000000" in s
        assert "Backend: cpu_gauss" in s

    def test_repr(self, small_system):
        A, b, _ = small_system
        assert repr(solve_direct(A, b)).startswith("DirectSolution(n=3")


class TestCPUGaussBackend:
    """Backend used directly on a Design."""

    def test_solve_design(self, small_system):
        A, b, x_true = small_system
        design = DirectDesign.from_arrays(A, b)
        result = CPUGaussBackend().solve(design)
        np.testing.assert_allclose(result.params.x, x_true, atol=1e-12)
        assert result.info['method'] == 'gauss'

    def test_design_copies_inputs(self, small_system):
        A, b, _ = small_system
        design = DirectDesign.from_arrays(A, b)
        A[0, 0] = 100.0
        assert design.A[0, 0] == 1.0
