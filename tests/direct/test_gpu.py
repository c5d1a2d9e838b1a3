"""
GPU tests for the direct solver.

Skipped unless PyTorch with CUDA is available.
"""

import pytest
import numpy as np

torch = pytest.importorskip("torch")

from pylinsolve.direct import solve_direct
from pylinsolve.core.exceptions import SingularMatrixError
from pylinsolve.core.compute.tolerances import GPU_FP64

pytestmark = pytest.mark.skipif(
    not torch.cuda.is_available(), reason="CUDA not available"
)


class TestGPUGauss:

    def test_matches_cpu(self, random_dominant):
        A, b, _ = random_dominant
        cpu = solve_direct(A, b, backend='cpu')
        gpu = solve_direct(A, b, backend='gpu')
        np.testing.assert_allclose(gpu.x, cpu.x, rtol=GPU_FP64.rtol, atol=GPU_FP64.atol)
        assert gpu.backend_name == 'gpu_gauss_fp64'

    def test_small_system(self, small_system):
        A, b, x_true = small_system
        solution = solve_direct(A, b, backend='gpu')
        np.testing.assert_allclose(solution.x, x_true, atol=1e-12)
        np.testing.assert_array_equal(solution.pivots, [1.0, -1.0, 18.0])

    def test_check_pivots(self):
        with pytest.raises(SingularMatrixError):
            solve_direct([[0.0, 1.0], [1.0, 0.0]], [1.0, 2.0], backend='gpu', check_pivots=True)

    def test_timing_has_transfer(self, small_system):
        A, b, _ = small_system
        assert 'data_transfer_to_gpu' in solve_direct(A, b, backend='gpu').timing
