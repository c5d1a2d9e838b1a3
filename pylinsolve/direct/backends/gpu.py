"""
GPU backend for the direct solver using PyTorch.

Runs the same naive elimination recurrence as the CPU reference on a
CUDA or MPS device. The loop is sequential over pivot rows, so this only
pays off when the per-row updates are large.
"""

from typing import Any
import numpy as np

from pylinsolve.core.result import Result
from pylinsolve.core.compute.timing import Timer
from pylinsolve.core.compute.linalg.elimination import gaussian_elimination_gpu
from pylinsolve.direct.backends.cpu import _build_info, _collect_warnings
from pylinsolve.direct.design import DirectDesign
from pylinsolve.direct.solution import DirectParams


class GPUGaussBackend:
    """
    GPU backend using naive Gaussian elimination in PyTorch.

    FP64 by default: the solver's data model is double precision.
    Supports CUDA and MPS (Apple Silicon, FP32 only).
    """

    def __init__(
        self,
        use_fp64: bool = True,
        device: str = 'cuda',
        check_pivots: bool = False,
    ):
        """
        Initialize GPU backend.

        Args:
            use_fp64: If True, use FP64. If False, use FP32.
            device: GPU device type ('cuda', 'cuda:0', 'mps')
            check_pivots: If True, raise SingularMatrixError on a zero pivot
        """
        import torch

        self._check_pivots = check_pivots

        if device.startswith('cuda'):
            if not torch.cuda.is_available():
                raise RuntimeError(
                    "CUDA not available. Install PyTorch with CUDA support, "
                    "or use backend='cpu'."
                )
            self.device = torch.device(device)
            self.dtype = torch.float64 if use_fp64 else torch.float32
            self.use_fp64 = use_fp64

        elif device == 'mps':
            if not (hasattr(torch.backends, 'mps') and torch.backends.mps.is_available()):
                raise RuntimeError(
                    "MPS not available. Requires macOS with Apple Silicon "
                    "and PyTorch with MPS support."
                )
            if use_fp64:
                raise RuntimeError(
                    "MPS does not support float64. Use use_fp64=False "
                    "or use backend='cpu' for double precision."
                )
            self.device = torch.device('mps')
            self.dtype = torch.float32
            self.use_fp64 = False

        else:
            raise ValueError(
                f"Unknown GPU device: {device!r}. Use 'cuda' or 'mps'."
            )

    @property
    def name(self) -> str:
        precision = "fp64" if self.use_fp64 else "fp32"
        return f'gpu_gauss_{precision}'

    def solve(self, design: DirectDesign) -> Result[DirectParams]:
        """
        Solve A x = b on the GPU.

        Args:
            design: Validated direct design

        Returns:
            Result[DirectParams] with arrays moved back to CPU float64

        Raises:
            SingularMatrixError: If check_pivots=True and a pivot is zero
        """
        import torch

        timer = Timer(device=self.device.type)
        timer.start()

        with timer.section('data_transfer_to_gpu'):
            A = torch.from_numpy(design.A).to(device=self.device, dtype=self.dtype)
            b = torch.from_numpy(design.b).to(device=self.device, dtype=self.dtype)

        with timer.section('elimination'):
            elim = gaussian_elimination_gpu(A, b, check_pivots=self._check_pivots)

        with timer.section('residual'):
            residual = design.residual(elim.x)
            residual_norm = float(np.linalg.norm(residual))

        timer.stop()

        params = DirectParams(
            x=elim.x,
            residual=residual,
            residual_norm=residual_norm,
            pivots=elim.pivots,
        )

        info: dict[str, Any] = _build_info(elim)
        info['device'] = str(self.device)

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=_collect_warnings(elim),
        )
