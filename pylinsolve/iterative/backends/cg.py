"""
Conjugate gradient backend.

Validates the symmetric positive-definite precondition, then runs the
standard CG recurrence with Fletcher-Reeves direction updates:

    r_0 = A x_0 - b,  d_0 = -r_0,  delta_0 = r_0 . r_0
    lambda_m  = delta_m / (d_m . A d_m)
    x_{m+1}   = x_m + lambda_m d_m
    r_{m+1}   = r_m + lambda_m A d_m
    delta_{m+1} = r_{m+1} . r_{m+1}           stop if sqrt(delta_{m+1}) < tol
    d_{m+1}   = -r_{m+1} + (delta_{m+1} / delta_m) d_m

Only the latest (x, r, d, delta) state is kept. The SPD check always runs
on CPU in float64; the iteration runs in NumPy or, for device='cuda' /
'mps', in PyTorch.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np

from pylinsolve.core.result import Result
from pylinsolve.core.compute.timing import Timer
from pylinsolve.core.compute.linalg.spd import SPDCheck, check_spd
from pylinsolve.iterative.design import CGDesign
from pylinsolve.iterative.solution import CGParams, CGStatus


@dataclass
class CGState:
    """Mutable iteration state, updated in place each step."""
    x: Any
    r: Any
    d: Any
    delta: np.float64


def _dot(u, v) -> np.float64:
    # np.float64 division gives inf/nan on a zero denominator rather than raising
    return np.float64(float(u @ v))


class CGBackend:
    """
    Conjugate gradient backend.

    Parameters
    ----------
    device : str
        Computation device: 'cpu', 'cuda', or 'mps'.
        GPU execution uses PyTorch for the matrix-vector products.
    use_fp64 : bool
        Tensor precision on GPU. Ignored on CPU (always float64); MPS
        only supports float32.
    symmetry_atol : float
        Tolerance of the symmetry check. 0.0 means exact A == A'.
    """

    def __init__(
        self,
        device: str = 'cpu',
        use_fp64: bool = True,
        symmetry_atol: float = 0.0,
    ):
        self._device = device
        self._use_gpu = device != 'cpu'
        self._symmetry_atol = symmetry_atol

        if self._use_gpu:
            import torch
            if device.startswith('cuda') and not torch.cuda.is_available():
                raise RuntimeError(
                    "CUDA not available. Install PyTorch with CUDA support, "
                    "or use backend='cpu'."
                )
            if device == 'mps':
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
            self._torch = torch
            self._torch_device = torch.device(device)
            self._dtype = torch.float64 if use_fp64 else torch.float32

    @property
    def name(self) -> str:
        if self._use_gpu:
            precision = "fp64" if self._dtype == self._torch.float64 else "fp32"
            return f'{self._device}_cg_{precision}'
        return 'cpu_cg'

    def solve(
        self,
        design: CGDesign,
        *,
        tol: float = 1e-6,
        maxiter: int = 1000,
    ) -> Result[CGParams]:
        """
        Solve A x = b by conjugate gradient.

        Parameters
        ----------
        design : CGDesign
            Validated system and initial guess.
        tol : float
            Stop when the residual norm sqrt(r . r) drops below tol.
        maxiter : int
            Maximum number of CG steps.

        Returns
        -------
        Result[CGParams]
            status NOT_SPD if A failed validation (no iteration performed),
            CONVERGED or MAX_ITERATIONS_EXCEEDED otherwise.
        """
        timer = Timer(device=self._device)
        timer.start()
        warnings_list = []

        info: dict[str, Any] = {
            'method': 'cg',
            'tol': tol,
            'maxiter': maxiter,
        }

        # --- SPD validation ---
        with timer.section('validation'):
            spd = check_spd(design.A, symmetry_atol=self._symmetry_atol)

        if not spd.is_spd:
            timer.stop()
            info.update(_spd_info(spd))
            info['status'] = CGStatus.NOT_SPD.value
            info['iterations'] = 0
            warnings_list.append(
                f"Matrix is not symmetric positive definite ({spd.reason}); "
                f"no iterations performed"
            )
            params = CGParams(
                x=None,
                status=CGStatus.NOT_SPD,
                iterations=0,
                residual_norm=float('nan'),
                residual_history=(),
            )
            return Result(
                params=params,
                info=info,
                timing=timer.result(),
                backend_name=self.name,
                warnings=tuple(warnings_list),
            )

        info.update(_spd_info(spd))

        # --- CG iteration ---
        if self._use_gpu:
            with timer.section('data_transfer_to_gpu'):
                A = self._to_device(design.A)
                b = self._to_device(design.b)
                x0 = self._to_device(design.x0)
        else:
            A, b, x0 = design.A, design.b, design.x0.copy()

        with timer.section('iterations'):
            state, status, n_iter, history = self._iterate(A, b, x0, tol, maxiter)

        x = self._to_numpy(state.x)
        residual_norm = float(np.sqrt(state.delta))

        with timer.section('residual'):
            with np.errstate(invalid='ignore', over='ignore'):
                true_residual = design.A @ x - design.b
            info['true_residual_norm'] = float(np.linalg.norm(true_residual))

        if status is CGStatus.MAX_ITERATIONS_EXCEEDED:
            warnings_list.append(
                f"CG did not converge after {maxiter} iterations "
                f"(final residual norm: {residual_norm:.2e}, tol: {tol:.2e})"
            )

        timer.stop()

        info['status'] = status.value
        info['iterations'] = n_iter
        info['residual_norm'] = residual_norm

        params = CGParams(
            x=x,
            status=status,
            iterations=n_iter,
            residual_norm=residual_norm,
            residual_history=tuple(history),
        )

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    def _iterate(self, A, b, x0, tol: float, maxiter: int):
        """Run the CG recurrence. Works on NumPy arrays and torch tensors alike."""
        r = A @ x0 - b
        state = CGState(x=x0, r=r, d=-r, delta=_dot(r, r))
        history = [float(np.sqrt(state.delta))]

        # x0 is already the exact solution; the direction update would divide by zero
        if state.delta == 0:
            return state, CGStatus.CONVERGED, 0, history

        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            for m in range(maxiter):
                Ad = A @ state.d
                lam = state.delta / _dot(state.d, Ad)

                state.x = state.x + state.d * lam
                state.r = state.r + Ad * lam
                delta_new = _dot(state.r, state.r)

                norm = np.sqrt(delta_new)
                history.append(float(norm))
                if norm < tol:
                    state.delta = delta_new
                    return state, CGStatus.CONVERGED, m + 1, history

                state.d = -state.r + state.d * (delta_new / state.delta)
                state.delta = delta_new

        return state, CGStatus.MAX_ITERATIONS_EXCEEDED, maxiter, history

    def _to_device(self, array: np.ndarray):
        return self._torch.from_numpy(array).to(device=self._torch_device, dtype=self._dtype)

    def _to_numpy(self, x) -> np.ndarray:
        if self._use_gpu:
            return x.cpu().numpy().astype(np.float64)
        return np.asarray(x, dtype=np.float64)


def _spd_info(spd: SPDCheck) -> dict[str, Any]:
    info: dict[str, Any] = {'leading_minors': spd.minors}
    if not spd.is_spd:
        info['spd_failure'] = spd.reason
        info['failed_minor'] = spd.failed_minor
        info['minor_value'] = spd.minor_value
    return info
