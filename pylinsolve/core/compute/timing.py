"""
Phase timing for solver backends.

Each backend owns one Timer per solve. Sections are named after solver
phases and land in Result.timing next to the overall wall time.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Wall-clock timer with named, accumulating sections.

    On a CUDA device, kernels are launched asynchronously, so the timer
    synchronizes the device at every boundary it measures.

    Usage:
        timer = Timer(device='cuda')
        timer.start()
        with timer.section('elimination'):
            elim = gaussian_elimination_gpu(A, b)
        timer.stop()
        timer.result()
        # {'total_seconds': 0.004, 'elimination': 0.003}
    """

    def __init__(self, device: str = 'cpu'):
        self._device = device
        self._sections: dict[str, float] = {}
        self._started_at: float | None = None
        self._total: float | None = None

    def _now(self) -> float:
        if self._device.startswith('cuda'):
            import torch
            if torch.cuda.is_available():
                torch.cuda.synchronize()
        return time.perf_counter()

    def start(self) -> None:
        self._started_at = self._now()

    def stop(self) -> None:
        if self._started_at is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = self._now() - self._started_at

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """
        Time the enclosed block under `name`.

        Re-entering a section adds to its previous time. Sections are not
        required to be disjoint.
        """
        began = self._now()
        try:
            yield
        finally:
            self._sections[name] = self._sections.get(name, 0.0) + (self._now() - began)

    def result(self) -> dict[str, float]:
        """
        Timing breakdown of the finished solve.

        Returns:
            {'total_seconds': ..., <section>: ...}

        Raises:
            RuntimeError: If the timer was never stopped
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}
