"""
Tests for device selection, timing and conditioning utilities.
"""

import time

import numpy as np
import pytest

from pylinsolve.core.compute import device as device_mod
from pylinsolve.core.compute.device import DeviceInfo, get_cpu_info, select_device
from pylinsolve.core.compute.precision import condition_number
from pylinsolve.core.compute.timing import Timer


FAKE_MPS = DeviceInfo(
    device_type='mps',
    device_index=0,
    name='Apple Silicon GPU',
    memory_bytes=None,
    supports_fp64=False,
)

FAKE_CUDA = DeviceInfo(
    device_type='cuda',
    device_index=0,
    name='Fake GPU',
    memory_bytes=8 * 1024**3,
    supports_fp64=True,
)


class TestDeviceSelection:

    def test_cpu_info(self):
        info = get_cpu_info()
        assert info.device_type == 'cpu'
        assert not info.is_gpu
        assert str(info).startswith("CPU (")

    def test_prefer_cpu(self):
        assert select_device('cpu').device_type == 'cpu'

    def test_gpu_required_but_missing(self, monkeypatch):
        monkeypatch.setattr(device_mod, 'detect_gpu', lambda: None)
        with pytest.raises(RuntimeError, match="no GPU available"):
            select_device('gpu')

    def test_auto_falls_back_to_cpu(self, monkeypatch):
        monkeypatch.setattr(device_mod, 'detect_gpu', lambda: None)
        assert select_device('auto').device_type == 'cpu'

    def test_auto_skips_fp32_only_gpu(self, monkeypatch):
        monkeypatch.setattr(device_mod, 'detect_gpu', lambda: FAKE_MPS)
        assert select_device('auto').device_type == 'cpu'

    def test_auto_uses_fp64_gpu(self, monkeypatch):
        monkeypatch.setattr(device_mod, 'detect_gpu', lambda: FAKE_CUDA)
        assert select_device('auto') is FAKE_CUDA

    def test_gpu_str(self):
        assert str(FAKE_CUDA) == "CUDA:0 (Fake GPU, 8.0GB)"
        assert FAKE_CUDA.is_gpu


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section('work'):
            time.sleep(0.001)
        with timer.section('work'):
            time.sleep(0.001)
        timer.stop()
        result = timer.result()
        assert result['work'] > 0
        assert result['total_seconds'] >= result['work']

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_total_only_without_sections(self):
        timer = Timer(device='cpu')
        timer.start()
        timer.stop()
        assert list(timer.result()) == ['total_seconds']


class TestPrecision:

    def test_condition_number_identity(self):
        assert condition_number(np.eye(3)) == pytest.approx(1.0)

    def test_condition_number_singular(self):
        assert condition_number(np.zeros((2, 2))) == np.inf

    def test_condition_number_non_finite(self):
        assert condition_number(np.array([[np.nan, 0.0], [0.0, 1.0]])) == np.inf

