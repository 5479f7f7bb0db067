"""Tests for frequency_response_analog_zpk."""

import numpy as np
import pytest
import torch
from scipy import signal as scipy_signal

from torchfilter.filter_analysis import frequency_response_analog_zpk
from torchfilter.filter_design import (
    butterworth_prototype,
    chebyshev_type_2_prototype,
)


class TestFrequencyResponseAnalogZPK:
    """Test frequency_response_analog_zpk forward correctness."""

    @pytest.mark.parametrize("order", [1, 2, 3, 4, 5])
    def test_matches_scipy_freqs_zpk(self, order: int) -> None:
        """Should match scipy.signal.freqs_zpk."""
        zeros, poles, gain = butterworth_prototype(order, dtype=torch.float64)

        worN = torch.logspace(-2, 2, 100, dtype=torch.float64)

        w, h = frequency_response_analog_zpk(zeros, poles, gain, worN)

        w_scipy, h_scipy = scipy_signal.freqs_zpk(
            zeros.numpy(), poles.numpy(), gain.item(), worN.numpy()
        )

        np.testing.assert_allclose(w.numpy(), w_scipy, rtol=1e-10)
        np.testing.assert_allclose(h.numpy(), h_scipy, rtol=1e-10)

    def test_with_finite_zeros(self) -> None:
        zeros, poles, gain = chebyshev_type_2_prototype(
            4, 30.0, dtype=torch.float64
        )

        worN = torch.linspace(0.1, 10.0, 50, dtype=torch.float64)

        _, h = frequency_response_analog_zpk(zeros, poles, gain, worN)
        _, h_scipy = scipy_signal.freqs_zpk(
            zeros.numpy(), poles.numpy(), gain.item(), worN.numpy()
        )

        np.testing.assert_allclose(h.numpy(), h_scipy, rtol=1e-9, atol=1e-12)

    def test_butterworth_3db_point(self) -> None:
        """Butterworth prototype should have -3dB at w = 1."""
        for order in range(1, 7):
            zeros, poles, gain = butterworth_prototype(
                order, dtype=torch.float64
            )

            w, h = frequency_response_analog_zpk(
                zeros, poles, gain, torch.tensor([1.0], dtype=torch.float64)
            )

            magnitude = torch.abs(h[0]).item()
            assert abs(magnitude - 1.0 / np.sqrt(2)) < 1e-10, (
                f"Order {order}: got {magnitude}"
            )

    def test_default_frequencies(self) -> None:
        """Integer frequencies give a log-spaced grid around the roots."""
        zeros, poles, gain = butterworth_prototype(3, dtype=torch.float64)

        w, h = frequency_response_analog_zpk(zeros, poles, gain, 50)

        assert w.shape == (50,)
        assert h.shape == (50,)
        assert torch.all(w > 0)
        assert torch.all(w[1:] > w[:-1])
        assert w[0].item() < 1.0 < w[-1].item()

    @pytest.mark.parametrize("dtype", [torch.float32, torch.float64])
    def test_dtype_follows_input(self, dtype: torch.dtype) -> None:
        zeros, poles, gain = butterworth_prototype(3, dtype=dtype)

        w, h = frequency_response_analog_zpk(zeros, poles, gain, 10)

        assert w.dtype == dtype
        assert h.dtype == poles.dtype
