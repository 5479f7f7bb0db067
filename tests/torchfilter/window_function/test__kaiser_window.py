"""Tests for the Kaiser window."""

import pytest
import torch
from scipy.signal import windows as scipy_windows

from torchfilter.window_function import kaiser_window


class TestKaiserWindow:
    """Test kaiser_window correctness."""

    @pytest.mark.parametrize("n", [2, 9, 32])
    @pytest.mark.parametrize("beta", [0.0, 4.0, 8.0, 14.0])
    def test_matches_scipy(self, n: int, beta: float) -> None:
        w = kaiser_window(n, beta, dtype=torch.float64)

        expected = torch.from_numpy(scipy_windows.kaiser(n, beta, sym=True))

        torch.testing.assert_close(w, expected)

    def test_beta_zero_is_rectangular(self) -> None:
        w = kaiser_window(10, 0.0, dtype=torch.float64)

        torch.testing.assert_close(w, torch.ones(10, dtype=torch.float64))

    def test_negative_beta(self) -> None:
        with pytest.raises(ValueError):
            kaiser_window(8, -1.0)

    def test_overflowing_beta(self) -> None:
        """I_0(beta) overflows double precision above beta ~ 713."""
        with pytest.raises(ValueError):
            kaiser_window(8, 1000.0)

    def test_negative_length(self) -> None:
        with pytest.raises(ValueError):
            kaiser_window(-1, 8.0)
