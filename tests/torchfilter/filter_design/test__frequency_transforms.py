"""Tests for the analog band transforms and the bilinear transform."""

import math

import pytest
import torch
from scipy import signal as scipy_signal

from torchfilter.filter_analysis import frequency_response_analog_zpk
from torchfilter.filter_design import (
    InvalidCutoffError,
    InvalidSamplingFrequencyError,
    PoleZeroCountError,
    bilinear_transform_zpk,
    butterworth_prototype,
    chebyshev_type_2_prototype,
    lowpass_to_bandpass_zpk,
    lowpass_to_bandstop_zpk,
    lowpass_to_highpass_zpk,
    lowpass_to_lowpass_zpk,
)


def _sort_roots(roots) -> torch.Tensor:
    values = sorted(
        torch.as_tensor(roots).tolist(),
        key=lambda r: (round(r.real, 8), round(r.imag, 8)),
    )
    return torch.tensor(values, dtype=torch.complex128)


def _prototype(name: str):
    if name == "butterworth":
        return butterworth_prototype(4, dtype=torch.float64)
    return chebyshev_type_2_prototype(5, 40.0, dtype=torch.float64)


def _analog_response(zpk, frequency: float) -> complex:
    _, h = frequency_response_analog_zpk(
        *zpk, torch.tensor([frequency], dtype=torch.float64)
    )
    return complex(h[0])


class TestLowpassToLowpass:
    """Test lowpass_to_lowpass_zpk."""

    @pytest.mark.parametrize("prototype", ["butterworth", "chebyshev_2"])
    @pytest.mark.parametrize("cutoff", [0.5, 2.0, 100.0])
    def test_matches_scipy(self, prototype: str, cutoff: float) -> None:
        z, p, k = _prototype(prototype)

        z_new, p_new, k_new = lowpass_to_lowpass_zpk(z, p, k, cutoff)
        z_ref, p_ref, k_ref = scipy_signal.lp2lp_zpk(
            z.numpy(), p.numpy(), k.item(), cutoff
        )

        torch.testing.assert_close(_sort_roots(z_new), _sort_roots(z_ref))
        torch.testing.assert_close(_sort_roots(p_new), _sort_roots(p_ref))
        assert math.isclose(k_new.item(), k_ref, rel_tol=1e-10)

    def test_moves_3db_point(self) -> None:
        zpk = lowpass_to_lowpass_zpk(
            *butterworth_prototype(3, dtype=torch.float64), 5.0
        )

        assert abs(abs(_analog_response(zpk, 5.0)) ** 2 - 0.5) < 1e-12

    def test_accepts_tensor_cutoff(self) -> None:
        z, p, k = butterworth_prototype(2, dtype=torch.float64)

        _, p_float, _ = lowpass_to_lowpass_zpk(z, p, k, 3.0)
        _, p_tensor, _ = lowpass_to_lowpass_zpk(z, p, k, torch.tensor(3.0))

        torch.testing.assert_close(p_float, p_tensor)

    def test_zero_cutoff_collapses_poles(self) -> None:
        z, p, k = butterworth_prototype(2, dtype=torch.float64)

        _, p_new, k_new = lowpass_to_lowpass_zpk(z, p, k, 0.0)

        assert torch.all(p_new == 0)
        assert k_new.item() == 0.0

    @pytest.mark.parametrize("cutoff", [-1.0, float("inf")])
    def test_invalid_cutoff(self, cutoff: float) -> None:
        z, p, k = butterworth_prototype(2)

        with pytest.raises(InvalidCutoffError) as info:
            lowpass_to_lowpass_zpk(z, p, k, cutoff)

        assert info.value.stage == "band_transform"


class TestLowpassToHighpass:
    """Test lowpass_to_highpass_zpk."""

    @pytest.mark.parametrize("prototype", ["butterworth", "chebyshev_2"])
    @pytest.mark.parametrize("cutoff", [0.5, 2.0])
    def test_matches_scipy(self, prototype: str, cutoff: float) -> None:
        z, p, k = _prototype(prototype)

        z_new, p_new, k_new = lowpass_to_highpass_zpk(z, p, k, cutoff)
        z_ref, p_ref, k_ref = scipy_signal.lp2hp_zpk(
            z.numpy(), p.numpy(), k.item(), cutoff
        )

        torch.testing.assert_close(
            _sort_roots(z_new), _sort_roots(z_ref), rtol=1e-9, atol=1e-9
        )
        torch.testing.assert_close(_sort_roots(p_new), _sort_roots(p_ref))
        assert math.isclose(k_new.item(), k_ref, rel_tol=1e-10)

    def test_zeros_at_origin(self) -> None:
        z, p, k = butterworth_prototype(4, dtype=torch.float64)

        z_new, p_new, _ = lowpass_to_highpass_zpk(z, p, k, 2.0)

        assert z_new.numel() == 4
        assert torch.all(z_new == 0)
        assert p_new.numel() == 4

    def test_high_frequency_gain_is_unity(self) -> None:
        zpk = lowpass_to_highpass_zpk(
            *butterworth_prototype(4, dtype=torch.float64), 2.0
        )

        assert abs(abs(_analog_response(zpk, 1e6)) - 1.0) < 1e-9


class TestLowpassToBandpass:
    """Test lowpass_to_bandpass_zpk."""

    @pytest.mark.parametrize("prototype", ["butterworth", "chebyshev_2"])
    @pytest.mark.parametrize("w0, bw", [(1.0, 0.5), (10.0, 3.0)])
    def test_matches_scipy(self, prototype: str, w0: float, bw: float) -> None:
        z, p, k = _prototype(prototype)

        z_new, p_new, k_new = lowpass_to_bandpass_zpk(z, p, k, w0, bw)
        z_ref, p_ref, k_ref = scipy_signal.lp2bp_zpk(
            z.numpy(), p.numpy(), k.item(), w0, bw
        )

        assert z_new.numel() == len(z_ref)
        assert p_new.numel() == 2 * p.numel()
        torch.testing.assert_close(
            _sort_roots(z_new), _sort_roots(z_ref), rtol=1e-9, atol=1e-9
        )
        torch.testing.assert_close(
            _sort_roots(p_new), _sort_roots(p_ref), rtol=1e-9, atol=1e-9
        )
        assert math.isclose(k_new.item(), k_ref, rel_tol=1e-10)

    def test_unity_gain_at_center(self) -> None:
        zpk = lowpass_to_bandpass_zpk(
            *butterworth_prototype(3, dtype=torch.float64), 4.0, 2.0
        )

        assert abs(abs(_analog_response(zpk, 4.0)) - 1.0) < 1e-10

    def test_invalid_bandwidth(self) -> None:
        z, p, k = butterworth_prototype(2)

        with pytest.raises(InvalidCutoffError):
            lowpass_to_bandpass_zpk(z, p, k, 1.0, 0.0)

    def test_improper_filter(self) -> None:
        zeros = torch.tensor([-1.0, -2.0], dtype=torch.complex128)
        poles = torch.tensor([-3.0], dtype=torch.complex128)

        with pytest.raises(PoleZeroCountError):
            lowpass_to_bandpass_zpk(zeros, poles, torch.tensor(1.0), 1.0, 1.0)


class TestLowpassToBandstop:
    """Test lowpass_to_bandstop_zpk."""

    @pytest.mark.parametrize("prototype", ["butterworth", "chebyshev_2"])
    @pytest.mark.parametrize("w0, bw", [(1.0, 0.5), (10.0, 3.0)])
    def test_matches_scipy(self, prototype: str, w0: float, bw: float) -> None:
        z, p, k = _prototype(prototype)

        z_new, p_new, k_new = lowpass_to_bandstop_zpk(z, p, k, w0, bw)
        z_ref, p_ref, k_ref = scipy_signal.lp2bs_zpk(
            z.numpy(), p.numpy(), k.item(), w0, bw
        )

        torch.testing.assert_close(
            _sort_roots(z_new), _sort_roots(z_ref), rtol=1e-9, atol=1e-9
        )
        torch.testing.assert_close(
            _sort_roots(p_new), _sort_roots(p_ref), rtol=1e-9, atol=1e-9
        )
        assert math.isclose(k_new.item(), k_ref, rel_tol=1e-10)

    def test_notch_zeros(self) -> None:
        z, p, k = butterworth_prototype(3, dtype=torch.float64)

        z_new, _, _ = lowpass_to_bandstop_zpk(z, p, k, 2.0, 1.0)

        torch.testing.assert_close(
            z_new.abs(), torch.full((6,), 2.0, dtype=torch.float64)
        )
        torch.testing.assert_close(
            z_new.real, torch.zeros(6, dtype=torch.float64)
        )

    @pytest.mark.parametrize("order", [1, 2, 3, 4])
    def test_dc_gain_is_preserved(self, order: int) -> None:
        """Gain at DC and far above the notch matches the lowpass DC gain."""
        zpk = lowpass_to_bandstop_zpk(
            *butterworth_prototype(order, dtype=torch.float64), 3.0, 1.0
        )

        assert abs(abs(_analog_response(zpk, 0.0)) - 1.0) < 1e-10
        assert abs(abs(_analog_response(zpk, 1e6)) - 1.0) < 1e-6


class TestBilinearTransform:
    """Test bilinear_transform_zpk."""

    def test_first_order_pole(self) -> None:
        """A pole at s = -1 maps to z = 1/3 with fs = 1."""
        z, p, k = bilinear_transform_zpk(
            torch.zeros(0, dtype=torch.complex128),
            torch.tensor([-1.0 + 0j], dtype=torch.complex128),
            torch.tensor(1.0, dtype=torch.float64),
            1.0,
        )

        torch.testing.assert_close(
            p, torch.tensor([1.0 / 3.0 + 0j], dtype=torch.complex128)
        )
        torch.testing.assert_close(
            z, torch.tensor([-1.0 + 0j], dtype=torch.complex128)
        )
        assert math.isclose(k.item(), 1.0 / 3.0, rel_tol=1e-12)

    @pytest.mark.parametrize("prototype", ["butterworth", "chebyshev_2"])
    @pytest.mark.parametrize("fs", [1.0, 2.0, 44100.0])
    def test_matches_scipy(self, prototype: str, fs: float) -> None:
        z, p, k = _prototype(prototype)

        z_new, p_new, k_new = bilinear_transform_zpk(z, p, k, fs)
        z_ref, p_ref, k_ref = scipy_signal.bilinear_zpk(
            z.numpy(), p.numpy(), k.item(), fs
        )

        torch.testing.assert_close(
            _sort_roots(z_new), _sort_roots(z_ref), rtol=1e-9, atol=1e-9
        )
        torch.testing.assert_close(
            _sort_roots(p_new), _sort_roots(p_ref), rtol=1e-9, atol=1e-9
        )
        assert math.isclose(k_new.item(), k_ref, rel_tol=1e-9)

    def test_stable_poles_map_inside_unit_circle(self) -> None:
        z, p, k = butterworth_prototype(8, dtype=torch.float64)

        _, p_new, _ = bilinear_transform_zpk(z, p, k, 2.0)

        assert torch.all(p_new.abs() < 1)

    def test_pads_zeros_at_nyquist(self) -> None:
        z, p, k = butterworth_prototype(5, dtype=torch.float64)

        z_new, _, _ = bilinear_transform_zpk(z, p, k, 2.0)

        torch.testing.assert_close(
            z_new, -torch.ones(5, dtype=torch.complex128)
        )

    @pytest.mark.parametrize("fs", [0.0, -1.0, float("nan"), float("inf")])
    def test_invalid_sampling_frequency(self, fs: float) -> None:
        z, p, k = butterworth_prototype(2)

        with pytest.raises(InvalidSamplingFrequencyError) as info:
            bilinear_transform_zpk(z, p, k, fs)

        assert info.value.stage == "bilinear_transform"

    def test_more_zeros_than_poles(self) -> None:
        with pytest.raises(PoleZeroCountError):
            bilinear_transform_zpk(
                torch.tensor([-1.0, -2.0], dtype=torch.complex128),
                torch.tensor([-3.0], dtype=torch.complex128),
                torch.tensor(1.0),
                1.0,
            )

    @pytest.mark.parametrize("dtype", [torch.float32, torch.float64])
    def test_dtype_follows_input(self, dtype: torch.dtype) -> None:
        z, p, k = butterworth_prototype(3, dtype=dtype)

        z_new, p_new, k_new = bilinear_transform_zpk(z, p, k, 2.0)

        assert k_new.dtype == dtype
        assert p_new.dtype == z.dtype
        assert z_new.dtype == z.dtype
