"""Tests for conversions between ZPK, BA and SOS representations."""

import math
import warnings

import numpy as np
import pytest
import torch
from scipy import signal as scipy_signal

from torchfilter.filter_analysis import (
    frequency_response_sos,
    frequency_response_zpk,
)
from torchfilter.filter_design import (
    ConvergenceError,
    FilterDesignWarning,
    InvalidArgumentError,
    InvalidCoefficientsError,
    PairingError,
    PoleZeroCountError,
    SOSNormalizationError,
    ba_to_sos,
    ba_to_zpk,
    sos_to_ba,
    sos_to_zpk,
    zpk_to_ba,
    zpk_to_sos,
)


def _sort_roots(roots) -> torch.Tensor:
    values = sorted(
        torch.as_tensor(roots).tolist(),
        key=lambda r: (round(r.real, 8), round(r.imag, 8)),
    )
    return torch.tensor(values, dtype=torch.complex128)


def _scipy_zpk(order: int, kind: str = "butter"):
    if kind == "butter":
        z, p, k = scipy_signal.butter(order, 0.3, output="zpk")
    elif kind == "cheby1":
        z, p, k = scipy_signal.cheby1(order, 1.0, 0.3, output="zpk")
    else:
        z, p, k = scipy_signal.cheby2(order, 40.0, 0.3, output="zpk")
    return (
        torch.tensor(z, dtype=torch.complex128),
        torch.tensor(p, dtype=torch.complex128),
        torch.tensor(k, dtype=torch.float64),
    )


class TestZpkToBa:
    """Test zpk_to_ba."""

    @pytest.mark.parametrize("order", [1, 2, 5, 8])
    def test_matches_scipy(self, order: int) -> None:
        z, p, k = _scipy_zpk(order, "cheby2")

        b, a = zpk_to_ba(z, p, k)
        b_ref, a_ref = scipy_signal.zpk2tf(z.numpy(), p.numpy(), k.item())

        torch.testing.assert_close(b, torch.from_numpy(b_ref.real))
        torch.testing.assert_close(a, torch.from_numpy(a_ref.real))

    def test_empty_roots(self) -> None:
        b, a = zpk_to_ba(
            torch.zeros(0, dtype=torch.complex128),
            torch.zeros(0, dtype=torch.complex128),
            torch.tensor(2.5, dtype=torch.float64),
        )

        torch.testing.assert_close(
            b, torch.tensor([2.5], dtype=torch.float64)
        )
        torch.testing.assert_close(
            a, torch.tensor([1.0], dtype=torch.float64)
        )

    def test_denominator_is_monic(self) -> None:
        z, p, k = _scipy_zpk(6, "cheby1")

        _, a = zpk_to_ba(z, p, k)

        assert a[0].item() == 1.0

    def test_warns_on_asymmetric_roots(self) -> None:
        poles = torch.tensor([0.5 + 0.5j], dtype=torch.complex128)

        with pytest.warns(FilterDesignWarning):
            zpk_to_ba(
                torch.zeros(0, dtype=torch.complex128),
                poles,
                torch.tensor(1.0, dtype=torch.float64),
            )

    def test_no_warning_for_conjugate_roots(self) -> None:
        z, p, k = _scipy_zpk(7)

        with warnings.catch_warnings():
            warnings.simplefilter("error", FilterDesignWarning)
            zpk_to_ba(z, p, k)

    def test_float32_output(self) -> None:
        b, a = zpk_to_ba(
            torch.tensor([-1.0 + 0j]),
            torch.tensor([-0.5 + 0j]),
            torch.tensor(0.25),
        )

        assert b.dtype == torch.float32
        torch.testing.assert_close(b, torch.tensor([0.25, 0.25]))
        torch.testing.assert_close(a, torch.tensor([1.0, 0.5]))


class TestBaToZpk:
    """Test ba_to_zpk."""

    def test_first_order(self) -> None:
        z, p, k = ba_to_zpk(
            torch.tensor([0.25, 0.25]), torch.tensor([1.0, -0.5])
        )

        torch.testing.assert_close(z, torch.tensor([-1.0 + 0j]))
        torch.testing.assert_close(p, torch.tensor([0.5 + 0j]))
        torch.testing.assert_close(k, torch.tensor(0.25))

    @pytest.mark.parametrize("order", [2, 4, 6])
    def test_round_trip(self, order: int) -> None:
        z, p, k = _scipy_zpk(order, "cheby2")

        b, a = zpk_to_ba(z, p, k)
        z_back, p_back, k_back = ba_to_zpk(b, a)

        torch.testing.assert_close(
            _sort_roots(z_back), _sort_roots(z), rtol=1e-6, atol=1e-6
        )
        torch.testing.assert_close(
            _sort_roots(p_back), _sort_roots(p), rtol=1e-8, atol=1e-8
        )
        torch.testing.assert_close(k_back, k)

    @pytest.mark.parametrize("kind", ["butter", "cheby1", "cheby2"])
    @pytest.mark.parametrize("order", [1, 3, 6, 10])
    def test_coefficients_round_trip(self, kind: str, order: int) -> None:
        b, a = zpk_to_ba(*_scipy_zpk(order, kind))

        b_back, a_back = zpk_to_ba(*ba_to_zpk(b, a))

        torch.testing.assert_close(
            b_back, b, rtol=1e-8, atol=1e-8 * b.abs().max().item()
        )
        torch.testing.assert_close(
            a_back, a, rtol=1e-8, atol=1e-8 * a.abs().max().item()
        )

    def test_gain_uses_leading_coefficients(self) -> None:
        _, _, k = ba_to_zpk(
            torch.tensor([3.0, 1.0], dtype=torch.float64),
            torch.tensor([2.0, 0.5], dtype=torch.float64),
        )

        assert k.item() == 1.5

    @pytest.mark.parametrize(
        "b, a",
        [
            ([], [1.0, 0.5]),
            ([1.0], []),
            ([0.0, 1.0], [1.0, 0.5]),
            ([1.0, 1.0], [0.0, 1.0]),
        ],
    )
    def test_invalid_coefficients(self, b, a) -> None:
        with pytest.raises(InvalidCoefficientsError) as info:
            ba_to_zpk(
                torch.tensor(b, dtype=torch.float64),
                torch.tensor(a, dtype=torch.float64),
            )

        assert info.value.stage == "conversion"

    def test_non_finite_coefficients(self) -> None:
        with pytest.raises(ConvergenceError):
            ba_to_zpk(
                torch.tensor([1.0], dtype=torch.float64),
                torch.tensor([1.0, float("inf")], dtype=torch.float64),
            )


class TestZpkToSos:
    """Test zpk_to_sos pairing."""

    @pytest.mark.parametrize("order", [1, 2, 3, 4, 5, 8, 9])
    @pytest.mark.parametrize("kind", ["butter", "cheby1", "cheby2"])
    def test_response_matches_scipy(self, order: int, kind: str) -> None:
        z, p, k = _scipy_zpk(order, kind)

        sos = zpk_to_sos(z, p, k)
        sos_ref = scipy_signal.zpk2sos(z.numpy(), p.numpy(), k.item())

        assert sos.shape == sos_ref.shape
        torch.testing.assert_close(
            sos, torch.from_numpy(sos_ref), rtol=1e-8, atol=1e-10
        )

    @pytest.mark.parametrize("order", [1, 2, 3, 6, 7])
    def test_section_count(self, order: int) -> None:
        z, p, k = _scipy_zpk(order)

        sos = zpk_to_sos(z, p, k)

        assert sos.shape == (math.ceil(order / 2), 6)
        torch.testing.assert_close(
            sos[:, 3], torch.ones(sos.shape[0], dtype=torch.float64)
        )

    @pytest.mark.parametrize("order", [2, 5, 8])
    def test_gain_preserved(self, order: int) -> None:
        z, p, k = _scipy_zpk(order, "cheby1")

        sos = zpk_to_sos(z, p, k)

        _, h_sos = frequency_response_sos(sos, 64)
        _, h_zpk = frequency_response_zpk(z, p, k, 64)
        torch.testing.assert_close(h_sos, h_zpk, rtol=1e-8, atol=1e-10)

    def test_keep_odd_first_order_section(self) -> None:
        z, p, k = _scipy_zpk(5)

        sos = zpk_to_sos(z, p, k, pairing="keep_odd")

        assert sos.shape == (3, 6)
        first_order = (sos[:, 2] == 0) & (sos[:, 5] == 0)
        assert int(first_order.sum()) == 1

        _, h_sos = frequency_response_sos(sos, 64)
        _, h_zpk = frequency_response_zpk(z, p, k, 64)
        torch.testing.assert_close(h_sos, h_zpk, rtol=1e-8, atol=1e-10)

    def test_keep_odd_matches_scipy(self) -> None:
        z, p, k = _scipy_zpk(7, "cheby1")

        sos = zpk_to_sos(z, p, k, pairing="keep_odd")
        sos_ref = scipy_signal.zpk2sos(
            z.numpy(), p.numpy(), k.item(), pairing="keep_odd"
        )

        torch.testing.assert_close(
            sos, torch.from_numpy(sos_ref), rtol=1e-8, atol=1e-10
        )

    def test_poles_closest_to_unit_circle_last(self) -> None:
        z, p, k = _scipy_zpk(8, "cheby1")

        sos = zpk_to_sos(z, p, k)

        # |p|^2 of a conjugate pair is a2
        radii = sos[:, 5].abs().sqrt()
        assert torch.all(radii[1:] >= radii[:-1] - 1e-12)

    def test_unequal_counts(self) -> None:
        with pytest.raises(PoleZeroCountError):
            zpk_to_sos(
                torch.zeros(0, dtype=torch.complex128),
                torch.tensor([0.5 + 0j], dtype=torch.complex128),
                torch.tensor(1.0),
            )

    def test_no_poles(self) -> None:
        with pytest.raises(PoleZeroCountError):
            zpk_to_sos(
                torch.zeros(0, dtype=torch.complex128),
                torch.zeros(0, dtype=torch.complex128),
                torch.tensor(1.0),
            )

    def test_unmatched_conjugate(self) -> None:
        zeros = torch.tensor([-1.0, -1.0], dtype=torch.complex128)
        poles = torch.tensor([0.5 + 0.5j, 0.3 + 0j], dtype=torch.complex128)

        with pytest.raises(PairingError) as info:
            zpk_to_sos(zeros, poles, torch.tensor(1.0))

        assert isinstance(info.value, ArithmeticError)

    def test_invalid_pairing(self) -> None:
        z, p, k = _scipy_zpk(2)

        with pytest.raises(InvalidArgumentError):
            zpk_to_sos(z, p, k, pairing="minimal")

    def test_analog_zeros_at_infinity(self) -> None:
        """Analog sections right-align numerators with missing zeros."""
        poles = torch.tensor(
            [-0.5 + 0.5j, -0.5 - 0.5j, -2.0], dtype=torch.complex128
        )

        sos = zpk_to_sos(
            torch.zeros(0, dtype=torch.complex128),
            poles,
            torch.tensor(1.0, dtype=torch.float64),
            pairing="keep_odd",
            analog=True,
        )

        expected = torch.tensor(
            [[0.0, 1.0, 0.0, 1.0, 2.0, 0.0], [0.0, 0.0, 1.0, 1.0, 1.0, 0.5]],
            dtype=torch.float64,
        )
        torch.testing.assert_close(sos, expected, rtol=0, atol=1e-12)

    def test_small_real_root_with_rounding_residue(self) -> None:
        zeros = torch.tensor([1.0, -1.0], dtype=torch.complex128)
        poles = torch.tensor(
            [0.7939 - 1.6e-17j, -0.0008 + 4.3e-17j], dtype=torch.complex128
        )

        sos = zpk_to_sos(zeros, poles, torch.tensor(0.5))

        expected = torch.tensor(
            [[0.5, 0.0, -0.5, 1.0, -0.7931, -0.7939 * 0.0008]],
            dtype=torch.float64,
        )
        torch.testing.assert_close(sos, expected, rtol=0, atol=1e-12)

    def test_analog_more_zeros_than_poles(self) -> None:

        with pytest.raises(PoleZeroCountError):
            zpk_to_sos(
                torch.tensor([-1.0, -2.0], dtype=torch.complex128),
                torch.tensor([-3.0], dtype=torch.complex128),
                torch.tensor(1.0),
                analog=True,
            )


class TestSosToZpk:
    """Test sos_to_zpk."""

    @pytest.mark.parametrize("order", [2, 4, 7])
    def test_matches_scipy(self, order: int) -> None:
        sos = torch.from_numpy(
            scipy_signal.cheby2(order, 40.0, 0.3, output="sos")
        )

        z, p, k = sos_to_zpk(sos)
        z_ref, p_ref, k_ref = scipy_signal.sos2zpk(sos.numpy())

        # Origin roots depend on how each side pads first-order sections
        p = p[p.abs() > 1e-12]
        z = z[z.abs() > 1e-12]
        p_ref = p_ref[np.abs(p_ref) > 1e-12]
        z_ref = z_ref[np.abs(z_ref) > 1e-12]
        torch.testing.assert_close(
            _sort_roots(p), _sort_roots(p_ref), rtol=1e-9, atol=1e-9
        )
        torch.testing.assert_close(
            _sort_roots(z), _sort_roots(z_ref), rtol=1e-7, atol=1e-7
        )
        assert math.isclose(k.item(), k_ref, rel_tol=1e-10)

    def test_first_order_section(self) -> None:
        sos = torch.tensor(
            [[0.5, 0.5, 0.0, 1.0, -0.2, 0.0]], dtype=torch.float64
        )

        z, p, k = sos_to_zpk(sos)

        torch.testing.assert_close(
            z, torch.tensor([-1.0 + 0j], dtype=torch.complex128)
        )
        torch.testing.assert_close(
            p, torch.tensor([0.2 + 0j], dtype=torch.complex128)
        )
        assert k.item() == 0.5

    def test_round_trip_through_sections(self) -> None:
        z, p, k = _scipy_zpk(6, "cheby1")

        z_back, p_back, k_back = sos_to_zpk(zpk_to_sos(z, p, k))

        torch.testing.assert_close(
            _sort_roots(p_back), _sort_roots(p), rtol=1e-9, atol=1e-9
        )
        torch.testing.assert_close(k_back, k, rtol=1e-10, atol=0)

    @pytest.mark.parametrize(
        "sos",
        [
            torch.zeros((0, 6), dtype=torch.float64),
            torch.ones((2, 5), dtype=torch.float64),
            torch.ones(6, dtype=torch.float64),
            torch.tensor([[1.0, 0.0, 0.0, 2.0, 0.1, 0.0]]),
        ],
    )
    def test_invalid_sections(self, sos) -> None:
        with pytest.raises(SOSNormalizationError):
            sos_to_zpk(sos)

    def test_validate_false_skips_a0_check(self) -> None:
        sos = torch.tensor(
            [[2.0, 0.0, 0.0, 2.0, 0.0, 0.0]], dtype=torch.float64
        )

        _, _, k = sos_to_zpk(sos, validate=False)

        assert k.item() == 1.0


class TestSosToBa:
    """Test sos_to_ba."""

    @pytest.mark.parametrize("order", [1, 3, 6])
    def test_matches_scipy(self, order: int) -> None:
        sos = torch.from_numpy(
            scipy_signal.butter(order, 0.2, output="sos")
        )

        b, a = sos_to_ba(sos)
        b_ref, a_ref = scipy_signal.sos2tf(sos.numpy())

        torch.testing.assert_close(b, torch.from_numpy(b_ref))
        torch.testing.assert_close(a, torch.from_numpy(a_ref))

    def test_single_section_is_identity(self) -> None:
        section = torch.tensor(
            [[0.2, 0.4, 0.2, 1.0, -0.3, 0.1]], dtype=torch.float64
        )

        b, a = sos_to_ba(section)

        torch.testing.assert_close(b, section[0, :3])
        torch.testing.assert_close(a, section[0, 3:])

    def test_invalid_shape(self) -> None:
        with pytest.raises(SOSNormalizationError):
            sos_to_ba(torch.ones((1, 4)))


class TestBaToSos:
    """Test ba_to_sos."""

    @pytest.mark.parametrize("order", [2, 4, 6])
    def test_response_matches_ba(self, order: int) -> None:
        b, a = scipy_signal.cheby1(order, 1.0, 0.4)
        b = torch.from_numpy(b)
        a = torch.from_numpy(a)

        sos = ba_to_sos(b, a)
        sos_ref = scipy_signal.tf2sos(b.numpy(), a.numpy())

        assert sos.shape == sos_ref.shape
        _, h = frequency_response_sos(sos, 128)
        _, h_ref = frequency_response_sos(torch.from_numpy(sos_ref), 128)
        torch.testing.assert_close(h, h_ref, rtol=1e-6, atol=1e-8)

    def test_numerator_shorter_than_denominator(self) -> None:
        b = torch.tensor([0.5], dtype=torch.float64)
        a = torch.tensor([1.0, -0.9, 0.2], dtype=torch.float64)

        sos = ba_to_sos(b, a)

        assert sos.shape == (1, 6)
        torch.testing.assert_close(sos[0, :3], b.new_tensor([0.5, 0.0, 0.0]))
        torch.testing.assert_close(sos[0, 3:], a)
