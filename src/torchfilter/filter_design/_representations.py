"""Filter coefficient containers returned by ``iir_design``."""

from typing import Literal

from tensordict.tensorclass import tensorclass
from torch import Tensor

from ._ba_to_sos import ba_to_sos
from ._ba_to_zpk import ba_to_zpk
from ._sos_to_ba import sos_to_ba
from ._sos_to_zpk import sos_to_zpk
from ._zpk_to_ba import zpk_to_ba
from ._zpk_to_sos import zpk_to_sos


@tensorclass
class ZPK:
    """Filter as zeros, poles and gain.

    Attributes
    ----------
    zeros : Tensor
        Zeros of the transfer function, complex, shape (n_zeros,).
    poles : Tensor
        Poles of the transfer function, complex, shape (n_poles,).
    gain : Tensor
        System gain, real scalar.
    """

    zeros: Tensor
    poles: Tensor
    gain: Tensor

    def to_zpk(self) -> "ZPK":
        return self

    def to_ba(self) -> "BA":
        numerator, denominator = zpk_to_ba(self.zeros, self.poles, self.gain)
        return BA(numerator=numerator, denominator=denominator)

    def to_sos(
        self,
        pairing: Literal["nearest", "keep_odd"] = "nearest",
        *,
        analog: bool = False,
    ) -> "SOS":
        """Pair the roots into second-order sections, see ``zpk_to_sos``."""
        return SOS(
            sections=zpk_to_sos(
                self.zeros, self.poles, self.gain, pairing, analog=analog
            )
        )


@tensorclass
class BA:
    """Filter as transfer function coefficients.

    Attributes
    ----------
    numerator : Tensor
        Numerator coefficients in descending order.
    denominator : Tensor
        Denominator coefficients in descending order.
    """

    numerator: Tensor
    denominator: Tensor

    def to_zpk(self) -> ZPK:
        zeros, poles, gain = ba_to_zpk(self.numerator, self.denominator)
        return ZPK(zeros=zeros, poles=poles, gain=gain)

    def to_ba(self) -> "BA":
        return self

    def to_sos(
        self, pairing: Literal["nearest", "keep_odd"] = "nearest"
    ) -> "SOS":
        return SOS(
            sections=ba_to_sos(self.numerator, self.denominator, pairing)
        )


@tensorclass
class SOS:
    """Filter as cascaded second-order sections.

    Attributes
    ----------
    sections : Tensor
        Section coefficients, shape (n_sections, 6). Each row is
        [b0, b1, b2, a0, a1, a2] with a0 = 1.
    """

    sections: Tensor

    def to_zpk(self) -> ZPK:
        zeros, poles, gain = sos_to_zpk(self.sections)
        return ZPK(zeros=zeros, poles=poles, gain=gain)

    def to_ba(self) -> BA:
        numerator, denominator = sos_to_ba(self.sections)
        return BA(numerator=numerator, denominator=denominator)

    def to_sos(self) -> "SOS":
        return self
