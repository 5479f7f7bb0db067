from typing import Optional, Tuple

import torch
from torch import Tensor

from ._exceptions import InvalidArgumentError, Stage


def resolve_dtypes(
    dtype: Optional[torch.dtype],
    device: Optional[torch.device],
    stage: Stage,
) -> Tuple[torch.dtype, torch.dtype, torch.device]:
    """Resolve the real and complex output dtypes and the output device.

    Returns
    -------
    dtype : torch.dtype
        Real dtype (float32 or float64), defaulting to
        torch.get_default_dtype().
    complex_dtype : torch.dtype
        Matching complex dtype (complex64 or complex128).
    device : torch.device
        Output device, defaulting to CPU.
    """
    if dtype is None:
        dtype = torch.get_default_dtype()
    if device is None:
        device = torch.device("cpu")

    if dtype == torch.float32:
        complex_dtype = torch.complex64
    elif dtype == torch.float64:
        complex_dtype = torch.complex128
    else:
        raise InvalidArgumentError(f"Unsupported dtype: {dtype}", stage)

    return dtype, complex_dtype, torch.device(device)


def complex_dtype_for(dtype: torch.dtype) -> torch.dtype:
    """Complex dtype whose components have the precision of ``dtype``."""
    if dtype in (torch.float64, torch.complex128):
        return torch.complex128
    return torch.complex64


def promote_zpk(
    zeros, poles, gain
) -> Tuple[Tensor, Tensor, Tensor, torch.dtype, torch.dtype]:
    """Promote a ZPK triple to complex128/float64 for computation.

    Returns the promoted zeros, poles and gain together with the real and
    complex dtypes the results should be cast back to. The output precision
    follows the widest of the inputs.
    """
    zeros = torch.as_tensor(zeros)
    poles = torch.as_tensor(poles, device=zeros.device)
    gain = torch.as_tensor(gain, device=zeros.device)

    dtype = result_dtype(zeros, poles, gain)

    if gain.is_complex():
        gain = gain.real

    return (
        zeros.reshape(-1).to(torch.complex128),
        poles.reshape(-1).to(torch.complex128),
        gain.to(torch.float64),
        dtype,
        complex_dtype_for(dtype),
    )


def _precision(tensor: Tensor) -> Optional[torch.dtype]:
    if tensor.dtype in (torch.float64, torch.complex128):
        return torch.float64
    if tensor.dtype in (torch.float32, torch.complex64):
        return torch.float32
    return None


def result_dtype(*tensors: Tensor) -> torch.dtype:
    """Real output dtype for a computation on ``tensors``.

    float64 if any input has double precision, float32 if any has single
    precision, torch.get_default_dtype() for integer-only inputs.
    """
    precisions = {_precision(tensor) for tensor in tensors}
    if torch.float64 in precisions:
        return torch.float64
    if torch.float32 in precisions:
        return torch.float32
    return torch.get_default_dtype()
