"""Frequency response of designed filters."""

from ._frequency_response_analog_zpk import frequency_response_analog_zpk
from ._frequency_response_ba import frequency_response_ba
from ._frequency_response_sos import frequency_response_sos
from ._frequency_response_zpk import frequency_response_zpk

__all__ = [
    "frequency_response_analog_zpk",
    "frequency_response_ba",
    "frequency_response_sos",
    "frequency_response_zpk",
]
