from .wave import Wave
from .spectrum import PaddedSignal, SpectrumBins

__all__ = [
    "Wave",
    "PaddedSignal",
    "SpectrumBins",
]
