"""Radar waveform sample storage and the named radar signal built on it."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ferskit.dsp_filters import upsample


class Signal:
    """Complex waveform samples at a given sample rate."""

    def __init__(self) -> None:
        self.data: list[complex] = []
        self.rate: float = 0.0

    @property
    def size(self) -> int:
        """Number of stored samples."""
        return len(self.data)

    def clear(self) -> None:
        """Drop the stored samples and reset the rate."""
        self.data = []
        self.rate = 0.0

    def load(
        self,
        samples: Sequence[complex],
        rate: float,
        oversample_ratio: int = 1,
        filter_length: int | None = None,
    ) -> None:
        """Store ``samples`` taken at ``rate``, oversampling them by ``oversample_ratio``.

        Oversampling needs ``filter_length``, the half-length of the interpolation filter.
        """
        if oversample_ratio < 1:
            raise ValueError("oversample_ratio must be at least 1")
        self.clear()
        if oversample_ratio == 1:
            data = [complex(s) for s in samples]
        else:
            if filter_length is None:
                raise ValueError("filter_length is required when oversampling")
            data = upsample(samples, oversample_ratio, filter_length)
        self.data = data
        self.rate = rate * oversample_ratio


@dataclass
class RadarSignal:
    """A named pulse with power, carrier frequency, length and waveform."""

    name: str
    power: float
    carrier: float
    length: float
    signal: Signal

    def __post_init__(self) -> None:
        if self.signal is None:
            raise ValueError("Signal is empty")

    @property
    def rate(self) -> float:
        """Sample rate of the underlying waveform."""
        return self.signal.rate