"""Digital filters and resampling helpers for complex and real sample streams."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Sequence

BLACKMAN_A0 = 0.42
BLACKMAN_A1 = 0.5
BLACKMAN_A2 = 0.08

# 11th order elliptic lowpass at 0.1 fs
_DECADE_DEN = (
    1.0, -10.301102119865, 48.5214567642597, -137.934509572412, 262.914952985445,
    -352.788381841481, 340.027874008585, -235.39260470286, 114.698499845697,
    -37.4634653062448, 7.38208765922137, -0.664807695826097,
)
_DECADE_NUM = (
    2.7301694322809e-06, -1.8508123430239e-05, 5.75739466753894e-05, -0.000104348734423658,
    0.000111949190289715, -4.9384188225528e-05, -4.9384188225522e-05, 0.00011194919028971,
    -0.000104348734423656, 5.75739466753884e-05, -1.85081234302388e-05, 2.73016943228086e-06,
)


def sinc(x: float) -> float:
    """Normalised sinc: sin(pi x) / (pi x), with sinc(0) == 1."""
    if x == 0:
        return 1.0
    return math.sin(x * math.pi) / (x * math.pi)


def blackman_fir(cutoff: float, filter_length: int) -> list[float]:
    """Blackman-windowed sinc lowpass with ``2 * filter_length`` coefficients."""
    if filter_length < 1:
        raise ValueError("filter_length must be at least 1")
    total = filter_length * 2
    n = total / 2.0
    pi_n = math.pi / n
    return [
        sinc(cutoff * (i - n))
        * (BLACKMAN_A0 - BLACKMAN_A1 * math.cos(pi_n * i) + BLACKMAN_A2 * math.cos(2 * pi_n * i))
        for i in range(total)
    ]


class IirFilter:
    """Direct-form II infinite impulse response filter over real samples."""

    def __init__(self, den_coeffs: Sequence[float], num_coeffs: Sequence[float]) -> None:
        if len(den_coeffs) != len(num_coeffs):
            raise ValueError("numerator and denominator must have the same length")
        self._a = [float(c) for c in den_coeffs]
        self._b = [float(c) for c in num_coeffs]
        self._order = len(self._a)
        self._w: deque[float] = deque([0.0] * self._order, maxlen=self._order)

    def filter(self, sample: float) -> float:
        """Filter one sample and return the output."""
        if self._order == 0:
            return 0.0
        w = self._w
        w.rotate(1)
        w[0] = sample
        acc = sample
        for a, state in zip(self._a[1:], list(w)[1:]):
            acc -= a * state
        w[0] = acc
        return sum(b * state for b, state in zip(self._b, w))

    def filter_block(self, samples: Iterable[float]) -> list[float]:
        """Filter a block of samples, returning the outputs in order."""
        return [self.filter(sample) for sample in samples]


class FirFilter:
    """Finite impulse response filter over complex samples."""

    def __init__(self, coeffs: Sequence[float]) -> None:
        self._coeffs = [float(c) for c in coeffs]
        self._order = len(self._coeffs)

    def filter(self, samples: Iterable[complex]) -> list[complex]:
        """Return the filtered samples; the filter state starts at zero each call."""
        line: deque[complex] = deque([0j] * self._order, maxlen=self._order)
        out: list[complex] = []
        for sample in samples:
            line.appendleft(complex(sample))
            out.append(sum((x * c for x, c in zip(reversed(line), self._coeffs)), 0j))
        return out


def _check_resample_args(ratio: int, filter_length: int) -> None:
    if ratio < 1:
        raise ValueError("ratio must be at least 1")
    if filter_length < 1:
        raise ValueError("filter_length must be at least 1")


def upsample(samples: Sequence[complex], ratio: int, filter_length: int) -> list[complex]:
    """Zero-stuff ``samples`` by ``ratio`` and lowpass them; returns ``len * ratio`` samples."""
    _check_resample_args(ratio, filter_length)
    coeffs = blackman_fir(1 / ratio, filter_length)
    filt_length = len(coeffs)
    size = len(samples)
    tmp = [0j] * (size * ratio + filt_length)
    for i, value in enumerate(samples):
        tmp[i * ratio] = complex(value)
    filtered = FirFilter(coeffs).filter(tmp)
    delay = filt_length // 2 - 1
    return filtered[delay:delay + size * ratio]


def downsample(samples: Sequence[complex], ratio: int, filter_length: int) -> list[complex]:
    """Lowpass ``samples`` and keep every ``ratio``-th one, scaled by ``1 / ratio``."""
    if len(samples) == 0:
        raise ValueError("Input span is empty in Downsample")
    _check_resample_args(ratio, filter_length)
    coeffs = blackman_fir(1 / ratio, filter_length)
    filt_length = len(coeffs)
    tmp = [complex(s) for s in samples] + [0j] * filt_length
    filtered = FirFilter(coeffs).filter(tmp)
    half = filt_length // 2
    return [filtered[i * ratio + half] / ratio for i in range(len(samples) // ratio)]


class DecadeUpsampler:
    """Upsampler by a fixed factor of ten using an elliptic IIR lowpass."""

    def __init__(self) -> None:
        self._filter = IirFilter(_DECADE_DEN, _DECADE_NUM)

    def upsample(self, sample: float) -> list[float]:
        """Return ten output samples for one input sample; state carries over calls."""
        return self._filter.filter_block([sample] + [0.0] * 9)