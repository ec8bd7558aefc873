import pytest

from ferskit.dsp_filters import upsample
from ferskit.radar_signal import RadarSignal, Signal


def test_new_signal_is_empty():
    signal = Signal()
    assert signal.size == 0
    assert signal.rate == 0.0


def test_load_without_oversampling_copies_data():
    signal = Signal()
    samples = [1 + 2j, 3 - 1j, 0.5j]
    signal.load(samples, 1000.0)
    assert signal.data == samples
    assert signal.size == 3
    assert signal.rate == 1000.0


def test_load_does_not_alias_input():
    samples = [1 + 0j, 2 + 0j]
    signal = Signal()
    signal.load(samples, 10.0)
    samples.append(3 + 0j)
    assert signal.size == 2


def test_load_with_oversampling_uses_upsampler():
    samples = [1 + 0j, -1 + 1j, 0.5 + 0.5j, 0j]
    signal = Signal()
    signal.load(samples, 100.0, oversample_ratio=2, filter_length=4)
    assert signal.size == len(samples) * 2
    assert signal.rate == 200.0
    assert signal.data == upsample(samples, 2, 4)


def test_oversampling_requires_filter_length():
    with pytest.raises(ValueError):
        Signal().load([1 + 0j], 10.0, oversample_ratio=2)


def test_invalid_ratio_rejected():
    with pytest.raises(ValueError):
        Signal().load([1 + 0j], 10.0, oversample_ratio=0)


def test_reload_replaces_previous_data():
    signal = Signal()
    signal.load([1 + 0j, 2 + 0j, 3 + 0j], 10.0)
    signal.load([5 + 0j], 20.0)
    assert signal.data == [5 + 0j]
    assert signal.rate == 20.0


def test_clear_resets_signal():
    signal = Signal()
    signal.load([1 + 0j, 2 + 0j], 50.0)
    signal.clear()
    assert signal.size == 0
    assert signal.rate == 0.0


def test_radar_signal_rate_follows_signal():
    signal = Signal()
    signal.load([1 + 0j, 1 + 0j], 1e6)
    wave = RadarSignal("pulse", 100.0, 1e9, 2e-6, signal)
    assert wave.rate == 1e6
    assert wave.name == "pulse"
    assert wave.power == 100.0
    assert wave.carrier == 1e9
    assert wave.length == 2e-6


def test_radar_signal_requires_signal():
    with pytest.raises(ValueError, match="Signal is empty"):
        RadarSignal("pulse", 1.0, 1.0, 1.0, None)