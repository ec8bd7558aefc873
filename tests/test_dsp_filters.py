import math

import pytest

from ferskit.dsp_filters import (
    DecadeUpsampler,
    FirFilter,
    IirFilter,
    blackman_fir,
    downsample,
    sinc,
    upsample,
)


def test_sinc_at_zero_is_one():
    assert sinc(0) == 1.0


@pytest.mark.parametrize("x", [1, 2, -3, 5])
def test_sinc_vanishes_at_integers(x):
    assert sinc(x) == pytest.approx(0.0, abs=1e-12)


def test_sinc_is_even():
    assert sinc(0.3) == pytest.approx(sinc(-0.3))


def test_blackman_fir_length():
    assert len(blackman_fir(0.5, 8)) == 16


def test_blackman_fir_center_and_edge():
    coeffs = blackman_fir(0.25, 8)
    # window at the centre sums A0 + A1 + A2 = 1, sinc(0) = 1
    assert coeffs[8] == pytest.approx(1.0)
    # window at index 0 is A0 - A1 + A2 = 0
    assert coeffs[0] == pytest.approx(0.0, abs=1e-12)


def test_blackman_fir_symmetric():
    coeffs = blackman_fir(0.5, 6)
    n = len(coeffs)
    for i in range(1, n):
        assert coeffs[i] == pytest.approx(coeffs[n - i])


def test_blackman_fir_rejects_zero_length():
    with pytest.raises(ValueError):
        blackman_fir(0.5, 0)


def test_fir_impulse_response_is_reversed_coefficients():
    coeffs = [0.1, 0.2, 0.3, 0.4]
    out = FirFilter(coeffs).filter([1, 0, 0, 0, 0])
    assert out[:4] == pytest.approx([complex(c) for c in reversed(coeffs)])
    assert out[4] == pytest.approx(0j)


def test_fir_is_linear():
    filt = FirFilter([0.5, -0.25, 1.5])
    a = [1 + 1j, 2, -1j, 0.5]
    b = [3, -2 + 1j, 1, 4j]
    combined = filt.filter([x + 2 * y for x, y in zip(a, b)])
    separate = [x + 2 * y for x, y in zip(filt.filter(a), filt.filter(b))]
    assert combined == pytest.approx(separate)


def test_fir_state_resets_between_calls():
    filt = FirFilter([1.0, 2.0])
    assert filt.filter([1, 2, 3]) == pytest.approx(filt.filter([1, 2, 3]))


def test_iir_with_trivial_denominator_matches_fir():
    num = [0.3, -0.7, 1.1]
    signal = [1.0, -2.0, 0.5, 3.0, 0.0, 1.5]
    iir_out = IirFilter([1.0, 0.0, 0.0], num).filter_block(signal)
    fir_out = FirFilter(list(reversed(num))).filter(signal)
    assert [complex(v) for v in iir_out] == pytest.approx(fir_out)


def test_iir_single_and_block_agree():
    den = [1.0, -0.5, 0.1]
    num = [0.2, 0.3, 0.1]
    signal = [1.0, 0.0, -1.0, 2.0, 0.5]
    single = IirFilter(den, num)
    block = IirFilter(den, num)
    assert [single.filter(x) for x in signal] == pytest.approx(block.filter_block(signal))


def test_iir_feedback_decays_geometrically():
    filt = IirFilter([1.0, -0.5], [1.0, 0.0])
    out = filt.filter_block([1.0, 0.0, 0.0, 0.0, 0.0])
    assert out[0] == pytest.approx(1.0)
    for prev, cur in zip(out, out[1:]):
        assert cur == pytest.approx(prev * 0.5)


def test_iir_rejects_mismatched_coefficients():
    with pytest.raises(ValueError):
        IirFilter([1.0, 0.5], [1.0])


def test_decade_upsampler_first_output_is_leading_numerator():
    out = DecadeUpsampler().upsample(1.0)
    assert len(out) == 10
    assert out[0] == pytest.approx(2.7301694322809e-06)


def test_decade_upsampler_is_linear():
    a = DecadeUpsampler()
    b = DecadeUpsampler()
    first_a = a.upsample(1.0) + a.upsample(-0.5)
    first_b = b.upsample(2.0) + b.upsample(-1.0)
    assert first_b == pytest.approx([2 * x for x in first_a])


def test_decade_upsampler_zero_in_zero_out():
    assert DecadeUpsampler().upsample(0.0) == [0.0] * 10


def test_upsample_length_and_zero_input():
    out = upsample([0j] * 5, 4, 8)
    assert len(out) == 20
    assert all(v == 0 for v in out)


def test_upsample_is_linear():
    a = [1 + 0j, 2j, -1, 0.5]
    up_a = upsample(a, 2, 4)
    up_scaled = upsample([3 * x for x in a], 2, 4)
    assert up_scaled == pytest.approx([3 * x for x in up_a])


def test_upsample_rejects_zero_ratio():
    with pytest.raises(ValueError):
        upsample([1j], 0, 4)


def test_downsample_length():
    assert len(downsample([1j] * 11, 3, 4)) == 3


def test_downsample_empty_raises():
    with pytest.raises(ValueError, match="empty"):
        downsample([], 2, 4)


def test_downsample_is_linear():
    a = [1, -1j, 2, 0.5 + 0.5j, 3, -2]
    down_a = downsample(a, 2, 4)
    down_scaled = downsample([-2 * x for x in a], 2, 4)
    assert down_scaled == pytest.approx([-2 * x for x in down_a])


def test_downsample_preserves_dc_approximately():
    dc = [1.0 + 0j] * 200
    out = downsample(dc, 2, 16)
    gain = sum(blackman_fir(0.5, 16)) / 2
    mid = out[len(out) // 2]
    assert mid.real == pytest.approx(gain)
    assert math.isclose(mid.imag, 0.0, abs_tol=1e-12)