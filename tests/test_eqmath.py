import math

import pytest

from voicefx.eqmath import (
    Biquad,
    EQBand,
    FilterType,
    freq_for_x,
    response_curve,
    spectrum_outline,
    x_for_freq,
    y_for_magnitude,
)

SR = 48000.0


def test_axis_ends():
    assert x_for_freq(20.0) == pytest.approx(0.0)
    assert x_for_freq(20000.0) == pytest.approx(1.0)
    assert freq_for_x(0.0) == pytest.approx(20.0)
    assert freq_for_x(1.0) == pytest.approx(20000.0)


@pytest.mark.parametrize("freq", [20.0, 100.0, 1000.0, 7500.0, 20000.0])
def test_axis_round_trip(freq):
    assert freq_for_x(x_for_freq(freq)) == pytest.approx(freq)


def test_y_for_magnitude_range():
    assert y_for_magnitude(1.0, 200.0) == pytest.approx(100.0)
    assert y_for_magnitude(10 ** (24 / 20), 200.0) == pytest.approx(0.0)
    assert y_for_magnitude(10 ** (-24 / 20), 200.0) == pytest.approx(200.0)


def test_peak_gain_at_centre():
    gain = 10 ** (6 / 20)
    bq = Biquad.peak(SR, 1000.0, 1.0, gain)
    assert bq.magnitude_at(1000.0, SR) == pytest.approx(gain, rel=1e-6)
    assert bq.magnitude_at(10.0, SR) == pytest.approx(1.0, abs=1e-3)


def test_low_pass_shape():
    bq = Biquad.low_pass(SR, 1000.0, 1 / math.sqrt(2))
    assert bq.magnitude_at(0.0, SR) == pytest.approx(1.0)
    assert bq.magnitude_at(1000.0, SR) == pytest.approx(1 / math.sqrt(2), rel=1e-6)
    assert bq.magnitude_at(SR / 2, SR) == pytest.approx(0.0, abs=1e-9)


def test_high_pass_shape():
    bq = Biquad.high_pass(SR, 1000.0, 1 / math.sqrt(2))
    assert bq.magnitude_at(0.0, SR) == pytest.approx(0.0, abs=1e-9)
    assert bq.magnitude_at(SR / 2, SR) == pytest.approx(1.0)


def test_notch_removes_centre():
    bq = Biquad.notch(SR, 2000.0, 2.0)
    assert bq.magnitude_at(2000.0, SR) == pytest.approx(0.0, abs=1e-9)
    assert bq.magnitude_at(0.0, SR) == pytest.approx(1.0)


def test_shelves_reach_gain():
    gain = 10 ** (9 / 20)
    low = Biquad.low_shelf(SR, 500.0, 0.707, gain)
    high = Biquad.high_shelf(SR, 5000.0, 0.707, gain)
    assert low.magnitude_at(0.0, SR) == pytest.approx(gain, rel=1e-6)
    assert low.magnitude_at(SR / 2, SR) == pytest.approx(1.0, rel=1e-6)
    assert high.magnitude_at(SR / 2, SR) == pytest.approx(gain, rel=1e-6)
    assert high.magnitude_at(0.0, SR) == pytest.approx(1.0, rel=1e-6)


def test_band_coefficients_by_type():
    band = EQBand(True, FilterType.NOTCH, 1000.0, 0.0, 1.0)
    assert band.coefficients(SR) == Biquad.notch(SR, 1000.0, 1.0)
    band.filter_type = 3
    assert band.coefficients(SR) == Biquad.low_shelf(SR, 1000.0, 1.0, 1.0)
    band.filter_type = 42
    assert band.coefficients(SR) is None


def test_response_flat_when_disabled():
    bands = [EQBand(False, FilterType.PEAKING, 1000.0, 12.0, 1.0)]
    curve = response_curve(bands, SR, 50)
    assert len(curve) == 50
    assert all(m == 1.0 for _, m in curve)
    assert curve[0][0] == pytest.approx(20.0)


def test_response_multiplies_bands():
    a = EQBand(True, FilterType.PEAKING, 1000.0, 6.0, 1.0)
    b = EQBand(True, FilterType.LOW_PASS, 5000.0, 0.0, 0.707)
    both = response_curve([a, b], SR, 40)
    only_a = response_curve([a], SR, 40)
    only_b = response_curve([b], SR, 40)
    for (f, m), (_, ma), (_, mb) in zip(both, only_a, only_b):
        assert m == pytest.approx(ma * mb)


def test_response_rejects_zero_points():
    with pytest.raises(ValueError):
        response_curve([], SR, 0)


def test_spectrum_outline_silence_lies_on_bottom():
    points = spectrum_outline([-100.0] * 512, SR, 300.0, 150.0)
    assert all(y == pytest.approx(150.0) for _, y in points)
    assert points[0] == (0.0, 150.0)
    assert points[-1] == points[0]
    assert all(0.0 <= x <= 300.0 for x, _ in points)


def test_spectrum_outline_full_scale_at_top():
    points = spectrum_outline([0.0] * 512, SR, 300.0, 150.0)
    assert points[1] == (0.0, 0.0)
    assert points[-3] == (300.0, 0.0)
    assert points[-2] == (300.0, 150.0)


def test_spectrum_outline_empty_data():
    assert spectrum_outline([0.0], SR, 100.0, 50.0) == [(0.0, 50.0)]