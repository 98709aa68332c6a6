"""Equalizer response maths: biquad coefficients, plot mapping and curves."""

from __future__ import annotations

import cmath
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import IntEnum

from .spectrum import FFT_SIZE

MIN_FREQ = 20.0
MAX_FREQ = 20000.0
PLOT_MIN_DB = -24.0
PLOT_MAX_DB = 24.0
SPECTRUM_FLOOR_DB = -100.0
DEFAULT_CURVE_POINTS = 300

_LOG_MIN = math.log10(MIN_FREQ)
_LOG_MAX = math.log10(MAX_FREQ)


class FilterType(IntEnum):
    """Filter shapes an EQ band can take, numbered as stored in parameters."""

    PEAKING = 0
    LOW_PASS = 1
    HIGH_PASS = 2
    LOW_SHELF = 3
    HIGH_SHELF = 4
    NOTCH = 5


def _decibels_to_gain(db: float) -> float:
    return 10.0 ** (db / 20.0) if db > SPECTRUM_FLOOR_DB else 0.0


def _gain_to_decibels(gain: float) -> float:
    if gain <= 0.0:
        return SPECTRUM_FLOOR_DB
    return max(SPECTRUM_FLOOR_DB, 20.0 * math.log10(gain))


@dataclass(frozen=True)
class Biquad:
    """Normalised second-order filter coefficients (a0 == 1)."""

    b0: float
    b1: float
    b2: float
    a1: float
    a2: float

    @classmethod
    def _normalised(cls, b0: float, b1: float, b2: float,
                    a0: float, a1: float, a2: float) -> Biquad:
        return cls(b0 / a0, b1 / a0, b2 / a0, a1 / a0, a2 / a0)

    @classmethod
    def peak(cls, sample_rate: float, frequency: float, q: float, gain: float) -> Biquad:
        """Peaking filter; gain is a linear factor."""
        a = math.sqrt(max(0.0, gain))
        omega = 2.0 * math.pi * max(frequency, 2.0) / sample_rate
        alpha = math.sin(omega) / (q * 2.0)
        c2 = -2.0 * math.cos(omega)
        return cls._normalised(1.0 + alpha * a, c2, 1.0 - alpha * a,
                               1.0 + alpha / a, c2, 1.0 - alpha / a)

    @classmethod
    def low_pass(cls, sample_rate: float, frequency: float, q: float) -> Biquad:
        n = 1.0 / math.tan(math.pi * frequency / sample_rate)
        n_sq = n * n
        inv_q = 1.0 / q
        c1 = 1.0 / (1.0 + inv_q * n + n_sq)
        return cls(c1, c1 * 2.0, c1, c1 * 2.0 * (1.0 - n_sq), c1 * (1.0 - inv_q * n + n_sq))

    @classmethod
    def high_pass(cls, sample_rate: float, frequency: float, q: float) -> Biquad:
        n = math.tan(math.pi * frequency / sample_rate)
        n_sq = n * n
        inv_q = 1.0 / q
        c1 = 1.0 / (1.0 + inv_q * n + n_sq)
        return cls(c1, c1 * -2.0, c1, c1 * 2.0 * (n_sq - 1.0), c1 * (1.0 - inv_q * n + n_sq))

    @classmethod
    def _shelf_terms(cls, sample_rate: float, frequency: float, q: float, gain: float):
        a = math.sqrt(max(0.0, gain))
        omega = 2.0 * math.pi * max(frequency, 2.0) / sample_rate
        cos_o = math.cos(omega)
        beta = math.sin(omega) * math.sqrt(a) / q
        return a, a - 1.0, a + 1.0, cos_o, beta

    @classmethod
    def low_shelf(cls, sample_rate: float, frequency: float, q: float, gain: float) -> Biquad:
        """Low shelf; gain is a linear factor."""
        a, am1, ap1, cos_o, beta = cls._shelf_terms(sample_rate, frequency, q, gain)
        am1_cos = am1 * cos_o
        return cls._normalised(
            a * (ap1 - am1_cos + beta),
            a * 2.0 * (am1 - ap1 * cos_o),
            a * (ap1 - am1_cos - beta),
            ap1 + am1_cos + beta,
            -2.0 * (am1 + ap1 * cos_o),
            ap1 + am1_cos - beta,
        )

    @classmethod
    def high_shelf(cls, sample_rate: float, frequency: float, q: float, gain: float) -> Biquad:
        """High shelf; gain is a linear factor."""
        a, am1, ap1, cos_o, beta = cls._shelf_terms(sample_rate, frequency, q, gain)
        am1_cos = am1 * cos_o
        return cls._normalised(
            a * (ap1 + am1_cos + beta),
            a * -2.0 * (am1 + ap1 * cos_o),
            a * (ap1 + am1_cos - beta),
            ap1 - am1_cos + beta,
            2.0 * (am1 - ap1 * cos_o),
            ap1 - am1_cos - beta,
        )

    @classmethod
    def notch(cls, sample_rate: float, frequency: float, q: float) -> Biquad:
        n = 1.0 / math.tan(math.pi * frequency / sample_rate)
        n_sq = n * n
        inv_q = 1.0 / q
        c1 = 1.0 / (1.0 + n * inv_q + n_sq)
        b0 = c1 * (1.0 + n_sq)
        b1 = 2.0 * c1 * (1.0 - n_sq)
        return cls(b0, b1, b0, b1, c1 * (1.0 - n * inv_q + n_sq))

    def magnitude_at(self, frequency: float, sample_rate: float) -> float:
        """Return the linear magnitude response at a frequency."""
        z = cmath.exp(-2j * math.pi * frequency / sample_rate)
        numerator = self.b0 + self.b1 * z + self.b2 * z * z
        denominator = 1.0 + self.a1 * z + self.a2 * z * z
        return abs(numerator / denominator)


@dataclass
class EQBand:
    """Settings of one equalizer band; gain is in dB."""

    enabled: bool = False
    filter_type: FilterType | int = FilterType.PEAKING
    frequency: float = 1000.0
    gain: float = 0.0
    q: float = 1.0

    def coefficients(self, sample_rate: float) -> Biquad | None:
        """Return the band's filter, or None for an unknown filter type."""
        try:
            kind = FilterType(int(self.filter_type))
        except ValueError:
            return None
        gain = _decibels_to_gain(self.gain)
        if kind is FilterType.PEAKING:
            return Biquad.peak(sample_rate, self.frequency, self.q, gain)
        if kind is FilterType.LOW_PASS:
            return Biquad.low_pass(sample_rate, self.frequency, self.q)
        if kind is FilterType.HIGH_PASS:
            return Biquad.high_pass(sample_rate, self.frequency, self.q)
        if kind is FilterType.LOW_SHELF:
            return Biquad.low_shelf(sample_rate, self.frequency, self.q, gain)
        if kind is FilterType.HIGH_SHELF:
            return Biquad.high_shelf(sample_rate, self.frequency, self.q, gain)
        return Biquad.notch(sample_rate, self.frequency, self.q)


def x_for_freq(frequency: float) -> float:
    """Map a frequency to 0..1 across the logarithmic 20 Hz - 20 kHz axis."""
    return (math.log10(frequency) - _LOG_MIN) / (_LOG_MAX - _LOG_MIN)


def freq_for_x(x: float) -> float:
    """Map a 0..1 axis position back to a frequency."""
    return 10.0 ** (_LOG_MIN + x * (_LOG_MAX - _LOG_MIN))


def y_for_magnitude(magnitude: float, height: float) -> float:
    """Map a linear magnitude to a y position in a -24..+24 dB plot."""
    db = _gain_to_decibels(magnitude)
    return height + (db - PLOT_MIN_DB) / (PLOT_MAX_DB - PLOT_MIN_DB) * (0.0 - height)


def response_curve(bands: Iterable[EQBand], sample_rate: float,
                   num_points: int = DEFAULT_CURVE_POINTS) -> list[tuple[float, float]]:
    """Return (frequency, magnitude) of all enabled bands combined.

    Points lie at axis positions p / num_points for p in 0..num_points-1.
    """
    if num_points < 1:
        raise ValueError("num_points must be at least 1")
    freqs = [freq_for_x(p / num_points) for p in range(num_points)]
    mags = [1.0] * num_points
    for band in bands:
        if not band.enabled:
            continue
        coeffs = band.coefficients(sample_rate)
        if coeffs is None:
            continue
        mags = [m * coeffs.magnitude_at(f, sample_rate) for m, f in zip(mags, freqs)]
    return list(zip(freqs, mags))


def spectrum_outline(display_data: Sequence[float], sample_rate: float,
                     width: float, height: float) -> list[tuple[float, float]]:
    """Return the closed outline of the spectrum display as plot points.

    Bins above 20 kHz are dropped; the first bin is extended to the left
    edge and the last to the right edge before closing along the bottom.
    """
    bin_step = sample_rate / FFT_SIZE
    points = [(0.0, float(height))]
    last_y = float(height)
    has_points = False
    for i, level in enumerate(display_data):
        if i == 0:
            continue
        freq = i * bin_step
        if freq > MAX_FREQ:
            break
        x = x_for_freq(max(freq, MIN_FREQ)) * width
        y = height + (level - SPECTRUM_FLOOR_DB) / (0.0 - SPECTRUM_FLOOR_DB) * (0.0 - height)
        y = min(float(height), max(0.0, y))
        if not has_points:
            points.append((0.0, y))
            has_points = True
        points.append((x, y))
        last_y = y
    if has_points:
        points.append((float(width), last_y))
        points.append((float(width), float(height)))
        points.append(points[0])
    return points