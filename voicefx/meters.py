"""Level, activity and spectrum meter displays, and impulse-response labels."""

from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple

METER_MIN_DB = -60.0
METER_MAX_DB = 0.0
SILENT_DB = -100.0
REPAINT_THRESHOLD_DB = 0.5
PEAK_LINE_WIDTH = 2

NUM_SPECTRUM_BARS = 64
BAR_GAP = 2.0
MIN_BAR_WIDTH = 1.0
MIN_BAR_HEIGHT = 2.0
SPECTRUM_FLOOR_DB = -100.0
SPECTRUM_CEILING_DB = 0.0

NO_IMPULSE_RESPONSE = "No IR Loaded"
SPECTRUM_PLACEHOLDER_TEXT = "FFT Spectrum Analyzer (Placeholder)"


def normalize_db(db: float) -> float:
    """Map a level in dB onto 0..1 across the -60..0 dB meter range."""
    ratio = (db - METER_MIN_DB) / (METER_MAX_DB - METER_MIN_DB)
    return min(1.0, max(0.0, ratio))


class MeterBar(NamedTuple):
    """Drawn extent of one level bar: filled RMS width and peak line x."""

    rms_width: int
    peak_x: int | None


class LevelMeterDisplay:
    """Cached RMS and peak readings of a level meter, in dB."""

    def __init__(self) -> None:
        self.rms_db = SILENT_DB
        self.peak_db = SILENT_DB

    def update(self, rms_db: float, peak_db: float) -> bool:
        """Take new readings; return whether they changed enough to redraw.

        Readings that moved by no more than 0.5 dB are ignored.
        """
        if (abs(rms_db - self.rms_db) > REPAINT_THRESHOLD_DB
                or abs(peak_db - self.peak_db) > REPAINT_THRESHOLD_DB):
            self.rms_db = rms_db
            self.peak_db = peak_db
            return True
        return False

    def bar_extent(self, x: int, width: int) -> MeterBar:
        """Return the filled RMS width and peak line position for a bar at x.

        The peak line is left out when the peak lies at or below -60 dB, and
        is kept inside the bar otherwise.
        """
        rms_width = int(width * normalize_db(self.rms_db))
        peak_ratio = normalize_db(self.peak_db)
        if peak_ratio <= 0.0:
            return MeterBar(rms_width, None)
        peak_x = x + int(width * peak_ratio)
        right = x + width
        peak_x = min(right - PEAK_LINE_WIDTH, max(x, peak_x))
        return MeterBar(rms_width, peak_x)

    def readout(self) -> str:
        """Return the peak level as text with one decimal place."""
        return f"{self.peak_db:.1f} dB"


class VisualMeter:
    """A vertical 0..1 meter; inverted meters fill from the top down."""

    def __init__(self, inverted: bool = False) -> None:
        self.inverted = inverted
        self.value = 0.0

    def set_value(self, value: float) -> float:
        """Store the value clamped to 0..1 and return it."""
        self.value = min(1.0, max(0.0, float(value)))
        return self.value

    def fill_span(self, height: float) -> tuple[float, float]:
        """Return the (top, bottom) of the filled part of a meter this tall."""
        filled = height * self.value
        if self.inverted:
            return 0.0, filled
        return height - filled, float(height)


class SpectrumBar(NamedTuple):
    """One bar of the spectrum display, with y measured from the top."""

    x: float
    y: float
    width: float
    height: float


def spectrum_bars(display_data: Sequence[float], num_bars: int,
                  width: float, height: float) -> list[SpectrumBar]:
    """Return the bars of a spectrum display of the given size.

    Bars are spread across the width and sample the bins on a squared scale,
    so low frequencies get more bars. Each bar is at least 2 units tall and
    stands on the bottom edge.
    """
    if num_bars < 1:
        raise ValueError("num_bars must be at least 1")
    size = len(display_data)
    if size == 0:
        raise ValueError("display data must not be empty")
    bar_width = max(MIN_BAR_WIDTH, width / num_bars - BAR_GAP)
    span = SPECTRUM_CEILING_DB - SPECTRUM_FLOOR_DB
    bars = []
    for i in range(num_bars):
        skew = (i / num_bars) ** 2
        index = min(size - 1, max(0, int(skew * size)))
        level = (float(display_data[index]) - SPECTRUM_FLOOR_DB) / span
        bar_height = min(float(height), max(MIN_BAR_HEIGHT, level * height))
        x = i * (bar_width + BAR_GAP)
        bars.append(SpectrumBar(x, height - bar_height, bar_width, bar_height))
    return bars


def impulse_response_label(name: str) -> str:
    """Return the status text for the impulse response currently loaded."""
    if not name:
        return NO_IMPULSE_RESPONSE
    return f"Loaded: {name}"