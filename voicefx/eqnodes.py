"""Interactive equalizer band handles: plot placement, dragging and menu actions."""

from __future__ import annotations

from collections.abc import Sequence

from .eqmath import EQBand, FilterType, freq_for_x, x_for_freq

MAX_BANDS = 10
NODE_MIN_GAIN_DB = -24.0
NODE_MAX_GAIN_DB = 24.0
DELETE_MENU_ITEM = 10

_FILTER_TYPE_NAMES = (
    "Peaking",
    "Low Pass",
    "High Pass",
    "Low Shelf",
    "High Shelf",
    "Notch",
)


def _clamp_unit(value: float) -> float:
    return min(1.0, max(0.0, value))


def filter_type_names() -> list[str]:
    """Return the display names of the filter types, in parameter order."""
    return list(_FILTER_TYPE_NAMES)


def node_position(frequency: float, gain_db: float) -> tuple[float, float]:
    """Return a band's handle centre as fractions of the plot (x, y).

    x follows the logarithmic 20 Hz - 20 kHz axis; y runs from 0 at
    +24 dB down to 1 at -24 dB. Values outside those ranges are not clamped.
    """
    if frequency <= 0.0:
        raise ValueError("frequency must be positive")
    x = x_for_freq(frequency)
    span = NODE_MAX_GAIN_DB - NODE_MIN_GAIN_DB
    y = 1.0 + (gain_db - NODE_MIN_GAIN_DB) / span * (0.0 - 1.0)
    return x, y


def node_values(x_percent: float, y_percent: float) -> tuple[float, float]:
    """Return the (frequency, gain in dB) for a handle dragged to (x, y).

    Both positions are clamped to the plot before mapping.
    """
    x = _clamp_unit(x_percent)
    y = _clamp_unit(y_percent)
    frequency = freq_for_x(x)
    gain = NODE_MIN_GAIN_DB + (y - 1.0) / (0.0 - 1.0) * (NODE_MAX_GAIN_DB - NODE_MIN_GAIN_DB)
    return frequency, gain


def reset_gain(band: EQBand) -> EQBand:
    """Set a band's gain back to 0 dB, as a double click does; return the band."""
    band.gain = 0.0
    return band


def set_band_type(band: EQBand, menu_item: int) -> EQBand:
    """Apply a filter-type menu choice (1 to 6, in name order); return the band."""
    if not 1 <= menu_item <= len(_FILTER_TYPE_NAMES):
        raise ValueError(f"menu item must lie between 1 and {len(_FILTER_TYPE_NAMES)}")
    band.filter_type = FilterType(menu_item - 1)
    return band


def delete_band(band: EQBand) -> EQBand:
    """Disable a band, removing its handle from the plot; return the band."""
    band.enabled = False
    return band


def enable_next_band(bands: Sequence[EQBand]) -> int | None:
    """Enable the first disabled band among the first ten; return its index.

    Returns None when every band is already enabled.
    """
    for index, band in enumerate(bands[:MAX_BANDS]):
        if not band.enabled:
            band.enabled = True
            return index
    return None