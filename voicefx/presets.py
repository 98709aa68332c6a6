"""Built-in effect-chain presets, stored as JSON documents."""

from __future__ import annotations

import copy
import json
from typing import Any

_FORMAT_VERSION = 1


def _slot(type_id: str, **params: float) -> dict[str, Any]:
    return {"typeId": type_id, "params": {key: float(value) for key, value in params.items()}}


def _equalizer(*bands: tuple[float, float, float, float], mix: float = 1.0) -> dict[str, Any]:
    """Build an equalizer slot from (type, frequency, gain, q) tuples."""
    params: dict[str, float] = {}
    for index, (band_type, freq, gain, q) in enumerate(bands):
        prefix = f"band{index}_"
        params[prefix + "active"] = 1.0
        params[prefix + "type"] = float(band_type)
        params[prefix + "freq"] = float(freq)
        params[prefix + "gain"] = float(gain)
        params[prefix + "q"] = float(q)
    params["mix"] = float(mix)
    return {"typeId": "equalizer", "params": params}


def _preset(*slots: dict[str, Any]) -> dict[str, Any]:
    return {"version": _FORMAT_VERSION, "slots": list(slots)}


_PRESETS: dict[str, dict[str, Any]] = {
    "broadcast_high_pitch": _preset(
        _slot("rnnoise", mix=1.0),
        _slot("compressor", threshold=-20.0, ratio=4.0, attack=2.0,
              release=100.0, makeup=4.0, mix=1.0),
        _equalizer(
            (1, 80.0, 0.0, 0.707),
            (0, 150.0, 3.0, 1.0),
            (0, 4000.0, 4.0, 1.0),
            (4, 10000.0, 0.0, 0.707),
        ),
    ),
    "deep_voice": _preset(
        _slot("rnnoise", mix=1.0),
        _equalizer(
            (1, 50.0, 0.0, 0.707),
            (0, 100.0, 6.0, 1.0),
            (0, 250.0, 3.0, 1.0),
        ),
    ),
    "walkie_talkie": _preset(
        _equalizer(
            (1, 400.0, 0.0, 1.0),
            (0, 1000.0, 8.0, 2.0),
            (2, 3000.0, 0.0, 1.0),
        ),
        _slot("crusher", bit_depth=8.0, reduction=4.0, mix=0.8),
    ),
    "flat": _preset(
        _slot("rnnoise", mix=1.0),
        _slot("compressor", threshold=-15.0, ratio=3.0, attack=5.0,
              release=50.0, makeup=2.0, mix=1.0),
    ),
}


def preset_names() -> list[str]:
    """Return the names of the built-in presets, in their defined order."""
    return list(_PRESETS)


def _lookup(name: str) -> dict[str, Any]:
    try:
        return _PRESETS[name]
    except KeyError:
        raise KeyError(f"unknown preset: {name!r}") from None


def preset_json(name: str) -> str:
    """Return the JSON text of a built-in preset.

    Raises KeyError if no preset has that name.
    """
    return json.dumps(_lookup(name), indent=2)


def load_preset(name: str) -> dict[str, Any]:
    """Return a freshly built copy of a built-in preset."""
    return copy.deepcopy(_lookup(name))