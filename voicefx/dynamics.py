"""Transfer curves and live level tracking for dynamics processors."""

from __future__ import annotations

from collections.abc import Mapping

MIN_DB = -60.0
MAX_DB = 0.0
GATE_FLOOR_DB = -100.0
_CURVE_STEP_DB = 0.5
_SMOOTHING = 0.3


def transfer_output_db(effect_type: str, input_db: float, threshold: float, ratio: float) -> float:
    """Return the static output level for an input level, in dB."""
    if effect_type == "compressor":
        if input_db > threshold:
            return threshold + (input_db - threshold) / ratio
    elif effect_type == "gate":
        if input_db < threshold:
            return GATE_FLOOR_DB
    elif effect_type == "expander":
        if input_db < threshold:
            return threshold + (input_db - threshold) * ratio
    return input_db


def _db_to_x(db: float, width: float) -> float:
    return (db - MIN_DB) / (MAX_DB - MIN_DB) * width


def _db_to_y(db: float, height: float) -> float:
    return height - (db - MIN_DB) / (MAX_DB - MIN_DB) * height


def _clamp_db(db: float) -> float:
    return min(MAX_DB, max(MIN_DB, db))


class DynamicsVisualizer:
    """Tracks the settings and live levels of a compressor, gate or expander."""

    def __init__(self, param_prefix: str, effect_type: str) -> None:
        self.param_prefix = param_prefix
        self.effect_type = effect_type
        self.last_input_db = -100.0
        self.last_output_db = -100.0
        self.threshold = 0.0
        self.ratio = 1.0
        self.knee = 0.0

    def set_current_levels(self, input_db: float, output_db: float) -> None:
        """Move the live levels towards new readings with exponential smoothing."""
        self.last_input_db = self.last_input_db * (1.0 - _SMOOTHING) + input_db * _SMOOTHING
        self.last_output_db = self.last_output_db * (1.0 - _SMOOTHING) + output_db * _SMOOTHING

    def update_parameters(self, params: Mapping[str, float]) -> bool:
        """Read threshold, ratio and knee; return whether any of them changed.

        Missing parameters read as 0.
        """
        def value(suffix: str) -> float:
            return float(params.get(self.param_prefix + suffix, 0.0))

        new = (value("threshold"), value("ratio"), value("knee"))
        if new == (self.threshold, self.ratio, self.knee):
            return False
        self.threshold, self.ratio, self.knee = new
        return True

    def transfer_curve(self, width: float, height: float) -> list[tuple[float, float]]:
        """Return the static curve as points in a width x height plot.

        The first point is the curve's start at -60 dB in and out; the rest
        follow the transfer function in 0.5 dB input steps up to 0 dB.
        """
        points = [(_db_to_x(MIN_DB, width), _db_to_y(MIN_DB, height))]
        steps = int(round((MAX_DB - MIN_DB) / _CURVE_STEP_DB))
        for step in range(steps + 1):
            in_db = MIN_DB + step * _CURVE_STEP_DB
            out_db = transfer_output_db(self.effect_type, in_db, self.threshold, self.ratio)
            points.append((_db_to_x(in_db, width), _db_to_y(out_db, height)))
        return points

    def ball_position(self, width: float, height: float) -> tuple[float, float] | None:
        """Return the plot position of the live level, or None when below range."""
        if self.last_input_db <= MIN_DB:
            return None
        return (
            _db_to_x(_clamp_db(self.last_input_db), width),
            _db_to_y(_clamp_db(self.last_output_db), height),
        )