"""Static parameter layouts for the standard effect modules."""

from __future__ import annotations

from dataclasses import dataclass

EQ_BAND_COUNT = 4


@dataclass(frozen=True)
class ParamDescriptor:
    """One parameter of a module's layout."""

    id: str
    label: str
    unit: str


def _eq_parameters() -> list[ParamDescriptor]:
    params = []
    for band in range(EQ_BAND_COUNT):
        base = f"eq.band{band}"
        number = band + 1
        params.append(ParamDescriptor(f"{base}.gain", f"Band {number} Gain", "dB"))
        params.append(ParamDescriptor(f"{base}.freq", f"Band {number} Freq", "Hz"))
        params.append(ParamDescriptor(f"{base}.q", f"Band {number} Q", ""))
    params.append(ParamDescriptor("eq.mix", "Mix", "%"))
    return params


_LAYOUTS: dict[str, tuple[tuple[str, str, str], ...]] = {
    "gate": (
        ("gate.threshold", "Threshold", "dB"),
        ("gate.ratio", "Ratio", ":1"),
        ("gate.attack", "Attack", "ms"),
        ("gate.release", "Release", "ms"),
        ("gate.mix", "Mix", "%"),
    ),
    "compressor": (
        ("compressor.threshold", "Threshold", "dB"),
        ("compressor.ratio", "Ratio", ":1"),
        ("compressor.attack", "Attack", "ms"),
        ("compressor.release", "Release", "ms"),
        ("compressor.mix", "Mix", "%"),
    ),
    "deesser": (
        ("deesser.threshold", "Threshold", "dB"),
        ("deesser.ratio", "Ratio", ":1"),
        ("deesser.frequency", "Split Freq", "Hz"),
        ("deesser.mix", "Mix", "%"),
    ),
    "exciter": (
        ("exciter.amount", "Amount", ""),
        ("exciter.harmonics", "Harmonics", ""),
        ("exciter.cutoff", "HP Cutoff", "Hz"),
        ("exciter.mix", "Mix", "%"),
    ),
    "bassenhancer": (
        ("bassenhancer.amount", "Amount", ""),
        ("bassenhancer.harmonics", "Harmonics", ""),
        ("bassenhancer.cutoff", "LP Cutoff", "Hz"),
        ("bassenhancer.mix", "Mix", "%"),
    ),
    "limiter": (
        ("limiter.threshold", "Threshold", "dB"),
        ("limiter.release", "Release", "ms"),
        ("limiter.mix", "Mix", "%"),
    ),
    # The filter type is a choice parameter and is not part of this layout.
    "filter": (
        ("filter.cutoff", "Cutoff", "Hz"),
        ("filter.resonance", "Resonance", ""),
        ("filter.mix", "Mix", "%"),
    ),
    "delay": (
        ("delay.time_ms", "Time", "ms"),
        ("delay.feedback", "Feedback", "%"),
        ("delay.delay_mix", "Internal Mix", "%"),
        ("delay.mix", "Module Mix", "%"),
    ),
    "reverb": (
        ("reverb.room_size", "Room Size", ""),
        ("reverb.damping", "Damping", ""),
        ("reverb.wet", "Wet Level", ""),
        ("reverb.dry", "Dry Level", ""),
        ("reverb.width", "Width", ""),
        ("reverb.mix", "Mix", "%"),
    ),
    "gain": (
        ("gain.level", "Output", "dB"),
        ("gain.mix", "Mix", "%"),
    ),
}


def parameters_for_module(module_id: str) -> list[ParamDescriptor]:
    """Return the parameter layout of a module; empty for unknown modules."""
    if module_id == "eq":
        return _eq_parameters()
    return [ParamDescriptor(*entry) for entry in _LAYOUTS.get(module_id, ())]