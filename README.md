# voicefx

Helpers for a voice-oriented audio effect chain: built-in chain presets,
FFT spectrum analysis, equalizer response maths, dynamics transfer curves,
and the layout logic behind meters, EQ band handles and chain rows.
Spectrum analysis uses numpy; everything else is plain Python.

## Modules

- `voicefx.presets`: the built-in chain presets `broadcast_high_pitch`,
  `deep_voice`, `walkie_talkie` and `flat`. `preset_names()` lists them,
  `preset_json(name)` returns a preset as JSON text and `load_preset(name)`
  returns a fresh dictionary copy. An unknown name raises `KeyError`.
- `voicefx.spectrum`: `SpectrumAnalyzer` collects samples with `push_block`
  into 1024-point frames. `perform_analysis()` runs a Hann-windowed FFT on a
  pending frame, returns whether it did, and updates `display_data`: 512
  per-bin levels in dB, clipped to -100..0. The levels rise at once and fall
  with smoothing.
- `voicefx.descriptors`: `parameters_for_module(module_id)` returns the
  parameter layout of an effect type as `ParamDescriptor(id, label, unit)`
  entries. An unknown type gives an empty list.
- `voicefx.theme`: the dark colour palette as `Colour` constants (`BG_BASE`,
  `ACCENT_PRIMARY`, ...). `Colour` has `from_argb`, `with_alpha`, `brighter`
  and `to_hex`. The module also has `default_colour_scheme()`, which maps
  widget colour names to colours, and `button_colour(base, highlighted, down)`.
- `voicefx.dynamics`: `transfer_output_db(effect_type, input_db, threshold, ratio)`
  gives the static curve of a `"compressor"`, `"gate"` or `"expander"`.
  `DynamicsVisualizer` tracks the threshold, ratio and knee from a parameter
  mapping, and smoothed live levels. Its `transfer_curve` returns plot points
  and `ball_position` returns where the live level sits in the plot.
- `voicefx.eqmath`: `FilterType`, and `Biquad` with the constructors
  `peak`, `low_pass`, `high_pass`, `low_shelf`, `high_shelf` and `notch`, and
  the method `magnitude_at`. `EQBand` holds a band's settings, with gain in dB.
  The log-frequency axis helpers are `x_for_freq`, `freq_for_x` and
  `y_for_magnitude`. `response_curve` gives the combined magnitude of all
  enabled bands, and `spectrum_outline` gives the closed outline of a spectrum
  display.
- `voicefx.eqnodes`: the behaviour of draggable EQ band handles.
  `node_position` and `node_values` map between band settings and plot
  fractions. `reset_gain`, `set_band_type` and `delete_band` change a band,
  `enable_next_band` turns on the first disabled band, and
  `filter_type_names()` lists the filter names.
- `voicefx.sidebar`: `hit_test(x, width)` returns the `RowAction` for a click
  on an effect-chain row. `SidebarRow` dispatches clicks to callbacks, toggles
  the `slot<N>.bypass` parameter and tracks selection.
- `voicefx.meters`: `normalize_db`, and `LevelMeterDisplay`, which caches RMS
  and peak, gives bar extents and a text readout. `VisualMeter` is a 0..1
  meter that can be inverted. `spectrum_bars` lays out a bar-style spectrum,
  and `impulse_response_label(name)` gives the status text for a loaded
  impulse response.

## Installing

```
pip install .
```

and for running the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
import numpy as np
from voicefx.presets import load_preset
from voicefx.spectrum import SpectrumAnalyzer
from voicefx.eqmath import EQBand, FilterType, response_curve

preset = load_preset("flat")
print([slot["typeId"] for slot in preset["slots"]])  # ['rnnoise', 'compressor']

analyzer = SpectrumAnalyzer()
t = np.arange(SpectrumAnalyzer.fft_size) / 48000.0
analyzer.push_block(np.sin(2 * np.pi * 1000.0 * t))
analyzer.perform_analysis()          # True: a full frame was analysed
levels = analyzer.display_data       # 512 values in dB

bands = [EQBand(enabled=True, filter_type=FilterType.PEAKING,
                frequency=1000.0, gain=6.0, q=1.0)]
curve = response_curve(bands, 48000.0)   # 300 (frequency, magnitude) pairs
```

## What this package does not do

voicefx does not run audio through effects. It has no compressor, gate,
equalizer filtering of sample buffers, noise suppression, dry/wet mixing or
band splitting. It also has no plugin host, no windows or drawing, and no
storage of user presets on disk. It provides the data, the maths and the
interaction logic that such a program would build on.