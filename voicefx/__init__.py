"""Voice effect chain helpers: presets, spectrum analysis, EQ and dynamics maths, meter layout."""

__version__ = "0.1.0"