"""FFT spectrum analysis with smoothed decibel display data."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

FFT_ORDER = 10
FFT_SIZE = 1 << FFT_ORDER
_DECAY_RATE = 0.85
_FLOOR_DB = -100.0


def _normalised_hann(size: int) -> np.ndarray:
    window = 0.5 - 0.5 * np.cos(2.0 * np.pi * np.arange(size) / (size - 1))
    return window * (size / window.sum())


class SpectrumAnalyzer:
    """Collects samples into FFT frames and keeps smoothed per-bin levels."""

    fft_order = FFT_ORDER
    fft_size = FFT_SIZE

    def __init__(self) -> None:
        self._window = _normalised_hann(FFT_SIZE)
        self._fifo = np.zeros(FFT_SIZE, dtype=np.float64)
        self._fft_data = np.zeros(FFT_SIZE, dtype=np.float64)
        self._display = np.zeros(FFT_SIZE // 2, dtype=np.float64)
        self._fifo_index = 0
        self._block_ready = False

    @property
    def block_ready(self) -> bool:
        """Whether a full frame is waiting for analysis."""
        return self._block_ready

    @property
    def display_data(self) -> np.ndarray:
        """Smoothed level per bin in dB, from -100 to 0 (a copy)."""
        return self._display.copy()

    def push_block(self, samples: Iterable[float]) -> None:
        """Append samples; a full frame is kept until it has been analysed."""
        data = np.asarray(list(samples) if not isinstance(samples, np.ndarray) else samples,
                          dtype=np.float64).ravel()
        pos = 0
        while pos < data.size:
            take = min(FFT_SIZE - self._fifo_index, data.size - pos)
            self._fifo[self._fifo_index:self._fifo_index + take] = data[pos:pos + take]
            self._fifo_index += take
            pos += take
            if self._fifo_index >= FFT_SIZE:
                if not self._block_ready:
                    self._fft_data[:] = self._fifo
                    self._block_ready = True
                self._fifo_index = 0

    def perform_analysis(self) -> bool:
        """Analyse a pending frame, if any; return whether one was analysed."""
        if not self._block_ready:
            return False
        magnitudes = np.abs(np.fft.rfft(self._fft_data * self._window))[: FFT_SIZE // 2]
        self._block_ready = False

        gains = magnitudes / FFT_SIZE
        with np.errstate(divide="ignore"):
            levels = np.where(gains > 0.0, 20.0 * np.log10(np.where(gains > 0.0, gains, 1.0)),
                              _FLOOR_DB)
        levels = np.clip(levels, _FLOOR_DB, 0.0)

        smoothed = self._display * _DECAY_RATE + levels * (1.0 - _DECAY_RATE)
        self._display = np.where(levels > self._display, levels, smoothed)
        return True