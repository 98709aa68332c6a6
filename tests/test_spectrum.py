import numpy as np

from voicefx.spectrum import FFT_SIZE, SpectrumAnalyzer


def tone(bin_index, n=FFT_SIZE, amplitude=0.5):
    return amplitude * np.sin(2 * np.pi * bin_index * np.arange(n) / FFT_SIZE)


def test_sizes_and_initial_state():
    analyzer = SpectrumAnalyzer()
    assert SpectrumAnalyzer.fft_size == 1024
    assert analyzer.display_data.shape == (512,)
    assert np.all(analyzer.display_data == 0.0)
    assert analyzer.block_ready is False


def test_partial_frame_is_not_analysed():
    analyzer = SpectrumAnalyzer()
    analyzer.push_block(tone(64, n=FFT_SIZE - 1))
    assert analyzer.perform_analysis() is False
    assert np.all(analyzer.display_data == 0.0)


def test_frame_completed_across_pushes():
    analyzer = SpectrumAnalyzer()
    analyzer.push_block([0.1] * 1000)
    assert analyzer.block_ready is False
    analyzer.push_block([0.1] * 24)
    assert analyzer.block_ready is True
    assert analyzer.perform_analysis() is True
    assert analyzer.perform_analysis() is False


def test_tone_peaks_at_its_bin():
    analyzer = SpectrumAnalyzer()
    analyzer.push_block(tone(64))
    analyzer.perform_analysis()
    data = analyzer.display_data
    assert int(np.argmax(data)) == 64
    assert np.all(data <= 0.0) and np.all(data >= -100.0)


def test_first_frame_is_latched_until_analysed():
    analyzer = SpectrumAnalyzer()
    analyzer.push_block(tone(64))
    analyzer.push_block(np.zeros(FFT_SIZE))
    analyzer.perform_analysis()
    assert int(np.argmax(analyzer.display_data)) == 64


def test_silence_gives_flat_negative_display():
    analyzer = SpectrumAnalyzer()
    analyzer.push_block(np.zeros(FFT_SIZE))
    analyzer.perform_analysis()
    data = analyzer.display_data
    assert np.all(data == data[0])
    assert data[0] < 0.0


def test_silence_after_tone_decays_peak():
    analyzer = SpectrumAnalyzer()
    analyzer.push_block(tone(100))
    analyzer.perform_analysis()
    peak_before = analyzer.display_data[100]
    analyzer.push_block(np.zeros(FFT_SIZE))
    analyzer.perform_analysis()
    peak_after = analyzer.display_data[100]
    assert peak_after < peak_before
    assert peak_after > -100.0


def test_display_data_is_a_copy():
    analyzer = SpectrumAnalyzer()
    data = analyzer.display_data
    assert np.array_equal(data, np.zeros(512))
    data[:] = -50.0
    fresh = analyzer.display_data
    assert not np.shares_memory(data, fresh)
    assert np.array_equal(fresh, np.zeros(512))