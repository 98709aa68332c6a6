import pytest

from voicefx.dynamics import DynamicsVisualizer, transfer_output_db


def test_compressor_passes_below_threshold():
    assert transfer_output_db("compressor", -30.0, -20.0, 4.0) == -30.0


def test_compressor_reduces_above_threshold():
    out = transfer_output_db("compressor", -10.0, -20.0, 4.0)
    assert out == pytest.approx(-17.5)
    assert transfer_output_db("compressor", -10.0, -20.0, 1.0) == -10.0


def test_gate_floors_below_threshold():
    assert transfer_output_db("gate", -50.0, -40.0, 2.0) == -100.0
    assert transfer_output_db("gate", -30.0, -40.0, 2.0) == -30.0


def test_expander_pushes_down_below_threshold():
    out = transfer_output_db("expander", -50.0, -40.0, 2.0)
    assert out < -50.0
    assert transfer_output_db("expander", -50.0, -40.0, 1.0) == -50.0
    assert transfer_output_db("expander", -30.0, -40.0, 2.0) == -30.0


def test_unknown_type_is_identity():
    assert transfer_output_db("limiter", -12.0, -20.0, 4.0) == -12.0


def test_smoothing_moves_towards_target():
    viz = DynamicsVisualizer("slot0.compressor.", "compressor")
    viz.set_current_levels(-10.0, -20.0)
    assert -100.0 < viz.last_input_db < -10.0
    assert -100.0 < viz.last_output_db < -20.0
    for _ in range(200):
        viz.set_current_levels(-10.0, -20.0)
    assert viz.last_input_db == pytest.approx(-10.0)
    assert viz.last_output_db == pytest.approx(-20.0)


def test_update_parameters_reports_changes():
    viz = DynamicsVisualizer("slot1.compressor.", "compressor")
    params = {
        "slot1.compressor.threshold": -20.0,
        "slot1.compressor.ratio": 4.0,
        "slot1.compressor.knee": 2.0,
    }
    assert viz.update_parameters(params) is True
    assert (viz.threshold, viz.ratio, viz.knee) == (-20.0, 4.0, 2.0)
    assert viz.update_parameters(params) is False


def test_missing_parameters_read_as_zero():
    viz = DynamicsVisualizer("slot2.gate.", "gate")
    assert viz.update_parameters({}) is True
    assert (viz.threshold, viz.ratio, viz.knee) == (0.0, 0.0, 0.0)


def test_identity_curve_is_diagonal():
    viz = DynamicsVisualizer("p.", "compressor")
    width, height = 300.0, 150.0
    curve = viz.transfer_curve(width, height)
    assert curve[0] == (0.0, height)
    assert curve[-1] == pytest.approx((width, 0.0))
    for x, y in curve:
        assert y == pytest.approx(height - x * height / width)
    xs = [x for x, _ in curve[1:]]
    assert xs == sorted(xs)


def test_compressor_curve_flattens_above_threshold():
    viz = DynamicsVisualizer("p.", "compressor")
    viz.update_parameters({"p.threshold": -30.0, "p.ratio": 4.0})
    width, height = 120.0, 120.0
    curve = viz.transfer_curve(width, height)
    identity = DynamicsVisualizer("p.", "compressor").transfer_curve(width, height)
    assert len(curve) == len(identity)
    for (x, y), (xi, yi) in zip(curve, identity):
        assert x == xi
        assert y >= yi - 1e-9
    assert curve[-1][1] > identity[-1][1]


def test_gate_curve_drops_below_plot():
    viz = DynamicsVisualizer("p.", "gate")
    viz.update_parameters({"p.threshold": -40.0, "p.ratio": 1.0})
    curve = viz.transfer_curve(100.0, 100.0)
    assert curve[1][1] > 100.0
    assert curve[-1][1] == pytest.approx(0.0)


def test_ball_hidden_when_quiet():
    viz = DynamicsVisualizer("p.", "compressor")
    assert viz.ball_position(200.0, 100.0) is None


def test_ball_stays_inside_plot():
    viz = DynamicsVisualizer("p.", "compressor")
    for _ in range(100):
        viz.set_current_levels(12.0, -200.0)
    x, y = viz.ball_position(200.0, 100.0)
    assert x == pytest.approx(200.0)
    assert y == pytest.approx(100.0)