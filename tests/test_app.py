"""Tests for parameter parsing, user triggers and the command line."""

import pytest

from tick_chart.app import ChartApp, main, parse_parameters, run_headless
from tick_chart.config import ChartConfig
from tick_chart.types import ConfigurationError


# --- parse_parameters ---

class TestParseParameters:
    def test_parses_all_fields(self):
        config = parse_parameters(
            {"min_points": "3", "max_points": "8", "steps": "12", "time": "600"},
            ChartConfig(),
        )
        assert config == ChartConfig(
            min_points=3, max_points=8, steps=12, total_time_ms=600
        )
        assert config.step_time == 50

    def test_missing_fields_keep_previous(self):
        previous = ChartConfig(min_points=4, max_points=9, steps=20)
        config = parse_parameters({"steps": "5"}, previous)
        assert config.min_points == 4
        assert config.max_points == 9
        assert config.steps == 5

    def test_accepts_signed_ascii_digits(self):
        config = parse_parameters({"steps": "+12", "time": "0600"}, ChartConfig())
        assert config.steps == 12
        assert config.total_time_ms == 600

    def test_strips_whitespace(self):
        config = parse_parameters({"steps": " 7 "}, ChartConfig())
        assert config.steps == 7

    def test_easing_field(self):
        config = parse_parameters({"easing": "ease_in"}, ChartConfig())
        assert config.easing == "ease_in"

    @pytest.mark.parametrize(
        "form",
        [
            {"steps": "abc"},
            {"steps": "12abc"},
            {"time": ""},
            {"min_points": "2.5"},
            {"time": "1_000"},
            {"steps": "\uff11\uff12"},
            {"steps": "+-5"},
            {"steps": "1e3"},
            {"min_points": "9", "max_points": "3"},
            {"steps": "0"},
            {"easing": "wobble"},
        ],
    )
    def test_rejects_invalid_input(self, form):
        with pytest.raises(ConfigurationError):
            parse_parameters(form, ChartConfig())


# --- ChartApp ---

def make_app(frames=None, **kwargs):
    config = ChartConfig(min_points=2, max_points=2, steps=5, total_time_ms=50, **kwargs)
    renderer = frames.append if frames is not None else None
    return ChartApp(config=config, seed=3, renderer=renderer)


def finish(app):
    while app.scheduler.running:
        app.update(app.config.step_time)


def test_click_starts_transition():
    frames = []
    app = make_app(frames)
    assert app.click() is True
    finish(app)
    assert len(frames) == 5
    assert app.transitions == 1


def test_click_while_running_dropped():
    app = make_app()
    app.click()
    app.update(app.config.step_time)
    assert app.click() is False
    finish(app)
    assert app.transitions == 1


def test_submit_applies_parameters():
    app = make_app()
    assert app.submit({"min_points": "6", "max_points": "6", "steps": "3"}) is True
    assert app.config.steps == 3
    finish(app)
    assert len(app.scheduler.current_points) == 6


def test_submit_invalid_keeps_previous_config():
    app = make_app()
    before = app.config
    assert app.submit({"steps": "fast"}) is True
    assert app.config is before
    assert app.rejected == 1


def test_submit_while_running_updates_config_only():
    app = make_app()
    app.click()
    assert app.submit({"steps": "9"}) is False
    assert app.config.steps == 9
    assert app.scheduler.clock.steps == 5


def test_adjust_steps_never_below_one():
    app = make_app()
    app.adjust_steps(-100)
    assert app.config.steps == 1


def test_cycle_easing_wraps():
    app = make_app(easing="ease_in_out")
    app.cycle_easing()
    assert app.config.easing == "linear"
    finish(app)
    app.cycle_easing()
    assert app.config.easing == "ease_in"


def test_close_cancels_pending_timer():
    app = make_app()
    app.click()
    app.close()
    assert not app.scheduler.running
    assert app.timer.pending == 0


def test_run_headless():
    frames = []
    app = make_app(frames)
    run_headless(app, 3)
    assert app.transitions == 3
    # initial render plus five ticks per transition
    assert len(frames) == 1 + 3 * 5


# --- main() ---

def test_main_headless(tmp_path, capsys):
    output = tmp_path / "chart.bmp"
    code = main([
        "--headless", "--seed", "5", "--transitions", "2",
        "--steps", "4", "--time", "40", "--output", str(output),
    ])
    assert code == 0
    assert output.exists()
    assert "2 transition(s), seed 5" in capsys.readouterr().out


def test_main_rejects_bad_config():
    assert main(["--headless", "--min-points", "5", "--max-points", "2"]) == 2
