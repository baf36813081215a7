"""
Integration tests for the Tk-backed Chart. Skipped when no display is available.
"""

from dataclasses import replace
from types import SimpleNamespace

import pytest

tk = pytest.importorskip("tkinter")

from scatter_chart.chart import Chart
from scatter_chart.data_model import SampleStyle
from scatter_chart.errors import ChartError, EmptySampleSet, MissingStyle
from scatter_chart.ui_state import ChartState


@pytest.fixture
def root():
    try:
        r = tk.Tk()
    except tk.TclError as e:
        pytest.skip(f"no display: {e}")
    r.withdraw()
    yield r
    r.destroy()


@pytest.fixture
def events():
    return []


@pytest.fixture
def chart(root, diagonal_samples, options, events):
    return Chart(root, diagonal_samples, options, on_selection_change=events.append)


def _ev(x=0, y=0, delta=0):
    return SimpleNamespace(x=x, y=y, delta=delta)


def _click(chart, x, y):
    chart._on_motion(_ev(x, y))
    chart._on_press(_ev(x, y))
    chart._on_release(_ev(x, y))


class TestConstruction:
    def test_canvas_is_sized_and_painted(self, chart):
        canvas = chart.widget
        assert int(canvas.cget("width")) == 400
        assert canvas.find_withtag("base")
        assert not canvas.find_withtag("overlay")

    def test_empty_samples_fail_fast(self, root, options):
        with pytest.raises(EmptySampleSet):
            Chart(root, [], options)

    def test_missing_style_fails_on_first_draw(self, root, diagonal_samples, options):
        with pytest.raises(MissingStyle):
            Chart(root, diagonal_samples, replace(options, styles={"a": SampleStyle()}))
        # the canvas is not left behind in the container
        assert root.winfo_children() == []


class TestEvents:
    def test_motion_draws_overlay(self, chart):
        chart._on_motion(_ev(120, 280))
        assert chart.widget.find_withtag("overlay")
        chart._on_leave(_ev())
        assert not chart.widget.find_withtag("overlay")

    def test_click_notifies_selection(self, chart, events):
        _click(chart, 200, 200)
        assert chart.selected is chart.state.samples[1]
        assert events == [chart.state.samples[1]]
        _click(chart, 200, 200)
        assert chart.selected is None
        assert events[-1] is None

    def test_drag_release_does_not_notify(self, chart, events):
        chart._on_press(_ev(200, 200))
        chart._on_motion(_ev(250, 220))
        chart._on_release(_ev(250, 220))
        assert events == []
        assert chart.state.viewport.offset != (0.0, 0.0)

    def test_wheel_zooms_and_stops_propagation(self, chart):
        assert chart._on_mouse_wheel(_ev(delta=120)) == "break"
        assert chart.state.viewport.scale == pytest.approx(0.95)
        assert chart._on_wheel_step(_ev(), 1) == "break"
        assert chart.state.viewport.scale == pytest.approx(0.9975)


class TestPublicOperations:
    def test_select_sample_does_not_notify(self, chart, events):
        chart.select_sample(chart.state.samples[0])
        assert chart.selected is chart.state.samples[0]
        assert events == []

    def test_select_foreign_sample(self, chart):
        with pytest.raises(ChartError):
            chart.select_sample(replace(chart.state.samples[0]))

    def test_reset_view(self, chart):
        chart._on_wheel_step(_ev(), -1)
        chart.reset_view()
        assert chart.state.bounds.data == chart.state.default_bounds


@pytest.fixture
def offscreen_chart(diagonal_samples, options, surface, events):
    """A Chart wired to a recording surface, built without a Tk window."""
    c = Chart.__new__(Chart)
    c.options = options
    c.state = ChartState.create(diagonal_samples, options.size)
    c._on_selection_change = events.append
    c.surface = surface
    c.panel = None
    return c


class TestSelectionCallbackWithoutDisplay:
    def test_click_on_sample_notifies(self, offscreen_chart, events, surface):
        _click(offscreen_chart, 200, 200)
        assert events == [offscreen_chart.state.samples[1]]
        assert surface.on("base", "image")

    def test_click_again_notifies_cleared_selection(self, offscreen_chart, events):
        _click(offscreen_chart, 200, 200)
        _click(offscreen_chart, 200, 200)
        assert events == [offscreen_chart.state.samples[1], None]

    def test_click_on_empty_space_notifies_none(self, offscreen_chart, events):
        _click(offscreen_chart, 120, 280)
        assert events == [None]

    def test_drag_release_stays_silent(self, offscreen_chart, events):
        offscreen_chart._on_press(_ev(200, 200))
        offscreen_chart._on_motion(_ev(250, 220))
        offscreen_chart._on_release(_ev(250, 220))
        assert events == []
        assert offscreen_chart.selected is None

    def test_select_sample_stays_silent(self, offscreen_chart, events):
        offscreen_chart.select_sample(offscreen_chart.state.samples[0])
        assert offscreen_chart.selected is offscreen_chart.state.samples[0]
        assert events == []
