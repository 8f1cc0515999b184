from types import SimpleNamespace
from unittest import mock

import pytest

pytest.importorskip("pyvistaqt")
QtCore = pytest.importorskip("PySide6.QtCore")

from lorenzviz.view.main_window import MainWindow
from lorenzviz.view.widgets.plot_3d import PyVistaWidget


def key_event(key, text=""):
    event = mock.Mock()
    event.type.return_value = QtCore.QEvent.KeyPress
    event.key.return_value = key
    event.text.return_value = text
    return event


@pytest.fixture
def window(state, clock):
    # MainWindow methods on a stand-in: no display or QApplication needed
    fake = SimpleNamespace(
        state=state,
        controller=SimpleNamespace(now=clock),
        close=mock.Mock(),
        update_visualization=mock.Mock(),
    )
    fake.on_key = lambda event: MainWindow.on_key(fake, event)
    return fake


def test_plotter_default_key_bindings_are_removed():
    fake = SimpleNamespace(plotter=mock.MagicMock())
    PyVistaWidget._init_plotter(fake)
    fake.plotter.disable.assert_called_once_with()
    fake.plotter.iren.clear_key_event_callbacks.assert_called_once_with()


@pytest.mark.parametrize("text", ["v", "q", "w", "x"])
def test_unbound_key_is_swallowed(window, state, text):
    view_before = state.current_view_state()
    trajectory_before = state.current_trajectory()

    event = key_event(QtCore.Qt.Key_A, text)
    assert MainWindow.eventFilter(window, mock.Mock(), event) is True
    assert not MainWindow.on_key(window, event)
    assert state.current_view_state() == view_before
    assert state.current_trajectory() is trajectory_before


def test_bound_key_is_dispatched(window, state):
    event = key_event(QtCore.Qt.Key_C, "c")
    assert MainWindow.eventFilter(window, mock.Mock(), event) is True
    assert state.color_mode.label == "Single"


def test_arrow_key_rotates(window, state):
    assert MainWindow.on_key(window, key_event(QtCore.Qt.Key_Left))
    assert state.view.azimuth == 355


def test_escape_closes_window(window):
    assert MainWindow.on_key(window, key_event(QtCore.Qt.Key_Escape))
    window.close.assert_called_once_with()
