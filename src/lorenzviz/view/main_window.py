"""
Main Application Window
=======================
The primary GUI container that holds the 3D view and drives the frame loop.

Why is this file needed?
------------------------
1. Frame loop: A QTimer ticks the AnimationController and re-renders.
2. Routing: Key presses are translated to command keys and dispatched to the
   controller layer before VTK's own key bindings can see them.
"""
import logging
from typing import Optional

from PySide6.QtWidgets import QMainWindow
from PySide6.QtCore import Qt, QEvent, QObject, QTimer
from PySide6.QtGui import QKeyEvent, QResizeEvent

from lorenzviz.config import APP_NAME, FRAME_INTERVAL_MS, WINDOW_SIZE
from lorenzviz.controller.commands import KEY_DOWN, KEY_LEFT, KEY_RIGHT, KEY_UP, handle_key
from lorenzviz.model.animation import AnimationController
from lorenzviz.model.state import SimulationState
from lorenzviz.view.widgets.plot_3d import PyVistaWidget

logger = logging.getLogger(__name__)

ARROW_KEYS = {
    Qt.Key_Left: KEY_LEFT,
    Qt.Key_Right: KEY_RIGHT,
    Qt.Key_Up: KEY_UP,
    Qt.Key_Down: KEY_DOWN,
}


class MainWindow(QMainWindow):
    def __init__(self, state: SimulationState, controller: Optional[AnimationController] = None) -> None:
        super().__init__()
        if state is None:
            raise ValueError("MainWindow requires a SimulationState instance.")
        self.state: SimulationState = state
        self.controller: AnimationController = controller or AnimationController(state)

        # --- 3D Visualization ---
        self.visualizer = PyVistaWidget()
        self.setCentralWidget(self.visualizer)

        self.setWindowTitle(APP_NAME)
        self.resize(*WINDOW_SIZE)

        # Keys go to the VTK widget when it has focus; intercept them there
        self.visualizer.plotter.installEventFilter(self)
        self.installEventFilter(self)

        # --- FRAME TIMER ---
        self.timer = QTimer(self)
        self.timer.setInterval(FRAME_INTERVAL_MS)
        self.timer.timeout.connect(self.on_tick)
        self.timer.start()

        # Initial Render
        self.update_visualization()

    # --- FRAME LOOP ---

    def on_tick(self) -> None:
        self.controller.tick()
        self.update_visualization()

    def update_visualization(self) -> None:
        try:
            self.visualizer.update_scene(self.state)
        except Exception:
            logger.exception("Failed to render frame")

    # --- INPUT ---

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        if event.type() == QEvent.KeyPress:
            # Unbound keys are swallowed too, so VTK's own bindings never move the view
            self.on_key(event)
            return True
        return super().eventFilter(watched, event)

    def on_key(self, event: QKeyEvent) -> bool:
        """Dispatch a key press; returns True if the key is bound."""
        if event.key() == Qt.Key_Escape:
            self.close()
            return True

        key = ARROW_KEYS.get(event.key(), event.text())
        if not key:
            return False

        if handle_key(self.state, key, self.controller.now()):
            self.update_visualization()
            return True
        return False

    def resizeEvent(self, event: QResizeEvent) -> None:
        size = self.visualizer.size()
        self.state.resize_viewport(size.width(), size.height())
        super().resizeEvent(event)

    def closeEvent(self, event) -> None:
        self.timer.stop()
        self.visualizer.close()
        super().closeEvent(event)
