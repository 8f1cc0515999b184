"""
Application Initialization
==========================
This module constructs the MVC (Model-View-Controller) architecture and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the Data Model (SimulationState) and computes the first trajectory.
2. Instantiates the AnimationController on the monotonic clock.
3. Instantiates the Main Window (View) and passes both into it.
"""
import sys
from PySide6.QtWidgets import QApplication

from lorenzviz.config import APP_NAME
from lorenzviz.logging_config import setup_logging
from lorenzviz.model.animation import AnimationController
from lorenzviz.model.state import SimulationState
from lorenzviz.view.main_window import MainWindow


def main() -> None:
    # 1. Setup Logging (level / file from LORENZVIZ_LOG_LEVEL / LORENZVIZ_LOG_FILE)
    setup_logging()

    # 2. Create the Qt Application
    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)

    # 3. Initialize the Data Model
    state = SimulationState()
    controller = AnimationController(state)

    # 4. Initialize the Main Window, passing the model
    window = MainWindow(state, controller)
    window.show()

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
