"""QApplication bootstrap for the desktop GUI."""

from __future__ import annotations

import sys


def launch_gui() -> int:
    """Start the PyQt6 GUI application.  Returns exit code."""
    try:
        from PyQt6.QtWidgets import QApplication
    except ImportError:
        print(
            "PyQt6 is not installed.  Install the 'gui' extras:\n"
            "  pip install spindlecalc[gui]",
            file=sys.stderr,
        )
        return 1

    from .config.settings import AppSettings
    from .gui.main_window import MainWindow

    try:
        settings = AppSettings.from_env()
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    app = QApplication(sys.argv)
    app.setApplicationName("Vorschub und Drehzahl")
    app.setOrganizationName("spindlecalc")

    window = MainWindow(settings)
    window.show()

    return app.exec()
