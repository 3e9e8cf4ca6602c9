"""Main application window: owns the cutting state."""

from __future__ import annotations

import logging

from PyQt6.QtWidgets import QMainWindow, QStatusBar

from ..config.defaults import build_default_state
from ..config.settings import AppSettings
from ..core.commands import reduce
from ..core.validate import validate_state
from .panels.cutting_panel import CuttingPanel

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Top-level window.

    Every panel command goes through :func:`reduce`; the held state is only
    replaced when the reducer returns a different object.
    """

    def __init__(self, settings: AppSettings | None = None, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Vorschub und Drehzahl")
        self.resize(480, 420)

        self._state = build_default_state(settings)

        self._panel = CuttingPanel()
        self._panel.command_issued.connect(self._on_command)
        self.setCentralWidget(self._panel)

        self._status = QStatusBar()
        self.setStatusBar(self._status)

        self._refresh()

    @property
    def state(self):
        return self._state

    def _on_command(self, command) -> None:
        new_state = reduce(self._state, command)
        if new_state is self._state:
            # reformat raw field text left by a suppressed commit
            self._panel.show_state(self._state)
            return
        self._state = new_state
        self._refresh()

    def _refresh(self) -> None:
        self._panel.show_state(self._state)

        result = validate_state(self._state)
        messages = result.messages("error") or result.messages("warning")
        if messages:
            logger.info("State issues: %s", "; ".join(messages))
            self._status.showMessage(messages[0])
        else:
            self._status.showMessage("Ready")
