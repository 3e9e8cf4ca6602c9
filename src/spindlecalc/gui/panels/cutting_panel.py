"""Input form and result readout for one cutting state."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QComboBox,
    QFormLayout,
    QLabel,
    QLineEdit,
    QSlider,
    QWidget,
)

from ...config.machine_profiles import list_profiles
from ...core.commands import (
    ApplyMachineProfile,
    SetDiameter,
    SetFluteCount,
    SetMaterial,
    SetSelectedRpm,
)
from ...core.material import Material
from ...core.state import CuttingState

_ERROR_STYLE = "border: 1px solid #c9190b;"


class CuttingPanel(QWidget):
    """Form widgets for material, tool and spindle speed.

    The panel never edits state itself: every user edit is emitted as a
    command and the owner calls :meth:`show_state` with the result.
    """

    command_issued = pyqtSignal(object)  # Command

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QFormLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)

        self._material_combo = QComboBox()
        for m in Material:
            self._material_combo.addItem(m.label(), userData=m)
        self._material_combo.currentIndexChanged.connect(self._on_material)
        layout.addRow("Material", self._material_combo)

        self._machine_combo = QComboBox()
        self._machine_combo.addItem("–", userData=None)
        for profile in list_profiles():
            self._machine_combo.addItem(str(profile), userData=profile)
        self._machine_combo.currentIndexChanged.connect(self._on_machine)
        layout.addRow("Maschine", self._machine_combo)

        self._diameter_edit = QLineEdit()
        self._diameter_edit.editingFinished.connect(
            lambda: self.command_issued.emit(SetDiameter(self._diameter_edit.text()))
        )
        layout.addRow("Werkzeugdurchmesser", self._diameter_edit)

        self._flutes_edit = QLineEdit()
        self._flutes_edit.editingFinished.connect(
            lambda: self.command_issued.emit(SetFluteCount(self._flutes_edit.text()))
        )
        layout.addRow("Anzahl Schneiden", self._flutes_edit)

        self._rpm_lbl = QLabel()
        self._rpm_slider = QSlider(Qt.Orientation.Horizontal)
        self._rpm_slider.valueChanged.connect(
            lambda value: self.command_issued.emit(SetSelectedRpm(float(value)))
        )
        layout.addRow("Drehzahl", self._rpm_lbl)
        layout.addRow("", self._rpm_slider)

        self._speed_lbl = QLabel()
        self._feed_min_lbl = QLabel()
        self._feed_max_lbl = QLabel()
        layout.addRow("Schnittgeschwindigkeit", self._speed_lbl)
        layout.addRow("Minimaler Vorschub", self._feed_min_lbl)
        layout.addRow("Maximaler Vorschub", self._feed_max_lbl)

    def _on_material(self, index: int) -> None:
        material = self._material_combo.itemData(index)
        if material is not None:
            self.command_issued.emit(SetMaterial(material))

    def _on_machine(self, index: int) -> None:
        profile = self._machine_combo.itemData(index)
        if profile is not None:
            self.command_issued.emit(ApplyMachineProfile(profile))

    def show_state(self, state: CuttingState) -> None:
        """Refresh every widget from *state* without emitting commands."""
        for w in (self._material_combo, self._rpm_slider):
            w.blockSignals(True)
        try:
            self._material_combo.setCurrentIndex(
                self._material_combo.findData(state.material)
            )

            # Keep the user's text while it is invalid
            if not state.diameter_error:
                self._diameter_edit.setText(f"{state.diameter:.2f}")
            self._diameter_edit.setStyleSheet(_ERROR_STYLE if state.diameter_error else "")
            if not state.flute_count_error:
                self._flutes_edit.setText(f"{state.flute_count}")
            self._flutes_edit.setStyleSheet(
                _ERROR_STYLE if state.flute_count_error else ""
            )

            self._rpm_lbl.setText(f"RPM: {state.selected_rpm:.0f}")
            rpm_range = state.rpm_range()
            visible = not state.diameter_error and not rpm_range.is_empty
            self._rpm_slider.setVisible(visible)
            if visible:
                self._rpm_slider.setRange(int(rpm_range.start), int(rpm_range.end))
                self._rpm_slider.setValue(int(round(state.selected_rpm)))
        finally:
            for w in (self._material_combo, self._rpm_slider):
                w.blockSignals(False)

        if state.has_error:
            for lbl in (self._speed_lbl, self._feed_min_lbl, self._feed_max_lbl):
                lbl.clear()
            return
        feed = state.feed_range()
        self._speed_lbl.setText(f"{state.cutting_speed():.0f} m/min")
        self._feed_min_lbl.setText(f"{feed.start:.0f} mm/min")
        self._feed_max_lbl.setText(f"{feed.end:.0f} mm/min")
