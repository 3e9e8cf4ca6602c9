"""Sanity checks on a cutting state.

Flags input errors and setups that are legal but worth a warning before
the values are used on the machine.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .state import CuttingState


@dataclass
class ValidationIssue:
    """A single problem found in the cutting state."""

    severity: str  # "error" or "warning"
    message: str


@dataclass
class ValidationResult:
    """Result of validating a cutting state."""

    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return any(i.severity == "error" for i in self.issues)

    @property
    def has_warnings(self) -> bool:
        return any(i.severity == "warning" for i in self.issues)

    @property
    def is_ok(self) -> bool:
        return len(self.issues) == 0

    def messages(self, severity: str) -> list[str]:
        return [i.message for i in self.issues if i.severity == severity]


def validate_state(state: CuttingState) -> ValidationResult:
    """Check *state* for input errors and out-of-range spindle speeds.

    Checks performed:
    - Diameter and flute count text parsed
    - Machine bounds ordered and diameter positive
    - Selected RPM inside the recommended range and the machine range
    - At least one flute
    """
    result = ValidationResult()

    if state.diameter_error:
        result.issues.append(ValidationIssue(
            "error", "Tool diameter is not a valid number",
        ))
    if state.flute_count_error:
        result.issues.append(ValidationIssue(
            "error", "Flute count is not a whole number between 0 and 255",
        ))
    if state.min_rpm >= state.max_rpm:
        result.issues.append(ValidationIssue(
            "error",
            f"Machine minimum RPM {state.min_rpm:.0f} is not below "
            f"maximum RPM {state.max_rpm:.0f}",
        ))
    if state.diameter <= 0:
        result.issues.append(ValidationIssue(
            "error", f"Tool diameter {state.diameter:g} mm must be positive",
        ))
        # no meaningful speed range without a diameter
        return result

    if state.flute_count == 0:
        result.issues.append(ValidationIssue(
            "warning", "Flute count is 0; feed rate will be zero",
        ))

    rpm_range = state.rpm_range()
    if not state.rpm_in_range:
        result.issues.append(ValidationIssue(
            "warning",
            f"RPM {state.selected_rpm:.0f} outside recommended range "
            f"[{rpm_range.start:.0f}, {rpm_range.end:.0f}]",
        ))
    if state.selected_rpm < state.min_rpm:
        result.issues.append(ValidationIssue(
            "warning",
            f"RPM {state.selected_rpm:.0f} below machine minimum "
            f"({state.min_rpm:.0f})",
        ))
    if state.selected_rpm > state.max_rpm:
        result.issues.append(ValidationIssue(
            "warning",
            f"RPM {state.selected_rpm:.0f} above machine maximum "
            f"({state.max_rpm:.0f})",
        ))

    return result
