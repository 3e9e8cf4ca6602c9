"""CLI entry point: ``python -m spindlecalc --material aluminium --diameter 6``"""

from __future__ import annotations

import argparse
import logging
import sys

from .config.defaults import build_default_state
from .config.machine_profiles import SpindleModel, get_profile
from .config.settings import AppSettings
from .core.commands import (
    ApplyMachineProfile,
    SetDiameter,
    SetFluteCount,
    SetMaterial,
    SetMaxRpm,
    SetMinRpm,
    SetPolicy,
    SetSelectedRpm,
    reduce_all,
)
from .core.feed import diameter_sweep, feed_chart
from .core.material import Material
from .core.state import CuttingState, RpmPolicy
from .core.validate import validate_state

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="spindlecalc",
        description="Recommend spindle speed and feed rate for a milling cutter.",
    )
    p.add_argument("--gui", action="store_true",
                   help="Launch the desktop GUI (default when no option is given)")
    p.add_argument("-v", "--verbose", action="store_true",
                   help="Log state changes")

    p.add_argument("--material", choices=[m.value for m in Material], default=None,
                   help="Workpiece material (default: settings, wood_soft)")
    p.add_argument("--diameter", default=None,
                   help="Tool diameter in mm (default: 8)")
    p.add_argument("--flutes", default=None,
                   help="Number of flutes (default: 2)")

    # Spindle
    p.add_argument("--machine", choices=[m.value for m in SpindleModel], default=None,
                   help="Spindle preset (default: settings, router)")
    p.add_argument("--min-rpm", type=float, default=None,
                   help="Machine minimum RPM (overrides preset)")
    p.add_argument("--max-rpm", type=float, default=None,
                   help="Machine maximum RPM (overrides preset)")
    p.add_argument("--rpm", type=float, default=None,
                   help="Selected spindle speed (default: 13000)")
    p.add_argument("--policy", choices=[r.value for r in RpmPolicy], default=None,
                   help="Clamp the RPM range to the machine or not")

    p.add_argument("--chart", type=float, nargs=3, default=None,
                   metavar=("START", "STOP", "STEP"),
                   help="Print feed per tooth for a diameter sweep")
    return p


def _commands(args: argparse.Namespace) -> list:
    """Translate CLI options into state commands, in dependency order."""
    commands = []
    if args.machine is not None:
        commands.append(ApplyMachineProfile(get_profile(SpindleModel(args.machine))))
    if args.min_rpm is not None:
        commands.append(SetMinRpm(args.min_rpm))
    if args.max_rpm is not None:
        commands.append(SetMaxRpm(args.max_rpm))
    if args.policy is not None:
        commands.append(SetPolicy(RpmPolicy(args.policy)))
    if args.material is not None:
        commands.append(SetMaterial(Material(args.material)))
    if args.diameter is not None:
        commands.append(SetDiameter(args.diameter))
    if args.flutes is not None:
        commands.append(SetFluteCount(args.flutes))
    if args.rpm is not None:
        commands.append(SetSelectedRpm(args.rpm))
    return commands


def _print_state(state: CuttingState) -> None:
    print(f"Material:      {state.material.label()}")
    if state.diameter_error or state.flute_count_error:
        return
    rpm_range = state.rpm_range()
    feed = state.feed_range()
    fz = state.feed_per_tooth()
    print(f"Tool:          {state.diameter:.2f} mm, {state.flute_count} flutes")
    print(f"RPM range:     {rpm_range.start:.0f} – {rpm_range.end:.0f}")
    print(f"Selected RPM:  {state.selected_rpm:.0f}")
    print(f"Cutting speed: {state.cutting_speed():.0f} m/min")
    print(f"Feed / tooth:  {fz.start:.3f} – {fz.end:.3f} mm")
    print(f"Feed:          {feed.start:.0f} – {feed.end:.0f} mm/min")


def _print_chart(state: CuttingState, start: float, stop: float, step: float) -> None:
    chart = feed_chart(state.material, diameter_sweep(start, stop, step))
    print(f"Feed per tooth, {state.material.label()}")
    print(f"{'Ø mm':>8}  {'fz min':>8}  {'fz max':>8}")
    for diameter, fz_min, fz_max in chart:
        print(f"{diameter:8.2f}  {fz_min:8.4f}  {fz_max:8.4f}")


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Launch GUI when --gui flag is set or no option was given
    if args.gui or not (argv if argv is not None else sys.argv[1:]):
        from .app import launch_gui
        return launch_gui()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = AppSettings.from_env()
    except ValueError as exc:
        parser.error(str(exc))

    state = reduce_all(build_default_state(settings), _commands(args))
    logger.debug("Final state: %r", state)

    if args.chart is not None:
        try:
            _print_chart(state, *args.chart)
        except ValueError as exc:
            parser.error(str(exc))
        return 0

    _print_state(state)

    result = validate_state(state)
    for message in result.messages("warning"):
        print(f"  Warning: {message}")
    if result.has_errors:
        print("INVALID INPUT:", file=sys.stderr)
        for message in result.messages("error"):
            print(f"  ERROR: {message}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
