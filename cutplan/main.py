"""
Entry point for the sheet cutting planner.
"""
import argparse
import json
import logging
import sys
from typing import List, Optional

from cutplan import config
from cutplan.exceptions import CutPlanError
from cutplan.loader import load_parts
from cutplan.models.sheet import OptimizationResult, OptimizationSettings
from cutplan.packing.engine import PackingEngine
from cutplan.packing.validation import validate_result

logger = logging.getLogger("cutplan")

EXIT_OK = 0
EXIT_UNPLACED = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cutplan",
        description="Lay out cabinet parts on sheet goods for straight table-saw cuts.")
    parser.add_argument("parts_file", help="parts list (.csv or .json)")
    parser.add_argument("--sheet", choices=sorted(config.DEFAULT_SHEET_SIZES),
                        help="named standard sheet size")
    parser.add_argument("--sheet-width", type=float, help="sheet width in mm")
    parser.add_argument("--sheet-height", type=float, help="sheet height in mm")
    parser.add_argument("--kerf", type=float, default=config.DEFAULT_KERF,
                        help="saw blade kerf in mm (default: %(default)s)")
    parser.add_argument("--trim", type=float, default=config.DEFAULT_TRIM_MARGIN,
                        help="margin trimmed from every sheet edge in mm (default: %(default)s)")
    parser.add_argument("--material", help="only plan parts of this material")
    parser.add_argument("--json", action="store_true", help="print the plan as JSON")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="log every placement")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="only log warnings and errors")
    return parser


def settings_from_args(args: argparse.Namespace) -> OptimizationSettings:
    if args.sheet:
        settings = OptimizationSettings.from_sheet_size(args.sheet, saw_kerf=args.kerf, trim_margin=args.trim)
    else:
        settings = OptimizationSettings(saw_kerf=args.kerf, trim_margin=args.trim)
    if args.sheet_width is not None:
        settings.sheet_width = args.sheet_width
    if args.sheet_height is not None:
        settings.sheet_height = args.sheet_height
    return settings


def format_result(result: OptimizationResult) -> str:
    lines = [f"{result.material}: {result.total_parts_placed} part(s) on "
             f"{result.total_sheets_used} sheet(s), {result.overall_utilization:.1f}% utilization"]
    for sheet in result.sheets:
        eff = sheet.efficiency
        lines.append(f"  Sheet {sheet.sheet_index + 1} ({sheet.size[0]:g} x {sheet.size[1]:g} mm): "
                     f"{len(sheet.placements)} part(s), {sheet.utilization:.1f}% used, "
                     f"{eff['waste_percent']:.1f}% waste")
        for p in sheet.placements:
            lines.append(f"    {p.name:<30} {p.width:>8.1f} x {p.height:<8.1f} at "
                         f"({p.x:.1f}, {p.y:.1f}){' rotated' if p.rotated else ''}")
    for name in result.unplaced_parts:
        lines.append(f"  UNPLACED: {name} is larger than the sheet")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.WARNING if args.quiet else logging.INFO
    logging.basicConfig(level=level, format=config.LOG_FORMAT)

    try:
        settings = settings_from_args(args)
        parts = load_parts(args.parts_file)
        if args.material:
            parts = [p for p in parts if p.material == args.material]
            if not parts:
                logger.warning("No parts of material %r in %s", args.material, args.parts_file)
        results = PackingEngine(settings).calculate_plan(
            parts, progress_callback=lambda progress: logger.debug("%s (%.0f%%)", *progress))
    except CutPlanError as e:
        logger.error("%s", e)
        return EXIT_ERROR

    for result in results.values():
        for problem in validate_result(result):
            logger.error("%s", problem)

    if args.json:
        print(json.dumps({material: r.to_dict() for material, r in results.items()}, indent=2))
    else:
        print("\n\n".join(format_result(r) for r in results.values()))

    if any(r.unplaced_parts for r in results.values()):
        return EXIT_UNPLACED
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
