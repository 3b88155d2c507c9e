"""
Sanity checks for computed cutting plans.
"""
from typing import List, Tuple

from rectpack.geometry import Rectangle

from cutplan.config import EPSILON
from cutplan.models.part import Placement
from cutplan.models.sheet import OptimizationResult, OptimizationSettings, SheetLayout


def placement_rect(placement: Placement) -> Rectangle:
    return Rectangle(placement.x, placement.y, placement.width, placement.height)


def rect_overlap(a: Placement, b: Placement) -> bool:
    """True if two placements share area; touching edges do not count."""
    return placement_rect(a).intersects(placement_rect(b), edges=False)


def find_overlaps(sheet: SheetLayout) -> List[Tuple[str, str]]:
    overlaps = []
    placements = sheet.placements
    for i in range(len(placements)):
        for j in range(i + 1, len(placements)):
            if rect_overlap(placements[i], placements[j]):
                overlaps.append((placements[i].name, placements[j].name))
    return overlaps


def find_out_of_bounds(sheet: SheetLayout, settings: OptimizationSettings) -> List[Placement]:
    x, y = settings.origin
    bounds = Rectangle(x - EPSILON, y - EPSILON,
                       settings.usable_width + 2 * EPSILON, settings.usable_height + 2 * EPSILON)
    return [p for p in sheet.placements if not bounds.contains(placement_rect(p))]


def validate_result(result: OptimizationResult) -> List[str]:
    """Human readable problems with a plan; empty when every part is sound."""
    problems = []
    for sheet in result.sheets:
        for first, second in find_overlaps(sheet):
            problems.append(f"Sheet {sheet.sheet_index + 1}: {first} overlaps {second}")
        for placement in find_out_of_bounds(sheet, result.settings):
            problems.append(f"Sheet {sheet.sheet_index + 1}: {placement.name} lies outside the usable area")
        for placement in sheet.placements:
            if placement.rotated and not placement.grain.can_rotate:
                problems.append(f"Sheet {sheet.sheet_index + 1}: {placement.name} rotated against "
                                f"its {placement.grain.value} grain")
            elif not placement.grain.matches_shape(placement.width, placement.height):
                problems.append(f"Sheet {sheet.sheet_index + 1}: {placement.name} placed "
                                f"{placement.width:g}x{placement.height:g} across its "
                                f"{placement.grain.value} grain")
    return problems
