"""
Utilization and waste accounting for finished sheets.
"""
from typing import Dict, List, Sequence

from cutplan.models.part import Placement
from cutplan.models.sheet import OptimizationSettings, SheetLayout


def calculate_sheet_efficiency(usable_area: float, placements: Sequence[Placement]) -> Dict[str, float]:
    used_area = sum(p.area for p in placements)
    waste_area = usable_area - used_area
    return {
        'used_area': used_area,
        'usable_area': usable_area,
        'waste_area': waste_area,
        'waste_percent': waste_area / usable_area * 100 if usable_area > 0 else 0.0,
        'density': len(placements) / (usable_area / 1000000) if usable_area > 0 else 0.0,
        'efficiency': used_area / usable_area * 100 if usable_area > 0 else 0.0
    }


def build_sheet_layout(sheet_index: int, material: str, placements: List[Placement],
                       waste_rects: List[Dict[str, float]], settings: OptimizationSettings) -> SheetLayout:
    efficiency = calculate_sheet_efficiency(settings.usable_area, placements)
    return SheetLayout(
        sheet_index=sheet_index,
        size=(settings.sheet_width, settings.sheet_height),
        material=material,
        placements=placements,
        waste_rects=waste_rects,
        utilization=efficiency['efficiency'],
        efficiency=efficiency
    )


def overall_utilization(sheets: Sequence[SheetLayout]) -> float:
    """Area-weighted utilization in percent; a nearly empty last sheet counts by its area."""
    usable = sum(sheet.usable_area for sheet in sheets)
    if usable <= 0:
        return 0.0
    return sum(sheet.used_area for sheet in sheets) / usable * 100
