"""
Packing engine and sheet allocation for the sheet cutting planner.
"""
import logging
from typing import Callable, Dict, List, Mapping, Optional, Sequence

from cutplan.exceptions import InvalidPartError
from cutplan.models.part import PartInstance, PartSpec, Placement
from cutplan.models.sheet import OptimizationResult, OptimizationSettings, SheetLayout
from cutplan.packing.chooser import choose_placement, fits_sheet
from cutplan.packing.free_space import FreeSpace
from cutplan.packing.instantiator import expand_parts
from cutplan.packing.stats import build_sheet_layout, overall_utilization

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[tuple], None]


def check_material(material: str, parts: Sequence[PartSpec]) -> None:
    """Raise InvalidPartError if any part is filed under the wrong material."""
    strays = [f"{part.name!r} ({part.id}) is {part.material!r}, not {material!r}"
              for part in parts if part.material != material]
    if strays:
        raise InvalidPartError(strays)


class OpenSheet:
    """A sheet that is still accepting parts.

    The seed free rectangle is the usable area extended by one kerf past its
    right and bottom edges.  Every footprint carries a trailing kerf, so a
    part flush with the far edge parks that kerf outside the usable area and
    the part itself stays inside it.
    """

    def __init__(self, index: int, settings: OptimizationSettings):
        self.index = index
        self.settings = settings
        x, y = settings.origin
        self.free_space = FreeSpace(x, y,
                                    settings.usable_width + settings.saw_kerf,
                                    settings.usable_height + settings.saw_kerf)
        self.placements: List[Placement] = []

    def try_place(self, instance: PartInstance) -> Optional[Placement]:
        candidate = choose_placement(instance, self.free_space, self.settings.saw_kerf)
        if candidate is None:
            return None
        self.free_space.split(candidate.handle, candidate.footprint_w, candidate.footprint_h)
        placement = Placement(instance, self.index, candidate.x, candidate.y,
                              candidate.width, candidate.height, candidate.rotated)
        self.placements.append(placement)
        logger.debug("Placed %s on sheet %d at (%.3f, %.3f)%s", instance.name, self.index,
                     placement.x, placement.y, " rotated" if placement.rotated else "")
        return placement

    def finalize(self, material: str) -> SheetLayout:
        x, y = self.settings.origin
        waste_rects = self.free_space.clipped(x + self.settings.usable_width,
                                              y + self.settings.usable_height)
        return build_sheet_layout(self.index, material, self.placements, waste_rects, self.settings)


class PackingEngine:
    def __init__(self, settings: Optional[OptimizationSettings] = None):
        self.settings = settings if settings is not None else OptimizationSettings()

    def pack(self, parts: Sequence[PartSpec], material: Optional[str] = None) -> OptimizationResult:
        """Pack the parts of one material onto as few sheets as the heuristic finds.

        Instances are taken longest edge first.  Each goes onto the first
        open sheet that can hold it (best short-side fit within that sheet);
        when none can, a new sheet is opened.  Instances too large for an
        empty sheet in every orientation their grain allows are reported in
        ``unplaced_parts`` and never open a sheet.
        """
        settings = self.settings
        settings.validate()
        if material is None:
            materials = list(dict.fromkeys(part.material for part in parts))
            if len(materials) > 1:
                raise InvalidPartError([f"parts of one run must share a material, got {materials}"])
            material = materials[0] if materials else ""
        else:
            check_material(material, parts)
        instances = expand_parts(parts)

        ordered = sorted(instances, key=lambda instance: instance.max_dimension, reverse=True)
        sheets: List[OpenSheet] = []
        unplaced: List[str] = []

        for instance in ordered:
            if not fits_sheet(instance, settings.usable_width, settings.usable_height):
                logger.warning("%s (%sx%s, %s grain) does not fit a %sx%s sheet",
                               instance.name, instance.width, instance.height, instance.grain.value,
                               settings.sheet_width, settings.sheet_height)
                unplaced.append(instance.name)
                continue
            placed = False
            for sheet in sheets:
                if sheet.try_place(instance) is not None:
                    placed = True
                    break
            if not placed:
                sheet = OpenSheet(len(sheets), settings)
                sheets.append(sheet)
                logger.debug("Opened sheet %d for %s", sheet.index, instance.name)
                if sheet.try_place(instance) is None:
                    raise RuntimeError(f"{instance.name} fits the usable area but not an empty sheet")

        layouts = [sheet.finalize(material) for sheet in sheets]
        result = OptimizationResult(
            material=material,
            sheets=layouts,
            unplaced_parts=unplaced,
            settings=settings,
            overall_utilization=overall_utilization(layouts)
        )
        logger.info("Material %r: %d part(s) on %d sheet(s), %.1f%% utilization, %d unplaced",
                    material, result.total_parts_placed, result.total_sheets_used,
                    result.overall_utilization, len(unplaced))
        return result

    def calculate_plan(self, parts: Sequence[PartSpec],
                       progress_callback: Optional[ProgressCallback] = None) -> Dict[str, OptimizationResult]:
        """Group parts by material and pack each group on its own sheets."""
        groups: Dict[str, List[PartSpec]] = {}
        for part in parts:
            groups.setdefault(part.material, []).append(part)
        return self.pack_materials(groups, progress_callback)

    def pack_materials(self, groups: Mapping[str, Sequence[PartSpec]],
                       progress_callback: Optional[ProgressCallback] = None) -> Dict[str, OptimizationResult]:
        self.settings.validate()
        for material, group_parts in groups.items():
            check_material(material, group_parts)
            expand_parts(group_parts)
        total_parts = sum(part.quantity for group_parts in groups.values() for part in group_parts)
        processed_parts = 0
        if progress_callback:
            progress_callback(("Starting calculation...", 0))
        results = {}
        for material, group_parts in groups.items():
            result = self.pack(group_parts, material=material)
            results[material] = result
            processed_parts += sum(part.quantity for part in group_parts)
            if progress_callback:
                progress_value = processed_parts / total_parts * 100 if total_parts else 100
                progress_callback((f"Packed {material}: {result.total_parts_placed} part(s) "
                                   f"on {result.total_sheets_used} sheet(s)", progress_value))
        return results


def pack(parts: Sequence[PartSpec], settings: Optional[OptimizationSettings] = None) -> OptimizationResult:
    return PackingEngine(settings).pack(parts)


def optimize_project(parts_by_material: Mapping[str, Sequence[PartSpec]],
                     settings: Optional[OptimizationSettings] = None,
                     progress_callback: Optional[ProgressCallback] = None) -> Dict[str, OptimizationResult]:
    """Pack every material of a project; materials never share sheets."""
    return PackingEngine(settings).pack_materials(parts_by_material, progress_callback)
