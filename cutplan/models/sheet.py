"""
Sheet, settings and result models for the sheet cutting planner.
"""
import math
from numbers import Real
from typing import Any, Dict, List, Optional, Tuple

from cutplan import config
from cutplan.exceptions import InvalidSettingsError
from cutplan.models.part import Placement


def _finite(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


class OptimizationSettings:
    """Physical sheet dimensions plus the material lost to the saw and the edges.

    The trim margin is removed from all four edges before packing, so parts
    are placed inside ``[trim, width - trim] x [trim, height - trim]``.
    """

    def __init__(self, sheet_width: float = config.DEFAULT_SHEET_WIDTH,
                 sheet_height: float = config.DEFAULT_SHEET_HEIGHT,
                 saw_kerf: float = config.DEFAULT_KERF,
                 trim_margin: float = config.DEFAULT_TRIM_MARGIN):
        self.sheet_width = sheet_width
        self.sheet_height = sheet_height
        self.saw_kerf = saw_kerf
        self.trim_margin = trim_margin

    @classmethod
    def from_sheet_size(cls, name: str, **kwargs) -> "OptimizationSettings":
        try:
            width, height = config.DEFAULT_SHEET_SIZES[name]
        except KeyError:
            known = ", ".join(sorted(config.DEFAULT_SHEET_SIZES))
            raise InvalidSettingsError(f"Unknown sheet size {name!r} (known: {known})") from None
        return cls(sheet_width=width, sheet_height=height, **kwargs)

    @property
    def usable_width(self) -> float:
        return self.sheet_width - 2 * self.trim_margin

    @property
    def usable_height(self) -> float:
        return self.sheet_height - 2 * self.trim_margin

    @property
    def usable_area(self) -> float:
        return self.usable_width * self.usable_height

    @property
    def sheet_area(self) -> float:
        return self.sheet_width * self.sheet_height

    @property
    def origin(self) -> Tuple[float, float]:
        return (self.trim_margin, self.trim_margin)

    def validate(self) -> None:
        if not (_finite(self.sheet_width) and self.sheet_width > 0
                and _finite(self.sheet_height) and self.sheet_height > 0):
            raise InvalidSettingsError(
                f"Sheet size must be finite and positive, got {self.sheet_width}x{self.sheet_height}")
        if not (_finite(self.saw_kerf) and self.saw_kerf >= 0):
            raise InvalidSettingsError(f"Saw kerf must be finite and not negative, got {self.saw_kerf}")
        if not (_finite(self.trim_margin) and self.trim_margin >= 0):
            raise InvalidSettingsError(f"Trim margin must be finite and not negative, got {self.trim_margin}")
        if self.usable_width <= 0 or self.usable_height <= 0:
            raise InvalidSettingsError(
                f"Trim margin {self.trim_margin} leaves no usable area on a "
                f"{self.sheet_width}x{self.sheet_height} sheet")

    def __repr__(self):
        return (f"OptimizationSettings({self.sheet_width}x{self.sheet_height}, "
                f"kerf={self.saw_kerf}, trim={self.trim_margin})")

    def to_dict(self) -> Dict[str, Any]:
        return {
            'sheet_width': self.sheet_width,
            'sheet_height': self.sheet_height,
            'saw_kerf': self.saw_kerf,
            'trim_margin': self.trim_margin
        }


class SheetLayout:
    def __init__(self, sheet_index: int, size: tuple, material: str, placements: List[Placement],
                 waste_rects: List[Dict[str, float]], utilization: float, efficiency: Dict[str, float]):
        self.sheet_index = sheet_index
        self.size = size
        self.material = material
        self.placements = placements
        self.waste_rects = waste_rects
        self.utilization = utilization
        self.efficiency = efficiency

    @property
    def used_area(self) -> float:
        return self.efficiency['used_area']

    @property
    def usable_area(self) -> float:
        return self.efficiency['usable_area']

    @property
    def sheet_area(self) -> float:
        return self.size[0] * self.size[1]

    @property
    def waste_area(self) -> float:
        return self.efficiency['waste_area']

    def to_dict(self) -> Dict[str, Any]:
        return {
            'sheet_index': self.sheet_index,
            'sheet_size': self.size,
            'material': self.material,
            'placements': [p.to_dict() for p in self.placements],
            'waste_rects': [dict(r) for r in self.waste_rects],
            'utilization': self.utilization,
            'efficiency': dict(self.efficiency)
        }


class OptimizationResult:
    def __init__(self, material: str, sheets: List[SheetLayout], unplaced_parts: List[str],
                 settings: OptimizationSettings, overall_utilization: float = 0.0):
        self.material = material
        self.sheets = sheets
        self.unplaced_parts = unplaced_parts
        self.settings = settings
        self.overall_utilization = overall_utilization

    @property
    def total_sheets_used(self) -> int:
        return len(self.sheets)

    @property
    def total_parts_placed(self) -> int:
        return sum(len(sheet.placements) for sheet in self.sheets)

    @property
    def used_area(self) -> float:
        return sum(sheet.used_area for sheet in self.sheets)

    @property
    def usable_area(self) -> float:
        return sum(sheet.usable_area for sheet in self.sheets)

    def all_placements(self, sheet_index: Optional[int] = None) -> List[Placement]:
        return [p for sheet in self.sheets for p in sheet.placements
                if sheet_index is None or sheet.sheet_index == sheet_index]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'material': self.material,
            'sheets': [s.to_dict() for s in self.sheets],
            'total_sheets_used': self.total_sheets_used,
            'total_parts_placed': self.total_parts_placed,
            'overall_utilization': self.overall_utilization,
            'unplaced_parts': list(self.unplaced_parts),
            'settings': self.settings.to_dict()
        }
