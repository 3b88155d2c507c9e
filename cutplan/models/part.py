"""
Part data models for the sheet cutting planner.
"""
from enum import Enum
from typing import Any, Dict, Optional

from cutplan.exceptions import InvalidPartError


class GrainConstraint(Enum):
    """Whether a part may be turned 90 degrees on the sheet.

    ``FREE`` parts (backs, drawer bottoms, hidden panels) may be rotated to
    improve the fit.  ``FIXED_VERTICAL`` and ``FIXED_HORIZONTAL`` parts show
    their grain once installed, so they are cut exactly in the orientation
    given by their width and height.
    """

    FREE = "free"
    FIXED_VERTICAL = "fixed-vertical"
    FIXED_HORIZONTAL = "fixed-horizontal"

    @property
    def can_rotate(self) -> bool:
        return self is GrainConstraint.FREE

    def matches_shape(self, width: float, height: float) -> bool:
        """True if a part of this as-placed size runs along the grain axis.

        A fixed-vertical part stands taller than it is wide and a
        fixed-horizontal part lies wider than it is tall.  Squares match
        either axis.
        """
        if self is GrainConstraint.FIXED_VERTICAL:
            return height >= width
        if self is GrainConstraint.FIXED_HORIZONTAL:
            return width >= height
        return True

    @classmethod
    def parse(cls, value) -> "GrainConstraint":
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower().replace("_", "-")
        if key in _GRAIN_ALIASES:
            return _GRAIN_ALIASES[key]
        raise ValueError(f"Unknown grain constraint: {value!r}")


_GRAIN_ALIASES = {
    "free": GrainConstraint.FREE,
    "either": GrainConstraint.FREE,
    "": GrainConstraint.FREE,
    "fixed-vertical": GrainConstraint.FIXED_VERTICAL,
    "vertical": GrainConstraint.FIXED_VERTICAL,
    "fixed-horizontal": GrainConstraint.FIXED_HORIZONTAL,
    "horizontal": GrainConstraint.FIXED_HORIZONTAL,
}


class PartSpec:
    def __init__(self, part_id: str, name: str, width: float, height: float, quantity: int = 1,
                 grain: GrainConstraint = GrainConstraint.FREE, material: str = "",
                 cabinet_id: Optional[str] = None):
        self.id = part_id
        self.name = name
        self.width = width
        self.height = height
        self.quantity = quantity
        try:
            self.grain = GrainConstraint.parse(grain)
        except ValueError as e:
            raise InvalidPartError([f"{name!r} ({part_id}): {e}"]) from None
        self.material = material
        self.cabinet_id = cabinet_id

    def __repr__(self):
        return f"PartSpec({self.id!r}, {self.name!r}, {self.width}x{self.height}, qty={self.quantity})"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'width': self.width,
            'height': self.height,
            'quantity': self.quantity,
            'grain': self.grain.value,
            'material': self.material,
            'cabinet_id': self.cabinet_id
        }


class PartInstance:
    """One unit of a PartSpec, placed independently of its siblings."""

    def __init__(self, spec: PartSpec, instance_index: int):
        self.part_id = spec.id
        self.instance_index = instance_index
        if spec.quantity > 1:
            self.name = f"{spec.name} {instance_index + 1}/{spec.quantity}"
        else:
            self.name = spec.name
        self.width = spec.width
        self.height = spec.height
        self.grain = spec.grain
        self.material = spec.material
        self.cabinet_id = spec.cabinet_id

    @property
    def max_dimension(self) -> float:
        return max(self.width, self.height)

    @property
    def area(self) -> float:
        return self.width * self.height

    def __repr__(self):
        return f"PartInstance({self.name!r}, {self.width}x{self.height}, {self.grain.value})"


class Placement:
    def __init__(self, instance: PartInstance, sheet_index: int, x: float, y: float,
                 width: float, height: float, rotated: bool):
        self.part_id = instance.part_id
        self.instance_index = instance.instance_index
        self.name = instance.name
        self.sheet_index = sheet_index
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.rotated = rotated
        self.grain = instance.grain
        self.material = instance.material
        self.cabinet_id = instance.cabinet_id

    @property
    def area(self) -> float:
        return self.width * self.height

    def __repr__(self):
        return (f"Placement({self.name!r}, sheet={self.sheet_index}, "
                f"x={self.x}, y={self.y}, {self.width}x{self.height}, rotated={self.rotated})")

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.part_id,
            'instance_index': self.instance_index,
            'name': self.name,
            'sheet_index': self.sheet_index,
            'x': self.x,
            'y': self.y,
            'width': self.width,
            'height': self.height,
            'rotated': self.rotated,
            'grain': self.grain.value,
            'material': self.material,
            'cabinet_id': self.cabinet_id
        }
