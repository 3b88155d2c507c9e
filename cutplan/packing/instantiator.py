"""
Expands part specifications into individually placeable instances.
"""
import math
from numbers import Integral, Real
from typing import List, Sequence

from cutplan.exceptions import InvalidPartError
from cutplan.models.part import PartInstance, PartSpec


def _is_positive_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value) and value > 0


def validate_parts(parts: Sequence[PartSpec]) -> None:
    """Raise InvalidPartError naming every spec that can never be instanced."""
    problems = []
    for part in parts:
        label = f"{part.name!r} ({part.id})"
        if not _is_positive_number(part.width) or not _is_positive_number(part.height):
            problems.append(f"{label} has invalid size {part.width}x{part.height}")
        elif not part.grain.matches_shape(part.width, part.height):
            problems.append(f"{label} is {part.width}x{part.height} but its long edge "
                            f"must follow its {part.grain.value} grain")
        if not isinstance(part.quantity, Integral) or isinstance(part.quantity, bool) or part.quantity < 1:
            problems.append(f"{label} has invalid quantity {part.quantity!r}")
    if problems:
        raise InvalidPartError(problems)


def expand_parts(parts: Sequence[PartSpec]) -> List[PartInstance]:
    validate_parts(parts)
    instances = []
    for part in parts:
        for index in range(part.quantity):
            instances.append(PartInstance(part, index))
    return instances
