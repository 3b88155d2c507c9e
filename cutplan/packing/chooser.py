"""
Best Short-Side Fit placement choice for a single part instance.
"""
from typing import List, Optional, Tuple

from cutplan.config import EPSILON
from cutplan.models.part import GrainConstraint, PartInstance
from cutplan.packing.free_space import FreeSpace

# (as-placed width, as-placed height, rotated)
Orientation = Tuple[float, float, bool]


class Candidate:
    """A free rectangle and orientation chosen for one part instance."""

    def __init__(self, handle: int, x: float, y: float, width: float, height: float,
                 rotated: bool, kerf: float, score: Tuple[float, float]):
        self.handle = handle
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.rotated = rotated
        self.footprint_w = width + kerf
        self.footprint_h = height + kerf
        self.score = score

    def __repr__(self):
        return (f"Candidate(rect={self.handle}, x={self.x}, y={self.y}, "
                f"{self.width}x{self.height}, rotated={self.rotated}, score={self.score})")


def orientations(instance: PartInstance) -> List[Orientation]:
    """Orientations the instance's grain allows, unrotated first."""
    width, height = instance.width, instance.height
    grain = instance.grain
    if grain is GrainConstraint.FREE:
        if width == height:
            return [(width, height, False)]
        return [(width, height, False), (height, width, True)]
    elif grain is GrainConstraint.FIXED_VERTICAL or grain is GrainConstraint.FIXED_HORIZONTAL:
        return [(width, height, False)]
    raise ValueError(f"Unhandled grain constraint {grain!r}")


def fits_sheet(instance: PartInstance, usable_width: float, usable_height: float) -> bool:
    """True if the instance fits an empty sheet in some allowed orientation."""
    return any(w <= usable_width + EPSILON and h <= usable_height + EPSILON
               for w, h, _ in orientations(instance))


def choose_placement(instance: PartInstance, free_space: FreeSpace, kerf: float) -> Optional[Candidate]:
    """Pick the free rectangle and orientation with the best short-side fit.

    Every allowed orientation is scored against every free rectangle large
    enough for its kerf-inflated footprint.  The score is the pair
    ``(shorter leftover, longer leftover)``; the lowest pair wins.  A strict
    comparison keeps the earliest rectangle and the unrotated orientation on
    ties.  Returns None if nothing on this sheet can hold the part.
    """
    best = None
    for rect in free_space:
        for width, height, rotated in orientations(instance):
            leftover_w = rect.width - (width + kerf)
            leftover_h = rect.height - (height + kerf)
            if leftover_w < -EPSILON or leftover_h < -EPSILON:
                continue
            score = (min(leftover_w, leftover_h), max(leftover_w, leftover_h))
            if best is None or score < best.score:
                best = Candidate(rect.rid, rect.x, rect.y, width, height, rotated, kerf, score)
    return best
