"""
Free-space bookkeeping for one sheet and the guillotine split that consumes it.

Free rectangles are ``rectpack.geometry.Rectangle`` objects whose ``rid``
slot holds a handle into the owning :class:`FreeSpace`.  Handles grow
monotonically, so iterating the arena yields rectangles in insertion order,
which is what the placement chooser uses to break ties.
"""
import logging
from typing import Dict, Iterator, List, Optional, Tuple

from rectpack.geometry import Rectangle

from cutplan.config import EPSILON

logger = logging.getLogger(__name__)


def choose_split(rect: Rectangle, footprint_w: float, footprint_h: float) -> List[Tuple[float, float, float, float]]:
    """Return the remainders left after cutting a footprint out of ``rect``.

    The footprint sits at the rectangle's top-left corner.  Exactly one of
    the two straight cuts runs across the whole rectangle:

    * horizontal first: the bottom remainder spans the full width and the
      right remainder is only as tall as the footprint;
    * vertical first: the right remainder spans the full height and the
      bottom remainder is only as wide as the footprint.

    The variant whose larger remainder has more area wins, horizontal on a
    tie.  Remainders are returned right first, then bottom, and may have
    zero or negative extent; the caller discards those.
    """
    right_w = rect.width - footprint_w
    bottom_h = rect.height - footprint_h

    horizontal = [
        (rect.x + footprint_w, rect.y, right_w, footprint_h),
        (rect.x, rect.y + footprint_h, rect.width, bottom_h),
    ]
    vertical = [
        (rect.x + footprint_w, rect.y, right_w, rect.height),
        (rect.x, rect.y + footprint_h, footprint_w, bottom_h),
    ]

    def largest_area(pieces):
        return max(max(w, 0) * max(h, 0) for _, _, w, h in pieces)

    if largest_area(vertical) > largest_area(horizontal):
        return vertical
    return horizontal


class FreeSpace:
    """The free rectangles of one sheet, keyed by stable handle."""

    def __init__(self, x: float, y: float, width: float, height: float):
        self._rects: Dict[int, Rectangle] = {}
        self._next_handle = 0
        self.insert(x, y, width, height)

    def __iter__(self) -> Iterator[Rectangle]:
        return iter(list(self._rects.values()))

    def __len__(self) -> int:
        return len(self._rects)

    def __contains__(self, handle: int) -> bool:
        return handle in self._rects

    def __getitem__(self, handle: int) -> Rectangle:
        return self._rects[handle]

    def rectangles(self) -> List[Rectangle]:
        return list(self._rects.values())

    def insert(self, x: float, y: float, width: float, height: float) -> Optional[int]:
        """Add a free rectangle and return its handle, or None if it has no area."""
        if width <= EPSILON or height <= EPSILON:
            return None
        handle = self._next_handle
        self._next_handle += 1
        self._rects[handle] = Rectangle(x, y, width, height, rid=handle)
        return handle

    def remove(self, handle: int) -> Rectangle:
        return self._rects.pop(handle)

    def split(self, handle: int, footprint_w: float, footprint_h: float) -> List[int]:
        """Consume a footprint at the origin of rectangle ``handle``.

        Returns the handles of the remainders that survived insertion and
        containment pruning.
        """
        rect = self._rects[handle]
        if footprint_w > rect.width + EPSILON or footprint_h > rect.height + EPSILON:
            raise ValueError(
                f"Footprint {footprint_w}x{footprint_h} does not fit free rectangle {rect!r}")
        self.remove(handle)

        new_handles = []
        for x, y, w, h in choose_split(rect, footprint_w, footprint_h):
            new_handle = self.insert(x, y, w, h)
            if new_handle is not None:
                new_handles.append(new_handle)
        self.prune()

        survivors = [h for h in new_handles if h in self._rects]
        logger.debug("Split %r by %.3fx%.3f, %d remainder(s) kept",
                     rect, footprint_w, footprint_h, len(survivors))
        return survivors

    def prune(self) -> int:
        """Drop every free rectangle fully contained in another one."""
        removed = 0
        for handle in list(self._rects):
            rect = self._rects[handle]
            if any(other_handle != handle and other.contains(rect)
                   for other_handle, other in self._rects.items()):
                del self._rects[handle]
                removed += 1
        return removed

    def clipped(self, right: float, bottom: float) -> List[Dict[str, float]]:
        """Free rectangles cut back to ``right``/``bottom``, as plain dicts."""
        waste = []
        for rect in self._rects.values():
            width = min(rect.x + rect.width, right) - rect.x
            height = min(rect.y + rect.height, bottom) - rect.y
            if width > EPSILON and height > EPSILON:
                waste.append({'x': rect.x, 'y': rect.y, 'width': width, 'height': height})
        return waste
