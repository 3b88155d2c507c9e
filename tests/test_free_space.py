"""Tests for the free rectangle arena and the guillotine split."""

import pytest
from rectpack.geometry import Rectangle

from cutplan.packing.free_space import FreeSpace, choose_split


def as_tuples(free_space):
    return [(r.x, r.y, r.width, r.height) for r in free_space]


# =============================================================================
# Split rule
# =============================================================================


class TestChooseSplit:
    def test_vertical_cut_when_right_strip_is_larger(self):
        pieces = choose_split(Rectangle(0, 0, 100, 50), 30, 40)
        assert pieces == [(30, 0, 70, 50), (0, 40, 30, 10)]

    def test_horizontal_cut_when_bottom_strip_is_larger(self):
        pieces = choose_split(Rectangle(0, 0, 100, 50), 90, 10)
        assert pieces == [(90, 0, 10, 10), (0, 10, 100, 40)]

    def test_tie_prefers_horizontal_cut(self):
        pieces = choose_split(Rectangle(0, 0, 100, 100), 50, 50)
        assert pieces == [(50, 0, 50, 50), (0, 50, 100, 50)]

    def test_offsets_follow_rectangle_origin(self):
        pieces = choose_split(Rectangle(200, 300, 100, 50), 30, 40)
        assert pieces == [(230, 300, 70, 50), (200, 340, 30, 10)]


# =============================================================================
# Arena
# =============================================================================


class TestFreeSpace:
    def test_starts_with_one_rectangle(self):
        space = FreeSpace(10, 10, 980, 480)
        (rect,) = space.rectangles()
        assert isinstance(rect, Rectangle)
        assert (rect.x, rect.y, rect.width, rect.height) == (10, 10, 980, 480)
        assert rect.rid == 0
        assert 0 in space

    def test_zero_area_rectangles_are_not_stored(self):
        space = FreeSpace(0, 0, 100, 100)
        assert space.insert(0, 0, 0, 50) is None
        assert space.insert(0, 0, 50, 1e-9) is None
        assert len(space) == 1

    def test_split_replaces_rectangle_with_remainders(self):
        space = FreeSpace(0, 0, 100, 50)
        handles = space.split(0, 30, 40)
        assert handles == [1, 2]
        assert 0 not in space
        assert as_tuples(space) == [(30, 0, 70, 50), (0, 40, 30, 10)]

    def test_exact_fit_consumes_rectangle(self):
        space = FreeSpace(0, 0, 100, 50)
        assert space.split(0, 100, 50) == []
        assert len(space) == 0

    def test_full_width_footprint_leaves_only_bottom(self):
        space = FreeSpace(0, 0, 100, 50)
        space.split(0, 100, 20)
        assert as_tuples(space) == [(0, 20, 100, 30)]

    def test_handles_keep_insertion_order_after_removal(self):
        space = FreeSpace(0, 0, 100, 50)
        space.split(0, 30, 40)
        space.split(1, 70, 10)
        assert [r.rid for r in space] == [2, 3]

    def test_split_rejects_oversized_footprint(self):
        space = FreeSpace(0, 0, 100, 50)
        with pytest.raises(ValueError, match="does not fit"):
            space.split(0, 101, 10)
        assert 0 in space

    def test_prune_removes_contained_rectangles(self):
        space = FreeSpace(0, 0, 100, 100)
        space.insert(10, 10, 20, 20)
        space.insert(150, 0, 20, 20)
        assert space.prune() == 1
        assert as_tuples(space) == [(0, 0, 100, 100), (150, 0, 20, 20)]

    def test_prune_keeps_one_of_identical_rectangles(self):
        space = FreeSpace(0, 0, 100, 100)
        space.insert(0, 0, 100, 100)
        space.prune()
        assert len(space) == 1

    def test_clipped_trims_kerf_allowance(self):
        space = FreeSpace(0, 0, 103, 53)
        assert space.clipped(100, 50) == [{'x': 0, 'y': 0, 'width': 100, 'height': 50}]

    def test_clipped_drops_rectangles_beyond_bounds(self):
        space = FreeSpace(0, 0, 100, 50)
        space.insert(100, 0, 3, 50)
        assert space.clipped(100, 50) == [{'x': 0, 'y': 0, 'width': 100, 'height': 50}]
