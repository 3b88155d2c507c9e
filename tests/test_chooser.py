"""Tests for orientation candidates and Best Short-Side Fit selection."""

import pytest

from cutplan.models import GrainConstraint, PartInstance, PartSpec
from cutplan.packing.chooser import choose_placement, fits_sheet, orientations
from cutplan.packing.free_space import FreeSpace


def instance(width, height, grain=GrainConstraint.FREE):
    return PartInstance(PartSpec("p", "Part", width, height, grain=grain), 0)


class TestOrientations:
    def test_free_part_has_both_orientations_unrotated_first(self):
        assert orientations(instance(100, 300)) == [(100, 300, False), (300, 100, True)]

    def test_square_free_part_is_never_rotated(self):
        assert orientations(instance(200, 200)) == [(200, 200, False)]

    @pytest.mark.parametrize("grain, width, height", [
        (GrainConstraint.FIXED_VERTICAL, 100, 300),
        (GrainConstraint.FIXED_HORIZONTAL, 300, 100),
    ])
    def test_fixed_grain_keeps_nominal_orientation(self, grain, width, height):
        assert orientations(instance(width, height, grain)) == [(width, height, False)]


class TestFitsSheet:
    def test_free_part_fits_when_rotated(self):
        assert fits_sheet(instance(180, 400), 500, 200)

    def test_fixed_part_must_fit_as_given(self):
        assert not fits_sheet(instance(180, 400, GrainConstraint.FIXED_VERTICAL), 500, 200)
        assert fits_sheet(instance(400, 180, GrainConstraint.FIXED_HORIZONTAL), 500, 200)

    def test_exact_fit(self):
        assert fits_sheet(instance(500, 200, GrainConstraint.FIXED_HORIZONTAL), 500, 200)

    def test_too_large_both_ways(self):
        assert not fits_sheet(instance(3000, 500), 2440, 1220)


class TestChoosePlacement:
    def test_prefers_smallest_short_side_leftover(self):
        space = FreeSpace(0, 0, 500, 500)
        space.insert(600, 0, 210, 300)
        candidate = choose_placement(instance(200, 100, GrainConstraint.FIXED_HORIZONTAL), space, 0)
        assert candidate.handle == 1
        assert (candidate.x, candidate.y) == (600, 0)
        assert candidate.score == (10, 200)

    def test_long_side_breaks_short_side_ties(self):
        space = FreeSpace(0, 0, 150, 400)
        space.insert(200, 0, 150, 200)
        candidate = choose_placement(instance(100, 100), space, 0)
        assert candidate.handle == 1

    def test_insertion_order_breaks_full_ties(self):
        space = FreeSpace(0, 0, 300, 300)
        space.insert(400, 0, 300, 300)
        candidate = choose_placement(instance(100, 100), space, 0)
        assert candidate.handle == 0

    def test_unrotated_wins_equal_scores(self):
        space = FreeSpace(0, 0, 300, 300)
        candidate = choose_placement(instance(100, 200), space, 0)
        assert candidate.rotated is False
        assert (candidate.width, candidate.height) == (100, 200)

    def test_rotates_free_part_when_only_rotation_fits(self):
        space = FreeSpace(0, 0, 320, 120)
        candidate = choose_placement(instance(100, 300), space, 0)
        assert candidate.rotated is True
        assert (candidate.width, candidate.height) == (300, 100)

    def test_fixed_grain_part_is_not_rotated_to_fit(self):
        space = FreeSpace(0, 0, 320, 120)
        assert choose_placement(instance(100, 300, GrainConstraint.FIXED_VERTICAL), space, 0) is None

    def test_kerf_inflates_footprint_but_not_placed_size(self):
        space = FreeSpace(0, 0, 105, 200)
        candidate = choose_placement(instance(100, 100), space, 5)
        assert (candidate.width, candidate.height) == (100, 100)
        assert (candidate.footprint_w, candidate.footprint_h) == (105, 105)

    def test_kerf_can_prevent_a_fit(self):
        space = FreeSpace(0, 0, 104, 200)
        assert choose_placement(instance(100, 100), space, 5) is None

    def test_empty_space_yields_nothing(self):
        space = FreeSpace(0, 0, 100, 100)
        space.split(0, 100, 100)
        assert choose_placement(instance(10, 10), space, 0) is None
