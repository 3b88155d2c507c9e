"""Shared fixtures for the cutting planner tests."""

import itertools

import pytest

from cutplan.models import GrainConstraint, OptimizationSettings, PartSpec
from cutplan.packing.validation import find_overlaps


@pytest.fixture
def make_part():
    """Factory for PartSpec objects with unique ids."""
    counter = itertools.count(1)

    def _make(width, height, name=None, quantity=1, grain=GrainConstraint.FREE,
              material='3/4" Plywood', cabinet_id="cab-1"):
        n = next(counter)
        return PartSpec(
            part_id=f"part-{n}",
            name=name or f"Part {n}",
            width=width,
            height=height,
            quantity=quantity,
            grain=grain,
            material=material,
            cabinet_id=cabinet_id,
        )

    return _make


@pytest.fixture
def standard_settings() -> OptimizationSettings:
    """4'x8' sheet with a 1/8" kerf."""
    return OptimizationSettings(2440, 1220, saw_kerf=3.175, trim_margin=0)


def assert_sound(result):
    """No overlaps, nothing outside the usable area, fixed grain kept on its axis."""
    settings = result.settings
    low_x, low_y = settings.origin
    high_x = low_x + settings.usable_width
    high_y = low_y + settings.usable_height
    for sheet in result.sheets:
        assert find_overlaps(sheet) == []
        for p in sheet.placements:
            assert p.x >= low_x - 1e-6
            assert p.y >= low_y - 1e-6
            assert p.x + p.width <= high_x + 1e-6
            assert p.y + p.height <= high_y + 1e-6
            assert p.sheet_index == sheet.sheet_index
            if p.grain is not GrainConstraint.FREE:
                assert p.rotated is False
                assert p.grain.matches_shape(p.width, p.height)
