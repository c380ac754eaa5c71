"""Tests for terminal rendering."""

from core import Region
from render import ANSI_RESET, FG_BRIGHT_COLORS, FG_COLORS, format_region, region_color, render_regions
from segmentation import segment
from test_utils import make_grid


class TestRegionColor:
    def test_skips_black(self) -> None:
        assert region_color(0) == FG_COLORS[1]
        assert FG_COLORS[0] not in {region_color(i) for i in range(30)}

    def test_uses_bright_colors_after_the_normal_ones(self) -> None:
        assert region_color(6) == FG_COLORS[7]
        assert region_color(7) == FG_BRIGHT_COLORS[0]
        assert region_color(14) == FG_BRIGHT_COLORS[7]

    def test_cycles_every_fifteen_regions(self) -> None:
        assert region_color(15) == region_color(0)
        assert len({region_color(i) for i in range(15)}) == 15


class TestRenderRegions:
    def test_plain_rendering(self) -> None:
        grid = make_grid("AB", "AA")
        region_map, _ = segment(grid)
        assert render_regions(grid, region_map, color=False) == "[2,2] =\n[AB]\n[AA]"

    def test_colored_rendering_marks_each_cell(self) -> None:
        grid = make_grid("AB")
        region_map, _ = segment(grid)
        lines = render_regions(grid, region_map).splitlines()
        assert lines[1] == f"[{region_color(0)}A{region_color(1)}B{ANSI_RESET}]"


class TestFormatRegion:
    def test_plain(self) -> None:
        region = Region(id=3, label="C", area=4, perimeter=10, sides=8)
        assert format_region(region, color=False) == (
            "Region 3 'C' area 4, perimeter 10, sides 8"
        )

    def test_colored_id(self) -> None:
        region = Region(id=3, label="C")
        assert f"{region_color(3)}3{ANSI_RESET}" in format_region(region)
