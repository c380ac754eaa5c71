"""Area, perimeter and side counts of segmented regions, and the fence prices built on them."""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterable

import numpy as np

from core import CARDINALS, Direction, Grid, Pos, Region, RegionMap
from segmentation import segment

logger = logging.getLogger(__name__)


def measure(grid: Grid, region_map: RegionMap, regions: list[Region]) -> list[Region]:
    """Fill in area, perimeter and sides of every region, in place.

    One row-major pass over the grid. A cell edge is exposed when the cell on
    the other side is off the grid or in another region. Each exposed edge adds
    to the perimeter; it only starts a new side when the previous cell along
    that side (one step perpendicular to the edge) does not continue it, that
    is, when that cell is outside the region or has no exposed edge facing the
    same way.
    """
    assert (region_map.width, region_map.height) == (grid.width, grid.height)

    area = np.zeros(len(regions), dtype=np.int64)
    perimeter = np.zeros(len(regions), dtype=np.int64)
    sides = np.zeros(len(regions), dtype=np.int64)

    for pos in grid.positions():
        rid = region_map.get(pos)
        area[rid] += 1
        for direction in CARDINALS:
            if not _exposed(region_map, pos, direction):
                continue
            perimeter[rid] += 1
            if not _continues_side(region_map, pos, direction):
                sides[rid] += 1

    for region in regions:
        region.area = int(area[region.id])
        region.perimeter = int(perimeter[region.id])
        region.sides = int(sides[region.id])
        _check_region(region)

    total_area = sum(region.area for region in regions)
    assert total_area == grid.width * grid.height, (
        f"regions cover {total_area} cells of a {grid.width}x{grid.height} grid"
    )
    return regions


def _exposed(region_map: RegionMap, pos: Pos, direction: Direction) -> bool:
    return not region_map.same_region(pos, pos + direction)


def _continues_side(region_map: RegionMap, pos: Pos, direction: Direction) -> bool:
    """Check whether the exposed edge of `pos` facing `direction` extends a side
    already counted at the neighboring cell."""
    previous = pos + direction.perpendicular()
    return region_map.same_region(pos, previous) and _exposed(
        region_map, previous, direction
    )


def _check_region(region: Region) -> None:
    assert region.area == len(region.cells), (
        f"region {region.id} measured {region.area} cells but holds {len(region.cells)}"
    )
    if region.area == 1:
        assert region.perimeter == 4 and region.sides == 4
    if region.area == 2:
        assert region.perimeter == 6 and region.sides == 4


def fence_price(regions: Iterable[Region]) -> int:
    """Total of area times perimeter over all regions."""
    return sum(region.price for region in regions)


def discounted_fence_price(regions: Iterable[Region]) -> int:
    """Total of area times number of sides over all regions."""
    return sum(region.discounted_price for region in regions)


@dataclass
class Analysis:
    grid: Grid
    region_map: RegionMap
    regions: list[Region]

    @property
    def fence_price(self) -> int:
        return fence_price(self.regions)

    @property
    def discounted_fence_price(self) -> int:
        return discounted_fence_price(self.regions)


def analyze(grid: Grid) -> Analysis:
    """Segment the grid and measure every region."""
    region_map, regions = segment(grid)
    measure(grid, region_map, regions)
    analysis = Analysis(grid=grid, region_map=region_map, regions=regions)
    logger.info(
        "fence price %d, discounted fence price %d",
        analysis.fence_price,
        analysis.discounted_fence_price,
    )
    return analysis
