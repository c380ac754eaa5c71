"""Splitting a grid into maximal contiguous same-label regions."""

from __future__ import annotations
import logging
from dataclasses import dataclass

from core import Grid, Pos, Region, RegionMap

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Span:
    """A pending piece of flood-fill work.

    Columns x_min..x_max (inclusive) of row y are where a neighboring run
    touched this row. They are only places to probe for matching cells: the
    run found from each probe is re-derived from the row itself, since a run
    in this row may be narrower or wider than the one that pushed the span.
    """

    y: int
    x_min: int
    x_max: int


def segment(grid: Grid) -> tuple[RegionMap, list[Region]]:
    """Label every cell of the grid with the id of its region.

    Cells are visited in row-major order; every cell not yet claimed starts a
    new region whose id is the next index in the returned list.
    """
    region_map = RegionMap.empty(grid.width, grid.height)
    regions: list[Region] = []

    for pos in grid.positions():
        if region_map.is_assigned(pos):
            continue
        region = Region(id=len(regions), label=grid.get(pos))
        regions.append(region)
        _flood_fill(grid, region_map, region, pos)
        logger.debug(
            "region %d: label %r, %d cells, seeded at (%d, %d)",
            region.id,
            region.label,
            len(region.cells),
            pos.x,
            pos.y,
        )

    assert region_map.is_complete(), "segmentation left cells unassigned"
    logger.info(
        "%dx%d grid has %d contiguous regions", grid.width, grid.height, len(regions)
    )
    return region_map, regions


def _flood_fill(grid: Grid, region_map: RegionMap, region: Region, seed: Pos) -> None:
    """Claim for `region` every cell 4-connected to `seed` with the same label."""
    stack = [Span(seed.y, seed.x, seed.x)]
    while stack:
        span = stack.pop()
        x = span.x_min
        while x <= span.x_max:
            pos = Pos(x, span.y)
            if region_map.is_assigned(pos) or grid.get(pos) != region.label:
                x += 1
                continue
            x1, x2 = _claim_run(grid, region_map, region, pos)
            for y in (span.y - 1, span.y + 1):
                if 0 <= y < grid.height:
                    stack.append(Span(y, x1, x2))
            # Everything up to x2 now belongs to this run
            x = x2 + 1


def _claim_run(
    grid: Grid, region_map: RegionMap, region: Region, start: Pos
) -> tuple[int, int]:
    """Claim the horizontal run of unclaimed matching cells through `start`.

    Returns the first and last column of the run.
    """
    y = start.y
    x1 = start.x
    while x1 > 0 and _claimable(grid, region_map, region, Pos(x1 - 1, y)):
        x1 -= 1
    x2 = start.x
    while x2 < grid.width - 1 and _claimable(grid, region_map, region, Pos(x2 + 1, y)):
        x2 += 1

    for x in range(x1, x2 + 1):
        pos = Pos(x, y)
        region_map.assign(pos, region.id)
        region.cells.append(pos)
    return x1, x2


def _claimable(grid: Grid, region_map: RegionMap, region: Region, pos: Pos) -> bool:
    return not region_map.is_assigned(pos) and grid.get(pos) == region.label
