from core import Grid, Pos, Region, RegionMap


def make_grid(*rows: str) -> Grid:
    """Build a grid from its rows. Useful for tests."""
    return Grid.from_rows(rows)


def region_at(region_map: RegionMap, regions: list[Region], x: int, y: int) -> Region:
    """The region owning cell (x, y)."""
    return regions[region_map.get(Pos(x, y))]


REFERENCE_GARDEN = (
    "RRRRIICCFF",
    "RRRRIICCCF",
    "VVRRRCCFFF",
    "VVRCCCJFFF",
    "VVVVCJJCFE",
    "VVIVCCJJEE",
    "VVIIICJJEE",
    "MIIIIIJJEE",
    "MIIISIJEEE",
    "MMMISSJEEE",
)
