"""Terminal rendering of region maps and per-region reports."""

from __future__ import annotations

from core import Grid, Region, RegionId, RegionMap


ANSI_RESET = "\x1b[0m"

# black, red, green, yellow, blue, magenta, cyan, white
FG_COLORS = [f"\x1b[{code}m" for code in range(30, 38)]
FG_BRIGHT_COLORS = [f"\x1b[{code}m" for code in range(90, 98)]


def region_color(region_id: RegionId) -> str:
    """Foreground color for a region, cycling through 15 colors.

    Plain black is skipped so regions stay visible on a dark terminal.
    Neighboring regions can still end up with the same color.
    """
    index = region_id % 15
    if index < 7:
        return FG_COLORS[index + 1]
    return FG_BRIGHT_COLORS[index - 7]


def render_regions(grid: Grid, region_map: RegionMap, color: bool = True) -> str:
    """The grid's labels, each colored by the region that owns it."""
    assert (grid.width, grid.height) == (region_map.width, region_map.height)
    lines = [f"[{grid.width},{grid.height}] ="]
    for y, row in enumerate(grid.rows()):
        if color:
            cells = "".join(
                f"{region_color(int(region_map.ids[y, x]))}{label}"
                for x, label in enumerate(row)
            )
            lines.append(f"[{cells}{ANSI_RESET}]")
        else:
            lines.append(f"[{row}]")
    return "\n".join(lines)


def format_region(region: Region, color: bool = True) -> str:
    name = f"{region.id}"
    if color:
        name = f"{region_color(region.id)}{name}{ANSI_RESET}"
    return (
        f"Region {name} {region.label!r} area {region.area}, "
        f"perimeter {region.perimeter}, sides {region.sides}"
    )
