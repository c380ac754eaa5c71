"""Core data structures: positions, directions, the label grid and the region map."""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Sequence

import numpy as np


RegionId = int

# Region map value for a cell no region has claimed yet
UNASSIGNED: RegionId = -1


@dataclass(frozen=True)
class Pos:
    x: int
    y: int

    def __add__(self, direction: Direction) -> Pos:
        dx, dy = direction.value
        return Pos(self.x + dx, self.y + dy)


class Direction(Enum):
    # (dx, dy), with y growing downwards
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def perpendicular(self) -> Direction:
        """The direction a quarter turn counter-clockwise from this one."""
        dx, dy = self.value
        return Direction((dy, -dx))


CARDINALS: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)


@dataclass(frozen=True, eq=False)
class Grid:
    """A rectangular, read-only array of single-symbol labels."""

    labels: np.ndarray

    def __post_init__(self) -> None:
        assert self.labels.ndim == 2, "grid labels must be two-dimensional"
        self.labels.flags.writeable = False

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> Grid:
        return cls(np.array([list(row) for row in rows], dtype=str))

    @property
    def width(self) -> int:
        return int(self.labels.shape[1])

    @property
    def height(self) -> int:
        return int(self.labels.shape[0])

    def in_bounds(self, pos: Pos) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def get(self, pos: Pos) -> str:
        return str(self.labels[pos.y, pos.x])

    def checked_get(self, pos: Pos) -> str | None:
        """Get the label at pos, or None if pos is off the grid."""
        if not self.in_bounds(pos):
            return None
        return self.get(pos)

    def values_equal(self, a: Pos, b: Pos) -> bool:
        """Check whether two cells carry the same label. Off-grid cells never match."""
        if not (self.in_bounds(a) and self.in_bounds(b)):
            return False
        return self.get(a) == self.get(b)

    def positions(self) -> Iterator[Pos]:
        """All positions in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield Pos(x, y)

    def rows(self) -> list[str]:
        return ["".join(row) for row in self.labels.tolist()]


@dataclass(eq=False)
class RegionMap:
    """For every grid cell, the id of the region that owns it."""

    ids: np.ndarray

    @classmethod
    def empty(cls, width: int, height: int) -> RegionMap:
        return cls(np.full((height, width), UNASSIGNED, dtype=np.int32))

    @property
    def width(self) -> int:
        return int(self.ids.shape[1])

    @property
    def height(self) -> int:
        return int(self.ids.shape[0])

    def in_bounds(self, pos: Pos) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def get(self, pos: Pos) -> RegionId:
        return int(self.ids[pos.y, pos.x])

    def checked_get(self, pos: Pos) -> RegionId | None:
        if not self.in_bounds(pos):
            return None
        return self.get(pos)

    def is_assigned(self, pos: Pos) -> bool:
        return self.get(pos) != UNASSIGNED

    def assign(self, pos: Pos, region_id: RegionId) -> None:
        assert region_id >= 0, f"invalid region id {region_id}"
        assert not self.is_assigned(pos), (
            f"cell ({pos.x}, {pos.y}) already belongs to region {self.get(pos)}"
        )
        self.ids[pos.y, pos.x] = region_id

    def is_complete(self) -> bool:
        return bool((self.ids != UNASSIGNED).all())

    def same_region(self, a: Pos, b: Pos) -> bool:
        """Check whether two cells share a region. Off-grid cells belong to none."""
        if not (self.in_bounds(a) and self.in_bounds(b)):
            return False
        return self.get(a) == self.get(b)


@dataclass
class Region:
    """A maximal 4-connected set of cells sharing one label."""

    id: RegionId
    label: str
    cells: list[Pos] = field(default_factory=list)

    # Filled in by measurement
    area: int = 0
    perimeter: int = 0
    sides: int = 0

    def contains(self, pos: Pos) -> bool:
        """Check if position is inside the region."""
        return pos in self.cells

    @property
    def price(self) -> int:
        return self.area * self.perimeter

    @property
    def discounted_price(self) -> int:
        return self.area * self.sides
