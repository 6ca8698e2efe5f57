from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, List, Mapping, Tuple

import numpy as np

from .errors import InvalidArgumentError


GridIndex = Tuple[int, int, int]


@dataclass(frozen=True)
class Point3D:
    x: float
    y: float
    z: float

    def as_tuple(self) -> Tuple[float, float, float]:
        return self.x, self.y, self.z


@dataclass(frozen=True)
class PointCloud:
    """Ordered, immutable sequence of points; order is file order."""

    points: Tuple[Point3D, ...] = ()

    @classmethod
    def from_points(cls, points: Iterable[Point3D]) -> PointCloud:
        return cls(tuple(points))

    @classmethod
    def from_xyz(cls, coords: Iterable[Tuple[float, float, float]]) -> PointCloud:
        return cls(tuple(Point3D(float(x), float(y), float(z)) for x, y, z in coords))

    def to_array(self) -> np.ndarray:
        if not self.points:
            return np.empty((0, 3), dtype=np.float64)
        return np.array([p.as_tuple() for p in self.points], dtype=np.float64)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point3D]:
        return iter(self.points)

    def __getitem__(self, i: int) -> Point3D:
        return self.points[i]


@dataclass(frozen=True)
class BoundingBox:
    min: Point3D
    max: Point3D

    def __post_init__(self) -> None:
        for axis, lo, hi in zip('xyz', self.min.as_tuple(), self.max.as_tuple()):
            if lo > hi:
                raise InvalidArgumentError(f"bounding box min > max on axis {axis}: {lo} > {hi}")

    @property
    def extent(self) -> Tuple[float, float, float]:
        return (
            self.max.x - self.min.x,
            self.max.y - self.min.y,
            self.max.z - self.min.z,
        )

    @property
    def center(self) -> Point3D:
        return Point3D(
            (self.min.x + self.max.x) / 2.0,
            (self.min.y + self.max.y) / 2.0,
            (self.min.z + self.max.z) / 2.0,
        )

    def contains(self, p: Point3D) -> bool:
        return (
            self.min.x <= p.x <= self.max.x
            and self.min.y <= p.y <= self.max.y
            and self.min.z <= p.z <= self.max.z
        )

    def corners(self) -> List[Point3D]:
        """Bottom face (z = min) counter-clockwise from min, then the top face in the same order."""
        lo, hi = self.min, self.max
        return [
            Point3D(lo.x, lo.y, lo.z),
            Point3D(hi.x, lo.y, lo.z),
            Point3D(hi.x, hi.y, lo.z),
            Point3D(lo.x, hi.y, lo.z),
            Point3D(lo.x, lo.y, hi.z),
            Point3D(hi.x, lo.y, hi.z),
            Point3D(hi.x, hi.y, hi.z),
            Point3D(lo.x, hi.y, hi.z),
        ]


def check_grid_size(size: int) -> int:
    if isinstance(size, bool) or not isinstance(size, numbers.Integral) or size <= 0:
        raise InvalidArgumentError(f"grid size must be a positive integer, got {size!r}")
    return int(size)


@dataclass(frozen=True)
class Grid:
    """N x N x N uniform subdivision of a bounding box."""

    box: BoundingBox
    size: int

    def __post_init__(self) -> None:
        object.__setattr__(self, 'size', check_grid_size(self.size))

    @property
    def cell_size(self) -> Tuple[float, float, float]:
        dx, dy, dz = self.box.extent
        return dx / self.size, dy / self.size, dz / self.size

    @property
    def half_cell_size(self) -> Tuple[float, float, float]:
        """Cell size computed on halved coordinates; finite for any finite box."""
        lo, hi = self.box.min.as_tuple(), self.box.max.as_tuple()
        return tuple((b / 2.0 - a / 2.0) / self.size for a, b in zip(lo, hi))

    def _axis_index(self, coord: float, lo: float, half_cell: float) -> int:
        # flat axis: every point sits in cell 0
        if half_cell <= 0.0:
            return 0
        q = (coord / 2.0 - lo / 2.0) / half_cell
        if q >= self.size:
            return self.size - 1
        if q < 0.0:
            return 0
        return min(math.floor(q), self.size - 1)

    def index_of(self, p: Point3D) -> GridIndex:
        cx, cy, cz = self.half_cell_size
        lo = self.box.min
        return (
            self._axis_index(p.x, lo.x, cx),
            self._axis_index(p.y, lo.y, cy),
            self._axis_index(p.z, lo.z, cz),
        )

    def cell_bounds(self, index: GridIndex) -> BoundingBox:
        if len(index) != 3 or any(i < 0 or i >= self.size for i in index):
            raise InvalidArgumentError(f"grid index {index!r} outside 0..{self.size - 1}")
        lo_pt, hi_pt = self.box.min.as_tuple(), self.box.max.as_tuple()
        lo: List[float] = []
        hi: List[float] = []
        for i, a, b, cell in zip(index, lo_pt, hi_pt, self.cell_size):
            lo.append(a + i * cell)
            hi.append(b if i == self.size - 1 else a + (i + 1) * cell)
        return BoundingBox(Point3D(*lo), Point3D(*hi))


@dataclass(frozen=True)
class Bucket:
    index: GridIndex
    points: Tuple[Point3D, ...]

    def __len__(self) -> int:
        return len(self.points)


@dataclass(frozen=True)
class GridPartition:
    grid: Grid
    buckets: Mapping[GridIndex, Bucket]

    def __post_init__(self) -> None:
        if not isinstance(self.buckets, MappingProxyType):
            object.__setattr__(self, 'buckets', MappingProxyType(dict(self.buckets)))

    @property
    def box(self) -> BoundingBox:
        return self.grid.box

    @property
    def point_count(self) -> int:
        return sum(len(b) for b in self.buckets.values())

    def sorted_buckets(self) -> List[Bucket]:
        return [self.buckets[k] for k in sorted(self.buckets)]

    def clusters(self) -> List[List[Point3D]]:
        return [list(b.points) for b in self.sorted_buckets()]

    def __len__(self) -> int:
        return len(self.buckets)
