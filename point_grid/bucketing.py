from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, List, Optional

import numpy as np

from .domain_entities import (
    Bucket,
    BoundingBox,
    Grid,
    GridIndex,
    GridPartition,
    Point3D,
    PointCloud,
    check_grid_size,
)
from .errors import EmptyInputError

logger = logging.getLogger(__name__)


def compute_bounding_box(cloud: PointCloud) -> BoundingBox:
    if len(cloud) == 0:
        raise EmptyInputError("cannot compute a bounding box of an empty point cloud")

    xyz = cloud.to_array()
    lo = xyz.min(axis=0)
    hi = xyz.max(axis=0)
    return BoundingBox(
        Point3D(float(lo[0]), float(lo[1]), float(lo[2])),
        Point3D(float(hi[0]), float(hi[1]), float(hi[2])),
    )


def grid_indices(xyz: np.ndarray, grid: Grid) -> np.ndarray:
    """(n, 3) int64 cell indices for the rows of ``xyz``, clamped into the grid."""
    half_mins = np.asarray(grid.box.min.as_tuple(), dtype=np.float64) / 2.0
    half_cell = np.asarray(grid.half_cell_size, dtype=np.float64)
    flat = half_cell <= 0.0

    # halved terms keep the offset finite when max - min overflows
    q = (xyz / 2.0 - half_mins) / np.where(flat, 1.0, half_cell)
    q[:, flat] = 0.0
    return np.clip(np.floor(q), 0, grid.size - 1).astype(np.int64)


def _bucket_on_grid(cloud: PointCloud, grid: Grid) -> Dict[GridIndex, Bucket]:
    if len(cloud) == 0:
        return {}

    idx = grid_indices(cloud.to_array(), grid)

    # dict keeps first-seen order, so enumeration is stable for a given input
    members: Dict[GridIndex, List[Point3D]] = defaultdict(list)
    for point, (ix, iy, iz) in zip(cloud, idx.tolist()):
        members[(ix, iy, iz)].append(point)

    return {key: Bucket(key, tuple(pts)) for key, pts in members.items()}


def bucket_points(cloud: PointCloud, box: BoundingBox, grid_size: int) -> Dict[GridIndex, Bucket]:
    return _bucket_on_grid(cloud, Grid(box, grid_size))


def partition(cloud: PointCloud, grid_size: int, box: Optional[BoundingBox] = None) -> GridPartition:
    grid_size = check_grid_size(grid_size)
    if box is None:
        box = compute_bounding_box(cloud)
    grid = Grid(box, grid_size)
    buckets = _bucket_on_grid(cloud, grid)
    logger.debug(f"Bucketed {len(cloud)} points into {len(buckets)} of {grid_size ** 3} cells")
    return GridPartition(grid, buckets)
