import numpy as np
import pytest

from point_grid import BoundingBox, Grid, InvalidArgumentError, Point3D, PointCloud
from point_grid.sinks import RecordingSink, box_edges, emit_bounding_box, emit_point_cloud


BOX = BoundingBox(Point3D(0.0, 0.0, 0.0), Point3D(4.0, 2.0, 1.0))


def test_point_is_immutable_value():
    p = Point3D(1.0, 2.0, 3.0)

    with pytest.raises(AttributeError):
        p.x = 5.0  # type: ignore[misc]
    assert p == Point3D(1.0, 2.0, 3.0)
    assert len({p, Point3D(1.0, 2.0, 3.0)}) == 1


def test_cloud_to_array():
    cloud = PointCloud.from_xyz([(1, 2, 3), (4, 5, 6)])

    xyz = cloud.to_array()

    assert xyz.shape == (2, 3)
    assert xyz.dtype == np.float64
    assert PointCloud().to_array().shape == (0, 3)


def test_inverted_box_is_rejected():
    with pytest.raises(InvalidArgumentError):
        BoundingBox(Point3D(0, 1, 0), Point3D(1, 0, 1))


def test_box_extent_and_center():
    assert BOX.extent == (4.0, 2.0, 1.0)
    assert BOX.center == Point3D(2.0, 1.0, 0.5)


def test_cell_bounds_cover_box():
    grid = Grid(BOX, 4)

    first = grid.cell_bounds((0, 0, 0))
    last = grid.cell_bounds((3, 3, 3))

    assert first.min == BOX.min
    assert first.max == Point3D(1.0, 0.5, 0.25)
    assert last.max == BOX.max


@pytest.mark.parametrize("index", [(4, 0, 0), (0, -1, 0), (0, 0)])
def test_cell_bounds_out_of_range(index):
    with pytest.raises(InvalidArgumentError):
        Grid(BOX, 4).cell_bounds(index)


@pytest.mark.parametrize("size", [0, -3, 2.5, True, "4"])
def test_grid_rejects_bad_size(size):
    with pytest.raises(InvalidArgumentError):
        Grid(BOX, size)


def test_grid_accepts_numpy_integer():
    grid = Grid(BOX, np.int64(3))

    assert grid.size == 3
    assert type(grid.size) is int


def test_box_edges_are_axis_aligned():
    edges = box_edges(BOX)

    assert len(edges) == 12
    assert len(set(BOX.corners())) == 8
    for start, end in edges:
        diffs = [abs(a - b) for a, b in zip(start.as_tuple(), end.as_tuple())]
        changed = [d for d in diffs if d > 0]
        assert len(changed) == 1
        assert changed[0] in BOX.extent


def test_emit_to_sink():
    cloud = PointCloud.from_xyz([(0, 0, 0), (4, 2, 1)])
    sink = RecordingSink()

    assert emit_point_cloud(sink, cloud) == 2
    assert emit_bounding_box(sink, BOX) == 12

    assert sink.points == list(cloud)
    assert sink.lines[0] == (BOX.min, Point3D(4.0, 0.0, 0.0))
