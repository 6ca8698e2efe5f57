from __future__ import annotations

import logging
from typing import List, Protocol, Tuple

from .domain_entities import BoundingBox, Point3D, PointCloud

logger = logging.getLogger(__name__)

Segment = Tuple[Point3D, Point3D]


class GeometrySink(Protocol):
    def emit_point(self, point: Point3D) -> None:
        ...

    def emit_line(self, start: Point3D, end: Point3D) -> None:
        ...


def box_edges(box: BoundingBox) -> List[Segment]:
    c = box.corners()
    edges: List[Segment] = []
    for i in range(4):
        edges.append((c[i], c[(i + 1) % 4]))          # bottom
        edges.append((c[i + 4], c[(i + 1) % 4 + 4]))  # top
        edges.append((c[i], c[i + 4]))                # vertical
    return edges


def emit_point_cloud(sink: GeometrySink, cloud: PointCloud) -> int:
    for p in cloud:
        sink.emit_point(p)
    return len(cloud)


def emit_bounding_box(sink: GeometrySink, box: BoundingBox) -> int:
    edges = box_edges(box)
    for start, end in edges:
        sink.emit_line(start, end)
    return len(edges)


class LoggingSink:
    def __init__(self, log: logging.Logger | None = None):
        self.log = log or logger

    def emit_point(self, point: Point3D) -> None:
        self.log.debug(f"point {point.x} {point.y} {point.z}")

    def emit_line(self, start: Point3D, end: Point3D) -> None:
        self.log.debug(f"line {start.as_tuple()} -> {end.as_tuple()}")


class RecordingSink:
    def __init__(self):
        self.points: List[Point3D] = []
        self.lines: List[Segment] = []

    def emit_point(self, point: Point3D) -> None:
        self.points.append(point)

    def emit_line(self, start: Point3D, end: Point3D) -> None:
        self.lines.append((start, end))
