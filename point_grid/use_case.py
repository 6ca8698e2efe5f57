import logging
from typing import Optional

from .bucketing import partition
from .config import settings
from .contracts import BoxSummary, BucketSummary, GridReport, GridRequest
from .domain_entities import GridPartition
from .errors import EmptyInputError
from .loader import load_point_cloud
from .sinks import GeometrySink, emit_bounding_box, emit_point_cloud

logger = logging.getLogger(__name__)


def partition_to_report(path: str, part: GridPartition, *, include_points: bool = False) -> GridReport:
    box = part.box
    buckets = [
        BucketSummary(
            index=list(b.index),
            count=len(b),
            points=[list(p.as_tuple()) for p in b.points] if include_points else None,
        )
        for b in part.sorted_buckets()
    ]
    return GridReport(
        path=path,
        point_count=part.point_count,
        grid_size=part.grid.size,
        bounding_box=BoxSummary(
            min=list(box.min.as_tuple()),
            max=list(box.max.as_tuple()),
            extent=list(box.extent),
        ),
        cell_size=list(part.grid.cell_size),
        bucket_count=len(part),
        buckets=buckets,
    )


class BuildPointGridUseCase:
    def __init__(self, sink: Optional[GeometrySink] = None, *, encoding: Optional[str] = None):
        self.sink = sink
        self.encoding = encoding or settings.encoding

    def execute(self, request: GridRequest) -> GridReport:
        cloud = load_point_cloud(request.path, encoding=self.encoding)
        if len(cloud) == 0:
            raise EmptyInputError(f"No points loaded from {request.path}")
        logger.info(f"Loaded {len(cloud)} points from {request.path}")

        part = partition(cloud, request.grid_size)

        if request.emit_geometry and self.sink is not None:
            n_points = emit_point_cloud(self.sink, cloud)
            n_lines = emit_bounding_box(self.sink, part.box)
            logger.info(f"Emitted {n_points} points and {n_lines} box edges")

        logger.info(f"Generated {len(part)} buckets on a {request.grid_size}^3 grid")
        return partition_to_report(request.path, part, include_points=request.include_points)
