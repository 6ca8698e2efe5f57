from .domain_entities import (
    Bucket,
    BoundingBox,
    Grid,
    GridIndex,
    GridPartition,
    Point3D,
    PointCloud,
)
from .errors import EmptyInputError, ErrorCode, InvalidArgumentError, ParseError, PointGridError
from .loader import load_point_cloud, parse_point_cloud
from .bucketing import bucket_points, compute_bounding_box, partition

__all__ = [
    'Point3D',
    'PointCloud',
    'BoundingBox',
    'Grid',
    'GridIndex',
    'Bucket',
    'GridPartition',
    'PointGridError',
    'ParseError',
    'EmptyInputError',
    'InvalidArgumentError',
    'ErrorCode',
    'load_point_cloud',
    'parse_point_cloud',
    'compute_bounding_box',
    'bucket_points',
    'partition',
]
