from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .config import settings


Vec3 = List[float]


class GridRequest(BaseModel):
    """Transport-agnostic request for gridding one point-cloud file."""

    model_config = ConfigDict(extra='forbid')

    path: str = Field(min_length=1)
    grid_size: int = Field(default_factory=lambda: settings.grid_size)
    include_points: bool = False
    emit_geometry: bool = False


class BoxSummary(BaseModel):
    min: Vec3
    max: Vec3
    extent: Vec3


class BucketSummary(BaseModel):
    index: List[int]
    count: int
    points: Optional[List[Vec3]] = None


class GridReport(BaseModel):
    model_config = ConfigDict(extra='forbid')

    report_version: str = 'v1'

    path: str
    point_count: int
    grid_size: int
    bounding_box: BoxSummary
    cell_size: Vec3
    bucket_count: int
    buckets: List[BucketSummary] = Field(default_factory=list)
