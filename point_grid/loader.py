"""Reader for the ASCII point-cloud format (PLY-style header + one vertex per line).

Only the vertex count declaration and the header sentinel are interpreted; any other
header line is ignored, and only the first three fields of a data line are read.
"""
from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from .config import settings
from .domain_entities import Point3D, PointCloud
from .errors import ParseError

logger = logging.getLogger(__name__)

END_HEADER = 'end_header'
VERTEX_DECLARATION = ('element', 'vertex')


def _parse_vertex_count(tokens: Sequence[str], line_no: int, line: str) -> int:
    if len(tokens) != 3:
        raise ParseError("malformed vertex count declaration", line_no=line_no, line=line)
    try:
        count = int(tokens[2])
    except ValueError:
        raise ParseError(f"vertex count is not an integer: {tokens[2]!r}", line_no=line_no, line=line) from None
    if count < 0:
        raise ParseError(f"vertex count is negative: {count}", line_no=line_no, line=line)
    return count


def _parse_point(tokens: Sequence[str], line_no: int, line: str) -> Point3D:
    coords: List[float] = []
    for tok in tokens[:3]:
        try:
            v = float(tok)
        except ValueError:
            raise ParseError(f"bad coordinate {tok!r}", line_no=line_no, line=line) from None
        if not math.isfinite(v):
            raise ParseError(f"non-finite coordinate {tok!r}", line_no=line_no, line=line)
        coords.append(v)
    return Point3D(coords[0], coords[1], coords[2])


def parse_point_cloud(lines: Iterable[str]) -> PointCloud:
    declared = 0
    header_done = False
    skipped = 0
    points: List[Point3D] = []

    for line_no, raw in enumerate(lines, start=1):
        line = raw.rstrip('\r\n')
        tokens = line.split()

        if not header_done:
            if line.strip() == END_HEADER:
                header_done = True
            elif tuple(tokens[:2]) == VERTEX_DECLARATION:
                declared = _parse_vertex_count(tokens, line_no, line)
            continue

        if len(points) >= declared:
            break
        if len(tokens) < 3:
            skipped += 1
            continue
        points.append(_parse_point(tokens, line_no, line))

    if skipped:
        logger.debug(f"Skipped {skipped} short data lines")
    if not header_done:
        logger.debug("No end_header sentinel found, point cloud is empty")
    return PointCloud(tuple(points))


def load_point_cloud(path: str | Path, *, encoding: Optional[str] = None) -> PointCloud:
    encoding = encoding or settings.encoding
    p = Path(path)
    # OSError from open() propagates as-is
    with p.open('r', encoding=encoding) as f:
        try:
            cloud = parse_point_cloud(f)
        except UnicodeDecodeError as exc:
            raise ParseError(f"{p} is not {encoding} text: {exc.reason}") from exc

    logger.debug(f"Read {len(cloud)} points from {p}")
    return cloud
