# point_grid/cli.py
import argparse
import logging
import sys
from typing import List, Optional

import yaml

from .config import settings
from .contracts import GridReport
from .errors import PointGridError, error_code_for
from .handler import handle_grid_request
from .sinks import LoggingSink

logger = logging.getLogger(__name__)


def render_report(report: GridReport, fmt: str) -> str:
    if fmt == "yaml":
        return yaml.safe_dump(report.model_dump(exclude_none=True), sort_keys=False)
    return report.model_dump_json(indent=2, exclude_none=True)


def log_level(value: str) -> str:
    name = value.upper()
    if not isinstance(logging.getLevelName(name), int):
        raise argparse.ArgumentTypeError(f"unknown log level: {value!r}")
    return name


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="point-grid",
        description="Load an ASCII point cloud and bucket it into an N x N x N grid.",
    )
    p.add_argument("path")
    p.add_argument("--grid-size", type=int, default=settings.grid_size)
    p.add_argument("--format", choices=("json", "yaml"), default=settings.report_format)
    p.add_argument("--include-points", action="store_true")
    p.add_argument("--emit-geometry", action="store_true",
                   help="send points and box edges to the log at DEBUG")
    p.add_argument("--log-level", type=log_level, default=settings.log_level)
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level)

    raw = {
        "path": args.path,
        "grid_size": args.grid_size,
        "include_points": args.include_points,
        "emit_geometry": args.emit_geometry,
    }
    try:
        report = handle_grid_request(raw, sink=LoggingSink())
    except (PointGridError, OSError) as e:
        logger.debug("point grid failed", exc_info=True)
        print(f"error [{error_code_for(e).value}]: {e}", file=sys.stderr)
        return 1

    print(render_report(report, args.format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
