from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, Optional

import pytest


def ply_text(data_lines: Iterable[str], *, vertex_count: Optional[int] = None, extra_header: Iterable[str] = ()) -> str:
    data_lines = list(data_lines)
    header = ["ply", "format ascii 1.0", "comment written by tests"]
    header.append(f"element vertex {len(data_lines) if vertex_count is None else vertex_count}")
    header += ["property float x", "property float y", "property float z"]
    header += list(extra_header)
    header.append("end_header")
    return "\n".join(header + data_lines) + "\n"


@pytest.fixture
def write_ply(tmp_path: Path) -> Callable[..., Path]:
    def _write(data_lines: Iterable[str], *, name: str = "cloud.ply", **kwargs) -> Path:
        p = tmp_path / name
        p.write_text(ply_text(data_lines, **kwargs), encoding="utf-8")
        return p

    return _write
