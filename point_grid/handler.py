from __future__ import annotations

from typing import Any, Dict, Optional

from .contracts import GridReport, GridRequest
from .sinks import GeometrySink
from .use_case import BuildPointGridUseCase


def handle_grid_request(raw: Dict[str, Any], *, sink: Optional[GeometrySink] = None) -> GridReport:
    """
    Canonical entry point: it does not matter where ``raw`` came from (CLI, API, queue).
    Validation errors from pydantic propagate; pipeline failures propagate typed.
    """
    req = GridRequest.model_validate(raw)
    return BuildPointGridUseCase(sink).execute(req)
