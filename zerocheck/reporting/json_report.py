# JSON output: serialize analysis results for CI pipelines and other tools.

from __future__ import annotations

import json
from typing import Any, Sequence

from zerocheck.findings.models import FunctionAnalysis


def to_json_data(results: Sequence[FunctionAnalysis]) -> list[dict[str, Any]]:
    """
    Convert results to plain JSON-compatible dicts.

    Address parameters become [{"type": ..., "name": ...}, ...] and the function
    kind becomes {"tag": ...} or {"tag": "named", "name": ...}.
    """
    return [r.model_dump(mode="json", by_alias=True, exclude_none=True) for r in results]


def render_json(results: Sequence[FunctionAnalysis], indent: int = 2) -> str:
    """Pretty-printed JSON array of all results, in result order."""
    return json.dumps(to_json_data(results), indent=indent)
