"""
json_exporter.py
JSON export of a ResultSet.

Records become plain dicts (via dataclasses.asdict); bins keep file order.
"""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import Any, Dict

from gedcom_reader.logger import get_logger
from gedcom_reader.records.models import ResultSet

log = get_logger("json_exporter")

BINS = ("families", "individuals", "sources", "others")


def _to_json_compatible(obj: Any) -> Any:
    """
    Recursively convert objects into JSON-compatible structures.

    - Primitives pass through
    - dataclasses -> dict
    - dict -> dict, list / tuple -> list
    - anything else -> str(obj)
    """
    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj

    if is_dataclass(obj) and not isinstance(obj, type):
        return {k: _to_json_compatible(v) for k, v in asdict(obj).items()}

    if isinstance(obj, dict):
        return {str(k): _to_json_compatible(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple)):
        return [_to_json_compatible(v) for v in obj]

    return str(obj)


def result_set_to_dict(result: ResultSet, *, include_bodies: bool = True) -> Dict[str, Any]:
    data: Dict[str, Any] = {"counts": result.counts()}
    for name in BINS:
        records = [_to_json_compatible(rec) for rec in getattr(result, name)]
        if not include_bodies:
            for rec in records:
                rec.pop("body", None)
        data[name] = records
    return data


def serialize_result_set(result: ResultSet, indent: int | None = 2, **kwargs: Any) -> str:
    if indent is None:
        return json.dumps(
            result_set_to_dict(result, **kwargs),
            separators=(",", ":"),
            ensure_ascii=False,
        )
    return json.dumps(result_set_to_dict(result, **kwargs), indent=indent, ensure_ascii=False)


def export_result_set_json(result: ResultSet, output_path: str | Path, indent: int = 2) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    counts = result.counts()
    log.info(
        "Exporting result JSON to: %s (FAM=%d, INDI=%d, SOUR=%d, other=%d)",
        output_path,
        counts["families"],
        counts["individuals"],
        counts["sources"],
        counts["others"],
    )

    with output_path.open("w", encoding="utf-8") as f:
        f.write(serialize_result_set(result, indent=indent))

    log.info("JSON export complete. size=%d bytes", output_path.stat().st_size)
    return output_path
