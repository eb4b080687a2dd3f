from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List


def record_key(value: Any) -> str:
    """Bare record key for a SurrealDB id (``RecordID`` or ``"table:key"``)."""
    key = getattr(value, "id", value)
    key = str(key)
    if ":" in key and key == str(value):
        key = key.split(":", 1)[1]
    return key.strip("⟨⟩`")


def to_iso(value: datetime) -> str:
    """Fixed-width UTC ISO-8601 so stored dates sort lexicographically."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="microseconds")


def rows(result: Any) -> List[Dict[str, Any]]:
    """
    Records from a ``db.query`` result.
    Accepts both the bare record list and the per-statement
    ``[{"result": [...], "status": "OK"}]`` envelope.
    """
    if not result:
        return []
    if isinstance(result, dict):
        return [result]
    first = result[0]
    if isinstance(first, dict) and "result" in first and "id" not in first:
        inner = first["result"]
        if inner is None:
            return []
        return inner if isinstance(inner, list) else [inner]
    if isinstance(first, list):
        return first
    return list(result)


def normalize_record(record: Dict[str, Any]) -> Dict[str, Any]:
    if "id" in record:
        record = {**record, "id": record_key(record["id"])}
    return record
