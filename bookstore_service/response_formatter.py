"""
Response formatter: turns driver results into the text printed by the runner.

BSON-only values (ObjectId, datetime, Decimal128, ...) are converted to
strings so the JSON encoder can handle them.
"""

import json
from typing import Any, Dict, List


def sanitise_value(obj: Any) -> Any:
    """Recursively convert non-JSON-safe types to safe representations."""
    if isinstance(obj, dict):
        return {k: sanitise_value(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [sanitise_value(item) for item in obj]
    if isinstance(obj, bytes):
        try:
            return obj.decode("utf-8")
        except UnicodeDecodeError:
            return f"[binary {len(obj)} bytes]"
    if isinstance(obj, (int, float, str, bool, type(None))):
        return obj
    # ObjectId, datetime, Decimal128, etc.
    return str(obj)


def format_documents(docs: List[Dict[str, Any]]) -> str:
    return json.dumps(sanitise_value(docs), indent=2)


def format_explain(stats: Dict[str, Any]) -> str:
    return json.dumps(sanitise_value(stats), indent=2)


def format_line(label: str, value: Any) -> str:
    """``label: value`` where documents are rendered as indented JSON."""
    if isinstance(value, list):
        return f"{label}: {format_documents(value)}"
    return f"{label}: {value}"


def section_header(number: int, title: str) -> str:
    return f"\nTASK {number}: {title.upper()}"
