from typing import Any

_PASSTHROUGH_KEYS = ("referenceValue", "bytesValue", "geoPointValue")


def decode_value(value: Any) -> Any:
    """Convert a Firestore REST typed value into a plain Python value."""
    if not isinstance(value, dict):
        return None

    if "stringValue" in value:
        return value["stringValue"]
    if "integerValue" in value:
        try:
            return int(value["integerValue"])
        except (TypeError, ValueError):
            return None
    if "doubleValue" in value:
        try:
            return float(value["doubleValue"])
        except (TypeError, ValueError):
            return None
    if "booleanValue" in value:
        return bool(value["booleanValue"])
    if "nullValue" in value:
        return None
    if "timestampValue" in value:
        # Kept as the RFC 3339 string; BlogPost parses it
        return value["timestampValue"]
    if "arrayValue" in value:
        items = (value["arrayValue"] or {}).get("values", [])
        return [decode_value(item) for item in items]
    if "mapValue" in value:
        return decode_fields((value["mapValue"] or {}).get("fields", {}))
    for key in _PASSTHROUGH_KEYS:
        if key in value:
            return value[key]
    return None


def decode_fields(fields: dict[str, Any] | None) -> dict[str, Any]:
    if not fields:
        return {}
    return {name: decode_value(raw) for name, raw in fields.items()}


def decode_document(doc: dict[str, Any]) -> tuple[str | None, dict[str, Any]]:
    """
    Split a Firestore document into its id and decoded fields.

    The id is the last segment of the document resource name, e.g.
    ``projects/p/databases/(default)/documents/blogs/abc`` -> ``abc``.
    """
    name = doc.get("name") or ""
    doc_id = name.rsplit("/", 1)[-1] or None
    return doc_id, decode_fields(doc.get("fields"))
