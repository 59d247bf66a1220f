from typing import Any, Dict

from bson import ObjectId, errors as bson_errors

from dashboard_api.core.errors import InvalidIdError


def parse_object_id(value: str) -> ObjectId:
    """Path id -> ObjectId, or InvalidIdError (400) for malformed input."""
    try:
        return ObjectId(value)
    except (bson_errors.InvalidId, TypeError):
        raise InvalidIdError(f"Invalid id format: '{value}'")


def coerce_reference(value: Any) -> Any:
    """
    Cart lines may hold the product id as an ObjectId or as its hex string.
    Valid hex strings become ObjectIds; anything else is used as stored.
    """
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return value


def _convert(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {k: _convert(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_convert(v) for v in value]
    return value


def serialize_doc(doc: Dict[str, Any]) -> Dict[str, Any]:
    """
    Make a MongoDB document JSON friendly.
    ObjectIds (top level and nested) become strings; ``_id`` keeps its name
    since the dashboard frontend reads it directly.
    """
    if doc is None:
        return None
    return _convert(doc)
