# Standard library imports
from datetime import datetime
from typing import Any, Optional

# External package imports
from bson import ObjectId
from bson.errors import InvalidId


def to_object_id(value: Any) -> Optional[ObjectId]:
    """Parse an id string into an ObjectId, or None if it is not one"""
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(value)
    except (InvalidId, ValueError, TypeError):
        return None


def serialize_document(obj: Any) -> Any:
    """
    Recursively convert a MongoDB document into JSON-ready values.
    ObjectIds become hex strings, datetimes become ISO format strings.
    """
    if isinstance(obj, ObjectId):
        return str(obj)
    elif isinstance(obj, datetime):
        return obj.isoformat() + "Z" if obj.tzinfo is None else obj.isoformat()
    elif isinstance(obj, dict):
        return {key: serialize_document(value) for key, value in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [serialize_document(item) for item in obj]
    else:
        return obj
