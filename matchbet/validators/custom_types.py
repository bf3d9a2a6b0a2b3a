"""
Custom Pydantic types for MongoDB ids.

Team, match and bet documents are keyed by ObjectId and reference each
other by ObjectId; path parameters and JSON bodies carry the hex form.
"""

from typing import Any

from bson import ObjectId
from bson.errors import InvalidId
from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import CoreSchema, PydanticCustomError, core_schema


def parse_object_id(value: str | ObjectId) -> ObjectId | None:
    """
    Convert a path or payload id to ObjectId.

    Returns None for malformed ids so lookups can treat them as unknown
    records instead of failing with a decoding error.
    """
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


class PyObjectId(ObjectId):
    """
    ObjectId field type for document ids and cross-document references.

    Python-mode dumps keep the ObjectId so documents are stored with
    native ids; JSON-mode dumps render the 24-character hex string.

    Usage:
        class Bet(MongoBaseModel):
            match_id: PyObjectId
    """

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        _source_type: Any,
        _handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str,
                info_arg=False,
                return_schema=core_schema.str_schema(),
                when_used="json",
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls,
        _core_schema: CoreSchema,
        handler: GetJsonSchemaHandler,
    ) -> JsonSchemaValue:
        return {
            "type": "string",
            "pattern": "^[0-9a-fA-F]{24}$",
            "example": "507f1f77bcf86cd799439011",
        }

    @classmethod
    def validate(cls, value: Any) -> ObjectId:
        """Accept an ObjectId or its hex string, rejecting anything else."""
        if not isinstance(value, (str, ObjectId)):
            raise PydanticCustomError(
                "objectid_type",
                "Expected an ObjectId or hex string, got {type}",
                {"type": type(value).__name__},
            )

        object_id = parse_object_id(value)
        if object_id is None:
            raise PydanticCustomError(
                "objectid_invalid",
                "Invalid ObjectId: {value}",
                {"value": value},
            )
        return object_id
