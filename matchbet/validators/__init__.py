"""
Custom validators and types for MongoDB integration with Pydantic.
"""

from matchbet.validators.custom_types import PyObjectId, parse_object_id

__all__ = ["PyObjectId", "parse_object_id"]
