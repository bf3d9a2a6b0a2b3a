"""
Base model classes for MongoDB document integration with Pydantic v2.

Provides foundational classes that handle:
- ObjectId serialization/deserialization
- Common fields (id, created_at, updated_at)
- Document conversion utilities
"""

from datetime import datetime, timezone
from typing import Any, Self

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field

from matchbet.validators.custom_types import PyObjectId


def utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(timezone.utc)


class MongoBaseModel(BaseModel):
    """
    Base model for all MongoDB documents.

    Provides:
    - Automatic ObjectId handling with alias '_id'
    - JSON serialization with string IDs
    - Conversion to/from MongoDB documents

    Usage:
        class Team(MongoBaseModel):
            name: str
            code: str
    """

    model_config = ConfigDict(
        # Allow population by field name or alias
        populate_by_name=True,
        # Use enum values for serialization
        use_enum_values=True,
        # Validate on assignment
        validate_assignment=True,
        # Allow arbitrary types (for ObjectId)
        arbitrary_types_allowed=True,
    )

    # MongoDB document ID
    id: PyObjectId = Field(
        default_factory=ObjectId,
        alias="_id",
        description="MongoDB document ID",
    )

    @classmethod
    def from_mongo(cls, document: dict[str, Any] | None) -> Self | None:
        """
        Create model instance from MongoDB document.

        Args:
            document: Raw MongoDB document dict

        Returns:
            Model instance or None if document is None
        """
        if document is None:
            return None
        return cls.model_validate(document)

    def to_mongo(self, exclude_none: bool = False) -> dict[str, Any]:
        """
        Convert model to MongoDB document format.

        Args:
            exclude_none: Whether to exclude None values

        Returns:
            Dictionary suitable for MongoDB insertion/replacement, keyed by '_id'
        """
        return self.model_dump(exclude_none=exclude_none, by_alias=True)

    def to_json_dict(self, exclude_none: bool = False) -> dict[str, Any]:
        """
        Convert model to JSON-serializable dictionary.

        ObjectIds are converted to strings for JSON compatibility.
        """
        return self.model_dump(
            exclude_none=exclude_none,
            by_alias=False,
            mode="json",
        )


class TimestampedModel(MongoBaseModel):
    """
    Base model with timestamp tracking.

    Adds:
    - created_at: Set on document creation
    - updated_at: Refreshed through touch() on every modification
    """

    created_at: datetime = Field(
        default_factory=utc_now,
        description="Document creation timestamp (UTC)",
    )
    updated_at: datetime = Field(
        default_factory=utc_now,
        description="Last update timestamp (UTC)",
    )

    def touch(self) -> None:
        """Update the updated_at timestamp to current time."""
        self.updated_at = utc_now()


class EmbeddedModel(BaseModel):
    """
    Base model for embedded documents (subdocuments).

    Does not include _id field - used for nested objects within documents.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        validate_assignment=True,
        arbitrary_types_allowed=True,
    )
