"""
Base repository pattern implementation for MongoDB with Motor.

Each repository is a record store for one document type: an id -> record
mapping backed by a Motor collection, injected into the services.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase

from matchbet.models.base import MongoBaseModel
from matchbet.validators.custom_types import parse_object_id

ModelType = TypeVar("ModelType", bound=MongoBaseModel)


class BaseRepository(Generic[ModelType], ABC):
    """
    Abstract base repository with the record store operations.

    Subclasses declare the collection and model class and add their
    equality-filtered queries.

    Type Parameters:
        ModelType: The Pydantic model representing the document

    Usage:
        class TeamRepository(BaseRepository[Team]):
            collection_name = "teams"
            model_class = Team

            async def find_by_region(self, region: str) -> list[Team]:
                return await self.find_many({"region": region})
    """

    def __init__(self, database: AsyncIOMotorDatabase) -> None:
        """
        Initialize repository with database connection.

        Args:
            database: Motor database instance
        """
        self._collection: AsyncIOMotorCollection = database[self.collection_name]

    @property
    @abstractmethod
    def collection_name(self) -> str:
        """Name of the MongoDB collection."""
        ...

    @property
    @abstractmethod
    def model_class(self) -> type[ModelType]:
        """Pydantic model class for this repository."""
        ...

    # =========================================================================
    # Write Operations
    # =========================================================================

    async def save(self, model: ModelType) -> ModelType:
        """
        Insert or replace a document by its id.

        Args:
            model: Model instance to persist

        Returns:
            The persisted model instance
        """
        document = model.to_mongo()
        await self._collection.replace_one({"_id": document["_id"]}, document, upsert=True)
        return model

    # =========================================================================
    # Read Operations
    # =========================================================================

    async def get_by_id(self, id: str | ObjectId) -> ModelType | None:
        """
        Get a document by its ID.

        Args:
            id: Document ID (string or ObjectId)

        Returns:
            Model instance or None if not found or the id is malformed
        """
        object_id = parse_object_id(id)
        if object_id is None:
            return None

        return await self.find_one({"_id": object_id})

    async def find_one(self, filter: dict[str, Any]) -> ModelType | None:
        """
        Find a single document matching the filter.

        Args:
            filter: MongoDB query filter

        Returns:
            Model instance or None if not found
        """
        document = await self._collection.find_one(filter)
        return self.model_class.from_mongo(document)

    async def find_many(self, filter: dict[str, Any] | None = None) -> list[ModelType]:
        """
        Find documents matching an equality filter.

        Args:
            filter: MongoDB query filter (default: all documents)

        Returns:
            List of model instances, in store order
        """
        documents = await self._collection.find(filter or {}).to_list(length=None)
        return [self.model_class.model_validate(doc) for doc in documents]

    async def find_all(self) -> list[ModelType]:
        """Return every document in the collection."""
        return await self.find_many()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(collection='{self.collection_name}')>"
