"""
Base repository class with the lookups and inserts shared by all repositories.
Each operation is a single statement executed on the injected async session.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, insert
from lightbnb.database import Base
from typing import TypeVar, Generic, Optional, Dict, Any, Type
import logging

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Base repository class providing single-row reads and inserts.
    Store errors are logged and re-raised unchanged.
    """

    def __init__(self, model: Type[ModelType], db: AsyncSession):
        """
        Initialize repository with model class and database session.

        Args:
            model: SQLAlchemy model class
            db: Async database session
        """
        self.model = model
        self.db = db

    async def get_by_field(self, field: str, value: Any) -> Optional[ModelType]:
        """
        Get the first record whose column equals a value.

        Args:
            field: Column name to match on
            value: Value to compare with

        Returns:
            Model instance if found, None otherwise. When several rows match
            only the first one is returned.
        """
        if not hasattr(self.model, field):
            raise ValueError(f"Field '{field}' does not exist on {self.model.__name__}")

        try:
            query = select(self.model).where(getattr(self.model, field) == value).limit(1)
            result = await self.db.execute(query)
            obj = result.scalars().first()

            if obj:
                logger.debug(f"Retrieved {self.model.__name__} by {field}: {value}")
            else:
                logger.debug(f"{self.model.__name__} with {field}={value} not found")

            return obj
        except Exception as e:
            logger.error(f"Failed to get {self.model.__name__} by {field}={value}: {e}")
            raise

    async def insert_returning(self, values: Dict[str, Any]) -> ModelType:
        """
        Insert one row and return it as stored, including generated columns.

        Args:
            values: Column values for the new row

        Returns:
            Model instance loaded from INSERT ... RETURNING

        Raises:
            sqlalchemy.exc.DBAPIError: If the store rejects the statement
        """
        try:
            stmt = insert(self.model).values(**values).returning(self.model)
            result = await self.db.execute(stmt)
            db_obj = result.scalar_one()
            await self.db.commit()
            logger.debug(f"Created {self.model.__name__} with id: {db_obj.id}")
            return db_obj
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Failed to create {self.model.__name__}: {e}")
            raise
