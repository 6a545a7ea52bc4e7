"""Base repository implementation.

Provides common database operations and patterns for all repository classes.
"""

from abc import ABC
from typing import TypeVar, Generic, List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
import logging

from champions.models import ID_MAX

logger = logging.getLogger(__name__)

# Generic type for model classes
ModelType = TypeVar('ModelType')


def storable_id(value: int) -> bool:
    """True if ``value`` fits the integer key columns; larger ids match no row."""
    return 0 < value <= ID_MAX


class BaseRepository(Generic[ModelType], ABC):
    """Base repository class with common CRUD operations."""

    def __init__(self, db_session: Session, model_class: type):
        """Initialize repository with database session and model class.

        Args:
            db_session: SQLAlchemy database session
            model_class: SQLAlchemy model class
        """
        self.db = db_session
        self.model_class = model_class

    def _query(self):
        """Base query; subclasses add eager loading here."""
        return self.db.query(self.model_class)

    def create(self, **kwargs) -> ModelType:
        """Create a new record.

        Args:
            **kwargs: Field values for the new record

        Returns:
            Created model instance

        Raises:
            IntegrityError: If database constraints are violated
        """
        try:
            instance = self.model_class(**kwargs)
            self.db.add(instance)
            self.db.commit()
            self.db.refresh(instance)
            logger.info(f"Created {self.model_class.__name__} with id {instance.id}")
            return instance
        except IntegrityError as e:
            self.db.rollback()
            logger.error(f"Failed to create {self.model_class.__name__}: {e}")
            raise

    def get_by_id(self, id: int) -> Optional[ModelType]:
        """Get a record by its ID.

        Args:
            id: Record ID

        Returns:
            Model instance if found, None otherwise
        """
        if not storable_id(id):
            return None
        return self._query().filter(self.model_class.id == id).first()

    def get_all(self) -> List[ModelType]:
        """Get all records ordered by ID.

        Returns:
            List of model instances
        """
        return self._query().order_by(self.model_class.id).all()

    def update(self, id: int, **kwargs) -> Optional[ModelType]:
        """Update a record.

        Args:
            id: Record ID
            **kwargs: Fields to update

        Returns:
            Updated model instance if found, None otherwise

        Raises:
            IntegrityError: If database constraints are violated
        """
        try:
            instance = self.get_by_id(id)
            if not instance:
                return None

            for field, value in kwargs.items():
                if hasattr(instance, field):
                    setattr(instance, field, value)

            self.db.commit()
            self.db.refresh(instance)
            logger.info(f"Updated {self.model_class.__name__} with id {id}")
            return instance
        except IntegrityError as e:
            self.db.rollback()
            logger.error(f"Failed to update {self.model_class.__name__} {id}: {e}")
            raise

    def delete(self, id: int) -> bool:
        """Delete a record.

        Args:
            id: Record ID

        Returns:
            True if deleted, False if not found
        """
        instance = self.get_by_id(id)
        if not instance:
            return False

        self.db.delete(instance)
        self.db.commit()
        logger.info(f"Deleted {self.model_class.__name__} with id {id}")
        return True

    def count(self, **filters) -> int:
        """Count records matching filters.

        Args:
            **filters: Filter criteria

        Returns:
            Number of matching records
        """
        query = self.db.query(self.model_class)
        for field, value in filters.items():
            if (field == 'id' or field.endswith('_id')) and not storable_id(value):
                return 0
            if hasattr(self.model_class, field):
                query = query.filter(getattr(self.model_class, field) == value)
        return query.count()

    def exists(self, **filters) -> bool:
        """Check if record exists matching filters.

        Args:
            **filters: Filter criteria

        Returns:
            True if record exists, False otherwise
        """
        return self.count(**filters) > 0
