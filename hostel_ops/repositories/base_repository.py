"""
Base repository with standardized CRUD operations and error handling.

Provides the foundation for the domain repositories. Writes either commit
immediately or only flush, so services can group several writes into a
single transaction.
"""

from typing import Generic, Optional, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from hostel_ops.core.logging import get_logger
from hostel_ops.models.base import BaseModel
from hostel_ops.services.errors import AlreadyExistsError

logger = get_logger(__name__)

# Type variable for model classes
ModelType = TypeVar("ModelType", bound=BaseModel)


class BaseRepository(Generic[ModelType]):
    """
    Generic repository over a single model.

    Subclasses add the explicit query methods their callers need; related
    rows are never loaded implicitly by these base methods.
    """

    def __init__(self, model: Type[ModelType], db: Session):
        """
        Initialize repository.

        Args:
            model: SQLAlchemy model class
            db: Database session
        """
        self.model = model
        self.db = db

    # ==================== Write Operations ====================

    def create(self, entity: ModelType, commit: bool = False) -> ModelType:
        """
        Add a new entity.

        Args:
            entity: Entity to persist
            commit: Commit immediately instead of only flushing

        Raises:
            AlreadyExistsError: If a unique constraint is violated
        """
        self.db.add(entity)
        self._flush_or_commit(commit)
        logger.debug("Created entity", model=self.model.__name__, entity_id=entity.id)
        return entity

    def save(self, entity: ModelType, commit: bool = False) -> ModelType:
        """Persist changes made to an already-tracked entity."""
        self.db.add(entity)
        self._flush_or_commit(commit)
        return entity

    def _flush_or_commit(self, commit: bool) -> None:
        try:
            if commit:
                self.db.commit()
            else:
                self.db.flush()
        except IntegrityError as e:
            self.db.rollback()
            raise AlreadyExistsError(
                self.model.__name__,
                details={"constraint": str(e.orig)},
            ) from e

    # ==================== Read Operations ====================

    def get_by_id(self, entity_id: str) -> Optional[ModelType]:
        """Get entity by primary key."""
        return self.db.get(self.model, entity_id)

    def count(self) -> int:
        """Get total count of records."""
        return self.db.scalar(select(func.count()).select_from(self.model)) or 0
