"""Repository layer for tour database operations.

Every query is filtered by the owning user's id. A tour that exists under a
different owner is reported exactly like a tour that does not exist.
"""

import logging
from datetime import datetime
from typing import Any, List, Mapping
from sqlalchemy.orm import Session

from tourdesk.errors import NotFound
from tourdesk.models.tour import Tour
from tourdesk.models.tour_factory import create_tour, tour_patch_values
from tourdesk.database.models import TourDB

logger = logging.getLogger(__name__)

TOUR_NOT_FOUND = "No such tour"


class TourRepository:
    """Repository for owner-scoped Tour operations."""

    def __init__(self, db: Session):
        self.db = db

    def _owned(self, user_id: str, tour_id: str) -> TourDB:
        tour_db = self.db.query(TourDB).filter(
            TourDB.id == tour_id,
            TourDB.user_id == user_id,
        ).first()
        if not tour_db:
            raise NotFound(TOUR_NOT_FOUND)
        return tour_db

    def create(self, user_id: str, fields: Mapping[str, Any]) -> Tour:
        """Create a new tour owned by user_id."""
        tour = create_tour(user_id, fields)
        try:
            tour_db = TourDB.from_pydantic(tour)
            self.db.add(tour_db)
            self.db.commit()
            self.db.refresh(tour_db)
            logger.debug(f"Created tour {tour.id} for user {user_id}")
            return tour_db.to_pydantic()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to create tour for user {user_id}: {type(e).__name__}: {str(e)}")
            raise

    def get(self, user_id: str, tour_id: str) -> Tour:
        """Get tour by ID for a specific user.

        Raises:
            NotFound: If the tour does not exist or belongs to another user
        """
        return self._owned(user_id, tour_id).to_pydantic()

    def get_all(self, user_id: str) -> List[Tour]:
        """Get all tours for a user in creation order."""
        tours_db = self.db.query(TourDB).filter(
            TourDB.user_id == user_id,
        ).order_by(TourDB.created_at).all()
        return [tour_db.to_pydantic() for tour_db in tours_db]

    def update(self, user_id: str, tour_id: str, patch: Mapping[str, Any]) -> Tour:
        """Apply a partial update to a tour owned by user_id.

        Only name, info, image and price can change; the owner never does.

        Raises:
            NotFound: If the tour does not exist or belongs to another user
            ValidationFailed: If a supplied field is blank
        """
        tour_db = self._owned(user_id, tour_id)
        values = tour_patch_values(patch)
        if not values:
            return tour_db.to_pydantic()

        for name, value in values.items():
            setattr(tour_db, name, value)
        tour_db.updated_at = datetime.utcnow()

        try:
            self.db.commit()
            self.db.refresh(tour_db)
            logger.debug(f"Updated tour {tour_id}: {sorted(values)}")
            return tour_db.to_pydantic()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to update tour {tour_id}: {type(e).__name__}: {str(e)}")
            raise

    def delete(self, user_id: str, tour_id: str) -> None:
        """Permanently delete a tour owned by user_id.

        Raises:
            NotFound: If the tour does not exist (including an earlier delete) or belongs to another user
        """
        tour_db = self._owned(user_id, tour_id)
        try:
            self.db.delete(tour_db)
            self.db.commit()
            logger.debug(f"Deleted tour {tour_id}")
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to delete tour {tour_id}: {type(e).__name__}: {str(e)}")
            raise
