"""
Reservation repository for listing a guest's bookings.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, asc
from lightbnb.repositories.base import BaseRepository
from lightbnb.models.reservation import Reservation
from typing import List
import logging

logger = logging.getLogger(__name__)


class ReservationRepository(BaseRepository[Reservation]):
    """Repository for the reservations table."""

    def __init__(self, db: AsyncSession):
        super().__init__(Reservation, db)

    async def get_all_reservations(self, guest_id: int, limit: int = 10) -> List[Reservation]:
        """
        Get all reservations for a single guest.

        Args:
            guest_id: ID of the guest
            limit: Maximum number of reservations to return

        Returns:
            Reservations ordered by start date, then id
        """
        try:
            query = (
                select(Reservation)
                .where(Reservation.guest_id == guest_id)
                .order_by(asc(Reservation.start_date), asc(Reservation.id))
                .limit(limit)
            )

            result = await self.db.execute(query)
            reservations = result.scalars().all()

            logger.debug(f"Retrieved {len(reservations)} reservations for guest {guest_id}")
            return list(reservations)
        except Exception as e:
            logger.error(f"Failed to get reservations for guest {guest_id}: {e}")
            raise
