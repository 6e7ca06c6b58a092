"""
Property repository for listing search and creation.
Search joins properties to their reviews and filters on the average rating.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, and_, func, asc
from sqlalchemy.orm import with_expression
from lightbnb.repositories.base import BaseRepository
from lightbnb.models.property import Property
from lightbnb.models.review import PropertyReview
from lightbnb.schemas.property import PropertyCreate, PropertySearchFilters
from lightbnb.utils.exceptions import ValidationError
from typing import Optional, List
import logging

logger = logging.getLogger(__name__)

# Prices are filtered in whole units but stored in cents
CENTS_PER_UNIT = 100


class PropertyRepository(BaseRepository[Property]):
    """Repository for the properties table."""

    def __init__(self, db: AsyncSession):
        super().__init__(Property, db)

    async def get_all_properties(
        self,
        filters: Optional[PropertySearchFilters] = None,
        limit: int = 10
    ) -> List[Property]:
        """
        Search reviewed properties.

        Args:
            filters: Optional criteria; a limit set here wins over the argument
            limit: Maximum number of properties to return

        Returns:
            Properties ordered by cost_per_night, each with average_rating set
        """
        filters = filters or PropertySearchFilters()
        if filters.limit is not None:
            limit = filters.limit

        try:
            average_rating = func.avg(PropertyReview.rating)

            query = (
                select(Property)
                .join(PropertyReview, Property.id == PropertyReview.property_id)
                .options(with_expression(Property.average_rating, average_rating))
                # Properties already in the session still get average_rating filled in
                .execution_options(populate_existing=True)
            )

            conditions = self._build_filter_conditions(filters)
            if conditions:
                query = query.where(and_(*conditions))

            query = query.group_by(Property.id)

            # The average only exists after grouping
            if filters.minimum_rating is not None:
                query = query.having(average_rating >= filters.minimum_rating)

            query = query.order_by(asc(Property.cost_per_night), asc(Property.id)).limit(limit)

            result = await self.db.execute(query)
            properties = result.scalars().all()

            logger.debug(f"Property search returned {len(properties)} results")
            return list(properties)
        except Exception as e:
            logger.error(f"Failed to search properties: {e}")
            raise

    def _build_filter_conditions(self, filters: PropertySearchFilters) -> List:
        """
        Build row-level conditions from search filters.

        Args:
            filters: PropertySearchFilters instance

        Returns:
            List of SQLAlchemy conditions, empty when no filter is set
        """
        conditions = []

        # Substring match on the city
        if filters.city is not None:
            conditions.append(Property.city.like(f"%{filters.city}%"))

        if filters.owner_id is not None:
            conditions.append(Property.owner_id == filters.owner_id)

        # Price range filters, both bounds exclusive
        if filters.minimum_price_per_night is not None:
            conditions.append(Property.cost_per_night > filters.minimum_price_per_night * CENTS_PER_UNIT)
        if filters.maximum_price_per_night is not None:
            conditions.append(Property.cost_per_night < filters.maximum_price_per_night * CENTS_PER_UNIT)

        return conditions

    async def add_property(self, property_in: PropertyCreate) -> Property:
        """
        Add a property built from the fields that were supplied.

        Args:
            property_in: Property details; absent fields take the store defaults

        Returns:
            The stored property, including its generated id

        Raises:
            ValidationError: If no field is present
            sqlalchemy.exc.DBAPIError: If the store rejects the insert
        """
        values = property_in.present_fields()
        if not values:
            raise ValidationError(
                "At least one property field is required",
                field_errors=[{"field": "property", "message": "no fields supplied"}]
            )

        created_property = await self.insert_returning(values)
        logger.info(f"Created property: {created_property.title} (ID: {created_property.id})")
        return created_property
