"""
Mock property lookup.

In production, the property page supplies the listing it renders. This
catalogue stands in for that lookup in the console demo and tests.
"""

import logging
from typing import Optional

from lead_assistant.schemas.property_schema import (
    STATUS_FOR_RENT,
    STATUS_FOR_SALE,
    ListingAgent,
    PropertyContext,
)

logger = logging.getLogger(__name__)

PROPERTY_CATALOG: dict[str, PropertyContext] = {
    "sea-view-villa": PropertyContext(
        id="sea-view-villa",
        title="Sea View Villa",
        price=1200000,
        location="Dubai Marina",
        status=STATUS_FOR_SALE,
        agent=ListingAgent(first_name="Sarah", last_name="Haddad"),
    ),
    "downtown-loft": PropertyContext(
        id="downtown-loft",
        title="Downtown Loft",
        price=95000,
        location="Downtown Dubai",
        status=STATUS_FOR_RENT,
        agent=ListingAgent(first_name="Omar", last_name="Khalil"),
    ),
    "palm-penthouse": PropertyContext(
        id="palm-penthouse",
        title="Palm Jumeirah Penthouse",
        price=4750000,
        location="Palm Jumeirah",
        status=STATUS_FOR_SALE,
    ),
}


def get_property(property_id: str) -> Optional[PropertyContext]:
    """Look up a property by id. Returns None if not found."""
    result = PROPERTY_CATALOG.get(property_id)
    if result is None:
        logger.debug("Property not found: %s", property_id)
    return result


def get_all_properties() -> list[PropertyContext]:
    return list(PROPERTY_CATALOG.values())
