"""Read-only property context supplied by the property-lookup collaborator."""

from typing import Optional

from pydantic import BaseModel, ConfigDict

STATUS_FOR_SALE = "For Sale"
STATUS_FOR_RENT = "For Rent"


class ListingAgent(BaseModel):
    """Agent responsible for a listing."""

    model_config = ConfigDict(frozen=True)

    first_name: str
    last_name: Optional[str] = None
    avatar: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name or ''}".strip()


class PropertyContext(BaseModel):
    """The property the visitor is currently viewing."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    price: float
    location: str
    status: str = STATUS_FOR_SALE
    agent: Optional[ListingAgent] = None

    @property
    def is_for_sale(self) -> bool:
        return self.status == STATUS_FOR_SALE
