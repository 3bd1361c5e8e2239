"""Inquiry payloads sent to the inquiry-creation endpoint."""

from typing import Optional

from pydantic import BaseModel


class InquiryRequest(BaseModel):
    """Inquiry about a specific property."""
    property: str
    name: str
    email: str
    message: str


class GeneralInquiry(BaseModel):
    """Inquiry captured without a property in context."""
    name: str
    phone: str
    email: Optional[str] = None
    property_type: Optional[str] = None
    bedroom_count: Optional[str] = None
    property_interest: Optional[str] = None
    message: Optional[str] = None


class InquiryResult(BaseModel):
    """Outcome reported by the inquiry endpoint."""
    success: bool
    inquiry_id: Optional[str] = None
    message: str = ""
