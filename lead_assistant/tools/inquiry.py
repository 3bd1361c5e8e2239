"""
Inquiry submission interface and in-process mock.

In production, inquiries are POSTed to the platform's inquiry endpoint
(see ``inquiry_client.HttpInquirySubmitter``). The mock store here backs
the console demo and the test suite.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Optional, Protocol, TypedDict

from lead_assistant.schemas.inquiry_schema import GeneralInquiry, InquiryResult

logger = logging.getLogger(__name__)


class InquirySubmissionError(Exception):
    """Raised when the inquiry endpoint rejects or cannot receive an inquiry."""


class InquirySubmitter(Protocol):
    """What the conversation controller needs from the inquiry endpoint."""

    async def submit(
        self, property_id: str, name: str, email: str, message: str
    ) -> InquiryResult: ...

    async def submit_general(self, inquiry: GeneralInquiry) -> InquiryResult: ...


class InquiryRecord(TypedDict):
    """Inquiry stored in the mock system."""

    inquiry_id: str
    property: Optional[str]
    name: str
    email: str
    phone: str
    message: str
    property_type: str
    bedroom_count: str
    status: str
    created_at: str


_inquiries: dict[str, InquiryRecord] = {}


def _store(record: dict) -> InquiryRecord:
    ref = f"INQ-{uuid.uuid4().hex[:6].upper()}"
    inquiry = {
        "inquiry_id": ref,
        "property": None,
        "name": "",
        "email": "",
        "phone": "",
        "message": "",
        "property_type": "",
        "bedroom_count": "",
        "status": "new",
        "created_at": datetime.now(timezone.utc).isoformat(),
    }
    inquiry.update(record)
    _inquiries[ref] = inquiry
    return inquiry


def create_inquiry(property_id: str, name: str, email: str, message: str) -> InquiryResult:
    """Create an inquiry about a specific property."""
    missing = [
        field_name
        for field_name, value in [
            ("property", property_id),
            ("name", name),
            ("email", email),
            ("message", message),
        ]
        if not value or not value.strip()
    ]
    if missing:
        return InquiryResult(
            success=False,
            message=f"Cannot create inquiry - missing required fields: {', '.join(missing)}.",
        )

    inquiry = _store({"property": property_id, "name": name, "email": email, "message": message})
    logger.info("Inquiry created: %s for property %s", inquiry["inquiry_id"], property_id)
    return InquiryResult(
        success=True,
        inquiry_id=inquiry["inquiry_id"],
        message=f"Inquiry received. Reference number: {inquiry['inquiry_id']}.",
    )


def create_general_inquiry(inquiry: GeneralInquiry) -> InquiryResult:
    """Create an inquiry that is not tied to a listing."""
    if not inquiry.name.strip() or not inquiry.phone.strip():
        return InquiryResult(
            success=False,
            message="Cannot create inquiry - name and phone are required.",
        )

    stored = _store({
        "name": inquiry.name,
        "email": inquiry.email or "",
        "phone": inquiry.phone,
        "message": inquiry.message or "",
        "property_type": inquiry.property_type or "",
        "bedroom_count": inquiry.bedroom_count or "",
    })
    logger.info("General inquiry created: %s", stored["inquiry_id"])
    return InquiryResult(
        success=True,
        inquiry_id=stored["inquiry_id"],
        message=f"Inquiry received. Reference number: {stored['inquiry_id']}.",
    )


def get_inquiry(inquiry_id: str) -> Optional[InquiryRecord]:
    """Retrieve an inquiry by reference number."""
    return _inquiries.get(inquiry_id)


def list_inquiries() -> list[InquiryRecord]:
    """All stored inquiries in creation order."""
    return list(_inquiries.values())


def reset() -> None:
    """Clear all inquiries. Used by test fixtures for isolation."""
    _inquiries.clear()


class MockInquirySubmitter:
    """InquirySubmitter backed by the in-process mock store."""

    async def submit(
        self, property_id: str, name: str, email: str, message: str
    ) -> InquiryResult:
        return create_inquiry(property_id, name, email, message)

    async def submit_general(self, inquiry: GeneralInquiry) -> InquiryResult:
        return create_general_inquiry(inquiry)
