"""Async HTTP submitter for the platform's inquiry endpoint.

Inquiries about a listing go to ``POST {base_url}/inquiries``; leads
captured without a listing go to ``POST {base_url}/inquiries/general``.
There is no retry: a failed call raises ``InquirySubmissionError`` and the
caller decides what to tell the visitor.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from lead_assistant.config import settings
from lead_assistant.schemas.inquiry_schema import GeneralInquiry, InquiryRequest, InquiryResult
from lead_assistant.tools.inquiry import InquirySubmissionError

logger = logging.getLogger(__name__)


class HttpInquirySubmitter:
    """Async HTTP wrapper around the inquiry-creation endpoints."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = (base_url or settings.inquiry_api.base_url).rstrip("/")
        self._timeout = timeout or settings.inquiry_api.timeout_sec
        self._transport = transport

    async def _post(self, path: str, payload: dict[str, Any]) -> InquiryResult:
        url = f"{self._base_url}{path}"
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                resp = await client.post(url, json=payload)
        except httpx.HTTPError as exc:
            logger.exception("Inquiry request error: %s", exc)
            raise InquirySubmissionError(f"Inquiry request to {url} failed: {exc}") from exc

        if resp.status_code not in (200, 201):
            logger.error("Inquiry submission failed: %s %s", resp.status_code, resp.text)
            raise InquirySubmissionError(
                f"Inquiry endpoint returned {resp.status_code}: {resp.text}"
            )

        data = resp.json() if resp.content else {}
        inquiry_id = data.get("id") or data.get("_id") or data.get("inquiry_id")
        return InquiryResult(
            success=data.get("success", True),
            inquiry_id=str(inquiry_id) if inquiry_id is not None else None,
            message=data.get("message", ""),
        )

    async def submit(
        self, property_id: str, name: str, email: str, message: str
    ) -> InquiryResult:
        """Submit an inquiry about ``property_id``."""
        request = InquiryRequest(property=property_id, name=name, email=email, message=message)
        return await self._post("/inquiries", request.model_dump())

    async def submit_general(self, inquiry: GeneralInquiry) -> InquiryResult:
        """Submit a lead captured without a listing in context."""
        payload = {
            "name": inquiry.name,
            "phone": inquiry.phone,
            "email": inquiry.email,
            "propertyType": inquiry.property_type,
            "bedroomCount": inquiry.bedroom_count,
            "propertyInterest": inquiry.property_interest,
            "message": inquiry.message,
        }
        return await self._post(
            "/inquiries/general",
            {key: value for key, value in payload.items() if value is not None},
        )
