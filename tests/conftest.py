"""Shared test fixtures and helpers."""

from typing import Optional

import pytest

from lead_assistant.conversation.controller import LeadCaptureController
from lead_assistant.conversation.responses import ResponseGenerator
from lead_assistant.conversation.state import ConversationStage, ConversationState
from lead_assistant.schemas.inquiry_schema import GeneralInquiry, InquiryResult
from lead_assistant.schemas.property_schema import (
    STATUS_FOR_RENT,
    ListingAgent,
    PropertyContext,
)
from lead_assistant.tools import inquiry


class RecordingSubmitter:
    """InquirySubmitter that records every call and returns a fixed result."""

    def __init__(self, result: Optional[InquiryResult] = None, error: Optional[Exception] = None) -> None:
        self.calls: list[tuple[str, str, str, str]] = []
        self.general_calls: list[GeneralInquiry] = []
        self.result = result or InquiryResult(success=True, inquiry_id="INQ-TEST01")
        self.error = error

    async def submit(self, property_id: str, name: str, email: str, message: str) -> InquiryResult:
        self.calls.append((property_id, name, email, message))
        if self.error is not None:
            raise self.error
        return self.result

    async def submit_general(self, inquiry: GeneralInquiry) -> InquiryResult:
        self.general_calls.append(inquiry)
        if self.error is not None:
            raise self.error
        return self.result


def first_choice(options):
    return options[0]


@pytest.fixture(autouse=True)
def _reset_inquiry_store():
    inquiry.reset()
    yield
    inquiry.reset()


@pytest.fixture
def villa():
    return PropertyContext(
        id="prop-101",
        title="Sea View Villa",
        price=1200000,
        location="Dubai Marina",
        agent=ListingAgent(first_name="Sarah", last_name="Haddad"),
    )


@pytest.fixture
def rental():
    return PropertyContext(
        id="prop-202",
        title="Downtown Loft",
        price=95000,
        location="Downtown Dubai",
        status=STATUS_FOR_RENT,
    )


@pytest.fixture
def responses():
    return ResponseGenerator(chooser=first_choice)


@pytest.fixture
def submitter():
    return RecordingSubmitter()


@pytest.fixture
def controller(submitter, responses):
    return LeadCaptureController(submitter, responses=responses)


def make_state(**overrides) -> ConversationState:
    """Helper to create a ConversationState with sensible defaults."""
    return ConversationState(**overrides)


def collecting_state(**overrides) -> ConversationState:
    """State right after the assistant asked for the visitor's name."""
    defaults = dict(
        collecting_info=True,
        explicitly_asked_for_name=True,
        stage=ConversationStage.COLLECTING_INFO,
    )
    defaults.update(overrides)
    return ConversationState(**defaults)
