from lead_assistant.tools.inquiry import (
    InquirySubmissionError,
    InquirySubmitter,
    MockInquirySubmitter,
)
from lead_assistant.tools.inquiry_client import HttpInquirySubmitter
from lead_assistant.tools.properties import get_property

__all__ = [
    "InquirySubmitter",
    "InquirySubmissionError",
    "MockInquirySubmitter",
    "HttpInquirySubmitter",
    "get_property",
]
