from lead_assistant.schemas.inquiry_schema import GeneralInquiry, InquiryRequest, InquiryResult
from lead_assistant.schemas.message_schema import Message, MessageKind, Sender
from lead_assistant.schemas.property_schema import ListingAgent, PropertyContext

__all__ = [
    "Message", "MessageKind", "Sender",
    "PropertyContext", "ListingAgent",
    "InquiryRequest", "GeneralInquiry", "InquiryResult",
]
