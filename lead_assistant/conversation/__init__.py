from lead_assistant.conversation.controller import (
    ConversationSession,
    LeadCaptureController,
    TurnResult,
)
from lead_assistant.conversation.intent_classifier import Intent, classify, classify_text
from lead_assistant.conversation.responses import ResponseGenerator
from lead_assistant.conversation.stage_machine import StageMachine, StageTrigger
from lead_assistant.conversation.state import ConversationStage, ConversationState

__all__ = [
    "LeadCaptureController",
    "ConversationSession",
    "TurnResult",
    "Intent",
    "classify",
    "classify_text",
    "ResponseGenerator",
    "StageMachine",
    "StageTrigger",
    "ConversationState",
    "ConversationStage",
]
