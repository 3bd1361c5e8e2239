"""
Conversation controller for the property-page lead-capture assistant.

One turn runs to completion before the next is accepted for the same
session:

    classify -> apply_intent (new state) -> submit inquiry when the email
    slot was just filled -> generate reply -> append messages

Usage:
    controller = LeadCaptureController(MockInquirySubmitter())
    session = controller.open_session()
    result = await controller.handle_turn(session, "I want to buy", property)
"""

import asyncio
import uuid
from dataclasses import dataclass, field
from typing import Callable, Optional

from lead_assistant.config import settings
from lead_assistant.conversation.intent_classifier import Intent, classify
from lead_assistant.conversation.responses import ResponseGenerator
from lead_assistant.conversation.slots import fill_slot
from lead_assistant.conversation.stage_machine import StageMachine, StageTrigger
from lead_assistant.conversation.state import ConversationStage, ConversationState
from lead_assistant.logging_context import get_session_logger, set_session_id
from lead_assistant.schemas.inquiry_schema import GeneralInquiry, InquiryResult
from lead_assistant.schemas.message_schema import (
    Message,
    MessageKind,
    agent_message,
    bot_message,
    user_message,
)
from lead_assistant.schemas.property_schema import PropertyContext
from lead_assistant.tools.inquiry import InquirySubmissionError, InquirySubmitter
from lead_assistant.utils import normalize_phone

logger = get_session_logger(__name__)

LEAD_INTENTS = frozenset({Intent.BUY_INTENT, Intent.SELL_INTENT, Intent.AGENT_CONTACT})


@dataclass
class ConversationSession:
    """Per-visitor session: current state plus an append-only message log."""

    session_id: str = field(default_factory=lambda: f"CHAT-{uuid.uuid4().hex[:8]}")
    state: ConversationState = field(default_factory=ConversationState)
    _messages: list[Message] = field(default_factory=list, repr=False)
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock, repr=False)

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    def _append(self, messages: list[Message]) -> None:
        self._messages.extend(messages)


@dataclass(frozen=True)
class TurnResult:
    """Everything one turn produced."""

    intent: Optional[Intent]
    previous_state: ConversationState
    state: ConversationState
    messages: tuple[Message, ...] = ()
    inquiry: Optional[InquiryResult] = None

    @property
    def reply(self) -> Optional[str]:
        """Text of the assistant's reply, if the turn produced one."""
        for message in self.messages:
            if message.kind == MessageKind.BOT:
                return message.text
        return None


class LeadCaptureController:
    """
    Runs conversation turns against a session.

    Slot collection and general Q&A share each turn: an informational
    question asked mid-capture is answered while the missing contact
    slots stay open.
    """

    def __init__(
        self,
        submitter: InquirySubmitter,
        responses: Optional[ResponseGenerator] = None,
        on_agent_requested: Optional[Callable[[], None]] = None,
    ) -> None:
        self._submitter = submitter
        self._responses = responses or ResponseGenerator()
        self._on_agent_requested = on_agent_requested

    def open_session(self, session_id: Optional[str] = None) -> ConversationSession:
        """Start a session whose log opens with a greeting."""
        session = ConversationSession(session_id=session_id) if session_id else ConversationSession()
        session._append([bot_message(self._responses.greeting())])
        logger.debug("Session opened: %s", session.session_id)
        return session

    # ------------------------------------------------------------------ #
    # State update
    # ------------------------------------------------------------------ #

    def apply_intent(
        self,
        intent: Optional[Intent],
        text: str,
        state: ConversationState,
        property: Optional[PropertyContext] = None,
    ) -> ConversationState:
        """Return the state reached by applying ``intent`` to ``state``."""
        value = text.strip()
        new = state

        if intent in LEAD_INTENTS and not state.user_name:
            stage = state.stage
            if StageMachine.can_transition(stage, StageTrigger.LEAD_STARTED):
                stage = StageMachine.transition(stage, StageTrigger.LEAD_STARTED)
            new = new.evolve(
                collecting_info=True,
                explicitly_asked_for_name=True,
                stage=stage,
                property_interest=state.property_interest or (property.title if property else None),
            )

        elif intent == Intent.NAME_PROVIDED and state.collecting_info and state.awaiting_name:
            new, filled = fill_slot(new, "user_name", value)
            if filled:
                new = new.evolve(explicitly_asked_for_name=False)

        elif intent == Intent.PHONE_PROVIDED and state.collecting_info:
            new, _ = fill_slot(new, "user_phone", value)

        elif intent == Intent.EMAIL_PROVIDED and state.collecting_info:
            new, filled = fill_slot(new, "user_email", value)
            if filled and new.contact_complete:
                new = new.evolve(
                    stage=StageMachine.transition(new.stage, StageTrigger.INQUIRY_SUBMITTED)
                )

        elif intent == Intent.PROPERTY_TYPE:
            new, _ = fill_slot(new, "property_type", value)

        elif intent == Intent.BEDROOM_COUNT:
            new, _ = fill_slot(new, "bedroom_count", value)

        if (
            intent not in (None, Intent.GREETING)
            and new.stage == ConversationStage.GREETING
        ):
            new = new.evolve(stage=StageMachine.transition(new.stage, StageTrigger.BROWSING))

        return new

    # ------------------------------------------------------------------ #
    # Turn handling
    # ------------------------------------------------------------------ #

    async def handle_turn(
        self,
        session: ConversationSession,
        text: str,
        property: Optional[PropertyContext] = None,
    ) -> TurnResult:
        """
        Process one visitor message.

        Raises:
            InquirySubmissionError: the submitter rejected the inquiry.
            Anything else the submitter raises. In both cases the session
            is left exactly as it was before the turn, so the visitor can
            resend the email to retry.
        """
        async with session._lock:
            set_session_id(session.session_id)
            previous = session.state

            text = text.strip()
            if not text:
                return TurnResult(intent=None, previous_state=previous, state=previous)
            max_length = settings.chat.max_input_length
            if len(text) > max_length:
                logger.debug("Truncating input from %d to %d characters", len(text), max_length)
                text = text[:max_length]

            intent = classify(text, previous)
            new_state = self.apply_intent(intent, text, previous, property)
            logger.debug(
                "Turn intent=%s stage=%s->%s",
                intent.value if intent else None, previous.stage.value, new_state.stage.value,
            )

            inquiry = None
            entered_terminal = (
                StageMachine.is_terminal(new_state.stage)
                and not StageMachine.is_terminal(previous.stage)
            )
            if entered_terminal:
                inquiry = await self._submit(new_state, property)

            reply = self._responses.respond(intent, text, new_state, property)
            new_messages = [user_message(text), bot_message(reply)]

            if inquiry is not None and property and property.agent:
                new_messages.append(agent_message(
                    self._responses.agent_handoff(new_state, property),
                    property.agent.full_name,
                    property.agent.avatar,
                ))

            session.state = new_state
            session._append(new_messages)

            if intent == Intent.AGENT_CONTACT and self._on_agent_requested is not None:
                self._on_agent_requested()

            return TurnResult(
                intent=intent,
                previous_state=previous,
                state=new_state,
                messages=tuple(new_messages),
                inquiry=inquiry,
            )

    async def _submit(
        self, state: ConversationState, property: Optional[PropertyContext]
    ) -> InquiryResult:
        phone = normalize_phone(state.user_phone or "")
        try:
            if property is not None:
                result = await self._submitter.submit(
                    property.id,
                    state.user_name,
                    state.user_email,
                    f"Chatbot inquiry for {property.title}. Phone: {phone}. "
                    f"Interest: {state.property_interest or 'General inquiry'}",
                )
            else:
                result = await self._submitter.submit_general(GeneralInquiry(
                    name=state.user_name,
                    phone=phone,
                    email=state.user_email,
                    property_type=state.property_type,
                    bedroom_count=state.bedroom_count,
                    property_interest=state.property_interest or "General inquiry",
                    message=f"Client interested in: {self._describe_interest(state)}",
                ))
        except Exception as exc:
            logger.error("Inquiry submission failed: %s", exc)
            raise

        if not result.success:
            logger.warning("Inquiry rejected: %s", result.message)
            raise InquirySubmissionError(result.message or "Inquiry was rejected")

        logger.info("Inquiry submitted: %s", result.inquiry_id)
        return result

    @staticmethod
    def _describe_interest(state: ConversationState) -> str:
        if state.property_interest:
            return state.property_interest
        if state.property_type:
            return state.property_type
        if state.bedroom_count:
            return f"{state.bedroom_count} bedroom property"
        return "real estate"
