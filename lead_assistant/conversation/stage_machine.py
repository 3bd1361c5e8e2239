"""
Transition table for the conversation stage.

The lead-capture flow only moves forward:

    greeting -> collecting_info -> inquiry_submitted
    greeting -> general -> collecting_info

Every allowed move is declared in ``StageMachine.TRANSITIONS``. The
machine holds no state of its own; callers pass the current stage and
get the next one back.

Usage:
    stage = StageMachine.transition(ConversationStage.GREETING, StageTrigger.LEAD_STARTED)
    assert stage == ConversationStage.COLLECTING_INFO
"""

import logging
from dataclasses import dataclass
from enum import Enum

from lead_assistant.conversation.state import ConversationStage

logger = logging.getLogger(__name__)


class StageTrigger(str, Enum):
    """Events that move the conversation between stages."""
    BROWSING = "browsing"
    LEAD_STARTED = "lead_started"
    INQUIRY_SUBMITTED = "inquiry_submitted"


@dataclass(frozen=True)
class Transition:
    """A single valid stage transition."""
    from_stage: ConversationStage
    to_stage: ConversationStage
    trigger: StageTrigger


class InvalidTransitionError(Exception):
    """Raised when a trigger is not valid from the current stage."""


class StageMachine:
    """Stateless lookup over the declared stage transitions."""

    TRANSITIONS: list[Transition] = [
        # --- Opening ---
        Transition(ConversationStage.GREETING, ConversationStage.GENERAL,
                   StageTrigger.BROWSING),
        Transition(ConversationStage.GREETING, ConversationStage.COLLECTING_INFO,
                   StageTrigger.LEAD_STARTED),

        # --- Browsing ---
        Transition(ConversationStage.GENERAL, ConversationStage.GENERAL,
                   StageTrigger.BROWSING),
        Transition(ConversationStage.GENERAL, ConversationStage.COLLECTING_INFO,
                   StageTrigger.LEAD_STARTED),

        # --- Lead capture ---
        Transition(ConversationStage.COLLECTING_INFO, ConversationStage.INQUIRY_SUBMITTED,
                   StageTrigger.INQUIRY_SUBMITTED),
    ]

    @classmethod
    def transition(cls, stage: ConversationStage, trigger: StageTrigger) -> ConversationStage:
        """
        Resolve the stage reached from ``stage`` via ``trigger``.

        Raises:
            InvalidTransitionError: If no transition is declared.
        """
        for t in cls.TRANSITIONS:
            if t.from_stage == stage and t.trigger == trigger:
                if t.to_stage != stage:
                    logger.debug(
                        "Stage transition: %s -> %s (trigger: %s)",
                        stage.value, t.to_stage.value, trigger.value,
                    )
                return t.to_stage

        valid = [t.value for t in cls.valid_triggers(stage)]
        raise InvalidTransitionError(
            f"No valid transition from '{stage.value}' "
            f"with trigger '{trigger.value}'. Valid triggers: {valid}"
        )

    @classmethod
    def can_transition(cls, stage: ConversationStage, trigger: StageTrigger) -> bool:
        return trigger in cls.valid_triggers(stage)

    @classmethod
    def valid_triggers(cls, stage: ConversationStage) -> list[StageTrigger]:
        """Return all triggers valid from ``stage``."""
        return [t.trigger for t in cls.TRANSITIONS if t.from_stage == stage]

    @classmethod
    def is_terminal(cls, stage: ConversationStage) -> bool:
        """Check if lead capture is finished for this stage."""
        return stage == ConversationStage.INQUIRY_SUBMITTED
