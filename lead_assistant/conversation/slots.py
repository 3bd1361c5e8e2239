"""
Contact slots collected during lead capture.

Slots are filled in declared order (name -> phone -> email) and are
write-once: a filled slot is never overwritten. Search-refinement slots
(property type, bedroom count) follow the same write-once rule but have
no ordering.

Usage:
    state, filled = fill_slot(state, "user_name", "John")
    nxt = get_next_empty_slot(state)  # -> phone slot
"""

import logging
from dataclasses import dataclass
from typing import Optional

from lead_assistant.conversation.state import ConversationState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SlotDefinition:
    """Schema for a single contact slot."""

    name: str
    display_name: str
    prompt: str


CONTACT_SLOTS: list[SlotDefinition] = [
    SlotDefinition(
        name="user_name",
        display_name="name",
        prompt="Could you please tell me your name?",
    ),
    SlotDefinition(
        name="user_phone",
        display_name="phone number",
        prompt=(
            "Could you please provide your phone number? "
            "This is important for the agent to contact you directly."
        ),
    ),
    SlotDefinition(
        name="user_email",
        display_name="email address",
        prompt=(
            "Could you also provide your email address so the agent "
            "can send you property details?"
        ),
    ),
]

REFINEMENT_SLOTS = ("property_type", "bedroom_count")


def _get_definition(name: str) -> SlotDefinition:
    for defn in CONTACT_SLOTS:
        if defn.name == name:
            return defn
    raise ValueError(f"Unknown slot: {name}")


def get_next_empty_slot(state: ConversationState) -> Optional[SlotDefinition]:
    """Get the next contact slot that hasn't been filled."""
    for defn in CONTACT_SLOTS:
        if not getattr(state, defn.name):
            return defn
    return None


def get_missing_slots(state: ConversationState) -> list[SlotDefinition]:
    """Get all contact slots still unfilled."""
    return [defn for defn in CONTACT_SLOTS if not getattr(state, defn.name)]


def fill_slot(state: ConversationState, name: str, raw_value: str) -> tuple[ConversationState, bool]:
    """
    Fill a slot if the write-once and ordering rules allow it.

    Contact slots only accept a value when they are the next empty slot.
    Returns:
        (new_state, filled) where filled is False if the state is unchanged.
    """
    value = raw_value.strip()
    if not value:
        return state, False

    if name in REFINEMENT_SLOTS:
        if getattr(state, name):
            logger.debug("Slot '%s' already filled, keeping existing value", name)
            return state, False
        return state.evolve(**{name: value}), True

    defn = _get_definition(name)
    nxt = get_next_empty_slot(state)
    if nxt is None or nxt.name != defn.name:
        logger.debug("Slot '%s' is not next in order, ignoring", name)
        return state, False

    logger.debug("Slot '%s' set", name)
    return state.evolve(**{name: value}), True
