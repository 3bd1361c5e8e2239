"""
Rule-based intent classifier for free-text visitor messages.

Rules are evaluated top-to-bottom and the first match wins. The lexical
rules overlap (a bare "2" could be a bedroom count or part of some other
answer), so precedence is declared once in ``INTENT_RULES`` instead of
being implied by code order.

The name rule is the only context-sensitive rule. It fires only when the
caller passes ``awaiting_name=True``, i.e. right after the assistant asked
for the visitor's name and before a name was stored.

Usage:
    intent = classify("I want to buy", state)
    assert intent == Intent.BUY_INTENT
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from lead_assistant.conversation.state import ConversationState

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 20
MIN_NAME_LENGTH = 1


class Intent(str, Enum):
    """Closed set of intents the assistant understands."""
    GREETING = "greeting"
    VIEW_LISTINGS = "view_listings"
    BUY_INTENT = "buy_intent"
    SELL_INTENT = "sell_intent"
    PROPERTY_TYPE = "property_type"
    BEDROOM_COUNT = "bedroom_count"
    PHONE_PROVIDED = "phone_provided"
    EMAIL_PROVIDED = "email_provided"
    NAME_PROVIDED = "name_provided"
    PROPERTY_SEARCH = "property_search"
    PRICE_INQUIRY = "price_inquiry"
    LOCATION_INQUIRY = "location_inquiry"
    AGENT_CONTACT = "agent_contact"
    VIEWING_REQUEST = "viewing_request"
    HELP = "help"
    THANKS = "thanks"


PROPERTY_TYPES = ("apartment", "house", "condo", "villa", "penthouse", "studio", "flat", "loft")

_GREETING = re.compile(
    r"^(hi|hello|hey|hi there|hello there|greetings|good (morning|afternoon|evening))$",
    re.IGNORECASE,
)
_VIEW_LISTINGS = re.compile(
    r"^(show|view|see|display|list)\s+(me\s+)?(available\s+)?"
    r"(listing|listings|properties|homes|houses|apartments)$",
    re.IGNORECASE,
)
_BUY_PHRASE = re.compile(
    r"^(want to buy|interested in buying|looking to buy|buy this|buy it|purchase)$",
    re.IGNORECASE,
)
_BUY_FIRST_PERSON = re.compile(r"^i (want|would like) to (buy|purchase)", re.IGNORECASE)
_SELL_PHRASE = re.compile(
    r"^(want to sell|interested in selling|looking to sell|sell a property)$|^sell my\b",
    re.IGNORECASE,
)
_SELL_FIRST_PERSON = re.compile(r"^i (want|would like) to sell", re.IGNORECASE)
_PROPERTY_TYPE = re.compile(rf"^({'|'.join(PROPERTY_TYPES)})$", re.IGNORECASE)
_BEDROOM_PATTERNS = (
    re.compile(r"^\d+\s*(bed|bedroom|br)s?$", re.IGNORECASE),
    re.compile(r"^(one|two|three|four|five)\s*(bed|bedroom|br)s?$", re.IGNORECASE),
    re.compile(r"^\d+\s*(bed|bedroom)\s*(apartment|house|condo|villa|flat)", re.IGNORECASE),
    # Bare numbers are read as bedroom counts as well.
    re.compile(r"^[1-9][0-9]?$"),
)
_PHONE = re.compile(r"^\+?[0-9\s()\-.]{7,}$")
_EMAIL = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")

_NAME_FORBIDDEN_CHARS = re.compile(r'[@#$%^&*(),.?":{}|<>]')
_ACKNOWLEDGEMENTS = re.compile(
    r"^(yes|no|maybe|ok|okay|sure|thanks|thank you|hi|hello|hey|there|greetings)$",
    re.IGNORECASE,
)
_GREETING_WORD = re.compile(r"\b(hi|hello|hey|there|greetings)\b", re.IGNORECASE)
_DIGIT = re.compile(r"\d")

# Declared order is the evaluation order for the keyword fallback.
INTENT_KEYWORDS: dict[Intent, tuple[str, ...]] = {
    Intent.PROPERTY_SEARCH: (
        "find", "search", "looking for", "property", "house", "apartment",
        "condo", "buy", "rent", "purchase",
    ),
    Intent.PRICE_INQUIRY: (
        "price", "cost", "how much", "afford", "budget", "expensive",
        "cheap", "pricing", "worth", "value",
    ),
    Intent.LOCATION_INQUIRY: (
        "where", "location", "area", "neighborhood", "neighbourhood", "city",
        "near", "close to", "address", "located",
    ),
    Intent.AGENT_CONTACT: (
        "agent", "speak", "talk", "contact", "call", "message", "human",
        "person", "representative", "sales",
    ),
    Intent.VIEWING_REQUEST: (
        "view", "visit", "tour", "see", "schedule", "appointment", "showing",
        "look at", "check out", "inspect",
    ),
    Intent.HELP: (
        "help", "assist", "support", "guide", "information", "info",
        "what can you do", "how does this work",
    ),
    Intent.THANKS: ("thanks", "thank you", "appreciate", "grateful", "thx"),
}


def _is_greeting(text: str, awaiting_name: bool) -> bool:
    return bool(_GREETING.match(text))


def _is_view_listings(text: str, awaiting_name: bool) -> bool:
    return bool(_VIEW_LISTINGS.match(text))


def _is_buy(text: str, awaiting_name: bool) -> bool:
    return bool(_BUY_PHRASE.match(text) or _BUY_FIRST_PERSON.match(text))


def _is_sell(text: str, awaiting_name: bool) -> bool:
    return bool(_SELL_PHRASE.match(text) or _SELL_FIRST_PERSON.match(text))


def _is_property_type(text: str, awaiting_name: bool) -> bool:
    return bool(_PROPERTY_TYPE.match(text))


def _is_bedroom_count(text: str, awaiting_name: bool) -> bool:
    return any(p.match(text) for p in _BEDROOM_PATTERNS)


def _is_phone(text: str, awaiting_name: bool) -> bool:
    return bool(_PHONE.match(text))


def _is_email(text: str, awaiting_name: bool) -> bool:
    return bool(_EMAIL.search(text))


def looks_like_name(text: str) -> bool:
    """Apply every "not a name" filter to already-trimmed text."""
    if not MIN_NAME_LENGTH < len(text) < MAX_NAME_LENGTH:
        return False
    if _NAME_FORBIDDEN_CHARS.search(text):
        return False
    if _ACKNOWLEDGEMENTS.match(text) or _GREETING_WORD.search(text):
        return False
    # A number anywhere disqualifies the text as a name.
    return not _DIGIT.search(text)


def _is_name(text: str, awaiting_name: bool) -> bool:
    return awaiting_name and looks_like_name(text)


def _keyword_predicate(keywords: tuple[str, ...]) -> Callable[[str, bool], bool]:
    def predicate(text: str, awaiting_name: bool) -> bool:
        lower = text.lower()
        return any(keyword in lower for keyword in keywords)
    return predicate


@dataclass(frozen=True)
class IntentRule:
    """A predicate over trimmed text and the name gate, paired with its intent."""
    intent: Intent
    predicate: Callable[[str, bool], bool]

    def matches(self, text: str, awaiting_name: bool) -> bool:
        return self.predicate(text, awaiting_name)


INTENT_RULES: list[IntentRule] = [
    IntentRule(Intent.GREETING, _is_greeting),
    IntentRule(Intent.VIEW_LISTINGS, _is_view_listings),
    IntentRule(Intent.BUY_INTENT, _is_buy),
    IntentRule(Intent.SELL_INTENT, _is_sell),
    IntentRule(Intent.PROPERTY_TYPE, _is_property_type),
    IntentRule(Intent.BEDROOM_COUNT, _is_bedroom_count),
    IntentRule(Intent.PHONE_PROVIDED, _is_phone),
    IntentRule(Intent.EMAIL_PROVIDED, _is_email),
    IntentRule(Intent.NAME_PROVIDED, _is_name),
    *[
        IntentRule(intent, _keyword_predicate(keywords))
        for intent, keywords in INTENT_KEYWORDS.items()
    ],
]


def classify_text(text: str, awaiting_name: bool = False) -> Optional[Intent]:
    """
    Classify one message.

    Args:
        text: Raw visitor input.
        awaiting_name: Whether the assistant has just asked for a name
            that has not been given yet.

    Returns:
        The first matching intent, or None when nothing matches.
    """
    trimmed = text.strip()
    if not trimmed:
        return None
    for rule in INTENT_RULES:
        if rule.matches(trimmed, awaiting_name):
            logger.debug("Classified %r as %s", trimmed, rule.intent.value)
            return rule.intent
    logger.debug("No intent matched for %r", trimmed)
    return None


def classify(text: str, state: ConversationState) -> Optional[Intent]:
    """Classify ``text`` with the name gate taken from ``state``."""
    return classify_text(text, awaiting_name=state.awaiting_name)
