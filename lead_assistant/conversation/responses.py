"""
Response generation for classified visitor messages.

``ResponseGenerator.respond`` is a pure function of its arguments: it
performs no I/O and never mutates the state it is given. The only source
of variety is the ``chooser`` used for greeting and fallback replies,
which tests can replace with a deterministic selector.
"""

import random
from typing import Callable, Optional, Sequence

from lead_assistant.config import settings
from lead_assistant.conversation.intent_classifier import Intent
from lead_assistant.conversation.slots import get_next_empty_slot
from lead_assistant.conversation.state import ConversationStage, ConversationState
from lead_assistant.schemas.property_schema import PropertyContext
from lead_assistant.utils import format_price

Chooser = Callable[[Sequence[str]], str]

GREETING_RESPONSES: tuple[str, ...] = (
    f"Hello! Welcome to {settings.brand.name}. How can I help you today?",
    "Hi there! I'm your real estate assistant. What are you looking for?",
    f"Welcome to {settings.brand.name}! I can help you find your dream property. "
    "What are you interested in?",
)

FALLBACK_RESPONSES: tuple[str, ...] = (
    "I'm not sure I understand. Could you rephrase that?",
    "I'm still learning. Can you try asking in a different way?",
    "I didn't quite catch that. Would you like to speak with a real agent instead?",
)

RANDOMIZED_INTENTS = frozenset({None, Intent.GREETING})

_LISTINGS_FOLLOW_UP = (
    "You can view more details by clicking on any property that interests you. "
    "Would you like to speak with an agent about any of these properties?"
)

CONTACT_INTENTS = frozenset({Intent.NAME_PROVIDED, Intent.PHONE_PROVIDED, Intent.EMAIL_PROVIDED})


def _lower_first(text: str) -> str:
    return text[:1].lower() + text[1:]


class ResponseGenerator:
    """Maps an intent plus conversation context to the assistant's reply."""

    def __init__(self, chooser: Optional[Chooser] = None) -> None:
        self._choose: Chooser = chooser or random.choice

    def greeting(self) -> str:
        """Opening line shown when a session starts."""
        return self._choose(GREETING_RESPONSES)

    def fallback(self) -> str:
        return self._choose(FALLBACK_RESPONSES)

    def respond(
        self,
        intent: Optional[Intent],
        text: str,
        state: ConversationState,
        property: Optional[PropertyContext] = None,
    ) -> str:
        """
        Build the reply for one turn.

        Args:
            intent: Classified intent, or None when nothing matched.
            text: The visitor's raw message.
            state: Conversation state after this turn's slot updates.
            property: The property being viewed, if any.
        """
        if intent is None:
            return self.fallback()

        message = text.strip()

        if state.collecting_info:
            slot_reply = self._slot_acknowledgement(intent, message, state)
            if slot_reply is not None:
                return slot_reply

        handler = self._HANDLERS.get(intent)
        if handler is None:
            return self.fallback()
        return handler(self, message, state, property)

    # ------------------------------------------------------------------ #
    # Lead capture
    # ------------------------------------------------------------------ #

    def _slot_acknowledgement(
        self, intent: Intent, message: str, state: ConversationState
    ) -> Optional[str]:
        """Acknowledge a slot stored this turn and prompt for the next one."""
        nxt = get_next_empty_slot(state)

        if intent == Intent.NAME_PROVIDED and state.user_name and not state.user_phone:
            return f"Thanks, {state.user_name}! {nxt.prompt}" if nxt else None

        if intent == Intent.PHONE_PROVIDED and state.user_phone and not state.user_email:
            return f"Thank you! Now, {_lower_first(nxt.prompt)}" if nxt else None

        if intent == Intent.EMAIL_PROVIDED and state.user_email:
            interest = state.property_interest or "your property inquiry"
            return (
                f"Great! An agent will contact you at {state.user_phone} and "
                f"{state.user_email} soon regarding {interest}. "
                "Is there anything specific you'd like to know in the meantime?"
            )

        # Contact detail given out of order: ask again for the missing one.
        if intent in CONTACT_INTENTS and nxt is not None:
            return f"Thanks! Before that, {_lower_first(nxt.prompt)}"
        return None

    def _already_captured(self, state, property) -> Optional[str]:
        """Reply for a lead request once all contact details are known."""
        if state.stage == ConversationStage.INQUIRY_SUBMITTED or state.contact_complete:
            subject = property.title if property else "your inquiry"
            return (
                f"An agent already has your details and will be in touch about "
                f"{subject} shortly."
            )
        return None

    def _buy_intent(self, message, state, property) -> str:
        captured = self._already_captured(state, property)
        if captured:
            return captured
        nxt = get_next_empty_slot(state)
        if property:
            return f"Great! {nxt.prompt} An agent will contact you shortly about {property.title}."
        return f"I'd be happy to help you find a property to buy. {nxt.prompt}"

    def _sell_intent(self, message, state, property) -> str:
        captured = self._already_captured(state, property)
        if captured:
            return captured
        if state.user_name:
            return (
                "Great! A listing agent will contact you shortly to discuss selling "
                f"your property. {get_next_empty_slot(state).prompt}"
            )
        return (
            "Great! Could you please provide your name and phone number? "
            "A listing agent will contact you shortly to discuss selling your property."
        )

    def _agent_contact(self, message, state, property) -> str:
        captured = self._already_captured(state, property)
        if captured:
            return captured
        if property and property.agent:
            agent = property.agent.first_name
            about = "this property"
        elif property:
            agent = "the listing agent"
            about = "this property"
        else:
            agent = "one of our experienced agents"
            about = "our properties"
        intro = f"I'd be happy to connect you with {agent} who can tell you more about {about}."
        if state.user_name:
            # Name already stored; ask for whatever is still missing.
            return f"{intro} {get_next_empty_slot(state).prompt}"
        return f"{intro} Please provide your name, and they will contact you shortly."

    def _name_provided(self, message, state, property) -> str:
        return (
            "Thank you! Could you please provide your phone number? "
            "This is important for the agent to contact you directly."
        )

    def _phone_provided(self, message, state, property) -> str:
        return "Thank you! An agent will contact you shortly at this number."

    def _email_provided(self, message, state, property) -> str:
        return (
            f"Thank you! An agent will contact you at {message} soon. "
            "Is there anything specific about properties you'd like to know while you wait?"
        )

    # ------------------------------------------------------------------ #
    # Browsing
    # ------------------------------------------------------------------ #

    def _greeting(self, message, state, property) -> str:
        if property:
            price = format_price(property.price, settings.brand.currency_symbol)
            return (
                f"Welcome to {settings.brand.name}! You're currently viewing "
                f"{property.title}. This beautiful property is priced at {price} and "
                f"located in {property.location}. How can I help you with this property today?"
            )
        return self.greeting()

    def _property_search(self, message, state, property) -> str:
        return (
            "I can help you find the perfect property. What type of property are you "
            "looking for? And do you have a specific location or budget in mind?"
        )

    def _property_type(self, message, state, property) -> str:
        return (
            f"Great! {message} properties are popular choices. "
            "How many bedrooms are you looking for?"
        )

    def _bedroom_count(self, message, state, property) -> str:
        count = f"{message} bedroom" if message.isdigit() else message
        return (
            f"I can help you find {count} properties. Are you interested in a specific "
            "location or do you have a budget in mind? I can also show you our "
            "available listings if you'd like."
        )

    def _view_listings(self, message, state, property) -> str:
        if state.bedroom_count:
            return f"Here are our available {state.bedroom_count} bedroom properties. {_LISTINGS_FOLLOW_UP}"
        if state.property_type:
            return f"Here are our available {state.property_type} properties. {_LISTINGS_FOLLOW_UP}"
        return f"Here are our available properties. {_LISTINGS_FOLLOW_UP}"

    def _price_inquiry(self, message, state, property) -> str:
        if property:
            price = format_price(property.price, settings.brand.currency_symbol)
            availability = (
                "It's currently on the market and available for purchase."
                if property.is_for_sale
                else "It's currently available for rent."
            )
            return (
                f"This property is listed at {price} ({property.status}). {availability} "
                "Would you like to schedule a viewing or speak with an agent about "
                "financing options?"
            )
        return (
            "Our properties range from affordable to luxury. What's your budget range "
            "so I can help you find something suitable?"
        )

    def _location_inquiry(self, message, state, property) -> str:
        if property:
            return (
                f"This property is located in {property.location}. "
                "Would you like to know more about the neighborhood?"
            )
        return (
            "We have properties in various prime locations. Is there a specific area "
            "or city you're interested in?"
        )

    def _viewing_request(self, message, state, property) -> str:
        if property:
            return (
                f"I can help you schedule a viewing for {property.title}. When would be "
                "a good time for you? Our agents are available 7 days a week."
            )
        return (
            "I'd be happy to arrange a property viewing for you. Could you specify "
            "which property you're interested in seeing?"
        )

    def _help(self, message, state, property) -> str:
        if property:
            return (
                "I can help you with information about this property, answer questions "
                "about its price, location, or features, connect you with the listing "
                "agent, or schedule a viewing. What would you like to know?"
            )
        return (
            "I can help you find properties, answer questions about prices and "
            "locations, connect you with an agent, or schedule a viewing. "
            "What would you like to know?"
        )

    def _thanks(self, message, state, property) -> str:
        return "You're welcome! Is there anything else I can help you with?"

    _HANDLERS: dict[Intent, Callable] = {
        Intent.GREETING: _greeting,
        Intent.VIEW_LISTINGS: _view_listings,
        Intent.BUY_INTENT: _buy_intent,
        Intent.SELL_INTENT: _sell_intent,
        Intent.PROPERTY_TYPE: _property_type,
        Intent.BEDROOM_COUNT: _bedroom_count,
        Intent.PHONE_PROVIDED: _phone_provided,
        Intent.EMAIL_PROVIDED: _email_provided,
        Intent.NAME_PROVIDED: _name_provided,
        Intent.PROPERTY_SEARCH: _property_search,
        Intent.PRICE_INQUIRY: _price_inquiry,
        Intent.LOCATION_INQUIRY: _location_inquiry,
        Intent.AGENT_CONTACT: _agent_contact,
        Intent.VIEWING_REQUEST: _viewing_request,
        Intent.HELP: _help,
        Intent.THANKS: _thanks,
    }

    # ------------------------------------------------------------------ #
    # Agent hand-off
    # ------------------------------------------------------------------ #

    @staticmethod
    def agent_handoff(state: ConversationState, property: PropertyContext) -> str:
        """Text posted by the listing agent once an inquiry has been submitted."""
        agent_name = property.agent.full_name if property.agent else "the listing agent"
        return (
            f"Hello {state.user_name}, I'm {agent_name}, the listing agent for this "
            f"property. I'll contact you shortly at {state.user_phone} and "
            f"{state.user_email} to discuss your interest in {property.title}."
        )
