"""
Per-session conversation state.

State values are immutable. Every turn produces a new ConversationState
through ``evolve`` so earlier states stay valid for inspection and tests.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Optional


class ConversationStage(str, Enum):
    """Coarse phase of the conversation."""
    GREETING = "greeting"
    COLLECTING_INFO = "collecting_info"
    INQUIRY_SUBMITTED = "inquiry_submitted"
    GENERAL = "general"


@dataclass(frozen=True)
class ConversationState:
    """Everything the assistant remembers about one visitor's session."""

    collecting_info: bool = False
    explicitly_asked_for_name: bool = False
    user_name: Optional[str] = None
    user_phone: Optional[str] = None
    user_email: Optional[str] = None
    property_interest: Optional[str] = None
    property_type: Optional[str] = None
    bedroom_count: Optional[str] = None
    stage: ConversationStage = ConversationStage.GREETING

    @property
    def awaiting_name(self) -> bool:
        """True when the next free-text reply may be read as a name."""
        return self.explicitly_asked_for_name and not self.user_name

    @property
    def contact_complete(self) -> bool:
        return bool(self.user_name and self.user_phone and self.user_email)

    def evolve(self, **changes: Any) -> "ConversationState":
        """Return a copy with ``changes`` applied."""
        return replace(self, **changes)
