"""
Offline console demo: chat with the lead-capture assistant in a terminal.

Uses the real classifier, controller and response generator with the mock
inquiry store and property catalogue. No network calls.

Usage:
    python console_demo.py
    python console_demo.py --property sea-view-villa
    python console_demo.py --scenario buy
"""

import argparse
import asyncio
from typing import Optional

from lead_assistant.config import settings
from lead_assistant.conversation.controller import ConversationSession, LeadCaptureController
from lead_assistant.conversation.slots import get_missing_slots
from lead_assistant.schemas.message_schema import Message, MessageKind
from lead_assistant.schemas.property_schema import PropertyContext
from lead_assistant.tools.inquiry import InquirySubmissionError, MockInquirySubmitter, list_inquiries
from lead_assistant.tools.properties import get_all_properties, get_property

BLUE = "\033[94m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
RED = "\033[91m"
DIM = "\033[2m"
RESET = "\033[0m"
BOLD = "\033[1m"


class ConsoleSession:
    """Runs a chat session against the assistant in the terminal."""

    # Pre-scripted scenarios for --scenario flag
    SCENARIOS: dict[str, list[str]] = {
        "buy": [
            "hi",
            "What's the price?",
            "I want to buy",
            "John",
            "+971501234567",
            "john@example.com",
            "thanks",
        ],
        "browse": [
            "hello",
            "villa",
            "3 bedroom",
            "show listings",
            "where is it located?",
        ],
        "sell": [
            "I want to sell my apartment",
            "Maria",
            "050 123 4567",
            "maria@example.com",
        ],
    }

    def __init__(self, property: Optional[PropertyContext] = None) -> None:
        self.property = property
        self.controller = LeadCaptureController(
            MockInquirySubmitter(),
            on_agent_requested=lambda: self.system_log("Agent contact requested"),
        )
        self.session: ConversationSession = self.controller.open_session()

    def show(self, message: Message) -> None:
        if message.kind == MessageKind.USER:
            return
        if message.kind == MessageKind.AGENT:
            name = message.sender.name if message.sender else "Agent"
            print(f"{YELLOW}{BOLD}[{name}]{RESET} {YELLOW}{message.text}{RESET}")
            return
        print(f"{GREEN}{BOLD}[Assistant]{RESET} {GREEN}{message.text}{RESET}")

    def system_log(self, text: str) -> None:
        print(f"{DIM}  >> {text}{RESET}")

    def _banner(self, title: str) -> None:
        print()
        print(f"{BOLD}{'=' * 60}{RESET}")
        print(f"{BOLD}  {settings.brand.name.upper()} ASSISTANT - {title}{RESET}")
        if self.property:
            print(f"{BOLD}  Viewing: {self.property.title} ({self.property.location}){RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")
        print()
        for message in self.session.messages:
            self.show(message)

    def _summary(self) -> None:
        state = self.session.state
        print(f"\n{BOLD}{'=' * 60}{RESET}")
        print(f"{DIM}  Final stage: {state.stage.value}{RESET}")
        print(f"{DIM}  Lead: name={state.user_name} phone={state.user_phone} "
              f"email={state.user_email}{RESET}")
        missing = get_missing_slots(state)
        if missing:
            print(f"{DIM}  Still missing: {', '.join(s.display_name for s in missing)}{RESET}")
        print(f"{DIM}  Inquiries stored: {len(list_inquiries())}{RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")

    async def _process_input(self, text: str) -> None:
        try:
            result = await self.controller.handle_turn(self.session, text, self.property)
        except InquirySubmissionError as exc:
            print(f"{RED}Could not send your inquiry: {exc}. Please send your email again.{RESET}")
            return
        for message in result.messages:
            self.show(message)
        intent = result.intent.value if result.intent else "none"
        self.system_log(f"Intent: {intent} | Stage: {result.state.stage.value}")
        if result.inquiry is not None:
            self.system_log(f"Inquiry: {result.inquiry.message}")

    async def run_scenario(self, scenario: str) -> None:
        """Auto-play a pre-scripted scenario for demo purposes."""
        steps = self.SCENARIOS.get(scenario)
        if not steps:
            print(f"{RED}Unknown scenario: {scenario}{RESET}")
            return

        self._banner(f"Scenario: {scenario}")
        for step in steps:
            print(f"\n{BLUE}[Visitor] {RESET}{step}")
            await self._process_input(step)
        self._summary()

    async def run(self) -> None:
        self._banner("Type 'quit' to exit")
        while True:
            user_input = input(f"\n{BLUE}[Visitor] {RESET}").strip()
            if not user_input:
                continue
            if user_input.lower() in ("quit", "exit", "q"):
                print(f"\n{DIM}Session ended.{RESET}")
                break
            await self._process_input(user_input)
        self._summary()


def main() -> None:
    parser = argparse.ArgumentParser(description="Offline lead-capture assistant demo")
    parser.add_argument(
        "--property",
        choices=[p.id for p in get_all_properties()],
        default=None,
        help="Property the visitor is viewing",
    )
    parser.add_argument(
        "--scenario",
        choices=sorted(ConsoleSession.SCENARIOS),
        default=None,
        help="Auto-play a pre-scripted scenario instead of interactive mode",
    )
    args = parser.parse_args()

    property = get_property(args.property) if args.property else None
    session = ConsoleSession(property)
    if args.scenario:
        asyncio.run(session.run_scenario(args.scenario))
    else:
        asyncio.run(session.run())


if __name__ == "__main__":
    main()
