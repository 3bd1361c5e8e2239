"""Tests for import chains, schemas and module integrity."""

import pytest
from pydantic import ValidationError


class TestSchemaImports:
    def test_message_kinds(self):
        from lead_assistant.schemas import MessageKind

        assert MessageKind.USER == "user"
        assert MessageKind.AGENT == "agent"

    def test_agent_message_requires_sender(self):
        from lead_assistant.schemas import Message, MessageKind

        with pytest.raises(ValidationError, match="sender"):
            Message(kind=MessageKind.AGENT, text="Hi there")

    def test_messages_are_immutable(self):
        from lead_assistant.schemas.message_schema import bot_message

        message = bot_message("Hello")
        with pytest.raises(ValidationError):
            message.text = "Changed"

    def test_message_ids_are_unique(self):
        from lead_assistant.schemas.message_schema import user_message

        assert user_message("a").id != user_message("a").id

    def test_agent_message_helper(self):
        from lead_assistant.schemas.message_schema import agent_message

        message = agent_message("Hi John", "Sarah Haddad", "sarah.png")
        assert message.sender.name == "Sarah Haddad"
        assert message.sender.avatar == "sarah.png"

    def test_listing_agent_without_last_name(self):
        from lead_assistant.schemas import ListingAgent

        assert ListingAgent(first_name="Omar").full_name == "Omar"


class TestPackageImports:
    def test_conversation_package(self):
        from lead_assistant.conversation import (
            ConversationStage, ConversationState, LeadCaptureController, StageMachine,
        )
        assert ConversationState().stage == ConversationStage.GREETING
        assert callable(StageMachine.transition)
        assert LeadCaptureController is not None

    def test_tools_package(self):
        from lead_assistant.tools import HttpInquirySubmitter, MockInquirySubmitter, get_property

        assert callable(get_property)
        assert HttpInquirySubmitter is not None
        assert MockInquirySubmitter is not None

    def test_session_logging_context(self):
        import logging

        from lead_assistant.logging_context import (
            SessionIdFilter, get_session_id, get_session_logger, set_session_id,
        )

        set_session_id("CHAT-test01")
        assert get_session_id() == "CHAT-test01"
        logger = get_session_logger("lead_assistant.test")
        get_session_logger("lead_assistant.test")
        assert sum(isinstance(f, SessionIdFilter) for f in logger.filters) == 1
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
        SessionIdFilter().filter(record)
        assert record.session_id == "CHAT-test01"


class TestConfigImport:
    def test_import_config(self):
        from lead_assistant.config import settings

        assert settings.brand.name
        assert settings.chat.max_input_length >= 20

    def test_root_handlers_carry_session_id(self):
        import logging

        from lead_assistant.config import load_config
        from lead_assistant.logging_context import SessionIdFilter, set_session_id

        load_config()
        set_session_id("CHAT-handler")
        for handler in logging.getLogger().handlers:
            assert any(isinstance(f, SessionIdFilter) for f in handler.filters)
            record = logging.LogRecord("httpx", logging.INFO, __file__, 1, "msg", None, None)
            assert handler.filter(record)
            assert record.session_id == "CHAT-handler"


class TestConsoleDemo:
    def test_console_session_starts_with_greeting(self):
        from console_demo import ConsoleSession

        session = ConsoleSession()
        assert session.session.state.stage.value == "greeting"
        assert len(session.session.messages) == 1

    @pytest.mark.asyncio
    async def test_buy_scenario_stores_inquiry(self, capsys):
        from console_demo import ConsoleSession
        from lead_assistant.tools.inquiry import list_inquiries
        from lead_assistant.tools.properties import get_property

        session = ConsoleSession(get_property("sea-view-villa"))
        await session.run_scenario("buy")
        assert session.session.state.stage.value == "inquiry_submitted"
        assert len(list_inquiries()) == 1
        assert "Sarah Haddad" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_browse_summary_lists_missing_contact_details(self, capsys):
        from console_demo import ConsoleSession

        session = ConsoleSession()
        await session.run_scenario("browse")
        assert "Still missing: name, phone number, email address" in capsys.readouterr().out
