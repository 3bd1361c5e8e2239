"""Tests for the conversation stage transition table."""

import pytest

from lead_assistant.conversation.stage_machine import (
    InvalidTransitionError,
    StageMachine,
    StageTrigger,
)
from lead_assistant.conversation.state import ConversationStage, ConversationState


class TestInitialState:
    def test_new_state_starts_in_greeting(self):
        assert ConversationState().stage == ConversationStage.GREETING

    def test_greeting_is_not_terminal(self):
        assert not StageMachine.is_terminal(ConversationStage.GREETING)


class TestGreetingTransitions:
    def test_greeting_to_general(self):
        new = StageMachine.transition(ConversationStage.GREETING, StageTrigger.BROWSING)
        assert new == ConversationStage.GENERAL

    def test_greeting_to_collecting_info(self):
        new = StageMachine.transition(ConversationStage.GREETING, StageTrigger.LEAD_STARTED)
        assert new == ConversationStage.COLLECTING_INFO

    def test_cannot_submit_from_greeting(self):
        with pytest.raises(InvalidTransitionError):
            StageMachine.transition(ConversationStage.GREETING, StageTrigger.INQUIRY_SUBMITTED)


class TestLeadCapture:
    def test_general_to_collecting_info(self):
        new = StageMachine.transition(ConversationStage.GENERAL, StageTrigger.LEAD_STARTED)
        assert new == ConversationStage.COLLECTING_INFO

    def test_general_is_steady(self):
        new = StageMachine.transition(ConversationStage.GENERAL, StageTrigger.BROWSING)
        assert new == ConversationStage.GENERAL

    def test_collecting_info_to_submitted(self):
        new = StageMachine.transition(
            ConversationStage.COLLECTING_INFO, StageTrigger.INQUIRY_SUBMITTED
        )
        assert new == ConversationStage.INQUIRY_SUBMITTED
        assert StageMachine.is_terminal(new)

    def test_collecting_info_does_not_go_back(self):
        assert not StageMachine.can_transition(
            ConversationStage.COLLECTING_INFO, StageTrigger.BROWSING
        )

    def test_submitted_has_no_exits(self):
        assert StageMachine.valid_triggers(ConversationStage.INQUIRY_SUBMITTED) == []

    def test_error_lists_valid_triggers(self):
        with pytest.raises(InvalidTransitionError, match="inquiry_submitted"):
            StageMachine.transition(ConversationStage.COLLECTING_INFO, StageTrigger.LEAD_STARTED)


class TestValidTriggers:
    def test_valid_triggers_from_greeting(self):
        assert StageMachine.valid_triggers(ConversationStage.GREETING) == [
            StageTrigger.BROWSING,
            StageTrigger.LEAD_STARTED,
        ]

    def test_can_transition(self):
        assert StageMachine.can_transition(ConversationStage.GREETING, StageTrigger.BROWSING)
        assert not StageMachine.can_transition(
            ConversationStage.GREETING, StageTrigger.INQUIRY_SUBMITTED
        )
