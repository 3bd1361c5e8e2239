"""Tests for the rule-based intent classifier."""

import pytest

from lead_assistant.conversation.intent_classifier import (
    INTENT_KEYWORDS,
    INTENT_RULES,
    Intent,
    classify,
    classify_text,
    looks_like_name,
)
from tests.conftest import collecting_state, make_state


class TestGreeting:
    @pytest.mark.parametrize(
        "text", ["hi", "hello", "hey", "hi there", "good morning", "good evening"]
    )
    def test_greeting_phrases(self, text):
        assert classify(text, make_state()) == Intent.GREETING

    def test_case_and_whitespace_insensitive(self):
        assert classify("  Good Afternoon ", make_state()) == Intent.GREETING

    def test_greeting_inside_sentence_is_not_greeting(self):
        assert classify("hi, what is the price", make_state()) != Intent.GREETING


class TestListingsAndLeadIntents:
    @pytest.mark.parametrize(
        "text", ["show listings", "view available properties", "show me properties", "list homes"]
    )
    def test_view_listings(self, text):
        assert classify_text(text) == Intent.VIEW_LISTINGS

    @pytest.mark.parametrize(
        "text", ["I want to buy", "i would like to purchase this one", "want to buy", "buy it"]
    )
    def test_buy_intent(self, text):
        assert classify_text(text) == Intent.BUY_INTENT

    @pytest.mark.parametrize(
        "text", ["I want to sell", "interested in selling", "sell my house", "sell a property"]
    )
    def test_sell_intent(self, text):
        assert classify_text(text) == Intent.SELL_INTENT

    def test_buy_word_in_question_falls_back_to_keywords(self):
        assert classify_text("can I buy with a mortgage") == Intent.PROPERTY_SEARCH


class TestPropertyTypeAndBedrooms:
    @pytest.mark.parametrize("text", ["villa", "Apartment", "loft", "penthouse"])
    def test_single_word_property_type(self, text):
        assert classify_text(text) == Intent.PROPERTY_TYPE

    @pytest.mark.parametrize(
        "text", ["3 bed", "three bedroom", "2 bed apartment", "4 bedrooms", "2br"]
    )
    def test_bedroom_phrases(self, text):
        assert classify_text(text) == Intent.BEDROOM_COUNT

    def test_bare_number_is_bedroom_count(self):
        assert classify_text("42") == Intent.BEDROOM_COUNT

    def test_bare_number_out_of_range_is_not_bedroom_count(self):
        assert classify_text("0") is None
        assert classify_text("100") is None


class TestContactDetails:
    @pytest.mark.parametrize(
        "text", ["+971501234567", "050 123 4567", "(04) 555-1234", "555.123.4567"]
    )
    def test_phone_numbers(self, text):
        assert classify_text(text) == Intent.PHONE_PROVIDED

    def test_short_digit_string_is_not_phone(self):
        assert classify_text("12345") != Intent.PHONE_PROVIDED

    def test_email_anywhere_in_text(self):
        assert classify_text("my email is john@example.com") == Intent.EMAIL_PROVIDED


class TestNameGate:
    def test_name_when_asked(self):
        assert classify("John", collecting_state()) == Intent.NAME_PROVIDED

    def test_name_ignored_when_not_asked(self):
        assert classify("John", make_state()) is None

    def test_name_ignored_once_name_is_stored(self):
        state = collecting_state(user_name="John")
        assert classify("Maria", state) is None

    def test_digits_disqualify_name(self):
        assert classify("2 guests", collecting_state()) != Intent.NAME_PROVIDED

    @pytest.mark.parametrize("text", ["yes", "ok", "thank you", "no"])
    def test_acknowledgements_are_not_names(self, text):
        assert classify(text, collecting_state()) != Intent.NAME_PROVIDED

    def test_greeting_word_is_not_a_name(self):
        assert classify("hey John", collecting_state()) != Intent.NAME_PROVIDED

    def test_punctuation_is_not_a_name(self):
        assert not looks_like_name("John, maybe")

    def test_too_long_is_not_a_name(self):
        assert not looks_like_name("Maximilian Alexander Smith")

    def test_single_character_is_not_a_name(self):
        assert not looks_like_name("J")

    def test_two_word_name(self):
        assert looks_like_name("Mary Jones")

    def test_earlier_rules_win_over_name(self):
        assert classify("villa", collecting_state()) == Intent.PROPERTY_TYPE


class TestKeywordFallback:
    def test_price_question(self):
        assert classify_text("What's the price?") == Intent.PRICE_INQUIRY

    def test_location_question(self):
        assert classify_text("where is it?") == Intent.LOCATION_INQUIRY

    def test_agent_request(self):
        assert classify_text("can I speak to an agent") == Intent.AGENT_CONTACT

    def test_viewing_request(self):
        assert classify_text("can I schedule a tour") == Intent.VIEWING_REQUEST

    def test_help(self):
        assert classify_text("what can you do") == Intent.HELP

    def test_thanks(self):
        assert classify_text("thanks a lot") == Intent.THANKS

    def test_declared_order_breaks_ties(self):
        # "property" (search) is declared before "located" (location).
        assert classify_text("where is the property located") == Intent.PROPERTY_SEARCH

    def test_no_match_returns_none(self):
        assert classify_text("qwerty zxcv") is None

    def test_empty_input_returns_none(self):
        assert classify_text("   ") is None


class TestRuleOrder:
    def test_rule_precedence_is_declared(self):
        order = [rule.intent for rule in INTENT_RULES]
        assert order[:9] == [
            Intent.GREETING,
            Intent.VIEW_LISTINGS,
            Intent.BUY_INTENT,
            Intent.SELL_INTENT,
            Intent.PROPERTY_TYPE,
            Intent.BEDROOM_COUNT,
            Intent.PHONE_PROVIDED,
            Intent.EMAIL_PROVIDED,
            Intent.NAME_PROVIDED,
        ]
        assert order[9:] == list(INTENT_KEYWORDS)

    def test_every_intent_has_a_rule(self):
        assert {rule.intent for rule in INTENT_RULES} == set(Intent)
