"""
Tests for the first-person rewrite, end to end through the default pipeline.
"""

import pytest

from reframer import rewrite


class TestKnownStatements:
    """Behavior the reframe screen depends on."""

    def test_contraction_wins_over_pronoun(self):
        """"You're" must become "I'm", never "I're"."""
        assert rewrite("You're amazing") == "I'm amazing"

    def test_idiom(self):
        """Verify an explicit idiom swaps "you" for "myself"."""
        assert rewrite("I'm so proud of you") == "I'm so proud of myself"

    def test_explicit_adjective_phrase(self):
        """Verify "you are <adjective>" becomes "I am <adjective>"."""
        assert rewrite("You are strong") == "I am strong"

    def test_contraction_not_split_by_pronoun_pass(self):
        """Verify the pronoun pass leaves "I've" intact."""
        assert rewrite("you've got this") == "I've got this"

    def test_need_it_cleanup(self):
        """Verify the dangling "it" after "need" is removed."""
        assert rewrite("you need it") == "I need"

    def test_general_you_are(self):
        """Verify "you are" agrees as "I am" outside the explicit phrases."""
        assert rewrite("You are doing the best you can") == "I am doing the best I can"

    def test_you_were_is_a_plain_pronoun_swap(self):
        """Verify "you were" gets no agreement rule, only the pronoun swap."""
        assert rewrite("you were kind") == "I were kind"


class TestContractions:
    """Contraction phase, through the whole pipeline."""

    @pytest.mark.parametrize("text,expected", [
        ("you’re doing great", "I'm doing great"),
        ("YOU'RE enough", "I'm enough"),
        ("you'd tell a friend the same", "I'd tell a friend the same"),
        ("you’ll get through this", "I'll get through this"),
        ("You've come so far", "I've come so far"),
    ])
    def test_contractions(self, text, expected):
        """Verify straight and curly contractions in any case."""
        assert rewrite(text) == expected


class TestPhrases:
    """Phrase phase, through the whole pipeline."""

    @pytest.mark.parametrize("text,expected", [
        ("I love you", "I love myself"),
        ("i love you no matter what", "I love myself no matter what"),
        ("This is for you", "This is for myself"),
        ("you are worthy of rest", "I am worthy of rest"),
        ("You matter", "I matter"),
        ("You belong here", "I belong here"),
        ("You got this", "I got this"),
        ("I care about you", "I care about myself"),
    ])
    def test_phrases(self, text, expected):
        """Verify each explicit phrase rule."""
        assert rewrite(text) == expected

    @pytest.mark.parametrize("text,expected", [
        ("I trust you", "I trust myself"),
        ("I forgive you", "I forgive myself"),
        ("We support you", "We support myself"),
        ("I TRUST you", "I TRUST myself"),
    ])
    def test_verb_capture_keeps_verb_text(self, text, expected):
        """Verify the captured verb is kept exactly as written."""
        assert rewrite(text) == expected

    def test_thank_you_for_your(self):
        """Verify verb capture and pronouns combine in one sentence."""
        assert rewrite("Thank you for your patience") == "Thank myself for my patience"


class TestPronouns:
    """Pronoun phase, through the whole pipeline."""

    @pytest.mark.parametrize("text,expected", [
        ("Take care of yourself", "Take care of myself"),
        ("Yourself first", "Myself first"),
        ("Your body deserves kindness", "My body deserves kindness"),
        ("the choice is yours", "The choice is mine"),
        ("Yours is a good heart", "Mine is a good heart"),
        ("you can rest now", "I can rest now"),
    ])
    def test_pronouns(self, text, expected):
        """Verify each pronoun variant keeps its capitalization."""
        assert rewrite(text) == expected

    def test_you_inside_word_untouched(self):
        """Verify "you" inside another word is not replaced."""
        assert rewrite("The bayou is calm") == "The bayou is calm"


class TestPassThrough:
    """Text without second-person markers only gets its first letter capitalized."""

    @pytest.mark.parametrize("text", [
        "The sky is blue.",
        "I am strong",
        "Hello there, friend",
        "12 steps at a time",
    ])
    def test_unchanged(self, text):
        """Verify text with nothing to rewrite passes through."""
        assert rewrite(text) == text

    def test_first_letter_capitalized(self):
        """Verify the first character is uppercased."""
        assert rewrite("the sky is blue") == "The sky is blue"

    def test_empty_input(self):
        """Verify empty input gives empty output."""
        assert rewrite("") == ""

    def test_already_first_person_is_stable(self):
        """Verify a rewritten statement survives a second rewrite unchanged."""
        once = rewrite("You are doing the best you can")
        assert rewrite(once) == once
