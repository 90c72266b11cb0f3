"""
Tests for the interactive reframe session.
"""

import pytest

from reframer.catalog import get_catalog
from reframer.ir.enums import SessionState
from reframer.session import InvalidTransition, ReframeSession
from reframer.store.reframes import ReframeStore


def filled_session(**kwargs) -> ReframeSession:
    session = ReframeSession(**kwargs)
    session.set_thought("I feel gross")
    session.toggle_emotion("Anxious")
    session.toggle_emotion("Ashamed")
    session.set_support_text("You are doing the best you can")
    return session


class TestTransitions:

    def test_starts_idle(self):
        assert ReframeSession().state == SessionState.IDLE

    def test_edit_moves_to_composing(self):
        session = ReframeSession()
        session.set_thought("I ate too much")
        assert session.state == SessionState.COMPOSING

    def test_reframe_shows_result(self):
        session = filled_session()

        result = session.request_reframe()

        assert result == (
            "I feel anxious and ashamed, but this feeling doesn’t define me. "
            "I am doing the best I can"
        )
        assert session.state == SessionState.SHOWING_RESULT

    def test_thought_required(self):
        session = filled_session()
        session.set_thought("")

        assert session.request_reframe() == ""
        assert session.state == SessionState.COMPOSING

    def test_emotions_required(self):
        session = filled_session()
        session.set_emotion_input("")

        assert session.request_reframe() == ""
        assert session.state == SessionState.COMPOSING

    def test_edit_after_result_returns_to_composing(self):
        session = filled_session()
        session.request_reframe()

        session.toggle_emotion("Tired")

        assert session.state == SessionState.COMPOSING
        assert session.result == ""

    def test_grounding_toggle(self):
        session = filled_session()
        session.request_reframe()

        activities = session.toggle_grounding()
        assert session.state == SessionState.GROUNDING
        assert activities == list(get_catalog().grounding_activities)

        assert session.toggle_grounding() == []
        assert session.state == SessionState.SHOWING_RESULT

    def test_grounding_needs_result(self):
        session = filled_session()
        with pytest.raises(InvalidTransition):
            session.toggle_grounding()

    def test_reset(self):
        session = filled_session()
        session.request_reframe()
        session.reset()

        assert session.state == SessionState.IDLE
        assert len(session.emotions) == 0
        assert session.support_text == ""


class TestEmotionInput:

    def test_returns_cleaned_text(self):
        session = ReframeSession()
        assert session.set_emotion_input("sad,  angry,") == "Angry, Sad"
        assert session.emotions.single() == ""

    def test_single_emotion(self):
        session = ReframeSession()
        session.set_emotion_input("lonely")
        assert session.emotions.single() == "Lonely"


class TestSave:

    def test_save(self, tmp_path):
        store = ReframeStore(tmp_path)
        session = filled_session(store=store)
        session.request_reframe()

        record = session.save()

        assert record.text == session.result
        assert [r.id for r in store.list()] == [record.id]

    def test_save_while_grounding(self, tmp_path):
        session = filled_session(store=ReframeStore(tmp_path))
        session.request_reframe()
        session.toggle_grounding()

        assert session.save().text == session.result

    def test_save_without_result(self, tmp_path):
        session = filled_session(store=ReframeStore(tmp_path))
        with pytest.raises(InvalidTransition):
            session.save()

    def test_save_without_store(self):
        session = filled_session()
        session.request_reframe()
        with pytest.raises(RuntimeError):
            session.save()
