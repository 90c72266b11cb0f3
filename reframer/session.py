"""
ReframeSession — Interactive state for one reframing exercise.

    IDLE -> COMPOSING -> SHOWING_RESULT <-> GROUNDING

Editing any input returns the session to COMPOSING, so a shown reframe
always matches the current inputs.
"""

from typing import Optional

from reframer.catalog import get_catalog
from reframer.core.logging import LogChannel, get_logger
from reframer.formatting.compose import reframe
from reframer.formatting.emotions import EmotionSelection
from reframer.ir.enums import SessionState
from reframer.ir.schema import SavedReframe
from reframer.store.reframes import ReframeStore

log = get_logger(LogChannel.SYSTEM)


class InvalidTransition(RuntimeError):
    """The session cannot do that from its current state."""

    def __init__(self, action: str, state: SessionState) -> None:
        self.action = action
        self.state = state
        super().__init__(f"Cannot {action} while {state.value}")


class ReframeSession:
    """
    Inputs, result, and state of one reframe.

    The raw thought is display context only; it is never rewritten, but a
    reframe is not offered until one has been written down.
    """

    def __init__(self, store: Optional[ReframeStore] = None, ruleset: Optional[str] = None) -> None:
        self.store = store
        self.ruleset = ruleset
        self.thought = ""
        self.emotions = EmotionSelection()
        self.support_text = ""
        self.result = ""
        self.state = SessionState.IDLE

    # ------------------------------------------------------------------
    # Input edits
    # ------------------------------------------------------------------

    def _edited(self) -> None:
        if self.state != SessionState.COMPOSING:
            log.debug("session_transition", from_state=self.state.value, to_state="composing")
        self.state = SessionState.COMPOSING
        self.result = ""

    def set_thought(self, thought: str) -> None:
        self.thought = thought
        self._edited()

    def set_support_text(self, text: str) -> None:
        self.support_text = text
        self._edited()

    def toggle_emotion(self, label: str) -> bool:
        selected = self.emotions.toggle(label)
        self._edited()
        return selected

    def set_emotion_input(self, text: str) -> str:
        """Replace the selection from free text. Returns the cleaned input text."""
        self.emotions = EmotionSelection.from_input(text)
        self._edited()
        return self.emotions.as_input_text()

    # ------------------------------------------------------------------
    # Result
    # ------------------------------------------------------------------

    def can_reframe(self) -> bool:
        return bool(self.thought) and bool(self.support_text) and len(self.emotions) > 0

    def request_reframe(self) -> str:
        """
        Compute the reframe for the current inputs.

        Returns "" (and stays COMPOSING) when inputs are missing.
        """
        if not self.can_reframe():
            self.state = SessionState.COMPOSING
            self.result = ""
            return ""

        self.result = reframe(self.emotions, self.support_text, ruleset=self.ruleset)
        self.state = SessionState.SHOWING_RESULT if self.result else SessionState.COMPOSING
        log.verbose("reframe_requested", state=self.state.value, produced=bool(self.result))
        return self.result

    def toggle_grounding(self) -> list[str]:
        """
        Show or hide grounding activities.

        Returns the activities when shown, [] when hidden.
        """
        if self.state == SessionState.SHOWING_RESULT:
            self.state = SessionState.GROUNDING
            return list(get_catalog().grounding_activities)
        if self.state == SessionState.GROUNDING:
            self.state = SessionState.SHOWING_RESULT
            return []
        raise InvalidTransition("toggle grounding", self.state)

    def save(self) -> SavedReframe:
        """Persist the shown reframe."""
        if self.state not in (SessionState.SHOWING_RESULT, SessionState.GROUNDING):
            raise InvalidTransition("save", self.state)
        if self.store is None:
            raise RuntimeError("Session has no store to save into")
        return self.store.create(self.result)

    def reset(self) -> None:
        self.thought = ""
        self.emotions = EmotionSelection()
        self.support_text = ""
        self.result = ""
        self.state = SessionState.IDLE
