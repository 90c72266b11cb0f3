"""
Emotion labels — selection, canonicalization, and list formatting.

Selections store labels in canonical capitalization ("Left Out");
formatted lists use lowercase, alphabetically sorted labels
("angry, sad, and tired").
"""

import string
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from reframer.core.logging import LogChannel, get_logger

log = get_logger(LogChannel.FORMAT)


def canonical_label(label: str) -> str:
    """Capitalize each word of a label: " left OUT " -> "Left Out"."""
    return string.capwords(label.strip())


def normalize_labels(emotions: Iterable[str]) -> list[str]:
    """Lowercase, de-duplicate and sort. Blank labels are dropped; others are not trimmed."""
    return sorted({label.lower() for label in emotions if label.strip()})


def format_list(emotions: Iterable[str]) -> str:
    """
    Join emotion labels into a natural-language list.

    Labels that differ only in case collapse to one entry. Order is
    alphabetical, never selection order.

    Examples:
        {"Sad"} -> "sad"
        {"Sad", "Angry"} -> "angry and sad"
        {"Sad", "Angry", "Tired"} -> "angry, sad, and tired"
    """
    labels = normalize_labels(emotions)

    if not labels:
        return ""
    if len(labels) == 1:
        return labels[0]
    if len(labels) == 2:
        return f"{labels[0]} and {labels[1]}"
    return f"{', '.join(labels[:-1])}, and {labels[-1]}"


@dataclass
class EmotionSelection:
    """
    The set of emotions a user has picked.

    Labels are canonicalized on the way in, so "sad" and "SAD" are the
    same selection.
    """

    labels: set[str] = field(default_factory=set)

    def __post_init__(self) -> None:
        self.labels = {canonical_label(label) for label in self.labels if label.strip()}

    @classmethod
    def from_input(cls, text: str) -> "EmotionSelection":
        """Parse free text such as "sad, angry , ,tired"."""
        return cls(labels=set(text.split(",")))

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.labels))

    def __len__(self) -> int:
        return len(self.labels)

    def __contains__(self, label: object) -> bool:
        return isinstance(label, str) and canonical_label(label) in self.labels

    def add(self, label: str) -> None:
        if label.strip():
            self.labels.add(canonical_label(label))

    def remove(self, label: str) -> None:
        self.labels.discard(canonical_label(label))

    def toggle(self, label: str) -> bool:
        """Flip a label on or off. Returns True if it is now selected."""
        if label in self:
            self.remove(label)
            selected = False
        else:
            self.add(label)
            selected = label in self
        log.debug("emotion_toggled", label=canonical_label(label), selected=selected)
        return selected

    def clear(self) -> None:
        self.labels.clear()

    def single(self) -> str:
        """The only selected label, or "" unless exactly one is selected."""
        if len(self.labels) == 1:
            return next(iter(self.labels))
        return ""

    def as_input_text(self) -> str:
        """Selected labels as the comma-separated text a user could type."""
        return ", ".join(sorted(self.labels))

    def phrase(self) -> str:
        """The selection formatted for a reframe sentence."""
        return format_list(self.labels)
