"""Formatting — Emotion lists and reframe composition."""
