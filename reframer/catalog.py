"""
Catalog — Suggested thoughts, emotions, and grounding activities.

Loaded from package data on first use.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

CATALOG_PATH = Path(__file__).parent / "data" / "catalog.yaml"

SECTIONS = ("common_thoughts", "emotions", "grounding_activities")


@dataclass(frozen=True)
class Catalog:
    """Read-only prompt lists, in display order."""
    common_thoughts: tuple[str, ...] = field(default_factory=tuple)
    emotions: tuple[str, ...] = field(default_factory=tuple)
    grounding_activities: tuple[str, ...] = field(default_factory=tuple)

    def section(self, name: str) -> tuple[str, ...]:
        if name not in SECTIONS:
            raise KeyError(f"Unknown catalog section: {name}")
        return getattr(self, name)

    def to_dict(self) -> dict[str, list[str]]:
        return {name: list(self.section(name)) for name in SECTIONS}


def load_catalog(path: Path = CATALOG_PATH) -> Catalog:
    """Parse a catalog file. Missing sections are empty."""
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return Catalog(**{name: tuple(data.get(name) or ()) for name in SECTIONS})


_catalog: Optional[Catalog] = None


def get_catalog() -> Catalog:
    """Get the bundled catalog, cached."""
    global _catalog
    if _catalog is None:
        _catalog = load_catalog()
    return _catalog
