"""
Saved reframes — the reframes the user chose to keep.

One JSON file per record, named by record ID, so a delete never has
to rewrite the others.
"""

import os
from datetime import datetime
from pathlib import Path
from typing import Optional, Union
from uuid import UUID, uuid4

from pydantic import ValidationError

from reframer.core.logging import LogChannel, get_logger
from reframer.ir.schema import SavedReframe

log = get_logger(LogChannel.STORE)


def default_data_dir() -> Path:
    """REFRAMER_DATA_DIR, or ~/.reframer/reframes."""
    configured = os.environ.get("REFRAMER_DATA_DIR")
    if configured:
        return Path(configured).expanduser()
    return Path.home() / ".reframer" / "reframes"


class ReframeStore:
    """
    File-backed store of saved reframes.

    The directory is created on first write.
    """

    def __init__(self, directory: Union[str, Path, None] = None) -> None:
        self.directory = Path(directory) if directory is not None else default_data_dir()

    def _path(self, reframe_id: str) -> Optional[Path]:
        # IDs are UUIDs; anything else cannot name a record file
        try:
            UUID(reframe_id)
        except (ValueError, TypeError):
            return None
        return self.directory / f"{reframe_id}.json"

    def _read(self, path: Path) -> Optional[SavedReframe]:
        try:
            return SavedReframe.model_validate_json(path.read_text(encoding="utf-8"))
        except (OSError, ValidationError) as e:
            log.warning("unreadable_record", path=str(path), error=str(e))
            return None

    def list(self) -> list[SavedReframe]:
        """All saved reframes, oldest first."""
        if not self.directory.exists():
            return []
        records = [
            record
            for record in (self._read(p) for p in self.directory.glob("*.json"))
            if record is not None
        ]
        records.sort(key=lambda r: (r.created_at, r.id))
        return records

    def get(self, reframe_id: str) -> Optional[SavedReframe]:
        path = self._path(reframe_id)
        if path is None or not path.exists():
            return None
        return self._read(path)

    def find_by_text(self, text: str) -> Optional[SavedReframe]:
        for record in self.list():
            if record.text == text:
                return record
        return None

    def create(self, text: str) -> SavedReframe:
        """
        Save a reframe.

        Saving text that is already stored returns the existing record.

        Raises:
            ValueError: if text is empty
        """
        if not text:
            raise ValueError("Cannot save an empty reframe")

        existing = self.find_by_text(text)
        if existing is not None:
            log.verbose("duplicate_skipped", reframe_id=existing.id)
            return existing

        record = SavedReframe(id=str(uuid4()), text=text, created_at=datetime.now())
        self.directory.mkdir(parents=True, exist_ok=True)
        self._path(record.id).write_text(record.model_dump_json(indent=2), encoding="utf-8")

        log.info("reframe_saved", reframe_id=record.id)
        return record

    def delete(self, reframe_id: str) -> bool:
        """Delete a reframe. Returns False if no such record exists."""
        path = self._path(reframe_id)
        if path is None or not path.exists():
            log.verbose("delete_missing", reframe_id=reframe_id)
            return False
        path.unlink()
        log.info("reframe_deleted", reframe_id=reframe_id)
        return True
