"""Store — Persistence for saved reframes."""

from reframer.store.reframes import ReframeStore, default_data_dir

__all__ = ["ReframeStore", "default_data_dir"]
