"""Core — Pipeline context, engine and logging."""
