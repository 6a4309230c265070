"""Input-layer public API for raw terminal event decoding."""

from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_event

__all__ = [
    "read_event",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
]
