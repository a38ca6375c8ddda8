"""Custom exception hierarchy for xlog."""


class XLogError(Exception):
    """Base exception for all xlog errors."""


# --- Configuration ---
class ConfigError(XLogError):
    """Invalid or missing configuration."""


# --- Emission ---
class EmitError(XLogError):
    """A structured event could not be emitted.

    Carries the qualified type name of the offending event so the fallback
    log line identifies it.
    """

    def __init__(self, event_type: str, detail: str) -> None:
        super().__init__(f"{event_type}: {detail}")
        self.event_type = event_type
        self.detail = detail


class EventSerializationError(EmitError):
    """The event could not be turned into JSON."""


class EventWriteError(EmitError):
    """The serialized line could not be written to the event channel."""


class EventEnrichmentError(EmitError):
    """Context fields could not be filled in on the event."""
