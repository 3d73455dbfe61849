class CaptureError(Exception):
    """Base class for errors raised by the log capture subsystem."""


class CapturePoisonedError(CaptureError):
    """The shared store was left in an unknown state by a failed operation.

    Raised by every store operation until the store is cleared.
    """
