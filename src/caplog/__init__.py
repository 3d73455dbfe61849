from caplog.capture import capture_logs, get_handle
from caplog.config import CaptureSettings
from caplog.errors import CaptureError, CapturePoisonedError
from caplog.handle import Handle
from caplog.models import Level, LogEntry

__all__ = [
    "CaptureError",
    "CapturePoisonedError",
    "CaptureSettings",
    "Handle",
    "Level",
    "LogEntry",
    "capture_logs",
    "get_handle",
]
