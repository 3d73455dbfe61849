import logging
import threading

from caplog.config import CaptureSettings
from caplog.models import Level, LogEntry
from caplog.store import Store

logger = logging.getLogger(__name__)

# Records from these loggers are never captured.
INTERNAL_LOGGER_NAME = "caplog"


def _is_internal(record: logging.LogRecord) -> bool:
    return record.name == INTERNAL_LOGGER_NAME or record.name.startswith(
        f"{INTERNAL_LOGGER_NAME}."
    )


class Recorder(logging.Handler):
    """A logging handler that appends every record it receives to a Store."""

    def __init__(self, store: Store, level: int = Level.TRACE) -> None:
        super().__init__(level)
        self.store = store
        self.addFilter(lambda record: not _is_internal(record))

    def record(self, level: Level, message: str, target: str | None = None) -> None:
        self.store.append(LogEntry(level=level, message=message, target=target))

    def emit(self, record: logging.LogRecord) -> None:
        # Failures, including a poisoned store, are reported through
        # handleError instead of reaching the code that made the log call.
        try:
            self.record(
                Level.from_levelno(record.levelno), record.getMessage(), record.name
            )
        except Exception:
            self.handleError(record)


_recorder: Recorder | None = None
_target: logging.Logger | None = None
_install_lock = threading.Lock()


def _target_logger(settings: CaptureSettings) -> logging.Logger:
    return logging.getLogger(settings.logger_name or None)


def install_recorder(
    store: Store, settings: CaptureSettings | None = None
) -> Recorder:
    """Register the process-wide recorder, once.

    Repeat calls return the existing recorder. If something detached it from
    its logger in the meantime it is attached again, never duplicated.

    ``settings`` are only resolved on the first registration; when omitted they
    are read from the environment at that point.
    """
    global _recorder, _target
    with _install_lock:
        if _recorder is None:
            settings = settings or CaptureSettings.from_env()
            _recorder = Recorder(store, settings.level)
            _target = target = _target_logger(settings)
            target.addHandler(_recorder)
            if target.getEffectiveLevel() > settings.level:
                target.setLevel(settings.level)
            logger.debug(
                "Registered log capture recorder on %r at level %s",
                target.name,
                settings.level.name,
            )
        else:
            target = _target
            if _recorder not in target.handlers:
                target.addHandler(_recorder)
                logger.debug("Re-attached log capture recorder to %r", target.name)
    return _recorder
