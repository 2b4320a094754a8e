import os, sys, json, logging, time, uuid
from typing import Optional, Dict, Any
from contextvars import ContextVar

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
SERVICE_NAME = os.getenv("SERVICE_NAME") or "article-simplifier"

# --- Run Context Variables ---------------------------------------------------
# Run-scoped context that is attached to every log line emitted while a
# simplification run is in progress.
run_id_var: ContextVar[Optional[str]] = ContextVar('run_id', default=None)
target_level_var: ContextVar[Optional[str]] = ContextVar('target_level', default=None)


def set_run_context(run_id: str = None, target_level: str = None):
    """Set run-scoped context variables for logging correlation.

    Args:
        run_id: Unique identifier for the run (generated when omitted)
        target_level: Proficiency level the run targets

    Returns the run id so callers can log or return it.
    """
    if run_id is None:
        run_id = str(uuid.uuid4())

    run_id_var.set(run_id)
    if target_level:
        target_level_var.set(target_level)

    return run_id


def clear_run_context():
    run_id_var.set(None)
    target_level_var.set(None)


def get_run_context() -> Dict[str, Any]:
    """Get current run context for logging."""
    return {
        "run_id": run_id_var.get(),
        "target_level": target_level_var.get(),
    }


class PerformanceLogger:
    """Context manager for performance logging."""

    def __init__(self, logger: logging.Logger, operation: str, **context):
        self.logger = logger
        self.operation = operation
        self.context = context
        self.start_time = None
        self.duration = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        self.logger.debug(f"Starting {self.operation}", extra={
            "operation": self.operation,
            "phase": "start",
            **self.context
        })
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration = time.perf_counter() - self.start_time
        level = logging.ERROR if exc_type else logging.INFO
        status = "error" if exc_type else "success"

        self.logger.log(level, f"Completed {self.operation}", extra={
            "operation": self.operation,
            "phase": "complete",
            "duration_seconds": round(self.duration, 3),
            "status": status,
            "error_type": exc_type.__name__ if exc_type else None,
            **self.context
        })


class JsonFormatter(logging.Formatter):
    """One JSON object per record, run context and ``extra`` fields merged in."""

    _builtin_keys = set(logging.LogRecord(None, 0, "", 0, "", (), None, None).__dict__.keys())

    def format(self, record):
        context = get_run_context()

        payload = {
            "timestamp": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime(record.created)),
            "service": SERVICE_NAME,
            "level": record.levelname,
            "event": record.getMessage(),
            "logger": record.name,
            **{k: v for k, v in context.items() if v is not None}
        }

        # Merge any user-supplied extras except builtin attributes
        for key, value in record.__dict__.items():
            if key not in self._builtin_keys and key not in payload:
                payload[key] = value

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class ConsoleHandler(logging.StreamHandler):
    """JSON console handler; its stream can be swapped with route_logs_to()."""


# None means sys.stdout as seen when a handler is created
_console_stream = None


def _console_handlers():
    for candidate in list(logging.Logger.manager.loggerDict.values()):
        if isinstance(candidate, logging.Logger):
            for handler in candidate.handlers:
                if isinstance(handler, ConsoleHandler):
                    yield handler


def route_logs_to(stream):
    """Point every JSON console handler, existing and future, at *stream*.

    Returns a function that puts each handler back on the stream it had.
    """
    global _console_stream
    previous_default = _console_stream
    _console_stream = stream

    previous = {}
    for handler in _console_handlers():
        previous[handler] = handler.stream
        handler.setStream(stream)

    def restore():
        global _console_stream
        _console_stream = previous_default
        for handler in _console_handlers():
            handler.setStream(previous.get(handler, previous_default or sys.stdout))

    return restore


def get_logger(name: str | None = None):
    """Return a JSON-logging logger writing to stdout (see route_logs_to)."""
    logger = logging.getLogger(name or SERVICE_NAME)
    logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

    # Console handler
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        ch = ConsoleHandler(_console_stream or sys.stdout)
        ch.setFormatter(JsonFormatter())
        logger.addHandler(ch)

    logger.propagate = False

    # Add performance logging method to logger
    def log_performance(operation: str, **context):
        return PerformanceLogger(logger, operation, **context)

    logger.log_performance = log_performance

    return logger


def log_error_with_context(logger: logging.Logger, error: Exception, operation: str, **context):
    """Log errors with full context for debugging."""
    logger.error(f"Error in {operation}: {str(error)}", extra={
        "operation": operation,
        "error_type": type(error).__name__,
        "error_message": str(error),
        "category": "error",
        **context
    }, exc_info=True)
