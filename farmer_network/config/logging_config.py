import logging
from logging.handlers import RotatingFileHandler
import sys
from pathlib import Path
from contextvars import ContextVar
from farmer_network.config.settings import Config

# Context variable to store correlation ID across async/thread boundaries
correlation_id_var: ContextVar[str] = ContextVar(
    "correlation_id", default="NO Correlation ID"
)


class CorrelationIdFilter(logging.Filter):
    """Logging filter to add correlation ID to log records."""

    def filter(self, record):
        record.correlation_id = correlation_id_var.get()
        return True


class SafeFormatter(logging.Formatter):
    """Formatter that ensures correlation_id always exists."""

    def format(self, record):
        if not hasattr(record, "correlation_id"):
            record.correlation_id = "NO Correlation ID"
        return super().format(record)


_configured = False


def setup_logging(level: str = "INFO", log_file: str | None = None):
    global _configured
    root = logging.getLogger()
    if _configured:
        return root

    root.setLevel(logging.WARNING)  # Set root to WARNING to avoid too much noise
    formatter = SafeFormatter(Config.LOG_FORMAT)

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)
    stream_handler.addFilter(CorrelationIdFilter())
    root.addHandler(stream_handler)

    # Set up file logging if log_file provided with rotation
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file, maxBytes=10 * 1024 * 1024, backupCount=5
        )
        file_handler.setFormatter(formatter)
        file_handler.addFilter(CorrelationIdFilter())
        root.addHandler(file_handler)

    logging.getLogger("farmer_network").setLevel(
        getattr(logging, level.upper(), logging.INFO)
    )
    logging.getLogger("farmer_network").info("Logging is set up.")

    _configured = True
    return root
