"""
Logging setup for OpenIBAN (structlog on top of the standard library).

One processor chain, three renderers:

    dev_mode=True     colored console lines (default, meant for the CLI)
    json_logs=True    one JSON object per line
    otherwise         key=value lines

Every event is tagged with the library version and the correlation ID of the
current batch, and account numbers are masked before rendering.
"""

import logging
import sys
import time
import uuid
from contextvars import ContextVar
from typing import Any, cast

import structlog
from structlog.types import EventDict, Processor

_correlation_id: ContextVar[str | None] = ContextVar("openiban_correlation_id", default=None)

# Event keys that may carry a raw or normalized IBAN
IBAN_KEYS = frozenset({"iban", "value", "attempted_value", "raw_value"})

# Characters left visible at each end of a masked IBAN
VISIBLE_CHARS = 4


def set_correlation_id(correlation_id: str | None = None) -> str:
    """Tag subsequent log events of this context (thread or task) with an ID.

    A random hex ID is generated when none is given; the ID in effect is returned.
    """
    correlation_id = correlation_id or uuid.uuid4().hex
    _correlation_id.set(correlation_id)
    return correlation_id


def get_correlation_id() -> str | None:
    return _correlation_id.get()


def clear_correlation_id() -> None:
    _correlation_id.set(None)


def add_correlation_id(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Processor: attach the current correlation ID unless the event sets its own."""
    event_dict.setdefault("correlation_id", _correlation_id.get())
    return event_dict


def mask_iban(value: str) -> str:
    """Keep the first and last four characters of an account number.

    >>> mask_iban("NL91ABNA0417164300")
    'NL91**********4300'
    """
    hidden = len(value) - 2 * VISIBLE_CHARS
    if hidden <= 0:
        return "*" * len(value)
    return f"{value[:VISIBLE_CHARS]}{'*' * hidden}{value[-VISIBLE_CHARS:]}"


def mask_sensitive_ibans(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Processor: mask account numbers.

    IBANs are personal data under GDPR; only enough is kept to correlate a
    log line with a support ticket.
    """
    for key in IBAN_KEYS & event_dict.keys():
        if isinstance(event_dict[key], str):
            event_dict[key] = mask_iban(event_dict[key])
    return event_dict


def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Processor: tag events with the library name and version."""
    from openiban import __version__

    event_dict.update(app="openiban", version=__version__)
    return event_dict


def _renderer(json_logs: bool, dev_mode: bool) -> list[Processor]:
    if dev_mode:
        return [structlog.dev.ConsoleRenderer(colors=True)]
    if json_logs:
        return [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
    return [structlog.processors.KeyValueRenderer(key_order=["timestamp", "level", "event"])]


def configure_logging(
    log_level: str = "INFO",
    json_logs: bool = False,
    dev_mode: bool = True,
) -> None:
    """
    (Re)configure structlog and the root logger.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        json_logs: JSON lines instead of key=value (ignored in dev mode)
        dev_mode: Colored, human-oriented console output
    """
    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        add_correlation_id,
        add_app_context,
        mask_sensitive_ibans,
        *_renderer(json_logs, dev_mode),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Diagnostics go to stderr so CLI output on stdout stays machine-readable
    level = getattr(logging, log_level.upper())
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)
    # basicConfig is a no-op once the import-time call installed a handler
    logging.getLogger().setLevel(level)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Logger for a module.

    Usage:
        logger = get_logger(__name__)
        logger.info("registry_loaded", countries=75)
    """
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))


class LogPerformance:
    """
    Time a block and log ``<operation>_completed`` or ``<operation>_failed``.

    Usage:
        with LogPerformance("batch_validation", logger):
            results = [validator.validate(v) for v in values]
    """

    def __init__(self, operation: str, logger: structlog.stdlib.BoundLogger):
        self.operation = operation
        self.logger = logger
        self._started: float = 0.0

    def _elapsed_ms(self) -> float:
        return round((time.perf_counter() - self._started) * 1000, 2)

    def __enter__(self) -> "LogPerformance":
        self._started = time.perf_counter()
        self.logger.debug(f"{self.operation}_started")
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if exc_type is not None:
            self.logger.error(
                f"{self.operation}_failed",
                operation=self.operation,
                duration_ms=self._elapsed_ms(),
                error=str(exc_val),
                error_type=exc_type.__name__,
            )
            return
        self.logger.info(
            f"{self.operation}_completed",
            operation=self.operation,
            duration_ms=self._elapsed_ms(),
        )


# Console logging is usable right after import; the CLI reconfigures it from settings
configure_logging()
