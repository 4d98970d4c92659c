"""Logging for dynamic_enum.

Thin layer over stdlib logging; JSON lines are rendered by structlog.
``ContextualLogger`` carries a message prefix and a set of dimensions
(structured key/value context) that are attached to every record it emits.

Usage:
    from dynamic_enum.core.logging import logger

    registry_logger = logger.with_prefix("ColourRegistry: ").with_context(
        component="colour_registry"
    )
    registry_logger.info("Populated")
"""

import logging
import sys
from typing import Any, MutableMapping, Optional

import structlog

from dynamic_enum.core.config import settings

_ROOT_LOGGER_NAME = "dynamic_enum"

# Attributes every LogRecord has; anything else came in through `extra`.
_RESERVED_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None)).keys()) | {
    "message",
    "asctime",
}


def _json_formatter() -> structlog.stdlib.ProcessorFormatter:
    """JSON lines for stdlib records, dimensions included as top-level keys."""
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.ExtraAdder(),
            structlog.processors.TimeStamper(fmt="iso", key="timestamp"),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            structlog.processors.EventRenamer("message"),
            structlog.processors.JSONRenderer(),
        ],
    )


class _TextFormatter(logging.Formatter):
    """Human readable format with dimensions appended as key=value pairs."""

    def __init__(self) -> None:
        super().__init__("%(asctime)s %(levelname)-8s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        dimensions = {k: v for k, v in record.__dict__.items() if k not in _RESERVED_ATTRS}
        if dimensions:
            line += " | " + " ".join(f"{k}={v}" for k, v in sorted(dimensions.items()))
        return line


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter with a message prefix and structured dimensions.

    Both ``with_prefix`` and ``with_context`` return new loggers; the
    original is never modified.
    """

    def __init__(
        self,
        logger: logging.Logger,
        prefix: str = "",
        dimensions: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(logger, dict(dimensions or {}))
        self.prefix = prefix
        self.dimensions: dict[str, Any] = dict(dimensions or {})

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        """Prepend the prefix and merge the dimensions into ``extra``."""
        extra = dict(self.dimensions)
        extra.update(kwargs.get("extra") or {})
        kwargs["extra"] = extra
        return f"{self.prefix}{msg}", kwargs

    def with_prefix(self, prefix: str) -> "ContextualLogger":
        """Return a logger that prepends ``prefix`` to this logger's prefix."""
        return ContextualLogger(self.logger, self.prefix + prefix, self.dimensions)

    def with_context(self, **dimensions: Any) -> "ContextualLogger":
        """Return a logger with ``dimensions`` merged into its context."""
        merged = {**self.dimensions, **dimensions}
        return ContextualLogger(self.logger, self.prefix, merged)


class LoggerConfigurator:
    """Builds ContextualLoggers under the package root logger."""

    _configured = False

    @classmethod
    def _configure_root(cls) -> None:
        if cls._configured:
            return
        root = logging.getLogger(_ROOT_LOGGER_NAME)
        root.setLevel(settings.LOG_LEVEL.upper())
        cls._attach_handler(root)
        cls._configured = True

    @staticmethod
    def _attach_handler(target: logging.Logger) -> None:
        """Give ``target`` its own stderr handler unless the application configured logging.

        When the handler is attached, propagation is switched off so a root
        handler added later does not print every line a second time.
        """
        if logging.getLogger().handlers:
            return
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(_TextFormatter() if settings.is_local else _json_formatter())
        target.addHandler(handler)
        target.propagate = False

    @classmethod
    def configure_logger(
        cls,
        name: str,
        prefix: str = "",
        dimensions: Optional[dict[str, Any]] = None,
    ) -> ContextualLogger:
        """Create a ContextualLogger.

        Args:
            name: Logger name, normally a dotted path under ``dynamic_enum``.
            prefix: Prepended to every message.
            dimensions: Structured context attached to every record.

        Returns:
            The configured logger.
        """
        cls._configure_root()
        return ContextualLogger(logging.getLogger(name), prefix=prefix, dimensions=dimensions)


logger = LoggerConfigurator.configure_logger(_ROOT_LOGGER_NAME)
