"""structlog setup: console or JSON rendering on stderr"""

import logging
import sys

import structlog


LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def verbose_to_level(verbose: int, default: str = "warning") -> str:
    """Map a -v count onto a level name; no flags keeps the configured default."""
    if verbose <= 0:
        return default
    return "info" if verbose == 1 else "debug"


def configure_logging(level: str = "warning", json_output: bool = False) -> None:
    """Route stdlib and structlog output to stderr at the given level."""
    logging.root.handlers.clear()
    structlog.reset_defaults()

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=shared_processors,
    ))
    logging.root.addHandler(handler)
    logging.root.setLevel(LEVELS.get(level, logging.WARNING))

    structlog.configure(
        processors=shared_processors + [
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
