"""structlog configuration for tapecursor.

The library only emits through stdlib ``logging``; nothing is configured on
import. Applications (or tests) opt in here:
- Human (default): console-rendered lines on stderr
- JSON (log_json=True): one JSON object per line on stderr
"""

from __future__ import annotations

import logging
import sys

import structlog

from tapecursor.config.settings import TapeCursorSettings


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route stdlib logging through structlog's formatter.

    Args:
        verbose: Emit the ``tapecursor`` DEBUG messages (rejected seeks,
            clamps, clears). When False, only WARNING+.
        log_json: Use the JSON renderer instead of the console renderer.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("tapecursor").setLevel(level)


def configure_logging_from_settings(settings: TapeCursorSettings | None = None) -> None:
    """Apply ``TAPECURSOR_VERBOSE`` / ``TAPECURSOR_LOG_JSON`` (or explicit settings)."""
    settings = settings or TapeCursorSettings()
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)
