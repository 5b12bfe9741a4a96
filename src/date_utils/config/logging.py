"""structlog configuration for date_utils.

Output goes to a single stderr handler on the ``date_utils`` logger; the
root logger and the host application's handlers are left alone.

Two output modes:
- Human (default): console renderer, colored on a TTY
- JSON (log_json=True): one JSON object per line
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from date_utils.config.settings import DateUtilsSettings

PACKAGE_LOGGER = "date_utils"

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _build_handler(log_json: bool) -> logging.Handler:
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_SHARED_PROCESSORS,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )
    return handler


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route ``date_utils`` logs (stdlib and structlog) through one handler.

    Args:
        verbose: Enable DEBUG-level output. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.

    Calling again replaces the handler rather than adding a second one.
    """
    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    pkg_logger.handlers.clear()
    pkg_logger.addHandler(_build_handler(log_json))
    pkg_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    pkg_logger.propagate = False


def configure_from_settings(settings: DateUtilsSettings) -> bool:
    """Apply ``settings.verbose`` / ``settings.log_json``.

    With both off nothing is touched, so an embedding application keeps
    control of ``date_utils`` logging. Returns whether logging was configured.
    """
    if not (settings.verbose or settings.log_json):
        return False
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)
    return True
