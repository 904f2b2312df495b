"""Structured logging for the preview library and its command line.

Library modules log through ``get_logger``. Events go to the standard
``textpreview`` logger, which carries only a ``NullHandler`` until the
application calls ``configure_logging``. Rendering therefore never writes
to stdout or stderr on its own.
"""

import logging
import sys

import structlog

LOGGER_NAME = "textpreview"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())

_handler = None


class _StderrHandler(logging.StreamHandler):
    """Stream handler writing to whatever sys.stderr is at emit time."""

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


def get_logger(name: str):
    """Return structlog logger bound to the stdlib logger ``name``."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(verbose: bool = False, json_logs: bool = False) -> None:
    """Print textpreview events to stderr, debug events only when verbose.

    Calling it again replaces the previous handler.
    """
    global _handler

    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = _StderrHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ]
        )
    )

    logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    _handler = handler
