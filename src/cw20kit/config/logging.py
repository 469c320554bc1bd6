"""structlog setup for the ``cw20kit`` logger tree.

Records go to stderr so stdout carries only command output. stdlib
``logging.getLogger(__name__)`` calls inside the package and
``structlog.get_logger`` calls share one formatter, rendered either for
a console or as one JSON object per line (``--log-json``).
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "cw20kit"

_SHARED: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _level(*, verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    return logging.ERROR if quiet else logging.WARNING


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_json: bool = False,
) -> None:
    """(Re)attach the package handler; safe to call once per CLI run.

    Only the ``cw20kit`` tree is touched. Third-party loggers keep
    Python's defaults, so their debug chatter never reaches stderr.
    """
    structlog.configure(
        processors=[*_SHARED, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_SHARED,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    package = logging.getLogger(PACKAGE_LOGGER)
    package.handlers = [handler]
    package.propagate = False
    package.setLevel(_level(verbose=verbose, quiet=quiet))


def bind_command(command: str) -> None:
    """Tag every later record with the running CLI *command*."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(command=command)
