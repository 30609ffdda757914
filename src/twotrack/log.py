"""
structlog setup for applications using twotrack.

The library only ever calls structlog.get_logger(); it never configures
logging on import. Call configure_structlog() once at startup:

    from twotrack import LoggingSettings, configure_structlog

    configure_structlog()                                  # from environment
    configure_structlog(LoggingSettings(json_logs=True))   # explicit
"""

from __future__ import annotations

import structlog

from twotrack.settings import LoggingSettings


def configure_structlog(settings: LoggingSettings | None = None) -> LoggingSettings:
    """
    Configure structlog processors, renderer and level filter.

    JSON lines when settings.json_logs is set, colored console output otherwise.
    Returns the settings that were applied.
    """
    settings = settings or LoggingSettings()
    renderer = (
        structlog.processors.JSONRenderer()
        if settings.json_logs
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(settings.level_number),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=settings.cache_loggers,
    )
    return settings
