"""
app/shared/logging_setup.py
---------------------------

Central logging configuration for the provincial routing service.

Goals:
- Provide a single place to configure logging format and level.
- Route both stdlib `logging` records (uvicorn, fastapi) and `structlog`
  events through the same handler.
- Read defaults from Settings (LOG_LEVEL, LOG_FORMAT), overridable per call.

Usage
=====

In your module:

    import structlog

    logger = structlog.get_logger()
    logger.info("route_table_loaded", accepted=188)

In a CLI entry point:

    from app.shared.logging_setup import init_logging

    init_logging()

Implementation notes
====================

- `init_logging` is idempotent; calling it multiple times is safe.
- LOG_FORMAT "json" renders one JSON object per line; anything else uses
  structlog's console renderer.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog

from app.shared.config import settings

# Internal flag to avoid re-configuring logging multiple times
_INITIALIZED = False


def _resolve_level(level: Optional[str]) -> int:
    level_name = (level or settings.LOG_LEVEL or "INFO").upper()
    return getattr(logging, level_name, logging.INFO)


def init_logging(
    level: Optional[str] = None,
    fmt: Optional[str] = None,
    *,
    force: bool = False,
) -> None:
    """
    Initialize root logging and structlog.

    Args:
        level:
            Level name (e.g. "DEBUG"). Defaults to settings.LOG_LEVEL.
        fmt:
            "json" or "console". Defaults to settings.LOG_FORMAT.
        force:
            If True, reconfigure even if already initialized.
    """
    global _INITIALIZED

    if _INITIALIZED and not force:
        return

    log_level = _resolve_level(level)
    renderer_name = (fmt or settings.LOG_FORMAT or "console").lower()

    # ConsoleRenderer formats exceptions itself; JSON needs them flattened first.
    if renderer_name == "json":
        final_processors = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ]
    else:
        final_processors = [structlog.dev.ConsoleRenderer(colors=False)]

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    structlog.configure(
        processors=shared_processors + [
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta] + final_processors,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(log_level)

    _INITIALIZED = True


__all__ = ["init_logging"]
