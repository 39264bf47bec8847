from __future__ import annotations

import inspect
import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncContextManager

from fastapi import FastAPI

from income_tax.config import LOG_FORMAT, Settings, get_settings
from income_tax.germany import SUPPORTED_YEARS

Hook = Callable[[FastAPI], Awaitable[None] | None]


def _open_log_sink(logger: logging.Logger, settings: Settings, app_label: str) -> logging.Handler | None:
    if not settings.log_to_file:
        return None
    logs_dir = Path(settings.log_dir)
    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.warning("Unable to create logs directory %s: %s", logs_dir, exc)
        return None
    handler = logging.FileHandler(logs_dir / f"{app_label}.log", encoding="utf-8")
    handler.setLevel(settings.logging_level())
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return handler


async def _invoke_hook(hook: Hook | None, app: FastAPI) -> None:
    if hook is None:
        return
    try:
        result = hook(app)
        if inspect.isawaitable(result):
            await result  # type: ignore[func-returns-value]
    except Exception:  # pragma: no cover - hooks are user provided
        logging.getLogger("income_tax").exception("Application lifecycle hook failed")


def build_application_lifespan(
    app_label: str,
    *,
    startup_hook: Hook | None = None,
    shutdown_hook: Hook | None = None,
) -> Callable[[FastAPI], AsyncContextManager[None]]:
    base_logger = logging.getLogger("income_tax")

    @asynccontextmanager
    async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
        settings = get_settings()
        logger = base_logger.getChild(app_label)
        log_handler = _open_log_sink(base_logger, settings, app_label)

        app.state.settings = settings
        app.state.log_handler = log_handler
        app.state.app_label = app_label

        logger.info(
            "Startup complete: default_year=%s supported_years=%s", settings.default_year, SUPPORTED_YEARS
        )

        try:
            await _invoke_hook(startup_hook, app)
            yield
        finally:
            await _invoke_hook(shutdown_hook, app)
            logger.info("Shutdown complete")
            if log_handler is not None:
                base_logger.removeHandler(log_handler)
                log_handler.close()
            for attr in ("settings", "log_handler", "app_label"):
                if hasattr(app.state, attr):
                    delattr(app.state, attr)

    return _lifespan


__all__ = ["build_application_lifespan"]
