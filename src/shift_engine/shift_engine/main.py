from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from config import get_settings_module

from .container import Container, build_container
from .core.logging import configure_logging
from .schedules.repository import ScheduleRepository
from .time_logs.repository import TimeLogRepository

logger = logging.getLogger(__name__)


def create_engine(*, time_logs: TimeLogRepository, schedules: ScheduleRepository) -> Container:
    """Load settings for APP_ENV, configure logging and wire the services."""
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)

    configure_logging(
        verbose=bool(getattr(settings, "LOG_VERBOSE", False)),
        log_json=bool(getattr(settings, "LOG_JSON", False)),
    )

    container = build_container(time_logs=time_logs, schedules=schedules, settings=settings)
    logger.debug(
        "shift engine ready: settings=%s selection_margin=%s",
        settings_module,
        container.policy.selection_margin,
    )
    return container
