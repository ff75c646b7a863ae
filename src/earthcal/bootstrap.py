from __future__ import annotations

import logging

from earthcal.core.engine import calendar_registry, timezone_registry
from earthcal.engines.specs import ALL_CALENDARS
from earthcal.engines.timezone import UTC_ZONE

logger = logging.getLogger(__name__)


def build_registries():
    calendars = calendar_registry(ALL_CALENDARS)
    timezones = timezone_registry({UTC_ZONE.name: UTC_ZONE})
    logger.debug("registry: %d calendars, %d timezones", len(calendars.list()), len(timezones.list()))
    return calendars, timezones
