"""
Mode resolution: local clock -> presentation mode.
"""
from datetime import datetime
from typing import Tuple, Union

from sdui_service.models.schemas.core import Mode
from sdui_service.utils.logging import get_logger

logger = get_logger(__name__)

# Half-open [start, end) hour intervals, in clock order.
MODE_SCHEDULE: Tuple[Tuple[int, int, Mode], ...] = (
    (0, 6, Mode.LATE_NIGHT),
    (6, 9, Mode.MORNING),
    (9, 12, Mode.DAY),
    (12, 14, Mode.FLASH_SALE),
    (14, 17, Mode.AFTERNOON),
    (17, 20, Mode.EVENING),
    (20, 24, Mode.NIGHT),
)

DEFAULT_MODE = Mode.DAY


def mode_for_hour(hour: int) -> Mode:
    """Mode for an hour of the day (0-23)."""
    for start, end, mode in MODE_SCHEDULE:
        if start <= hour < end:
            return mode
    return DEFAULT_MODE


def resolve_mode(now: datetime) -> Mode:
    """Mode for a local timestamp. Pure and total."""
    return mode_for_hour(now.hour)


def coerce_mode(value: Union[Mode, str, None]) -> Mode:
    """Turn a mode name into a Mode, falling back to day."""
    if isinstance(value, Mode):
        return value
    try:
        return Mode(value)
    except ValueError:
        logger.warning(
            "mode.coerce.unknown",
            extra={"value": value, "defaulting_to": DEFAULT_MODE.value}
        )
        return DEFAULT_MODE
