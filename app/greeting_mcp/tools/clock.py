# tools/clock.py

import functools
from datetime import datetime
from types import MappingProxyType
from typing import Annotated, Mapping, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError, available_timezones

from pydantic import Field

from greeting_mcp.tools.base import ToolHandler, tool_boundary
from greeting_mcp.tools.types import ToolFailure, ToolOutcome
from greeting_mcp.utils import get_logger

logger = get_logger(__name__)

DESCRIPTION = "유저의 Time Zone에 따라 현재 시간을 알려줍니다"

WEEKDAYS = ("월요일", "화요일", "수요일", "목요일", "금요일", "토요일", "일요일")

INVALID_TIMEZONE_MESSAGE = (
    "오류: 유효하지 않은 시간대입니다. ({timezone})\n"
    "올바른 시간대 형식: Asia/Seoul, America/New_York, Europe/London 등"
)


@functools.lru_cache(maxsize=1)
def _canonical_zone_names() -> Mapping[str, str]:
    """IANA zone names keyed by their lower-case form."""
    return MappingProxyType({zone.lower(): zone for zone in available_timezones()})


def resolve_timezone(name: str) -> ZoneInfo:
    """
    Look up an IANA timezone, ignoring case ("utc", "asia/seoul").

    Raises:
        ToolFailure: If the name is not a known zone
    """
    canonical = _canonical_zone_names().get(name.lower(), name)
    try:
        return ZoneInfo(canonical)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        logger.debug(f"Timezone lookup failed for {name!r}: {e}")
        raise ToolFailure(INVALID_TIMEZONE_MESSAGE.format(timezone=name)) from e


def format_korean_datetime(moment: datetime) -> str:
    """Format as e.g. '2026년 10월 18일 일요일 17시 05분 09초'."""
    return (
        f"{moment.year}년 {moment.month}월 {moment.day}일 {WEEKDAYS[moment.weekday()]} "
        f"{moment.hour:02d}시 {moment.minute:02d}분 {moment.second:02d}초"
    )


def make_current_time_tool(default_timezone: str = "Asia/Seoul") -> ToolHandler:
    """
    Build the getCurrentTime handler.

    Args:
        default_timezone: Zone used when the caller omits one

    Returns:
        Async handler returning the formatted current time
    """

    @tool_boundary()
    async def get_current_time(
        timezone: Annotated[
            Optional[str],
            Field(description="시간대 (예: Asia/Seoul, America/New_York, Europe/London, UTC 등)"),
        ] = default_timezone,
    ) -> ToolOutcome:
        """Tell the current time in the given timezone."""
        if timezone is None:
            timezone = default_timezone
        zone = resolve_timezone(timezone)
        now = datetime.now(zone)
        return ToolOutcome.ok(
            f"📍 시간대: {timezone}\n⏰ 현재 시간: {format_korean_datetime(now)}"
        )

    return get_current_time
