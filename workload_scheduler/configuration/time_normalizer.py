# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Projection of wall-clock times onto a single reference date.

Schedules only describe a time of day, so both the configured start/stop times and the
current instant are placed on the same fixed date before being compared. All instants
built for one evaluation carry the UTC offset the schedule's timezone observes at the
moment of evaluation (not a historical offset), so that only the time of day decides
their order. Evaluating the same schedule on both sides of a DST transition therefore
yields different absolute instants, which is expected since evaluation is always
against "now".
"""
from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from functools import total_ordering
from typing import Final
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from workload_scheduler.configuration.time_utils import (
    parse_time_str,
    weekday_abbreviation,
)
from workload_scheduler.scheduling.errors import InvalidTimeZoneError
from workload_scheduler.util.time import is_aware

REFERENCE_DATE: Final = date(2000, 1, 1)


def load_timezone(name: str) -> ZoneInfo:
    """
    resolve an IANA timezone identifier
    :raises InvalidTimeZoneError: if the name does not identify a loadable zone
    """
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as err:
        raise InvalidTimeZoneError(f"Invalid timezone {name!r}") from err


@total_ordering
@dataclass(frozen=True)
class NormalizedInstant:
    moment: datetime

    @classmethod
    def at(cls, wall_clock: time, utc_offset: timezone) -> "NormalizedInstant":
        return cls(
            moment=datetime.combine(
                REFERENCE_DATE,
                time(wall_clock.hour, wall_clock.minute),
                tzinfo=utc_offset,
            )
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, NormalizedInstant):
            return NotImplemented
        return self.moment < other.moment

    def before(self, other: "NormalizedInstant") -> bool:
        return self < other

    def after(self, other: "NormalizedInstant") -> bool:
        return self > other

    def __str__(self) -> str:
        return self.moment.strftime("%H:%M%z")


def _observed_offset(zone: ZoneInfo, current_dt: datetime) -> timezone:
    if not is_aware(current_dt):
        raise ValueError(
            f"Attempted to normalize against a non-timezone-aware datetime: {current_dt}"
        )
    offset = current_dt.astimezone(zone).utcoffset()
    assert offset is not None, "zoneinfo always provides an offset for aware datetimes"
    return timezone(offset)


def current_instant(
    zone: ZoneInfo, current_dt: datetime
) -> tuple[NormalizedInstant, str]:
    """
    :param zone: timezone of the schedule
    :param current_dt: the moment of evaluation, MUST BE TIMEZONE-AWARE
    :return: current time of day in the schedule's zone and the abbreviation of the
    weekday in that zone (e.g. "Wed")
    """
    offset = _observed_offset(zone, current_dt)
    localized = current_dt.astimezone(zone)
    return NormalizedInstant.at(localized.time(), offset), weekday_abbreviation(
        localized
    )


def normalize_wall_clock(
    wall_clock: str | time, zone: ZoneInfo, current_dt: datetime
) -> NormalizedInstant:
    """
    :param wall_clock: an "HH:MM" string or an already parsed time of day
    :param zone: timezone the wall-clock time is expressed in
    :param current_dt: the moment of evaluation, used to determine the zone's offset
    :raises InvalidTimeFormatError: if a string is not a valid HH:MM time
    """
    if isinstance(wall_clock, str):
        wall_clock = parse_time_str(wall_clock)
    return NormalizedInstant.at(wall_clock, _observed_offset(zone, current_dt))
