# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import datetime
import re

from workload_scheduler.scheduling.errors import InvalidTimeFormatError

TIME_FORMAT = "HH:MM"
"""human-readable time format that can be displayed to users if an input fails is_valid_time_str"""

# english weekday abbreviations indexed by datetime.weekday(), independent of the process locale
WEEKDAY_ABBREVIATIONS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def is_valid_time_str(timestr: str) -> bool:
    """
    verify that a string matches the time format expected by parse_time_str

    a human-readable representation of a valid time_format can be accessed as TIME_FORMAT
    """
    return re.fullmatch(r"([01]?[0-9]|2[0-3]):[0-5][0-9]", timestr) is not None


def parse_time_str(timestr: str) -> datetime.time:
    """
    Standardised method to build time object instance from an annotation time string
    :param timestr: string in format HH:MM
    :return: time object from time string
    :raises InvalidTimeFormatError: if the string is not a valid wall-clock time
    """
    if not is_valid_time_str(timestr):
        raise InvalidTimeFormatError(
            f"Invalid time string {timestr!r}, must match {TIME_FORMAT}"
        )
    hours, minutes = timestr.split(":")
    return datetime.time(int(hours), int(minutes), 0)


def weekday_abbreviation(dt: datetime.datetime) -> str:
    return WEEKDAY_ABBREVIATIONS[dt.weekday()]
