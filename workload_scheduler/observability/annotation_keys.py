# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from enum import Enum


class ScheduleAnnotationKey(str, Enum):
    """annotations set by operators to opt a resource into scheduling"""

    DAYS = "d8r/days"
    START_TIME = "d8r/startTime"
    STOP_TIME = "d8r/stopTime"
    TIME_ZONE = "d8r/timeZone"
    DOWN_TIME_REPLICAS = "d8r/downTimeReplicas"


class ControlAnnotationKey(str, Enum):
    """annotations written by the scheduler itself and read back on later cycles"""

    ORIGINAL_REPLICAS = "d8r/originalReplicas"
