# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from datetime import datetime
from typing import Final, Optional, assert_never

from workload_scheduler.configuration.schedule_spec import ScheduleSpec
from workload_scheduler.configuration.time_normalizer import (
    current_instant,
    normalize_wall_clock,
)
from workload_scheduler.observability.powertools_logging import powertools_logger
from workload_scheduler.scheduling.observed_state import (
    ScalableState,
    SuspendableState,
)
from workload_scheduler.scheduling.states import (
    ScalingAction,
    SuspensionAction,
    WindowState,
)
from workload_scheduler.scheduling.window import evaluate_window

logger: Final = powertools_logger()


def evaluate_schedule(spec: ScheduleSpec, current_dt: datetime) -> Optional[WindowState]:
    """
    :param spec: schedule of the resource
    :param current_dt: moment of evaluation, THIS MUST BE A TIMEZONE-AWARE DATETIME
    :return: the window state, None if the schedule does not apply on the current day
    in the schedule's timezone
    """
    now, today = current_instant(spec.timezone, current_dt)
    if not spec.is_scheduled_on(today):
        logger.debug(f"{today} is not in scheduled days {spec.days!r}")
        return None

    window_start = normalize_wall_clock(spec.start_time, spec.timezone, current_dt)
    window_end = normalize_wall_clock(spec.stop_time, spec.timezone, current_dt)
    window_state = evaluate_window(now, window_start, window_end)
    logger.debug(
        f"now: {now}, start: {window_start}, stop: {window_end}, "
        f"timezone: {spec.timezone}, window is {window_state.value}"
    )
    return window_state


def decide_scaling_action(
    spec: ScheduleSpec, observed: ScalableState, current_dt: datetime
) -> ScalingAction:
    """
    decide whether a scalable resource needs to change its replica count

    The observed state is the idempotency guard: once the replica count matches what the
    window requires no further action is requested. When the window is active and the
    original replica count is unknown SCALE_UP is still returned, planning it fails.
    """
    if spec.down_time_replicas is None:
        raise ValueError("Scaling decisions require a schedule with downtime replicas")

    window_state = evaluate_schedule(spec, current_dt)
    match window_state:
        case None:
            return ScalingAction.NO_ACTION
        case WindowState.INACTIVE:
            if observed.current_replicas != spec.down_time_replicas:
                return ScalingAction.SCALE_DOWN
            return ScalingAction.NO_ACTION
        case WindowState.ACTIVE:
            if observed.current_replicas != observed.original_replicas:
                return ScalingAction.SCALE_UP
            return ScalingAction.NO_ACTION
        case _ as unreachable:
            assert_never(unreachable)


def decide_suspension_action(
    spec: ScheduleSpec, observed: SuspendableState, current_dt: datetime
) -> SuspensionAction:
    """decide whether a suspendable resource needs to be suspended or resumed"""
    window_state = evaluate_schedule(spec, current_dt)
    match window_state:
        case None:
            return SuspensionAction.NO_ACTION
        case WindowState.INACTIVE:
            if not observed.suspended:
                return SuspensionAction.SUSPEND
            return SuspensionAction.NO_ACTION
        case WindowState.ACTIVE:
            if observed.suspended:
                return SuspensionAction.RESUME
            return SuspensionAction.NO_ACTION
        case _ as unreachable:
            assert_never(unreachable)
