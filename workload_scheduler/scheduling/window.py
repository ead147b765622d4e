# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from workload_scheduler.configuration.time_normalizer import NormalizedInstant
from workload_scheduler.scheduling.states import WindowState


def evaluate_window(
    now: NormalizedInstant,
    window_start: NormalizedInstant,
    window_end: NormalizedInstant,
) -> WindowState:
    """
    test where the current instant falls relative to a single start-stop window per day

    Both endpoints belong to the active window: the start minute is already up and the
    stop minute is still up, only instants strictly after stop are down. A window whose
    start is after its end is not wrapped around midnight and is never active.

    :param now: current instant, normalized for the schedule's timezone
    :param window_start: start of the daily uptime
    :param window_end: end of the daily uptime
    :return: ACTIVE while the resource should be up, INACTIVE while it should be down
    """
    if window_end.before(now) or window_start.after(now):
        return WindowState.INACTIVE
    return WindowState.ACTIVE
