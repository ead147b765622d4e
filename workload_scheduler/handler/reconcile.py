# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import time
from datetime import datetime
from typing import Any, Callable, Final, Optional

from workload_scheduler.configuration.scheduling_context import SchedulingContext
from workload_scheduler.observability.powertools_logging import powertools_logger
from workload_scheduler.scheduling.cronjobs import CronJobService
from workload_scheduler.scheduling.deployments import DeploymentService
from workload_scheduler.scheduling.resource_service import ResourceService
from workload_scheduler.scheduling.scheduling_result import SchedulingAction
from workload_scheduler.scheduling.scheduling_summary import SchedulingSummary
from workload_scheduler.util.app_env import AppEnv
from workload_scheduler.util.kube_client import KubernetesClientSet
from workload_scheduler.util.time import utc_now

logger: Final = powertools_logger()


def build_services(
    context: SchedulingContext, env: AppEnv
) -> list[ResourceService[Any, Any]]:
    services: list[ResourceService[Any, Any]] = []
    if env.enable_deployments:
        services.append(DeploymentService(context))
    if env.enable_cronjobs:
        services.append(CronJobService(context))
    return services


def run_reconcile_cycle(
    clients: KubernetesClientSet,
    env: AppEnv,
    current_dt: Optional[datetime] = None,
) -> SchedulingSummary:
    """
    evaluate every scheduled resource once

    :param current_dt: moment to evaluate the schedules at, defaults to now
    :raises ResourceListingError: if a resource collection cannot be listed
    """
    context = SchedulingContext(
        clients=clients,
        current_dt=current_dt or utc_now(),
        namespaces=env.schedule_namespaces,
    )

    summary = SchedulingSummary([])
    for service in build_services(context, env):
        service_summary = SchedulingSummary(service.schedule_target())
        for result in service_summary.results:
            log = (
                logger.debug
                if result.action_taken == SchedulingAction.DO_NOTHING
                else logger.info
            )
            log(
                f"result for {result.resource} - {result.action_taken}",
                extra=result.to_json_log(),
            )
        summary += service_summary

    logger.debug(
        f"Reconcile cycle at {context.current_dt.isoformat()} complete",
        extra=summary.to_log(),
    )
    return summary


def run_forever(
    clients: KubernetesClientSet,
    env: AppEnv,
    sleep: Callable[[float], None] = time.sleep,
    max_cycles: Optional[int] = None,
) -> None:
    """
    run reconcile cycles on a fixed interval. Errors of single resources are reported in
    the cycle's summary and retried implicitly on the next cycle, a ResourceListingError
    ends the loop.

    :param max_cycles: stop after this many cycles, runs until interrupted when None
    """
    cycles = 0
    while max_cycles is None or cycles < max_cycles:
        run_reconcile_cycle(clients, env)
        cycles += 1
        if max_cycles is None or cycles < max_cycles:
            sleep(env.scheduler_interval_seconds)
