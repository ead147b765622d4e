# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from typing import Final, Optional

from kubernetes.client import BatchV1Api, V1CronJob

from workload_scheduler.configuration.schedule_spec import (
    ResourceKind,
    parse_schedule_spec,
)
from workload_scheduler.configuration.scheduling_context import SchedulingContext
from workload_scheduler.scheduling.mutation_plan import (
    SuspensionDecision,
    plan_suspension,
)
from workload_scheduler.scheduling.observed_state import SuspendableState
from workload_scheduler.scheduling.resource_service import ResourceService
from workload_scheduler.scheduling.scheduling_decision import decide_suspension_action


def observed_suspended(cronjob: V1CronJob) -> bool:
    return bool(cronjob.spec and cronjob.spec.suspend)


class CronJobService(ResourceService[V1CronJob, SuspensionDecision]):
    client: Final[BatchV1Api]

    def __init__(self, context: SchedulingContext) -> None:
        super().__init__(context)
        self.client = context.clients.batch

    @property
    def kind(self) -> ResourceKind:
        return ResourceKind.CRONJOB

    def list_all_namespaces(self) -> list[V1CronJob]:
        return self.client.list_cron_job_for_all_namespaces().items

    def list_namespace(self, namespace: str) -> list[V1CronJob]:
        return self.client.list_namespaced_cron_job(namespace).items

    def make_decision(self, resource: V1CronJob) -> Optional[SuspensionDecision]:
        spec = parse_schedule_spec(resource.metadata.annotations, self.kind)
        if spec is None:
            return None

        observed = SuspendableState(suspended=observed_suspended(resource))
        action = decide_suspension_action(spec, observed, self.context.current_dt)
        return plan_suspension(action, observed)

    def apply(self, resource: V1CronJob, decision: SuspensionDecision) -> None:
        resource.spec.suspend = decision.suspend
        self.client.replace_namespaced_cron_job(
            name=resource.metadata.name,
            namespace=resource.metadata.namespace,
            body=resource,
        )
