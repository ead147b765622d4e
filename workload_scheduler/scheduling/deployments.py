# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from typing import Final, Optional

from kubernetes.client import AppsV1Api, V1Deployment

from workload_scheduler.configuration.schedule_spec import (
    ResourceKind,
    parse_schedule_spec,
)
from workload_scheduler.configuration.scheduling_context import SchedulingContext
from workload_scheduler.scheduling.mutation_plan import ScalingDecision, plan_scaling
from workload_scheduler.scheduling.observed_state import ScalableState
from workload_scheduler.scheduling.resource_service import ResourceService
from workload_scheduler.scheduling.scheduling_decision import decide_scaling_action

# the api server fills in this default when a manifest omits spec.replicas
DEFAULT_REPLICAS: Final = 1


def observed_replicas(deployment: V1Deployment) -> int:
    replicas = deployment.spec.replicas if deployment.spec else None
    return DEFAULT_REPLICAS if replicas is None else replicas


class DeploymentService(ResourceService[V1Deployment, ScalingDecision]):
    client: Final[AppsV1Api]

    def __init__(self, context: SchedulingContext) -> None:
        super().__init__(context)
        self.client = context.clients.apps

    @property
    def kind(self) -> ResourceKind:
        return ResourceKind.DEPLOYMENT

    def list_all_namespaces(self) -> list[V1Deployment]:
        return self.client.list_deployment_for_all_namespaces().items

    def list_namespace(self, namespace: str) -> list[V1Deployment]:
        return self.client.list_namespaced_deployment(namespace).items

    def make_decision(self, resource: V1Deployment) -> Optional[ScalingDecision]:
        annotations = resource.metadata.annotations
        spec = parse_schedule_spec(annotations, self.kind)
        if spec is None:
            return None

        observed = ScalableState.from_resource(observed_replicas(resource), annotations)
        action = decide_scaling_action(spec, observed, self.context.current_dt)
        return plan_scaling(action, spec, observed)

    def apply(self, resource: V1Deployment, decision: ScalingDecision) -> None:
        if decision.annotation_updates:
            resource.metadata.annotations = {
                **(resource.metadata.annotations or {}),
                **decision.annotation_updates,
            }
        resource.spec.replicas = decision.new_replica_count
        # the object still carries the resourceVersion it was read with, a concurrent
        # change makes the api server reject this write with a conflict
        self.client.replace_namespaced_deployment(
            name=resource.metadata.name,
            namespace=resource.metadata.namespace,
            body=resource,
        )
