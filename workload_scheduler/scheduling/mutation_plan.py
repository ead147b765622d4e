# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass, field
from typing import Optional, assert_never

from workload_scheduler.configuration.schedule_spec import ScheduleSpec
from workload_scheduler.observability.annotation_keys import ControlAnnotationKey
from workload_scheduler.scheduling.errors import MissingOriginalReplicasError
from workload_scheduler.scheduling.observed_state import (
    ScalableState,
    SuspendableState,
)
from workload_scheduler.scheduling.states import ScalingAction, SuspensionAction


@dataclass(frozen=True)
class ScalingDecision:
    action: ScalingAction
    new_replica_count: Optional[int] = None
    annotation_updates: dict[str, str] = field(default_factory=dict)
    reason: str = ""

    @property
    def requires_update(self) -> bool:
        return self.action != ScalingAction.NO_ACTION


@dataclass(frozen=True)
class SuspensionDecision:
    action: SuspensionAction
    suspend: Optional[bool] = None
    reason: str = ""

    @property
    def requires_update(self) -> bool:
        return self.action != SuspensionAction.NO_ACTION


def plan_scaling(
    action: ScalingAction, spec: ScheduleSpec, observed: ScalableState
) -> ScalingDecision:
    """
    compute the replica count and bookkeeping annotations to write for a scaling action
    :raises MissingOriginalReplicasError: if a scale up has no original replica count to restore
    """
    match action:
        case ScalingAction.NO_ACTION:
            return ScalingDecision(
                action=action,
                reason="No change required by the schedule",
            )
        case ScalingAction.SCALE_DOWN:
            if spec.down_time_replicas is None:
                raise ValueError(
                    "Cannot plan a scale down without a downtime replica count"
                )
            return ScalingDecision(
                action=action,
                new_replica_count=spec.down_time_replicas,
                annotation_updates={
                    ControlAnnotationKey.ORIGINAL_REPLICAS.value: str(
                        observed.current_replicas
                    )
                },
                reason=f"Outside of uptime window, scaling from {observed.current_replicas} "
                f"to {spec.down_time_replicas} replicas",
            )
        case ScalingAction.SCALE_UP:
            if observed.original_replicas is None:
                raise MissingOriginalReplicasError(
                    f"Cannot scale up, annotation {ControlAnnotationKey.ORIGINAL_REPLICAS.value} "
                    "is missing or malformed"
                )
            return ScalingDecision(
                action=action,
                new_replica_count=observed.original_replicas,
                reason=f"Inside of uptime window, scaling from {observed.current_replicas} "
                f"to {observed.original_replicas} replicas",
            )
        case _ as unreachable:
            assert_never(unreachable)


def plan_suspension(
    action: SuspensionAction, observed: SuspendableState
) -> SuspensionDecision:
    match action:
        case SuspensionAction.NO_ACTION:
            return SuspensionDecision(
                action=action,
                reason="No change required by the schedule",
            )
        case SuspensionAction.SUSPEND:
            return SuspensionDecision(
                action=action, suspend=True, reason="Outside of uptime window"
            )
        case SuspensionAction.RESUME:
            return SuspensionDecision(
                action=action, suspend=False, reason="Inside of uptime window"
            )
        case _ as unreachable:
            assert_never(unreachable)
