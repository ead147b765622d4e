# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass
from enum import Enum
from typing import Optional, assert_never

from kubernetes.client.exceptions import ApiException
from urllib3.exceptions import HTTPError

from workload_scheduler.configuration.schedule_spec import ResourceKind
from workload_scheduler.observability.error_codes import ErrorCode
from workload_scheduler.scheduling.errors import ScheduleEvaluationError
from workload_scheduler.scheduling.mutation_plan import (
    ScalingDecision,
    SuspensionDecision,
)
from workload_scheduler.scheduling.states import ScalingAction, SuspensionAction
from workload_scheduler.util.display_helper import resource_str

RequestedAction = ScalingAction | SuspensionAction
Decision = ScalingDecision | SuspensionDecision


@dataclass(frozen=True)
class ManagedResource:
    kind: ResourceKind
    namespace: str
    name: str

    def __str__(self) -> str:
        return resource_str(self.kind.value, self.namespace, self.name)


class SchedulingAction(Enum):
    DO_NOTHING = None
    SCALED_DOWN = "ScaledDown"
    SCALED_UP = "ScaledUp"
    SUSPENDED = "Suspended"
    RESUMED = "Resumed"
    ERROR = "Error"

    @classmethod
    def from_requested_action(
        cls, requested_action: RequestedAction
    ) -> "SchedulingAction":
        match requested_action:
            case ScalingAction.NO_ACTION | SuspensionAction.NO_ACTION:
                return SchedulingAction.DO_NOTHING
            case ScalingAction.SCALE_DOWN:
                return SchedulingAction.SCALED_DOWN
            case ScalingAction.SCALE_UP:
                return SchedulingAction.SCALED_UP
            case SuspensionAction.SUSPEND:
                return SchedulingAction.SUSPENDED
            case SuspensionAction.RESUME:
                return SchedulingAction.RESUMED
            case _ as unreachable:
                assert_never(unreachable)


@dataclass()
class SchedulingResult:
    resource: ManagedResource
    requested_action: Optional[RequestedAction]
    request_reason: Optional[str]
    action_taken: SchedulingAction
    error_code: Optional[ErrorCode] = None
    error_message: Optional[str] = None

    def to_json_log(self) -> dict[str, str]:
        return {
            "log_type": "scheduling_result",
            "resource": str(self.resource),
            "kind": self.resource.kind.value,
            "decision": (
                str(self.requested_action.value) if self.requested_action else ""
            ),
            "reason": str(self.request_reason),
            "action_taken": (
                str(self.action_taken.value) if self.action_taken.value else "None"
            ),
            "error_code": str(self.error_code.value) if self.error_code else "",
            "error_message": str(self.error_message),
        }

    @classmethod
    def no_action_needed(
        cls, resource: ManagedResource, decision: Decision
    ) -> "SchedulingResult":
        return cls(
            resource=resource,
            requested_action=decision.action,
            request_reason=decision.reason,
            action_taken=SchedulingAction.DO_NOTHING,
        )

    @classmethod
    def success(
        cls, resource: ManagedResource, decision: Decision
    ) -> "SchedulingResult":
        return cls(
            resource=resource,
            requested_action=decision.action,
            request_reason=decision.reason,
            action_taken=SchedulingAction.from_requested_action(decision.action),
        )

    @classmethod
    def error(
        cls,
        resource: ManagedResource,
        error: Exception,
        requested_action: Optional[RequestedAction] = None,
    ) -> "SchedulingResult":
        return cls(
            resource=resource,
            requested_action=requested_action,
            request_reason=None,
            action_taken=SchedulingAction.ERROR,
            error_code=(
                error.error_code
                if isinstance(error, ScheduleEvaluationError)
                else ErrorCode.UNKNOWN_ERROR
            ),
            error_message=str(error),
        )

    @classmethod
    def client_exception(
        cls,
        resource: ManagedResource,
        decision: Decision,
        error: Optional[Exception] = None,
    ) -> "SchedulingResult":
        return cls(
            resource=resource,
            requested_action=decision.action,
            request_reason=decision.reason,
            action_taken=SchedulingAction.ERROR,
            error_code=(
                ErrorCode.UPDATE_FAILED
                if isinstance(error, (ApiException, HTTPError))
                else ErrorCode.UNKNOWN_ERROR
            ),
            error_message=_client_error_message(error),
        )


def _client_error_message(error: Optional[Exception]) -> str:
    if isinstance(error, ApiException):
        return f"{error.status} {error.reason}"
    if isinstance(error, HTTPError):
        return str(error)
    return "Unknown Error"
