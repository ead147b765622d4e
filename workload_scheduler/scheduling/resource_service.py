# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any, Final, Generic, Optional, TypeVar

from kubernetes.client.exceptions import ApiException
from urllib3.exceptions import HTTPError

from workload_scheduler.configuration.schedule_spec import ResourceKind
from workload_scheduler.configuration.scheduling_context import SchedulingContext
from workload_scheduler.observability.powertools_logging import powertools_logger
from workload_scheduler.scheduling.errors import (
    ResourceListingError,
    ScheduleEvaluationError,
)
from workload_scheduler.scheduling.mutation_plan import (
    ScalingDecision,
    SuspensionDecision,
)
from workload_scheduler.scheduling.scheduling_result import (
    ManagedResource,
    SchedulingResult,
)

logger: Final = powertools_logger()

ResourceT = TypeVar("ResourceT")
DecisionT = TypeVar("DecisionT", ScalingDecision, SuspensionDecision)


class ResourceService(Generic[ResourceT, DecisionT], ABC):
    """
    Evaluates every resource of one kind against its schedule and applies the resulting
    mutations one resource at a time. Failures are isolated per resource, only a failure
    to list the resources aborts the cycle.
    """

    def __init__(self, context: SchedulingContext) -> None:
        self.context = context

    @property
    @abstractmethod
    def kind(self) -> ResourceKind:
        pass

    @abstractmethod
    def list_all_namespaces(self) -> list[ResourceT]:
        pass

    @abstractmethod
    def list_namespace(self, namespace: str) -> list[ResourceT]:
        pass

    @abstractmethod
    def make_decision(self, resource: ResourceT) -> Optional[DecisionT]:
        """
        decide and plan the mutation for a single resource
        :return: the planned decision, None if the resource has not opted into scheduling
        :raises ScheduleEvaluationError: if the resource cannot be evaluated this cycle
        """

    @abstractmethod
    def apply(self, resource: ResourceT, decision: DecisionT) -> None:
        pass

    def describe_resources(self) -> Iterator[ResourceT]:
        try:
            if self.context.namespaces:
                for namespace in self.context.namespaces:
                    yield from self.list_namespace(namespace)
            else:
                yield from self.list_all_namespaces()
        except (ApiException, HTTPError) as e:
            raise ResourceListingError(
                f"Unable to list {self.kind.value} resources: {_error_str(e)}"
            ) from e

    def schedule_target(self) -> Iterator[SchedulingResult]:
        for resource in self.describe_resources():
            result = self.schedule_resource(resource)
            if result is not None:
                yield result

    def schedule_resource(self, resource: ResourceT) -> Optional[SchedulingResult]:
        managed = self.managed_resource(resource)
        try:
            decision = self.make_decision(resource)
        except ScheduleEvaluationError as e:
            logger.error(f"Unable to schedule {managed}: {e}")
            return SchedulingResult.error(managed, e)
        except Exception as e:
            logger.error(f"Unable to schedule {managed}: {e}", exc_info=True)
            return SchedulingResult.error(managed, e)

        if decision is None:
            logger.debug(f"{managed} is not configured for scheduling, skipping...")
            return None

        if not decision.requires_update:
            return SchedulingResult.no_action_needed(managed, decision)

        logger.info(f"{managed}, action needed: {decision.action.value}")
        try:
            self.apply(resource, decision)
        except Exception as e:
            logger.error(f"Unable to update {managed}: {_error_str(e)}", exc_info=True)
            return SchedulingResult.client_exception(managed, decision, e)
        return SchedulingResult.success(managed, decision)

    def managed_resource(self, resource: Any) -> ManagedResource:
        return ManagedResource(
            kind=self.kind,
            namespace=resource.metadata.namespace,
            name=resource.metadata.name,
        )


def _error_str(error: Exception) -> str:
    if isinstance(error, ApiException):
        return f"{error.status} {error.reason}"
    return str(error)
