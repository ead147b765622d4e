# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final, Optional

from workload_scheduler.observability.annotation_keys import (
    ControlAnnotationKey,
    ScheduleAnnotationKey,
)
from workload_scheduler.observability.powertools_logging import powertools_logger
from workload_scheduler.scheduling.errors import InvalidIntegerAnnotationError
from workload_scheduler.util.validation import optional_replica_count

logger: Final = powertools_logger()


@dataclass(frozen=True)
class ScalableState:
    """observed run-state of a resource with a replica count"""

    current_replicas: int
    original_replicas: Optional[int] = None
    down_time_replicas_recorded: Optional[int] = None

    @classmethod
    def from_resource(
        cls, current_replicas: int, annotations: Optional[Mapping[str, str]]
    ) -> "ScalableState":
        annotations = annotations or {}
        return cls(
            current_replicas=current_replicas,
            original_replicas=_lenient_replica_count(
                annotations, ControlAnnotationKey.ORIGINAL_REPLICAS.value
            ),
            down_time_replicas_recorded=_lenient_replica_count(
                annotations, ScheduleAnnotationKey.DOWN_TIME_REPLICAS.value
            ),
        )


@dataclass(frozen=True)
class SuspendableState:
    """observed run-state of a resource with a suspend flag"""

    suspended: bool


def _lenient_replica_count(annotations: Mapping[str, str], key: str) -> Optional[int]:
    # a malformed bookkeeping value must not block a scale down, which overwrites it
    try:
        return optional_replica_count(annotations, key)
    except InvalidIntegerAnnotationError as e:
        logger.warning(f"Ignoring malformed annotation: {e}")
        return None
