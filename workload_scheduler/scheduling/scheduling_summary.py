# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from collections import Counter
from itertools import groupby
from typing import Iterable, Iterator

from workload_scheduler.scheduling.scheduling_result import (
    SchedulingAction,
    SchedulingResult,
)


class SchedulingSummary:
    results: list[SchedulingResult]

    def __init__(self, results: Iterable[SchedulingResult]) -> None:
        self.results = list(results)

    def __add__(self, other: "SchedulingSummary") -> "SchedulingSummary":
        return SchedulingSummary(self.results + other.results)

    def group_by_kind(self) -> Iterator[tuple[str, list[SchedulingResult]]]:
        sorted_results = sorted(self.results, key=lambda r: r.resource.kind.value)
        for kind, group in groupby(sorted_results, key=lambda r: r.resource.kind.value):
            yield kind, list(group)

    def actions_taken(self) -> Counter[SchedulingAction]:
        return Counter(result.action_taken for result in self.results)

    @property
    def error_count(self) -> int:
        return self.actions_taken()[SchedulingAction.ERROR]

    def to_log(self) -> dict[str, object]:
        return {
            "log_type": "scheduling_summary",
            "resources_scanned": len(self.results),
            "errors": self.error_count,
            "actions": {
                kind: {
                    str(action.value): count
                    for action, count in Counter(r.action_taken for r in group).items()
                    if action.value
                }
                for kind, group in self.group_by_kind()
            },
        }

