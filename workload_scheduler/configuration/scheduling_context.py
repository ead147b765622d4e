# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import datetime
from typing import Sequence

from workload_scheduler.util.kube_client import KubernetesClientSet
from workload_scheduler.util.time import is_aware


class SchedulingContext:
    """inputs shared by every resource evaluated in one reconcile cycle"""

    clients: KubernetesClientSet
    current_dt: datetime.datetime
    namespaces: list[str]

    def __init__(
        self,
        clients: KubernetesClientSet,
        current_dt: datetime.datetime,
        namespaces: Sequence[str] = (),
    ):
        if not is_aware(current_dt):
            raise ValueError(
                f"SchedulingContext datetime must be timezone-Aware. Received: {current_dt}"
            )

        self.clients = clients
        self.current_dt = current_dt
        self.namespaces = list(namespaces)
