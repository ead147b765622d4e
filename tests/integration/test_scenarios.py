# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""
end-to-end reconcile cycles against a mocked cluster, covering a working day of an
office-hours schedule
"""
import copy
from datetime import datetime
from typing import Any, Sequence
from unittest.mock import MagicMock

from kubernetes.client import V1CronJob, V1Deployment

from workload_scheduler.handler.reconcile import run_reconcile_cycle
from workload_scheduler.observability.error_codes import ErrorCode
from workload_scheduler.scheduling.scheduling_result import SchedulingAction
from workload_scheduler.util.kube_client import KubernetesClientSet
from tests.test_utils.app_env_utils import example_app_env
from tests.test_utils.kube_resources import (
    cronjob,
    cronjob_list,
    deployment,
    deployment_list,
)
from tests.test_utils.schedule_helpers import (
    SATURDAY,
    office_hours_annotations,
    quick_time,
)


def reconcile(
    clients: KubernetesClientSet, current_dt: datetime
) -> list[SchedulingAction]:
    summary = run_reconcile_cycle(clients, example_app_env(), current_dt=current_dt)
    return [result.action_taken for result in summary.results]


def serve(
    clients: KubernetesClientSet,
    deployments: Sequence[V1Deployment] = (),
    cronjobs: Sequence[V1CronJob] = (),
) -> None:
    # every list returns fresh copies of the stored objects, like the api server does
    clients.apps.list_deployment_for_all_namespaces.side_effect = lambda: (
        deployment_list(*copy.deepcopy(deployments))
    )
    clients.batch.list_cron_job_for_all_namespaces.side_effect = lambda: (
        cronjob_list(*copy.deepcopy(cronjobs))
    )


def last_written(update: MagicMock) -> Any:
    return update.call_args.kwargs["body"]


def test_scale_down_in_the_evening(kube_clients: KubernetesClientSet) -> None:
    serve(
        kube_clients,
        deployments=[deployment(replicas=2, annotations=office_hours_annotations())],
    )

    assert reconcile(kube_clients, quick_time(20, 0)) == [SchedulingAction.SCALED_DOWN]

    written = last_written(kube_clients.apps.replace_namespaced_deployment)
    assert written.spec.replicas == 1
    assert written.metadata.annotations["d8r/originalReplicas"] == "2"


def test_scale_up_in_the_morning(kube_clients: KubernetesClientSet) -> None:
    serve(
        kube_clients,
        deployments=[
            deployment(
                replicas=1,
                annotations={
                    **office_hours_annotations(),
                    "d8r/originalReplicas": "2",
                },
            )
        ],
    )

    assert reconcile(kube_clients, quick_time(9, 0)) == [SchedulingAction.SCALED_UP]

    written = last_written(kube_clients.apps.replace_namespaced_deployment)
    assert written.spec.replicas == 2


def test_nothing_happens_on_the_weekend(kube_clients: KubernetesClientSet) -> None:
    serve(
        kube_clients,
        deployments=[
            deployment(
                name=f"nginx-{replicas}",
                replicas=replicas,
                annotations=office_hours_annotations(),
            )
            for replicas in (1, 2, 5)
        ],
    )

    assert reconcile(kube_clients, quick_time(20, 0, date=SATURDAY)) == [
        SchedulingAction.DO_NOTHING
    ] * 3
    kube_clients.apps.replace_namespaced_deployment.assert_not_called()


def test_cronjob_is_suspended_once(kube_clients: KubernetesClientSet) -> None:
    serve(
        kube_clients,
        cronjobs=[cronjob(suspend=False, annotations=office_hours_annotations(None))],
    )

    assert reconcile(kube_clients, quick_time(20, 0)) == [SchedulingAction.SUSPENDED]

    # the next cycle observes what the previous one wrote
    serve(
        kube_clients,
        cronjobs=[last_written(kube_clients.batch.replace_namespaced_cron_job)],
    )
    assert reconcile(kube_clients, quick_time(20, 5)) == [SchedulingAction.DO_NOTHING]
    kube_clients.batch.replace_namespaced_cron_job.assert_called_once()


def test_malformed_down_time_replicas_leaves_deployment_alone(
    kube_clients: KubernetesClientSet,
) -> None:
    serve(
        kube_clients,
        deployments=[
            deployment(
                replicas=2,
                annotations=office_hours_annotations(down_time_replicas="abc"),
            )
        ],
    )

    summary = run_reconcile_cycle(
        kube_clients, example_app_env(), current_dt=quick_time(20, 0)
    )

    assert summary.results[0].action_taken == SchedulingAction.ERROR
    assert summary.results[0].error_code == ErrorCode.INVALID_INTEGER_ANNOTATION
    kube_clients.apps.replace_namespaced_deployment.assert_not_called()


def test_full_day_round_trip(kube_clients: KubernetesClientSet) -> None:
    serve(
        kube_clients,
        deployments=[deployment(replicas=4, annotations=office_hours_annotations())],
    )

    timeline = [
        (quick_time(7, 0), SchedulingAction.SCALED_DOWN),
        (quick_time(7, 30), SchedulingAction.DO_NOTHING),
        (quick_time(8, 0), SchedulingAction.SCALED_UP),
        (quick_time(12, 0), SchedulingAction.DO_NOTHING),
        (quick_time(16, 0), SchedulingAction.DO_NOTHING),
        (quick_time(16, 1), SchedulingAction.SCALED_DOWN),
        (quick_time(23, 0), SchedulingAction.DO_NOTHING),
    ]
    for current_dt, expected in timeline:
        assert reconcile(kube_clients, current_dt) == [expected], current_dt
        if expected != SchedulingAction.DO_NOTHING:
            serve(
                kube_clients,
                deployments=[
                    last_written(kube_clients.apps.replace_namespaced_deployment)
                ],
            )

    written = last_written(kube_clients.apps.replace_namespaced_deployment)
    assert written.spec.replicas == 1
    assert written.metadata.annotations["d8r/originalReplicas"] == "4"


def test_oversized_annotation_is_isolated_to_its_deployment(
    kube_clients: KubernetesClientSet,
) -> None:
    serve(
        kube_clients,
        deployments=[
            deployment(
                name="oversized",
                annotations=office_hours_annotations(down_time_replicas="7" * 5000),
            ),
            deployment(name="nginx", annotations=office_hours_annotations()),
        ],
    )

    assert reconcile(kube_clients, quick_time(20, 0)) == [
        SchedulingAction.ERROR,
        SchedulingAction.SCALED_DOWN,
    ]
    written = last_written(kube_clients.apps.replace_namespaced_deployment)
    assert written.metadata.name == "nginx"
