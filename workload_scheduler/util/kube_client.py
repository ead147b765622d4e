# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass
from typing import Final, Optional

from kubernetes import client, config
from kubernetes.config import ConfigException

from workload_scheduler.observability.powertools_logging import powertools_logger

logger: Final = powertools_logger()


@dataclass(frozen=True)
class KubernetesClientSet:
    apps: client.AppsV1Api
    batch: client.BatchV1Api


def load_clients(
    *, kubeconfig: Optional[str] = None, context: Optional[str] = None
) -> KubernetesClientSet:
    """
    Create Kubernetes API clients.

    When no kubeconfig is given the in-cluster service account configuration is used,
    falling back to the default kubeconfig location when not running inside a pod.
    Configuration errors are raised as `ConfigException`.
    """
    if kubeconfig:
        config.load_kube_config(config_file=kubeconfig, context=context)
    else:
        try:
            config.load_incluster_config()
            logger.debug("Using in-cluster service account configuration")
        except ConfigException:
            logger.debug("Not running in a cluster, using default kubeconfig")
            config.load_kube_config(context=context)

    return KubernetesClientSet(
        apps=client.AppsV1Api(),
        batch=client.BatchV1Api(),
    )
