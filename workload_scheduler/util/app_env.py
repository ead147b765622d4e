# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass
from os import environ
from typing import Optional

from workload_scheduler.util.app_env_utils import (
    AppEnvError,
    env_to_bool,
    env_to_list,
    env_to_positive_int,
)

DEFAULT_SCHEDULER_INTERVAL_SECONDS = "10"

__all__ = [
    "AppEnv",
    "AppEnvError",
    "env_to_bool",
    "env_to_list",
    "get_app_env",
]


@dataclass(frozen=True)
class AppEnv:
    scheduler_interval_seconds: int
    enable_debug_logging: bool
    enable_deployments: bool
    enable_cronjobs: bool
    schedule_namespaces: list[str]
    kubeconfig: Optional[str]
    kube_context: Optional[str]

    def scheduled_kinds(self) -> list[str]:
        result = []
        if self.enable_deployments:
            result.append("Deployment")
        if self.enable_cronjobs:
            result.append("CronJob")
        return result


# cache the application environment for the lifetime of the process
_app_env: Optional[AppEnv] = None


def get_app_env() -> AppEnv:
    """
    Retrieve the current application environment. This function should be called once
    at process start.

    Do not pass around the environment object deep into the scheduling logic. The
    entrypoint should pass the needed values to the constructors of the classes that
    need them, so that lower-level code stays testable with only the options it requires.
    """
    global _app_env
    if not _app_env:
        _app_env = _from_environment()
    return _app_env


def _from_environment() -> AppEnv:
    return AppEnv(
        scheduler_interval_seconds=env_to_positive_int(
            "SCHEDULER_INTERVAL_SECONDS",
            environ.get(
                "SCHEDULER_INTERVAL_SECONDS", DEFAULT_SCHEDULER_INTERVAL_SECONDS
            ),
        ),
        enable_debug_logging=env_to_bool(environ.get("TRACE", "false")),
        enable_deployments=env_to_bool(environ.get("ENABLE_DEPLOYMENTS", "true")),
        enable_cronjobs=env_to_bool(environ.get("ENABLE_CRONJOBS", "true")),
        schedule_namespaces=env_to_list(environ.get("SCHEDULE_NAMESPACES", "")),
        kubeconfig=environ.get("KUBECONFIG") or None,
        kube_context=environ.get("KUBE_CONTEXT") or None,
    )
