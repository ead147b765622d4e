# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from collections.abc import Iterator
from os import environ
from unittest.mock import MagicMock, patch

import kubernetes.client
import kubernetes.client.models
from pytest import fixture

import workload_scheduler.util.app_env
from workload_scheduler.util.kube_client import KubernetesClientSet

# kubernetes exports its api and model classes lazily; resolve them up front so
# freezegun's module scan does not import pydantic models while datetime is frozen
for _lazy_module in (kubernetes.client, kubernetes.client.models):
    for _name in dir(_lazy_module):
        getattr(_lazy_module, _name)


@fixture(autouse=True)
def clean_environment() -> Iterator[None]:
    with patch.dict(environ, {}, clear=True):
        yield


@fixture(autouse=True)
def reset_cached_env() -> Iterator[None]:
    workload_scheduler.util.app_env._app_env = None
    yield
    workload_scheduler.util.app_env._app_env = None


@fixture
def kube_clients() -> KubernetesClientSet:
    return KubernetesClientSet(apps=MagicMock(), batch=MagicMock())
