# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from importlib.metadata import PackageNotFoundError, version

__version__ = "unknown"

try:
    __version__ = version("workload-scheduler")
except PackageNotFoundError:
    pass
