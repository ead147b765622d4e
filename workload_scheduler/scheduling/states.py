# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from enum import Enum


class WindowState(str, Enum):
    """position of the current instant relative to a schedule's daily window"""

    ACTIVE = "active"
    INACTIVE = "inactive"


class ScalingAction(Enum):
    """actions that can be requested for a resource with a replica count"""

    NO_ACTION = "None"
    SCALE_DOWN = "ScaleDown"
    SCALE_UP = "ScaleUp"


class SuspensionAction(Enum):
    """actions that can be requested for a resource with a suspend flag"""

    NO_ACTION = "None"
    SUSPEND = "Suspend"
    RESUME = "Resume"
