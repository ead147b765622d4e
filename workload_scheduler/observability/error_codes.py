# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from enum import Enum


class ErrorCode(str, Enum):
    INVALID_TIME_ZONE = "InvalidTimeZone"
    INVALID_TIME_FORMAT = "InvalidTimeFormat"
    INVALID_INTEGER_ANNOTATION = "InvalidIntegerAnnotation"
    MISSING_ORIGINAL_REPLICAS = "MissingOriginalReplicas"
    UPDATE_FAILED = "UpdateFailed"
    UNKNOWN_ERROR = "UnknownError"
