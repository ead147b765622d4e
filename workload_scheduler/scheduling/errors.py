# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from workload_scheduler.observability.error_codes import ErrorCode


class ScheduleEvaluationError(Exception):
    """A resource could not be evaluated this cycle, it is left unmodified"""

    error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR


class InvalidTimeZoneError(ScheduleEvaluationError):
    error_code = ErrorCode.INVALID_TIME_ZONE


class InvalidTimeFormatError(ScheduleEvaluationError):
    error_code = ErrorCode.INVALID_TIME_FORMAT


class InvalidIntegerAnnotationError(ScheduleEvaluationError):
    error_code = ErrorCode.INVALID_INTEGER_ANNOTATION


class MissingOriginalReplicasError(ScheduleEvaluationError):
    error_code = ErrorCode.MISSING_ORIGINAL_REPLICAS


class ResourceListingError(Exception):
    """Listing a resource collection failed, the whole cycle cannot continue"""
