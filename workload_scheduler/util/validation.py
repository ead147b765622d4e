# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import re
from typing import Mapping, Optional

from workload_scheduler.scheduling.errors import InvalidIntegerAnnotationError

# replica counts are stored by the api server as int32
MAX_REPLICA_COUNT = 2**31 - 1
MAX_REPLICA_DIGITS = len(str(MAX_REPLICA_COUNT))


def parse_replica_count(value: str, key: str) -> int:
    """
    :param value: base-10 string representation of a replica count, surrounding whitespace
    and a leading "+" are accepted
    :param key: annotation the value was read from, used in the error message
    :return: the replica count
    :raises InvalidIntegerAnnotationError: if the value is not a non-negative int32
    """
    match = re.fullmatch(r"\+?([0-9]+)", value.strip())
    if match is None:
        raise InvalidIntegerAnnotationError(
            f"{key} must be a non-negative base-10 integer, found {_truncated(value)}"
        )
    digits = match.group(1).lstrip("0") or "0"
    if len(digits) > MAX_REPLICA_DIGITS or int(digits) > MAX_REPLICA_COUNT:
        raise InvalidIntegerAnnotationError(
            f"{key} must not exceed {MAX_REPLICA_COUNT}, found {_truncated(value)}"
        )
    return int(digits)


def optional_replica_count(
    annotations: Mapping[str, str], key: str
) -> Optional[int]:
    """
    :return: the replica count stored at {key}, None if the annotation is missing
    :raises InvalidIntegerAnnotationError: if the annotation is present but malformed
    """
    value = annotations.get(key, None)
    if value is None:
        return None
    return parse_replica_count(value, key)


def _truncated(value: str, limit: int = 32) -> str:
    if len(value) <= limit:
        return repr(value)
    return f"{value[:limit]!r}... ({len(value)} characters)"
