# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import pytest

from workload_scheduler.scheduling.errors import InvalidIntegerAnnotationError
from workload_scheduler.util.validation import (
    MAX_REPLICA_COUNT,
    optional_replica_count,
    parse_replica_count,
)


@pytest.mark.parametrize(
    "value,expected",
    [("0", 0), ("3", 3), ("+2", 2), (" 5 ", 5), ("007", 7), ("2147483647", 2**31 - 1)],
)
def test_parse_valid_replica_count(value: str, expected: int) -> None:
    assert parse_replica_count(value, "d8r/downTimeReplicas") == expected


@pytest.mark.parametrize(
    "value", ["", "  ", "-1", "1.0", "1e3", "two", "0x10", "2147483648"]
)
def test_parse_invalid_replica_count(value: str) -> None:
    with pytest.raises(InvalidIntegerAnnotationError) as excinfo:
        parse_replica_count(value, "d8r/downTimeReplicas")

    assert "d8r/downTimeReplicas" in str(excinfo.value)


def test_max_replica_count_is_int32() -> None:
    assert MAX_REPLICA_COUNT == 2147483647


def test_optional_replica_count_missing_is_none() -> None:
    assert optional_replica_count({}, "d8r/originalReplicas") is None


def test_optional_replica_count_present() -> None:
    annotations = {"d8r/originalReplicas": "4"}

    assert optional_replica_count(annotations, "d8r/originalReplicas") == 4


def test_optional_replica_count_malformed_raises() -> None:
    with pytest.raises(InvalidIntegerAnnotationError):
        optional_replica_count({"d8r/originalReplicas": "four"}, "d8r/originalReplicas")


@pytest.mark.parametrize(
    "value", ["0" * 5000 + "1", "9" * 5000, "1" * 11, "٣", "+ 1", "1\n2"]
)
def test_parse_oversized_or_non_ascii_replica_count(value: str) -> None:
    with pytest.raises(InvalidIntegerAnnotationError):
        parse_replica_count(value, "d8r/downTimeReplicas")


def test_leading_zeros_do_not_count_towards_the_limit() -> None:
    assert parse_replica_count("0" * 5000 + "2", "d8r/originalReplicas") == 2


def test_error_message_truncates_long_values() -> None:
    with pytest.raises(InvalidIntegerAnnotationError) as excinfo:
        parse_replica_count("9" * 5000, "d8r/downTimeReplicas")

    assert len(str(excinfo.value)) < 200
