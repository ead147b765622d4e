# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from typing import Any


def time_str(t: Any) -> str:
    return DisplayHelper.time_as_str(t)


def resource_str(kind: str, namespace: str, name: str) -> str:
    return DisplayHelper.resource_as_str(kind, namespace, name)


class DisplayHelper:
    """
    Class that implements helper functions for displaying scheduling data in a more readable form
    """

    # uniform string to display a time of day, schedules have minute resolution
    @staticmethod
    def time_as_str(t: Any) -> str:
        """
        Returns the time in a standard format
        :param t: time
        :return: time as a string
        """
        return "{:0>2d}:{:0>2d}".format(t.hour, t.minute)

    @staticmethod
    def resource_as_str(kind: str, namespace: str, name: str) -> str:
        """
        Returns a resource reference the way kubectl displays it
        :param kind: kind of the resource
        :param namespace: namespace of the resource
        :param name: name of the resource
        :return: kind/namespace/name
        """
        return f"{kind.lower()}/{namespace}/{name}"
