# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from setuptools import find_packages, setup

setup(
    name="workload-scheduler",
    version="1.0.0",
    description="Time-window scheduler that scales Kubernetes Deployments and suspends CronJobs",
    packages=find_packages(include=["workload_scheduler", "workload_scheduler.*"]),
    python_requires=">=3.11",
    entry_points={
        "console_scripts": ["workload-scheduler = workload_scheduler.main:main"]
    },
    install_requires=[
        "aws-lambda-powertools>=2.26.0",
        "kubernetes>=28.1.0",
        "tzdata",
        "urllib3",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "freezegun>=1.2",
        ]
    },
)
