# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import logging

from aws_lambda_powertools import Logger

SERVICE_NAME = "workload-scheduler"


def powertools_logger(service: str = SERVICE_NAME) -> Logger:
    silence_client_logs()
    logger = Logger(
        use_rfc3339=True,
        log_uncaught_exceptions=True,
        service=service,
    )
    return logger


def set_debug_logging(logger: Logger, enabled: bool) -> None:
    logger.setLevel(logging.DEBUG if enabled else logging.INFO)


def silence_client_logs() -> None:
    logging.getLogger("kubernetes").setLevel(logging.WARN)
    logging.getLogger("urllib3").setLevel(logging.WARN)
