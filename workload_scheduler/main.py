# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import sys
import traceback
from enum import IntEnum
from typing import Final

from kubernetes.config import ConfigException

from workload_scheduler import __version__
from workload_scheduler.handler.reconcile import run_forever
from workload_scheduler.observability.powertools_logging import (
    powertools_logger,
    set_debug_logging,
)
from workload_scheduler.scheduling.errors import ResourceListingError
from workload_scheduler.util import safe_json
from workload_scheduler.util.app_env import AppEnvError, get_app_env
from workload_scheduler.util.kube_client import load_clients

logger: Final = powertools_logger()


class ExitCode(IntEnum):
    OK = 0
    CONFIGURATION_FAILED = 1
    CLIENT_FAILED = 2
    LISTING_FAILED = 3


def main() -> int:
    try:
        env = get_app_env()
    except AppEnvError as e:
        logger.error(f"Invalid configuration: {e}")
        return ExitCode.CONFIGURATION_FAILED

    set_debug_logging(logger, env.enable_debug_logging)
    logger.info(f"WorkloadScheduler, version {__version__}")
    logger.debug(f"Environment is {safe_json(env.__dict__, indent=3)}")

    try:
        clients = load_clients(kubeconfig=env.kubeconfig, context=env.kube_context)
    except ConfigException as e:
        logger.error(f"Unable to load cluster configuration: {e}")
        return ExitCode.CONFIGURATION_FAILED
    except Exception as e:
        logger.error(
            f"Unable to create cluster clients: ({e})\n{traceback.format_exc()}"
        )
        return ExitCode.CLIENT_FAILED

    logger.info(
        f"Scheduling {', '.join(env.scheduled_kinds()) or 'nothing'} "
        f"every {env.scheduler_interval_seconds} seconds"
    )
    try:
        run_forever(clients, env)
    except ResourceListingError as e:
        logger.error(f"{e}\n{traceback.format_exc()}")
        return ExitCode.LISTING_FAILED
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    return ExitCode.OK


if __name__ == "__main__":
    sys.exit(main())
