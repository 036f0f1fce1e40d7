"""Scheduled entry point: settings come from the environment."""

import logging

from .core import RecordSynchronizer
from .settings import SyncSettings

logger = logging.getLogger("taskdns")


def handler(event=None, context=None):
    """Run one sync and return ``{"statusCode": 200, ...}``.

    Errors propagate so the scheduler records the invocation as failed.
    """
    settings = SyncSettings.from_env()
    logger.setLevel(logging.INFO)
    report = RecordSynchronizer(settings).sync()
    return report.as_response()
