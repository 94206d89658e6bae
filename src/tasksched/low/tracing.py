"""
Interface for tracing task and worker lifecycle events

Currently, the export is handled just by logging, assuming to be parsed later. We log at debug
level since this is assumed to be high level tracing. The simulated time is expected among the
labels, we deliberately don't stamp wall clock time here
"""

import logging
from enum import Enum

d: dict[str, str] = {}

logger = logging.getLogger(__name__)


class TaskLifecycle(str, Enum):
    submitted = "task_submitted"
    assigned = "task_assigned"
    queued = "task_queued"
    completed = "task_completed"
    requeued = "task_requeued"
    timed_out = "task_timed_out"
    cancelled = "task_cancelled"
    failed = "task_failed"


class WorkerLifecycle(str, Enum):
    registered = "worker_registered"
    scaled = "worker_scaled"
    failed = "worker_failed"
    reactivated = "worker_reactivated"


def _labels(labels: dict) -> str:
    return ";".join(
        f"{k}={v.value if isinstance(v, Enum) else v}" for k, v in labels.items()
    )


def label(key: str, value: str) -> None:
    """Makes all subsequent marks contain this KV"""
    global d
    d[key] = value


def mark(labels: dict) -> None:
    global d
    logger.debug(_labels({**d, **labels}))
