"""
Core data structures -- prescribes most of the API

The Task is a pydantic model: requirement fields are validated at construction and frozen,
lifecycle fields are mutable but only ever changed by the scheduler via the methods below.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

TaskId = str
WorkerId = str


class Priority(int, Enum):
    low = 1
    medium = 2
    high = 3


# order in which the queue tiers are consulted
PRIORITY_ORDER: tuple[Priority, ...] = (Priority.high, Priority.medium, Priority.low)


class TaskStatus(int, Enum):
    queued = 0  # set on submission and on every requeue
    assigned = 1  # set when resources are reserved at a worker
    completed = 2
    cancelled = 3
    failed = 4  # only with a configured retry cap


TERMINAL_STATUSES = frozenset(
    {TaskStatus.completed, TaskStatus.cancelled, TaskStatus.failed}
)


class WorkerStatus(int, Enum):
    active = 0
    inactive = 1


class DuplicateEntity(ValueError):
    """Registering an identifier which is already known"""


class NotFound(KeyError):
    """Looking up an identifier which was never registered. Signals a broken invariant
    at the caller, so it is propagated rather than handled"""


class Task(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    task_id: TaskId = Field(min_length=1, frozen=True)
    cpu: int = Field(gt=0, frozen=True)
    memory: int = Field(gt=0, frozen=True)
    execution_time: int = Field(gt=0, frozen=True, description="in simulated time units")
    priority: Priority = Field(Priority.medium, frozen=True)

    status: TaskStatus = TaskStatus.queued
    assigned_worker: WorkerId | None = None
    start_time: int | None = Field(None, description="None unless status is assigned")
    retry_count: int = Field(0, ge=0)

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES

    def is_execution_complete(self, now: int) -> bool:
        if self.status != TaskStatus.assigned or self.start_time is None:
            return False
        # NOTE equality counts as complete
        return now - self.start_time >= self.execution_time

    def mark_assigned(self, worker: WorkerId, now: int) -> None:
        self.status = TaskStatus.assigned
        self.assigned_worker = worker
        self.start_time = now

    def reset_for_reassignment(self) -> None:
        self.status = TaskStatus.queued
        self.assigned_worker = None
        self.start_time = None

    def increment_retry(self) -> None:
        self.retry_count += 1

    def mark_terminal(self, status: TaskStatus) -> None:
        if status not in TERMINAL_STATUSES:
            raise ValueError(f"{status=} is not terminal")
        self.status = status
        self.assigned_worker = None
        self.start_time = None
