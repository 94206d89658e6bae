import pytest

from tasksched.low.core import Priority, Task
from tasksched.low.worker import WorkerNode
from tasksched.scheduler.api import SchedulingService
from tasksched.scheduler.core import SchedulerConfig
from tasksched.scheduler.queue import PriorityQueue
from tasksched.scheduler.registry import TaskRegistry, WorkerRegistry


def make_task(
    task_id: str,
    cpu: int = 1,
    memory: int = 1,
    execution_time: int = 10,
    priority: Priority = Priority.medium,
) -> Task:
    return Task(
        task_id=task_id,
        cpu=cpu,
        memory=memory,
        execution_time=execution_time,
        priority=priority,
    )


@pytest.fixture(scope="function")
def service():
    return SchedulingService(PriorityQueue(), TaskRegistry(), WorkerRegistry())


@pytest.fixture(scope="function")
def capped_service():
    return SchedulingService(
        PriorityQueue(), TaskRegistry(), WorkerRegistry(), SchedulerConfig(max_retries=1)
    )


@pytest.fixture(scope="function")
def two_workers(service):
    service.register_worker(WorkerNode("W1", 4, 16, 5), 0)
    service.register_worker(WorkerNode("W2", 8, 32, 10), 0)
    return service
