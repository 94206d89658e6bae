"""
The Cluster facade: owns the simulated clock and the scheduler components, and exposes
simplified registration/submission calls. Entities leave this module only as display records
"""

import logging
from dataclasses import dataclass

from tasksched.controller.report import TaskInfo, WorkerInfo
from tasksched.low.core import Priority, Task, TaskId, WorkerId
from tasksched.low.worker import WorkerNode
from tasksched.scheduler.api import SchedulingService
from tasksched.scheduler.core import SchedulerConfig
from tasksched.scheduler.queue import PriorityQueue
from tasksched.scheduler.registry import TaskRegistry, WorkerRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TaskConfig:
    task_id: TaskId
    cpu: int
    memory: int
    execution_time: int
    priority: Priority = Priority.medium


class Cluster:
    def __init__(self, config: SchedulerConfig | None = None) -> None:
        self.now = 0
        self.queue = PriorityQueue()
        self.tasks = TaskRegistry()
        self.workers = WorkerRegistry()
        self.service = SchedulingService(self.queue, self.tasks, self.workers, config)

    def register_worker(self, node_id: WorkerId, cpu: int, memory: int, speed: int) -> WorkerInfo:
        worker = WorkerNode(node_id, cpu, memory, speed)
        self.service.register_worker(worker, self.now)
        return WorkerInfo.from_worker(worker)

    def submit(
        self,
        task_id: TaskId,
        cpu: int,
        memory: int,
        execution_time: int,
        priority: Priority = Priority.medium,
    ) -> TaskInfo:
        task = Task(
            task_id=task_id,
            cpu=cpu,
            memory=memory,
            execution_time=execution_time,
            priority=priority,
        )
        self.service.submit(task, self.now)
        return TaskInfo.from_task(task)

    def submit_many(self, configs: list[TaskConfig]) -> list[TaskInfo]:
        return [
            self.submit(c.task_id, c.cpu, c.memory, c.execution_time, c.priority)
            for c in configs
        ]

    def wait_for(self, seconds: int) -> list[TaskInfo]:
        """Advances the clock and completes whatever became due. Returns the completed"""
        if seconds < 0:
            raise ValueError(f"simulated time cannot go backwards: {seconds=}")
        self.now += seconds
        completed = self.service.process_completed(self.now)
        logger.debug(f"clock at {self.now}, completed {len(completed)} tasks")
        return [TaskInfo.from_task(t) for t in completed]

    def advance_to(self, time: int) -> None:
        if time > self.now:
            self.wait_for(time - self.now)

    def fail_worker(self, node_id: WorkerId) -> list[TaskInfo]:
        return [TaskInfo.from_task(t) for t in self.service.handle_failure(node_id, self.now)]

    def timeout(self, task_id: TaskId, elapsed: int) -> bool:
        return self.service.timeout(task_id, elapsed, self.now)

    def cancel(self, task_id: TaskId) -> bool:
        return self.service.cancel(task_id, self.now)

    def auto_scale(self) -> WorkerInfo | None:
        worker = self.service.auto_scale(self.now)
        return WorkerInfo.from_worker(worker) if worker is not None else None

    def reactivate(self, node_id: WorkerId) -> bool:
        return self.service.reactivate(node_id, self.now)

    def list_tasks(self) -> list[TaskInfo]:
        return [TaskInfo.from_task(t) for t in self.tasks.all_tasks()]

    def list_workers(self) -> list[WorkerInfo]:
        return [WorkerInfo.from_worker(w) for w in self.workers.all_workers()]
