"""
Identifier lookups for tasks and workers. The registries guard uniqueness and hold every
entity ever registered -- terminal tasks and inactive workers are kept for reporting.
"""

import logging
import threading

from tasksched.low.core import (
    DuplicateEntity,
    NotFound,
    Task,
    TaskId,
    TaskStatus,
    WorkerId,
    WorkerStatus,
)
from tasksched.low.worker import WorkerNode

logger = logging.getLogger(__name__)


class TaskRegistry:
    def __init__(self) -> None:
        self._tasks: dict[TaskId, Task] = {}
        self._lock = threading.Lock()

    def register(self, task: Task) -> None:
        with self._lock:
            if task.task_id in self._tasks:
                raise DuplicateEntity(f"task already registered: {task.task_id}")
            self._tasks[task.task_id] = task

    def get_task(self, task_id: TaskId) -> Task:
        with self._lock:
            if (task := self._tasks.get(task_id)) is None:
                raise NotFound(f"task not found: {task_id}")
            return task

    def all_tasks(self) -> list[Task]:
        with self._lock:
            return list(self._tasks.values())

    def tasks_by_status(self, status: TaskStatus) -> list[Task]:
        return [t for t in self.all_tasks() if t.status == status]

    def tasks_by_worker(self, worker_id: WorkerId) -> list[Task]:
        return [t for t in self.all_tasks() if t.assigned_worker == worker_id]

    def __contains__(self, task_id: TaskId) -> bool:
        with self._lock:
            return task_id in self._tasks

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)


class WorkerRegistry:
    def __init__(self) -> None:
        self._workers: dict[WorkerId, WorkerNode] = {}
        self._lock = threading.Lock()
        # only ever grows, even when a generated id is skipped
        self._autoscale_counter = 1

    def register(self, worker: WorkerNode) -> None:
        with self._lock:
            if worker.node_id in self._workers:
                raise DuplicateEntity(f"worker already registered: {worker.node_id}")
            self._workers[worker.node_id] = worker

    def get_worker(self, worker_id: WorkerId) -> WorkerNode:
        with self._lock:
            if (worker := self._workers.get(worker_id)) is None:
                raise NotFound(f"worker not found: {worker_id}")
            return worker

    def all_workers(self) -> list[WorkerNode]:
        with self._lock:
            return list(self._workers.values())

    def active_workers(self) -> list[WorkerNode]:
        return [w for w in self.all_workers() if w.is_active]

    def workers_by_status(self, status: WorkerStatus) -> list[WorkerNode]:
        return [w for w in self.all_workers() if w.status == status]

    def active_count(self) -> int:
        return len(self.active_workers())

    def mark_failed(self, worker_id: WorkerId) -> list[Task]:
        """Deactivates the worker and takes back everything it was running"""
        worker = self.get_worker(worker_id)
        worker.set_status(WorkerStatus.inactive)
        return worker.release_all()

    def reactivate(self, worker_id: WorkerId) -> bool:
        with self._lock:
            worker = self._workers.get(worker_id)
        if worker is None or worker.is_active:
            return False
        worker.set_status(WorkerStatus.active)
        return True

    def auto_scale_worker(
        self, cpu: int = 2, memory: int = 4, speed: int = 10, prefix: str = "W"
    ) -> WorkerNode:
        """Registers a fresh worker of the given fixed size. The id is derived from the
        registry size and a counter, skipping ids taken by explicit registrations"""
        with self._lock:
            while True:
                node_id = f"{prefix}{len(self._workers) + self._autoscale_counter}"
                self._autoscale_counter += 1
                if node_id not in self._workers:
                    break
            worker = WorkerNode(node_id, cpu, memory, speed)
            self._workers[node_id] = worker
        logger.debug(f"generated {worker=}")
        return worker

    def __contains__(self, worker_id: WorkerId) -> bool:
        with self._lock:
            return worker_id in self._workers

    def __len__(self) -> int:
        with self._lock:
            return len(self._workers)
