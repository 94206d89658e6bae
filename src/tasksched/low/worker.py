"""
Worker node with its resource ledger

The ledger owns used cpu/memory and the running tasks. Every mutation happens under the
node's own lock; the lock is never held while calling into other components.
"""

import threading

from pydantic import BaseModel, Field

from tasksched.low.core import Task, TaskId, WorkerId, WorkerStatus


class WorkerSpec(BaseModel):
    node_id: WorkerId = Field(min_length=1)
    cpu: int = Field(gt=0)
    memory: int = Field(gt=0)
    speed: int = Field(gt=0, description="processing speed rating, higher is faster")


class WorkerNode:
    def __init__(self, node_id: WorkerId, cpu: int, memory: int, speed: int) -> None:
        self.spec = WorkerSpec(node_id=node_id, cpu=cpu, memory=memory, speed=speed)
        self.status = WorkerStatus.active
        self.used_cpu = 0
        self.used_memory = 0
        self._running: dict[TaskId, Task] = {}
        self._lock = threading.Lock()

    @property
    def node_id(self) -> WorkerId:
        return self.spec.node_id

    @property
    def total_cpu(self) -> int:
        return self.spec.cpu

    @property
    def total_memory(self) -> int:
        return self.spec.memory

    @property
    def speed(self) -> int:
        return self.spec.speed

    @property
    def available_cpu(self) -> int:
        return self.total_cpu - self.used_cpu

    @property
    def available_memory(self) -> int:
        return self.total_memory - self.used_memory

    @property
    def is_active(self) -> bool:
        return self.status == WorkerStatus.active

    def running_tasks(self) -> list[Task]:
        with self._lock:
            return list(self._running.values())

    def is_running(self, task_id: TaskId) -> bool:
        with self._lock:
            return task_id in self._running

    def _fits(self, cpu: int, memory: int) -> bool:
        return (
            self.is_active
            and self.available_cpu >= cpu
            and self.available_memory >= memory
        )

    def can_accommodate(self, cpu: int, memory: int) -> bool:
        with self._lock:
            return self._fits(cpu, memory)

    def allocate(self, task: Task) -> bool:
        """Reserves resources for the task. Capacity is checked again here since someone else
        may have consumed it after this node was picked as a candidate"""
        with self._lock:
            if not self._fits(task.cpu, task.memory):
                return False
            self.used_cpu += task.cpu
            self.used_memory += task.memory
            self._running[task.task_id] = task
            return True

    def release(self, task: Task) -> None:
        with self._lock:
            if self._running.pop(task.task_id, None) is None:
                return
            self.used_cpu = max(0, self.used_cpu - task.cpu)
            self.used_memory = max(0, self.used_memory - task.memory)

    def release_all(self) -> list[Task]:
        with self._lock:
            tasks = list(self._running.values())
            self._running.clear()
            self.used_cpu = 0
            self.used_memory = 0
            return tasks

    def set_status(self, status: WorkerStatus) -> None:
        with self._lock:
            self.status = status

    def __repr__(self) -> str:
        return (
            f"WorkerNode({self.node_id}, cpu={self.used_cpu}/{self.total_cpu}, "
            f"memory={self.used_memory}/{self.total_memory}, speed={self.speed}, "
            f"status={self.status.name})"
        )
