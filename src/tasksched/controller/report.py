"""
Display records for reporting on tasks and workers
"""

from pydantic import BaseModel

from tasksched.low.core import Task, TaskId, TaskStatus, WorkerId
from tasksched.low.worker import WorkerNode


class TaskInfo(BaseModel):
    task_id: TaskId
    status: str
    assigned_to: WorkerId | None = None

    @classmethod
    def from_task(cls, task: Task) -> "TaskInfo":
        return cls(
            task_id=task.task_id,
            status=task.status.name,
            assigned_to=task.assigned_worker,
        )

    def __str__(self) -> str:
        rv = f'{{ taskId: "{self.task_id}", status: "{self.status}"'
        if self.assigned_to is not None and self.status == TaskStatus.assigned.name:
            rv += f', assignedTo: "{self.assigned_to}"'
        return rv + " }"


class WorkerInfo(BaseModel):
    node_id: WorkerId
    cpu: int
    memory: int
    speed: int
    status: str

    @classmethod
    def from_worker(cls, worker: WorkerNode) -> "WorkerInfo":
        return cls(
            node_id=worker.node_id,
            cpu=worker.total_cpu,
            memory=worker.total_memory,
            speed=worker.speed,
            status=worker.status.name,
        )

    def __str__(self) -> str:
        return (
            f'{{ nodeId: "{self.node_id}", cpu: {self.cpu}, memory: {self.memory}, '
            f'speed: {self.speed}, status: "{self.status}" }}'
        )


def render(records: list) -> str:
    return "[" + ", ".join(str(r) for r in records) + "]"
