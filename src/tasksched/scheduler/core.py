from dataclasses import dataclass

from pydantic import BaseModel, Field

from tasksched.low.worker import WorkerNode


class SchedulerConfig(BaseModel):
    timeout_percent: int = Field(
        120,
        gt=0,
        description="a running task times out once elapsed >= execution_time * timeout_percent // 100",
    )
    autoscale_cpu: int = Field(2, gt=0)
    autoscale_memory: int = Field(4, gt=0)
    autoscale_speed: int = Field(10, gt=0)
    autoscale_prefix: str = Field("W", min_length=1)
    max_retries: int | None = Field(
        None,
        ge=0,
        description="requeues allowed per task before it becomes failed. None means unlimited",
    )


@dataclass(frozen=True)
class Found:
    worker: WorkerNode


@dataclass(frozen=True)
class NoCandidate:
    pass


Candidate = Found | NoCandidate
