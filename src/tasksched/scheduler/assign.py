"""
Candidate selection -- invocation assumed from scheduler.api module

Fastest worker first: of the active workers which can fit the task right now, the one with the
highest speed wins, ties broken by the lowest node id. This favours latency of the task at hand
over balancing load, a fast worker may well be saturated while slower ones sit idle.
"""

from typing import Iterable

from tasksched.low.core import Task, WorkerId
from tasksched.low.func import maybe_head
from tasksched.low.worker import WorkerNode
from tasksched.scheduler.core import Candidate, Found, NoCandidate


def rank_candidates(task: Task, workers: Iterable[WorkerNode]) -> list[WorkerNode]:
    eligible = [
        w for w in workers if w.is_active and w.can_accommodate(task.cpu, task.memory)
    ]
    eligible.sort(key=lambda w: (-w.speed, w.node_id))
    return eligible


def find_fastest_worker(
    task: Task, workers: Iterable[WorkerNode], exclude: set[WorkerId] | None = None
) -> Candidate:
    exclude = exclude or set()
    best = maybe_head(rank_candidates(task, (w for w in workers if w.node_id not in exclude)))
    if best is None:
        return NoCandidate()
    return Found(best)
