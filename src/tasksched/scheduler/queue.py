"""
Priority queue of tasks awaiting a worker: one FIFO per priority tier, consulted from
the highest tier down. There is no aging, so a steady stream of high priority tasks
starves the lower tiers.

All operations share a single lock, so that a size observed by one caller is never
composed of tier sizes taken at different moments.
"""

import threading
from collections import deque

from tasksched.low.core import PRIORITY_ORDER, Priority, Task, TaskId


class PriorityQueue:
    def __init__(self) -> None:
        self._tiers: dict[Priority, deque[Task]] = {p: deque() for p in PRIORITY_ORDER}
        self._lock = threading.Lock()

    def _index(self, task: Task) -> int | None:
        for i, e in enumerate(self._tiers[task.priority]):
            if e.task_id == task.task_id:
                return i
        return None

    def enqueue(self, task: Task) -> None:
        """Appends to the tier of the task. A task already present stays where it is"""
        with self._lock:
            if self._index(task) is None:
                self._tiers[task.priority].append(task)

    def push_front(self, task: Task) -> None:
        """Returns a just dequeued task to the head of its tier"""
        with self._lock:
            if self._index(task) is None:
                self._tiers[task.priority].appendleft(task)

    def dequeue(self) -> Task | None:
        with self._lock:
            for priority in PRIORITY_ORDER:
                if self._tiers[priority]:
                    return self._tiers[priority].popleft()
            return None

    def remove(self, task: Task) -> bool:
        with self._lock:
            if (i := self._index(task)) is None:
                return False
            del self._tiers[task.priority][i]
            return True

    def size(self) -> int:
        with self._lock:
            return sum(len(tier) for tier in self._tiers.values())

    def is_empty(self) -> bool:
        return self.size() == 0

    def clear(self) -> None:
        with self._lock:
            for tier in self._tiers.values():
                tier.clear()

    def snapshot(self) -> list[TaskId]:
        """Queued task ids in dequeue order"""
        with self._lock:
            return [t.task_id for p in PRIORITY_ORDER for t in self._tiers[p]]

    def __len__(self) -> int:
        return self.size()
