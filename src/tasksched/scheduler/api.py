"""
The SchedulingService: submission, assignment, completion, failure, timeout, cancellation
and scaling. Every operation takes the current simulated time from the caller, nothing here
reads a wall clock.

Locks live with the containers (queue, registries, worker ledgers) and are held only for the
duration of a single container operation. Consequently a worker picked as a candidate may
be full by the time we allocate at it, in which case the next candidate is tried.
"""

import logging

from tasksched.low.core import Task, TaskId, TaskStatus, WorkerId
from tasksched.low.func import assert_never
from tasksched.low.tracing import TaskLifecycle, WorkerLifecycle, mark
from tasksched.low.worker import WorkerNode
from tasksched.scheduler.assign import find_fastest_worker
from tasksched.scheduler.core import Found, NoCandidate, SchedulerConfig
from tasksched.scheduler.queue import PriorityQueue
from tasksched.scheduler.registry import TaskRegistry, WorkerRegistry

logger = logging.getLogger(__name__)


class SchedulingService:
    def __init__(
        self,
        queue: PriorityQueue,
        tasks: TaskRegistry,
        workers: WorkerRegistry,
        config: SchedulerConfig | None = None,
    ) -> None:
        self.queue = queue
        self.tasks = tasks
        self.workers = workers
        self.config = config or SchedulerConfig()

    def _place(self, task: Task, now: int) -> bool:
        """Allocates the task at the best worker able to take it. Does not touch the queue
        on failure. Only queued tasks are placed"""
        if task.status != TaskStatus.queued:
            return False
        lost: set[WorkerId] = set()
        while True:
            candidate = find_fastest_worker(task, self.workers.active_workers(), lost)
            if isinstance(candidate, NoCandidate):
                return False
            elif isinstance(candidate, Found):
                worker = candidate.worker
                if worker.allocate(task):
                    if task.status != TaskStatus.queued:
                        # cancelled while we were allocating
                        worker.release(task)
                        return False
                    task.mark_assigned(worker.node_id, now)
                    self.queue.remove(task)
                    mark({"task": task.task_id, "action": TaskLifecycle.assigned, "worker": worker.node_id, "at": now})
                    return True
                logger.debug(f"{worker.node_id} filled up before {task.task_id} could be allocated")
                lost.add(worker.node_id)
            else:
                assert_never(candidate)

    def _retry(self, task: Task) -> bool:
        """Resets a task taken away from its worker. Returns False if the retry cap turned
        it into failed instead"""
        task.reset_for_reassignment()
        task.increment_retry()
        if self.config.max_retries is not None and task.retry_count > self.config.max_retries:
            task.mark_terminal(TaskStatus.failed)
            logger.info(f"{task.task_id} failed after {task.retry_count - 1} retries")
            mark({"task": task.task_id, "action": TaskLifecycle.failed, "retries": task.retry_count - 1})
            return False
        mark({"task": task.task_id, "action": TaskLifecycle.requeued, "retries": task.retry_count})
        return True

    def submit(self, task: Task, now: int) -> bool:
        self.tasks.register(task)
        mark({"task": task.task_id, "action": TaskLifecycle.submitted, "priority": task.priority.name, "at": now})
        return self.try_assign(task, now)

    def try_assign(self, task: Task, now: int) -> bool:
        """Places a queued task or leaves it in the queue. Tasks in any other status are
        left alone and False is returned"""
        if task.status != TaskStatus.queued:
            logger.debug(f"{task.task_id} is {task.status.name}, not assigning")
            return False
        if self._place(task, now):
            return True
        if task.status != TaskStatus.queued:
            return False
        self.queue.enqueue(task)
        logger.debug(f"no worker can take {task.task_id} now, queued")
        mark({"task": task.task_id, "action": TaskLifecycle.queued, "at": now})
        return False

    def assign_queued(self, now: int) -> list[Task]:
        """Drains the queue in priority order until the head task cannot be placed. The stuck
        task returns to the head of its tier, nothing behind it is considered. Tasks which left
        the queued status after being dequeued are dropped"""
        assigned: list[Task] = []
        while (task := self.queue.dequeue()) is not None:
            if task.status != TaskStatus.queued:
                logger.debug(f"dropping {task.task_id} from the sweep, it is {task.status.name}")
                continue
            if not self._place(task, now):
                if task.status != TaskStatus.queued:
                    continue
                self.queue.push_front(task)
                break
            assigned.append(task)
        return assigned

    def process_completed(self, now: int) -> list[Task]:
        completed: list[Task] = []
        for worker in self.workers.active_workers():
            due = [t for t in worker.running_tasks() if t.is_execution_complete(now)]
            for task in due:
                task.mark_terminal(TaskStatus.completed)
                worker.release(task)
                mark({"task": task.task_id, "action": TaskLifecycle.completed, "worker": worker.node_id, "at": now})
                completed.append(task)
        self.assign_queued(now)
        return completed

    def handle_failure(self, worker_id: WorkerId, now: int) -> list[Task]:
        """Deactivates the worker and tries to place its tasks elsewhere right away. Returns
        the tasks which landed on another worker"""
        affected = self.workers.mark_failed(worker_id)
        logger.info(f"worker {worker_id} failed with {len(affected)} running tasks")
        mark({"worker": worker_id, "action": WorkerLifecycle.failed, "tasks": len(affected), "at": now})
        reassigned: list[Task] = []
        for task in affected:
            if task.status != TaskStatus.assigned:
                continue
            if not self._retry(task):
                continue
            if self.try_assign(task, now):
                reassigned.append(task)
        return reassigned

    def timeout(self, task_id: TaskId, elapsed: int, now: int) -> bool:
        """Requeues an assigned task if `elapsed` reached its timeout threshold. The subsequent
        sweep happens at `now + elapsed`, ie, reassigned tasks get start times ahead of `now`"""
        task = self.tasks.get_task(task_id)
        if task.status != TaskStatus.assigned:
            return False
        threshold = task.execution_time * self.config.timeout_percent // 100
        if elapsed < threshold:
            return False
        worker = self.workers.get_worker(task.assigned_worker)
        worker.release(task)
        logger.info(f"{task_id} timed out at {worker.node_id} after {elapsed=} ({threshold=})")
        mark({"task": task_id, "action": TaskLifecycle.timed_out, "worker": worker.node_id, "at": now})
        if self._retry(task):
            self.queue.enqueue(task)
        self.assign_queued(now + elapsed)
        return True

    def cancel(self, task_id: TaskId, now: int) -> bool:
        task = self.tasks.get_task(task_id)
        if task.status == TaskStatus.queued:
            self.queue.remove(task)
            task.mark_terminal(TaskStatus.cancelled)
        elif task.status == TaskStatus.assigned:
            worker = self.workers.get_worker(task.assigned_worker)
            worker.release(task)
            task.mark_terminal(TaskStatus.cancelled)
            self.assign_queued(now)
        elif task.status in (TaskStatus.completed, TaskStatus.cancelled, TaskStatus.failed):
            return False
        else:
            assert_never(task.status)
        mark({"task": task_id, "action": TaskLifecycle.cancelled, "at": now})
        return True

    def auto_scale(self, now: int) -> WorkerNode | None:
        if self.queue.is_empty():
            return None
        worker = self.workers.auto_scale_worker(
            cpu=self.config.autoscale_cpu,
            memory=self.config.autoscale_memory,
            speed=self.config.autoscale_speed,
            prefix=self.config.autoscale_prefix,
        )
        logger.info(f"scaled out with {worker.node_id} for {self.queue.size()} queued tasks")
        mark({"worker": worker.node_id, "action": WorkerLifecycle.scaled, "at": now})
        self.assign_queued(now)
        return worker

    def register_worker(self, worker: WorkerNode, now: int) -> None:
        self.workers.register(worker)
        mark({"worker": worker.node_id, "action": WorkerLifecycle.registered, "at": now})
        self.assign_queued(now)

    def reactivate(self, worker_id: WorkerId, now: int) -> bool:
        if not self.workers.reactivate(worker_id):
            return False
        mark({"worker": worker_id, "action": WorkerLifecycle.reactivated, "at": now})
        self.assign_queued(now)
        return True
