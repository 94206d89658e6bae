"""
Fixed scenarios covering the main behaviours of the scheduler. Each takes an output callable
(print by default) and returns the Cluster in its final state, so that tests can inspect it
"""

from typing import Callable

from tasksched.controller.impl import Cluster, TaskConfig
from tasksched.controller.report import render
from tasksched.low.core import Priority
from tasksched.utility import EventLoop

Out = Callable[[str], None]


def registration(out: Out = print) -> Cluster:
    cluster = Cluster()
    cluster.register_worker("W1", 4, 16, 5)
    cluster.register_worker("W2", 8, 32, 10)
    out(render(cluster.list_workers()))
    return cluster


def best_worker(out: Out = print) -> Cluster:
    cluster = Cluster()
    cluster.register_worker("W1", 4, 16, 5)
    cluster.register_worker("W2", 8, 32, 10)
    cluster.submit_many([TaskConfig("T1", 2, 8, 10), TaskConfig("T2", 4, 16, 20)])
    out(render(cluster.list_tasks()))
    return cluster


def completion(out: Out = print) -> Cluster:
    cluster = Cluster()
    cluster.register_worker("W1", 4, 16, 5)
    cluster.submit_many([TaskConfig("T1", 2, 8, 10)])
    cluster.wait_for(10)
    out(render(cluster.list_tasks()))
    return cluster


def capacity(out: Out = print) -> Cluster:
    cluster = Cluster()
    cluster.register_worker("W1", 2, 8, 5)
    cluster.submit_many([TaskConfig("T1", 2, 4, 10), TaskConfig("T2", 2, 4, 5)])
    out(render(cluster.list_tasks()))
    return cluster


def failover(out: Out = print) -> Cluster:
    cluster = Cluster()
    cluster.register_worker("W1", 6, 32, 5)
    cluster.register_worker("W2", 8, 32, 10)
    cluster.submit_many([TaskConfig("T1", 2, 8, 10), TaskConfig("T2", 4, 16, 20)])
    out(render(cluster.list_tasks()))
    cluster.fail_worker("W2")
    out(render(cluster.list_tasks()))
    out(render(cluster.list_workers()))
    return cluster


def prioritisation(out: Out = print) -> Cluster:
    cluster = Cluster()
    cluster.register_worker("W1", 2, 16, 5)
    cluster.submit_many(
        [
            TaskConfig("T1", 2, 4, 10, Priority.low),
            TaskConfig("T2", 2, 4, 5, Priority.high),
        ]
    )
    out(render(cluster.list_tasks()))
    return cluster


def auto_scaling(out: Out = print) -> Cluster:
    cluster = Cluster()
    cluster.register_worker("W1", 2, 8, 5)
    cluster.submit_many([TaskConfig("T1", 2, 4, 10), TaskConfig("T2", 2, 4, 5)])
    out(render(cluster.list_tasks()))
    cluster.auto_scale()
    out(render(cluster.list_tasks()))
    out(render(cluster.list_workers()))
    return cluster


def timeout(out: Out = print) -> Cluster:
    cluster = Cluster()
    cluster.register_worker("W1", 2, 16, 5)
    cluster.submit_many([TaskConfig("T1", 2, 4, 10), TaskConfig("T2", 2, 4, 10)])
    out(render(cluster.list_tasks()))
    cluster.timeout("T1", 13)
    out(render(cluster.list_tasks()))
    return cluster


def cancellation(out: Out = print) -> Cluster:
    cluster = Cluster()
    cluster.register_worker("W1", 4, 16, 5)
    cluster.submit_many([TaskConfig("T1", 2, 4, 10)])
    cluster.cancel("T1")
    out(render(cluster.list_tasks()))
    return cluster


def parallel(out: Out = print) -> Cluster:
    cluster = Cluster()
    cluster.register_worker("W1", 4, 16, 5)
    cluster.submit_many([TaskConfig("T1", 2, 4, 10), TaskConfig("T2", 2, 4, 5)])
    cluster.wait_for(10)
    out(render(cluster.list_tasks()))
    return cluster


def parallel_failover(out: Out = print) -> Cluster:
    """Same as `failover` but replayed on a timeline, with the failure hitting after T1 has
    already completed"""
    cluster = Cluster()
    loop = EventLoop(clock=cluster.advance_to)
    loop.add_event(0, lambda _: cluster.register_worker("W1", 4, 16, 5))
    loop.add_event(0, lambda _: cluster.register_worker("W2", 8, 32, 10))
    loop.add_event(
        0,
        lambda _: cluster.submit_many(
            [TaskConfig("T1", 2, 8, 10), TaskConfig("T2", 4, 16, 20)]
        ),
    )
    loop.add_event(0, lambda _: out(render(cluster.list_tasks())))
    loop.add_event(12, lambda _: cluster.fail_worker("W2"))
    loop.add_event(12, lambda _: out(render(cluster.list_tasks())))
    loop.add_event(12, lambda _: out(render(cluster.list_workers())))
    loop.run()
    return cluster


scenarios: dict[str, Callable[[Out], Cluster]] = {
    "registration": registration,
    "best_worker": best_worker,
    "completion": completion,
    "capacity": capacity,
    "failover": failover,
    "prioritisation": prioritisation,
    "auto_scaling": auto_scaling,
    "timeout": timeout,
    "cancellation": cancellation,
    "parallel": parallel,
    "parallel_failover": parallel_failover,
}
