import pytest
from pydantic import ValidationError

from tasksched.controller.impl import Cluster, TaskConfig
from tasksched.low.core import DuplicateEntity, NotFound, Priority
from tasksched.scheduler.core import SchedulerConfig


def statuses(cluster: Cluster) -> dict[str, tuple[str, str | None]]:
    return {t.task_id: (t.status, t.assigned_to) for t in cluster.list_tasks()}


def test_clock_drives_completion():
    cluster = Cluster()
    cluster.register_worker("W1", 4, 16, 5)
    cluster.submit_many([TaskConfig("T1", 2, 4, 10), TaskConfig("T2", 2, 4, 5)])
    assert statuses(cluster) == {"T1": ("assigned", "W1"), "T2": ("assigned", "W1")}

    done = cluster.wait_for(5)
    assert [t.task_id for t in done] == ["T2"]
    assert cluster.now == 5
    cluster.wait_for(5)
    assert statuses(cluster) == {"T1": ("completed", None), "T2": ("completed", None)}

    with pytest.raises(ValueError):
        cluster.wait_for(-1)


def test_registration_assigns_queued():
    cluster = Cluster()
    info = cluster.submit("T1", 2, 4, 10, Priority.high)
    assert info.status == "queued"
    cluster.register_worker("W1", 2, 4, 1)
    assert statuses(cluster) == {"T1": ("assigned", "W1")}


def test_errors_propagate():
    cluster = Cluster()
    cluster.register_worker("W1", 2, 4, 1)
    with pytest.raises(DuplicateEntity):
        cluster.register_worker("W1", 2, 4, 1)
    with pytest.raises(ValidationError):
        cluster.register_worker("W2", 0, 4, 1)
    with pytest.raises(ValidationError):
        cluster.submit("T1", 1, 1, 0)
    with pytest.raises(NotFound):
        cluster.cancel("T1")
    with pytest.raises(NotFound):
        cluster.fail_worker("W9")


def test_failure_reactivation_and_scaling():
    cluster = Cluster(SchedulerConfig(autoscale_prefix="auto-", autoscale_cpu=4, autoscale_memory=8))
    cluster.register_worker("W1", 2, 8, 5)
    cluster.submit_many([TaskConfig("T1", 2, 4, 10), TaskConfig("T2", 2, 4, 10)])
    assert cluster.fail_worker("W1") == []
    assert statuses(cluster) == {"T1": ("queued", None), "T2": ("queued", None)}

    scaled = cluster.auto_scale()
    assert scaled is not None
    assert (scaled.node_id, scaled.cpu, scaled.memory) == ("auto-2", 4, 8)
    assert statuses(cluster) == {"T1": ("assigned", "auto-2"), "T2": ("assigned", "auto-2")}
    assert cluster.auto_scale() is None

    assert cluster.reactivate("W1")
    assert [w.status for w in cluster.list_workers()] == ["active", "active"]


def test_advance_to():
    cluster = Cluster()
    cluster.register_worker("W1", 2, 8, 5)
    cluster.submit("T1", 1, 1, 3)
    cluster.advance_to(3)
    cluster.advance_to(1)
    assert cluster.now == 3
    assert statuses(cluster) == {"T1": ("completed", None)}


def test_timeout_and_cancel():
    cluster = Cluster()
    cluster.register_worker("W1", 2, 16, 5)
    cluster.submit_many([TaskConfig("T1", 2, 4, 10), TaskConfig("T2", 2, 4, 10)])
    assert cluster.timeout("T1", 13)
    assert statuses(cluster) == {"T1": ("queued", None), "T2": ("assigned", "W1")}
    assert cluster.cancel("T1")
    assert not cluster.cancel("T1")
    assert statuses(cluster)["T1"] == ("cancelled", None)
