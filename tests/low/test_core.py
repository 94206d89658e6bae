import pytest
from pydantic import ValidationError

from tasksched.low.core import Priority, Task, TaskStatus
from conftest import make_task


@pytest.mark.parametrize(
    "field",
    ["cpu", "memory", "execution_time"],
)
def test_non_positive_requirements_rejected(field):
    kwargs = {"task_id": "T1", "cpu": 1, "memory": 1, "execution_time": 1}
    for value in (0, -3):
        with pytest.raises(ValidationError):
            Task(**{**kwargs, field: value})


def test_empty_id_rejected():
    with pytest.raises(ValueError):
        Task(task_id="", cpu=1, memory=1, execution_time=1)


def test_defaults():
    task = make_task("T1")
    assert task.priority == Priority.medium
    assert task.status == TaskStatus.queued
    assert task.assigned_worker is None
    assert task.start_time is None
    assert task.retry_count == 0


def test_requirements_frozen():
    task = make_task("T1", cpu=2)
    with pytest.raises(ValidationError):
        task.cpu = 4
    with pytest.raises(ValidationError):
        task.priority = Priority.high
    assert task.cpu == 2


def test_execution_complete():
    task = make_task("T1", execution_time=10)
    assert not task.is_execution_complete(100)  # not assigned yet
    task.mark_assigned("W1", 5)
    assert not task.is_execution_complete(14)
    assert task.is_execution_complete(15)
    assert task.is_execution_complete(16)


def test_reset_and_terminal():
    task = make_task("T1")
    task.mark_assigned("W1", 3)
    task.reset_for_reassignment()
    task.increment_retry()
    assert (task.status, task.assigned_worker, task.start_time, task.retry_count) == (
        TaskStatus.queued,
        None,
        None,
        1,
    )

    task.mark_assigned("W2", 4)
    task.mark_terminal(TaskStatus.completed)
    assert task.is_terminal
    assert task.assigned_worker is None and task.start_time is None

    with pytest.raises(ValueError, match="not terminal"):
        task.mark_terminal(TaskStatus.assigned)
