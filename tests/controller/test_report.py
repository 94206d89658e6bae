from tasksched.controller.report import TaskInfo, WorkerInfo, render
from tasksched.low.core import Task, TaskStatus
from tasksched.low.worker import WorkerNode


def test_task_info():
    task = Task(task_id="T1", cpu=1, memory=1, execution_time=1)
    assert str(TaskInfo.from_task(task)) == '{ taskId: "T1", status: "queued" }'
    task.mark_assigned("W2", 0)
    info = TaskInfo.from_task(task)
    assert info.assigned_to == "W2"
    assert str(info) == '{ taskId: "T1", status: "assigned", assignedTo: "W2" }'
    task.mark_terminal(TaskStatus.cancelled)
    assert str(TaskInfo.from_task(task)) == '{ taskId: "T1", status: "cancelled" }'


def test_worker_info():
    worker = WorkerNode("W1", 4, 16, 5)
    info = WorkerInfo.from_worker(worker)
    expected = '{ nodeId: "W1", cpu: 4, memory: 16, speed: 5, status: "active" }'
    assert str(info) == expected
    assert render([info, info]) == f"[{expected}, {expected}]"
    assert render([]) == "[]"
