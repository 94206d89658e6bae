from tasksched.low.worker import WorkerNode
from tasksched.scheduler.assign import find_fastest_worker, rank_candidates
from tasksched.scheduler.core import Found, NoCandidate
from conftest import make_task


def test_fastest_fitting_worker():
    slow = WorkerNode("W1", 4, 16, 5)
    fast = WorkerNode("W2", 8, 32, 10)
    small_fast = WorkerNode("W3", 1, 1, 20)
    task = make_task("T1", cpu=2, memory=8)

    assert find_fastest_worker(task, [slow, fast, small_fast]) == Found(fast)
    assert find_fastest_worker(task, [slow, fast], exclude={"W2"}) == Found(slow)
    assert find_fastest_worker(task, [small_fast]) == NoCandidate()


def test_tie_break_by_lowest_id():
    workers = [WorkerNode(n, 4, 4, 10) for n in ("W3", "W1", "W2")]
    task = make_task("T1")
    assert [w.node_id for w in rank_candidates(task, workers)] == ["W1", "W2", "W3"]
    assert find_fastest_worker(task, workers) == Found(workers[1])
