import logging

from tasksched.benchmarks.__main__ import _run, main_list
from tasksched.low import tracing


def test_run_labels_marks_with_scenario(caplog, monkeypatch):
    monkeypatch.setattr(tracing, "d", {})
    caplog.set_level(logging.DEBUG, logger=tracing.__name__)
    lines: list[str] = []
    cluster = _run("best_worker", lines.append)

    assert lines[0] == "Scenario: best_worker"
    assert lines[-1] == ""
    assert len(cluster.list_tasks()) == 2
    marks = [r.getMessage() for r in caplog.records if r.name == tracing.__name__]
    assert marks
    assert all(m.startswith("scenario=best_worker;") for m in marks)


def test_list():
    assert "failover" in main_list()
