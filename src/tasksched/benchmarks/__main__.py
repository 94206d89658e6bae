"""
Entrypoint for running the demonstration scenarios

Example:
```
python -m tasksched.benchmarks all
python -m tasksched.benchmarks run failover --trace True
python -m tasksched.benchmarks list
```
"""

import logging
import logging.config
from typing import Callable

import fire

from tasksched.benchmarks.scenarios import scenarios
from tasksched.config import logging_config, tracing_config
from tasksched.controller.impl import Cluster
from tasksched.low.tracing import label


def _configure(trace: bool) -> None:
    logging.config.dictConfig(tracing_config if trace else logging_config)


def _run(name: str, out: Callable[[str], None]) -> Cluster:
    label("scenario", name)
    out(f"Scenario: {name}")
    cluster = scenarios[name](out)
    out("")
    return cluster


def main_run(name: str, trace: bool = False) -> None:
    _configure(trace)
    if name not in scenarios:
        raise ValueError(f"unknown scenario {name}, choose from {', '.join(scenarios)}")
    _run(name, print)


def main_all(trace: bool = False) -> None:
    _configure(trace)
    for name in scenarios:
        _run(name, print)


def main_list() -> list[str]:
    return list(scenarios)


if __name__ == "__main__":
    fire.Fire({"run": main_run, "all": main_all, "list": main_list})
