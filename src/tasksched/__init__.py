"""
tasksched -- simulated task-to-worker assignment for a compute cluster.

Tasks with cpu/memory requirements and a priority are matched to worker nodes of finite
capacity and given processing speed. Time is a single logical clock advanced by the caller,
so every run is deterministic given the same sequence of calls.

The package is organised as follows:
 - low: entities (Task, WorkerNode), enumerations, errors and tracing
 - scheduler: the priority queue, registries and the SchedulingService
 - controller: the Cluster facade owning the simulated clock, and display records
 - benchmarks: demonstration scenarios runnable from the command line
"""

from tasksched.version import __version__
