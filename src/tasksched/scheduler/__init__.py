"""
Scheduler module is responsible for determining task->worker assignment.

Callers (the controller) hand over tasks and events together with the current simulated
time; the scheduler picks workers, reserves resources and keeps whatever cannot be placed
in a priority queue until capacity frees up.

There are multiple auxiliary submodules:
 - queue: the priority queue holding unplaced tasks
 - registry: identifier lookups for tasks and workers
 - core: configuration and the candidate representation
 - assign: candidate selection

These are all used from the `api` module here, which provides the SchedulingService.
"""
