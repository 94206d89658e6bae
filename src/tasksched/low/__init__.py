"""
Low level representation of the cluster -- not expected to be user facing.

Holds the entities the scheduler operates on: tasks with their lifecycle, and worker
nodes with their resource ledger. Both are mutated exclusively by the scheduler module.
"""
