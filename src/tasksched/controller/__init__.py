"""
This module is the gateway to the scheduler: it owns the simulated clock, assembles the
scheduler components, and converts entities into display records.

 - impl defines the Cluster facade, the entrypoint for driving a simulation
 - report defines the display records
"""
