"""
Demonstration scenarios exercising the Cluster facade. See `__main__` for the entrypoint
"""
