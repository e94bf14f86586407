""" Benchmark query generation for motion planning.

This package turns robot descriptions with named joint group states into
start states and goal constraints for benchmarking motion planners.
"""

__version__ = "0.1.0"
