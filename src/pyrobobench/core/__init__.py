""" Core pyrobobench module.

This module contains the essential utilities to represent a robot model and its state for benchmarking.
It makes extensive use of the Pinocchio library but adds joint groups and named group states on top of it,
as described in a robot's SRDF file.
"""
