"""
Core business logic package for the trip planner.

Date-range selection, the trip creation state machine, attendance
confirmation and the device trip binding live here. Entry points in
src/handlers/ are thin wrappers that call into planner/.
"""

__all__: list[str] = []
