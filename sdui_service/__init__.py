"""
Shape-shifting store UI service.

Server-driven UI engine that composes complete screen descriptors for the
presentation mode selected by the local time of day.
"""

__version__ = "2.0.0"
