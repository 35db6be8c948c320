from .waypoint_tracker import WaypointTracker

__all__ = ['WaypointTracker']
