"""Timeline service exports."""

from timeline_lanes.timeline.facade import Timeline
from timeline_lanes.timeline.service import TimelineService

__all__ = ["Timeline", "TimelineService"]
