"""
Analytics sink.

Client interaction events are accepted as free-form JSON objects, logged
and counted. Nothing is persisted.
"""
from collections import Counter
from typing import Any, Dict, Optional

from loguru import logger

from sdui_service.utils.logging import trace_async

UNNAMED_EVENT = "unknown"


class AnalyticsSink:
    """Accepts client events and keeps per-event counters"""

    def __init__(self):
        self._counts: Counter = Counter()

    @trace_async("analytics.record")
    async def record(self, event: Dict[str, Any], user_id: Optional[str] = None) -> str:
        """
        Record one client event.

        Args:
            event: Decoded JSON object sent by the client
            user_id: Requesting user, if known

        Returns:
            The event name the record was counted under
        """
        name = str(event.get("event") or event.get("type") or UNNAMED_EVENT)
        self._counts[name] += 1
        logger.info(f"📊 Analytics event: {name} (user={user_id or 'anonymous'}) {event}")
        return name

    def get_stats(self) -> Dict[str, Any]:
        return {
            "total_events": sum(self._counts.values()),
            "events": dict(self._counts),
        }

    def reset(self) -> None:
        self._counts.clear()


analytics_sink = AnalyticsSink()
