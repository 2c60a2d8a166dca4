"""
Analytics ingestion endpoint.
"""
from typing import Dict, Optional

from fastapi import APIRouter, Header, HTTPException, Request, status
from pydantic import BaseModel, ConfigDict

from sdui_service.services.analytics import analytics_sink
from sdui_service.utils.logging import get_logger

router = APIRouter()
logger = get_logger(__name__)


class AnalyticsAck(BaseModel):
    """Acknowledgement for an accepted event"""
    model_config = ConfigDict(json_schema_extra={"example": {"status": "ok"}})

    status: str = "ok"


class AnalyticsStats(BaseModel):
    """Event counters since process start"""
    model_config = ConfigDict(json_schema_extra={
        "example": {"total_events": 3, "events": {"tap": 2, "impression": 1}}
    })

    total_events: int
    events: Dict[str, int]


@router.post(
    "/analytics",
    response_model=AnalyticsAck,
    tags=["Analytics"],
    summary="Record a client event",
    description="Accepts any JSON object. Malformed or non-object bodies are rejected with 400.",
)
async def record_event(
    request: Request,
    user_id: Optional[str] = Header(None, alias="X-User-ID"),
) -> AnalyticsAck:
    try:
        event = await request.json()
    except ValueError:
        logger.warning("analytics.event.rejected", extra={"reason": "invalid_json"})
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid JSON body"
        )

    if not isinstance(event, dict):
        logger.warning(
            "analytics.event.rejected",
            extra={"reason": "not_an_object", "body_type": type(event).__name__}
        )
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Event must be a JSON object"
        )

    await analytics_sink.record(event, user_id=user_id)
    return AnalyticsAck()


@router.get(
    "/analytics/stats",
    response_model=AnalyticsStats,
    tags=["Analytics"],
    summary="Event counters",
)
async def get_analytics_stats() -> AnalyticsStats:
    return AnalyticsStats(**analytics_sink.get_stats())
