"""
UI configuration endpoint.

``GET /ui-config`` returns the complete screen descriptor for the requested
route, composed for the current presentation mode.
"""
from datetime import datetime
from typing import Callable, Optional

from fastapi import APIRouter, Depends, Header, Query
from fastapi.responses import JSONResponse

from sdui_service.models.schemas.core import Context
from sdui_service.services.pipeline import UIPipeline, default_pipeline
from sdui_service.utils.datetime_utils import local_now, to_iso_string
from sdui_service.utils.logging import get_logger, log_context

router = APIRouter()
logger = get_logger(__name__)


def get_pipeline() -> UIPipeline:
    return default_pipeline


def get_clock() -> Callable[[], datetime]:
    return local_now


@router.get(
    "/ui-config",
    tags=["UI"],
    summary="Get screen descriptor",
    description=(
        "Returns the full UI specification (theme, component tree, navigation, "
        "metadata) for a screen. The response headers X-UI-Mode and "
        "X-Generated-At carry the presentation mode and generation time."
    ),
)
def get_ui_config(
    screen: str = Query("/", description="Screen route, e.g. /, /cart, /product"),
    product_id: Optional[str] = Query(None, alias="id", description="Screen parameter (product id)"),
    user_id: Optional[str] = Header(None, alias="X-User-ID"),
    pipeline: UIPipeline = Depends(get_pipeline),
    clock: Callable[[], datetime] = Depends(get_clock),
) -> JSONResponse:
    context = Context(
        route=screen,
        screen_params={"id": product_id} if product_id is not None else {},
        user_id=user_id,
        now=clock(),
    )

    with log_context(user_id=user_id, screen=context.route):
        logger.info(
            "ui_config.request.received",
            extra={"screen": context.route, "params": context.screen_params}
        )

        descriptor = pipeline.render(context)

        logger.info(
            "ui_config.response.ready",
            extra={
                "screen_id": descriptor.screen_id,
                "mode": descriptor.metadata.mode.value,
                "component_count": len(descriptor.components),
            }
        )

    return JSONResponse(
        content=descriptor.to_wire(),
        headers={
            "X-UI-Mode": descriptor.metadata.mode.value,
            "X-Generated-At": to_iso_string(context.now),
        },
    )
