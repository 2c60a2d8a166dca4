"""
UI Pipeline

Request flow for one ui-config call:
1. Mode resolution (local clock, or the configured forced mode)
2. Catalog lookup (product screen only)
3. Screen composition

The clock and the catalog are read here so that the composer stays pure.
"""
from typing import Optional

from sdui_service.config import settings
from sdui_service.models.schemas.core import Context, Mode, ScreenDescriptor
from sdui_service.models.schemas.product import Product
from sdui_service.services.catalog import ProductCatalog, product_catalog
from sdui_service.services.composer import ScreenComposer
from sdui_service.services.mode_resolver import coerce_mode, resolve_mode
from sdui_service.services.navigation import normalize_route
from sdui_service.utils.logging import get_logger, trace_sync

logger = get_logger(__name__)


class UIPipeline:
    """
    Turns a request Context into a ScreenDescriptor.

    Args:
        composer: Screen composer to delegate to
        catalog: Product catalog for the product screen
        forced_mode: Mode name that overrides clock-based resolution
    """

    def __init__(
        self,
        composer: Optional[ScreenComposer] = None,
        catalog: Optional[ProductCatalog] = None,
        forced_mode: Optional[str] = None,
    ):
        self.composer = composer or ScreenComposer()
        self.catalog = catalog or product_catalog
        self.forced_mode = forced_mode

    def mode_for(self, context: Context) -> Mode:
        if self.forced_mode:
            return coerce_mode(self.forced_mode)
        return resolve_mode(context.now)

    def product_for(self, context: Context) -> Optional[Product]:
        if normalize_route(context.route) != "/product":
            return None
        return self.catalog.lookup(context.screen_params.get("id", ""))

    @trace_sync("pipeline.render")
    def render(self, context: Context) -> ScreenDescriptor:
        mode = self.mode_for(context)

        logger.info(
            "pipeline.mode.resolved",
            extra={
                "mode": mode.value,
                "forced": bool(self.forced_mode),
                "route": context.route,
            }
        )

        return self.composer.compose(
            context.route,
            mode,
            context.screen_params,
            now=context.now,
            user_id=context.user_id,
            product=self.product_for(context),
        )


default_pipeline = UIPipeline(forced_mode=settings.forced_mode)
