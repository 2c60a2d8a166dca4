"""
API v1 endpoints.
"""

from .health import router as health_router
from .ui_config import router as ui_config_router
from .products import router as products_router
from .analytics import router as analytics_router
from .components import router as components_router

__all__ = [
    "health_router",
    "ui_config_router",
    "products_router",
    "analytics_router",
    "components_router",
]
