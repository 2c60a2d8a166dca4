"""
Main FastAPI application.

Serves screen descriptors for the shape-shifting storefront:
1. GET /api/ui-config - screen descriptor for the current presentation mode
2. Product lookup, analytics ingestion and the component vocabulary
3. Structured logging with correlation tracking
4. Health checks (basic, liveness, readiness)
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uuid
import time

from sdui_service.config import settings
from sdui_service.core.logger import setup_logging
from sdui_service.services.catalog import product_catalog
from sdui_service.utils.logging import correlation_id_var, get_logger, log_context

# Import routers
from sdui_service.api.v1 import analytics, components, health, products, ui_config

logger = get_logger(__name__)


# ============================================================================
# APPLICATION LIFESPAN
# ============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan with structured logging"""

    setup_logging()

    with log_context(correlation_id=str(uuid.uuid4()), operation="startup"):
        logger.info(
            "app.startup.started",
            extra={
                "service": settings.app_name,
                "version": settings.app_version,
                "ui_schema_version": settings.ui_schema_version,
                "debug": settings.debug
            }
        )

        if settings.forced_mode:
            logger.warning(
                "app.startup.forced_mode",
                extra={"forced_mode": settings.forced_mode}
            )

        logger.info(
            "app.startup.completed",
            extra={"status": "ready", "catalog_size": len(product_catalog)}
        )

    yield

    with log_context(correlation_id=str(uuid.uuid4()), operation="shutdown"):
        logger.info("app.shutdown.completed")


# ============================================================================
# FASTAPI APP
# ============================================================================

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Server-driven UI engine: time-of-day presentation modes rendered as complete screen descriptors",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-UI-Mode", "X-Generated-At", "X-Correlation-ID"],
)


# ============================================================================
# REQUEST/RESPONSE LOGGING MIDDLEWARE
# ============================================================================

@app.middleware("http")
async def logging_middleware(request: Request, call_next):
    """Log all HTTP requests with correlation tracking"""

    correlation_id = request.headers.get("X-Correlation-ID") or str(uuid.uuid4())

    start_time = time.time()

    with log_context(
        correlation_id=correlation_id,
        endpoint=request.url.path,
        method=request.method
    ):
        logger.info(
            "http.request.received",
            extra={
                "path": request.url.path,
                "method": request.method,
                "client_ip": request.client.host if request.client else None,
                "user_agent": request.headers.get("user-agent")
            }
        )

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000

            logger.error(
                "http.request.failed",
                extra={
                    "path": request.url.path,
                    "method": request.method,
                    "duration_ms": duration_ms
                },
                exc_info=e
            )
            raise

        duration_ms = (time.time() - start_time) * 1000

        logger.performance(
            "http.request.completed",
            duration_ms=duration_ms,
            extra={
                "status_code": response.status_code,
                "path": request.url.path,
                "method": request.method
            }
        )

        response.headers["X-Correlation-ID"] = correlation_id
        return response


# ============================================================================
# EXCEPTION HANDLERS
# ============================================================================

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler with structured logging"""

    logger.error(
        "app.exception.unhandled",
        extra={
            "path": request.url.path,
            "method": request.method,
            "exception_type": type(exc).__name__
        },
        exc_info=exc
    )

    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred. Please try again later.",
            "correlation_id": (
                request.headers.get("X-Correlation-ID")
                or correlation_id_var.get()
                or "unknown"
            )
        }
    )


# ============================================================================
# ROUTERS
# ============================================================================

# Health checks (multi-tier)
app.include_router(
    health.router,
    tags=["Health"]
)

# Screen descriptors
app.include_router(
    ui_config.router,
    prefix=settings.api_prefix,
    tags=["UI"]
)

app.include_router(
    products.router,
    prefix=settings.api_prefix,
    tags=["Products"]
)

app.include_router(
    analytics.router,
    prefix=settings.api_prefix,
    tags=["Analytics"]
)

app.include_router(
    components.router,
    prefix=settings.api_prefix,
    tags=["Components"]
)


# ============================================================================
# ROOT ENDPOINT
# ============================================================================

@app.get("/")
async def root():
    """Root endpoint with service info"""
    return {
        "service": settings.app_name,
        "version": settings.app_version,
        "status": "running",
        "docs": "/docs",
        "health": {
            "basic": "/health",
            "liveness": "/health/live",
            "readiness": "/health/ready"
        },
        "api": {
            "ui_config": f"GET {settings.api_prefix}/ui-config?screen=<route>&id=<param>",
            "products": f"GET {settings.api_prefix}/products/{{id}}",
            "product_list": f"GET {settings.api_prefix}/products",
            "analytics": f"POST {settings.api_prefix}/analytics",
            "analytics_stats": f"GET {settings.api_prefix}/analytics/stats",
            "components": f"GET {settings.api_prefix}/components"
        }
    }


# ============================================================================
# DEVELOPMENT SERVER
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    logger.info(
        "app.dev_server.starting",
        extra={
            "host": settings.host,
            "port": settings.port,
            "reload": settings.debug
        }
    )

    uvicorn.run(
        "sdui_service.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
