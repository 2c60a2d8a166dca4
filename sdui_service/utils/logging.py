"""
Structured logging system.

Features:
- JSON formatted logs
- Correlation ID tracking
- Request tracing
- Performance metrics
- Error tracking
"""
import sys
import json
import traceback
from typing import Any, Dict, Optional
from datetime import datetime, timezone
from contextvars import ContextVar
from functools import wraps
import socket
import os

from sdui_service.config import settings

# Context variables for correlation tracking
correlation_id_var: ContextVar[Optional[str]] = ContextVar('correlation_id', default=None)
user_id_var: ContextVar[Optional[str]] = ContextVar('user_id', default=None)
screen_var: ContextVar[Optional[str]] = ContextVar('screen', default=None)

_LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40, "CRITICAL": 50}


class StructuredLogger:
    """
    Structured logger with correlation tracking.

    All logs are JSON formatted with:
    - Timestamp (ISO 8601)
    - Correlation ID (traces entire request)
    - User ID and requested screen
    - Service metadata
    - Performance metrics
    """

    def __init__(self, name: str):
        self.name = name
        self.hostname = socket.gethostname()
        self.service_name = settings.app_name
        self.service_version = settings.app_version
        self.environment = settings.environment
        self.instance_id = os.getenv("INSTANCE_ID", self.hostname)

    def _get_base_context(self) -> Dict[str, Any]:
        """Get base logging context"""
        return {
            "@timestamp": datetime.now(timezone.utc).isoformat(),
            "service": {
                "name": self.service_name,
                "version": self.service_version,
                "environment": self.environment,
                "instance_id": self.instance_id,
                "hostname": self.hostname
            },
            "logger": {
                "name": self.name
            },
            "correlation": {
                "correlation_id": correlation_id_var.get(),
                "user_id": user_id_var.get(),
                "screen": screen_var.get()
            }
        }

    def _format_log(
        self,
        level: str,
        event: str,
        message: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None,
        exc_info: Optional[BaseException] = None
    ) -> Dict[str, Any]:
        """Format log entry as JSON"""

        log_entry = self._get_base_context()

        log_entry.update({
            "level": level,
            "event": event,
            "message": message or event
        })

        if extra:
            log_entry["data"] = extra

        if exc_info:
            log_entry["error"] = {
                "type": type(exc_info).__name__,
                "message": str(exc_info),
                "stacktrace": "".join(
                    traceback.format_exception(type(exc_info), exc_info, exc_info.__traceback__)
                )
            }

        return log_entry

    def _emit(self, level: str, entry: Dict[str, Any], stream) -> None:
        if _LEVELS[level] < _LEVELS.get(settings.log_level, 20):
            return
        print(json.dumps(entry, default=str), file=stream)

    def debug(self, event: str, message: str = None, extra: Dict = None, **kwargs):
        """Log debug message"""
        self._emit("DEBUG", self._format_log("DEBUG", event, message, extra), sys.stdout)

    def info(self, event: str, message: str = None, extra: Dict = None, **kwargs):
        """Log info message"""
        self._emit("INFO", self._format_log("INFO", event, message, extra), sys.stdout)

    def warning(self, event: str, message: str = None, extra: Dict = None, **kwargs):
        """Log warning message"""
        self._emit("WARNING", self._format_log("WARNING", event, message, extra), sys.stderr)

    def error(
        self,
        event: str,
        message: str = None,
        extra: Dict = None,
        exc_info: BaseException = None,
        **kwargs
    ):
        """Log error message"""
        self._emit("ERROR", self._format_log("ERROR", event, message, extra, exc_info), sys.stderr)

    def critical(
        self,
        event: str,
        message: str = None,
        extra: Dict = None,
        exc_info: BaseException = None,
        **kwargs
    ):
        """Log critical message"""
        self._emit("CRITICAL", self._format_log("CRITICAL", event, message, extra, exc_info), sys.stderr)

    def performance(
        self,
        event: str,
        duration_ms: float,
        extra: Dict = None
    ):
        """Log performance metric"""
        perf_data = {
            "performance": {
                "duration_ms": duration_ms,
                "duration_seconds": duration_ms / 1000
            }
        }

        if extra:
            perf_data.update(extra)

        log_entry = self._format_log("INFO", event, f"Performance: {duration_ms:.2f}ms", perf_data)
        self._emit("INFO", log_entry, sys.stdout)


def get_logger(name: str) -> StructuredLogger:
    """
    Get structured logger for module.

    Usage:
        logger = get_logger(__name__)
        logger.info("ui_config.request.received", extra={"screen": "/cart"})
    """
    return StructuredLogger(name)


class log_context:
    """
    Context manager for correlation tracking.

    Usage:
        with log_context(correlation_id="abc", user_id="u-1", screen="/cart"):
            logger.info("composer.compose.started")
    """

    def __init__(
        self,
        correlation_id: str = None,
        user_id: str = None,
        screen: str = None,
        **kwargs
    ):
        self.correlation_id = correlation_id
        self.user_id = user_id
        self.screen = screen
        self.extra_context = kwargs
        self._tokens = []

    def __enter__(self):
        """Set context variables"""
        if self.correlation_id:
            self._tokens.append((correlation_id_var, correlation_id_var.set(self.correlation_id)))
        if self.user_id:
            self._tokens.append((user_id_var, user_id_var.set(self.user_id)))
        if self.screen is not None:
            self._tokens.append((screen_var, screen_var.set(self.screen)))
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Restore previous context"""
        for var, token in reversed(self._tokens):
            var.reset(token)
        self._tokens.clear()


def trace_async(event_prefix: str):
    """
    Decorator for tracing async functions.

    Usage:
        @trace_async("analytics.record")
        async def record(event: dict):
            ...
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            logger = get_logger(func.__module__)

            start_time = datetime.now(timezone.utc)

            logger.debug(
                f"{event_prefix}.started",
                extra={"function": func.__name__}
            )

            try:
                result = await func(*args, **kwargs)

                duration_ms = (datetime.now(timezone.utc) - start_time).total_seconds() * 1000

                logger.performance(
                    f"{event_prefix}.completed",
                    duration_ms=duration_ms,
                    extra={
                        "function": func.__name__,
                        "success": True
                    }
                )

                return result

            except Exception as e:
                duration_ms = (datetime.now(timezone.utc) - start_time).total_seconds() * 1000

                logger.error(
                    f"{event_prefix}.failed",
                    extra={
                        "function": func.__name__,
                        "duration_ms": duration_ms,
                        "error_type": type(e).__name__
                    },
                    exc_info=e
                )
                raise

        return wrapper
    return decorator


def trace_sync(event_prefix: str):
    """
    Decorator for tracing sync functions.

    Usage:
        @trace_sync("pipeline.render")
        def render(context):
            ...
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            logger = get_logger(func.__module__)

            start_time = datetime.now(timezone.utc)

            logger.debug(
                f"{event_prefix}.started",
                extra={"function": func.__name__}
            )

            try:
                result = func(*args, **kwargs)

                duration_ms = (datetime.now(timezone.utc) - start_time).total_seconds() * 1000

                logger.performance(
                    f"{event_prefix}.completed",
                    duration_ms=duration_ms,
                    extra={
                        "function": func.__name__,
                        "success": True
                    }
                )

                return result

            except Exception as e:
                duration_ms = (datetime.now(timezone.utc) - start_time).total_seconds() * 1000

                logger.error(
                    f"{event_prefix}.failed",
                    extra={
                        "function": func.__name__,
                        "duration_ms": duration_ms,
                        "error_type": type(e).__name__
                    },
                    exc_info=e
                )
                raise

        return wrapper
    return decorator


"""
LOG EVENT NAMING CONVENTIONS:

Use dot notation: <domain>.<action>.<result>

Examples:
- http.request.received
- http.request.completed
- ui_config.request.received
- pipeline.render.completed
- composer.route.fallback
- composer.home.dispatched
- mode.resolved
- catalog.lookup.miss
- analytics.event.recorded

Searchable queries:
- All failures: event:*.failed OR level:ERROR
- One request: correlation.correlation_id:abc-123
- Slow renders: performance.duration_ms:>50
"""
