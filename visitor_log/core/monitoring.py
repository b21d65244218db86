"""
Monitoring and Tracing Configuration Module.

This module provides integration with Pydantic Logfire for monitoring and
tracing of the visitor log service, including:
- API endpoint tracing
- Sign-in and sign-out events
- Error tracking

Logfire is only configured when it is enabled and a token is available;
otherwise the ``log_*`` helpers degrade to debug log lines.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from visitor_log.server.core.config import LogfireConfig

logger = logging.getLogger(__name__)


def initialize_logfire(app: FastAPI | None = None, config: Optional[LogfireConfig] = None) -> bool:
    """
    Initialize Pydantic Logfire for monitoring and tracing.

    Args:
        app: FastAPI application instance for FastAPI instrumentation (optional).
             If provided, enables automatic tracing of FastAPI endpoints.
        config: Logfire settings. Defaults to the values bound from the environment.

    Returns:
        True if Logfire was configured, False if it was skipped or failed.
    """
    if config is None:
        from visitor_log.server.core.config import settings

        config = settings.logfire

    if not config.enabled:
        logger.info("Logfire monitoring is disabled. Set LOGFIRE_ENABLED=true to enable.")
        return False

    if not config.token:
        logger.warning(
            "Logfire is enabled but LOGFIRE_TOKEN is not set. "
            "Monitoring will not work. Set LOGFIRE_TOKEN to enable Logfire."
        )
        return False

    try:
        import logfire
        from logfire import SamplingOptions

        logfire.configure(
            token=config.token,
            service_name=config.service_name,
            service_version=config.service_version,
            environment=config.environment,
            sampling=SamplingOptions(head=config.sample_rate),
        )

        if config.trace_fastapi:
            if app is not None:
                try:
                    logfire.instrument_fastapi(app=app)
                    logger.info("Logfire: FastAPI instrumentation enabled")
                except Exception as e:
                    logger.warning(f"Failed to instrument FastAPI: {e}")
            else:
                logger.debug("FastAPI app instance not provided, skipping FastAPI instrumentation")

        logger.info(
            f"Logfire monitoring initialized: "
            f"environment={config.environment}, "
            f"service={config.service_name}"
        )
        return True

    except Exception as e:
        logger.error(f"Failed to initialize Logfire: {e}", exc_info=True)
        return False


def log_visitor_signed_in(visitor_id: int) -> None:
    """
    Record a visitor sign-in.

    Only the identifier is sent; name and mobile stay out of traces.

    Args:
        visitor_id: The identifier assigned to the new visitor record
    """
    try:
        import logfire

        logfire.info("Visitor signed in", visitor_id=visitor_id)
    except Exception:
        logger.debug(f"Could not log visitor sign-in to Logfire: visitor_id={visitor_id}")


def log_visitor_signed_out(visitor_id: int, duration_seconds: float) -> None:
    """
    Record a visitor sign-out.

    Args:
        visitor_id: The visitor identifier
        duration_seconds: Time between sign-in and sign-out
    """
    try:
        import logfire

        logfire.info("Visitor signed out", visitor_id=visitor_id, duration_seconds=duration_seconds)
    except Exception:
        logger.debug(f"Could not log visitor sign-out to Logfire: visitor_id={visitor_id}")


def log_api_request(method: str, path: str, status_code: int, duration_ms: float) -> None:
    """
    Log an API request with performance metrics.

    Args:
        method: HTTP method
        path: Request path
        status_code: HTTP status code
        duration_ms: Request duration in milliseconds
    """
    try:
        import logfire

        logfire.info(
            "API request completed",
            method=method,
            path=path,
            status_code=status_code,
            duration_ms=duration_ms,
        )
    except Exception:
        logger.debug(f"Could not log API request to Logfire: {method} {path}")


def log_error(error_type: str, error_message: str, context: Optional[dict] = None) -> None:
    """
    Log an error with context for debugging.

    Args:
        error_type: Type of error
        error_message: Error message
        context: Additional context dictionary
    """
    try:
        import logfire

        logfire.error(
            "{error_type}: {error_message}",
            error_type=error_type,
            error_message=error_message,
            **(context or {}),
        )
    except Exception:
        logger.debug(f"Could not log error to Logfire: {error_type}")
