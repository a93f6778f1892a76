import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from bug_relay.api.router import api_router
from bug_relay.config import settings
from bug_relay.services.http_client import close_http_client

HEALTH_MESSAGE = "Slack-Jira integration service is running"


def setup_logging() -> None:
    """Configure application logging."""
    # Format: timestamp - level - logger name - message
    log_format = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
    date_format = "%H:%M:%S"

    # Configure root logger
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    # Quieten uvicorn access logs (we'll log requests ourselves)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Application lifespan: startup and shutdown events."""
    # Startup
    setup_logging()
    logger.info("Bug relay starting up")
    if not settings.slack_signature_enabled:
        logger.warning("SLACK_SIGNING_SECRET not configured; Slack requests will be rejected")
    if not settings.jira_host:
        logger.warning("JIRA_HOST not configured")
    yield
    # Shutdown
    await close_http_client()
    logger.info("Bug relay shutting down")


app = FastAPI(
    title="Bug Relay",
    description="Relays Slack bug-report modals into Jira issues",
    version="0.1.0",
    lifespan=lifespan,
)

# Proxy headers middleware - trust X-Forwarded-Proto from the TLS-terminating proxy
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts=["*"])


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log Slack webhook hits and failed requests, skipping health checks."""
    if request.url.path == "/health":
        return await call_next(request)

    response = await call_next(request)

    path = request.url.path
    if response.status_code >= 400 or path.startswith("/slack"):
        logger.info(f"{request.method} {path} → {response.status_code}")

    return response


# Include API routes
app.include_router(api_router)


@app.get("/health", response_class=PlainTextResponse)
async def health_check() -> str:
    """Health check endpoint."""
    return HEALTH_MESSAGE


def run() -> None:
    """Serve the app with uvicorn on the configured host and port."""
    uvicorn.run(app, host=settings.host, port=settings.port)
