"""FastAPI application serving the site, token issuance and contact endpoints."""

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, Response
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import RequestResponseEndpoint

from . import __version__
from .application import HandlerResponse, IncomingRequest, SessionContext
from .composition import create_container
from .container import Container
from .domain import SessionId
from .logging_setup import setup_logging_from_env

logger = logging.getLogger(__name__)

# Path to static files (inside package)
STATIC_DIR = Path(__file__).parent / "static"

# Routed for every method so the handlers can answer 405 themselves
HANDLER_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

NO_STORE_HEADERS = {
    "Cache-Control": "no-store, no-cache, must-revalidate, max-age=0",
    "Pragma": "no-cache",
}

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


def _session_context(request: Request, container: Container) -> SessionContext:
    """Build the lazy session accessor from the request cookie."""
    raw = request.cookies.get(container.session_cookie_name)
    session_id = SessionId(raw) if raw else None
    return SessionContext(container.session_store, session_id)


async def _incoming_request(request: Request) -> IncomingRequest:
    """Populate the typed request once at the boundary."""
    form: dict[str, str] = {}
    if request.method.upper() == "POST":
        data = await request.form()
        # Uploaded files have no meaning for the contact form
        form = {key: value for key, value in data.items() if isinstance(value, str)}

    return IncomingRequest(
        method=request.method,
        origin=request.headers.get("origin"),
        referer=request.headers.get("referer"),
        form=form,
    )


def _json_response(
    result: HandlerResponse,
    context: SessionContext,
    request: Request,
    container: Container,
) -> JSONResponse:
    """Render a handler result, attaching the session cookie when new."""
    response = JSONResponse(
        result.body,
        status_code=result.status,
        headers={**NO_STORE_HEADERS, **result.headers},
    )

    session = context.session
    if context.created and session is not None:
        secure = container.config.session.always_secure or request.url.scheme == "https"
        response.set_cookie(
            container.session_cookie_name,
            session.session_id,
            path="/",
            httponly=True,
            samesite="strict",
            secure=secure,
        )

    return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    setup_logging_from_env()

    if getattr(app.state, "container", None) is None:
        config_path = os.environ.get("BRICKSTONE_CONFIG_PATH", "config.yaml")
        app.state.container = create_container(config_path=config_path)

    container: Container = app.state.container
    await container.session_sweeper.start()

    logger.info("Brickstone site started version=%s", __version__)

    yield

    # Shutdown
    await container.session_sweeper.stop()
    logger.info("Brickstone site stopped")


def create_app(container: Container | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        container: Pre-wired dependencies. When omitted the container is
            built from BRICKSTONE_CONFIG_PATH at startup.
    """
    app = FastAPI(
        title="Brickstone Realty Group",
        description="Marketing site with contact form for Brickstone Realty Group",
        version=__version__,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.container = container

    @app.middleware("http")
    async def security_headers(
        request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Add nosniff everywhere and disable caching of static assets."""
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        if request.url.path.startswith("/static/"):
            response.headers.update(NO_CACHE_HEADERS)
        return response

    @app.exception_handler(Exception)
    async def unhandled_exception(request: Request, exc: Exception) -> JSONResponse:
        """Never leak diagnostics to the client."""
        logger.exception("Unhandled error path=%s", request.url.path)
        return JSONResponse(
            {"success": False, "error": "Internal server error."},
            status_code=500,
            headers=NO_STORE_HEADERS,
        )

    # Mount static files
    if STATIC_DIR.exists():
        app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    @app.get("/", response_class=HTMLResponse)
    async def index():
        """Serve the main page."""
        index_path = STATIC_DIR / "index.html"
        if index_path.exists():
            content = index_path.read_text(encoding="utf-8")
            return HTMLResponse(content=content, headers=NO_CACHE_HEADERS)
        return JSONResponse(
            {"error": "index.html not found"},
            status_code=404,
        )

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        container: Container = app.state.container
        return {
            "status": "healthy",
            "sessions": container.session_store.count(),
        }

    @app.api_route("/csrf-token", methods=HANDLER_METHODS)
    async def csrf_token(request: Request):
        """Issue the per-session anti-forgery token."""
        container: Container = app.state.container
        context = _session_context(request, container)
        incoming = await _incoming_request(request)

        result = container.token_issuer.handle(incoming, context)
        return _json_response(result, context, request, container)

    @app.api_route("/contact", methods=HANDLER_METHODS)
    async def contact(request: Request):
        """Accept a contact form submission."""
        container: Container = app.state.container
        context = _session_context(request, container)
        incoming = await _incoming_request(request)

        # Mail delivery blocks, keep it off the event loop
        result = await run_in_threadpool(container.submission_guard.handle, incoming, context)
        logger.debug("Contact handled outcome=%s status=%d", result.outcome.value, result.status)
        return _json_response(result, context, request, container)

    return app


# Create the app instance
app = create_app()
