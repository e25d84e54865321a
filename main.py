"""SWOT AI Proxy - FastAPI Application Entry Point

A thin server-side proxy that keeps the Gemini API key off the client,
renders SWOT analysis prompts and relays Gemini's structured JSON answers.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import settings
from swot_ai import __version__
from swot_ai.routers.proxy import router as proxy_router
from swot_ai.utils.errors import ProxyError

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S",
)
logger = logging.getLogger("swot_ai")
# httpx logs request URLs at INFO, and the Gemini key travels in the query string
logging.getLogger("httpx").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""
    # Startup
    logger.info(
        "Starting SWOT AI Proxy",
        extra={"environment": settings.environment, "port": settings.port},
    )
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Gemini model: {settings.gemini_model}")
    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY is not set; proxy requests will fail")

    yield

    # Shutdown
    logger.info("Shutting down SWOT AI Proxy")


app = FastAPI(
    title="SWOT AI Proxy",
    description="Server-side Gemini proxy for SWOT strategy analysis",
    version=__version__,
    lifespan=lifespan,
    docs_url=None if settings.is_production else "/docs",
    redoc_url=None if settings.is_production else "/redoc",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["POST"],
    allow_headers=["Content-Type", "X-Request-ID"],
)

app.include_router(proxy_router)


@app.get("/")
async def root():
    """Root endpoint - basic service status."""
    return {"service": "swot-ai", "status": "running"}


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring and load balancer probes."""
    return {
        "status": "healthy",
        "version": __version__,
        "environment": settings.environment,
        "model": settings.gemini_model,
    }


@app.exception_handler(ProxyError)
async def proxy_error_handler(request: Request, exc: ProxyError):
    """Report a known relay failure with its own status."""
    logger.log(
        logging.WARNING if exc.status_code < 500 else logging.ERROR,
        f"{type(exc).__name__}: {exc.message}",
        extra={"path": request.url.path, "method": request.method},
    )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Wrap routing errors such as 405 Method Not Allowed in the error envelope."""
    logger.warning(f"{request.method} {request.url.path}: {exc.status_code} {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Reject bodies that are not an ``{action, data}`` object."""
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    logger.warning(f"Rejected request body: {problems}")
    return JSONResponse(status_code=400, content={"error": f"malformed request: {problems}"})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled errors.

    Logs the error with its traceback and returns only the message.
    """
    logger.error(
        f"Unhandled exception: {type(exc).__name__}",
        extra={
            "path": request.url.path,
            "method": request.method,
        },
        exc_info=True,
    )
    return JSONResponse(status_code=500, content={"error": str(exc)})


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=not settings.is_production,
    )
