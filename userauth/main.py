import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from userauth.core.bootstrap import bootstrap_app
from userauth.core.config import settings
from userauth.core.helpers import get_token_issuer
from userauth.core.middlewares import security_headers_middleware, request_logging_middleware
from userauth.db import db_manager

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Handles application startup and shutdown events.

    A missing JWT secret raises ConfigurationError here, so the process
    refuses to start instead of failing on the first login.
    """
    logger.info("Starting application...")

    get_token_issuer()
    logger.info("Token issuer configured.")

    logger.info("Initializing database schema...")
    await db_manager.connect()
    logger.info("Database ready.")

    yield

    logger.info("Shutting down application...")
    logger.info("Disconnecting database pool...")
    await db_manager.disconnect()
    logger.info("Database pool disconnected.")


app = FastAPI(
    title=settings.PROJECT_NAME,
    debug=settings.DEBUG,
    version=settings.VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_URL],
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["X-Total-Count", "X-Total-Pages"],
    max_age=600,
)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Last-resort handler for failures outside route bodies (e.g. dependencies).
    Details stay in the server log.
    """
    logger.error(f"Unhandled exception on {request.method} {request.url.path}", exc_info=exc)

    return JSONResponse(
        status_code=500,
        content={"message": "An unexpected error occurred"},
    )

# Security headers middleware
app.middleware("http")(security_headers_middleware)

# Request logging middleware
app.middleware("http")(request_logging_middleware)


bootstrap_app(app)


# Health check endpoint (useful for monitoring)
@app.get("/health", tags=["health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": settings.VERSION}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0",
                port=8000,
                log_level="info"
        )
