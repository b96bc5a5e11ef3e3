# app/main.py
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from contextlib import asynccontextmanager

from app.core.config import settings
from app.core.dependencies import cleanup_resources, init_resources
from app.core.exceptions import ClaimsIntakeException, RegistrationError
from app.core.logging import get_logger
from app.models.schemas import HealthResponse, ServiceStatus

logger = get_logger(__name__)

# ===================
# Lifespan Management
# ===================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application startup and shutdown."""
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    if settings.uses_placeholder_keys:
        logger.warning("Google API keys are placeholders; map and address routes will fail")
    await init_resources(app.state)
    try:
        yield
    finally:
        await cleanup_resources(app.state)
        logger.info("Shutting down...")

# ===================
# Application Setup
# ===================

app = FastAPI(
    title=settings.APP_NAME,
    description="Insurance claim intake with session authentication",
    version=settings.APP_VERSION,
    lifespan=lifespan
)

# ===================
# CORS Middleware
# ===================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ===================
# Error Handling
# ===================

@app.exception_handler(ClaimsIntakeException)
async def handle_service_error(request: Request, exc: ClaimsIntakeException):
    """Map service exceptions to plain-text responses."""
    if exc.status_code >= 500:
        logger.error(f"{exc.error_code} on {request.url.path}: {exc.message}")
    else:
        logger.info(f"{exc.error_code} on {request.url.path}")
    # Registration failures answer with an empty body
    body = "" if isinstance(exc, RegistrationError) else exc.message
    return PlainTextResponse(body, status_code=exc.status_code)


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.url.path}")
    return PlainTextResponse("internal error", status_code=500)

# ===================
# Include Routers
# ===================

from app.routers.claims import router as claims_router
from app.routers.insurer import router as insurer_router
from app.routers.address import router as address_router
from app.routers.auth import router as auth_router

app.include_router(claims_router)
app.include_router(insurer_router)
app.include_router(address_router)
app.include_router(auth_router)

# ===================
# Root Endpoints
# ===================

@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "running",
        "docs": "/docs",
        "endpoints": {
            "claims": "/claims",
            "insurer": "/insurer/claims",
            "address": "/address/{input}",
            "auth": ["/login", "/register", "/logout"]
        }
    }

@app.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    """Health check endpoint."""
    storage = ServiceStatus(name="storage", status="healthy", details=settings.STORAGE_BACKEND)
    client = getattr(request.app.state, "neo4j_client", None)
    if client is not None:
        try:
            await client.driver.verify_connectivity()
        except Exception as e:
            storage = ServiceStatus(name="storage", status="unhealthy", details=str(e))
    return HealthResponse(
        status="healthy" if storage.status == "healthy" else "degraded",
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        services=[storage]
    )


def run():
    """Console entry point."""
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
