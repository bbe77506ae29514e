"""
FastAPI Application — Beneficiaries API.

Architecture:
  - core: entities, ports and use cases (no framework imports)
  - infrastructure: SQLAlchemy adapters, PostgreSQL (prod) / SQLite (dev)
  - api: routes, schemas and the composition root (dependencies.py)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api.routes.beneficiaries import router as beneficiaries_router
from src.api.routes.documents import router as documents_router
from src.api.schemas.responses import HealthResponse
from src.config.logging_config import configure_logging
from src.config.settings import get_settings
from src.core.entities.validation import ValidationError
from src.infrastructure.db.database import get_database_url, init_db
from src.infrastructure.db.repository import SqlIdentityDocumentRepository
from src.infrastructure.db.seed import load_default_documents

logger = logging.getLogger(__name__)

VERSION = "1.0.0"
UNEXPECTED_ERROR = "An unexpected error occurred."


# ── Startup / shutdown ──
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging, create tables and load reference data."""
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_file)

    init_db()
    if settings.seed_documents:
        await load_default_documents(SqlIdentityDocumentRepository())

    logger.info(f"Beneficiaries API started (env={settings.env})")
    yield
    logger.info("Beneficiaries API stopped")


app = FastAPI(
    title="Beneficiaries API",
    description="CRUD for beneficiaries and the identity document types that identify them.",
    version=VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Error mapping ──
@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    logger.warning(f"{request.method} {request.url.path} - Validation error: {exc.message}")
    return JSONResponse(status_code=400, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Invalid request."
    logger.warning(f"{request.method} {request.url.path} - Malformed request: {message}")
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.error(f"{request.method} {request.url.path} - Unexpected error: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"error": UNEXPECTED_ERROR})


# ── Routes ──
app.include_router(beneficiaries_router, prefix="/api/beneficiaries", tags=["Beneficiaries"])
app.include_router(documents_router, prefix="/api/documents", tags=["Identity Documents"])


@app.get("/health", response_model=HealthResponse)
async def health():
    db_url = get_database_url()
    db_type = "PostgreSQL" if "postgres" in db_url else "SQLite"
    return HealthResponse(
        status="ok",
        version=VERSION,
        database=db_type,
        environment=get_settings().env,
    )


def run():
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "src.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
