import logging

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from app.api.routes.match import router as match_router
from app.api.routes.parse import router as parse_router
from app.core.config import get_config

logging.basicConfig(
    level=get_config().log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Resume Ingest (Resume Parsing Service)",
    description="Heuristic resume parsing service that turns PDF/DOCX resumes into structured candidate records",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

app.include_router(parse_router)
app.include_router(match_router)

@app.get("/", tags=["health"])
def root():
    return {"service": "resume-ingest", "status": "running"}

@app.get("/health", tags=["health"])
def health():
    return {"status": "ok"}

def custom_openapi():
    """Generate OpenAPI schema with custom settings."""
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title="Resume Ingest API",
        version="0.1.0",
        description="Resume parsing and candidate ranking API",
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema

app.openapi = custom_openapi
