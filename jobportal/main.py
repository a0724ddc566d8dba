"""
JobPortal - Main Application

FastAPI backend with:
- Document store over a key/value storage shim (JSON files, MongoDB or memory)
- Seeded job dataset (1100 listings) and company directory
- Candidate and recruiter dashboards
- AI career assistant (OpenAI-compatible API)
- JWT authentication

Run: uvicorn jobportal.main:app --reload
"""

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from jobportal import __version__
from jobportal.api.routes import api_router
from jobportal.core.config import get_settings
from jobportal.core.exceptions import StorageCorruptedError
from jobportal.core.log import get_logger
from jobportal.services.document_service import JobPortalDB, get_database

settings = get_settings()
logger = get_logger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="""
    Job board backend.

    ## Features
    - **Authentication**: name + email sign-in for candidates and recruiters (JWT)
    - **Jobs**: Search, filter, save and apply to jobs
    - **Candidates**: Profile completion, job alerts, resume upload, AI resume tips
    - **Recruiters**: Company profile, job postings, applicants, AI job descriptions
    - **Companies**: Company directory
    - **AI Assistant**: Career chat

    ## Storage
    Collections are JSON lists kept in a key/value store (files, MongoDB or memory).
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware (allow all for development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix="/api")


@app.exception_handler(StorageCorruptedError)
async def storage_corrupted_handler(request: Request, exc: StorageCorruptedError):
    logger.error("Refusing write to corrupted collection %s", exc.key)
    return JSONResponse(status_code=500, content={"detail": str(exc)})


# Startup event
@app.on_event("startup")
async def startup_event():
    """Open storage and seed the document store."""
    db = get_database()
    logger.info("Document store ready with %d jobs", db.jobs.count())


@app.get("/", tags=["Health"])
async def root():
    return {"status": "healthy", "app": settings.app_name, "version": __version__, "docs": "/docs"}


@app.get("/health", tags=["Health"])
async def health_check(db: JobPortalDB = Depends(get_database)):
    """Detailed health check."""
    storage_ok = db.storage.ping()
    return {
        "status": "healthy" if storage_ok else "degraded",
        "storage": settings.storage_backend,
        "storage_connected": storage_ok,
        "jobs": db.jobs.count(),
        "ai_configured": settings.ai_configured,
    }
