"""
Recruiter Routes

GET /recruiter/company-profile - Get company profile
PUT /recruiter/company-profile - Update company profile
GET /recruiter/jobs - Get my job listings
POST /recruiter/jobs - Post a job
POST /recruiter/jobs/generate-description - AI job description draft
GET /recruiter/jobs/{job_id}/applicants - Applicants for one of my jobs
PUT /recruiter/applications/{id}/status - Update application status
"""

from fastapi import APIRouter, HTTPException, Depends, Query
from typing import List, Optional

from jobportal.core.auth import get_current_recruiter
from jobportal.core.log import get_logger
from jobportal.schemas.schemas import (
    AiTextResponse, ApplicantResponse, Application, ApplicationStatusUpdate,
    CompanyProfile, CompanyProfileUpdate, Job, JobCreate, JobDescriptionRequest
)
from jobportal.services.ai_client import AssistantClient, get_assistant_client
from jobportal.services.document_service import JobPortalDB, get_database
from jobportal.services.profile_service import (
    build_job, company_profile, owns_job, recruiter_company_name, recruiter_jobs
)

router = APIRouter(prefix="/recruiter", tags=["Recruiters"])
logger = get_logger(__name__)


@router.get("/company-profile", response_model=CompanyProfile)
async def get_company_profile(recruiter: dict = Depends(get_current_recruiter)):
    return company_profile(recruiter)


@router.put("/company-profile", response_model=CompanyProfile)
async def put_company_profile(
    data: CompanyProfileUpdate,
    recruiter: dict = Depends(get_current_recruiter),
    db: JobPortalDB = Depends(get_database),
):
    """Save the company profile; the company name becomes the recruiter's company."""
    profile = data.model_dump()
    if not profile["logo"]:
        profile["logo"] = company_profile({"company": profile["name"]})["logo"]
    updated = db.users.update_one(recruiter["id"], {"company": profile["name"], "company_profile": profile})
    return updated["company_profile"]


@router.get("/jobs", response_model=List[Job])
async def get_my_jobs(
    recruiter: dict = Depends(get_current_recruiter),
    db: JobPortalDB = Depends(get_database),
):
    """Jobs posted by this recruiter or listed under their company."""
    return recruiter_jobs(db, recruiter)


@router.post("/jobs", response_model=Job, status_code=201)
async def post_job(
    form: JobCreate,
    recruiter: dict = Depends(get_current_recruiter),
    db: JobPortalDB = Depends(get_database),
):
    """Post a job listing. It appears first in search results."""
    try:
        job = build_job(form, recruiter)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    # Ids are millisecond stamps; bump on collision
    while db.jobs.find_one(job["id"]):
        job["id"] = f"new-{int(job['id'][4:]) + 1}"

    db.jobs.insert_one(job)
    logger.info("Recruiter %s posted job %s", recruiter["id"], job["id"])
    return job


@router.post("/jobs/generate-description", response_model=AiTextResponse)
async def generate_description(
    data: JobDescriptionRequest,
    recruiter: dict = Depends(get_current_recruiter),
    ai: AssistantClient = Depends(get_assistant_client),
):
    """Draft a job description with AI."""
    if not data.title.strip():
        raise HTTPException(status_code=400, detail="Please enter a job title first to generate a description.")

    company = (data.company or "").strip() or recruiter_company_name(recruiter) or "Our Company"
    return AiTextResponse(text=ai.generate_job_description(data.title.strip(), company))


@router.get("/jobs/{job_id}/applicants", response_model=List[ApplicantResponse])
async def get_applicants(
    job_id: str,
    search: Optional[str] = Query(None, description="Filter by candidate name"),
    recruiter: dict = Depends(get_current_recruiter),
    db: JobPortalDB = Depends(get_database),
):
    """Applicants for one of the recruiter's jobs."""
    job = db.jobs.find_one(job_id)
    if not job or not owns_job(recruiter, job):
        raise HTTPException(status_code=404, detail="Job not found or access denied")

    apps = db.applications.find(job_id=job_id)
    candidates = db.users.find_many([a["candidate_id"] for a in apps])
    needle = (search or "").lower()

    applicants = []
    for app in apps:
        candidate = candidates.get(app["candidate_id"])
        if not candidate:
            continue
        if needle not in candidate.get("name", "").lower():
            continue
        applicants.append(ApplicantResponse(
            application_id=app["id"],
            candidate_id=candidate["id"],
            name=candidate["name"],
            email=candidate["email"],
            designation=candidate.get("designation"),
            skills=candidate.get("skills") or [],
            resume_name=candidate.get("resume_name"),
            status=app["status"],
            applied_at=app["applied_at"],
        ))
    return applicants


@router.put("/applications/{application_id}/status", response_model=Application)
async def update_application_status(
    application_id: str,
    update: ApplicationStatusUpdate,
    recruiter: dict = Depends(get_current_recruiter),
    db: JobPortalDB = Depends(get_database),
):
    """Update status of an application on one of the recruiter's jobs."""
    application = db.applications.find_one(application_id)
    job = db.jobs.find_one(application["job_id"]) if application else None
    if not job or not owns_job(recruiter, job):
        raise HTTPException(status_code=404, detail="Application not found")

    return db.applications.update_status(application_id, update.status)
