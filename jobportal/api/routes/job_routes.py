"""
Job Routes

GET /jobs - Search jobs with filters and pagination
GET /jobs/skills - All skills for the filter list
GET /jobs/stats - Job count, featured jobs and top companies
GET /jobs/{job_id} - Get job details
POST /jobs/{job_id}/apply - Apply to job (candidate only)
POST /jobs/{job_id}/save - Save / unsave a job
"""

from fastapi import APIRouter, HTTPException, Depends, Query
from typing import List, Optional

from jobportal.core.auth import get_current_candidate, get_current_user, get_optional_user
from jobportal.core.exceptions import AlreadyAppliedError
from jobportal.core.log import get_logger
from jobportal.schemas.schemas import (
    Application, HomeStatsResponse, JobDetailResponse, JobListResponse,
    SavedJobsResponse, SkillListResponse, WorkMode
)
from jobportal.services.document_service import JobPortalDB, get_database
from jobportal.services.job_search_service import build_query, home_stats, search_jobs
from jobportal.services.profile_service import toggle_saved_job

router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = get_logger(__name__)


@router.get("", response_model=JobListResponse)
async def list_jobs(
    q: Optional[str] = Query(None, description="Search in title or company"),
    location: Optional[str] = Query(None),
    experience: Optional[int] = Query(None, ge=0, description="Years of experience"),
    salary_range: str = Query("All", description="All, 0-3, 3-6, 6-10, 10-15 or 15+ (lakhs)"),
    skills: List[str] = Query([]),
    work_mode: List[WorkMode] = Query([]),
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100),
    db: JobPortalDB = Depends(get_database),
):
    """Search job listings. Every filter given must match."""
    try:
        query = build_query(q, skills, work_mode, salary_range, location, experience)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    jobs, total = search_jobs(db, query, page, page_size)
    return JobListResponse(jobs=jobs, total=total, page=page, page_size=page_size)


@router.get("/skills", response_model=SkillListResponse)
async def list_skills(db: JobPortalDB = Depends(get_database)):
    """Sorted distinct skills across all jobs."""
    return SkillListResponse(skills=db.jobs.distinct_skills())


@router.get("/stats", response_model=HomeStatsResponse)
async def get_stats(db: JobPortalDB = Depends(get_database)):
    """Home page numbers: total jobs, featured jobs, top companies."""
    return HomeStatsResponse(**home_stats(db))


@router.get("/{job_id}", response_model=JobDetailResponse)
async def get_job(
    job_id: str,
    user: Optional[dict] = Depends(get_optional_user),
    db: JobPortalDB = Depends(get_database),
):
    """Get details of a specific job, plus the caller's applied/saved state."""
    job = db.jobs.find_one(job_id)
    if not job:
        raise HTTPException(status_code=404, detail="Job not found")

    has_applied = False
    is_saved = False
    if user:
        has_applied = len(db.applications.find(candidate_id=user["id"], job_id=job_id)) > 0
        is_saved = job_id in (user.get("saved_job_ids") or [])

    return JobDetailResponse(job=job, has_applied=has_applied, is_saved=is_saved)


@router.post("/{job_id}/apply", response_model=Application, status_code=201)
async def apply_to_job(
    job_id: str,
    candidate: dict = Depends(get_current_candidate),
    db: JobPortalDB = Depends(get_database),
):
    """Apply to a job. Candidates only. Cannot apply twice to same job."""
    if not db.jobs.find_one(job_id):
        raise HTTPException(status_code=404, detail="Job not found")

    try:
        application = db.applications.insert_one(candidate_id=candidate["id"], job_id=job_id)
    except AlreadyAppliedError as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.info("Candidate %s applied to %s", candidate["id"], job_id)
    return application


@router.post("/{job_id}/save", response_model=SavedJobsResponse)
async def toggle_save_job(
    job_id: str,
    user: dict = Depends(get_current_user),
    db: JobPortalDB = Depends(get_database),
):
    """Save a job for later, or unsave it if already saved."""
    if not db.jobs.find_one(job_id):
        raise HTTPException(status_code=404, detail="Job not found")

    updated = toggle_saved_job(db, user, job_id)
    saved = updated.get("saved_job_ids", [])
    return SavedJobsResponse(saved_job_ids=saved, is_saved=job_id in saved)
