"""
Candidate Routes

GET /candidate/profile - Get own profile and completion percentage
PUT /candidate/profile - Update profile
GET /candidate/alerts - Get job alert preferences
PUT /candidate/alerts - Update job alert preferences
GET /candidate/alerts/matches - Jobs matching the alerts
GET /candidate/applications - Get my applications
GET /candidate/applied-jobs - Jobs I applied to
GET /candidate/saved-jobs - Jobs I saved
POST /candidate/resume - Upload resume (PDF/DOCX)
POST /candidate/resume/feedback - AI tips for a resume summary
"""

from fastapi import APIRouter, HTTPException, Depends, UploadFile, File
from typing import List

from jobportal.core.auth import get_current_candidate
from jobportal.core.config import get_settings
from jobportal.schemas.schemas import (
    AiTextResponse, ApplicationWithJob, Job, JobAlertPreferences, ProfileResponse,
    ProfileUpdate, ResumeFeedbackRequest, ResumeUploadResponse, User
)
from jobportal.services.ai_client import AssistantClient, get_assistant_client
from jobportal.services.document_service import JobPortalDB, get_database
from jobportal.services.profile_service import (
    alert_preferences, completion_percentage, matching_jobs, update_profile
)
from jobportal.utils.file_upload import read_resume_upload

router = APIRouter(prefix="/candidate", tags=["Candidates"])


def _profile_response(user: dict) -> ProfileResponse:
    return ProfileResponse(user=User.model_validate(user), completion_percentage=completion_percentage(user))


@router.get("/profile", response_model=ProfileResponse)
async def get_profile(candidate: dict = Depends(get_current_candidate)):
    """Get current candidate's profile."""
    return _profile_response(candidate)


@router.put("/profile", response_model=ProfileResponse)
async def put_profile(
    data: ProfileUpdate,
    candidate: dict = Depends(get_current_candidate),
    db: JobPortalDB = Depends(get_database),
):
    """Update designation, education, skills, location or name."""
    updates = data.model_dump(exclude_none=True)
    if not updates:
        raise HTTPException(status_code=400, detail="No fields to update")

    updated = update_profile(db, candidate, updates)
    return _profile_response(updated)


@router.get("/alerts", response_model=JobAlertPreferences)
async def get_alerts(candidate: dict = Depends(get_current_candidate)):
    """Stored alert preferences, or defaults from the profile."""
    return alert_preferences(candidate)


@router.put("/alerts", response_model=JobAlertPreferences)
async def put_alerts(
    data: JobAlertPreferences,
    candidate: dict = Depends(get_current_candidate),
    db: JobPortalDB = Depends(get_database),
):
    updated = db.users.update_one(candidate["id"], {"job_alerts": data.model_dump()})
    return updated["job_alerts"]


@router.get("/alerts/matches", response_model=List[Job])
async def get_alert_matches(
    candidate: dict = Depends(get_current_candidate),
    db: JobPortalDB = Depends(get_database),
):
    """Up to 10 jobs matching stored alerts (none until alerts are saved)."""
    return matching_jobs(db.jobs.find(), candidate.get("job_alerts"))


@router.get("/applications", response_model=List[ApplicationWithJob])
async def get_applications(
    candidate: dict = Depends(get_current_candidate),
    db: JobPortalDB = Depends(get_database),
):
    """Get my applications with job details."""
    apps = db.applications.find(candidate_id=candidate["id"])
    jobs = {j["id"]: j for j in db.jobs.find_many([a["job_id"] for a in apps])}
    return [ApplicationWithJob(application=a, job=jobs.get(a["job_id"])) for a in apps]


@router.get("/applied-jobs", response_model=List[Job])
async def get_applied_jobs(
    candidate: dict = Depends(get_current_candidate),
    db: JobPortalDB = Depends(get_database),
):
    apps = db.applications.find(candidate_id=candidate["id"])
    return db.jobs.find_many([a["job_id"] for a in apps])


@router.get("/saved-jobs", response_model=List[Job])
async def get_saved_jobs(
    candidate: dict = Depends(get_current_candidate),
    db: JobPortalDB = Depends(get_database),
):
    return db.jobs.find_many(candidate.get("saved_job_ids") or [])


@router.post("/resume", response_model=ResumeUploadResponse)
async def upload_resume(
    file: UploadFile = File(..., description="Resume file (PDF or DOCX)"),
    candidate: dict = Depends(get_current_candidate),
    db: JobPortalDB = Depends(get_database),
):
    """
    Upload a resume.

    The file name is recorded on the profile (counts towards completion);
    text extracted from PDF/DOCX files is kept for AI feedback.
    """
    text, filename = await read_resume_upload(file, get_settings().max_resume_size_mb)
    updated = update_profile(db, candidate, {"resume_name": filename, "resume_text": text})

    return ResumeUploadResponse(
        success=True,
        message="Resume uploaded successfully",
        filename=filename,
        text_extracted=bool(text),
        completion_percentage=updated["completion_percentage"],
    )


@router.post("/resume/feedback", response_model=AiTextResponse)
async def resume_feedback(
    data: ResumeFeedbackRequest,
    candidate: dict = Depends(get_current_candidate),
    ai: AssistantClient = Depends(get_assistant_client),
):
    """AI tips for a summary; falls back to the uploaded resume's text."""
    summary = data.summary.strip() or (candidate.get("resume_text") or "").strip()
    if not summary:
        raise HTTPException(status_code=400, detail="Please enter a summary first.")
    return AiTextResponse(text=ai.get_resume_feedback(summary))
