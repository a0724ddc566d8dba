"""
Profile Service - candidate and recruiter dashboard logic.

- Profile completion scoring
- Job alert defaults and matching
- Saved jobs toggling
- Recruiter company profile defaults and job ownership
- Building job listings from the recruiter posting form
"""

import time
from typing import List, Optional

from jobportal.db.seed_data import format_salary
from jobportal.schemas.schemas import JobCreate, JobType
from jobportal.services.document_service import JobPortalDB

MAX_ALERT_MATCHES = 10

# Profile completion weights
BASE_SCORE = 15
DESIGNATION_SCORE = 25
EDUCATION_SCORE = 20
SKILLS_SCORE = 20
RESUME_SCORE = 20


# ============================================================
# CANDIDATE
# ============================================================

def completion_percentage(user: dict) -> int:
    score = BASE_SCORE
    if user.get("designation"):
        score += DESIGNATION_SCORE
    if user.get("education"):
        score += EDUCATION_SCORE
    if user.get("skills"):
        score += SKILLS_SCORE
    if user.get("resume_name"):
        score += RESUME_SCORE
    return min(score, 100)


def update_profile(db: JobPortalDB, user: dict, updates: dict) -> dict:
    """Apply profile updates and store the recomputed completion percentage."""
    merged = {**user, **updates}
    updates = {**updates, "completion_percentage": completion_percentage(merged)}
    return db.users.update_one(user["id"], updates)


def alert_preferences(user: dict) -> dict:
    """Stored alert preferences, or defaults taken from the profile."""
    if user.get("job_alerts"):
        return user["job_alerts"]
    return {
        "skills": user.get("skills") or [],
        "location": user.get("location") or "",
        "min_salary": 0,
    }


def matching_jobs(jobs: List[dict], alerts: Optional[dict], limit: int = MAX_ALERT_MATCHES) -> List[dict]:
    """
    Jobs matching a candidate's alert preferences.

    A job matches when some job skill contains some alert skill (or no
    skills are set), its location contains the alert location (or none is
    set), and its minimum salary meets the alert minimum.
    """
    if not alerts:
        return []
    skills = [s.lower() for s in alerts.get("skills") or []]
    location = (alerts.get("location") or "").lower()
    min_sal = alerts.get("min_salary") or 0

    matches = []
    for job in jobs:
        job_skills = [s.lower() for s in job.get("skills", [])]
        skill_match = not skills or any(pref in s for s in job_skills for pref in skills)
        location_match = not location or location in job.get("location", "").lower()
        salary_match = (job.get("min_salary") or 0) >= min_sal
        if skill_match and location_match and salary_match:
            matches.append(job)
            if len(matches) >= limit:
                break
    return matches


def toggle_saved_job(db: JobPortalDB, user: dict, job_id: str) -> dict:
    """Add or remove job_id from the user's saved jobs; returns the updated user."""
    saved = list(user.get("saved_job_ids") or [])
    if job_id in saved:
        saved = [s for s in saved if s != job_id]
    else:
        saved.append(job_id)
    return db.users.update_one(user["id"], {"saved_job_ids": saved})


# ============================================================
# RECRUITER
# ============================================================

def company_logo(company: str) -> str:
    return f"https://picsum.photos/seed/{company}/100/100"


def company_profile(user: dict) -> dict:
    """Stored company profile, or a blank one named after user.company."""
    if user.get("company_profile"):
        return user["company_profile"]
    company = user.get("company") or ""
    return {
        "name": company,
        "logo": company_logo(company),
        "description": "",
        "industry": "",
        "website": "",
        "location": "",
    }


def recruiter_company_name(user: dict) -> Optional[str]:
    profile = user.get("company_profile") or {}
    return profile.get("name") or user.get("company")


def recruiter_jobs(db: JobPortalDB, user: dict) -> List[dict]:
    """Jobs the recruiter posted, plus listings under the recruiter's company."""
    company = recruiter_company_name(user)
    return [
        job for job in db.jobs.find()
        if job.get("posted_by") == user["id"] or (company and job.get("company") == company)
    ]


def owns_job(user: dict, job: dict) -> bool:
    company = recruiter_company_name(user)
    return job.get("posted_by") == user["id"] or bool(company and job.get("company") == company)


def build_job(form: JobCreate, user: dict) -> dict:
    """Turn a validated posting form into a job document."""
    company = (form.company or recruiter_company_name(user) or "").strip()
    if not company:
        raise ValueError("Company Name is required")
    profile = user.get("company_profile") or {}
    return {
        "id": f"new-{int(time.time() * 1000)}",
        "title": form.title.strip(),
        "company": company,
        "logo": profile.get("logo") or company_logo(company),
        "location": form.location.strip(),
        "salary": format_salary(form.min_salary, form.max_salary),
        "min_salary": form.min_salary,
        "max_salary": form.max_salary,
        "experience": form.experience.strip(),
        "description": form.description.strip(),
        "skills": form.skills,
        "work_mode": form.work_mode.value,
        "posted_at": "Just now",
        "type": JobType.full_time.value,
        "applicants_count": 0,
        "posted_by": user["id"],
    }
