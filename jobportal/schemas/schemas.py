"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
"""

import math

from pydantic import BaseModel, EmailStr, Field, field_validator, model_validator
from typing import Optional, List, Union
from enum import Enum


def split_skills(value: Union[str, List[str], None]) -> List[str]:
    """Accept a list or a comma-separated string; trim and drop blanks."""
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    return [str(s).strip() for s in value if str(s).strip()]


def parse_lakhs(value) -> float:
    """Parse a salary in lakhs, treating anything unparsable as 0."""
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


# ============================================================
# ENUMS
# ============================================================

class UserRole(str, Enum):
    candidate = "CANDIDATE"
    recruiter = "RECRUITER"


class WorkMode(str, Enum):
    remote = "Remote"
    on_site = "On-site"
    hybrid = "Hybrid"


class JobType(str, Enum):
    full_time = "Full-time"
    contract = "Contract"
    part_time = "Part-time"


class ApplicationStatus(str, Enum):
    applied = "Applied"
    reviewed = "Reviewed"
    interviewing = "Interviewing"
    accepted = "Accepted"
    rejected = "Rejected"


# ============================================================
# CORE DOCUMENTS
# ============================================================

class CompanyProfile(BaseModel):
    name: str
    logo: str = ""
    description: str = ""
    industry: str = ""
    website: Optional[str] = None
    location: str = ""

class Company(BaseModel):
    id: str
    name: str
    logo: str
    rating: str
    reviews: str
    industry: str
    active_jobs: int
    description: str

class JobAlertPreferences(BaseModel):
    skills: List[str] = []
    location: str = ""
    min_salary: float = 0

    @field_validator("skills", mode="before")
    @classmethod
    def _split_skills(cls, v):
        return split_skills(v)

    @field_validator("min_salary", mode="before")
    @classmethod
    def _parse_min_salary(cls, v):
        return parse_lakhs(v)

class User(BaseModel):
    id: str
    name: str
    email: str
    role: UserRole
    company: Optional[str] = None
    profile_pic: Optional[str] = None
    resume_name: Optional[str] = None
    company_profile: Optional[CompanyProfile] = None
    designation: Optional[str] = None
    education: Optional[str] = None
    skills: List[str] = []
    location: Optional[str] = None
    completion_percentage: Optional[int] = None
    job_alerts: Optional[JobAlertPreferences] = None
    saved_job_ids: List[str] = []

class Job(BaseModel):
    id: str
    title: str
    company: str
    logo: str
    location: str
    salary: str
    min_salary: Optional[float] = None
    max_salary: Optional[float] = None
    experience: str
    description: str
    skills: List[str] = []
    work_mode: WorkMode
    posted_at: str
    type: JobType = JobType.full_time
    applicants_count: int = 0
    posted_by: Optional[str] = None

class Application(BaseModel):
    id: str
    job_id: str
    candidate_id: str
    status: ApplicationStatus
    applied_at: str

class JobQuery(BaseModel):
    """Search filters understood by the jobs collection."""
    text: Optional[str] = None
    skills: List[str] = []
    work_mode: List[WorkMode] = []
    salary_min: Optional[float] = None
    salary_max: Optional[float] = None
    location: Optional[str] = None
    experience: Optional[int] = Field(None, ge=0)


# ============================================================
# AUTH SCHEMAS
# ============================================================

class LoginRequest(BaseModel):
    email: EmailStr
    name: str = Field(..., min_length=1, max_length=100)
    role: UserRole = UserRole.candidate

    @field_validator("email", mode="after")
    @classmethod
    def _normalize_email(cls, v):
        return v.strip().lower()

    @field_validator("name")
    @classmethod
    def _strip_name(cls, v):
        if not v.strip():
            raise ValueError("Name is required")
        return v.strip()

class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: User


# ============================================================
# JOB SCHEMAS
# ============================================================

class JobListResponse(BaseModel):
    jobs: List[Job]
    total: int
    page: int
    page_size: int

class JobDetailResponse(BaseModel):
    job: Job
    has_applied: bool = False
    is_saved: bool = False

class HomeStatsResponse(BaseModel):
    job_count: int
    featured_jobs: List[Job]
    top_companies: List[Company]

class SkillListResponse(BaseModel):
    skills: List[str]

class SavedJobsResponse(BaseModel):
    saved_job_ids: List[str]
    is_saved: bool

class JobCreate(BaseModel):
    """
    Recruiter job posting form.

    Fields are checked in form order so the first problem is the one
    reported.
    """
    title: str = ""
    company: Optional[str] = None
    location: str = ""
    experience: str = ""
    min_salary: Optional[Union[float, str]] = None
    max_salary: Optional[Union[float, str]] = None
    description: str = ""
    work_mode: WorkMode = WorkMode.on_site
    skills: Union[List[str], str] = []

    @model_validator(mode="after")
    def _validate_form(self):
        if not self.title.strip():
            raise ValueError("Job Title is required")
        # company is filled from the recruiter's profile when omitted
        if self.company is not None and not self.company.strip():
            raise ValueError("Company Name is required")
        if not self.location.strip():
            raise ValueError("Location is required")
        if not self.experience.strip():
            raise ValueError("Experience range is required")

        if self.min_salary is None or str(self.min_salary).strip() == "":
            raise ValueError("Minimum Salary is required")
        if self.max_salary is None or str(self.max_salary).strip() == "":
            raise ValueError("Maximum Salary is required")
        try:
            min_sal = float(self.min_salary)
            max_sal = float(self.max_salary)
        except ValueError:
            raise ValueError("Salary must be a valid number (e.g., 10 or 15.5)")
        if not (math.isfinite(min_sal) and math.isfinite(max_sal)):
            raise ValueError("Salary must be a valid number (e.g., 10 or 15.5)")
        if min_sal < 0 or max_sal < 0:
            raise ValueError("Salary cannot be negative")
        if min_sal > max_sal:
            raise ValueError("Minimum salary cannot be higher than maximum salary")
        self.min_salary, self.max_salary = min_sal, max_sal

        if not self.description.strip():
            raise ValueError("Job Description is required")
        self.skills = split_skills(self.skills)
        if not self.skills:
            raise ValueError("At least one skill is required")
        return self


# ============================================================
# APPLICATION SCHEMAS
# ============================================================

class ApplicationWithJob(BaseModel):
    application: Application
    job: Optional[Job] = None

class ApplicationStatusUpdate(BaseModel):
    status: ApplicationStatus

class ApplicantResponse(BaseModel):
    application_id: str
    candidate_id: str
    name: str
    email: str
    designation: Optional[str] = None
    skills: List[str] = []
    resume_name: Optional[str] = None
    status: ApplicationStatus
    applied_at: str


# ============================================================
# CANDIDATE SCHEMAS
# ============================================================

class ProfileUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    designation: Optional[str] = None
    education: Optional[str] = None
    skills: Optional[Union[List[str], str]] = None
    location: Optional[str] = None

    @field_validator("skills", mode="before")
    @classmethod
    def _split_skills(cls, v):
        return None if v is None else split_skills(v)

class ProfileResponse(BaseModel):
    user: User
    completion_percentage: int

class ResumeUploadResponse(BaseModel):
    success: bool
    message: str
    filename: str
    text_extracted: bool
    completion_percentage: int

class ResumeFeedbackRequest(BaseModel):
    summary: str = ""


# ============================================================
# RECRUITER SCHEMAS
# ============================================================

class CompanyProfileUpdate(BaseModel):
    name: str = ""
    logo: str = ""
    description: str = ""
    industry: str = ""
    website: Optional[str] = None
    location: str = ""

    @field_validator("name")
    @classmethod
    def _require_name(cls, v):
        if not v.strip():
            raise ValueError("Company Name is required.")
        return v.strip()

class JobDescriptionRequest(BaseModel):
    title: str = ""
    company: Optional[str] = None


# ============================================================
# AI ASSISTANT SCHEMAS
# ============================================================

class ChatRole(str, Enum):
    user = "user"
    model = "model"

class ChatTurn(BaseModel):
    role: ChatRole
    text: str

class ChatRequest(BaseModel):
    message: str = Field(..., min_length=1, max_length=4000)
    history: List[ChatTurn] = []

    @field_validator("message")
    @classmethod
    def _require_message(cls, v):
        if not v.strip():
            raise ValueError("Message cannot be empty")
        return v

class AiTextResponse(BaseModel):
    text: str

