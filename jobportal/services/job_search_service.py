"""
Job Search Service

Turns search-page filters into a JobQuery, paginates results, and builds
the home page summary.
"""

from typing import List, Optional, Tuple

from jobportal.db.seed_data import TOP_COMPANIES
from jobportal.schemas.schemas import JobQuery, WorkMode
from jobportal.services.document_service import JobPortalDB

SALARY_RANGES = ["All", "0-3", "3-6", "6-10", "10-15", "15+"]
FEATURED_JOB_COUNT = 8


def parse_salary_range(salary_range: Optional[str]) -> Tuple[Optional[float], Optional[float]]:
    """
    Map a salary range option to (salary_min, salary_max) in lakhs.

    "All" or empty -> (None, None), "15+" -> (15, None), "6-10" -> (6, 10).

    Raises:
        ValueError: not one of SALARY_RANGES
    """
    if not salary_range or salary_range == "All":
        return None, None
    if salary_range not in SALARY_RANGES:
        raise ValueError(f"Invalid salary range: {salary_range!r}")
    if salary_range.endswith("+"):
        return float(salary_range[:-1]), None
    low, _, high = salary_range.partition("-")
    return float(low), float(high)


def build_query(
    text: Optional[str] = None,
    skills: Optional[List[str]] = None,
    work_mode: Optional[List[WorkMode]] = None,
    salary_range: Optional[str] = None,
    location: Optional[str] = None,
    experience: Optional[int] = None,
) -> JobQuery:
    salary_min, salary_max = parse_salary_range(salary_range)
    return JobQuery(
        text=(text or "").strip() or None,
        skills=skills or [],
        work_mode=work_mode or [],
        salary_min=salary_min,
        salary_max=salary_max,
        location=(location or "").strip() or None,
        experience=experience,
    )


def search_jobs(db: JobPortalDB, query: JobQuery, page: int = 1, page_size: int = 20) -> Tuple[List[dict], int]:
    """Return (jobs on the requested page, total matches)."""
    results = db.jobs.find(query)
    offset = (page - 1) * page_size
    return results[offset:offset + page_size], len(results)


def home_stats(db: JobPortalDB) -> dict:
    return {
        "job_count": db.jobs.count(),
        "featured_jobs": db.jobs.find()[:FEATURED_JOB_COUNT],
        "top_companies": TOP_COMPANIES,
    }
