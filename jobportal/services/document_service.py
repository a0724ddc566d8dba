"""
Document Service - a small document-store client over the storage shim.

Collections in this database:
1. jobs          - Job listings (seeded dataset + recruiter postings)
2. users         - Candidates and recruiters
3. applications  - Candidate applications to job listings
4. companies     - Company directory

Each collection is one JSON list saved under "<prefix><name>". Queries are
linear scans and every write rewrites the whole collection. There are no
indexes and no transactions.
"""

import json
import random
import re
import time
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from jobportal.core.config import Settings, get_settings
from jobportal.core.exceptions import AlreadyAppliedError, StorageCorruptedError
from jobportal.core.log import get_logger
from jobportal.db.seed_data import MOCK_COMPANIES, generate_job_dataset
from jobportal.db.storage import Storage, get_storage
from jobportal.schemas.schemas import ApplicationStatus, JobQuery

logger = get_logger(__name__)

COLLECTIONS = {
    "jobs": "jobs",
    "users": "users",
    "applications": "applications",
    "companies": "companies",
}

_EXPERIENCE_RE = re.compile(r"(\d+)\s*(?:-\s*(\d+))?")


def parse_experience_range(experience: str) -> Optional[Tuple[int, int]]:
    """'5-10 Yrs' -> (5, 10), '3 Yrs' -> (3, 3), anything else -> None."""
    match = _EXPERIENCE_RE.search(experience or "")
    if not match:
        return None
    low = int(match.group(1))
    high = int(match.group(2)) if match.group(2) else low
    return low, high


# ============================================================
# BASE COLLECTION
# ============================================================

class BaseCollection:
    """
    One JSON list under one storage key.

    Reads tolerate missing or corrupted data (empty list). Writes refuse to
    overwrite a corrupted blob.
    """

    def __init__(self, storage: Storage, key: str):
        self.storage = storage
        self.key = key

    def _parse(self) -> List[dict]:
        raw = self.storage.get_item(self.key)
        if raw is None:
            return []
        try:
            docs = json.loads(raw)
        except ValueError:
            raise StorageCorruptedError(self.key)
        if not isinstance(docs, list):
            raise StorageCorruptedError(self.key)
        return docs

    def _read_all(self) -> List[dict]:
        try:
            return self._parse()
        except StorageCorruptedError:
            logger.warning("Corrupted data under '%s', reading as empty", self.key)
            return []

    def _load_for_write(self) -> List[dict]:
        return self._parse()

    def _save(self, docs: List[dict]) -> None:
        self.storage.set_item(self.key, json.dumps(docs))

    def count(self) -> int:
        return len(self._read_all())


# ============================================================
# JOBS COLLECTION
# ============================================================

class JobCollection(BaseCollection):
    """Job listings, newest postings first."""

    def find(self, query: Optional[JobQuery] = None) -> List[dict]:
        """
        Return all jobs matching every criterion set on the query.

        Args:
            query: JobQuery filters; None returns every job

        Returns:
            Matching job documents in storage order
        """
        jobs = self._read_all()
        if query is None:
            return jobs
        return [job for job in jobs if self._matches(job, query)]

    @staticmethod
    def _matches(job: dict, query: JobQuery) -> bool:
        if query.text:
            text = query.text.lower()
            if text not in job.get("title", "").lower() and text not in job.get("company", "").lower():
                return False
        if query.skills and not any(s in job.get("skills", []) for s in query.skills):
            return False
        if query.work_mode and job.get("work_mode") not in query.work_mode:
            return False
        if query.salary_min is not None and (job.get("max_salary") or 0) < query.salary_min:
            return False
        if query.salary_max is not None and (job.get("min_salary") or 0) > query.salary_max:
            return False
        if query.location and query.location.lower() not in job.get("location", "").lower():
            return False
        if query.experience is not None:
            bounds = parse_experience_range(job.get("experience", ""))
            if bounds and not (bounds[0] <= query.experience <= bounds[1]):
                return False
        return True

    def find_one(self, job_id: str) -> Optional[dict]:
        """Fetch a job by id."""
        return next((j for j in self._read_all() if j.get("id") == job_id), None)

    def find_many(self, job_ids: List[str]) -> List[dict]:
        """Fetch jobs by id, keeping the order of job_ids and skipping unknown ids."""
        by_id = {j.get("id"): j for j in self._read_all()}
        return [by_id[job_id] for job_id in job_ids if job_id in by_id]

    def insert_one(self, job: dict) -> dict:
        """Insert a job at the front of the collection."""
        jobs = self._load_for_write()
        if any(j.get("id") == job["id"] for j in jobs):
            raise ValueError(f"Job '{job['id']}' already exists")
        jobs.insert(0, job)
        self._save(jobs)
        return job

    def distinct_skills(self) -> List[str]:
        """Sorted unique skills across all jobs."""
        skills = set()
        for job in self._read_all():
            skills.update(job.get("skills", []))
        return sorted(skills)

    def increment_applicants(self, job_id: str) -> bool:
        jobs = self._load_for_write()
        for job in jobs:
            if job.get("id") == job_id:
                job["applicants_count"] = job.get("applicants_count", 0) + 1
                self._save(jobs)
                return True
        return False


# ============================================================
# USERS COLLECTION
# ============================================================

class UserCollection(BaseCollection):

    def find_one(self, email: str) -> Optional[dict]:
        """Fetch a user by exact email."""
        return next((u for u in self._read_all() if u.get("email") == email), None)

    def find_by_id(self, user_id: str) -> Optional[dict]:
        return next((u for u in self._read_all() if u.get("id") == user_id), None)

    def find_many(self, user_ids: List[str]) -> Dict[str, dict]:
        wanted = set(user_ids)
        return {u["id"]: u for u in self._read_all() if u.get("id") in wanted}

    def insert_one(self, user: dict) -> dict:
        """
        Insert a user.

        If a user with the same email already exists, the stored user is
        returned and nothing is written.
        """
        users = self._load_for_write()
        existing = next((u for u in users if u.get("email") == user["email"]), None)
        if existing:
            return existing
        users.append(user)
        self._save(users)
        return user

    def update_one(self, user_id: str, updates: Dict[str, Any]) -> Optional[dict]:
        """
        Shallow-merge updates into a stored user.

        Returns:
            The merged user, or None if no user has that id
        """
        users = self._load_for_write()
        for index, user in enumerate(users):
            if user.get("id") == user_id:
                users[index] = {**user, **updates}
                self._save(users)
                return users[index]
        return None


# ============================================================
# APPLICATIONS COLLECTION
# ============================================================

class ApplicationCollection(BaseCollection):

    def __init__(self, storage: Storage, key: str, jobs: JobCollection):
        super().__init__(storage, key)
        self.jobs = jobs

    def find(self, candidate_id: Optional[str] = None, job_id: Optional[str] = None) -> List[dict]:
        """Return applications matching all given filters."""
        results = []
        for app in self._read_all():
            if candidate_id and app.get("candidate_id") != candidate_id:
                continue
            if job_id and app.get("job_id") != job_id:
                continue
            results.append(app)
        return results

    def find_one(self, application_id: str) -> Optional[dict]:
        return next((a for a in self._read_all() if a.get("id") == application_id), None)

    def insert_one(self, candidate_id: str, job_id: str) -> dict:
        """
        Create an application and bump the job's applicant count.

        The two collections are written one after the other; there is no
        rollback if the second write fails.

        Raises:
            AlreadyAppliedError: the candidate already applied to this job
        """
        apps = self._load_for_write()
        if any(a.get("candidate_id") == candidate_id and a.get("job_id") == job_id for a in apps):
            raise AlreadyAppliedError()

        existing_ids = {a.get("id") for a in apps}
        stamp = int(time.time() * 1000)
        while f"app-{stamp}" in existing_ids:
            stamp += 1

        application = {
            "id": f"app-{stamp}",
            "job_id": job_id,
            "candidate_id": candidate_id,
            "status": ApplicationStatus.applied.value,
            "applied_at": datetime.now(timezone.utc).isoformat(),
        }
        apps.append(application)
        self._save(apps)

        if not self.jobs.increment_applicants(job_id):
            logger.warning("Application %s references unknown job %s", application["id"], job_id)
        return application

    def update_status(self, application_id: str, status: ApplicationStatus) -> Optional[dict]:
        apps = self._load_for_write()
        for app in apps:
            if app.get("id") == application_id:
                app["status"] = status.value
                self._save(apps)
                return app
        return None


# ============================================================
# COMPANIES COLLECTION
# ============================================================

class CompanyCollection(BaseCollection):

    def find(self, search: Optional[str] = None) -> List[dict]:
        """Companies whose name or industry contains the search text."""
        companies = self._read_all()
        if not search:
            return companies
        needle = search.lower()
        return [
            c for c in companies
            if needle in c.get("name", "").lower() or needle in c.get("industry", "").lower()
        ]

    def find_one(self, company_id: str) -> Optional[dict]:
        return next((c for c in self._read_all() if c.get("id") == company_id), None)

    def find_by_name(self, name: str) -> Optional[dict]:
        needle = (name or "").lower()
        return next((c for c in self._read_all() if c.get("name", "").lower() == needle), None)


# ============================================================
# DATABASE
# ============================================================

class JobPortalDB:
    """
    Entry point to all collections.

    Usage:
        db = get_database()
        db.jobs.find(JobQuery(text="engineer"))
        db.applications.insert_one(candidate_id, job_id)
    """

    def __init__(self, storage: Storage, settings: Optional[Settings] = None,
                 rng: Optional[random.Random] = None):
        self.storage = storage
        self.settings = settings or get_settings()
        prefix = self.settings.storage_key_prefix
        self.keys = {name: f"{prefix}{coll}" for name, coll in COLLECTIONS.items()}

        self.jobs = JobCollection(storage, self.keys["jobs"])
        self.users = UserCollection(storage, self.keys["users"])
        self.applications = ApplicationCollection(storage, self.keys["applications"], self.jobs)
        self.companies = CompanyCollection(storage, self.keys["companies"])

        if rng is None and self.settings.seed_random_seed is not None:
            rng = random.Random(self.settings.seed_random_seed)
        self._rng = rng
        self.init()

    def _jobs_need_seed(self) -> bool:
        raw = self.storage.get_item(self.keys["jobs"])
        if raw is None:
            return True
        try:
            parsed = json.loads(raw)
        except ValueError:
            logger.warning("Corrupted job data in storage, resetting...")
            return True
        if not isinstance(parsed, list):
            logger.warning("Corrupted job data in storage, resetting...")
            return True
        return len(parsed) < self.settings.seed_min_jobs

    def init(self) -> None:
        """Seed missing collections."""
        try:
            if self._jobs_need_seed():
                self.reseed_jobs()

            if self.storage.get_item(self.keys["companies"]) is None:
                self.storage.set_item(self.keys["companies"], json.dumps(MOCK_COMPANIES))

            for name in ("applications", "users"):
                if self.storage.get_item(self.keys[name]) is None:
                    self.storage.set_item(self.keys[name], json.dumps([]))
        except Exception:
            logger.exception("Critical failure during document store initialization")
            raise

    def reseed_jobs(self, rng: Optional[random.Random] = None) -> int:
        """
        Replace the job collection with a freshly generated dataset.

        An explicit rng is used as given; otherwise the database's own
        random source is used.
        """
        jobs = generate_job_dataset(self.settings.seed_target_jobs, rng=rng or self._rng)
        self.storage.set_item(self.keys["jobs"], json.dumps(jobs))
        logger.info("Seeded %d jobs", len(jobs))
        return len(jobs)


# Singleton instance
_database: JobPortalDB = None


def get_database() -> JobPortalDB:
    """Get or create the document store (singleton pattern)"""
    global _database
    if _database is None:
        _database = JobPortalDB(get_storage())
    return _database
