"""
Company Routes

GET /companies - Company directory, searchable by name or industry
GET /companies/top - Top companies
GET /companies/{company_id} - Company details
GET /companies/{company_id}/jobs - Jobs listed under the company
"""

from fastapi import APIRouter, HTTPException, Depends, Query
from typing import List, Optional

from jobportal.db.seed_data import TOP_COMPANIES
from jobportal.schemas.schemas import Company, Job, JobQuery
from jobportal.services.document_service import JobPortalDB, get_database

router = APIRouter(prefix="/companies", tags=["Companies"])


@router.get("", response_model=List[Company])
async def list_companies(
    search: Optional[str] = Query(None, description="Search in name or industry"),
    db: JobPortalDB = Depends(get_database),
):
    return db.companies.find(search)


@router.get("/top", response_model=List[Company])
async def top_companies():
    return TOP_COMPANIES


@router.get("/{company_id}", response_model=Company)
async def get_company(company_id: str, db: JobPortalDB = Depends(get_database)):
    company = db.companies.find_one(company_id)
    if not company:
        raise HTTPException(status_code=404, detail="Company not found")
    return company


@router.get("/{company_id}/jobs", response_model=List[Job])
async def get_company_jobs(company_id: str, db: JobPortalDB = Depends(get_database)):
    """All job listings whose company is this company."""
    company = db.companies.find_one(company_id)
    if not company:
        raise HTTPException(status_code=404, detail="Company not found")
    return [j for j in db.jobs.find(JobQuery(text=company["name"])) if j["company"] == company["name"]]
