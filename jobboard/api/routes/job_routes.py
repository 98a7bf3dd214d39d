"""
Job Routes

GET /jobs - List all postings, newest first
POST /jobs - Create a posting
GET /jobs/{job_id} - Get posting details
PUT /jobs/{job_id} - Update a posting (partial)
DELETE /jobs/{job_id} - Delete a posting
"""

from fastapi import APIRouter, Depends
from typing import List

from jobboard.api.deps import get_job_service
from jobboard.services.mongo_service import JobService
from jobboard.schemas.schemas import (
    JobCreate, JobUpdate, JobResponse, MessageResponse, ErrorResponse
)

router = APIRouter(prefix="/jobs", tags=["Jobs"])

NOT_FOUND = {404: {"model": ErrorResponse}}


@router.get("", response_model=List[JobResponse])
async def list_jobs(jobs: JobService = Depends(get_job_service)):
    """List all job postings sorted by post date (newest first)."""
    return jobs.list_all()


@router.post("", response_model=JobResponse)
async def create_job(job: JobCreate, jobs: JobService = Depends(get_job_service)):
    """Create a new job or internship posting."""
    return jobs.insert(job.model_dump(by_alias=True, exclude_none=True))


@router.get("/{job_id}", response_model=JobResponse, responses=NOT_FOUND)
async def get_job(job_id: str, jobs: JobService = Depends(get_job_service)):
    """Get details of a specific job."""
    return jobs.get_by_id(job_id)


@router.put("/{job_id}", response_model=JobResponse, responses=NOT_FOUND)
async def update_job(job_id: str, update: JobUpdate, jobs: JobService = Depends(get_job_service)):
    """Update a job posting. Only provided fields are changed."""
    changes = update.model_dump(by_alias=True, exclude_unset=True)
    return jobs.update(job_id, changes)


@router.delete("/{job_id}", response_model=MessageResponse, responses=NOT_FOUND)
async def delete_job(job_id: str, jobs: JobService = Depends(get_job_service)):
    """Delete a job posting."""
    jobs.delete(job_id)
    return MessageResponse(message="Job deleted")
