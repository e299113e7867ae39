#!/usr/bin/env python3
"""
Job Taxonomy - FastAPI Backend

Provides read-only REST API endpoints for gear tools to query jobs,
relevant stats, restriction codes and equipment slots.
"""

from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from job_database import (
    get_all_jobs,
    get_base_job,
    get_job,
    relevant_stats,
    with_descendants,
)
from models import Job, PRIMARY_SLOTS, Slot
from restrictions import (
    describe_restriction,
    get_restriction_codes,
    get_restriction_table,
    resolve_restriction,
)


# =============================================================================
# RESPONSE MODELS
# =============================================================================

class StatusResponse(BaseModel):
    status: str
    job_count: int
    restriction_count: int


class JobInfo(BaseModel):
    code: str
    name: str
    family: str
    category: str
    armor: str


class JobDetail(JobInfo):
    main_stats: List[str]
    supporting_stats: List[str]
    relevant_stats: List[str]
    descendants: List[str]
    base_job: Optional[str] = None


class RestrictionInfo(BaseModel):
    code: str
    description: str


class RestrictionDetail(RestrictionInfo):
    jobs: List[str]


class SlotInfo(BaseModel):
    code: str
    name: str
    primary: bool


def _stat_names(stats) -> List[str]:
    return sorted(stat.value for stat in stats)


def _job_info(job: Job) -> JobInfo:
    return JobInfo(
        code=job.abbreviation,
        name=job.name,
        family=job.family.value,
        category=job.category.value,
        armor=job.armor.name.lower(),
    )


def _job_detail(job: Job) -> JobDetail:
    base = get_base_job(job)
    return JobDetail(
        **_job_info(job).model_dump(),
        main_stats=_stat_names(job.main_stats),
        supporting_stats=_stat_names(job.supporting_stats),
        relevant_stats=_stat_names(relevant_stats(job)),
        descendants=sorted(j.abbreviation for j in with_descendants(job) if j != job),
        base_job=base.abbreviation if base else None,
    )


# =============================================================================
# APP
# =============================================================================

app = FastAPI(
    title="Job Taxonomy",
    description="Job stat priorities and gear restriction codes",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/api/status", response_model=StatusResponse)
async def get_status():
    """Get the current application status."""
    return StatusResponse(
        status="ready",
        job_count=len(get_all_jobs()),
        restriction_count=len(get_restriction_table()),
    )


@app.get("/api/jobs", response_model=List[JobInfo])
async def get_jobs():
    """Get list of all jobs."""
    jobs = sorted(get_all_jobs(), key=lambda j: j.abbreviation)
    return [_job_info(job) for job in jobs]


@app.get("/api/jobs/{abbreviation}", response_model=JobDetail)
async def get_job_detail(abbreviation: str):
    """Get a job with its stat classification and advanced jobs."""
    job = get_job(abbreviation)
    if job is None:
        raise HTTPException(status_code=404, detail=f"Job not found: {abbreviation}")
    return _job_detail(job)


@app.get("/api/restrictions", response_model=List[RestrictionInfo])
async def get_restrictions():
    """Get all restriction codes."""
    return [
        RestrictionInfo(code=code, description=describe_restriction(code))
        for code in get_restriction_codes()
    ]


@app.get("/api/restrictions/{code}", response_model=RestrictionDetail)
async def get_restriction(code: str):
    """Get the jobs allowed to equip gear marked with a restriction code."""
    jobs = resolve_restriction(code)
    if jobs is None:
        raise HTTPException(status_code=404, detail=f"Restriction code not found: {code}")
    return RestrictionDetail(
        code=code,
        description=describe_restriction(code),
        jobs=sorted(job.abbreviation for job in jobs),
    )


@app.get("/api/slots", response_model=List[SlotInfo])
async def get_slots():
    """Get equipment slots."""
    return [
        SlotInfo(code=slot.code, name=slot.name.lower(), primary=slot in PRIMARY_SLOTS)
        for slot in Slot
    ]
