"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
Field aliases keep the camelCase names the web client already sends.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List
from datetime import datetime
from enum import Enum


# ============================================================
# ENUMS
# ============================================================

class JobType(str, Enum):
    job = "job"
    internship = "internship"


class AtsFriendliness(str, Enum):
    excellent = "Excellent"
    good = "Good"
    average = "Average"
    poor = "Poor"


# ============================================================
# JOB SCHEMAS
# ============================================================

class JobBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    img: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    is_wfh: Optional[bool] = Field(None, alias="isWFH")
    tags: List[str] = []
    apply_url: Optional[str] = Field(None, alias="applyUrl")
    job_type: JobType = Field(JobType.job, alias="type")

    # Structured fields for the listing table
    role: Optional[str] = None
    qualification: Optional[str] = None
    batch: Optional[str] = None
    experience: Optional[str] = None
    salary: Optional[str] = None
    last_date: Optional[datetime] = Field(None, alias="lastDate")


class JobCreate(JobBase):
    title: str = Field(..., min_length=1)
    company: str = Field(..., min_length=1)
    posted_at: Optional[datetime] = Field(None, alias="postedAt")


class JobUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    title: Optional[str] = Field(None, min_length=1)
    company: Optional[str] = Field(None, min_length=1)
    img: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    is_wfh: Optional[bool] = Field(None, alias="isWFH")
    tags: Optional[List[str]] = None
    apply_url: Optional[str] = Field(None, alias="applyUrl")
    job_type: Optional[JobType] = Field(None, alias="type")
    role: Optional[str] = None
    qualification: Optional[str] = None
    batch: Optional[str] = None
    experience: Optional[str] = None
    salary: Optional[str] = None
    last_date: Optional[datetime] = Field(None, alias="lastDate")


class JobResponse(JobBase):
    id: str = Field(..., alias="_id")
    title: str
    company: str
    posted_at: Optional[datetime] = Field(None, alias="postedAt")


# ============================================================
# SUBSCRIBER SCHEMAS
# ============================================================

class SubscribeRequest(BaseModel):
    # Presence is checked in the route so the client gets {"error": ...}
    email: Optional[str] = None


# ============================================================
# AI HELPER SCHEMAS
# ============================================================

class ChatTurn(BaseModel):
    # Anything other than "user" renders as the assistant
    role: str = "user"
    content: str = ""


class ChatRequest(BaseModel):
    message: Optional[str] = None
    # null and missing both mean "no prior turns"
    history: Optional[List[ChatTurn]] = None


class ChatResponse(BaseModel):
    reply: str


class Feedback(BaseModel):
    """ATS feedback for one resume. Built per request, never persisted."""
    model_config = ConfigDict(frozen=True, use_enum_values=True)

    ats_score: int = Field(..., ge=0, le=100)
    ats_friendliness: AtsFriendliness
    strengths: List[str] = []
    weaknesses: List[str] = []
    recommendations: List[str] = []


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
