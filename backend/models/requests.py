from datetime import date

from pydantic import BaseModel, Field

from models.schemas.tracked_job import ApplicationStatus


class QuickAnalyzeRequest(BaseModel):
    resume_text: str = Field(..., max_length=50000, description="Plain text resume content")
    job_description: str = Field(..., max_length=10000, description="Job description text")


class TrackedJobCreate(BaseModel):
    company: str = Field(..., min_length=1, max_length=200)
    position: str = Field(..., min_length=1, max_length=200)
    applied_on: date | None = None
    status: ApplicationStatus = "Applied"
    notes: str = Field(default="", max_length=5000)


class TrackedJobUpdate(BaseModel):
    company: str | None = Field(default=None, min_length=1, max_length=200)
    position: str | None = Field(default=None, min_length=1, max_length=200)
    applied_on: date | None = None
    status: ApplicationStatus | None = None
    notes: str | None = Field(default=None, max_length=5000)
