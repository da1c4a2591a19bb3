"""Job applications tracked by the user."""

import uuid
from datetime import date
from typing import Literal

from pydantic import BaseModel, Field

ApplicationStatus = Literal["Applied", "Interviewing", "Offer", "Rejected"]


class TrackedJob(BaseModel):
    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    company: str = Field(min_length=1, max_length=200)
    position: str = Field(min_length=1, max_length=200)
    applied_on: date = Field(default_factory=date.today)
    status: ApplicationStatus = "Applied"
    notes: str = Field(default="", max_length=5000)
