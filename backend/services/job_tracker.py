"""JSON-file store for tracked job applications.

The whole list is read and rewritten on every mutation; the file is
small and the access pattern is read-mostly.
"""

import logging
import threading
from pathlib import Path

from pydantic import TypeAdapter

from models.requests import TrackedJobCreate, TrackedJobUpdate
from models.schemas.tracked_job import TrackedJob
from services.errors import TrackedJobNotFoundError

logger = logging.getLogger(__name__)

_jobs_adapter = TypeAdapter(list[TrackedJob])


class JobTracker:
    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    def _load(self) -> list[TrackedJob]:
        if not self.path.exists():
            return []
        raw = self.path.read_bytes()
        if not raw.strip():
            return []
        return _jobs_adapter.validate_json(raw)

    def _save(self, jobs: list[TrackedJob]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp.write_bytes(_jobs_adapter.dump_json(jobs, indent=2))
        tmp.replace(self.path)

    def list_jobs(self) -> list[TrackedJob]:
        with self._lock:
            return self._load()

    def add_job(self, data: TrackedJobCreate) -> TrackedJob:
        fields = data.model_dump(exclude_none=True)
        job = TrackedJob(**fields)
        with self._lock:
            jobs = self._load()
            jobs.append(job)
            self._save(jobs)
        logger.info("Tracking %s at %s (%s)", job.position, job.company, job.id)
        return job

    def update_job(self, job_id: str, changes: TrackedJobUpdate) -> TrackedJob:
        with self._lock:
            jobs = self._load()
            for i, job in enumerate(jobs):
                if job.id == job_id:
                    updated = job.model_copy(update=changes.model_dump(exclude_none=True))
                    jobs[i] = TrackedJob.model_validate(updated.model_dump())
                    self._save(jobs)
                    return jobs[i]
        raise TrackedJobNotFoundError(f"Tracked job {job_id} not found")

    def remove_job(self, job_id: str) -> None:
        with self._lock:
            jobs = self._load()
            remaining = [job for job in jobs if job.id != job_id]
            if len(remaining) == len(jobs):
                raise TrackedJobNotFoundError(f"Tracked job {job_id} not found")
            self._save(remaining)
