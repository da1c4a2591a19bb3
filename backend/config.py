import os

from pydantic import BaseModel, model_validator
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class ScoringThresholds(BaseModel):
    """Cut points for requirement status and overall classification.

    All cutoffs are inclusive lower bounds on a 0-100 score:
        overall >= strong_cutoff                    -> Strong
        moderate_cutoff <= overall < strong_cutoff  -> Moderate
        overall < moderate_cutoff                   -> Weak
    and likewise status_yes_cutoff / status_partial_cutoff for Yes / Partially / No.
    """

    strong_cutoff: int = 71
    moderate_cutoff: int = 40
    status_yes_cutoff: int = 60
    status_partial_cutoff: int = 30

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_ordering(self) -> "ScoringThresholds":
        if not 0 < self.moderate_cutoff < self.strong_cutoff <= 100:
            raise ValueError("expected 0 < moderate_cutoff < strong_cutoff <= 100")
        if not 0 < self.status_partial_cutoff < self.status_yes_cutoff <= 100:
            raise ValueError("expected 0 < status_partial_cutoff < status_yes_cutoff <= 100")
        return self


class Settings(BaseSettings):
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    max_upload_size_mb: int = 5
    max_job_description_chars: int = 10000
    min_input_chars: int = 50
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    debug: bool = False

    # Evaluator selection
    evaluator_mode: str = "local"  # "local" | "remote"
    remote_timeout_seconds: float = 20.0  # upper bound on one Gemini call

    thresholds: ScoringThresholds = ScoringThresholds()

    # Job tracker storage (JSON, rewritten wholesale on every change)
    tracker_path: str = "data/tracked_jobs.json"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
