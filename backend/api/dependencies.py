"""Shared dependencies for API routes."""

from functools import lru_cache

from config import settings
from services.evaluators import Evaluator, get_evaluator
from services.job_tracker import JobTracker


def get_analysis_evaluator() -> Evaluator:
    return get_evaluator(settings.evaluator_mode)


@lru_cache
def get_job_tracker() -> JobTracker:
    return JobTracker(settings.tracker_path)
