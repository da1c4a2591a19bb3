from typing import Literal

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, Request, Response, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_analysis_evaluator, get_job_tracker
from config import settings
from models.requests import QuickAnalyzeRequest, TrackedJobCreate, TrackedJobUpdate
from models.responses import AnalysisResponse
from models.schemas.tracked_job import TrackedJob
from services import document_builder, resume_analyzer, text_extractor
from services.document_writer import get_writer
from services.errors import (
    DocumentWriteError,
    InputValidationError,
    NoRequirementsError,
    TextExtractionError,
    TrackedJobNotFoundError,
)
from services.evaluators import Evaluator
from services.job_tracker import JobTracker

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)

DocumentKind = Literal["cover-letter", "enhanced-resume", "gap-table"]
DocumentFormat = Literal["txt", "docx", "pdf"]


async def _run_analysis(
    resume_text: str, job_description: str, evaluator: Evaluator
) -> AnalysisResponse:
    try:
        return await resume_analyzer.analyze(resume_text, job_description, evaluator)
    except InputValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except NoRequirementsError as e:
        raise HTTPException(status_code=422, detail=e.message)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "evaluator_mode": settings.evaluator_mode,
        "gemini_configured": bool(settings.gemini_api_key),
    }


@router.post("/analyze", response_model=AnalysisResponse)
@limiter.limit("10/minute")
async def analyze(
    request: Request,
    job_description: str = Form(...),
    resume_text: str = Form(""),
    resume_file: UploadFile | None = File(None),
    evaluator: Evaluator = Depends(get_analysis_evaluator),
):
    if len(job_description) > settings.max_job_description_chars:
        raise HTTPException(
            status_code=400,
            detail=f"Job description too long (max {settings.max_job_description_chars} chars)",
        )

    uploaded_text = ""
    if resume_file is not None and resume_file.filename:
        content = await resume_file.read()
        max_bytes = settings.max_upload_size_mb * 1024 * 1024
        if len(content) > max_bytes:
            raise HTTPException(
                status_code=400,
                detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
            )
        try:
            uploaded_text = text_extractor.extract_text(resume_file.filename, content)
        except TextExtractionError as e:
            raise HTTPException(status_code=400, detail=e.message)

    # Uploaded and pasted text are analyzed together
    combined = f"{uploaded_text}\n{resume_text}"
    return await _run_analysis(combined, job_description, evaluator)


@router.post("/analyze/quick", response_model=AnalysisResponse)
@limiter.limit("10/minute")
async def analyze_quick(
    request: Request,
    body: QuickAnalyzeRequest,
    evaluator: Evaluator = Depends(get_analysis_evaluator),
):
    return await _run_analysis(body.resume_text, body.job_description, evaluator)


@router.post("/documents/{kind}")
@limiter.limit("30/minute")
async def generate_document(
    request: Request,
    kind: DocumentKind,
    body: QuickAnalyzeRequest,
    fmt: DocumentFormat = Query("txt", alias="format"),
    evaluator: Evaluator = Depends(get_analysis_evaluator),
):
    try:
        ctx = await resume_analyzer.build_context(
            body.resume_text, body.job_description, evaluator
        )
    except InputValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except NoRequirementsError as e:
        raise HTTPException(status_code=422, detail=e.message)

    text = document_builder.build_document(kind, ctx)
    writer = get_writer(fmt)
    try:
        content = writer.write(text)
    except DocumentWriteError as e:
        raise HTTPException(status_code=500, detail=e.message)

    filename = f"{kind}.{writer.extension}"
    return Response(
        content=content,
        media_type=writer.media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/jobs", response_model=list[TrackedJob])
def list_jobs(tracker: JobTracker = Depends(get_job_tracker)):
    return tracker.list_jobs()


@router.post("/jobs", response_model=TrackedJob, status_code=201)
def add_job(body: TrackedJobCreate, tracker: JobTracker = Depends(get_job_tracker)):
    return tracker.add_job(body)


@router.patch("/jobs/{job_id}", response_model=TrackedJob)
def update_job(
    job_id: str,
    body: TrackedJobUpdate,
    tracker: JobTracker = Depends(get_job_tracker),
):
    try:
        return tracker.update_job(job_id, body)
    except TrackedJobNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.delete("/jobs/{job_id}", status_code=204)
def remove_job(job_id: str, tracker: JobTracker = Depends(get_job_tracker)):
    try:
        tracker.remove_job(job_id)
    except TrackedJobNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    return Response(status_code=204)
