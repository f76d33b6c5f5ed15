from __future__ import annotations
import os
import logging
from typing import List
from contextlib import asynccontextmanager
from fastapi import FastAPI, UploadFile, File, HTTPException, Depends
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from config import get_settings, configure_logging
from models import Base
from schemas import (
    ResumeDocument, JobDescription, JobExtractRequest, AnalysisRequest, AnalysisResponse,
    HistoryRecord, SalaryTrend, SkillRecommendation,
)
from parsers.extract import DocumentExtractor, UploadRejected
from parsers.jd_extract import fetch_job_posting, JobFetchError
from matching.analysis import get_salary_trends, get_learning_recommendations, AnalysisValidationError
from matching.response import ResponseParseError
from history_store import HistoryStore
from orchestrator import AnalysisSession, HistoryUnavailable
from auth import current_user_email

configure_logging()
logger = logging.getLogger(__name__)

settings = get_settings()
engine = None
Session = sessionmaker(autoflush=False, autocommit=False, future=True)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the history database on startup."""
    global engine

    if settings.database_url.startswith("sqlite:///"):
        os.makedirs(settings.base_dir, exist_ok=True)
    logger.info(f"Database URL: {settings.database_url}")
    engine = create_engine(settings.database_url, future=True)
    Session.configure(bind=engine)
    Base.metadata.create_all(engine)

    yield
    logger.info("Application shutting down.")


app = FastAPI(title="JobInsight Resume Analyzer", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # restrict for prod
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_history_store() -> HistoryStore:
    return HistoryStore(Session)


def _run_session(session: AnalysisSession) -> AnalysisResponse:
    try:
        result = session.analyze()
    except AnalysisValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ResponseParseError as e:
        # The client shows this with a retry button
        raise HTTPException(status_code=502, detail=str(e))
    return AnalysisResponse(
        result=result,
        recommendations=session.recommendations,
        history_record=session.save(),
    )


# -------------------------------------------------------------------
# Routes
# -------------------------------------------------------------------
@app.get("/health")
def health_check() -> dict:
    return {"status": "ok"}


@app.post("/resumes/upload", response_model=ResumeDocument)
async def upload_resume(resume: UploadFile = File(...)):
    data = await resume.read()
    try:
        return DocumentExtractor().parse(data, resume.content_type or "", resume.filename or "resume")
    except UploadRejected as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))


@app.post("/jobs/extract", response_model=JobDescription)
def extract_job(req: JobExtractRequest):
    """Fetch a job posting URL and return its description text."""
    try:
        return fetch_job_posting(req.url)
    except JobFetchError as e:
        raise HTTPException(
            status_code=400 if not e.url else 502,
            detail={
                "message": str(e),
                "url": e.url,
                "upstreamStatus": e.status_code,
                "suggestion": "paste",
            },
        )


@app.post("/analysis", response_model=AnalysisResponse)
def analyze(
    req: AnalysisRequest,
    email: str = Depends(current_user_email),
    store: HistoryStore = Depends(get_history_store),
):
    """Analyze a resume against a job description and save it to history."""
    session = AnalysisSession(history=store, user_email=email)
    session.set_resume_text(req.resume_text)
    session.set_job_text(req.job_description)
    return _run_session(session)


@app.get("/history", response_model=List[HistoryRecord])
def list_history(
    email: str = Depends(current_user_email),
    store: HistoryStore = Depends(get_history_store),
):
    return store.load(email)


@app.post("/history/{record_id}/view", response_model=AnalysisResponse)
def view_history(
    record_id: str,
    email: str = Depends(current_user_email),
    store: HistoryStore = Depends(get_history_store),
):
    """Re-run the analysis for a stored record. Nothing new is saved."""
    record = store.get(email, record_id)
    if record is None:
        raise HTTPException(status_code=404, detail=f"History entry {record_id} not found.")
    try:
        session = AnalysisSession.from_history(record, history=store, user_email=email)
    except HistoryUnavailable as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _run_session(session)


@app.get("/insights/salary-trends", response_model=List[SalaryTrend])
def salary_trends():
    return get_salary_trends()


@app.get("/insights/recommendations", response_model=List[SkillRecommendation])
def learning_recommendations():
    return get_learning_recommendations()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
