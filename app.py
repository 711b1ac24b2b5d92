from __future__ import annotations
import logging
from typing import List, Optional
from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI, File, Form, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from config import API_VERSION, LOG_LEVEL, MODEL_NAME, OPENAI_API_KEY, PROJECT_NAME
from errors import ValidationError
from schemas import AnalysisRequest, UploadedFile
from matching.batch import analyze_batch
from matching.llm_client import LLMClient

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the shared LLM client once per process."""
    if not OPENAI_API_KEY:
        logger.warning("OPENAI_API_KEY is not set; analysis requests will fail.")
    app.state.llm_client = LLMClient()
    logger.info(f"Using model: {MODEL_NAME}")

    yield
    logger.info("Application shutting down.")


app = FastAPI(title=PROJECT_NAME, version=API_VERSION, lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_llm_client(request: Request) -> LLMClient:
    return request.app.state.llm_client


# -------------------------------------------------------------------
# Routes
# -------------------------------------------------------------------
@app.get("/")
async def root():
    return {"name": PROJECT_NAME, "version": API_VERSION, "model": MODEL_NAME}


@app.post("/api/analyze", response_class=PlainTextResponse)
async def analyze(
    jobDesc: Optional[str] = Form(None),
    files: Optional[List[UploadFile]] = File(None),
    client: LLMClient = Depends(get_llm_client),
):
    """Score every uploaded CV against the job description; returns the combined text report."""
    try:
        uploads = [UploadedFile(file_name=f.filename or "", content=await f.read()) for f in files or []]
        req = AnalysisRequest(job_description=jobDesc or "", files=uploads)
        report = await analyze_batch(req.job_description, req.files, client)
        return PlainTextResponse(report.to_text(), status_code=200)

    except ValidationError as e:
        return PlainTextResponse(str(e), status_code=400)
    except Exception as e:
        logger.exception("Error in analyze route")
        return PlainTextResponse(f"Failed to analyze CVs: {e}", status_code=500)
