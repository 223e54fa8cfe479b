from __future__ import annotations
import logging
from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI, File, HTTPException, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from chat.orchestrator import AnalysisOrchestrator
from matching.llm_gemini import GeminiClient
from parsers.pdf import PdfExtractionError, pdf_to_text
from schemas import AnalyzeRequest, AnalyzeResponse, ExtractResponse
from settings import Settings, configure_logging, load_settings

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPES = {"application/pdf", "application/x-pdf"}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load and validate configuration once, before the first request."""
    settings = load_settings()
    configure_logging(settings.log_level)
    app.state.settings = settings
    app.state.client = GeminiClient(settings)
    logger.info("Using model %s", settings.model_name)

    yield
    logger.info("Application shutting down.")


app = FastAPI(title="JobAI Assistant", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_client(request: Request) -> GeminiClient:
    return request.app.state.client


# -------------------------------------------------------------------
# Routes
# -------------------------------------------------------------------
@app.get("/health")
def health(settings: Settings = Depends(get_settings)):
    return {"status": "ok", "model": settings.model_name}


@app.post("/analyze", response_model=AnalyzeResponse)
def analyze(
    body: AnalyzeRequest,
    settings: Settings = Depends(get_settings),
    client=Depends(get_client),
):
    """Run one analysis and return the transcript it produced."""
    if not body.resume.strip() or not body.job_description.strip():
        raise HTTPException(status_code=400, detail="resume and job_description cannot be empty.")

    orchestrator = AnalysisOrchestrator(client, legacy_score_bands=settings.legacy_score_bands)
    orchestrator.resume = body.resume
    orchestrator.job_description = body.job_description
    match = orchestrator.submit()

    return AnalyzeResponse(
        messages=list(orchestrator.conversation),
        match=match,
        model=settings.model_name,
    )


@app.post("/resume/extract", response_model=ExtractResponse)
def extract_resume(resume: UploadFile = File(...)):
    filename = resume.filename or ""
    if resume.content_type not in PDF_CONTENT_TYPES and not filename.lower().endswith(".pdf"):
        raise HTTPException(status_code=415, detail="Only PDF resumes are supported.")

    try:
        text = pdf_to_text(resume.file)
    except PdfExtractionError as e:
        raise HTTPException(status_code=422, detail=f"Failed to read PDF: {e}")

    return ExtractResponse(filename=resume.filename, text=text, characters=len(text))


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app:app", host="0.0.0.0", port=8000)
