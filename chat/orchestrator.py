import logging
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from chat.conversation import Conversation
from matching.prompts import build_analysis_prompt
from matching.scorer import calculate_match_score, select_score_feedback
from parsers.basic_extract import has_email
from parsers.pdf import pdf_to_text
from schemas import MatchResult

logger = logging.getLogger(__name__)

USER_REQUEST_MESSAGE = "Here are my details. Please analyze them."
EMPTY_ANALYSIS_MESSAGE = "I couldn't generate an analysis. Please try again."
API_ERROR_MESSAGE = "Error: Something went wrong with the API."
MISSING_EMAIL_MESSAGE = (
    "You've missed to include your email in your resume, "
    "consider adding it so the interview panel can follow up."
)


class AnalysisClient(Protocol):
    def generate(self, prompt: str) -> str: ...


@dataclass(frozen=True)
class PendingSubmission:
    """Inputs captured when a submission starts; scoring runs on these, not the live fields."""
    resume: str
    job_description: str


class AnalysisOrchestrator:
    """
    Drives one chat session: holds the two input fields, the transcript and the
    loading flag, and moves a submission through idle -> submitting -> idle.

    A submission has two explicit phases so the intermediate state can be
    observed: begin() appends the user's message and sets loading; resolve()
    or reject() appends the outcome and clears loading.
    """

    def __init__(
        self,
        client: AnalysisClient,
        conversation: Optional[Conversation] = None,
        extractor: Callable = pdf_to_text,
        legacy_score_bands: bool = False,
    ):
        self.client = client
        self.conversation = conversation if conversation is not None else Conversation()
        self.extractor = extractor
        self.legacy_score_bands = legacy_score_bands
        self.resume = ""
        self.job_description = ""
        self.loading = False
        self._pending: Optional[PendingSubmission] = None

    @property
    def can_submit(self) -> bool:
        return not self.loading and bool(self.resume.strip()) and bool(self.job_description.strip())

    @property
    def pending(self) -> Optional[PendingSubmission]:
        return self._pending

    # ---- phase 1 ----
    def begin(self) -> Optional[PendingSubmission]:
        if not self.can_submit:
            return None
        self.conversation.add("user", USER_REQUEST_MESSAGE, "text")
        self.loading = True
        self._pending = PendingSubmission(resume=self.resume, job_description=self.job_description)
        logger.info(
            "Submission started (resume %d chars, JD %d chars)",
            len(self.resume), len(self.job_description),
        )
        return self._pending

    # ---- phase 2 ----
    def resolve(self, pending: PendingSubmission, text: Optional[str]) -> MatchResult:
        self._check_in_flight(pending)
        try:
            content = text if text and text.strip() else EMPTY_ANALYSIS_MESSAGE
            self.conversation.add("ai", content, "analysis")

            match = calculate_match_score(pending.resume, pending.job_description)
            self.conversation.add("ai", select_score_feedback(match, self.legacy_score_bands), "analysis")
            if not has_email(pending.resume):
                self.conversation.add("ai", MISSING_EMAIL_MESSAGE, "analysis")

            self.resume = ""
            self.job_description = ""
            logger.info("Submission resolved: score=%s matches=%s", match.score, match.matches)
            return match
        finally:
            self._finish()

    def reject(self, pending: PendingSubmission, error: BaseException) -> None:
        self._check_in_flight(pending)
        try:
            self.conversation.add("ai", API_ERROR_MESSAGE, "error")
            logger.error("Submission failed: %s", error)
        finally:
            self._finish()

    def submit(self) -> Optional[MatchResult]:
        """Run a whole submission against the client. Returns None if nothing was sent or it failed."""
        pending = self.begin()
        if pending is None:
            return None
        try:
            prompt = build_analysis_prompt(pending.resume, pending.job_description)
            text = self.client.generate(prompt)
        except Exception as e:
            logger.exception("Analysis request failed")
            self.reject(pending, e)
            return None
        return self.resolve(pending, text)

    def load_resume_pdf(self, data, filename: Optional[str] = None) -> str:
        """
        Replace the resume field with text extracted from a PDF.
        On failure the resume is left untouched and the extraction error propagates.
        """
        if self._pending is not None:
            raise RuntimeError("Cannot load a resume while an analysis is in progress")
        self.loading = True
        try:
            text = self.extractor(data)
            self.resume = text
            logger.info("Extracted %d chars from %s", len(text), filename or "uploaded PDF")
            return text
        finally:
            self.loading = False

    def _check_in_flight(self, pending: PendingSubmission) -> None:
        if self._pending is None or pending is not self._pending:
            raise RuntimeError("Submission is not in flight")

    def _finish(self) -> None:
        self._pending = None
        self.loading = False
