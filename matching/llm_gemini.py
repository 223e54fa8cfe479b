import logging
from typing import Any, Dict

import requests

from settings import Settings

logger = logging.getLogger(__name__)


class AnalysisError(RuntimeError):
    """The analysis service could not be reached or answered with something unusable."""


class GeminiClient:
    """Minimal client for the Gemini generateContent REST endpoint."""

    def __init__(self, settings: Settings, session: requests.Session = None):
        self.api_key = settings.gemini_api_key
        self.model = settings.model_name
        self.base_url = settings.api_base.rstrip("/")
        self.timeout = settings.request_timeout
        self.http = session or requests

    @property
    def url(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def _call_gemini(self, prompt: str) -> Dict[str, Any]:
        headers = {
            "x-goog-api-key": self.api_key,
            "Content-Type": "application/json",
        }
        payload = {"contents": [{"parts": [{"text": prompt}]}]}

        try:
            response = self.http.post(self.url, headers=headers, json=payload, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise AnalysisError(f"Gemini request failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise AnalysisError("Gemini returned a non-JSON body") from e
        if not isinstance(data, dict):
            raise AnalysisError(f"Unexpected Gemini response type: {type(data).__name__}")
        return data

    def generate(self, prompt: str) -> str:
        """
        Send one prompt and return the generated text.

        Returns "" when the service answered but produced no text (e.g. the
        candidate was blocked); callers decide what to show in that case.
        Raises AnalysisError on transport errors and malformed responses.
        """
        data = self._call_gemini(prompt)
        logger.info("Gemini %s answered (%d chars of prompt)", self.model, len(prompt))
        return extract_text(data)


def extract_text(data: Dict[str, Any]) -> str:
    """Concatenate the text parts of the first candidate."""
    candidates = data.get("candidates") or []
    if not candidates:
        feedback = data.get("promptFeedback")
        if feedback:
            logger.warning("Gemini returned no candidates: %s", feedback)
        return ""

    try:
        parts = (candidates[0].get("content") or {}).get("parts") or []
        return "".join(p.get("text", "") for p in parts if isinstance(p, dict))
    except (AttributeError, KeyError, TypeError) as e:
        raise AnalysisError("Malformed Gemini candidate structure") from e
