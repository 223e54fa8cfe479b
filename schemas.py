from pydantic import BaseModel, ConfigDict
from typing import List, Literal, Optional


Role = Literal["user", "ai"]
Kind = Literal["text", "analysis", "error"]


# One entry of the chat transcript
class Message(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Role
    content: str
    kind: Kind = "text"


# Keyword overlap between a resume and a job description
class MatchResult(BaseModel):
    score: int
    matches: List[str] = []
    keyword_count: int = 0


# Request body for /analyze
class AnalyzeRequest(BaseModel):
    resume: str
    job_description: str


class AnalyzeResponse(BaseModel):
    messages: List[Message]
    match: Optional[MatchResult] = None
    model: str


class ExtractResponse(BaseModel):
    filename: Optional[str] = None
    text: str
    characters: int
