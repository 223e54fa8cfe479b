import re
import math
from typing import List

from schemas import MatchResult

WORD_RE = re.compile(r"\w+")
MIN_KEYWORD_LENGTH = 5
MAX_REPORTED_MATCHES = 5

# Band thresholds, expressed as fractions of the important keywords matched
LOW_BAND_MAX = 0.4
MODERATE_BAND_MAX = 0.6

MODERATE_MATCH_MESSAGE = (
    "You have limited number of keywords match in your cv with your job description , "
    "consider adding more similar words so the evaluation pannel understands that you went "
    "through the JD carefully"
)
LOW_MATCH_MESSAGE = (
    "You have very few number of keywords match in your cv with your job description , "
    "Please add more similar words so the evaluation pannel understands that you went "
    "through the JD carefully"
)
GOOD_MATCH_MESSAGE = "You have good amount of keywords match in your cv with your job description."


def tokenize(text: str) -> List[str]:
    return WORD_RE.findall(text.lower())


def important_keywords(jd: str) -> List[str]:
    """Distinct JD words longer than four characters, in first-seen order."""
    return list(dict.fromkeys(w for w in tokenize(jd) if len(w) >= MIN_KEYWORD_LENGTH))


def calculate_match_score(resume: str, jd: str) -> MatchResult:
    resume_words = set(tokenize(resume))
    keywords = important_keywords(jd)
    matches = [w for w in keywords if w in resume_words]

    # JD with no qualifying words scores 0 rather than dividing by zero
    if not keywords:
        return MatchResult(score=0, matches=[], keyword_count=0)

    # half-up rounding, so 12.5 -> 13
    score = int(math.floor(len(matches) / len(keywords) * 100 + 0.5))
    return MatchResult(score=score, matches=matches[:MAX_REPORTED_MATCHES], keyword_count=len(keywords))


def select_score_feedback(result: MatchResult, legacy_bands: bool = False) -> str:
    """
    Pick exactly one of the moderate / low / good feedback messages.

    The score is a percentage; by default it is scaled to 0-1 before it is
    compared with the band thresholds. With legacy_bands the raw percentage is
    compared with the same 0-1 thresholds, which reproduces the behaviour of the
    first release of the assistant: every non-zero score lands in the good band.
    """
    value = result.score if legacy_bands else result.score / 100
    if LOW_BAND_MAX < value < MODERATE_BAND_MAX:
        return MODERATE_MATCH_MESSAGE
    if value <= LOW_BAND_MAX:
        return LOW_MATCH_MESSAGE
    return GOOD_MATCH_MESSAGE
