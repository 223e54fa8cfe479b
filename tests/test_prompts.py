import pytest

from matching.prompts import build_analysis_prompt


def test_prompt_contains_sections_and_inputs():
    prompt = build_analysis_prompt("My resume {with braces}", "The JD")
    assert "expert Career Consultant" in prompt
    for section in ("Missing Critical Skills", "Strong Matches", "Resume Suggestions", "Interview Prep"):
        assert section in prompt
    assert "3 technical questions" in prompt
    assert "Markdown headers" in prompt
    assert "RESUME:\nMy resume {with braces}\n" in prompt
    assert prompt.rstrip().endswith("JOB DESCRIPTION:\nThe JD")


def test_prompt_is_deterministic():
    assert build_analysis_prompt("r", "j") == build_analysis_prompt("r", "j")


@pytest.mark.parametrize("resume, jd", [("", "jd"), ("resume", "   ")])
def test_blank_inputs_rejected(resume, jd):
    with pytest.raises(ValueError):
        build_analysis_prompt(resume, jd)
