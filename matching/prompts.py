ANALYSIS_TEMPLATE = """You are an expert Career Consultant.

TASK:
Analyze the following Resume against the Job Description (JD).

OUTPUT FORMAT:
Return a clean, structured response using Markdown headers (#, ##) and bullet points.
Include these 4 sections:
1. **Missing Critical Skills** (What is in JD but not in Resume?)
2. **Strong Matches** (What matches well?)
3. **Resume Suggestions** (Specific actionable tips)
4. **Interview Prep** (3 technical questions based on the gaps)

RESUME:
{resume}

JOB DESCRIPTION:
{jd}
"""


def build_analysis_prompt(resume: str, jd: str) -> str:
    """Embed the raw resume and JD text, unescaped, into the analysis template."""
    if not resume.strip() or not jd.strip():
        raise ValueError("resume and job description must both be non-empty")
    return ANALYSIS_TEMPLATE.format(resume=resume, jd=jd)
