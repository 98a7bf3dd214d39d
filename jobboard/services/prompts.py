"""
Prompt templates for the AI helpers.

Both builders are pure string functions; nothing here is sanitised beyond
interpolation, so empty resume/job description text is allowed.
"""

from typing import Iterable, Optional

from jobboard.schemas.schemas import ChatTurn


RESUME_ANALYSIS_TEMPLATE = """
You are an ATS (Applicant Tracking System) expert.
Analyze this resume for ATS-friendliness compared to the given job description.

Resume: {resume_text}
Job Description: {job_description}

Respond ONLY with valid JSON in the following format:
{{
  "ats_score": number (0-100),
  "ats_friendliness": "Excellent | Good | Average | Poor",
  "strengths": [list of strengths],
  "weaknesses": [list of weaknesses],
  "recommendations": [list of actionable recommendations]
}}
"""


def build_resume_prompt(resume_text: str, job_description: str) -> str:
    """Embed resume and job description verbatim in the fixed ATS template."""
    return RESUME_ANALYSIS_TEMPLATE.format(
        resume_text=resume_text or "",
        job_description=job_description or "",
    )


def _role_label(role: str) -> str:
    return "User" if role == "user" else "Assistant"


def build_chat_prompt(message: Optional[str], history: Iterable[ChatTurn] = ()) -> str:
    """
    Render the conversation as a plain transcript ending on "Assistant:".

    History turns come first, in order; the new message is appended only
    when it is non-empty.

    Example:
        history=[user "hi", assistant "hello"], message="how are you"
        -> "User: hi\\nAssistant: hello\\nUser: how are you\\nAssistant:"
    """
    history = list(history or [])
    if not history:
        return f"User: {message or ''}\nAssistant:"

    prompt = "\n".join(f"{_role_label(turn.role)}: {turn.content}" for turn in history)
    if message:
        prompt += f"\nUser: {message}\nAssistant:"
    return prompt
