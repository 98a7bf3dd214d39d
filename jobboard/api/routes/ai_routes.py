"""
AI Helper Routes

POST /resume-checker - Score an uploaded PDF resume against a job description
POST /chat - Career assistant chat

Pipeline: upload -> text extraction -> prompt -> AI provider -> JSON reply.
Each request is independent; nothing here touches the database.
"""

from fastapi import APIRouter, Depends, File, Form, UploadFile
from typing import Optional

from jobboard.api.deps import get_ai_client
from jobboard.core.errors import ValidationError
from jobboard.core.logging import get_logger
from jobboard.services.ai_client import AIClient
from jobboard.utils.file_upload import extract_resume_text
from jobboard.schemas.schemas import ChatRequest, ChatResponse, Feedback, ErrorResponse

logger = get_logger(__name__)
router = APIRouter(tags=["AI Helpers"])

AI_ERRORS = {500: {"model": ErrorResponse}}


@router.post(
    "/resume-checker",
    responses={200: {"model": Feedback}, **AI_ERRORS},
)
async def resume_checker(
    jobDesc: str = Form(""),
    resume: Optional[UploadFile] = File(None),
    ai: AIClient = Depends(get_ai_client),
):
    """
    ATS check of a resume.

    Both fields are optional: without a file the resume text is empty, and
    the job description defaults to "". Replies the model gets wrong come
    back as a zero-score feedback explaining why.
    """
    resume_text = await extract_resume_text(resume)
    ai.ensure_configured()

    feedback = await ai.analyze_resume(resume_text, jobDesc)
    logger.info(f"Resume check done (resume_chars={len(resume_text)}, score={feedback.get('ats_score')})")
    return feedback


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, **AI_ERRORS},
)
async def chat(body: Optional[ChatRequest] = None, ai: AIClient = Depends(get_ai_client)):
    """Reply to the latest message given the prior conversation."""
    body = body or ChatRequest()
    history = body.history or []
    if not body.message and not history:
        raise ValidationError("message is required")
    ai.ensure_configured()

    reply = await ai.chat(body.message, history)
    return ChatResponse(reply=reply)
