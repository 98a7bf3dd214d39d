"""
File Upload Utility - Extract text from resume uploads.

Supported format: PDF (.pdf) using PyPDF2.

A missing upload is legal: the resume checker then scores an empty resume.
An upload that cannot be read or parsed raises ExtractionError, which the
API reports as a 500 with the reader's message as details.
"""

import io
from typing import Optional
from fastapi import UploadFile
from PyPDF2 import PdfReader
from starlette.concurrency import run_in_threadpool

from jobboard.core.errors import ExtractionError
from jobboard.core.logging import get_logger

logger = get_logger(__name__)


def has_upload(file: Optional[UploadFile]) -> bool:
    """Browsers send an empty, unnamed part when no file was picked."""
    return file is not None and bool(file.filename)


def extract_from_pdf(content: bytes) -> str:
    """Extract text from PDF bytes. Pages are joined with newlines."""
    try:
        reader = PdfReader(io.BytesIO(content))
        text_parts = []
        for page in reader.pages:
            page_text = page.extract_text()
            if page_text:
                text_parts.append(page_text)
        return '\n'.join(text_parts)
    except Exception as e:
        raise ExtractionError(details=f"Error reading PDF: {str(e)}") from e


async def extract_resume_text(file: Optional[UploadFile]) -> str:
    """
    Extract text from an uploaded resume.

    Args:
        file: FastAPI UploadFile, or None when no file was sent

    Returns:
        Extracted text ("" when there is no upload)

    Raises:
        ExtractionError when the upload cannot be read or is not a PDF
    """
    if not has_upload(file):
        return ""

    try:
        try:
            content = await file.read()
        except OSError as e:
            raise ExtractionError(details=f"Resume file not readable: {str(e)}") from e

        # PDF parsing is CPU-bound; keep it off the event loop
        text = await run_in_threadpool(extract_from_pdf, content)
    finally:
        await file.close()

    logger.info(f"Extracted {len(text)} characters from {file.filename}")
    return text
