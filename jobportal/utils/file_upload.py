"""
File Upload Utility - Validate resume uploads and extract their text.

Supported formats:
- PDF (.pdf) using PyPDF2
- Word (.docx) using python-docx
- Legacy Word (.doc), stored by name only

Extracted text is optional: a resume that cannot be read is still accepted,
it just has no text for AI feedback.
"""

import io
from typing import Tuple
from fastapi import UploadFile, HTTPException
from PyPDF2 import PdfReader
from docx import Document

from jobportal.core.log import get_logger

logger = get_logger(__name__)

ALLOWED_EXTENSIONS = {'.pdf', '.docx', '.doc'}
MAX_RESUME_TEXT_CHARS = 20000


def get_file_extension(filename: str) -> str:
    """Get lowercase file extension."""
    if '.' not in filename:
        return ''
    return '.' + filename.rsplit('.', 1)[1].lower()


async def read_resume_upload(file: UploadFile, max_size_mb: int) -> Tuple[str, str]:
    """
    Validate an uploaded resume and extract its text.

    Args:
        file: FastAPI UploadFile
        max_size_mb: upload size limit

    Returns:
        Tuple of (extracted_text, filename); text is "" when unreadable

    Raises:
        HTTPException on validation errors
    """
    if not file.filename:
        raise HTTPException(status_code=400, detail="No filename provided")

    ext = get_file_extension(file.filename)
    if ext not in ALLOWED_EXTENSIONS:
        raise HTTPException(status_code=400, detail="Please upload a PDF or DOCX file.")

    content = await file.read()

    if len(content) > max_size_mb * 1024 * 1024:
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Maximum size: {max_size_mb}MB"
        )

    if ext == '.pdf':
        text = extract_from_pdf(content)
    elif ext == '.docx':
        text = extract_from_docx(content)
    else:
        text = ""

    return text.strip()[:MAX_RESUME_TEXT_CHARS], file.filename


def extract_from_pdf(content: bytes) -> str:
    """Extract text from PDF bytes."""
    try:
        reader = PdfReader(io.BytesIO(content))
        text_parts = []
        for page in reader.pages:
            page_text = page.extract_text()
            if page_text:
                text_parts.append(page_text)
        return '\n'.join(text_parts)
    except Exception as e:
        logger.warning("Could not read PDF resume: %s", e)
        return ""


def extract_from_docx(content: bytes) -> str:
    """Extract text from DOCX bytes."""
    try:
        doc = Document(io.BytesIO(content))
        text_parts = []

        # Extract paragraphs
        for para in doc.paragraphs:
            if para.text.strip():
                text_parts.append(para.text)

        # Extract tables
        for table in doc.tables:
            for row in table.rows:
                row_text = [cell.text.strip() for cell in row.cells if cell.text.strip()]
                if row_text:
                    text_parts.append(' | '.join(row_text))

        return '\n'.join(text_parts)
    except Exception as e:
        logger.warning("Could not read DOCX resume: %s", e)
        return ""
