"""
File Upload Utility - validate, store and extract text from uploads.

Resumes:
- Word (.docx) using python-docx
- PDF (.pdf) using PyPDF2
- Plain Text (.txt)
Max resume size: 5MB

Interview answer audio:
- webm / mpeg / mp3 / wav / ogg / mp4
Max audio size: 25MB
"""

import io
import logging
import time
import uuid
from pathlib import Path
from typing import Optional, Tuple

from docx import Document
from fastapi import HTTPException, UploadFile
from PyPDF2 import PdfReader
from PyPDF2.errors import PdfReadError

from app.core.config import get_settings
from app.core.errors import ResumeExtractionError

logger = logging.getLogger(__name__)

settings = get_settings()

MAX_RESUME_SIZE_MB = 5
MAX_RESUME_SIZE_BYTES = MAX_RESUME_SIZE_MB * 1024 * 1024
RESUME_EXTENSIONS = {'.pdf', '.docx', '.txt'}
MIN_RESUME_TEXT_LENGTH = 50

MAX_AUDIO_SIZE_MB = 25
MAX_AUDIO_SIZE_BYTES = MAX_AUDIO_SIZE_MB * 1024 * 1024
AUDIO_MIME_TYPES = {
    "audio/webm",
    "audio/mpeg",
    "audio/mp3",
    "audio/wav",
    "audio/x-wav",
    "audio/wave",
    "audio/ogg",
    "audio/mp4",
}
DEFAULT_AUDIO_EXTENSION = ".webm"

RESUME_SUBDIR = "resumes"
AUDIO_SUBDIR = "interview-audio"


def get_file_extension(filename: str) -> str:
    """Get lowercase file extension."""
    if not filename or '.' not in filename:
        return ''
    return '.' + filename.rsplit('.', 1)[1].lower()


def upload_dir(subdir: str) -> Path:
    """Absolute upload directory for a kind of file, created on demand."""
    path = Path(settings.upload_root).resolve() / subdir
    path.mkdir(parents=True, exist_ok=True)
    return path


def generate_stored_name(extension: str) -> str:
    """<epoch-ms>-<uuid><ext>, never derived from the client filename."""
    return f"{int(time.time() * 1000)}-{uuid.uuid4()}{extension}"


def remove_stored_file(subdir: str, stored_name: str) -> None:
    """Delete an uploaded file; a missing file is not an error."""
    path = (upload_dir(subdir) / stored_name).resolve()
    if path.parent != upload_dir(subdir):
        logger.warning("Refusing to delete file outside upload dir: %s", stored_name)
        return
    try:
        path.unlink()
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.error("Failed to clean up file %s: %s", path, e)


# ============================================================
# RESUMES
# ============================================================

async def read_resume_upload(file: Optional[UploadFile]) -> Tuple[bytes, str, str]:
    """
    Validate an uploaded resume and read its bytes.

    Returns:
        Tuple of (content, original_filename, extension)

    Raises:
        HTTPException on validation errors
    """
    if file is None or not file.filename:
        raise HTTPException(status_code=400, detail="Resume file is required")

    ext = get_file_extension(file.filename)
    if ext not in RESUME_EXTENSIONS:
        raise HTTPException(
            status_code=400,
            detail="Unsupported file type. Allowed: DOCX, PDF, TXT"
        )

    content = await file.read()

    if len(content) > MAX_RESUME_SIZE_BYTES:
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Maximum size: {MAX_RESUME_SIZE_MB}MB"
        )

    return content, file.filename, ext


def save_upload(subdir: str, content: bytes, extension: str) -> str:
    """Write bytes under the upload dir and return the stored file name."""
    stored_name = generate_stored_name(extension)
    (upload_dir(subdir) / stored_name).write_bytes(content)
    return stored_name


def extract_resume_text(content: bytes, filename: str) -> str:
    """
    Extract text from resume bytes.

    Raises:
        ResumeExtractionError when the file is empty, unreadable or too short
    """
    if not content:
        raise ResumeExtractionError("The uploaded file is empty.")

    ext = get_file_extension(filename)
    if ext == '.docx':
        text = extract_from_docx(content)
    elif ext == '.pdf':
        text = extract_from_pdf(content)
    elif ext == '.txt':
        text = extract_from_txt(content)
    else:
        raise ResumeExtractionError("Unsupported file format. Please upload a DOCX, PDF or TXT file.")

    if not text.strip():
        raise ResumeExtractionError(
            "No extractable text found in the file. The document might be empty, corrupted, or image-only."
        )

    if len(text.strip()) < MIN_RESUME_TEXT_LENGTH:
        raise ResumeExtractionError(
            "The extracted text is too short. Please ensure your resume contains readable text content."
        )

    logger.info("Extracted %d characters from %s", len(text), filename)
    return text


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
    except (PdfReadError, ValueError, KeyError) as e:
        raise ResumeExtractionError(f"Failed to extract text from PDF file: {e}") from e


def extract_from_docx(content: bytes) -> str:
    """Extract text from DOCX bytes."""
    try:
        doc = Document(io.BytesIO(content))
    except Exception as e:
        # python-docx raises zipfile/lxml/KeyError variants for bad packages
        raise ResumeExtractionError(
            f"Failed to extract text from DOCX file: {e}. Please ensure it is a valid, unencrypted document."
        ) from e

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


def extract_from_txt(content: bytes) -> str:
    """Extract text from TXT bytes."""
    for encoding in ['utf-8', 'latin-1', 'cp1252']:
        try:
            return content.decode(encoding)
        except UnicodeDecodeError:
            continue
    raise ResumeExtractionError("Could not decode text file")


# ============================================================
# INTERVIEW AUDIO
# ============================================================

def normalize_mime_type(content_type: Optional[str]) -> str:
    """'audio/webm;codecs=opus' -> 'audio/webm'."""
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


async def save_audio_upload(file: UploadFile) -> str:
    """
    Validate and store an interview answer recording.

    Returns:
        Stored file name under the interview-audio upload dir
    """
    if normalize_mime_type(file.content_type) not in AUDIO_MIME_TYPES:
        raise HTTPException(status_code=400, detail="Unsupported audio format")

    content = await file.read()
    if len(content) > MAX_AUDIO_SIZE_BYTES:
        raise HTTPException(
            status_code=413,
            detail=f"Audio file too large. Maximum size: {MAX_AUDIO_SIZE_MB}MB"
        )

    ext = get_file_extension(file.filename or "") or DEFAULT_AUDIO_EXTENSION
    return save_upload(AUDIO_SUBDIR, content, ext)


def get_supported_formats() -> dict:
    """Get info about supported resume file formats."""
    return {
        "supported_formats": [
            {"extension": ".docx", "name": "Word Document"},
            {"extension": ".pdf", "name": "PDF"},
            {"extension": ".txt", "name": "Plain Text"}
        ],
        "max_size_mb": MAX_RESUME_SIZE_MB
    }
