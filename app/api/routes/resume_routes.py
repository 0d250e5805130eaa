"""
Resume Routes (all require auth)

POST /resumes - Upload a resume (DOCX/PDF/TXT) and analyze it
GET /resumes - List my resumes
GET /resumes/formats - Supported upload formats
GET /resumes/{resume_id} - Get one resume
DELETE /resumes/{resume_id} - Delete a resume and its file
"""

import asyncio
import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, HTTPException, Depends, UploadFile, File, Response
from sqlalchemy.exc import IntegrityError

from app.core.auth import get_current_user
from app.core.errors import (
    AIServiceError, ResumeExtractionError, FOREIGN_KEY_VIOLATION, SESSION_EXPIRED_MESSAGE, pg_error_code
)
from app.services import resume_service
from app.services.document_store import delete_raw_resume, store_raw_resume
from app.services.resume_analysis_service import analyze_resume_text
from app.utils.file_upload import (
    RESUME_SUBDIR, extract_resume_text, get_supported_formats, read_resume_upload,
    remove_stored_file, save_upload
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/resumes", tags=["Resumes"])


@router.post("", status_code=201)
async def upload_resume(
    file: Optional[UploadFile] = File(None),
    user: dict = Depends(get_current_user),
):
    """
    Upload and analyze a resume.

    Flow:
    1. Validate type and size, store under uploads/resumes
    2. Extract text and run the ATS analysis
    3. Insert the resume row; keep the raw text in MongoDB
    Any failure removes the stored file.
    """
    content, filename, ext = await read_resume_upload(file)
    stored_name = save_upload(RESUME_SUBDIR, content, ext)
    loop = asyncio.get_running_loop()

    try:
        resume_text = extract_resume_text(content, filename)
        analysis = await loop.run_in_executor(None, analyze_resume_text, resume_text)
        resume = resume_service.create_resume(user["id"], filename, stored_name, len(content), analysis)
    except (ResumeExtractionError, AIServiceError) as e:
        logger.warning("Resume analysis failed for %s: %s", filename, e)
        remove_stored_file(RESUME_SUBDIR, stored_name)
        raise HTTPException(status_code=400, detail=str(e))
    except IntegrityError as e:
        remove_stored_file(RESUME_SUBDIR, stored_name)
        if pg_error_code(e) == FOREIGN_KEY_VIOLATION:
            raise HTTPException(status_code=401, detail=SESSION_EXPIRED_MESSAGE)
        raise
    except Exception:
        remove_stored_file(RESUME_SUBDIR, stored_name)
        raise

    await loop.run_in_executor(
        None, store_raw_resume, user["id"], str(resume["id"]), resume_text, filename
    )

    return {"resume": resume, "analysis": analysis}


@router.get("")
async def list_resumes(user: dict = Depends(get_current_user)):
    return {"resumes": resume_service.list_resumes(user["id"])}


@router.get("/formats")
async def supported_formats(user: dict = Depends(get_current_user)):
    return get_supported_formats()


@router.get("/{resume_id}")
async def get_resume(resume_id: UUID, user: dict = Depends(get_current_user)):
    resume = resume_service.get_resume(user["id"], str(resume_id))
    if not resume:
        raise HTTPException(status_code=404, detail="Resume not found")
    return {"resume": resume}


@router.delete("/{resume_id}", status_code=204)
async def delete_resume(resume_id: UUID, user: dict = Depends(get_current_user)):
    """Delete the row first, then the file (a missing file is ignored)."""
    stored_name = resume_service.delete_resume(user["id"], str(resume_id))
    if stored_name is None:
        raise HTTPException(status_code=404, detail="Resume not found")

    remove_stored_file(RESUME_SUBDIR, stored_name)
    delete_raw_resume(str(resume_id))
    return Response(status_code=204)
