"""
File Upload Utility - check resume files before sending them to the backend.

Supported formats:
- PDF (.pdf)
- Word (.docx)
- Plain Text (.txt)

Max file size: settings.max_resume_size_mb (5MB by default)
"""

from typing import Tuple
from fastapi import UploadFile, HTTPException

from path2placement.core.config import get_settings

ALLOWED_EXTENSIONS = {
    '.pdf': "application/pdf",
    '.docx': "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    '.txt': "text/plain",
}


def get_file_extension(filename: str) -> str:
    """Get lowercase file extension."""
    if '.' not in filename:
        return ''
    return '.' + filename.rsplit('.', 1)[1].lower()


def max_file_size_bytes() -> int:
    return get_settings().max_resume_size_mb * 1024 * 1024


def validate_resume_file(filename: str, size: int) -> str:
    """
    Check name and size of a resume.

    Returns:
        The content type to upload with

    Raises:
        HTTPException 400 (no name / bad type / empty) or 413 (too large)
    """
    if not filename:
        raise HTTPException(status_code=400, detail="No filename provided")

    ext = get_file_extension(filename)
    if ext not in ALLOWED_EXTENSIONS:
        raise HTTPException(
            status_code=400,
            detail=f"Unsupported file type '{ext}'. Allowed: PDF, DOCX, TXT"
        )

    if size == 0:
        raise HTTPException(status_code=400, detail="File is empty")

    if size > max_file_size_bytes():
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Maximum size: {get_settings().max_resume_size_mb}MB"
        )

    return ALLOWED_EXTENSIONS[ext]


async def read_resume_upload(file: UploadFile) -> Tuple[bytes, str, str]:
    """
    Read and validate an uploaded resume.

    Returns:
        Tuple of (content, filename, content_type)
    """
    content = await file.read()
    content_type = validate_resume_file(file.filename or "", len(content))
    return content, file.filename, content_type


def get_supported_formats() -> dict:
    """Get info about supported file formats."""
    return {
        "supported_formats": [
            {"extension": ".pdf", "name": "PDF"},
            {"extension": ".docx", "name": "Word Document"},
            {"extension": ".txt", "name": "Plain Text"}
        ],
        "max_size_mb": get_settings().max_resume_size_mb
    }
