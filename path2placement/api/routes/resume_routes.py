"""
Resume Routes

GET /resume - List my uploaded resumes
GET /resume/formats - Supported formats and size limit
POST /resume/upload - Upload resume (PDF/DOCX/TXT)
POST /resume/analyze - Analyze a resume against a job role
GET /resume/history - Past analyses with average score and trend
"""

from fastapi import APIRouter, Depends, UploadFile, File

from path2placement.core.auth import get_current_user, get_current_token, gateway_http_error
from path2placement.core.errors import GatewayError
from path2placement.services.resume_service import ResumeService, get_resume_service
from path2placement.utils.file_upload import read_resume_upload, get_supported_formats
from path2placement.schemas.schemas import (
    AnalyzeRequest, AnalyzeResponse, HistoryResponse, ResumeListResponse, ResumeUploadResponse
)

router = APIRouter(prefix="/resume", tags=["Resume Analyzer"])


@router.get("", response_model=ResumeListResponse)
async def list_resumes(
    user: dict = Depends(get_current_user),
    service: ResumeService = Depends(get_resume_service)
):
    """Resumes uploaded by the logged-in user (first one is the default)."""
    try:
        resumes = service.list_resumes(user["user_id"], user["token"])
    except GatewayError as e:
        raise gateway_http_error(e, "Resume list")

    return ResumeListResponse(resumes=resumes, total=len(resumes))


@router.get("/formats")
async def supported_formats():
    """Get supported resume file formats."""
    return get_supported_formats()


@router.post("/upload", response_model=ResumeUploadResponse)
async def upload_resume(
    file: UploadFile = File(...),
    user: dict = Depends(get_current_user),
    service: ResumeService = Depends(get_resume_service)
):
    """
    Upload a resume.

    Type and size are checked here before the file is sent.
    """
    content, filename, content_type = await read_resume_upload(file)

    try:
        uploaded = service.upload(user["user_id"], filename, content, content_type, user["token"])
    except GatewayError as e:
        raise gateway_http_error(e, "Resume upload")

    return ResumeUploadResponse(
        success=True,
        message="Resume uploaded successfully!",
        resume=uploaded
    )


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze_resume(
    request: AnalyzeRequest,
    token: str = Depends(get_current_token),
    service: ResumeService = Depends(get_resume_service)
):
    """Score a resume against a job role; lists matched skills and gaps."""
    try:
        result = service.analyze(request.resume_path, request.job_role, token)
    except GatewayError as e:
        raise gateway_http_error(e, "Resume analysis")

    return AnalyzeResponse(**result)


@router.get("/history", response_model=HistoryResponse)
async def analysis_history(
    token: str = Depends(get_current_token),
    service: ResumeService = Depends(get_resume_service)
):
    """All past analyses, newest first."""
    try:
        result = service.history(token)
    except GatewayError as e:
        raise gateway_http_error(e, "Analysis history")

    return HistoryResponse(**result)
