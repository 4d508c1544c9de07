"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from typing import Optional, List, Any, Dict

from path2placement.models.series import YearPoint


# ============================================================
# AUTH SCHEMAS
# ============================================================

class LoginRequest(BaseModel):
    email: EmailStr
    password: str

class RegisterRequest(BaseModel):
    """Field names follow the backend's camelCase; snake_case also accepted."""
    model_config = ConfigDict(populate_by_name=True)

    full_name: str = Field(..., min_length=2, max_length=100, alias="fullName")
    email: EmailStr
    phone: Optional[str] = None
    password: str = Field(..., min_length=6)
    confirm_password: str = Field(..., alias="confirmPassword")
    agreed: bool = False


# ============================================================
# SESSION SCHEMAS
# ============================================================

class SessionResponse(BaseModel):
    authenticated: bool
    has_profile: bool
    loading: bool = False
    display_name: str
    profile: Optional[Any] = None


# ============================================================
# DASHBOARD SCHEMAS
# ============================================================

class DashboardKpis(BaseModel):
    total_students: float
    placed_students: float
    placement_percent: float
    avg_median_salary: float

class DashboardResponse(BaseModel):
    years: List[Any]
    colleges: List[Any]
    selected_year: str
    selected_college: str
    row_count: int
    kpis: DashboardKpis
    college_chart: List[Dict[str, Any]] = []
    department_chart: List[Dict[str, Any]] = []
    year_trend: List[Dict[str, Any]] = []
    scatter: List[Dict[str, Any]] = []
    message: Optional[str] = None


# ============================================================
# PLACEMENT ANALYSIS SCHEMAS
# ============================================================

class CollegeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    college_name: str = Field(..., min_length=1, alias="collegeName")

class FinderRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    location: str = "Karnataka"
    course: str = "CSE"
    top_n: int = Field(5, ge=1, le=20, alias="topN")

class PredictionResponse(BaseModel):
    college: str
    series: List[YearPoint] = []
    message: Optional[str] = None

class FinderCollege(BaseModel):
    details: Dict[str, Any]
    placement_trend: List[Dict[str, Any]] = []

class FinderResponse(BaseModel):
    colleges: List[FinderCollege] = []
    message: Optional[str] = None

class InsightsResponse(BaseModel):
    college: str
    college_image: Optional[str] = None
    series: List[YearPoint] = []
    top_recruiters: List[str] = []
    message: Optional[str] = None


# ============================================================
# RESUME SCHEMAS
# ============================================================

class AnalyzeRequest(BaseModel):
    resume_path: str = Field(..., min_length=1)
    job_role: str = Field(..., min_length=1)

class AnalysisRecord(BaseModel):
    id: Optional[Any] = None
    parsed_result: Dict[str, Any] = {}
    score: float = 0.0
    job_role: str
    resume_path: str
    created_at: str

class AnalyzeResponse(BaseModel):
    analysis: Dict[str, Any]
    skill_chart: List[Dict[str, Any]] = []
    record: Optional[AnalysisRecord] = None

class HistoryResponse(BaseModel):
    analyses: List[AnalysisRecord] = []
    average_score: float = 0.0
    score_trend: List[Dict[str, Any]] = []
    message: Optional[str] = None

class ResumeListResponse(BaseModel):
    resumes: List[Dict[str, Any]] = []
    total: int = 0

class ResumeUploadResponse(BaseModel):
    success: bool
    message: str
    resume: Dict[str, Any] = {}


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class MessageResponse(BaseModel):
    message: str
    success: bool = True

class ErrorResponse(BaseModel):
    detail: str
