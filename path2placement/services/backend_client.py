"""
Path2Placement Backend Client

The backend owns auth, the placement model, college search/insights
and resume analysis. This client only sends requests and hands back
parsed JSON.

ERRORS:
Every failure is raised as a GatewayError subclass (see core/errors.py):
- requests exceptions / unreadable body -> TransportError
- 401 -> AuthenticationError, 404 -> NotFoundError, 5xx -> ServerError
Nothing is retried.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from path2placement.core.config import get_settings
from path2placement.core.errors import GatewayError, TransportError, error_for_status

logger = logging.getLogger(__name__)


def _error_message(response: requests.Response) -> Optional[str]:
    """Backend errors come as {"error": ...}, {"message": ...} or {"detail": ...}."""
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    for key in ("error", "message", "detail"):
        if isinstance(body.get(key), str) and body[key].strip():
            return body[key]
    return None


class BackendClient:
    """
    Wrapper for the Path2Placement REST API.

    Args:
        base_url: API root, e.g. https://path2placement-backend.onrender.com/api
        timeout: Seconds per request
        session: requests.Session (injectable for tests)
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.backend_base_url).rstrip("/")
        self.timeout = timeout or settings.request_timeout_seconds
        self.http = session or requests.Session()

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _request(self, method: str, path: str, token: Optional[str] = None, **kwargs) -> Any:
        """
        Internal method to call the backend.
        Returns parsed JSON body.
        """
        headers = dict(kwargs.pop("headers", None) or {})
        if token:
            headers["Authorization"] = f"Bearer {token}"

        try:
            response = self.http.request(
                method, self._url(path), headers=headers, timeout=self.timeout, **kwargs
            )
        except requests.RequestException as e:
            logger.error("%s %s failed: %s", method, path, e)
            raise TransportError() from e

        if not 200 <= response.status_code < 300:
            message = _error_message(response)
            logger.error("%s %s returned %s: %s", method, path, response.status_code, message)
            raise error_for_status(response.status_code, message)

        try:
            return response.json()
        except ValueError as e:
            logger.error("%s %s returned a non-JSON body", method, path)
            raise TransportError("The server sent an unreadable response.") from e

    # ============================================================
    # AUTH
    # ============================================================

    def login(self, email: str, password: str) -> Dict[str, Any]:
        """POST /auth/login -> {token | session.access_token, user, ...}"""
        return self._request("POST", "/auth/login", json={"email": email, "password": password})

    def register(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/auth/register", json=payload)

    def fetch_profile(self, token: str) -> Dict[str, Any]:
        """GET /auth/profile with the bearer token."""
        data = self._request("GET", "/auth/profile", token=token)
        if not isinstance(data, dict):
            raise GatewayError("Profile response was not an object.", status_code=502)
        return data

    # ============================================================
    # PLACEMENT ANALYSIS
    # ============================================================

    def predict(self, college_name: str) -> Dict[str, Any]:
        """POST /ml/predict -> {college, predictions: {year_label: {...}}}"""
        return self._request("POST", "/ml/predict", json={"collegeName": college_name})

    def college_insights(self, college_name: str) -> Dict[str, Any]:
        return self._request(
            "POST", "/college-insights/insights", json={"collegeName": college_name}
        )

    def find_colleges(self, location: str, course: str, top_n: int) -> List[Dict[str, Any]]:
        data = self._request(
            "POST",
            "/college-finder/finder",
            json={"location": location, "course": course, "topN": top_n},
        )
        return data if isinstance(data, list) else []

    # ============================================================
    # RESUMES
    # ============================================================

    def list_resumes(self, user_id: Any, token: str) -> List[Dict[str, Any]]:
        data = self._request("GET", f"/resume/{user_id}", token=token)
        return data if isinstance(data, list) else []

    def upload_resume(
        self,
        user_id: Any,
        filename: str,
        content: bytes,
        content_type: str,
        token: str,
    ) -> Dict[str, Any]:
        """POST /resume/upload as multipart (fields: resume, user_id)."""
        data = self._request(
            "POST",
            "/resume/upload",
            token=token,
            files={"resume": (filename, content, content_type)},
            data={"user_id": str(user_id)},
        )
        return data if isinstance(data, dict) else {}

    def analyze_resume(self, resume_path: str, job_role: str, token: str) -> Dict[str, Any]:
        """POST /resume-analyzer/resume-analyzer -> {analysis, publicUrl, record}"""
        data = self._request(
            "POST",
            "/resume-analyzer/resume-analyzer",
            token=token,
            json={"resume_path": resume_path, "job_role": job_role},
        )
        return data if isinstance(data, dict) else {}

    def fetch_analyses(self, token: str) -> List[Dict[str, Any]]:
        data = self._request("GET", "/resume-analysis/fetch-analysis", token=token)
        if not isinstance(data, dict):
            return []
        analyses = data.get("analyses")
        return analyses if isinstance(analyses, list) else []

    def test_connection(self) -> bool:
        """Test if the backend answers at all (any HTTP status counts)."""
        try:
            self.http.get(self.base_url, timeout=self.timeout)
            return True
        except requests.RequestException as e:
            logger.warning("Backend connection failed: %s", e)
            return False


# Singleton instance
_backend_client: BackendClient = None


def get_backend_client() -> BackendClient:
    """Get or create backend client (singleton pattern)"""
    global _backend_client
    if _backend_client is None:
        _backend_client = BackendClient()
    return _backend_client
